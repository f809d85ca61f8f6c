"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from shipgrid.main import app
from tests.conftest import MOCK_CATALOG_DATA, SAMPLE_SAVE_XML


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["presets_available"] == 8


def test_presets():
    response = client.get("/api/presets")
    assert response.status_code == 200
    assert [p["label"] for p in response.json()][:2] == ["1x1", "2x1"]


def test_list_ships():
    response = client.post("/api/saves/ships", json={"xml": SAMPLE_SAVE_XML})
    assert response.status_code == 200
    data = response.json()
    assert len(data["all_ships"]) == 4
    assert [s["sid"] for s in data["player_ships"]] == ["1", "2"]


def test_list_ships_malformed_xml():
    response = client.post("/api/saves/ships", json={"xml": "<ships><ship>"})
    assert response.status_code == 400
    assert "Invalid XML" in response.json()["detail"]


def test_convert_with_posted_catalog():
    response = client.post(
        "/api/saves/convert",
        json={"xml": SAMPLE_SAVE_XML, "sid": "1", "catalog": MOCK_CATALOG_DATA},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["preset"]["label"] == "1x1"
    assert data["stats"]["structures_created"] == 2
    assert {s["structure_id"] for s in data["structures"]} == {"mid_632", "mid_2131"}


def test_convert_without_catalog_treats_structures_as_unknown():
    response = client.post("/api/saves/convert", json={"xml": SAMPLE_SAVE_XML, "sid": "1"})
    assert response.status_code == 200
    data = response.json()
    assert data["structures"] == []
    assert data["stats"]["unknown_type_codes"] == 4
    assert data["warnings"][0]["type"] == "unknown_structure"


def test_convert_unknown_ship():
    response = client.post("/api/saves/convert", json={"xml": SAMPLE_SAVE_XML, "sid": "404"})
    assert response.status_code == 404


def test_convert_malformed_xml():
    response = client.post("/api/saves/convert", json={"xml": "nope <", "sid": "1"})
    assert response.status_code == 400


def test_hull_perimeter():
    tiles = [{"x": x, "y": y} for x in range(3) for y in range(3)]
    response = client.post(
        "/api/hull/perimeter",
        json={"tiles": tiles, "grid_width": 4, "grid_height": 3},
    )
    assert response.status_code == 200
    data = response.json()
    assert len(data["edges"]) == 12
    assert data["inner_tiles"] == [{"x": 1, "y": 1}]
    assert data["outline_length"] == 12.0
    assert data["ascii_preview"] == "+++.\n+#+.\n+++."


def test_hull_perimeter_empty():
    response = client.post("/api/hull/perimeter", json={"tiles": []})
    assert response.status_code == 200
    data = response.json()
    assert data["edges"] == []
    assert data["ascii_preview"] is None


def test_list_ships_oversized_number():
    xml = f'<g><ships><ship sid="1" sname="A" sx="{"9" * 5000}" sy="27"/></ships></g>'
    response = client.post("/api/saves/ships", json={"xml": xml})
    assert response.status_code == 200
    assert response.json()["all_ships"] == []


def test_hull_perimeter_preview_size_capped():
    response = client.post(
        "/api/hull/perimeter",
        json={"tiles": [{"x": 0, "y": 0}], "grid_width": 100000, "grid_height": 100000},
    )
    assert response.status_code == 422


def test_hull_perimeter_preview_at_cap():
    response = client.post(
        "/api/hull/perimeter",
        json={"tiles": [{"x": 0, "y": 0}], "grid_width": 81, "grid_height": 81},
    )
    assert response.status_code == 200
    assert len(response.json()["ascii_preview"].splitlines()) == 81
