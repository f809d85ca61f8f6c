"""Shared test fixtures."""

from __future__ import annotations

import pytest

from shipgrid.models.types import StructureCatalog


# Four ships: two player-owned, one NPC raider, one derelict wreck that still
# carries a Player settings node.
SAMPLE_SAVE_XML = '''<?xml version="1.0" encoding="UTF-8"?>
<game>
  <ships>
    <ship sid="1" sname="Small Vessel" sx="27" sy="27">
      <settings owner="Player"/>
      <e x="5" y="5" m="1148"/>
      <e x="6" y="5" m="1148"/>
      <e x="7" y="5" m="1146"/>
      <e x="5" y="6" m="1147"/>
      <e x="6" y="6" m="1148"/>
      <e x="7" y="6" m="1148"/>
      <e x="8" y="8" m="-2"/>
      <e x="6" y="6" m="632" rot="R0"/>
      <e x="11" y="10" m="2131" rot="R90">
        <l ind="0" x="11" y="10"/>
        <l ind="1" x="10" y="10"/>
        <l ind="2" x="11" y="11"/>
        <l ind="3" x="10" y="11"/>
      </e>
      <e x="10" y="11" m="2131" rot="R90">
        <l ind="0" x="10" y="11"/>
        <l ind="1" x="11" y="11"/>
        <l ind="2" x="10" y="10"/>
        <l ind="3" x="11" y="10"/>
      </e>
      <e x="3" y="3" m="99999"/>
      <e x="20" y="20" m="77777">
        <l ind="0" x="20" y="20"/>
        <l ind="1" x="21" y="20"/>
      </e>
    </ship>
    <ship sid="2" sname="Large Cruiser" sx="56" sy="56">
      <settings owner="Player"/>
      <e x="0" y="0" m="1148"/>
    </ship>
    <ship sid="3" sname="Pirate Raider" sx="27" sy="27">
      <settings owner="Pirates"/>
      <e x="1" y="1" m="1148"/>
    </ship>
    <ship sid="4" sname="Abandoned Wreck" sx="27" sy="27" derelict="true">
      <settings owner="Player"/>
    </ship>
  </ships>
</game>'''

HUGE_SHIP_XML = '''<game><ships>
  <ship sid="9" sname="Station" sx="120" sy="90"><settings owner="Player"/></ship>
</ships></game>'''

MOCK_CATALOG_DATA = {
    "categories": [
        {
            "id": "storage",
            "name": "Storage",
            "color": "#8844cc",
            "defaultLayer": "Furniture",
            "items": [
                {
                    "id": "mid_632",
                    "name": "Storage Container",
                    "size": [1, 1],
                    "color": "#8844cc",
                    "categoryId": "storage",
                },
            ],
        },
        {
            "id": "power",
            "name": "Power",
            "color": "#cc4444",
            "defaultLayer": "Systems",
            "items": [
                {
                    "id": "mid_2131",
                    "name": "Power Generator",
                    "size": [2, 2],
                    "color": "#cc4444",
                    "categoryId": "power",
                },
            ],
        },
    ],
}


@pytest.fixture
def sample_save_xml() -> str:
    return SAMPLE_SAVE_XML


@pytest.fixture
def mock_catalog() -> StructureCatalog:
    return StructureCatalog.model_validate(MOCK_CATALOG_DATA)
