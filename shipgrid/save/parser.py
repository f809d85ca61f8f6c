"""Save archive parser — facade over xml.etree.ElementTree.

Converts raw save XML → ship listing, and one ship → ParsedShip with its
tile elements.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from shipgrid.errors import MalformedInputError
from shipgrid.models.save import (
    ChildTile,
    MultiTileElement,
    ParsedShip,
    SaveParseResult,
    ShipMetadata,
    SingleTileElement,
    TileElement,
)
from shipgrid.models.types import Rotation

logger = logging.getLogger(__name__)

# Leading signed integer, e.g. "27", "-3", "12px"
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?[0-9]+)")
# Coordinates and sizes beyond 32-bit signed range are unusable
_INT_LIMIT = 2**31 - 1

_ROTATIONS = {
    "R0": Rotation.R0,
    "R90": Rotation.R90,
    "R180": Rotation.R180,
    "R270": Rotation.R270,
}

_PLAYER_OWNER = "Player"
_TRUTHY = {"true", "1", "yes"}

# Type code assumed when a tile element has no "m" attribute
_MISSING_TYPE_CODE = -2


def parse_rotation(value: str | None) -> Rotation:
    """Map an ``R0``/``R90``/``R180``/``R270`` token to a Rotation. Unknown → R0."""
    if value is None:
        return Rotation.R0
    return _ROTATIONS.get(value.strip(), Rotation.R0)


def parse_save_file(xml_text: str | bytes) -> SaveParseResult:
    """Parse a save archive and list its ships.

    Raises MalformedInputError when the text is not well-formed XML.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise MalformedInputError(f"Invalid XML: {e}") from e

    all_ships: list[ShipMetadata] = []
    player_ships: list[ShipMetadata] = []

    for ship_el in _iter_ship_elements(root):
        meta = _parse_ship_meta(ship_el)
        if meta is None:
            continue
        all_ships.append(meta)
        if meta.is_player_owned:
            player_ships.append(meta)

    logger.info("Parsed save: %d ships, %d player-owned", len(all_ships), len(player_ships))
    return SaveParseResult(document=root, all_ships=all_ships, player_ships=player_ships)


def parse_ship_by_id(document: ET.Element, sid: str) -> ParsedShip | None:
    """Parse one ship with all its tile elements. None when no ship matches."""
    if not isinstance(sid, str) or not sid:
        return None

    target = next((el for el in _iter_ship_elements(document) if el.get("sid") == sid), None)
    if target is None:
        return None

    meta = _parse_ship_meta(target)
    if meta is None:
        return None

    elements: list[TileElement] = []
    for tile_el in target.findall("e"):
        parsed = _parse_tile_element(tile_el)
        if parsed is not None:
            elements.append(parsed)

    logger.debug("Ship %s: %d tile elements", sid, len(elements))
    return ParsedShip(meta=meta, elements=tuple(elements))


def _iter_ship_elements(root: ET.Element) -> Iterator[ET.Element]:
    """Yield every <ship> that is a direct child of a <ships> container."""
    for container in root.iter("ships"):
        yield from container.findall("ship")


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    match = _INT_PREFIX_RE.match(value)
    if match is None:
        return None
    digits = match.group(1)
    # More than 10 significant digits never fits in 32 bits
    if len(digits.lstrip("+-").lstrip("0")) > 10:
        return None
    number = int(digits)
    if not -_INT_LIMIT <= number <= _INT_LIMIT:
        return None
    return number


def _is_player_owned(ship_el: ET.Element) -> bool:
    if (ship_el.get("derelict") or "").strip().lower() in _TRUTHY:
        return False
    return any(s.get("owner") == _PLAYER_OWNER for s in ship_el.iter("settings"))


def _parse_ship_meta(ship_el: ET.Element) -> ShipMetadata | None:
    sid = ship_el.get("sid")
    name = ship_el.get("sname")
    width = _parse_int(ship_el.get("sx"))
    height = _parse_int(ship_el.get("sy"))

    if not sid or not name or width is None or height is None:
        logger.debug("Skipping ship node with incomplete attributes: %s", ship_el.attrib)
        return None

    return ShipMetadata(
        sid=sid,
        name=name,
        width=width,
        height=height,
        is_player_owned=_is_player_owned(ship_el),
    )


def _parse_tile_element(el: ET.Element) -> TileElement | None:
    x = _parse_int(el.get("x"))
    y = _parse_int(el.get("y"))
    if x is None or y is None:
        return None

    type_code = _parse_int(el.get("m"))
    if type_code is None:
        type_code = _MISSING_TYPE_CODE
    rotation = parse_rotation(el.get("rot"))

    child_els = el.findall("l")
    if not child_els:
        return SingleTileElement(x=x, y=y, type_code=type_code, rotation=rotation)

    children: list[ChildTile] = []
    for child_el in child_els:
        index = _parse_int(child_el.get("ind"))
        cx = _parse_int(child_el.get("x"))
        cy = _parse_int(child_el.get("y"))
        if index is None or cx is None or cy is None:
            continue
        children.append(ChildTile(index=index, x=cx, y=cy))

    return MultiTileElement(
        x=x,
        y=y,
        type_code=type_code,
        rotation=rotation,
        child_tiles=tuple(children),
    )
