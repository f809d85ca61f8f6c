"""Records parsed out of a save archive, before conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Literal, Union
from xml.etree.ElementTree import Element

from pydantic import BaseModel, ConfigDict, Field

from shipgrid.models.types import Position, Rotation


class ShipMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    sid: str
    name: str
    width: int
    height: int
    is_player_owned: bool = False


class ChildTile(BaseModel):
    """One occupied cell of a multi-tile structure."""

    model_config = ConfigDict(frozen=True)

    index: int
    x: int
    y: int


class _TileElementBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    # Structure/tile type code; the configured empty sentinel means nothing is here
    type_code: int
    rotation: Rotation = Rotation.R0

    @property
    def position(self) -> Position:
        return Position(x=self.x, y=self.y)


class SingleTileElement(_TileElementBase):
    kind: Literal["single"] = "single"

    @property
    def is_multi_tile(self) -> bool:
        return False

    @property
    def anchor(self) -> Position:
        return self.position


class MultiTileElement(_TileElementBase):
    """A structure occupying several cells.

    The element's own x/y is a rotation dependent reference point. Placement
    uses :attr:`anchor` instead.
    """

    kind: Literal["multi"] = "multi"
    child_tiles: tuple[ChildTile, ...] = ()

    @property
    def is_multi_tile(self) -> bool:
        return True

    @property
    def anchor(self) -> Position:
        if not self.child_tiles:
            return self.position
        return Position(
            x=min(t.x for t in self.child_tiles),
            y=min(t.y for t in self.child_tiles),
        )


TileElement = Annotated[Union[SingleTileElement, MultiTileElement], Field(discriminator="kind")]


class ParsedShip(BaseModel):
    model_config = ConfigDict(frozen=True)

    meta: ShipMetadata
    elements: tuple[TileElement, ...] = ()


@dataclass(frozen=True)
class SaveParseResult:
    """Ship listing for one archive plus the parsed document for later lookups."""

    document: Element
    all_ships: list[ShipMetadata] = field(default_factory=list)
    player_ships: list[ShipMetadata] = field(default_factory=list)
