"""POST /api/saves/*: list ships in a save archive and convert one of them."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from shipgrid.dependencies import get_default_catalog
from shipgrid.errors import MalformedInputError
from shipgrid.models.conversion import ShipConversionResult
from shipgrid.models.requests import ConvertShipRequest, SaveShipsRequest
from shipgrid.models.responses import SaveShipsResponse
from shipgrid.models.types import StructureCatalog
from shipgrid.save.converter import convert_ship
from shipgrid.save.parser import parse_save_file, parse_ship_by_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/saves")


@router.post("/ships", response_model=SaveShipsResponse)
async def list_ships(req: SaveShipsRequest) -> SaveShipsResponse:
    start = time.perf_counter()

    try:
        parsed = parse_save_file(req.xml)
    except MalformedInputError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Listed %d ships in %.1f ms", len(parsed.all_ships), elapsed)

    return SaveShipsResponse(all_ships=parsed.all_ships, player_ships=parsed.player_ships)


@router.post("/convert", response_model=ShipConversionResult)
async def convert(
    req: ConvertShipRequest,
    default_catalog: StructureCatalog = Depends(get_default_catalog),
) -> ShipConversionResult:
    start = time.perf_counter()

    try:
        parsed = parse_save_file(req.xml)
    except MalformedInputError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    ship = parse_ship_by_id(parsed.document, req.sid)
    if ship is None:
        raise HTTPException(status_code=404, detail=f"Ship {req.sid!r} not found")

    catalog = req.catalog if req.catalog is not None else default_catalog
    result = convert_ship(ship, catalog)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Converted ship %s in %.1f ms", req.sid, elapsed)

    return result
