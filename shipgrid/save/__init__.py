"""Save archive ingestion: parser, converter and its configuration."""

from shipgrid.save.config import DEFAULT_CONVERTER_CONFIG, ConverterConfig
from shipgrid.save.converter import convert_ship
from shipgrid.save.parser import parse_rotation, parse_save_file, parse_ship_by_id

__all__ = [
    "DEFAULT_CONVERTER_CONFIG",
    "ConverterConfig",
    "convert_ship",
    "parse_rotation",
    "parse_save_file",
    "parse_ship_by_id",
]
