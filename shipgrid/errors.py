"""Exception types raised at the parse boundary."""

from __future__ import annotations


class ShipgridError(Exception):
    """Base class for errors raised by shipgrid."""


class MalformedInputError(ShipgridError, ValueError):
    """The save archive is not well-formed XML."""
