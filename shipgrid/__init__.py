"""Ship save import and hull geometry for the ship layout planner."""

__version__ = "0.1.0"
