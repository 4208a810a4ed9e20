"""
Errors raised by the tile board when one of its contracts is violated.
"""


class TileBoardError(Exception):
    """Base class for every tile board error."""


class OutOfBoundsError(TileBoardError, IndexError):
    """A coordinate query fell outside the grid."""


class GridFullError(TileBoardError):
    """A tile was requested while no cell is empty."""


class CellOccupiedError(TileBoardError):
    """A tile was linked or moved onto a cell held by another tile."""
