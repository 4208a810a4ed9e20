"""
Move directions and the order in which cells are scanned for each of them.
"""

from enum import Enum
from typing import NamedTuple


class ScanOrder(NamedTuple):
    """Starting coordinate and per-axis increment of a scan."""

    start_x: int
    step_x: int
    start_y: int
    step_y: int


class Direction(Enum):
    """
    The four axis-aligned move directions.

    Each value is the unit step in grid coordinates, where ``y = 0`` is the top row.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def scan_order(self, width: int, height: int) -> ScanOrder:
        """
        Compute the scan order for a grid of the given dimensions.

        Parameters
        ----------
        width : int
            Number of columns in the grid.
        height : int
            Number of rows in the grid.

        Returns
        -------
        ScanOrder
            Where to start and how to step along each axis.

        Notes
        -----
        Cells are visited starting from the edge the tiles move toward, so a tile is only resolved once every
        cell ahead of it has reached its final state for the move.
        """
        if self is Direction.UP:
            return ScanOrder(0, 1, 0, 1)
        if self is Direction.DOWN:
            return ScanOrder(0, 1, height - 2, -1)
        if self is Direction.LEFT:
            return ScanOrder(1, 1, 0, 1)
        return ScanOrder(width - 2, -1, 0, 1)

    @classmethod
    def parse(cls, value: 'Direction | str') -> 'Direction':
        """
        Convert a direction name (``'up'``, ``'DOWN'``, ...) into a direction.

        Raises
        ------
        ValueError
            If the name is not one of the four directions.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError(f'Unknown direction: {value!r}') from None
