"""
Fixed-size grid of cells with adjacency queries and random empty-cell selection.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.random import Generator, default_rng

from tileboard.core.direction import Direction
from tileboard.core.errors import GridFullError, OutOfBoundsError


@dataclass
class Cell:
    """
    A single cell of the grid.

    Attributes
    ----------
    x : int
        Column of the cell.
    y : int
        Row of the cell, 0 being the top row.
    index : int
        Row-major position of the cell in the grid.
    tile : int, optional
        Key of the tile occupying the cell.
    """

    x: int
    y: int
    index: int
    tile: int | None = None

    @property
    def occupied(self) -> bool:
        return self.tile is not None

    @property
    def coordinates(self) -> tuple[int, int]:
        return self.x, self.y


class TileGrid:
    """
    Rectangular collection of cells.

    Cells are created once and never move; only their tile link changes.

    Parameters
    ----------
    width : int
        Number of columns.
    height : int
        Number of rows.
    seed : int, optional
        Seed of the generator used to pick empty cells.
    """

    def __init__(self, width: int, height: int, seed: int | None = None):
        if width < 1 or height < 1:
            raise ValueError(f'Grid dimensions must be positive, got {width}x{height}')
        self.width = width
        self.height = height
        self.cells = [Cell(x=x, y=y, index=y * width + x) for y in range(height) for x in range(width)]
        self._generator: Generator = default_rng(seed)

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def occupied_count(self) -> int:
        return sum(1 for cell in self.cells if cell.occupied)

    def reseed(self, seed: int | None) -> None:
        """Replace the random generator, allowing a game to be replayed."""
        self._generator = default_rng(seed)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Cell:
        """
        Get the cell at the given coordinates.

        Raises
        ------
        OutOfBoundsError
            If ``(x, y)`` lies outside the grid.
        """
        if not self.contains(x, y):
            raise OutOfBoundsError(f'({x}, {y}) is outside a {self.width}x{self.height} grid')
        return self.cells[y * self.width + x]

    def get_adjacent_cell(self, cell: Cell, direction: Direction) -> Cell | None:
        """Neighbour one step along ``direction``, or None when that step leaves the grid."""
        x, y = cell.x + direction.dx, cell.y + direction.dy
        if not self.contains(x, y):
            return None
        return self.cells[y * self.width + x]

    def empty_cells(self) -> list[Cell]:
        return [cell for cell in self.cells if not cell.occupied]

    def random_empty_cell(self) -> Cell:
        """
        Pick an unoccupied cell uniformly at random.

        Raises
        ------
        GridFullError
            If every cell is occupied.
        """
        available = self.empty_cells()
        if not available:
            raise GridFullError(f'No empty cell left on a {self.width}x{self.height} grid')
        return available[int(self._generator.integers(len(available)))]

    def clear(self) -> None:
        """Release the tile link of every cell."""
        for cell in self.cells:
            cell.tile = None
