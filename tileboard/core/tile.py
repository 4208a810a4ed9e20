"""
Tiles, their numeric tiers and the catalog of tiers a board plays with.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tileboard.core.errors import CellOccupiedError

if TYPE_CHECKING:
    from tileboard.core.grid import Cell, TileGrid


@dataclass(frozen=True)
class TileState:
    """A tier of the numeric progression: its position and the number it shows."""

    index: int
    number: int


class TileStates:
    """
    Ordered catalog of tile tiers.

    Tier ``i`` merges into tier ``i + 1``; the last tier merges into itself.

    Parameters
    ----------
    numbers : Iterable[int]
        Strictly increasing positive numbers, one per tier.

    Raises
    ------
    ValueError
        If the catalog is empty, holds a non-positive number or is not strictly increasing.
    """

    def __init__(self, numbers: Iterable[int]):
        numbers = tuple(int(number) for number in numbers)
        if not numbers:
            raise ValueError('A tile catalog needs at least one tier')
        if numbers[0] <= 0:
            raise ValueError(f'Tile numbers must be positive, got {numbers[0]}')
        if any(low >= high for low, high in zip(numbers, numbers[1:])):
            raise ValueError(f'Tile numbers must be strictly increasing, got {numbers}')
        self._states = tuple(TileState(index, number) for index, number in enumerate(numbers))

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[TileState]:
        return iter(self._states)

    def __getitem__(self, index: int) -> TileState:
        return self._states[index]

    @property
    def first(self) -> TileState:
        """Tier given to every newly spawned tile."""
        return self._states[0]

    @property
    def last(self) -> TileState:
        return self._states[-1]

    def index_of(self, state: TileState) -> int:
        """Position of ``state`` in this catalog, or -1 when it does not belong to it."""
        for index, candidate in enumerate(self._states):
            if candidate == state:
                return index
        return -1

    def advance(self, state: TileState) -> TileState:
        """
        Tier produced by merging two tiles of ``state``.

        The next index is clamped to the catalog, so the top tier advances to itself.
        """
        index = min(max(self.index_of(state) + 1, 0), len(self._states) - 1)
        return self._states[index]

    def by_number(self, number: int) -> TileState:
        """
        Look up a tier by the number it shows.

        Raises
        ------
        ValueError
            If no tier shows ``number``.
        """
        for state in self._states:
            if state.number == number:
                return state
        raise ValueError(f'No tier shows the number {number}')


class Tile:
    """
    A numbered piece sitting on exactly one cell of a grid.

    The tile and its cell refer to each other by index: the tile keeps the index of its cell, the cell keeps
    the key of its tile.

    Parameters
    ----------
    key : int
        Identifier of the tile, unique on its board.
    grid : TileGrid
        Grid the tile lives on.
    state : TileState
        Initial tier of the tile.
    """

    def __init__(self, key: int, grid: TileGrid, state: TileState):
        self.key = key
        self.state = state
        self.cell: int | None = None
        self.locked = False
        self._grid = grid

    def __repr__(self) -> str:
        return f'Tile(key={self.key}, number={self.state.number}, cell={self.cell}, locked={self.locked})'

    @property
    def number(self) -> int:
        return self.state.number

    @property
    def coordinates(self) -> tuple[int, int] | None:
        """Coordinates ``(x, y)`` of the tile's cell, or None once it left play."""
        if self.cell is None:
            return None
        cell = self._grid.cells[self.cell]
        return cell.x, cell.y

    def set_state(self, state: TileState) -> None:
        self.state = state

    def link(self, cell: Cell) -> None:
        """
        Link this tile and ``cell`` to each other, releasing the tile's previous cell.

        Raises
        ------
        CellOccupiedError
            If ``cell`` already holds a different tile.
        """
        if cell.tile is not None and cell.tile != self.key:
            raise CellOccupiedError(f'Cell ({cell.x}, {cell.y}) already holds tile {cell.tile}')
        self._release()
        self.cell = cell.index
        cell.tile = self.key

    def move_to(self, cell: Cell) -> None:
        """
        Slide this tile onto an empty cell.

        Raises
        ------
        CellOccupiedError
            If ``cell`` is not empty.
        """
        if cell.occupied:
            raise CellOccupiedError(f'Cannot move tile {self.key} onto occupied cell ({cell.x}, {cell.y})')
        self.link(cell)

    def merge_into(self, cell: Cell) -> None:
        """
        Take this tile out of play by merging it into the tile on ``cell``.

        Only the tile's own cell is vacated. Destroying the tile and advancing the target's tier is left to
        the caller.
        """
        self._release()
        self.cell = None

    def _release(self) -> None:
        if self.cell is not None:
            current = self._grid.cells[self.cell]
            if current.tile == self.key:
                current.tile = None
