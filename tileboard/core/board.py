"""
Board controller orchestrating move cycles: resolve, settle, spawn and game-over detection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from itertools import count

from numpy import int64, ndarray, zeros

from tileboard.core.config import BoardConfiguration
from tileboard.core.direction import Direction
from tileboard.core.gameover import is_game_over
from tileboard.core.grid import TileGrid
from tileboard.core.listener import BoardListener, ScoreKeeper
from tileboard.core.resolver import MoveResolver
from tileboard.core.tile import Tile, TileStates

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class BoardState(Enum):
    """Phases of the board between two moves."""

    READY = 'ready'
    SETTLING = 'settling'


@dataclass
class MoveOutcome:
    """
    Result of a move submitted to the board.

    Attributes
    ----------
    accepted : bool
        False if the move arrived while the previous one was still settling.
    changed : bool
        Whether any tile slid or merged.
    merges : list[int]
        Number shown by the resulting tile of each merge.
    spawned : tuple[int, int], optional
        Coordinates of the tile spawned after the move, if any.
    game_over : bool
        Whether the board reached its terminal state after the move.
    """

    accepted: bool = True
    changed: bool = False
    merges: list[int] = field(default_factory=list)
    spawned: tuple[int, int] | None = None
    game_over: bool = False

    @property
    def score(self) -> int:
        return sum(self.merges)


class TileBoard:
    """
    A sliding-tile board.

    The board owns the live tiles and accepts one move at a time. A move that changes the grid puts the board
    in the settling state; settling clears every merge lock, spawns a tile if room remains and checks for
    game over before the board accepts the next move.

    Parameters
    ----------
    configuration : BoardConfiguration, optional
        Dimensions, tiers and settle policy of the board.
    listener : BoardListener, optional
        Host collaborator notified of scores and game over. Defaults to a ``ScoreKeeper``.
    """

    def __init__(self, configuration: BoardConfiguration | None = None, listener: BoardListener | None = None):
        self.configuration = configuration or BoardConfiguration()
        self.listener = listener if listener is not None else ScoreKeeper()

        self.grid = TileGrid(self.configuration.width, self.configuration.height, seed=self.configuration.seed)
        self.states = TileStates(self.configuration.tile_numbers)
        self.tiles: dict[int, Tile] = {}
        self.state = BoardState.READY

        self._keys = count()
        self._resolver = MoveResolver(self.grid, self.tiles, self.states)

    @property
    def is_ready(self) -> bool:
        return self.state is BoardState.READY

    def clear_board(self) -> None:
        """Release every cell-tile link and destroy every live tile."""
        self.grid.clear()
        for tile in self.tiles.values():
            tile.cell = None
        self.tiles.clear()
        self.state = BoardState.READY
        _logger.debug('Board cleared')

    def create_tile(self) -> Tile:
        """
        Spawn a first-tier tile on a random empty cell.

        Returns
        -------
        Tile
            The new tile.

        Raises
        ------
        GridFullError
            If no cell is empty.
        """
        cell = self.grid.random_empty_cell()
        tile = Tile(next(self._keys), self.grid, self.states.first)
        tile.link(cell)
        self.tiles[tile.key] = tile
        _logger.debug('Spawned %d at %s', tile.number, cell.coordinates)
        return tile

    def place_tile(self, x: int, y: int, number: int | None = None) -> Tile:
        """
        Put a tile on a given cell.

        Parameters
        ----------
        x, y : int
            Coordinates of the cell.
        number : int, optional
            Number shown by the tile; the first tier when omitted.

        Raises
        ------
        OutOfBoundsError
            If the coordinates are outside the grid.
        CellOccupiedError
            If the cell already holds a tile.
        ValueError
            If ``number`` is not one of the board's tiers.
        """
        state = self.states.first if number is None else self.states.by_number(number)
        tile = Tile(next(self._keys), self.grid, state)
        tile.move_to(self.grid.get_cell(x, y))
        self.tiles[tile.key] = tile
        return tile

    def new_game(self, seed: int | None = None) -> None:
        """
        Clear the board and spawn the starting tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the spawn generator before starting, for reproducible games.
        """
        if seed is not None:
            self.grid.reseed(seed)
        self.clear_board()
        for _ in range(self.configuration.starting_tiles):
            self.create_tile()
        _logger.info('New %dx%d game', self.grid.width, self.grid.height)

    def move(self, direction: Direction | str) -> bool:
        """
        Slide and merge every tile toward ``direction``.

        Each merge is reported to the listener. A move that changes the grid is settled right away when
        ``auto_settle`` is enabled, and leaves the board settling otherwise.

        Returns
        -------
        bool
            Whether the grid changed. Always False while the board is settling.
        """
        if self._apply(direction) is None:
            return False
        if self.configuration.auto_settle:
            self.settle()
        return True

    def settle(self) -> tuple[tuple[int, int] | None, bool]:
        """
        Finish the in-flight move and make the board ready again.

        Returns
        -------
        tuple
            Coordinates of the spawned tile (None if the board was full or not settling) and whether the game
            is over.
        """
        if self.state is not BoardState.SETTLING:
            return None, False

        for tile in self.tiles.values():
            tile.locked = False

        spawned = None
        if len(self.tiles) != self.grid.size:
            spawned = self.create_tile().coordinates

        game_over = self.check_for_game_over()
        if game_over:
            _logger.info('Game over')
            self.listener.on_game_over()

        self.state = BoardState.READY
        return spawned, game_over

    def submit_move(self, direction: Direction | str) -> MoveOutcome:
        """
        Run a full move cycle.

        Parameters
        ----------
        direction : Direction or str
            Direction of the move, or its name.

        Returns
        -------
        MoveOutcome
            What the move did. With ``auto_settle`` disabled, a changed move leaves the board settling and the
            outcome carries no spawn; call ``settle()`` once the presentation is done.
        """
        direction = Direction.parse(direction)
        if self.state is BoardState.SETTLING:
            _logger.warning('Move %s rejected: previous move still settling', direction.name)
            return MoveOutcome(accepted=False)

        merges = self._apply(direction)
        if merges is None:
            return MoveOutcome()

        outcome = MoveOutcome(changed=True, merges=merges)
        if self.configuration.auto_settle:
            outcome.spawned, outcome.game_over = self.settle()
        return outcome

    def check_for_game_over(self) -> bool:
        return is_game_over(self.grid, self.tiles)

    def snapshot(self) -> ndarray:
        """
        Numbers shown on the board.

        Returns
        -------
        ndarray
            Array of shape ``(height, width)`` with the number of each tile, 0 for empty cells.
        """
        board = zeros((self.grid.height, self.grid.width), dtype=int64)
        for tile in self.tiles.values():
            cell = self.grid.cells[tile.cell]
            board[cell.y, cell.x] = tile.number
        return board

    def _apply(self, direction: Direction | str) -> list[int] | None:
        direction = Direction.parse(direction)
        if self.state is not BoardState.READY:
            return None

        result = self._resolver.move(direction)
        for amount in result.merges:
            self.listener.on_score(amount)
        if not result.changed:
            return None

        self.state = BoardState.SETTLING
        return result.merges
