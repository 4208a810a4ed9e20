"""
Resolution of a single move: scan order, slides and merges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tileboard.core.direction import Direction
from tileboard.core.grid import TileGrid
from tileboard.core.tile import Tile, TileStates

# ##>: Module logger.
_logger = logging.getLogger(__name__)


def can_merge(moving: Tile, target: Tile) -> bool:
    """
    Check whether ``moving`` may merge into ``target``.

    Parameters
    ----------
    moving : Tile
        Tile travelling toward the target.
    target : Tile
        Tile that would be kept by the merge.

    Returns
    -------
    bool
        True if both tiles share a tier and the target was not already merged into during this move.
    """
    return moving.state == target.state and not target.locked


@dataclass
class MoveResult:
    """
    What a move did to the grid.

    Attributes
    ----------
    changed : bool
        Whether any tile slid or merged.
    merges : list[int]
        Number shown by the resulting tile of each merge, in resolution order.
    """

    changed: bool = False
    merges: list[int] = field(default_factory=list)

    @property
    def score(self) -> int:
        return sum(self.merges)


class MoveResolver:
    """
    Slides and merges the tiles of a grid toward one edge.

    Parameters
    ----------
    grid : TileGrid
        Grid holding the cells.
    tiles : dict[int, Tile]
        Live tiles keyed by tile key. Tiles consumed by a merge are removed from it.
    states : TileStates
        Catalog used to advance the tier of merge targets.
    """

    def __init__(self, grid: TileGrid, tiles: dict[int, Tile], states: TileStates):
        self.grid = grid
        self.tiles = tiles
        self.states = states

    def move(self, direction: Direction) -> MoveResult:
        """
        Resolve a move in the given direction.

        Parameters
        ----------
        direction : Direction
            Edge the tiles move toward.

        Returns
        -------
        MoveResult
            Whether the grid changed and the merges performed.

        Notes
        -----
        - Cells are visited in the scan order of the direction, columns in the outer loop.
        - Merge targets stay locked until the caller clears the locks.
        """
        result = MoveResult()
        order = direction.scan_order(self.grid.width, self.grid.height)

        x = order.start_x
        while 0 <= x < self.grid.width:
            y = order.start_y
            while 0 <= y < self.grid.height:
                cell = self.grid.get_cell(x, y)
                if cell.occupied:
                    result.changed |= self.move_tile(self.tiles[cell.tile], direction, result)
                y += order.step_y
            x += order.step_x

        _logger.debug('Resolved move %s: changed=%s, merges=%s', direction.name, result.changed, result.merges)
        return result

    def move_tile(self, tile: Tile, direction: Direction, result: MoveResult) -> bool:
        """
        Slide one tile as far as it goes, merging it if it runs into an eligible tile.

        Returns
        -------
        bool
            True if the tile slid or merged.
        """
        destination = None
        adjacent = self.grid.get_adjacent_cell(self.grid.cells[tile.cell], direction)

        while adjacent is not None:
            if adjacent.occupied:
                target = self.tiles[adjacent.tile]
                if can_merge(tile, target):
                    result.merges.append(self.merge_tiles(tile, target))
                    return True
                break

            # ##: Empty cell, keep walking past it.
            destination = adjacent
            adjacent = self.grid.get_adjacent_cell(adjacent, direction)

        if destination is not None:
            tile.move_to(destination)
            return True
        return False

    def merge_tiles(self, moving: Tile, target: Tile) -> int:
        """
        Merge ``moving`` into ``target``.

        The moving tile leaves play, the target advances one tier and is locked for the rest of the move.

        Returns
        -------
        int
            Number shown by the target after the merge.
        """
        del self.tiles[moving.key]
        moving.merge_into(self.grid.cells[target.cell])

        target.set_state(self.states.advance(target.state))
        target.locked = True
        return target.number
