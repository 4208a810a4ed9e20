"""
Detection of the terminal state: a full grid with no mergeable neighbours.
"""

from tileboard.core.direction import Direction
from tileboard.core.grid import TileGrid
from tileboard.core.resolver import can_merge
from tileboard.core.tile import Tile


def has_merge_candidates(grid: TileGrid, tiles: dict[int, Tile]) -> bool:
    """Check whether any live tile has an orthogonal neighbour it could merge with."""
    for tile in tiles.values():
        cell = grid.cells[tile.cell]
        for direction in Direction:
            neighbour = grid.get_adjacent_cell(cell, direction)
            if neighbour is not None and neighbour.occupied and can_merge(tile, tiles[neighbour.tile]):
                return True
    return False


def is_game_over(grid: TileGrid, tiles: dict[int, Tile]) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    grid : TileGrid
        Grid of the board.
    tiles : dict[int, Tile]
        Live tiles of the board, keyed by tile key.

    Returns
    -------
    bool
        True if every cell holds a tile and no two neighbouring tiles can merge.

    Notes
    -----
    Only adjacency is examined. No tile is locked between moves, so two equal neighbours are always a legal
    merge.
    """
    if len(tiles) != grid.size:
        return False
    return not has_merge_candidates(grid, tiles)
