"""
Shared builders and invariant checks for the tile board tests.
"""

from tileboard.core.board import TileBoard
from tileboard.core.config import DEFAULT_TILE_NUMBERS, BoardConfiguration


def build_board(rows, tile_numbers=DEFAULT_TILE_NUMBERS, seed=0, auto_settle=True):
    """Build a board whose tiles show ``rows`` (top row first, 0 for empty cells)."""
    configuration = BoardConfiguration(
        width=len(rows[0]), height=len(rows), tile_numbers=tuple(tile_numbers), seed=seed, auto_settle=auto_settle
    )
    board = TileBoard(configuration)
    for y, row in enumerate(rows):
        for x, number in enumerate(row):
            if number:
                board.place_tile(x, y, number)
    return board


def assert_linked(test, board):
    """Check that tiles and occupied cells form a one-to-one mapping."""
    for cell in board.grid.cells:
        if cell.occupied:
            test.assertIn(cell.tile, board.tiles)
            test.assertEqual(board.tiles[cell.tile].cell, cell.index)

    cells = [tile.cell for tile in board.tiles.values()]
    test.assertNotIn(None, cells)
    test.assertEqual(len(cells), len(set(cells)))
    for key, tile in board.tiles.items():
        test.assertEqual(tile.key, key)
        test.assertEqual(board.grid.cells[tile.cell].tile, key)
    test.assertEqual(board.grid.occupied_count, len(board.tiles))
