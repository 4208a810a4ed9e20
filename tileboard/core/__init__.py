# -*- coding: utf-8 -*-
"""
This module provides the movement and merge engine of a sliding-tile board.

It includes the grid of cells, tiles and their tiers, the resolution of a move in one of four directions,
game-over detection, and the board controller running full move cycles.
"""

from .board import BoardState, MoveOutcome, TileBoard
from .config import DEFAULT_TILE_NUMBERS, BoardConfiguration
from .direction import Direction, ScanOrder
from .errors import CellOccupiedError, GridFullError, OutOfBoundsError, TileBoardError
from .gameover import has_merge_candidates, is_game_over
from .grid import Cell, TileGrid
from .listener import BoardListener, ScoreKeeper
from .resolver import MoveResolver, MoveResult, can_merge
from .tile import Tile, TileState, TileStates

__all__ = [
    "TileBoard",
    "BoardState",
    "MoveOutcome",
    "BoardConfiguration",
    "DEFAULT_TILE_NUMBERS",
    "Direction",
    "ScanOrder",
    "TileBoardError",
    "OutOfBoundsError",
    "GridFullError",
    "CellOccupiedError",
    "is_game_over",
    "has_merge_candidates",
    "Cell",
    "TileGrid",
    "BoardListener",
    "ScoreKeeper",
    "MoveResolver",
    "MoveResult",
    "can_merge",
    "Tile",
    "TileState",
    "TileStates",
]
