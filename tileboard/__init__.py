# -*- coding: utf-8 -*-
"""
Sliding-tile number merging board (2048-style).
"""

from .core import BoardConfiguration, BoardListener, Direction, MoveOutcome, ScoreKeeper, TileBoard

__all__ = ["TileBoard", "BoardConfiguration", "BoardListener", "ScoreKeeper", "Direction", "MoveOutcome"]
