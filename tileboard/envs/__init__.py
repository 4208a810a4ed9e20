# -*- coding: utf-8 -*-
"""
Agent-facing environment around the tile board.

This module provides the `TwentyFortyEight` class, which plays a tile board through integer actions and numpy
observations.
"""

from .twentyfortyeight import TwentyFortyEight

__all__ = ["TwentyFortyEight"]
