# -*- coding: utf-8 -*-
"""
Board specific configuration.
"""
from dataclasses import dataclass

# ##: Tiers 2, 4, 8, ... up to the largest tile a 4x4 board can hold.
DEFAULT_TILE_NUMBERS = tuple(2**exponent for exponent in range(1, 18))


@dataclass
class BoardConfiguration:
    """
    Data needed to build a tile board.

    Attributes
    ----------
    width : int
        Number of columns.
    height : int
        Number of rows.
    tile_numbers : tuple[int, ...]
        Numbers shown by each tier, in merge order. The first one is used for spawned tiles.
    starting_tiles : int
        Number of tiles spawned by a new game.
    seed : int, optional
        Seed of the generator picking spawn cells.
    auto_settle : bool
        Settle each changed move immediately instead of waiting for an explicit ``settle()`` call.
    """

    width: int = 4
    height: int = 4
    tile_numbers: tuple[int, ...] = DEFAULT_TILE_NUMBERS
    starting_tiles: int = 2
    seed: int | None = None
    auto_settle: bool = True

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f'Board dimensions must be positive, got {self.width}x{self.height}')
        if self.size < 2:
            raise ValueError('A board needs at least two cells')
        if not self.tile_numbers:
            raise ValueError('tile_numbers must hold at least one tier')
        if not 0 <= self.starting_tiles <= self.size:
            raise ValueError(f'starting_tiles must be between 0 and {self.size}, got {self.starting_tiles}')

    @property
    def size(self) -> int:
        return self.width * self.height
