"""
Binary (one-hot) encoding of board snapshots.
"""

from __future__ import annotations

from collections.abc import Sequence

from numpy import asarray, eye, int64, log2, ndarray, searchsorted


def channels(board: ndarray, numbers: Sequence[int] | None = None) -> ndarray:
    """
    Map every cell of a snapshot to its channel: 0 for an empty cell, ``k`` for the k-th tier.

    Parameters
    ----------
    board : ndarray
        Snapshot of tile numbers, 0 for empty cells.
    numbers : Sequence[int], optional
        Tier numbers of the board. When omitted, tiers are assumed to be powers of two starting at 2.

    Returns
    -------
    ndarray
        Integer array of the same shape as ``board``.

    Raises
    ------
    ValueError
        If a number of the board is not one of ``numbers``.
    """
    if numbers is None:
        obs = board.astype('float64')
        obs = log2(obs, where=obs != 0, out=obs)
        return obs.astype(int64, copy=False)

    tiers = asarray(numbers, dtype=int64)
    positions = searchsorted(tiers, board).clip(max=len(tiers) - 1)
    occupied = board != 0
    if (tiers[positions] != board)[occupied].any():
        raise ValueError('Board holds a number outside the tier catalog')
    return (positions + 1) * occupied


def encode(board: ndarray, encodage_size: int, numbers: Sequence[int] | None = None) -> ndarray:
    """
    One-hot encode every cell of a snapshot.

    Parameters
    ----------
    board : ndarray
        Snapshot of tile numbers.
    encodage_size : int
        Number of channels per cell. Must exceed the channel of the largest tile.
    numbers : Sequence[int], optional
        Tier numbers of the board, see ``channels``.

    Returns
    -------
    ndarray
        Array of shape ``board.shape + (encodage_size,)``.

    Example
    -------
    >>> import numpy as np
    >>> encode(np.array([0, 2, 4, 8]), encodage_size=4)
    array([[1, 0, 0, 0],
           [0, 1, 0, 0],
           [0, 0, 1, 0],
           [0, 0, 0, 1]])
    """
    return eye(encodage_size, dtype=int64)[channels(board, numbers)]


def encode_flatten(board: ndarray, encodage_size: int, numbers: Sequence[int] | None = None) -> ndarray:
    """
    Flatten a snapshot and one-hot encode it.

    Returns
    -------
    ndarray
        1D array of ``board.size * encodage_size`` elements.
    """
    return encode(board.ravel(), encodage_size, numbers).ravel()
