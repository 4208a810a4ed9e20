"""
Interface through which the board notifies its host of score and game over.
"""

from abc import ABC, abstractmethod


class BoardListener(ABC):
    """Host-side collaborator receiving board events."""

    @abstractmethod
    def on_score(self, amount: int) -> None:
        """
        Called once per merge.

        Parameters
        ----------
        amount : int
            Number shown by the tile resulting from the merge.
        """

    @abstractmethod
    def on_game_over(self) -> None:
        """Called when a settled move leaves the board without any possible move."""


class ScoreKeeper(BoardListener):
    """Listener keeping the score and game-over flag of the current game in memory."""

    def __init__(self):
        self.score = 0
        self.game_over = False

    def on_score(self, amount: int) -> None:
        self.score += amount

    def on_game_over(self) -> None:
        self.game_over = True

    def reset(self) -> None:
        self.score = 0
        self.game_over = False
