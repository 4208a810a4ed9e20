"""Tile board environment for agents playing through integer actions."""

from numpy import ndarray

from tileboard.core.board import TileBoard
from tileboard.core.config import BoardConfiguration
from tileboard.core.direction import Direction
from tileboard.core.listener import ScoreKeeper
from tileboard.utils.binary import encode_flatten


class TwentyFortyEight:
    """
    2048 game environment.

    This class plays a ``TileBoard`` one action at a time and exposes its state as numpy arrays.
    """

    # ##: All Actions.
    ACTIONS = {'left': 0, 'up': 1, 'right': 2, 'down': 3}
    DIRECTIONS = (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN)

    def __init__(self, width: int = 4, height: int = 4, encoded: bool = False, seed: int | None = None):
        """
        Initialize the environment and start a game.

        Parameters
        ----------
        width : int, optional
            Number of columns (default is 4).
        height : int, optional
            Number of rows (default is 4).
        encoded : bool, optional
            Whether to binary encode the observation or not (default is False).
        seed : int, optional
            Seed of the tile spawns.
        """
        self._encoded = encoded
        self._keeper = ScoreKeeper()
        self._board = TileBoard(BoardConfiguration(width=width, height=height, seed=seed), listener=self._keeper)
        self._current_reward = 0

        self.reset()

    @property
    def board(self) -> TileBoard:
        return self._board

    @property
    def encodage_size(self) -> int:
        """Channels per cell of the encoded observation: one for empty cells plus one per tier."""
        return len(self._board.states) + 1

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the game is finished (no more moves possible), False otherwise.
        """
        return self._board.check_for_game_over()

    @property
    def observation(self) -> ndarray:
        """
        Get the current state of the game board.

        Returns
        -------
        ndarray
            Tile numbers as a ``(height, width)`` array, or their flattened one-hot encoding.
        """
        snapshot = self._board.snapshot()
        if self._encoded:
            numbers = [state.number for state in self._board.states]
            return encode_flatten(snapshot, encodage_size=self.encodage_size, numbers=numbers)
        return snapshot

    @property
    def reward(self) -> int:
        """Score gained by the last step."""
        return self._current_reward

    @property
    def score(self) -> int:
        """Score accumulated since the last reset."""
        return self._keeper.score

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game with two random tiles.

        Parameters
        ----------
        seed : int, optional
            Seed of the tile spawns for this game.

        Returns
        -------
        ndarray
            The new observation.
        """
        self._keeper.reset()
        self._board.new_game(seed=seed)
        self._current_reward = 0
        return self.observation

    def step(self, action: int) -> tuple[ndarray, int, bool]:
        """
        Apply the selected action to the board.

        Parameters
        ----------
        action : int
            The action to apply (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        tuple[ndarray, int, bool]
            The observation, the score gained by the move and whether the game is finished.

        Notes
        -----
        A move that changes nothing earns no reward and spawns no tile.
        """
        if not 0 <= action < len(self.DIRECTIONS):
            raise ValueError(f'Unknown action: {action}')
        outcome = self._board.submit_move(self.DIRECTIONS[action])
        self._current_reward = outcome.score
        return self.observation, self.reward, self.is_finished

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._board.snapshot().tolist():
            print(' \t'.join(map(str, row)))
