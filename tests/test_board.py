# -*-  coding: utf-8 -*-
"""
Set of test for TileBoard.
"""
from unittest import TestCase, main

import numpy as np

from tests.helpers import assert_linked, build_board
from tileboard.core.board import BoardState, TileBoard
from tileboard.core.config import BoardConfiguration
from tileboard.core.direction import Direction
from tileboard.core.errors import CellOccupiedError, GridFullError, OutOfBoundsError
from tileboard.core.listener import BoardListener, ScoreKeeper


class RecordingListener(BoardListener):
    """Listener recording every event it receives."""

    def __init__(self, board=None):
        self.board = board
        self.scores = []
        self.game_overs = 0
        self.states_at_game_over = []

    def on_score(self, amount):
        self.scores.append(amount)

    def on_game_over(self):
        self.game_overs += 1
        if self.board is not None:
            self.states_at_game_over.append(self.board.state)


class TestBoardSetup(TestCase):
    """
    Test for the board lifecycle.
    This class tests new games, spawns and clearing.
    """

    def setUp(self):
        """Initialize a new board before each test."""
        self.board = TileBoard(BoardConfiguration(seed=42))

    def test_init(self):
        """Test if the board is correctly initialized."""
        self.assertEqual(self.board.grid.size, 16)
        self.assertEqual(len(self.board.tiles), 0)
        self.assertIs(self.board.state, BoardState.READY)
        self.assertIsInstance(self.board.listener, ScoreKeeper)

    def test_new_game(self):
        """Test if a new game starts with two first-tier tiles."""
        self.board.new_game()
        snapshot = self.board.snapshot()
        self.assertEqual(np.count_nonzero(snapshot), 2)
        self.assertTrue(np.all(snapshot[snapshot != 0] == 2))
        assert_linked(self, self.board)

    def test_new_game_seed_reproducibility(self):
        """Same seed produces the same starting board."""
        self.board.new_game(seed=5)
        first = self.board.snapshot()
        self.board.new_game(seed=5)
        np.testing.assert_array_equal(first, self.board.snapshot())

        other = TileBoard(BoardConfiguration(seed=5))
        other.new_game()
        np.testing.assert_array_equal(first, other.snapshot())

    def test_create_tile(self):
        """Test if a spawned tile sits on an empty cell with the first tier."""
        tile = self.board.create_tile()
        self.assertEqual(tile.number, 2)
        self.assertFalse(tile.locked)
        self.assertIn(tile.key, self.board.tiles)
        assert_linked(self, self.board)

    def test_create_tile_on_full_board(self):
        """Test if spawning on a full board raises GridFullError."""
        board = build_board([[2, 4], [8, 16]])
        with self.assertRaises(GridFullError):
            board.create_tile()
        self.assertEqual(len(board.tiles), 4)

    def test_fill_board(self):
        """Test if spawns fill every cell exactly once."""
        for _ in range(16):
            self.board.create_tile()
        self.assertEqual(self.board.grid.occupied_count, 16)
        assert_linked(self, self.board)

    def test_clear_board(self):
        """Test if clearing removes every tile and link."""
        self.board.new_game()
        tiles = list(self.board.tiles.values())
        self.board.clear_board()

        self.assertEqual(len(self.board.tiles), 0)
        self.assertEqual(self.board.grid.occupied_count, 0)
        self.assertTrue(all(tile.cell is None for tile in tiles))
        self.assertFalse(self.board.snapshot().any())

    def test_place_tile(self):
        """Test if tiles are placed on given cells."""
        tile = self.board.place_tile(2, 1, 8)
        self.assertEqual(tile.coordinates, (2, 1))
        self.assertEqual(self.board.snapshot()[1, 2], 8)

        with self.assertRaises(CellOccupiedError):
            self.board.place_tile(2, 1)
        with self.assertRaises(OutOfBoundsError):
            self.board.place_tile(4, 0)
        with self.assertRaises(ValueError):
            self.board.place_tile(0, 0, 3)


class TestMoveCycle(TestCase):
    """
    Test for full move cycles.
    This class tests spawns, scores and the settle barrier.
    """

    def test_no_op_move(self):
        """Test if a move changing nothing spawns nothing and stays ready."""
        board = build_board([[2, 0, 0, 0], [4, 0, 0, 0], [0] * 4, [0] * 4])
        before = board.snapshot()
        outcome = board.submit_move(Direction.LEFT)

        self.assertTrue(outcome.accepted)
        self.assertFalse(outcome.changed)
        self.assertIsNone(outcome.spawned)
        self.assertEqual(outcome.score, 0)
        self.assertIs(board.state, BoardState.READY)
        np.testing.assert_array_equal(board.snapshot(), before)

    def test_changed_move_spawns(self):
        """Test if a changed move spawns one first-tier tile."""
        board = build_board([[2, 4, 0, 0], [0] * 4, [0] * 4, [0] * 4])
        outcome = board.submit_move(Direction.RIGHT)

        self.assertTrue(outcome.changed)
        self.assertIsNotNone(outcome.spawned)
        self.assertEqual(len(board.tiles), 3)
        x, y = outcome.spawned
        self.assertEqual(board.snapshot()[y, x], 2)
        self.assertIs(board.state, BoardState.READY)

    def test_merge_scores(self):
        """Test if two adjacent first-tier tiles merge and score the next tier."""
        listener = RecordingListener()
        board = TileBoard(BoardConfiguration(seed=1), listener=listener)
        board.place_tile(0, 0)
        board.place_tile(1, 0)

        outcome = board.submit_move('right')

        self.assertEqual(outcome.merges, [4])
        self.assertEqual(outcome.score, 4)
        self.assertEqual(listener.scores, [4])
        self.assertEqual(board.snapshot()[0, 3], 4)

        # ##>: One tile merged away, one spawned.
        self.assertEqual(len(board.tiles), 2)

    def test_score_per_merge(self):
        """Test if the listener is called once per merge."""
        listener = RecordingListener()
        board = TileBoard(BoardConfiguration(seed=1), listener=listener)
        for x, number in enumerate([2, 2, 4, 4]):
            board.place_tile(x, 0, number)

        board.submit_move(Direction.LEFT)
        self.assertEqual(listener.scores, [4, 8])

    def test_locks_cleared_after_move(self):
        """Test if no tile stays locked once the move settled."""
        board = build_board([[2, 2, 2, 2], [4, 4, 0, 0], [0] * 4, [0] * 4])
        board.submit_move(Direction.LEFT)
        self.assertFalse(any(tile.locked for tile in board.tiles.values()))

    def test_tile_count_after_moves(self):
        """Test if each cycle changes the count by spawns minus merges."""
        board = TileBoard(BoardConfiguration(seed=3))
        board.new_game()
        directions = list(Direction)

        for turn in range(300):
            count = len(board.tiles)
            outcome = board.submit_move(directions[turn % 4])

            spawned = 1 if outcome.spawned is not None else 0
            self.assertEqual(len(board.tiles), count - len(outcome.merges) + spawned)
            self.assertEqual(outcome.spawned is not None, outcome.changed)
            self.assertFalse(any(tile.locked for tile in board.tiles.values()))
            assert_linked(self, board)
            if outcome.game_over:
                break

    def test_move_settles_by_default(self):
        """Test if move settles each changed move when auto_settle is enabled."""
        board = TileBoard(BoardConfiguration(seed=0))
        board.place_tile(0, 0)
        board.place_tile(1, 0)

        self.assertTrue(board.move('left'))
        self.assertIs(board.state, BoardState.READY)
        self.assertFalse(any(tile.locked for tile in board.tiles.values()))

        # ##>: One tile merged away, one spawned.
        self.assertEqual(len(board.tiles), 2)
        self.assertEqual(board.snapshot()[0, 0], 4)

        # ##>: Second move is accepted and settled as well.
        self.assertTrue(board.move('right'))
        self.assertIs(board.state, BoardState.READY)
        self.assertFalse(any(tile.locked for tile in board.tiles.values()))
        self.assertEqual(len(board.tiles), 3)
        assert_linked(self, board)

    def test_invalid_direction(self):
        board = TileBoard()
        with self.assertRaises(ValueError):
            board.submit_move('sideways')


class TestSettling(TestCase):
    """
    Test for the settle barrier.
    This class tests the board when the caller settles moves itself.
    """

    def setUp(self):
        self.board = build_board([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4], auto_settle=False)

    def test_changed_move_enters_settling(self):
        """Test if a changed move leaves the board settling with locks held."""
        outcome = self.board.submit_move(Direction.LEFT)

        self.assertTrue(outcome.changed)
        self.assertIsNone(outcome.spawned)
        self.assertIs(self.board.state, BoardState.SETTLING)
        self.assertFalse(self.board.is_ready)
        self.assertTrue(all(tile.locked for tile in self.board.tiles.values()))
        self.assertEqual(len(self.board.tiles), 1)

    def test_moves_rejected_while_settling(self):
        """Test if moves are rejected until the board settled."""
        self.board.submit_move(Direction.LEFT)
        before = self.board.snapshot()

        outcome = self.board.submit_move(Direction.RIGHT)
        self.assertFalse(outcome.accepted)
        self.assertFalse(outcome.changed)
        self.assertFalse(self.board.move(Direction.RIGHT))
        np.testing.assert_array_equal(self.board.snapshot(), before)

    def test_settle(self):
        """Test if settling unlocks, spawns and makes the board ready."""
        self.board.submit_move(Direction.LEFT)
        spawned, game_over = self.board.settle()

        self.assertIsNotNone(spawned)
        self.assertFalse(game_over)
        self.assertIs(self.board.state, BoardState.READY)
        self.assertEqual(len(self.board.tiles), 2)
        self.assertFalse(any(tile.locked for tile in self.board.tiles.values()))

        # ##>: Board accepts moves again.
        self.assertTrue(self.board.submit_move(Direction.DOWN).accepted)

    def test_settle_when_ready(self):
        """Test if settling a ready board does nothing."""
        self.assertEqual(self.board.settle(), (None, False))
        self.assertEqual(len(self.board.tiles), 2)

    def test_move_returns_changed(self):
        """Test if move reports changes and leaves spawning to settle."""
        self.assertTrue(self.board.move(Direction.RIGHT))
        self.assertEqual(len(self.board.tiles), 1)
        self.assertFalse(self.board.move(Direction.LEFT))

        self.board.settle()
        self.assertTrue(self.board.is_ready)


class TestGameOverNotification(TestCase):
    """Test for the game-over notification."""

    def test_game_over_after_move(self):
        """Test if filling the last cell without merges ends the game."""
        listener = RecordingListener()
        board = TileBoard(BoardConfiguration(width=2, height=2, seed=0), listener=listener)
        board.place_tile(0, 0, 4)
        board.place_tile(1, 0, 2)
        board.place_tile(0, 1, 8)

        outcome = board.submit_move(Direction.RIGHT)

        # ##>: The only empty cell receives the spawn.
        self.assertEqual(outcome.spawned, (0, 1))
        self.assertTrue(outcome.game_over)
        self.assertEqual(listener.game_overs, 1)
        np.testing.assert_array_equal(board.snapshot(), np.array([[4, 2], [2, 8]]))

    def test_game_over_notified_before_ready(self):
        """Test if the listener hears of game over while the board is still settling."""
        listener = RecordingListener()
        board = TileBoard(BoardConfiguration(width=2, height=2, seed=0), listener=listener)
        listener.board = board
        board.place_tile(0, 0, 4)
        board.place_tile(1, 0, 2)
        board.place_tile(0, 1, 8)

        board.submit_move(Direction.RIGHT)

        self.assertEqual(listener.states_at_game_over, [BoardState.SETTLING])
        self.assertIs(board.state, BoardState.READY)

    def test_no_game_over_with_merge_left(self):
        """Test if a full board with a merge left is not over."""
        listener = RecordingListener()
        board = TileBoard(BoardConfiguration(width=2, height=2, seed=0), listener=listener)
        board.place_tile(0, 0, 2)
        board.place_tile(1, 0, 4)
        board.place_tile(0, 1, 8)

        outcome = board.submit_move(Direction.RIGHT)

        self.assertFalse(outcome.game_over)
        self.assertEqual(listener.game_overs, 0)


if __name__ == '__main__':
    main()
