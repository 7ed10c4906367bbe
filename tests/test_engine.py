# Area: Engine Tests
"""Tests for GameEngine turn sequencing, end states and persistence."""

import pytest
from unittest.mock import Mock, call, patch
from tictactoe_engine._engine.controller import GameEngine
from tictactoe_engine._engine.enums import GameStatus
from tictactoe_engine._engine.players import create_computer_player, create_human_player
from tictactoe_engine._persistence.result_log import FileResultLog
from tictactoe_engine.errors import InvalidMoveError, PersistenceError


@pytest.fixture
def x():
    return create_human_player("Player X", "X")


@pytest.fixture
def o():
    return create_human_player("Player O", "O")


@pytest.fixture
def log(tmp_path):
    return FileResultLog(tmp_path / "game_data.txt")


@pytest.fixture
def engine(x, o, log):
    engine = GameEngine(3, result_log=log)
    engine.add_player(x)
    engine.add_player(o)
    engine.start_new_game()
    return engine


def play(engine, moves):
    for row, col in moves:
        engine.submit_move(row, col)


# X: (0,0) (0,1) (0,2); O: (1,0) (1,1)
X_WINS_TOP_ROW = [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]
# Final board: X O X / X O O / O X X
TIE_GAME = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


class TestEngineSetup:
    """Tests for initial state and new games."""

    def test_initial_state(self, engine, x):
        assert engine.get_current_player() is x
        assert engine.is_game_over() is False
        assert engine.get_winner() is None
        assert engine.status is GameStatus.IN_PROGRESS
        assert engine.get_board().size == 3

    def test_no_players_means_no_current_player(self):
        assert GameEngine(3).get_current_player() is None

    def test_submit_without_players_is_noop(self):
        engine = GameEngine(3)
        engine.submit_move(0, 0)
        assert engine.get_board().is_valid_move(0, 0) is True

    def test_players_view_keeps_order(self, engine, x, o):
        assert engine.players == (x, o)

    def test_start_new_game_notifies_update(self, engine):
        observer = Mock()
        engine.add_observer(observer)
        engine.start_new_game()
        observer.on_game_updated.assert_called_once_with(GameStatus.IN_PROGRESS)

    def test_start_new_game_resets_everything(self, engine, x):
        play(engine, X_WINS_TOP_ROW)
        board = engine.get_board()
        assert engine.is_game_over() is True

        engine.start_new_game()

        assert engine.get_board() is board
        assert engine.is_game_over() is False
        assert engine.get_winner() is None
        assert engine.get_current_player() is x
        assert board.empty_cells() == [(r, c) for r in range(3) for c in range(3)]


class TestTurnOrder:
    """Tests for turn advancement."""

    def test_legal_move_advances_turn(self, engine, o):
        engine.submit_move(1, 1)
        assert engine.get_current_player() is o

    def test_turn_wraps_around(self, engine, x):
        play(engine, [(0, 0), (2, 2)])
        assert engine.get_current_player() is x

    def test_three_players_rotate_in_list_order(self, x, o):
        z = create_human_player("Player Z", "Z")
        engine = GameEngine(4)
        for player in (x, o, z):
            engine.add_player(player)
        engine.start_new_game()

        seen = []
        for col in range(3):
            seen.append(engine.get_current_player())
            engine.submit_move(0, col)
        seen.append(engine.get_current_player())

        assert seen == [x, o, z, x]

    def test_invalid_move_keeps_turn_and_is_silent(self, engine, o):
        engine.submit_move(1, 1)
        observer = Mock()
        engine.add_observer(observer)

        engine.submit_move(1, 1)
        engine.submit_move(5, 5)

        assert engine.get_current_player() is o
        observer.on_move_made.assert_not_called()
        observer.on_game_updated.assert_not_called()

    def test_invalid_move_is_logged_and_reported(self, x, o):
        handler = Mock()
        engine = GameEngine(3, on_invalid_move=handler)
        engine.add_player(x)
        engine.add_player(o)
        engine.start_new_game()

        with patch("tictactoe_engine._engine.controller.logger") as mock_logger:
            engine.submit_move(-1, 0)
            mock_logger.warning.assert_called_once()

        handler.assert_called_once()
        error = handler.call_args[0][0]
        assert isinstance(error, InvalidMoveError)
        assert error.player_name == "Player X"

    def test_invalid_move_does_not_raise(self, engine):
        engine.submit_move(9, 9)

    @pytest.mark.parametrize("row,col", [(0.5, 0), (None, 0), ("1", 0)])
    def test_non_integer_move_is_rejected(self, engine, x, row, col):
        engine.submit_move(row, col)

        assert engine.get_current_player() is x
        assert len(engine.get_board().empty_cells()) == 9

    def test_move_notification_precedes_update(self, engine, x):
        observer = Mock()
        engine.add_observer(observer)

        engine.submit_move(0, 0)

        assert observer.mock_calls == [
            call.on_move_made(0, 0, x),
            call.on_game_updated(GameStatus.IN_PROGRESS),
        ]

    def test_board_snapshot_is_read_only(self, engine):
        engine.submit_move(1, 1)

        snapshot = engine.get_board().snapshot()

        assert snapshot[1][1] == "X"
        with pytest.raises(TypeError):
            snapshot[0][0] = "O"
        assert engine.get_board().is_valid_move(0, 0) is True


class TestWin:
    """Tests for the winning path."""

    def test_x_wins_top_row(self, engine, x, log):
        observer = Mock()
        engine.add_observer(observer)

        play(engine, X_WINS_TOP_ROW)

        assert engine.get_board().check_win() is True
        assert engine.is_game_over() is True
        assert engine.get_winner() is x
        assert engine.status is GameStatus.WON
        observer.on_game_over.assert_called_once_with(x)
        assert observer.mock_calls[-2:] == [
            call.on_move_made(0, 2, x),
            call.on_game_over(x),
        ]

        history = log.load_all()
        assert [r.outcome for r in history] == ["Player X won"]

    def test_moves_after_game_over_are_ignored(self, engine, x):
        play(engine, X_WINS_TOP_ROW)
        observer = Mock()
        engine.add_observer(observer)

        engine.submit_move(2, 2)

        assert engine.get_board().is_valid_move(2, 2) is True
        assert engine.get_winner() is x
        observer.on_move_made.assert_not_called()

    def test_game_over_fires_once(self, engine):
        observer = Mock()
        engine.add_observer(observer)
        play(engine, X_WINS_TOP_ROW + [(2, 2), (2, 1)])
        assert observer.on_game_over.call_count == 1


class TestTie:
    """Tests for the tie path."""

    def test_full_board_without_line_is_tie(self, engine, log):
        observer = Mock()
        engine.add_observer(observer)

        play(engine, TIE_GAME)

        board = engine.get_board()
        assert board.check_win() is False
        assert board.is_full() is True
        assert engine.is_game_over() is True
        assert engine.get_winner() is None
        assert engine.status is GameStatus.TIE
        observer.on_game_over.assert_called_once_with(None)
        assert [r.outcome for r in log.load_all()] == ["Tie"]

    def test_win_on_last_cell_is_not_a_tie(self, engine, x):
        # X O X / O X O / O X X -> X completes the main diagonal on the last cell
        play(engine, [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 1), (2, 0), (2, 2)])
        assert engine.get_board().is_full() is True
        assert engine.get_winner() is x


class TestPersistence:
    """Tests for result logging from the engine."""

    def test_results_accumulate_across_games(self, engine, log):
        play(engine, X_WINS_TOP_ROW)
        engine.start_new_game()
        play(engine, TIE_GAME)

        assert [r.outcome for r in engine.load_game_history()] == ["Player X won", "Tie"]

    def test_append_failure_does_not_block_completion(self, x, o):
        failing_log = Mock()
        failing_log.append.side_effect = PersistenceError("disk full", "game_data.txt")
        engine = GameEngine(3, result_log=failing_log)
        engine.add_player(x)
        engine.add_player(o)
        engine.start_new_game()
        observer = Mock()
        engine.add_observer(observer)

        with patch("tictactoe_engine._engine.controller.logger") as mock_logger:
            play(engine, X_WINS_TOP_ROW)
            mock_logger.error.assert_called_once()

        assert engine.is_game_over() is True
        assert engine.get_winner() is x
        observer.on_game_over.assert_called_once_with(x)
        failing_log.append.assert_called_once()

    def test_load_failure_propagates(self, x):
        failing_log = Mock()
        failing_log.load_all.side_effect = PersistenceError("unreadable")
        engine = GameEngine(3, result_log=failing_log)

        with pytest.raises(PersistenceError):
            engine.load_game_history()

    def test_no_result_log_means_empty_history(self, x, o):
        engine = GameEngine(3)
        engine.add_player(x)
        engine.add_player(o)
        engine.start_new_game()
        play(engine, X_WINS_TOP_ROW)
        assert engine.is_game_over() is True
        assert engine.load_game_history() == []


class TestAutomaticPlay:
    """Tests for play_automatic_move."""

    def test_computer_plays_first_empty_cell(self, x, log):
        bot = create_computer_player("Computer", "O")
        engine = GameEngine(3, result_log=log)
        engine.add_player(x)
        engine.add_player(bot)
        engine.start_new_game()

        engine.submit_move(0, 0)
        assert engine.play_automatic_move() == (0, 1)
        assert engine.get_board().get_cell(0, 1).player is bot
        assert engine.get_current_player() is x

    def test_human_turn_is_reported_not_played(self, x, o):
        handler = Mock()
        engine = GameEngine(3, on_invalid_move=handler)
        engine.add_player(x)
        engine.add_player(o)
        engine.start_new_game()

        assert engine.play_automatic_move() is None
        handler.assert_called_once()
        assert engine.get_board().empty_cells() == [(r, c) for r in range(3) for c in range(3)]

    def test_two_computers_finish_a_game(self, log):
        first = create_computer_player("Bot 1", "X")
        second = create_computer_player("Bot 2", "O")
        engine = GameEngine(3, result_log=log)
        engine.add_player(first)
        engine.add_player(second)
        engine.start_new_game()

        moves = 0
        while not engine.is_game_over():
            assert engine.play_automatic_move() is not None
            moves += 1

        # Row-major filling gives X the anti-diagonal on move 7
        assert moves == 7
        assert engine.get_winner() is first
        assert engine.play_automatic_move() is None
        assert [r.outcome for r in log.load_all()] == ["Bot 1 won"]
