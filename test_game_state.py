"""Tests for the board and game state model."""

import pytest

from tictactoe import Board, Cell, GameState, Move, Phase, PhaseKind


def play(game, moves):
    for row, col in moves:
        game.attempt_move(row, col)
    return game


# X O X / X O O / O X X, ordered X, O, X, O, ... so no line appears early
DRAW_SEQUENCE = [
    (0, 0), (0, 1),
    (0, 2), (1, 1),
    (1, 0), (1, 2),
    (2, 1), (2, 0),
    (2, 2),
]


def test_cell_opposite():
    assert Cell.COMPUTER.opposite() == Cell.HUMAN
    assert Cell.HUMAN.opposite() == Cell.COMPUTER
    assert Cell.EMPTY.opposite() == Cell.EMPTY


def test_board_starts_empty():
    board = Board()
    assert list(board) == [Cell.EMPTY] * 9
    assert len(board.empty_cells()) == 9
    assert not board.is_full()


def test_board_place_and_clear():
    board = Board()
    board.place(1, 2, Cell.HUMAN)
    assert board.get(1, 2) == Cell.HUMAN
    assert (1, 2) not in board.empty_cells()

    board.clear(1, 2)
    assert board == Board()


def test_board_rejects_occupied_cell():
    board = Board()
    board.place(0, 0, Cell.COMPUTER)
    with pytest.raises(ValueError):
        board.place(0, 0, Cell.HUMAN)
    assert board.get(0, 0) == Cell.COMPUTER


def test_board_rejects_empty_mark():
    with pytest.raises(ValueError):
        Board().place(0, 0, Cell.EMPTY)


def test_board_rejects_positions_off_the_board():
    board = Board()
    with pytest.raises(ValueError):
        board.place(-1, 0, Cell.HUMAN)
    with pytest.raises(ValueError):
        board.place(0, 3, Cell.HUMAN)
    with pytest.raises(ValueError):
        board.get(0, -1)
    with pytest.raises(ValueError):
        board.clear(-1, -1)
    assert board == Board()


def test_board_from_rows_is_row_major():
    board = Board.from_rows(["X--", "-O-", "--X"])
    assert list(board)[0] == Cell.COMPUTER
    assert list(board)[4] == Cell.HUMAN
    assert list(board)[8] == Cell.COMPUTER
    assert board.empty_cells()[0] == (0, 1)
    assert board.count(Cell.COMPUTER) == 2


def test_board_from_rows_rejects_bad_input():
    with pytest.raises(ValueError):
        Board.from_rows(["XX", "---", "---"])
    with pytest.raises(ValueError):
        Board.from_rows(["X?-", "---", "---"])


def test_board_copy_is_independent():
    board = Board.from_rows(["X--", "---", "---"])
    clone = board.copy()
    clone.place(2, 2, Cell.HUMAN)
    assert board.get(2, 2) == Cell.EMPTY
    assert board != clone


def test_board_render():
    text = Board.from_rows(["XO-", "---", "--X"]).render()
    assert text.splitlines() == ["  0 1 2", "0 X O -", "1 - - -", "2 - - X"]


def test_phase_flags():
    assert not Phase.ready().is_playable
    assert not Phase.ready().is_terminal
    assert Phase.turn(Cell.HUMAN).is_playable
    assert Phase.invalid_retry(Cell.HUMAN).is_playable
    assert Phase.won(Cell.HUMAN).is_terminal
    assert Phase.draw().is_terminal
    assert not Phase.draw().is_playable


def test_new_game_is_ready():
    game = GameState()
    assert game.phase() == Phase.ready()
    assert game.board() == Board()
    assert game.current_player is None


def test_move_ignored_before_start():
    game = GameState()
    game.attempt_move(1, 1)
    assert game.phase() == Phase.ready()
    assert game.board() == Board()


def test_start_gives_first_turn_to_computer_by_default():
    game = GameState()
    game.start()
    assert game.phase() == Phase.turn(Cell.COMPUTER)


def test_start_with_human_first():
    game = GameState(first_player=Cell.HUMAN)
    game.start()
    assert game.phase() == Phase.turn(Cell.HUMAN)


def test_start_only_from_ready(started_game):
    started_game.attempt_move(0, 0)
    started_game.start()
    assert started_game.phase() == Phase.turn(Cell.HUMAN)


def test_empty_first_player_rejected():
    with pytest.raises(ValueError):
        GameState(first_player=Cell.EMPTY)


def test_board_and_phase_are_not_constructor_arguments():
    with pytest.raises(TypeError):
        GameState(_phase=Phase.won(Cell.HUMAN))
    with pytest.raises(TypeError):
        GameState(_board=Board.from_rows(["XXX", "---", "---"]))


def test_turns_alternate(started_game):
    started_game.attempt_move(0, 0)
    assert started_game.phase() == Phase.turn(Cell.HUMAN)
    assert started_game.current_player == Cell.HUMAN

    started_game.attempt_move(1, 1)
    assert started_game.phase() == Phase.turn(Cell.COMPUTER)

    board = started_game.board()
    assert board.get(0, 0) == Cell.COMPUTER
    assert board.get(1, 1) == Cell.HUMAN
    assert started_game.moves == [
        Move(player=Cell.COMPUTER, row=0, col=0, move_number=0),
        Move(player=Cell.HUMAN, row=1, col=1, move_number=1),
    ]


def test_occupied_cell_means_retry(started_game):
    started_game.attempt_move(0, 0)
    before = started_game.board()

    started_game.attempt_move(0, 0)

    assert started_game.phase() == Phase.invalid_retry(Cell.HUMAN)
    assert started_game.board() == before
    assert len(started_game.moves) == 1


def test_retry_then_valid_move(started_game):
    play(started_game, [(0, 0), (0, 0), (0, 0)])
    assert started_game.phase() == Phase.invalid_retry(Cell.HUMAN)

    started_game.attempt_move(2, 2)
    assert started_game.phase() == Phase.turn(Cell.COMPUTER)
    assert started_game.board().get(2, 2) == Cell.HUMAN


def test_out_of_range_move_raises(started_game):
    with pytest.raises(ValueError):
        started_game.attempt_move(3, 0)
    with pytest.raises(ValueError):
        started_game.attempt_move(-1, 0)
    assert started_game.board() == Board()
    assert started_game.phase() == Phase.turn(Cell.COMPUTER)


def test_row_win(started_game):
    play(started_game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert started_game.phase() == Phase.won(Cell.COMPUTER)
    assert started_game.winning_line() == [(0, 0), (0, 1), (0, 2)]
    assert started_game.current_player is None


def test_anti_diagonal_win_for_human():
    game = GameState(first_player=Cell.HUMAN)
    game.start()
    play(game, [(0, 2), (0, 0), (1, 1), (0, 1), (2, 0)])
    assert game.phase() == Phase.won(Cell.HUMAN)
    assert game.winning_line() == [(0, 2), (1, 1), (2, 0)]


def test_moves_ignored_after_win(started_game):
    play(started_game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    board = started_game.board()

    started_game.attempt_move(2, 2)

    assert started_game.phase() == Phase.won(Cell.COMPUTER)
    assert started_game.board() == board


def test_draw(started_game):
    play(started_game, DRAW_SEQUENCE)

    assert started_game.phase() == Phase.draw()
    assert started_game.board() == Board.from_rows(["XOX", "XOO", "OXX"])
    assert started_game.board().is_full()
    assert started_game.winning_line() is None


def test_occupied_count_never_decreases(started_game):
    seen = 0
    for row, col in [(1, 1), (1, 1), (0, 0), (2, 2), (0, 0)] + DRAW_SEQUENCE:
        started_game.attempt_move(row, col)
        occupied = 9 - len(started_game.board().empty_cells())
        assert occupied >= seen
        seen = occupied


def test_accessors_are_idempotent(started_game):
    started_game.attempt_move(1, 1)
    assert started_game.board() == started_game.board()
    assert started_game.phase() == started_game.phase()


def test_board_accessor_returns_copy(started_game):
    snapshot = started_game.board()
    snapshot.place(0, 0, Cell.HUMAN)
    assert started_game.board().get(0, 0) == Cell.EMPTY


def test_reset_is_non_destructive(started_game):
    started_game.attempt_move(1, 1)
    fresh = started_game.reset()

    assert fresh.phase() == Phase.ready()
    assert fresh.board() == Board()
    assert started_game.board().get(1, 1) == Cell.COMPUTER


def test_reset_then_start_matches_new_game():
    for first in (Cell.COMPUTER, Cell.HUMAN):
        played = GameState(first_player=first)
        played.start()
        play(played, DRAW_SEQUENCE)

        again = played.reset()
        again.start()
        fresh = GameState(first_player=first)
        fresh.start()

        assert again.phase() == fresh.phase()
        assert again.board() == fresh.board()


def test_from_board_resumes_position():
    game = GameState.from_board(Board.from_rows(["XX-", "OO-", "---"]), Cell.COMPUTER)
    assert game.phase() == Phase.turn(Cell.COMPUTER)

    game.attempt_move(0, 2)
    assert game.phase() == Phase.won(Cell.COMPUTER)


def test_from_board_detects_finished_positions():
    won = GameState.from_board(Board.from_rows(["OOO", "XX-", "X--"]), Cell.COMPUTER)
    assert won.phase() == Phase.won(Cell.HUMAN)

    drawn = GameState.from_board(Board.from_rows(["XOX", "XOO", "OXX"]), Cell.COMPUTER)
    assert drawn.phase() == Phase.draw()
    assert drawn.phase().kind == PhaseKind.DRAW
