import pytest

from tictactoe import AIPlayer, Cell, GameState, WinChecker


@pytest.fixture
def ai():
    return AIPlayer(Cell.COMPUTER)


@pytest.fixture
def win_checker():
    return WinChecker()


@pytest.fixture
def started_game():
    game = GameState(first_player=Cell.COMPUTER)
    game.start()
    return game
