"""
Game configuration for TicTacToe.
All the settings for the board, turn order, display and logging.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the defaults!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid (other sizes are not supported)
    BOARD_SIZE = 3

    # ==================== TURN ORDER ====================
    # The computer opens the game unless the human is asked to go first
    COMPUTER_FIRST = True

    # ==================== DISPLAY SETTINGS ====================
    EMPTY_SYMBOL = "-"
    COMPUTER_SYMBOL = "X"
    HUMAN_SYMBOL = "O"

    # ==================== LOGGING ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
