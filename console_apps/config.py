import logging
import os

class GameConfig:
    # Keyed by preset name. Ranges are inclusive on both ends.
    DIFFICULTY_SETTINGS = {
        'easy':   {'name': 'Easy',   'minimum': 1, 'maximum': 20,   'attempt_limit': 8,  'score_multiplier': 1},
        'medium': {'name': 'Medium', 'minimum': 1, 'maximum': 100,  'attempt_limit': 7,  'score_multiplier': 2},
        'hard':   {'name': 'Hard',   'minimum': 1, 'maximum': 1000, 'attempt_limit': 10, 'score_multiplier': 3},
    }

    # Menu tokens shown to the player
    DIFFICULTY_SELECTORS = {'1': 'easy', '2': 'medium', '3': 'hard'}

    POINTS_PER_ATTEMPT = 10
    TIME_BONUS_SECONDS = 30

    DEFAULT_PLAYER_NAME = "Player"
    HIGHSCORE_FILE = "highscore.txt"
    AFFIRMATIVE_ANSWERS = ("y", "yes")


class AtmConfig:
    DEFAULT_HOLDER = "Demo User"
    DEFAULT_ACCOUNT_NUMBER = "00000000"
    STATEMENT_LENGTH = 5


class GradeConfig:
    MAX_MARK = 100
    # Checked top-down, first threshold the average reaches wins
    GRADE_BOUNDARIES = [
        ("A+", 90), ("A", 80), ("B", 70),
        ("C", 60), ("D", 50),
    ]
    FAILING_GRADE = "F"


def get_highscore_path() -> str:
    # Relative paths resolve against the working directory
    return os.environ.get("HIGHSCORE_FILE", GameConfig.HIGHSCORE_FILE)


def get_log_level() -> int:
    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "WARNING").upper())
    # Unknown names come back as "Level X" strings; quietly use the default
    return level if isinstance(level, int) else logging.WARNING
