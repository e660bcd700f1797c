import pytest
from console_apps.difficulty import DifficultyCatalog
from console_apps.schemas import SaveResult
from console_apps.storage import HighScoreStore
from console_apps.utils import Console

# The name 'conftest.py' is magic in Pytest.
# Everything defined here is available to every test in this folder.

class ScriptedConsole(Console):
    """
    A fake terminal: answers come from a list, everything printed is kept.
    Running out of answers behaves like a closed stdin (EOFError).
    """
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []
        super().__init__(input_function=self._next_answer, output_function=self.lines.append)

    def _next_answer(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("script ran out of answers")
        return self.answers.pop(0)

    @property
    def output(self):
        return "\n".join(self.lines)


class FixedRandom:
    """Stands in for random.Random when a test needs to know the secret."""
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        return self.value


class FakeStore:
    """In-memory high score store that remembers every save call."""
    def __init__(self, record=None, fail_with=None):
        self.record = record
        self.fail_with = fail_with
        self.saved = []

    def load(self):
        return self.record

    def save(self, record):
        self.saved.append(record)
        if self.fail_with:
            return SaveResult(success=False, message=self.fail_with)
        self.record = record
        return SaveResult(success=True)


class StubEngine:
    """Returns pre-decided round scores and notes which presets were played."""
    def __init__(self, scores):
        self.scores = list(scores)
        self.presets = []

    def play_round(self, preset):
        self.presets.append(preset)
        return self.scores.pop(0)


def frozen_clock(*readings):
    # Each call returns the next reading, so a round sees start and end times
    times = iter(readings)
    return lambda: next(times)


@pytest.fixture
def make_console():
    return ScriptedConsole


@pytest.fixture
def catalog():
    return DifficultyCatalog()


@pytest.fixture
def easy(catalog):
    return catalog.select('1')


@pytest.fixture
def medium(catalog):
    return catalog.select('2')


@pytest.fixture
def highscore_path(tmp_path):
    return tmp_path / "highscore.txt"


@pytest.fixture
def store(highscore_path):
    return HighScoreStore(highscore_path)
