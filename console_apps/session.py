import logging
from console_apps.difficulty import DifficultyCatalog, InvalidSelectionError
from console_apps.engine import RoundEngine
from console_apps.schemas import DifficultyPreset, HighScoreRecord, SessionSummary
from console_apps.storage import HighScoreStore
from console_apps.utils import Console, is_affirmative

logger = logging.getLogger(__name__)

class SessionController:
    """
    Runs rounds back to back until the player stops, keeping the running
    total and writing the high score whenever a round beats it.
    """

    def __init__(self, console: Console, engine: RoundEngine, store: HighScoreStore, catalog=None):
        self.console = console
        self.engine = engine
        self.store = store
        self.catalog = catalog or DifficultyCatalog()
        self.summary = None

    def run(self) -> SessionSummary:
        self.summary = SessionSummary()
        self.console.say("=== NUMBER GAME ===")
        self.show_current_high_score()

        while True:
            preset = self.choose_difficulty()
            round_score = self.engine.play_round(preset)
            self.summary.rounds_played += 1
            self.summary.total_score += round_score

            if round_score > 0:
                self.record_if_high_score(round_score)

            self.console.say(
                f"Total score after {self.summary.rounds_played} rounds: {self.summary.total_score}"
            )
            answer = self.console.ask("Play again? (y/n): ")
            if not is_affirmative(answer):
                break

        self.console.say(
            f"Thanks for playing! Rounds: {self.summary.rounds_played}, "
            f"Total score: {self.summary.total_score}"
        )
        logger.info(f"Session ended after {self.summary.rounds_played} rounds")
        return self.summary

    def show_current_high_score(self) -> None:
        current = self.store.load()
        if current is not None:
            self.console.say(f"Current high score: {current.score} by {current.name}")
        else:
            self.console.say("No high score yet. Set the first one!")

    def choose_difficulty(self) -> DifficultyPreset:
        self.console.say()
        self.console.say("Choose difficulty:")
        for line in self.catalog.menu_lines():
            self.console.say(line)

        while True:
            token = self.console.ask(self.catalog.prompt_text())
            try:
                return self.catalog.select(token)
            except InvalidSelectionError:
                self.console.say("Invalid choice. Try again.")

    def record_if_high_score(self, round_score: int) -> bool:
        # Re-read every time, the file is the source of truth
        current = self.store.load()
        if current is not None and round_score <= current.score:
            return False

        name = self.console.ask("New high score! Enter your name: ")
        record = HighScoreRecord(name=name, score=round_score)
        result = self.store.save(record)
        if result.success:
            self.console.say(f"Saved high score: {record.name} {record.score}")
        else:
            self.console.say(f"Failed to save high score: {result.message}")
        return result.success
