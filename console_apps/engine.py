import logging
import random
import time
from dataclasses import dataclass
from console_apps.config import GameConfig
from console_apps.schemas import DifficultyPreset, GuessRequest, RoundScore
from console_apps.utils import Console, ask_until_valid

logger = logging.getLogger(__name__)

# Lives only while a round is being played
@dataclass
class RoundState:
    secret: int
    attempts_remaining: int
    start_time: float
    previous_distance: int | None = None
    attempts_used: int = 0


def calculate_round_score(preset: DifficultyPreset, attempts_used: int, elapsed_seconds: int) -> RoundScore:
    # Fewer attempts and harder presets pay more; answering quickly adds a bonus
    unused_attempts = max(0, preset.attempt_limit - attempts_used + 1)
    base = unused_attempts * preset.score_multiplier * GameConfig.POINTS_PER_ATTEMPT
    time_bonus = max(0, GameConfig.TIME_BONUS_SECONDS - elapsed_seconds)
    return RoundScore(base=base, time_bonus=time_bonus)


def distance_feedback(current_distance: int, previous_distance: int | None, hint_radius: int) -> str | None:
    if previous_distance is None:
        # First miss: there is nothing to compare with, so only say if it was close
        if current_distance <= hint_radius:
            return "Very close!"
        return None
    if current_distance < previous_distance:
        return "You're getting warmer (closer) than last guess."
    if current_distance > previous_distance:
        return "You're getting colder (farther) than last guess."
    return "Same distance as last guess."


class RoundEngine:
    """
    Plays one round of the guessing game against the console.

    The random source and clock are injected so a round can be replayed
    deterministically in tests.
    """

    def __init__(self, console: Console, rng=None, clock=time.monotonic):
        self.console = console
        self.rng = rng or random.Random()
        self.clock = clock

    def draw_secret(self, preset: DifficultyPreset) -> int:
        return self.rng.randint(preset.minimum, preset.maximum)

    def prompt_guess(self, preset: DifficultyPreset) -> int:
        def build(raw_line):
            return GuessRequest(guess=raw_line, minimum=preset.minimum, maximum=preset.maximum).guess

        return ask_until_valid(
            self.console,
            f"Enter your guess ({preset.minimum}-{preset.maximum}): ",
            build,
            "Please enter a valid integer.",
        )

    def play_round(self, preset: DifficultyPreset) -> int:
        state = RoundState(
            secret=self.draw_secret(preset),
            attempts_remaining=preset.attempt_limit,
            start_time=self.clock(),
        )
        logger.debug(f"Round started on {preset.name} ({preset.minimum}-{preset.maximum})")

        self.console.say()
        self.console.say(
            f"I've picked a number between {preset.minimum} and {preset.maximum}. "
            f"You have {preset.attempt_limit} attempts."
        )

        while state.attempts_remaining > 0:
            guess = self.prompt_guess(preset)
            state.attempts_used += 1

            if guess == state.secret:
                return self._finish_win(preset, state)

            self.console.say("Too high." if guess > state.secret else "Too low.")

            current_distance = abs(state.secret - guess)
            hint = distance_feedback(current_distance, state.previous_distance, preset.hint_radius)
            if hint:
                self.console.say(hint)
            state.previous_distance = current_distance

            state.attempts_remaining -= 1
            self.console.say(f"Attempts left: {state.attempts_remaining}")
            self.console.say()

        self.console.say(f"😞 Out of attempts. The number was {state.secret}.")
        self.console.say()
        logger.debug(f"Round lost after {state.attempts_used} attempts")
        return 0

    def _finish_win(self, preset: DifficultyPreset, state: RoundState) -> int:
        # Whole seconds only, fractions are dropped
        elapsed_seconds = int(self.clock() - state.start_time)
        score = calculate_round_score(preset, state.attempts_used, elapsed_seconds)

        self.console.say(
            f"🎉 Correct! The number was {state.secret}. "
            f"Attempts used: {state.attempts_used}. Time: {elapsed_seconds}s"
        )
        self.console.say(
            f"Round score: {score.total} (base {score.base} + time bonus {score.time_bonus})"
        )
        self.console.say()
        logger.debug(f"Round won in {state.attempts_used} attempts, score {score.total}")
        return score.total
