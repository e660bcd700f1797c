from pydantic import ValidationError
from console_apps.config import GameConfig
from console_apps.schemas import CUSTOM_ERROR_TYPES

class Console:
    """
    Thin wrapper around line-based terminal I/O.
    Injected everywhere so tests can script the player's answers.
    """
    def __init__(self, input_function=input, output_function=print):
        self.input_function = input_function
        self.output_function = output_function

    def ask(self, prompt: str) -> str:
        return self.input_function(prompt).strip()

    def say(self, message: str = "") -> None:
        self.output_function(message)


def describe_validation_error(error: ValidationError, fallback: str) -> str:
    # Our own validators carry player-facing messages; pydantic's built-in
    # parsing errors are too technical to show, so use the fallback.
    details = error.errors()[0]
    if details['type'] in CUSTOM_ERROR_TYPES:
        return details['msg']
    return fallback


def ask_until_valid(console: Console, prompt: str, build, invalid_message: str):
    """
    Keeps asking until build(raw_line) succeeds and returns its result.
    build should raise ValidationError for anything it rejects.
    """
    while True:
        raw_line = console.ask(prompt)
        try:
            return build(raw_line)
        except ValidationError as error:
            console.say(describe_validation_error(error, invalid_message))


def is_affirmative(answer: str, accepted=GameConfig.AFFIRMATIVE_ANSWERS) -> bool:
    return answer.strip().lower() in accepted
