import logging
import random
from dotenv import load_dotenv
from console_apps.config import get_highscore_path, get_log_level
from console_apps.utils import Console

def configure_logging() -> None:
    # Logs go to stderr so they never interleave with the game's prompts
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _prepare(console):
    # Load settings from the .env file (if any) before anything reads them
    load_dotenv()
    configure_logging()
    return console or Console()


def create_session(console=None, rng=None, store=None):
    console = _prepare(console)

    # Imported inside the factory so "import console_apps" stays light
    from console_apps.engine import RoundEngine
    from console_apps.session import SessionController
    from console_apps.storage import HighScoreStore

    store = store or HighScoreStore(get_highscore_path())
    engine = RoundEngine(console, rng=rng or random.Random())
    return SessionController(console, engine, store)


def create_atm(console=None):
    console = _prepare(console)

    from console_apps.atm import AtmMenu, open_account

    return AtmMenu(console, open_account(console))


def create_grade_calculator(console=None):
    console = _prepare(console)

    from console_apps.grades import GradeCalculator

    return GradeCalculator(console)
