import logging
from pathlib import Path
from pydantic import ValidationError
from console_apps.schemas import HighScoreRecord, SaveResult

logger = logging.getLogger(__name__)

class HighScoreStore:
    """
    Keeps the single best score in a flat text file: "<name> <score>".
    Reading fails soft (a broken file just means "no record yet") and
    writing reports failures back instead of raising.
    """

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> HighScoreRecord | None:
        try:
            content = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as error:
            logger.info(f"High score file unreadable, ignoring it: {error}")
            return None

        tokens = content.split()
        if len(tokens) != 2:
            if content:
                logger.info(f"High score file malformed, ignoring it: {content!r}")
            return None

        name, score = tokens
        try:
            return HighScoreRecord(name=name, score=score)
        except ValidationError:
            logger.info(f"High score file has a bad score, ignoring it: {content!r}")
            return None

    def save(self, record: HighScoreRecord) -> SaveResult:
        # write_text truncates first, so the old record never survives a save
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(record.to_line(), encoding="utf-8")
        except OSError as error:
            logger.error(f"Failed to save high score to {self.path}: {error}")
            return SaveResult(success=False, message=str(error))

        logger.info(f"Saved high score {record.score} for {record.name}")
        return SaveResult(success=True)
