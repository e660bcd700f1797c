from console_apps.config import GameConfig
from console_apps.schemas import DifficultyPreset

class InvalidSelectionError(LookupError):
    """Raised when a menu token does not name any difficulty."""


class DifficultyCatalog:
    """Read-only table of the difficulty presets, built once from GameConfig."""

    def __init__(self, settings=None, selectors=None):
        settings = settings or GameConfig.DIFFICULTY_SETTINGS
        self.selectors = selectors or GameConfig.DIFFICULTY_SELECTORS
        self.presets = {key: DifficultyPreset(**values) for key, values in settings.items()}

    def select(self, token: str) -> DifficultyPreset:
        # Accept either the menu number ("2") or the preset name ("medium")
        key = token.strip().lower()
        key = self.selectors.get(key, key)
        if key not in self.presets:
            raise InvalidSelectionError(token)
        return self.presets[key]

    def menu_lines(self) -> list[str]:
        lines = []
        for selector, key in self.selectors.items():
            preset = self.presets[key]
            label = f"{preset.name:<6}"
            lines.append(
                f"{selector}) {label} ({preset.minimum}-{preset.maximum}, "
                f"{preset.attempt_limit} attempts, ×{preset.score_multiplier})"
            )
        return lines

    def prompt_text(self) -> str:
        return f"Enter {'/'.join(self.selectors)}: "
