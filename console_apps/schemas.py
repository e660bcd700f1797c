import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Annotated
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError
from console_apps.config import GameConfig, GradeConfig

# Error types raised by our own validators. Their messages are written for
# the player and can be shown as-is; anything else gets a generic re-prompt.
CUSTOM_ERROR_TYPES = {
    'out_of_range', 'negative_balance', 'amount_too_large',
    'not_positive', 'mark_out_of_range',
}

CENT = Decimal("0.01")

# Plain decimal digits with an optional sign. Stricter than pydantic's own
# str -> int coercion, which also takes "7.0" and "1_0".
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def require_integer_token(v):
    if not isinstance(v, str):
        return v
    if not INTEGER_TOKEN.fullmatch(v.strip()):
        raise PydanticCustomError('int_parsing', 'Input should be a valid integer')
    return int(v)


WholeNumber = Annotated[int, BeforeValidator(require_integer_token)]

# --- Game Values ---

# One difficulty tier. Frozen so a preset can never drift mid-session.
class DifficultyPreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    minimum: int
    maximum: int
    attempt_limit: int = Field(..., gt=0)
    score_multiplier: int = Field(..., gt=0)

    @model_validator(mode='after')
    def check_bounds(self):
        if self.minimum > self.maximum:
            raise ValueError('minimum must not be greater than maximum')
        return self

    @property
    def hint_radius(self) -> int:
        return max(1, (self.maximum - self.minimum) // 10)


# The single persisted record. The file format is "<name> <score>", so the
# name is squashed into one token before it ever reaches the disk.
class HighScoreRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = GameConfig.DEFAULT_PLAYER_NAME
    score: WholeNumber = Field(..., ge=0)

    @field_validator('name')
    @classmethod
    def normalise_name(cls, v):
        v = "_".join(v.split())
        return v or GameConfig.DEFAULT_PLAYER_NAME

    def to_line(self) -> str:
        return f"{self.name} {self.score}"


class SaveResult(BaseModel):
    success: bool
    message: str | None = None


class RoundScore(BaseModel):
    base: int = Field(..., ge=0)
    time_bonus: int = Field(..., ge=0)

    @property
    def total(self) -> int:
        return self.base + self.time_bonus


class SessionSummary(BaseModel):
    rounds_played: int = 0
    total_score: int = 0

# --- Console Input ---

# A guess only counts once it is an integer inside the preset's range
class GuessRequest(BaseModel):
    guess: WholeNumber
    minimum: int
    maximum: int

    @model_validator(mode='after')
    def check_range(self):
        if not self.minimum <= self.guess <= self.maximum:
            raise PydanticCustomError(
                'out_of_range',
                'Please enter a number between {minimum} and {maximum}.',
                {'minimum': self.minimum, 'maximum': self.maximum},
            )
        return self


class AmountRequest(BaseModel):
    amount: Decimal = Field(..., allow_inf_nan=False)

    # Cash is handled in cents, so round half-up like a till would
    @field_validator('amount')
    @classmethod
    def round_to_cents(cls, v):
        try:
            return v.quantize(CENT, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise PydanticCustomError('amount_too_large', 'That amount is too large.')


class OpeningBalanceRequest(AmountRequest):
    @model_validator(mode='after')
    def check_not_negative(self):
        if self.amount < 0:
            raise PydanticCustomError('negative_balance', 'Initial balance cannot be negative.')
        return self


class SubjectCountRequest(BaseModel):
    count: WholeNumber

    @field_validator('count')
    @classmethod
    def check_positive(cls, v):
        if v <= 0:
            raise PydanticCustomError(
                'not_positive', 'Please enter a positive integer for number of subjects.'
            )
        return v


class MarkRequest(BaseModel):
    mark: float = Field(..., allow_inf_nan=False)

    @field_validator('mark')
    @classmethod
    def check_range(cls, v):
        if not 0 <= v <= GradeConfig.MAX_MARK:
            raise PydanticCustomError(
                'mark_out_of_range',
                'Marks must be between 0 and {maximum}. Try again.',
                {'maximum': GradeConfig.MAX_MARK},
            )
        return v

# --- Reports ---

class Transaction(BaseModel):
    kind: str
    amount: Decimal
    balance_after: Decimal


class TransactionResult(BaseModel):
    success: bool
    message: str
    balance: Decimal


class GradeReport(BaseModel):
    subject_count: int = Field(..., gt=0)
    total: float
    max_total: float
    average: float
    grade: str
