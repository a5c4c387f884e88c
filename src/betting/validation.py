"""
Input validation for Kelly sizing

Every numeric field is checked before it reaches the Kelly formulas.
Checks return a ValidationResult instead of raising, so an interactive
caller can re-prompt and a one-shot caller can unwrap() into an exception.

Rates, prices and probabilities are entered as percentages (0-100).
"""

import math
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

sys.path.insert(0, str(Path(__file__).parent.parent.parent))
from config.settings import KELLY_CONFIG
from src.exceptions import DomainError, ParseError

RawInput = Union[str, float, int, None]


class RejectReason(str, Enum):
    """Why an input was rejected"""
    NOT_A_NUMBER = "not a number"
    ODDS_TOO_LOW = "odds too low"
    WIN_RATE_OUT_OF_RANGE = "win rate out of range"
    PRICE_OUT_OF_RANGE = "price out of range"
    PROBABILITY_OUT_OF_RANGE = "probability out of range"
    CAPITAL_NOT_POSITIVE = "capital must be positive"


@dataclass(frozen=True)
class ValidationResult:
    """Accept/reject decision for one input field"""
    accepted: bool
    value: Optional[float] = None  # Parsed value in input units
    reason: Optional[RejectReason] = None

    def unwrap(self) -> Optional[float]:
        """
        Return the accepted value or raise

        Raises:
            ParseError: input was not a number
            DomainError: input was out of range
        """
        if self.accepted:
            return self.value
        if self.reason is RejectReason.NOT_A_NUMBER:
            raise ParseError(self.reason)
        raise DomainError(self.reason)


def _accept(value: Optional[float]) -> ValidationResult:
    return ValidationResult(accepted=True, value=value)


def _reject(reason: RejectReason) -> ValidationResult:
    return ValidationResult(accepted=False, reason=reason)


def parse_number(raw: RawInput) -> Optional[float]:
    """
    Parse user input as a finite float

    Returns:
        The number, or None if it is not numeric (nan/inf count as non-numeric)
    """
    if raw is None:
        return None
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def _check(raw: RawInput, in_range, reason: RejectReason) -> ValidationResult:
    value = parse_number(raw)
    if value is None:
        return _reject(RejectReason.NOT_A_NUMBER)
    if not in_range(value):
        return _reject(reason)
    return _accept(value)


def validate_odds(raw: RawInput) -> ValidationResult:
    """Decimal odds must be greater than 1.0"""
    return _check(raw, lambda v: v > 1.0, RejectReason.ODDS_TOO_LOW)


def validate_win_rate(raw: RawInput) -> ValidationResult:
    """Win rate percentage must be within [0, 100]"""
    return _check(raw, lambda v: 0.0 <= v <= 100.0, RejectReason.WIN_RATE_OUT_OF_RANGE)


def validate_market_price(raw: RawInput) -> ValidationResult:
    """Market price percentage must be within (0, 100]"""
    return _check(raw, lambda v: 0.0 < v <= 100.0, RejectReason.PRICE_OUT_OF_RANGE)


def validate_probability(raw: RawInput) -> ValidationResult:
    """Probability percentage must be within [0, 100]"""
    return _check(raw, lambda v: 0.0 <= v <= 100.0, RejectReason.PROBABILITY_OUT_OF_RANGE)


def validate_capital(raw: RawInput) -> ValidationResult:
    """
    Capital is optional but must be positive when given

    None or blank text is accepted with value None. Callers treat a
    rejection as "no capital supplied" rather than a fatal error.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return _accept(None)
    return _check(raw, lambda v: v > 0.0, RejectReason.CAPITAL_NOT_POSITIVE)


def percent_to_probability(value: float) -> float:
    """Convert percentage input (60) to probability (0.60)"""
    return value / KELLY_CONFIG["percent_scale"]
