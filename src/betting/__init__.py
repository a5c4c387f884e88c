"""
Betting Strategy Module

Kelly criterion sizing for fixed odds and prediction markets,
plus the input checks that guard it
"""

from src.betting.kelly import (
    KellyResult,
    compute_fixed_odds,
    compute_market_price,
    fractional_stakes,
    implied_odds,
)
from src.betting.validation import (
    RejectReason,
    ValidationResult,
    validate_odds,
    validate_win_rate,
    validate_market_price,
    validate_probability,
    validate_capital,
    percent_to_probability,
)

__all__ = [
    "KellyResult",
    "compute_fixed_odds",
    "compute_market_price",
    "fractional_stakes",
    "implied_odds",
    "RejectReason",
    "ValidationResult",
    "validate_odds",
    "validate_win_rate",
    "validate_market_price",
    "validate_probability",
    "validate_capital",
    "percent_to_probability",
]
