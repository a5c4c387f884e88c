"""
Kelly Criterion Bet Sizing

Optimal bet sizing for fixed-odds wagers and prediction-market contracts.

The Kelly criterion formula:
    f* = (b*p - q) / b
    EV = p*b - q

Where:
    f* = fraction of bankroll to bet
    b = net odds (decimal odds - 1)
    p = probability of winning
    q = 1 - p (probability of losing)

A prediction-market contract priced at m pays 1 per contract, so it is
a fixed-odds bet at decimal odds 1/m, i.e. b = (1 - m) / m.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

sys.path.insert(0, str(Path(__file__).parent.parent.parent))
from config.settings import KELLY_CONFIG


@dataclass(frozen=True)
class KellyResult:
    """Kelly recommendation for a single bet"""
    optimal_fraction: float  # Full Kelly, may be negative or above 1
    expected_value: float  # Profit per unit staked

    @property
    def positive_ev(self) -> bool:
        return self.expected_value > 0


def implied_odds(market_price: float) -> float:
    """
    Decimal odds implied by a binary contract price

    Args:
        market_price: Contract price (0-1], e.g. 0.60 for 60c

    Returns:
        Decimal odds (e.g., 0.50 -> 2.0)
    """
    return 1.0 / market_price


def net_odds_from_decimal(odds: float) -> float:
    """Net odds b for decimal odds (2.0 -> 1.0)"""
    return odds - 1.0


def net_odds_from_price(market_price: float) -> float:
    """Net odds b for a contract price (0.60 -> 0.667)"""
    return net_odds_from_decimal(implied_odds(market_price))


def _kelly_from_net_odds(net_odds: float, probability: float) -> KellyResult:
    b = net_odds
    p = probability
    q = 1.0 - p

    expected_value = p * b - q

    # Zero net odds (a contract priced at 1.0) can never profit
    if b <= 0:
        return KellyResult(optimal_fraction=0.0, expected_value=expected_value)

    optimal_fraction = (b * p - q) / b
    return KellyResult(optimal_fraction=optimal_fraction, expected_value=expected_value)


def compute_fixed_odds(odds: float, win_rate: float) -> KellyResult:
    """
    Calculate Kelly sizing for a fixed-odds bet

    Args:
        odds: Decimal odds, must be > 1.0 (e.g., 2.0 = even money)
        win_rate: Estimated probability of winning (0-1)

    Returns:
        KellyResult (fraction is negative when EV < 0)

    Examples:
        >>> compute_fixed_odds(2.0, 0.60).expected_value
        0.19999999999999996
        >>> compute_fixed_odds(5.0, 0.10).positive_ev
        False
    """
    return _kelly_from_net_odds(net_odds_from_decimal(odds), win_rate)


def compute_market_price(market_price: float, your_probability: float) -> KellyResult:
    """
    Calculate Kelly sizing for a prediction-market contract

    Args:
        market_price: Contract price (0-1], the market's implied probability
        your_probability: Your own estimate of the true probability (0-1)

    Returns:
        KellyResult, identical to compute_fixed_odds(1 / market_price, ...)
    """
    return _kelly_from_net_odds(net_odds_from_price(market_price), your_probability)


def fractional_stakes(
    optimal_fraction: float,
    capital: float,
    multipliers: Optional[Dict[str, float]] = None,
) -> Dict[str, float]:
    """
    Stake amounts for full and fractional Kelly

    Args:
        optimal_fraction: Full Kelly fraction
        capital: Bankroll to size against
        multipliers: Label -> Kelly multiplier (default: full/half/quarter)

    Returns:
        Label -> stake amount, empty when the fraction says not to bet
    """
    if optimal_fraction <= 0:
        return {}

    multipliers = multipliers or KELLY_CONFIG["kelly_multipliers"]
    return {
        label: capital * optimal_fraction * multiplier
        for label, multiplier in multipliers.items()
    }


if __name__ == "__main__":
    # Example usage
    print("Kelly Criterion Examples")
    print("=" * 50)

    print("\n1. Fixed odds: 2.0, win rate 60%")
    result = compute_fixed_odds(2.0, 0.60)
    print(f"   Kelly fraction: {result.optimal_fraction:.4f} ({result.optimal_fraction*100:.2f}%)")
    print(f"   EV: {result.expected_value:.2f}")

    print("\n2. Market price 60c, your probability 75%")
    result = compute_market_price(0.60, 0.75)
    print(f"   Implied odds: {implied_odds(0.60):.2f}")
    print(f"   Kelly fraction: {result.optimal_fraction:.4f}")

    print("\n3. Stakes with 10,000 capital:")
    for label, stake in fractional_stakes(result.optimal_fraction, 10000).items():
        print(f"   {label}: {stake:,.2f}")
