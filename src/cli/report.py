"""
Kelly result report generation

Renders a KellyResult as the boxed text report shown by the CLI
"""

import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent.parent))
from config.settings import KELLY_CONFIG
from src.betting.kelly import KellyResult, fractional_stakes, implied_odds
from src.cli.messages import get_messages

BRANCH = "    ├─ "
LAST = "    └─ "


def format_pct(value: float) -> str:
    """Format a fraction as a percentage (0.6 -> '60.00%')"""
    return f"{value * 100:.2f}%"


def separator() -> str:
    return "─" * KELLY_CONFIG["separator_width"]


def _tree(lines: List[str]) -> List[str]:
    return [(LAST if i == len(lines) - 1 else BRANCH) + line for i, line in enumerate(lines)]


def _banner(*titles: str) -> List[str]:
    width = KELLY_CONFIG["separator_width"]
    return [separator()] + [t.center(width).rstrip() for t in titles] + [separator()]


def format_title(market: bool = False, lang: str = "en") -> str:
    """
    Title banner shown when interactive mode starts

    Args:
        market: Prediction-market mode instead of fixed odds
        lang: Language tag

    Returns:
        Banner text followed by a blank line
    """
    msgs = get_messages(lang)
    titles = msgs["title_market"] if market else msgs["title_fixed"]
    return "\n".join(_banner(*titles) + [""])


def format_position(optimal_fraction: float, lang: str = "en") -> str:
    """Position size line; the raw fraction is clamped for display only"""
    msgs = get_messages(lang)
    if optimal_fraction <= 0:
        return msgs["position_none"]
    if optimal_fraction > 1.0:
        return msgs["position_leveraged"]
    return msgs["position"].format(fraction=format_pct(optimal_fraction))


def _analysis_lines(result: KellyResult, lang: str) -> List[str]:
    msgs = get_messages(lang)
    status = msgs["status_positive"] if result.positive_ev else msgs["status_negative"]
    lines = ["  " + msgs["analysis"]]
    lines += _tree([
        msgs["expected_value"].format(ev=format_pct(result.expected_value)),
        status,
        format_position(result.optimal_fraction, lang),
    ])
    lines.append("")
    return lines


def _capital_lines(result: KellyResult, capital: Optional[float], lang: str) -> List[str]:
    if capital is None:
        return []

    msgs = get_messages(lang)
    lines = ["  " + msgs["capital_header"].format(capital=capital)]

    stakes = fractional_stakes(result.optimal_fraction, capital)
    if stakes:
        lines += _tree([
            msgs.get(f"stake_{label}", label + ": {amount:.2f}").format(amount=amount)
            for label, amount in stakes.items()
        ])
    else:
        lines += _tree([msgs["no_bet"]])

    lines.append("")
    return lines


def _report(heading: str, input_lines: List[str], result: KellyResult,
            capital: Optional[float], lang: str) -> str:
    msgs = get_messages(lang)
    lines = [""] + _banner(heading) + [""]
    lines.append("  " + msgs["input"])
    lines += _tree(input_lines)
    lines.append("")
    lines += _analysis_lines(result, lang)
    lines += _capital_lines(result, capital, lang)
    lines.append(separator())
    return "\n".join(lines)


def format_fixed_odds_report(
    odds: float,
    win_rate: float,
    result: KellyResult,
    capital: Optional[float] = None,
    lang: str = "en",
) -> str:
    """
    Report for a fixed-odds calculation

    Args:
        odds: Decimal odds
        win_rate: Win probability (0-1)
        result: Output of compute_fixed_odds
        capital: Optional bankroll for stake amounts
        lang: Language tag

    Returns:
        Report text
    """
    msgs = get_messages(lang)
    input_lines = [
        msgs["odds"].format(odds=odds),
        msgs["net_odds"].format(net_odds=odds - 1.0),
        msgs["win_rate"].format(win_rate=format_pct(win_rate)),
    ]
    return _report(msgs["result_fixed"], input_lines, result, capital, lang)


def format_market_report(
    market_price: float,
    your_probability: float,
    result: KellyResult,
    capital: Optional[float] = None,
    lang: str = "en",
) -> str:
    """
    Report for a prediction-market calculation

    Args:
        market_price: Contract price (0-1]
        your_probability: Your probability estimate (0-1)
        result: Output of compute_market_price
        capital: Optional bankroll for stake amounts
        lang: Language tag

    Returns:
        Report text
    """
    msgs = get_messages(lang)
    input_lines = [
        msgs["market_price"].format(price=format_pct(market_price)),
        msgs["your_probability"].format(probability=format_pct(your_probability)),
        msgs["implied_odds"].format(odds=implied_odds(market_price)),
    ]
    return _report(msgs["result_market"], input_lines, result, capital, lang)
