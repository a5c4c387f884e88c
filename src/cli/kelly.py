#!/usr/bin/env python
"""
Kelly Criterion Calculator CLI

Usage:
    uv run python -m src.cli.kelly                   # Interactive mode
    uv run python -m src.cli.kelly 2.0 60            # Odds 2.0, 60% win rate
    uv run python -m src.cli.kelly 2.0 60 10000      # With capital
    uv run python -m src.cli.kelly -p 60 75          # Market 60c, you think 75%
    uv run python -m src.cli.kelly -z -p             # Chinese, market interactive
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from config.settings import DEFAULT_LANGUAGE, KELLY_CONFIG, LOG_CONFIG
from src.betting.kelly import compute_fixed_odds, compute_market_price
from src.betting.validation import (
    RejectReason,
    ValidationResult,
    parse_number,
    percent_to_probability,
    validate_capital,
    validate_market_price,
    validate_odds,
    validate_probability,
    validate_win_rate,
)
from src.cli.messages import get_messages, reject_message
from src.cli.report import (
    format_fixed_odds_report,
    format_market_report,
    format_title,
)
from src.exceptions import ValidationError

logger = logging.getLogger(__name__)


class KellyCLI:
    """CLI for Kelly bet sizing"""

    def __init__(self, lang: str = DEFAULT_LANGUAGE, market: bool = False):
        """
        Args:
            lang: Output language tag ("en" or "zh")
            market: Prediction-market mode instead of fixed odds
        """
        self.lang = lang
        self.market = market
        self.msgs = get_messages(lang)

    def _validate_first(self, raw: str) -> ValidationResult:
        return validate_market_price(raw) if self.market else validate_odds(raw)

    def _validate_second(self, raw: str) -> ValidationResult:
        return validate_probability(raw) if self.market else validate_win_rate(raw)

    def _print_rejection(self, result: ValidationResult) -> None:
        logger.debug("Input rejected: %s", result.reason.value)
        print(f"✗ {reject_message(self.lang, result.reason)}\n")

    def resolve_capital(self, raw: Optional[str]) -> Optional[float]:
        """Validated capital, or None when absent or rejected (non-fatal)"""
        result = validate_capital(raw)
        if not result.accepted:
            logger.info("Capital %r skipped: %s", raw, result.reason.value)
            print(f"✗ {reject_message(self.lang, RejectReason.CAPITAL_NOT_POSITIVE)}\n")
            return None
        return result.value

    def calculate(self, first: float, second: float, capital: Optional[float] = None) -> str:
        """
        Run the Kelly calculation on validated inputs

        Args:
            first: Decimal odds, or market price percentage in market mode
            second: Win rate / probability percentage
            capital: Optional bankroll

        Returns:
            Report text
        """
        probability = percent_to_probability(second)

        if self.market:
            market_price = percent_to_probability(first)
            result = compute_market_price(market_price, probability)
            logger.debug(
                "market price=%.4f prob=%.4f -> fraction=%.6f ev=%.6f",
                market_price, probability, result.optimal_fraction, result.expected_value,
            )
            return format_market_report(market_price, probability, result, capital, self.lang)

        result = compute_fixed_odds(first, probability)
        logger.debug(
            "fixed odds=%.4f win_rate=%.4f -> fraction=%.6f ev=%.6f",
            first, probability, result.optimal_fraction, result.expected_value,
        )
        return format_fixed_odds_report(first, probability, result, capital, self.lang)

    def run_once(self, values: List[str]) -> str:
        """
        One-shot calculation from command-line values

        Args:
            values: [odds_or_price, rate_or_probability] plus optional capital

        Returns:
            Report text

        Raises:
            ParseError: a required value is not a number
            DomainError: a required value is out of range
        """
        first = self._validate_first(values[0]).unwrap()
        second = self._validate_second(values[1]).unwrap()
        capital = self.resolve_capital(values[2] if len(values) > 2 else None)
        return self.calculate(first, second, capital)

    def _prompt(self, key: str) -> str:
        return input(f"{self.msgs[key]} ")

    def interactive_mode(self) -> None:
        """Read-validate-calculate loop until a quit command or EOF"""
        print(format_title(self.market, self.lang))

        first_prompt = "prompt_price" if self.market else "prompt_odds"
        second_prompt = "prompt_probability" if self.market else "prompt_win_rate"

        while True:
            try:
                raw = self._prompt(first_prompt)
                if raw.strip().lower() in KELLY_CONFIG["quit_commands"]:
                    print(self.msgs["goodbye"])
                    break

                first = self._validate_first(raw)
                if not first.accepted:
                    self._print_rejection(first)
                    continue

                second = self._validate_second(self._prompt(second_prompt))
                if not second.accepted:
                    self._print_rejection(second)
                    continue

                capital = self.resolve_capital(self._prompt("prompt_capital"))
            except (EOFError, KeyboardInterrupt):
                print(f"\n{self.msgs['goodbye']}")
                break

            print(self.calculate(first.value, second.value, capital))
            print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kelly",
        description="Kelly Criterion Calculator",
        add_help=False,
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="odds win_rate [capital], or with -p: price probability [capital]"
    )
    parser.add_argument(
        "--polymarket", "-p",
        action="store_true",
        help="Prediction-market mode (price as probability)"
    )
    parser.add_argument(
        "--zh", "-z",
        action="store_true",
        help="Chinese output"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging"
    )
    parser.add_argument(
        "--help", "-h",
        action="store_true",
        help="Show usage"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()
    args, extras = parser.parse_known_intermixed_args(argv)

    # argparse reads exponent-form negatives ("-1e3") as unknown options
    unknown = [token for token in extras if parse_number(token) is None]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    if extras:
        positional = set(args.values) | set(extras)
        args.values = [token for token in argv if token in positional]

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_CONFIG["level"],
        format=LOG_CONFIG["format"],
    )

    lang = "zh" if args.zh else DEFAULT_LANGUAGE
    cli = KellyCLI(lang=lang, market=args.polymarket)
    msgs = cli.msgs

    if args.help:
        print(msgs["usage"])
        return 0

    count = len(args.values)
    if count == 0:
        cli.interactive_mode()
        return 0

    if count not in (2, 3):
        if args.polymarket:
            error = msgs["invalid_market_args"]
        elif count < 2:
            error = msgs["insufficient_args"]
        else:
            error = msgs["too_many_args"]
        print(f"✗ {error}\n")
        print(msgs["usage"])
        return 2

    try:
        print(cli.run_once(args.values))
    except ValidationError as e:
        logger.debug("One-shot input rejected: %s", e)
        print(f"✗ {reject_message(lang, e.reason)}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
