"""
Tests for the Kelly CLI (messages, report and entry point)
"""

import sys
import logging
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import LANGUAGES
from src.betting.kelly import compute_fixed_odds, compute_market_price
from src.betting.validation import RejectReason
from src.cli.kelly import KellyCLI, main
from src.cli.messages import MESSAGES, get_messages, reject_message
from src.cli.report import (
    format_fixed_odds_report,
    format_market_report,
    format_pct,
    format_position,
    format_title,
    separator,
)
from src.exceptions import ConfigurationError, DomainError, ParseError


class TestMessages:
    """Tests for message tables"""

    def test_tables_share_keys(self):
        """Test every language defines the same messages"""
        assert set(MESSAGES["en"]) == set(MESSAGES["zh"])

    def test_every_language_has_a_table(self):
        for lang in LANGUAGES:
            assert get_messages(lang)

    def test_every_reason_has_message(self):
        for lang in LANGUAGES:
            for reason in RejectReason:
                assert reject_message(lang, reason)

    def test_unknown_language(self):
        with pytest.raises(ConfigurationError):
            get_messages("fr")


class TestReport:
    """Tests for report formatting"""

    def test_format_pct(self):
        assert format_pct(0.6) == "60.00%"
        assert format_pct(-0.85) == "-85.00%"
        assert format_pct(0.0) == "0.00%"

    def test_separator_width(self):
        assert separator() == "─" * 50

    def test_position_clamped_for_display(self):
        """Test negative and leveraged fractions get fixed wording"""
        assert format_position(-1.7) == "Position size: 0% (No bet)"
        assert format_position(0.0) == "Position size: 0% (No bet)"
        assert "100%+" in format_position(1.5)
        assert format_position(0.25) == "Position size: 25.00%"

    def test_fixed_odds_report(self):
        result = compute_fixed_odds(2.0, 0.60)
        report = format_fixed_odds_report(2.0, 0.60, result)

        assert "Kelly Result" in report
        assert "├─ Odds: 2.00" in report
        assert "├─ Net odds (b): 1.00" in report
        assert "└─ Win rate (p): 60.00%" in report
        assert "Expected Value (EV): 20.00%" in report
        assert "✓ Positive EV" in report
        assert "└─ Position size: 20.00%" in report
        assert "capital" not in report

    def test_fixed_odds_report_with_capital(self):
        result = compute_fixed_odds(2.0, 0.60)
        report = format_fixed_odds_report(2.0, 0.60, result, capital=10000)

        assert "Position based on capital 10000.00:" in report
        assert "├─ Full Kelly: 2000.00" in report
        assert "├─ Half Kelly: 1000.00" in report
        assert "└─ Quarter Kelly: 500.00" in report

    def test_negative_ev_report_with_capital(self):
        """Test a losing bet shows no bet while the raw fraction stays negative"""
        result = compute_fixed_odds(1.5, 0.10)
        report = format_fixed_odds_report(1.5, 0.10, result, capital=10000)

        assert result.optimal_fraction < 0
        assert "✗ Negative EV" in report
        assert "Position size: 0% (No bet)" in report
        assert "└─ Recommendation: No bet" in report
        assert "Full Kelly" not in report

    def test_market_report(self):
        result = compute_market_price(0.60, 0.75)
        report = format_market_report(0.60, 0.75, result, capital=1000)

        assert "Polymarket Result" in report
        assert "Market price: 60.00% (implied probability)" in report
        assert "Your probability: 75.00% (your estimate)" in report
        assert "Implied odds: 1.67" in report
        assert "Expected Value (EV): 25.00%" in report
        assert "Position size: 37.50%" in report
        assert "Full Kelly: 375.00" in report

    def test_chinese_report(self):
        result = compute_fixed_odds(2.0, 0.60)
        report = format_fixed_odds_report(2.0, 0.60, result, capital=10000, lang="zh")

        assert "计算结果" in report
        assert "赔率: 2.00" in report
        assert "正期望值" in report
        assert "全凯利: 2000.00" in report
        assert "1/4凯利: 500.00" in report

    def test_report_framed_by_separators(self):
        result = compute_fixed_odds(2.0, 0.60)
        lines = format_fixed_odds_report(2.0, 0.60, result).splitlines()
        assert lines[1] == separator()
        assert lines[-1] == separator()

    def test_titles(self):
        assert "Kelly Calculator" in format_title()
        assert "Polymarket Kelly Calculator" in format_title(market=True)
        assert "凯利公式计算器" in format_title(lang="zh")


class TestKellyCLI:
    """Tests for KellyCLI class"""

    def test_calculate_converts_percentages(self):
        cli = KellyCLI()
        report = cli.calculate(2.0, 60)
        assert "Win rate (p): 60.00%" in report
        assert "Position size: 20.00%" in report

    def test_calculate_market(self):
        cli = KellyCLI(market=True)
        report = cli.calculate(60, 75)
        assert "Position size: 37.50%" in report

    def test_run_once_rejects_win_rate(self):
        """Test out-of-range win rate never reaches the engine"""
        cli = KellyCLI()
        with pytest.raises(DomainError) as exc_info:
            cli.run_once(["2.0", "150"])
        assert exc_info.value.reason is RejectReason.WIN_RATE_OUT_OF_RANGE

    def test_run_once_rejects_text(self):
        cli = KellyCLI(market=True)
        with pytest.raises(ParseError):
            cli.run_once(["sixty", "75"])

    def test_resolve_capital_skips_invalid(self, capsys, caplog):
        cli = KellyCLI()
        with caplog.at_level(logging.INFO, logger="src.cli.kelly"):
            assert cli.resolve_capital("-100") is None
        assert "Capital must be positive, skipped" in capsys.readouterr().out
        assert "skipped" in caplog.text

    def test_resolve_capital_non_numeric_uses_skip_message(self, capsys):
        cli = KellyCLI(lang="zh")
        assert cli.resolve_capital("abc") is None
        assert "本金必须为正数，已跳过" in capsys.readouterr().out


class TestInteractiveMode:
    """Tests for the interactive loop"""

    def test_single_calculation_then_quit(self, scripted_input, capsys):
        scripted_input(["2.0", "60", "", "q"])
        KellyCLI().interactive_mode()

        out = capsys.readouterr().out
        assert "Kelly Calculator" in out
        assert "Kelly Result" in out
        assert "Position size: 20.00%" in out
        assert out.rstrip().endswith("Goodbye!")

    def test_reprompts_after_errors(self, scripted_input, capsys):
        """Test bad input restarts the loop instead of exiting"""
        scripted_input(["1.0", "2.0", "150", "two", "2.0", "60", "abc", "quit"])
        KellyCLI().interactive_mode()

        out = capsys.readouterr().out
        assert "✗ Odds must be greater than 1.0" in out
        assert "✗ Win rate must be between 0-100" in out
        assert "✗ Invalid input" in out
        assert "✗ Capital must be positive, skipped" in out
        assert out.count("Kelly Result") == 1
        assert "Position based on capital" not in out

    def test_rejection_logged_at_debug(self, scripted_input, caplog):
        scripted_input(["1.0", "q"])
        with caplog.at_level(logging.DEBUG, logger="src.cli.kelly"):
            KellyCLI().interactive_mode()
        assert "Input rejected: odds too low" in caplog.text

    def test_with_capital(self, scripted_input, capsys):
        scripted_input(["2.0", "60", "10000", "Q"])
        KellyCLI().interactive_mode()
        assert "Full Kelly: 2000.00" in capsys.readouterr().out

    def test_eof_exits(self, scripted_input, capsys):
        scripted_input(["2.0"])
        KellyCLI().interactive_mode()
        out = capsys.readouterr().out
        assert "Goodbye!" in out
        assert "Kelly Result" not in out

    def test_market_mode_chinese(self, scripted_input, capsys):
        scripted_input(["0", "60", "75", "1000", "exit"])
        KellyCLI(lang="zh", market=True).interactive_mode()

        out = capsys.readouterr().out
        assert "Polymarket 凯利计算器" in out
        assert "✗ 价格必须在 0-100 之间" in out
        assert "Polymarket 计算结果" in out
        assert "全凯利: 375.00" in out
        assert "再见！" in out


class TestMain:
    """Tests for main entry point"""

    def test_fixed_odds(self, capsys):
        assert main(["2.0", "60"]) == 0
        out = capsys.readouterr().out
        assert "Kelly Result" in out
        assert "Expected Value (EV): 20.00%" in out

    def test_fixed_odds_with_capital(self, capsys):
        assert main(["2.0", "60", "10000"]) == 0
        assert "Half Kelly: 1000.00" in capsys.readouterr().out

    def test_polymarket(self, capsys):
        assert main(["-p", "60", "75", "1000"]) == 0
        out = capsys.readouterr().out
        assert "Polymarket Result" in out
        assert "Full Kelly: 375.00" in out

    def test_chinese_flag_anywhere(self, capsys):
        assert main(["2.0", "--zh", "60"]) == 0
        assert "计算结果" in capsys.readouterr().out

    def test_rejects_low_odds(self, capsys):
        assert main(["1.0", "60"]) == 2
        captured = capsys.readouterr()
        assert "Odds must be greater than 1.0" in captured.err
        assert "Kelly Result" not in captured.out

    def test_rejects_win_rate_regardless_of_odds(self, capsys):
        assert main(["5.0", "150"]) == 2
        assert "Win rate must be between 0-100" in capsys.readouterr().err

    def test_rejects_non_numeric(self, capsys):
        assert main(["abc", "60"]) == 2
        assert "Invalid input" in capsys.readouterr().err

    def test_rejects_zero_price(self, capsys):
        assert main(["-p", "0", "75"]) == 2
        assert "Price must be between 0-100" in capsys.readouterr().err

    def test_invalid_capital_is_skipped(self, capsys):
        assert main(["2.0", "60", "-5"]) == 0
        out = capsys.readouterr().out
        assert "Capital must be positive, skipped" in out
        assert "Kelly Result" in out
        assert "Position based on capital" not in out

    @pytest.mark.parametrize("capital", ["-1e3", "-5E2"])
    def test_exponent_negative_capital_is_skipped(self, capital, capsys):
        """Test exponent-form negatives reach capital validation"""
        assert main(["2.0", "60", capital]) == 0
        out = capsys.readouterr().out
        assert "Capital must be positive, skipped" in out
        assert "Kelly Result" in out

    def test_exponent_negative_odds_localized(self, capsys):
        assert main(["-z", "-1e3", "60"]) == 2
        assert "赔率必须大于 1.0" in capsys.readouterr().err

    def test_unknown_option_rejected(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["2.0", "60", "--bogus"])
        assert exc_info.value.code == 2

    def test_verbose_sets_debug_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        assert main(["-v", "2.0", "60"]) == 0
        assert main(["2.0", "60"]) == 0
        assert calls[0]["level"] == logging.DEBUG
        assert calls[1]["level"] == "WARNING"

    def test_verbose_logs_rejection(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="src.cli.kelly"):
            assert main(["-v", "1.0", "60"]) == 2
        assert "One-shot input rejected: odds too low" in caplog.text

    def test_insufficient_arguments(self, capsys):
        assert main(["2.0"]) == 2
        out = capsys.readouterr().out
        assert "Insufficient arguments" in out
        assert "Usage:" in out

    def test_too_many_arguments(self, capsys):
        assert main(["2.0", "60", "100", "7"]) == 2
        assert "Too many arguments" in capsys.readouterr().out

    def test_invalid_polymarket_arguments(self, capsys):
        assert main(["-p", "60"]) == 2
        assert "Invalid Polymarket mode arguments" in capsys.readouterr().out

    def test_help(self, capsys):
        assert main(["-h"]) == 0
        assert "Usage:" in capsys.readouterr().out

    def test_help_chinese(self, capsys):
        assert main(["-z", "--help"]) == 0
        assert "用法:" in capsys.readouterr().out

    def test_no_arguments_starts_interactive(self, scripted_input, capsys):
        scripted_input(["q"])
        assert main([]) == 0
        assert "Goodbye!" in capsys.readouterr().out
