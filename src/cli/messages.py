"""
Bilingual message tables for the Kelly CLI

One fixed table per language tag. The betting core never sees these.
"""

import sys
from pathlib import Path
from typing import Dict

sys.path.insert(0, str(Path(__file__).parent.parent.parent))
from config.settings import LANGUAGES
from src.betting.validation import RejectReason
from src.exceptions import ConfigurationError

MESSAGES: Dict[str, Dict[str, object]] = {
    "en": {
        # Titles
        "title_fixed": ("Kelly Calculator", "Kelly Criterion Calculator"),
        "title_market": ("Polymarket Kelly Calculator", "Kelly Criterion for Polymarket"),
        "result_fixed": "Kelly Result",
        "result_market": "Polymarket Result",

        # Report body
        "input": "Input:",
        "odds": "Odds: {odds:.2f}",
        "net_odds": "Net odds (b): {net_odds:.2f}",
        "win_rate": "Win rate (p): {win_rate}",
        "market_price": "Market price: {price} (implied probability)",
        "your_probability": "Your probability: {probability} (your estimate)",
        "implied_odds": "Implied odds: {odds:.2f}",
        "analysis": "Analysis:",
        "expected_value": "Expected Value (EV): {ev}",
        "status_positive": "Status: ✓ Positive EV (Bet recommended)",
        "status_negative": "Status: ✗ Negative EV (Not recommended)",
        "position_none": "Position size: 0% (No bet)",
        "position_leveraged": "Position size: 100%+ (Full Kelly or more - High risk!)",
        "position": "Position size: {fraction}",
        "capital_header": "Position based on capital {capital:.2f}:",
        "stake_full": "Full Kelly: {amount:.2f}",
        "stake_half": "Half Kelly: {amount:.2f}",
        "stake_quarter": "Quarter Kelly: {amount:.2f}",
        "no_bet": "Recommendation: No bet",

        # Prompts
        "prompt_odds": "Enter odds (e.g., 2.0 for 1:1, 'q' to quit):",
        "prompt_win_rate": "Enter win rate (0-100, e.g., 60 for 60%):",
        "prompt_price": "Enter Polymarket market price (0-100, e.g., 60 for 60c, 'q' to quit):",
        "prompt_probability": "Enter your estimated probability (0-100):",
        "prompt_capital": "Enter capital (optional, press Enter to skip):",
        "goodbye": "Goodbye!",

        # Rejections
        RejectReason.NOT_A_NUMBER: "Invalid input",
        RejectReason.ODDS_TOO_LOW: "Odds must be greater than 1.0",
        RejectReason.WIN_RATE_OUT_OF_RANGE: "Win rate must be between 0-100",
        RejectReason.PRICE_OUT_OF_RANGE: "Price must be between 0-100",
        RejectReason.PROBABILITY_OUT_OF_RANGE: "Probability must be between 0-100",
        RejectReason.CAPITAL_NOT_POSITIVE: "Capital must be positive, skipped",

        # Usage
        "insufficient_args": "Insufficient arguments",
        "too_many_args": "Too many arguments",
        "invalid_market_args": "Invalid Polymarket mode arguments",
        "usage": """Usage:
  kelly                           # Interactive mode
  kelly <odds> <win_rate>         # CLI mode
  kelly <odds> <win_rate> <capital> # With capital

  kelly -p                        # Polymarket interactive
  kelly -p <price> <prob>         # Polymarket CLI
  kelly -p <price> <prob> <capital>

  -z, --zh                        # Chinese output
  -v, --verbose                   # Debug logging

Examples:
  kelly 2.0 60                    # Odds 2.0, 60% win rate
  kelly 2.0 60 10000              # With 10000 capital

  kelly -p 60 75                  # Market 60c, you think 75%
  kelly -p 60 75 1000             # With 1000 capital

  kelly -z 2.0 60                 # Chinese output""",
    },
    "zh": {
        "title_fixed": ("凯利公式计算器", "Kelly Criterion Calculator"),
        "title_market": ("Polymarket 凯利计算器", "Kelly Criterion for Polymarket"),
        "result_fixed": "计算结果",
        "result_market": "Polymarket 计算结果",

        "input": "输入参数:",
        "odds": "赔率: {odds:.2f}",
        "net_odds": "净赔率 (b): {net_odds:.2f}",
        "win_rate": "胜率 (p): {win_rate}",
        "market_price": "市场价格: {price} (市场隐含概率)",
        "your_probability": "你的概率: {probability} (你估计的真实概率)",
        "implied_odds": "隐含赔率: {odds:.2f}",
        "analysis": "分析:",
        "expected_value": "期望收益 (EV): {ev}",
        "status_positive": "状态: ✓ 正期望值 (值得下注)",
        "status_negative": "状态: ✗ 负期望值 (不建议下注)",
        "position_none": "仓位建议: 0% (不下注)",
        "position_leveraged": "仓位建议: 100%+ (全仓甚至加杠杆，高风险！)",
        "position": "仓位建议: {fraction}",
        "capital_header": "基于本金 {capital:.2f} 的投注金额:",
        "stake_full": "全凯利: {amount:.2f}",
        "stake_half": "半凯利: {amount:.2f}",
        "stake_quarter": "1/4凯利: {amount:.2f}",
        "no_bet": "建议: 不下注",

        "prompt_odds": "请输入赔率 (如 2.0 表示 1赔1，输入 q 退出):",
        "prompt_win_rate": "请输入胜率 (0-100，如 60 表示 60%):",
        "prompt_price": "请输入 Polymarket 市场价格 (0-100，如 60 表示 60c，输入 q 退出):",
        "prompt_probability": "请输入你估计的真实概率 (0-100):",
        "prompt_capital": "请输入本金 (可选，直接回车跳过):",
        "goodbye": "再见！",

        RejectReason.NOT_A_NUMBER: "输入无效",
        RejectReason.ODDS_TOO_LOW: "赔率必须大于 1.0",
        RejectReason.WIN_RATE_OUT_OF_RANGE: "胜率必须在 0-100 之间",
        RejectReason.PRICE_OUT_OF_RANGE: "价格必须在 0-100 之间",
        RejectReason.PROBABILITY_OUT_OF_RANGE: "概率必须在 0-100 之间",
        RejectReason.CAPITAL_NOT_POSITIVE: "本金必须为正数，已跳过",

        "insufficient_args": "参数不足",
        "too_many_args": "参数过多",
        "invalid_market_args": "Polymarket 模式参数无效",
        "usage": """用法:
  kelly                           # 交互式模式
  kelly <赔率> <胜率>              # 命令行模式
  kelly <赔率> <胜率> <本金>        # 指定本金

  kelly -p                        # Polymarket 交互式
  kelly -p <价格> <概率>           # Polymarket 命令行
  kelly -p <价格> <概率> <本金>

  -z, --zh                        # 中文输出
  -v, --verbose                   # 调试日志

示例:
  kelly 2.0 60                    # 赔率2.0，胜率60%
  kelly 2.0 60 10000              # 本金10000

  kelly -p 60 75                  # 市场价格60c，你认为75%
  kelly -p 60 75 1000             # 本金1000""",
    },
}


def get_messages(lang: str) -> Dict[str, object]:
    """
    Look up the message table for a language

    Raises:
        ConfigurationError: language tag has no table
    """
    if lang not in MESSAGES or lang not in LANGUAGES:
        raise ConfigurationError(f"Unsupported language: {lang}")
    return MESSAGES[lang]


def reject_message(lang: str, reason: RejectReason) -> str:
    """Localized text for a validation rejection"""
    return get_messages(lang)[reason]
