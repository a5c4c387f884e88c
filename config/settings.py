"""
Kelly Criterion Calculator - Configuration
"""
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# Bet sizing settings
KELLY_CONFIG = {
    # Fractional Kelly multipliers shown when capital is supplied
    "kelly_multipliers": {
        "full": 1.0,
        "half": 0.5,
        "quarter": 0.25,
    },

    # User input is percentage-scaled (60 = 60%)
    "percent_scale": 100.0,

    # Interactive mode exit words (case-insensitive)
    "quit_commands": ("q", "quit", "exit"),

    # Width of the ─ separator line in reports
    "separator_width": 50,
}

# Output languages
LANGUAGES = {
    "en": "English",
    "zh": "中文",
}
DEFAULT_LANGUAGE = "en"

# Logging settings
LOG_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(levelname)s - %(message)s",
}
