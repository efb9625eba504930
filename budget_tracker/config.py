"""Configuration management for the budget tracker.

This module centralizes all configuration values including session
storage keys, budget allocation percentages, chart limits and
environment variable overrides.
"""

from __future__ import annotations

import logging.config
import os
from typing import Any, Dict

# Session storage keys for the two persisted collections
EXPENSES_KEY = os.getenv("BUDGET_TRACKER_EXPENSES_KEY", "expenses")
INCOMES_KEY = os.getenv("BUDGET_TRACKER_INCOMES_KEY", "incomes")

# Language
SUPPORTED_LANGUAGES = ("en", "es")
DEFAULT_LANGUAGE = os.getenv("BUDGET_TRACKER_LANGUAGE", "en")

# Expense categories, in display order
EXPENSE_CATEGORIES = ("food", "rent", "utilities", "travel", "entertainment")

# Share of total income allotted to each category
BUDGET_PERCENTAGES: Dict[str, float] = {
    "food": 0.20,
    "rent": 0.30,
    "utilities": 0.15,
    "travel": 0.20,
    "entertainment": 0.15,
}

# Charts
MAX_CHART_BUCKETS = 12
DEFAULT_CHART_PERIOD = "month"

# Upper bound of the amount range slider on the stats page
AMOUNT_SLIDER_MAX = float(os.getenv("BUDGET_TRACKER_AMOUNT_MAX", "10000"))

# Shown on the profile page until the user edits it
DEFAULT_PROFILE: Dict[str, Any] = {
    "name": "Budget Tracker User",
    "age": 18,
    "email": "user@example.com",
}

LOG_LEVEL = os.getenv("BUDGET_TRACKER_LOG_LEVEL", "INFO").upper()

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": LOG_LEVEL,
            "formatter": "simple",
        },
    },
    "loggers": {
        "budget_tracker": {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
    },
}

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Apply :data:`LOGGING` once per process."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return
    logging.config.dictConfig(LOGGING)
    _LOGGING_CONFIGURED = True
