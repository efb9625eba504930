"""Formatting utilities for currency and percentage display."""

from __future__ import annotations

from typing import Union


def format_currency(amount: Union[float, int], include_sign: bool = True) -> str:
    """Format a currency amount with thousands separators.

    Whole amounts drop the cents.

    Example:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(600)
        '$600'
        >>> format_currency(-50, include_sign=False)
        '-50'
    """
    value = float(amount)
    formatted = f"{abs(value):,.0f}" if value.is_integer() else f"{abs(value):,.2f}"
    sign = "-" if value < 0 else ""
    return f"{sign}${formatted}" if include_sign else f"{sign}{formatted}"


def escape_dollar_for_markdown(amount: Union[float, int]) -> str:
    """Format an amount and escape the dollar sign for markdown rendering.

    Streamlit markdown treats ``$`` as a LaTeX delimiter.

    Example:
        >>> escape_dollar_for_markdown(1234.56)
        '\\\\$1,234.56'
    """
    return format_currency(amount).replace("$", "\\$")


def format_percentage(value: float) -> str:
    """Round to a whole percent, e.g. ``'42%'``."""
    return f"{round(value):.0f}%"
