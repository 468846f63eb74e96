"""
src/i18n/currency.py
─────────────────────
Plan price formatting per language.

Policy:
  1. Base-currency languages (en, hi) → "₹500"
  2. Language with both a symbol and a conversion → "৳689" / "305,000₫"
  3. Anything else → base-currency fallback, same as (1)
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

from config.currency import (
    BASE_CURRENCY_LANGS,
    BASE_CURRENCY_SYMBOL,
    CONVERSIONS,
    CURRENCY_INFO,
    CurrencyInfo,
    SymbolPosition,
)

logger = logging.getLogger(__name__)


def _base(amount) -> str:
    return f"{BASE_CURRENCY_SYMBOL}{amount}"


def format_currency(
    amount: int,
    language: str,
    conversions: Mapping[str, Mapping[int, int]] = CONVERSIONS,
    currency_info: Mapping[str, CurrencyInfo] = CURRENCY_INFO,
) -> str:
    """
    Render a base-currency plan price for `language`.

    Args:
        amount: Base-currency price, 500 or 400
        language: Active language code
        conversions: Converted numeral per language and base amount
        currency_info: Symbol and placement per language

    Returns:
        Symbol and numeral with no separator between them. Post-positioned
        numerals are grouped in thousands ("244,000₫"); pre-positioned ones
        are not.
    """
    if language in BASE_CURRENCY_LANGS:
        return _base(amount)

    converted = conversions.get(language) if isinstance(language, str) else None
    info = currency_info.get(language) if isinstance(language, str) else None
    numeral = converted.get(amount) if converted and isinstance(amount, int) else None

    if info is None or numeral is None:
        logger.debug("No currency data for lang=%r amount=%r, using base currency", language, amount)
        return _base(amount)

    if info.position == SymbolPosition.PRE:
        return f"{info.symbol}{numeral}"
    return f"{numeral:,}{info.symbol}"
