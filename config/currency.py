"""
config/currency.py
──────────────────
Static currency display data per language.

All prices are quoted in a single base currency (Indian rupee). Languages
other than the base-currency ones show a fixed, pre-converted numeral for
each of the two plan prices:

  500 → premium plan
  400 → standard plan

Rates are not fetched; the numerals below are the published price list.
"""
from dataclasses import dataclass
from enum import Enum

BASE_CURRENCY_SYMBOL = "₹"

# Languages that always display the base currency, conversion data or not
BASE_CURRENCY_LANGS: tuple[str, ...] = ("en", "hi")

SUPPORTED_AMOUNTS: tuple[int, ...] = (500, 400)


class SymbolPosition(str, Enum):
    PRE = "pre"    # ₩16590
    POST = "post"  # 48zł


@dataclass(frozen=True)
class CurrencyInfo:
    symbol: str
    position: SymbolPosition


_PRE = SymbolPosition.PRE
_POST = SymbolPosition.POST

# ── Symbols and placement ─────────────────────────────────────────────────────
CURRENCY_INFO: dict[str, CurrencyInfo] = {
    "bn": CurrencyInfo("৳", _PRE),     # Bangladeshi taka
    "ur": CurrencyInfo("Rs", _PRE),    # Pakistani rupee
    "ne": CurrencyInfo("रू", _PRE),    # Nepalese rupee
    "ru": CurrencyInfo("₽", _POST),    # Russian ruble
    "es": CurrencyInfo("€", _PRE),
    "fr": CurrencyInfo("€", _PRE),
    "de": CurrencyInfo("€", _PRE),
    "pt": CurrencyInfo("€", _PRE),
    "it": CurrencyInfo("€", _PRE),
    "zh": CurrencyInfo("¥", _PRE),     # Chinese yuan
    "ja": CurrencyInfo("¥", _PRE),     # Japanese yen
    "ko": CurrencyInfo("₩", _PRE),     # South Korean won
    "ar": CurrencyInfo("﷼", _PRE),     # Saudi riyal
    "tr": CurrencyInfo("₺", _PRE),     # Turkish lira
    "nl": CurrencyInfo("€", _PRE),
    "pl": CurrencyInfo("zł", _POST),   # Polish złoty
    "sv": CurrencyInfo("kr", _POST),   # Swedish krona
    "no": CurrencyInfo("kr", _POST),   # Norwegian krone
    "da": CurrencyInfo("kr", _POST),   # Danish krone
    "fi": CurrencyInfo("€", _PRE),
    "id": CurrencyInfo("Rp", _PRE),    # Indonesian rupiah
    "vi": CurrencyInfo("₫", _POST),    # Vietnamese đồng
    "th": CurrencyInfo("฿", _PRE),     # Thai baht
    "ms": CurrencyInfo("RM", _PRE),    # Malaysian ringgit
    "fil": CurrencyInfo("₱", _PRE),    # Philippine peso
    "el": CurrencyInfo("€", _PRE),
    "cs": CurrencyInfo("Kč", _POST),   # Czech koruna
    "hu": CurrencyInfo("Ft", _POST),   # Hungarian forint
    "ro": CurrencyInfo("lei", _POST),  # Romanian leu
    "uk": CurrencyInfo("₴", _PRE),     # Ukrainian hryvnia
    "he": CurrencyInfo("₪", _PRE),     # Israeli new shekel
    "fa": CurrencyInfo("﷼", _POST),    # Iranian rial
}

# ── Converted plan prices ─────────────────────────────────────────────────────
CONVERSIONS: dict[str, dict[int, int]] = {
    "bn": {500: 689, 400: 551},
    "ur": {500: 1599, 400: 1279},
    "ne": {500: 800, 400: 640},
    "ru": {500: 1050, 400: 840},
    "es": {500: 6, 400: 5},
    "fr": {500: 6, 400: 5},
    "de": {500: 6, 400: 5},
    "pt": {500: 6, 400: 5},
    "it": {500: 6, 400: 5},
    "zh": {500: 87, 400: 70},
    "ja": {500: 1890, 400: 1512},
    "ko": {500: 16590, 400: 13272},
    "ar": {500: 45, 400: 36},
    "tr": {500: 390, 400: 312},
    "nl": {500: 6, 400: 5},
    "pl": {500: 48, 400: 38},
    "sv": {500: 125, 400: 100},
    "no": {500: 128, 400: 102},
    "da": {500: 82, 400: 66},
    "fi": {500: 6, 400: 5},
    "id": {500: 97500, 400: 78000},
    "vi": {500: 305000, 400: 244000},
    "th": {500: 440, 400: 352},
    "ms": {500: 56, 400: 45},
    "fil": {500: 700, 400: 560},
    "el": {500: 6, 400: 5},
    "cs": {500: 275, 400: 220},
    "hu": {500: 4330, 400: 3464},
    "ro": {500: 55, 400: 44},
    "uk": {500: 480, 400: 384},
    "he": {500: 44, 400: 35},
    "fa": {500: 504000, 400: 403200},
}
