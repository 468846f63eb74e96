"""
config/languages.py
───────────────────
Languages offered in the language selector, keyed by code.

Labels are native names so a user can find their own language regardless of
the language currently active.
"""

DEFAULT_LANGUAGE = "en"

LANGUAGES: dict[str, str] = {
    "en": "English",
    "hi": "हिन्दी",
    "bn": "বাংলা",
    "ur": "اردو",
    "ne": "नेपाली",
    "ru": "Русский",
    "es": "Español",
    "fr": "Français",
    "de": "Deutsch",
    "pt": "Português",
    "it": "Italiano",
    "zh": "中文",
    "ja": "日本語",
    "ko": "한국어",
    "ar": "العربية",
    "tr": "Türkçe",
    "nl": "Nederlands",
    "pl": "Polski",
    "sv": "Svenska",
    "no": "Norsk",
    "da": "Dansk",
    "fi": "Suomi",
    "id": "Bahasa Indonesia",
    "vi": "Tiếng Việt",
    "th": "ไทย",
    "ms": "Bahasa Melayu",
    "fil": "Filipino",
    "el": "Ελληνικά",
    "cs": "Čeština",
    "hu": "Magyar",
    "ro": "Română",
    "uk": "Українська",
    "he": "עברית",
    "fa": "فارسی",
}

LANGUAGE_CODES = list(LANGUAGES.keys())
