"""
src/i18n/translator.py
───────────────────────
Key-path translation engine over a nested JSON translation table.

Usage:
    from src.i18n.translator import load_translations, resolve

    table = load_translations()
    resolve(table, "nav.home", "hi")                        # → "होम"
    resolve(table, "pricing.per_round", "en", {"n": 20})   # → "20 rounds"
    resolve(table, "no.such.key", "en")                     # → "no.such.key"
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Union

from config.languages import DEFAULT_LANGUAGE
from src.i18n.nodes import Branch, Leaf, Node, build_table

logger = logging.getLogger(__name__)

_LOCALES_DIR = Path(__file__).parent / "locales"
DEFAULT_TRANSLATIONS_PATH = _LOCALES_DIR / "translations.json"

_PLACEHOLDER = re.compile(r"\{([^{}]*)\}")

Replacements = Mapping[str, Union[str, int, float]]


@lru_cache(maxsize=4)
def load_translations(path: str | Path | None = None) -> Branch:
    """Parse a translation JSON file into a node tree (cached per path)."""
    source = Path(path) if path else DEFAULT_TRANSLATIONS_PATH
    with open(source, encoding="utf-8") as f:
        raw = json.load(f)
    table = build_table(raw)
    logger.info("Loaded %d top-level translation groups from %s", len(table.children), source)
    return table


def interpolate(template: str, replacements: Replacements | None) -> str:
    """
    Substitute `{name}` placeholders in a single pass.

    Placeholders with no matching key stay as written; substituted values are
    never scanned again.
    """
    if not replacements:
        return template

    def _sub(match: re.Match) -> str:
        name = match.group(1)
        if name in replacements:
            return str(replacements[name])
        return match.group(0)

    return _PLACEHOLDER.sub(_sub, template)


def _walk(table: Branch, segments: list[str]) -> Node | None:
    node: Node | None = table
    for segment in segments:
        if not isinstance(node, Branch):
            return None
        node = node.child(segment)
    return node


def resolve(
    table: Branch,
    path: str,
    language: str,
    replacements: Replacements | None = None,
    default_language: str = DEFAULT_LANGUAGE,
) -> str:
    """
    Translate a dot-separated key path.

    Args:
        table: Root of the translation tree
        path: Dot-separated key, e.g. "nav.home" or "pricing.premium.title"
        language: Requested language code
        replacements: Optional placeholder values, e.g. {"count": 3}
        default_language: Language used when `language` has no entry

    Returns:
        Translated string, or `path` itself if no text can be found.
    """
    try:
        node = _walk(table, path.split("."))
        text = node.text(language, default_language) if isinstance(node, Leaf) else None
        if text is None:
            logger.debug("Missing translation for %r (lang=%s)", path, language)
            return path
        return interpolate(text, replacements)
    except Exception:
        logger.exception("Translation error for key: %r", path)
        return path
