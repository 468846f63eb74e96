"""
src/i18n/nodes.py
─────────────────
Tagged node types for the nested translation table.

A table is a tree of `Branch` nodes whose terminals are `Leaf` nodes:

    {"nav": {"home": {"en": "Home", "hi": "होम"}}}
        → Branch(children={"nav": Branch(children={"home": Leaf(...)})})

A mapping whose values are all strings is a leaf (language code → text);
any other mapping is a branch.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Leaf:
    languages: Mapping[str, str]
    kind: Literal["leaf"] = field(default="leaf", init=False)

    def text(self, language: str, default_language: str) -> str | None:
        """Text for `language`, falling back to `default_language`; None if neither."""
        return self.languages.get(language) or self.languages.get(default_language)


@dataclass(frozen=True)
class Branch:
    children: Mapping[str, "Node"]
    kind: Literal["branch"] = field(default="branch", init=False)

    def child(self, segment: str) -> Node | None:
        return self.children.get(segment)


Node = Union[Branch, Leaf]


def build_table(raw: Mapping) -> Branch:
    """Convert a raw nested mapping (e.g. parsed JSON) into a `Branch` tree."""
    node = _build_node(raw, path="")
    if isinstance(node, Leaf):
        # A bare language map at the root has no addressable key path
        return Branch(children=MappingProxyType({}))
    return node


def _build_node(raw: Mapping, path: str) -> Node:
    if raw and all(isinstance(v, str) for v in raw.values()):
        return Leaf(languages=MappingProxyType(dict(raw)))

    children: dict[str, Node] = {}
    for key, value in raw.items():
        child_path = f"{path}.{key}" if path else str(key)
        if isinstance(value, Mapping):
            children[str(key)] = _build_node(value, child_path)
        else:
            logger.debug("Dropping non-mapping entry %r in branch %r", child_path, path)
    return Branch(children=MappingProxyType(children))
