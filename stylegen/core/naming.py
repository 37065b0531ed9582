"""Derive output identifiers from style names."""

from __future__ import annotations

import re
from collections import Counter
from typing import Mapping, Sequence, TypeVar

from stylegen.core.models import ColorEntry, FontEntry

_SEPARATOR_RE = re.compile(r"[^0-9A-Za-z_]+")
_DIGITS = "0123456789"

E = TypeVar("E", ColorEntry, FontEntry)


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def escape_identifier(text: str) -> str:
    """Drop separators, camel-casing the words they separated."""
    words = [word for word in _SEPARATOR_RE.split(text) if word]
    if not words:
        return ""
    return words[0] + "".join(capitalize_first(word) for word in words[1:])


def candidate_name(leaf_name: str, prefix: str = "") -> str:
    return lower_first(prefix + capitalize_first(escape_identifier(leaf_name)))


def strip_trailing_digits(name: str) -> str:
    return name.rstrip(_DIGITS)


def build_collision_table(entries: Sequence[E], prefix: str = "") -> Counter[str]:
    """Count how many entries share each digit-trimmed candidate."""
    return Counter(
        strip_trailing_digits(candidate_name(entry.leaf_name, prefix)) for entry in entries
    )


def resolve_name(
    leaf_name: str,
    *,
    prefix: str,
    trim_digits: bool,
    collisions: Counter[str],
) -> str:
    name = candidate_name(leaf_name, prefix)
    if not trim_digits:
        return name
    trimmed = strip_trailing_digits(name)
    if trimmed and collisions[trimmed] == 1:
        return trimmed
    return name


def resolve_names(
    entries: Sequence[E],
    prefix: str = "",
    trim_trailing_digits: bool = False,
) -> dict[E, str]:
    """Map every entry to its identifier.

    With ``trim_trailing_digits`` a numeric suffix is dropped only when no
    other entry trims to the same name: a lone ``Blue1`` becomes ``blue``
    while ``Red1`` and ``Red2`` stay ``red1`` and ``red2``.

    Entries sharing a leaf name share one identifier. Distinct leaves that
    escape to the same identifier (``Text/Primary`` and ``TextPrimary``)
    are told apart by a ``_2``, ``_3`` ... suffix in the order given.
    """
    collisions = build_collision_table(entries, prefix) if trim_trailing_digits else Counter()
    by_leaf: dict[str, str] = {}
    for entry in entries:
        if entry.leaf_name not in by_leaf:
            by_leaf[entry.leaf_name] = resolve_name(
                entry.leaf_name,
                prefix=prefix,
                trim_digits=trim_trailing_digits,
                collisions=collisions,
            )
    unique = disambiguate(by_leaf)
    return {entry: unique[entry.leaf_name] for entry in entries}


def disambiguate(names: Mapping[str, str]) -> dict[str, str]:
    """Give every key a distinct name, suffixing repeats in key order."""
    taken = set(names.values())
    seen: set[str] = set()
    result: dict[str, str] = {}
    for key, name in names.items():
        if name not in seen:
            seen.add(name)
            result[key] = name
            continue
        number = 2
        while f"{name}_{number}" in taken:
            number += 1
        unique = f"{name}_{number}"
        taken.add(unique)
        result[key] = unique
    return result
