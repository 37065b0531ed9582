"""Rank custom theme tokens spelled as English ordinal words."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from stylegen.core.constants import ORDINAL_VALUES, SCALE_VALUES, THEME_SEGMENT

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[A-Z][^A-Z]*|^[^A-Z]+")


def split_camel_words(text: str) -> list[str]:
    """Split UpperCamelCase text into words, each starting at a capital."""
    return _WORD_RE.findall(text)


def theme_rank(token: str) -> int:
    """Return the numeric rank of a token such as ``ThemeTwentiethFirst``.

    Unit words add to the running value and scale words (``Hundredth``,
    ``Thousandth``) multiply it, so ``ThirdHundredth`` is 300 and
    ``HundredthFirst`` is 101. Words outside the vocabulary count as zero.
    """
    value = 0
    for word in split_camel_words(token.replace(THEME_SEGMENT, "")):
        number = ORDINAL_VALUES.get(word)
        if number is None:
            logger.debug("unknown ordinal word %r in theme token %r", word, token)
            continue
        if number in SCALE_VALUES:
            value = max(value, 1) * number
        else:
            value += number
    return value


def sort_theme_variants(tokens: Iterable[str]) -> list[str]:
    """Order theme tokens by rank; equal ranks keep their input order."""
    return sorted(tokens, key=theme_rank)
