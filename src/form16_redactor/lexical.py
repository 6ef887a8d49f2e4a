"""Lexical filter — redacts alphabetic tokens that are not English words.

A token is a maximal run of ASCII letters bounded by word boundaries, so
anything glued to a digit or underscore (``AB12``, ``PAN_REDACTED``) is
never a token and always survives this pass.
"""

from __future__ import annotations
import logging
import re
from collections.abc import Iterator, Set

from .patterns import NON_DICTIONARY
from .types import FilterResult

logger = logging.getLogger(__name__)

WORD_PLACEHOLDER = "[WORD_REDACTED]"
SHORT_WORD_MAX = 3

_WORD = re.compile(r"\b[A-Za-z]+\b", re.ASCII)


def tokenize(text: str) -> Iterator[str]:
    """Yield the alphabetic tokens of ``text`` in order of appearance."""
    for m in _WORD.finditer(text):
        yield m.group()


def _is_placeholder(token: str) -> bool:
    return token.startswith("[") and token.endswith("]")


def redact_unknown_words(text: str, dictionary: Set[str]) -> tuple[str, list[str]]:
    """Replace every unknown word longer than three letters.

    ``dictionary`` holds lowercase words.  Returns the new text and the
    sorted unique lowercase forms that were redacted.
    """
    redacted: set[str] = set()

    def _replace(m: re.Match) -> str:
        token = m.group()
        if _is_placeholder(token):
            return token
        lower = token.lower()
        if len(lower) <= SHORT_WORD_MAX or lower in dictionary:
            return token
        redacted.add(lower)
        return WORD_PLACEHOLDER

    cleaned = _WORD.sub(_replace, text)
    return cleaned, sorted(redacted)


def filter_words(result: FilterResult, dictionary: Set[str]) -> FilterResult:
    """Apply ``redact_unknown_words`` to a copy of ``result``, recording the category."""
    cleaned, words = redact_unknown_words(result.cleaned_text, dictionary)
    out = result.evolve(cleaned)
    if words:
        logger.debug("Redacted %d distinct non-dictionary word(s)", len(words))
        out.mark_removed(NON_DICTIONARY)
    return out
