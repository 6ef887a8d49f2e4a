"""Word-list loader for the lexical filter."""

from __future__ import annotations
import logging
from pathlib import Path

from .errors import DictionaryLoadError

logger = logging.getLogger(__name__)


def load_word_set(path: str | Path) -> frozenset[str]:
    """Read a newline-separated word list into a set of lowercase words.

    Blank lines are skipped and surrounding whitespace is stripped.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            words = {w.strip().lower() for w in f}
    except OSError as exc:
        raise DictionaryLoadError(f"cannot read word list {path}: {exc}") from exc
    words.discard("")
    logger.debug("Loaded %d words from %s", len(words), path)
    return frozenset(words)
