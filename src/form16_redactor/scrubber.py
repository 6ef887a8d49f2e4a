"""Token-level scrubber — whole-text substitution of isolated identifiers."""

from __future__ import annotations
import logging

from .patterns import PatternSet
from .types import FilterResult

logger = logging.getLogger(__name__)


def scrub_tokens(text: str, patterns: PatternSet) -> FilterResult:
    """Replace every phone/email/Aadhaar/PAN/GST/TAN match with its placeholder.

    Rules run in ``patterns.token_rules`` order.  Each rule sees the text as
    rewritten by the rules before it, so a span already turned into a
    placeholder cannot be claimed again.
    """
    result = FilterResult(cleaned_text=text)
    for rule in patterns.token_rules:
        cleaned, count = rule.pattern.subn(rule.placeholder, result.cleaned_text)
        if count:
            logger.debug("Redacted %d %s", count, rule.category)
            result.mark_removed(rule.category)
            result.cleaned_text = cleaned
    return result
