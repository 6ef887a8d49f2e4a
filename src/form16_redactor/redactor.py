"""Redactor — the main API.  Layered: identifiers, then lines, then words.

Usage:
    from form16_redactor import Redactor

    redactor = Redactor()        # reusable, safe to share across threads

    result = redactor.redact("Contact: 9876543210", {"contact"})
    print(result.cleaned_text)          # "Contact: [PHONE_REDACTED]"
    print(result.removed_categories)    # ["Phone Numbers"]

The two halves can also be run separately, which is what the CLI does so
the word list is only loaded once PII filtering has succeeded:

    result = redactor.filter_pii(text)
    result = redactor.filter_words(result, dictionary)
"""

from __future__ import annotations
from collections.abc import Set

from .classifier import classify_lines
from .lexical import filter_words
from .patterns import PatternSet, build_pattern_set
from .scrubber import scrub_tokens
from .types import FilterResult


class Redactor:
    """Layered Form-16 redactor.

    Layer 1: Token scrubber (phone, email, Aadhaar, PAN, GST, TAN)
    Layer 2: Line classifier (organisation lines, then address lines)
    Layer 3: Lexical filter (words missing from the dictionary)

    The pattern set is immutable and the redactor keeps no per-document
    state, so one instance can serve any number of documents.
    """

    def __init__(self, patterns: PatternSet | None = None) -> None:
        self.patterns = patterns or build_pattern_set()

    def filter_pii(self, text: str) -> FilterResult:
        """Run layers 1 and 2 on raw text."""
        result = scrub_tokens(text, self.patterns)
        return classify_lines(result, self.patterns)

    def filter_words(self, result: FilterResult, dictionary: Set[str]) -> FilterResult:
        """Run layer 3 on the output of ``filter_pii``."""
        return filter_words(result, dictionary)

    def redact(self, text: str, dictionary: Set[str]) -> FilterResult:
        """Run the full pipeline on one document."""
        return self.filter_words(self.filter_pii(text), dictionary)
