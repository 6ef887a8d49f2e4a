"""Line-level classifier — redacts whole organisation and address lines."""

from __future__ import annotations
import logging

from .patterns import PatternSet
from .types import FilterResult

logger = logging.getLogger(__name__)


def classify_lines(result: FilterResult, patterns: PatternSet) -> FilterResult:
    """Replace each line hit by a line rule with that rule's placeholder.

    Matching is done on the stripped line, but the whole original line
    (indentation included) is replaced.  Rules are tried in
    ``patterns.line_rules`` order and the first hit wins, so a line is never
    counted under two categories.  Line breaks are kept as-is.  Returns a new
    result; ``result`` is not modified.
    """
    lines = result.cleaned_text.split("\n")
    hits: dict[str, int] = {}

    for i, line in enumerate(lines):
        trimmed = line.strip()
        for rule in patterns.line_rules:
            if rule.matches(trimmed):
                lines[i] = rule.placeholder
                hits[rule.category] = hits.get(rule.category, 0) + 1
                break

    report_order = list(patterns.line_report_order) + [
        r.category for r in patterns.line_rules
        if r.category not in patterns.line_report_order
    ]
    out = result.evolve("\n".join(lines))
    for category in report_order:
        if category in hits:
            logger.debug("Redacted %d line(s) as %s", hits[category], category)
            out.mark_removed(category)

    return out
