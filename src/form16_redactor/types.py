"""Core types."""

from __future__ import annotations
import re
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TokenRule:
    """A substring-level matcher: every match is swapped for the placeholder."""
    category: str          # e.g. "Phone Numbers"
    pattern: re.Pattern
    placeholder: str       # e.g. "[PHONE_REDACTED]"


@dataclass(frozen=True, slots=True)
class LineRule:
    """A line-level matcher: any hit redacts the whole line.

    A line hits the rule when at least one of ``patterns`` matches it.
    """
    category: str          # e.g. "Organizations"
    patterns: tuple[re.Pattern, ...]
    placeholder: str

    def matches(self, line: str) -> bool:
        return any(p.search(line) for p in self.patterns)


@dataclass(slots=True)
class FilterResult:
    """Result of redacting one document."""
    cleaned_text: str
    removed_categories: list[str] = field(default_factory=list)
    retained_fields: dict[str, list[str]] = field(default_factory=dict)

    def mark_removed(self, category: str) -> None:
        """Record a redacted category once, keeping first-seen order."""
        if category not in self.removed_categories:
            self.removed_categories.append(category)

    def evolve(self, cleaned_text: str) -> FilterResult:
        """Return a copy carrying ``cleaned_text``; this result is left untouched."""
        return FilterResult(
            cleaned_text=cleaned_text,
            removed_categories=list(self.removed_categories),
            retained_fields={k: list(v) for k, v in self.retained_fields.items()},
        )
