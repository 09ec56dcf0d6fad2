"""Shared data types for cleaning results."""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List

CATEGORIES = (
    "whitespace",
    "em-dash",
    "en-dash",
    "smart-quotes",
    "ellipsis",
    "soft-hyphen",
    "fullwidth",
    "url-params",
    "other",
)


@dataclass(frozen=True)
class Edit:
    """A single replacement of ``[start, end)`` in the original text."""

    start: int
    end: int
    original: str
    replacement: str
    category: str

    def __post_init__(self) -> None:
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"invalid edit span [{self.start}, {self.end})")
        if self.category not in CATEGORIES:
            raise ValueError(f"unknown edit category: {self.category}")


@dataclass(frozen=True)
class CleaningResult:
    """Original text, cleaned text and the ordered edits between them."""

    original: str
    cleaned: str
    changes: List[Edit]

    def counts_by_category(self) -> Dict[str, int]:
        """Count edits per category, omitting categories with no edits."""

        return dict(Counter(change.category for change in self.changes))
