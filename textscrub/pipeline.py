"""Core cleaning pipeline: scan, then compose."""

from .compose import compose
from .scan import scan_text
from .types import CleaningResult


def clean_text(text: str) -> CleaningResult:
    """Normalize ``text`` and return the cleaned text with every edit made."""

    return compose(text, scan_text(text))
