"""Apply collected edits to produce the cleaned text and its change list."""

import logging
import re
from typing import Iterable, List, Optional, Tuple

from .types import CleaningResult, Edit

logger = logging.getLogger(__name__)

_TRAILING_NEWLINES_RE = re.compile(r"[\r\n]+\Z")


def order_edits(edits: Iterable[Edit]) -> List[Edit]:
    """Sort edits by start offset and drop any that overlap an earlier one.

    The sort is stable, so edits sharing a start keep discovery order.
    """

    ordered: List[Edit] = []
    claimed_until = 0
    for edit in sorted(edits, key=lambda item: item.start):
        if edit.start < claimed_until:
            logger.debug(
                "dropping %s edit at [%d, %d): overlaps previous edit",
                edit.category,
                edit.start,
                edit.end,
            )
            continue
        ordered.append(edit)
        claimed_until = edit.end
    return ordered


def apply_edits(text: str, edits: List[Edit]) -> str:
    """Apply ordered, non-overlapping edits from the last to the first."""

    cleaned = text
    for edit in reversed(edits):
        cleaned = cleaned[: edit.start] + edit.replacement + cleaned[edit.end :]
    return cleaned


def trim_trailing_newlines(text: str) -> Tuple[str, Optional[Edit]]:
    """Strip one trailing run of CR/LF, reporting it as a whitespace edit.

    Offsets refer to ``text`` itself, not to the original input.
    """

    match = _TRAILING_NEWLINES_RE.search(text)
    if match is None:
        return text, None
    edit = Edit(
        start=match.start(),
        end=match.end(),
        original=match.group(0),
        replacement="",
        category="whitespace",
    )
    return text[: match.start()], edit


def compose(text: str, edits: Iterable[Edit]) -> CleaningResult:
    """Build the CleaningResult for ``text`` from unordered edit candidates."""

    changes = order_edits(edits)
    cleaned = apply_edits(text, changes)
    cleaned, trailing = trim_trailing_newlines(cleaned)
    if trailing is not None:
        changes.append(trailing)
    return CleaningResult(original=text, cleaned=cleaned, changes=changes)
