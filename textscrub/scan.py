"""Per-category scanners that propose edits against the original text."""

import re
from typing import Dict, Iterable, Iterator, List, Pattern, Sequence

from .rules import (
    FULLWIDTH_RANGES,
    PUNCTUATION_RULES,
    SUSPICIOUS_WHITESPACE,
    FullwidthRange,
    PunctuationRule,
    find_fullwidth_range,
)
from .types import Edit
from .urls import clean_url


def _char_class(chars: Iterable[str]) -> str:
    return "".join(re.escape(char) for char in sorted(chars))


def _group_by_category(rules: Iterable[PunctuationRule]) -> Dict[str, Dict[str, str]]:
    """Group punctuation rules by category, keeping first-seen order."""

    grouped: Dict[str, Dict[str, str]] = {}
    for rule in rules:
        grouped.setdefault(rule.category, {})[rule.char] = rule.replacement
    return grouped


_PUNCTUATION_PASSES = [
    (category, re.compile(f"[{_char_class(replacements)}]"), replacements)
    for category, replacements in _group_by_category(PUNCTUATION_RULES).items()
]


def _range_class(block: FullwidthRange) -> str:
    return f"{re.escape(chr(block.first))}-{re.escape(chr(block.last))}"


_FULLWIDTH_PASSES = [(block, re.compile(f"[{_range_class(block)}]")) for block in FULLWIDTH_RANGES]

_PUNCTUATION_MAP = {rule.char: rule.replacement for rule in PUNCTUATION_RULES}
# Sentence punctuation after a URL stays outside it.
_TRAILING_PUNCTUATION = "".join(_PUNCTUATION_MAP) + ".,;:!?"

# \s misses the zero-width characters, so they are listed explicitly.
URL_RE = re.compile(rf"https?://[^\s{_char_class(SUSPICIOUS_WHITESPACE)}]+")


def scan_punctuation(text: str) -> Iterator[Edit]:
    """Yield dash, quote, ellipsis and soft hyphen edits, one pass per category."""

    for category, pattern, replacements in _PUNCTUATION_PASSES:
        yield from _scan_pattern(text, pattern, replacements, category)


def _scan_pattern(
    text: str, pattern: Pattern[str], replacements: Dict[str, str], category: str
) -> Iterator[Edit]:
    for match in pattern.finditer(text):
        char = match.group(0)
        yield Edit(
            start=match.start(),
            end=match.end(),
            original=char,
            replacement=replacements[char],
            category=category,
        )


def scan_fullwidth(text: str) -> Iterator[Edit]:
    """Yield edits mapping fullwidth letters and digits to ASCII."""

    for block, pattern in _FULLWIDTH_PASSES:
        for match in pattern.finditer(text):
            char = match.group(0)
            replacement = block.to_ascii(ord(char))
            if replacement != char:
                yield Edit(match.start(), match.end(), char, replacement, "fullwidth")


def scan_whitespace(text: str) -> Iterator[Edit]:
    """Yield one edit per suspicious whitespace code point."""

    for index, char in enumerate(text):
        if char in SUSPICIOUS_WHITESPACE:
            yield Edit(index, index + 1, char, " ", "whitespace")


def _normalize_char(char: str) -> str:
    if char in _PUNCTUATION_MAP:
        return _PUNCTUATION_MAP[char]
    block = find_fullwidth_range(char)
    if block is not None:
        return block.to_ascii(ord(char))
    return char


def scan_urls(text: str) -> Iterator[Edit]:
    """Yield edits for URLs that carried AI tracking parameters.

    Trailing sentence punctuation is left outside the URL. Punctuation and
    fullwidth characters inside it are normalized before the query is read,
    and the URL edit's replacement carries that normalization.
    """

    for match in URL_RE.finditer(text):
        url = match.group(0).rstrip(_TRAILING_PUNCTUATION)
        cleaned = clean_url("".join(_normalize_char(char) for char in url))
        if cleaned is None:
            continue
        yield Edit(
            start=match.start(),
            end=match.start() + len(url),
            original=url,
            replacement=cleaned.url,
            category="url-params",
        )


def _inside(edit: Edit, spans: Sequence[Edit]) -> bool:
    return any(span.start <= edit.start and edit.end <= span.end for span in spans)


_CHARACTER_SCANNERS = (scan_punctuation, scan_fullwidth, scan_whitespace)


def scan_text(text: str) -> List[Edit]:
    """Run every scanner and return edits in discovery order.

    Character edits inside a rewritten URL are dropped, since the URL edit
    already covers them.
    """

    url_edits = list(scan_urls(text))
    edits: List[Edit] = []
    for scanner in _CHARACTER_SCANNERS:
        edits.extend(edit for edit in scanner(text) if not _inside(edit, url_edits))
    edits.extend(url_edits)
    return edits
