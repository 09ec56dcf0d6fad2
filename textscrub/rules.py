"""Fixed character and URL rule tables used by the cleaner."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

RULES_VERSION = "1.0.0"

SUSPICIOUS_WHITESPACE = frozenset(
    "\u00A0"  # no-break space
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200A"
    "\u200B\u200C\u200D"  # zero-width space, non-joiner, joiner
    "\u202F\u205F\u3000"
    "\uFEFF"  # BOM
)

EM_DASH = "\u2014"
EN_DASH = "\u2013"
ELLIPSIS = "\u2026"
SOFT_HYPHEN = "\u00AD"
CURLY_APOSTROPHE = "\u2019"


@dataclass(frozen=True)
class PunctuationRule:
    """Single-character substitution tagged with its edit category."""

    char: str
    replacement: str
    category: str


PUNCTUATION_RULES: Tuple[PunctuationRule, ...] = (
    PunctuationRule(EM_DASH, " - ", "em-dash"),
    PunctuationRule(EN_DASH, "-", "en-dash"),
    PunctuationRule("\u201C", '"', "smart-quotes"),
    PunctuationRule("\u201D", '"', "smart-quotes"),
    PunctuationRule("\u2018", "'", "smart-quotes"),
    PunctuationRule(CURLY_APOSTROPHE, "'", "smart-quotes"),
    PunctuationRule(ELLIPSIS, "...", "ellipsis"),
    PunctuationRule(SOFT_HYPHEN, "", "soft-hyphen"),
)


@dataclass(frozen=True)
class FullwidthRange:
    """Contiguous fullwidth block mapped onto ASCII by a fixed offset."""

    first: int
    last: int
    ascii_first: int
    label: str

    def contains(self, code: int) -> bool:
        return self.first <= code <= self.last

    def to_ascii(self, code: int) -> str:
        return chr(code - self.first + self.ascii_first)


FULLWIDTH_RANGES: Tuple[FullwidthRange, ...] = (
    FullwidthRange(0xFF21, 0xFF3A, 0x41, "Fullwidth uppercase letter"),
    FullwidthRange(0xFF41, 0xFF5A, 0x61, "Fullwidth lowercase letter"),
    FullwidthRange(0xFF10, 0xFF19, 0x30, "Fullwidth digit"),
)


def find_fullwidth_range(char: str) -> Optional[FullwidthRange]:
    """Return the fullwidth range containing ``char``, if any."""

    code = ord(char)
    for block in FULLWIDTH_RANGES:
        if block.contains(code):
            return block
    return None


CHARACTER_NAMES: Dict[str, str] = {
    "\u00A0": "Non-breaking space",
    "\u2000": "En quad",
    "\u2001": "Em quad",
    "\u2002": "En space",
    "\u2003": "Em space",
    "\u2004": "Three-per-em space",
    "\u2005": "Four-per-em space",
    "\u2006": "Six-per-em space",
    "\u2007": "Figure space",
    "\u2008": "Punctuation space",
    "\u2009": "Thin space",
    "\u200A": "Hair space",
    "\u200B": "Zero-width space",
    "\u200C": "Zero-width non-joiner",
    "\u200D": "Zero-width joiner",
    "\u202F": "Narrow no-break space",
    "\u205F": "Medium mathematical space",
    "\u3000": "Ideographic space",
    "\uFEFF": "Zero-width no-break space (BOM)",
    EM_DASH: "Em dash",
    EN_DASH: "En dash",
    "\u201C": "Left double quotation mark",
    "\u201D": "Right double quotation mark",
    "\u2018": "Left single quotation mark",
    CURLY_APOSTROPHE: "Right single quotation mark",
    ELLIPSIS: "Unicode ellipsis",
    SOFT_HYPHEN: "Soft hyphen (invisible)",
}

URL_LABEL = "URL with AI tracking parameters"
URL_PREFIXES = ("http://", "https://")

# Exact (key, value) pairs, compared lowercased.
TRACKING_PAIRS: FrozenSet[Tuple[str, str]] = frozenset(
    {
        ("utm_source", "chatgpt.com"),
        ("utm_source", "openai.com"),
        ("utm_source", "claude.ai"),
        ("utm_source", "perplexity.ai"),
        ("utm_medium", "chatgpt"),
        ("utm_medium", "ai"),
        ("utm_medium", "ai_assistant"),
        ("utm_campaign", "chatgpt"),
        ("ref", "chatgpt.com"),
        ("ref", "perplexity.ai"),
        ("source", "chatgpt.com"),
        ("via", "chatgpt"),
    }
)

TRACKING_SOURCE_KEYS: FrozenSet[str] = frozenset({"source", "utm_source", "ref"})

AI_PLATFORMS: FrozenSet[str] = frozenset(
    {
        "chatgpt",
        "openai",
        "claude",
        "anthropic",
        "gemini",
        "bard",
        "copilot",
        "bing",
        "perplexity",
        "poe",
        "mistral",
        "deepseek",
        "grok",
    }
)


def is_tracking_param(key: str, value: str) -> bool:
    """Return True if a query parameter marks AI-platform provenance."""

    key = key.lower()
    value = value.lower()
    if (key, value) in TRACKING_PAIRS:
        return True
    return key in TRACKING_SOURCE_KEYS and value in AI_PLATFORMS
