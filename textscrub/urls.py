"""Removal of AI tracking parameters from URLs."""

from dataclasses import dataclass
import logging
from typing import List, Optional, Tuple
from urllib.parse import SplitResult, unquote_plus, urlsplit, urlunsplit

from .rules import is_tracking_param

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UrlCleaning:
    """Re-serialized URL plus the raw parameters that were dropped."""

    url: str
    removed_params: List[str]


def _parse(url: str) -> Optional[SplitResult]:
    """Split a URL, returning None when it has no usable host or port."""

    try:
        parts = urlsplit(url)
        # Accessing .port validates it.
        parts.port
    except ValueError as exc:
        logger.debug("skipping malformed url %r: %s", url, exc)
        return None
    if parts.scheme.lower() not in ("http", "https") or not parts.hostname:
        return None
    return parts


def _param_key_value(param: str) -> Tuple[str, str]:
    key, _, value = param.partition("=")
    return unquote_plus(key), unquote_plus(value)


def clean_url(url: str) -> Optional[UrlCleaning]:
    """Drop tracking query parameters from ``url``.

    Remaining parameters keep their original text and order. Returns None
    when the URL cannot be parsed or when no parameter was removed, so the
    caller leaves the URL untouched.
    """

    parts = _parse(url)
    if parts is None or not parts.query:
        return None

    kept: List[str] = []
    removed: List[str] = []
    for param in parts.query.split("&"):
        if not param:
            continue
        key, value = _param_key_value(param)
        if is_tracking_param(key, value):
            removed.append(param)
        else:
            kept.append(param)

    if not removed:
        return None

    path = parts.path or "/"
    rebuilt = urlunsplit((parts.scheme, parts.netloc, path, "&".join(kept), parts.fragment))
    return UrlCleaning(url=rebuilt, removed_params=removed)
