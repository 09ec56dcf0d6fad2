"""Clipboard copy with a size limit, fallback writer and typed errors."""

from dataclasses import dataclass
import logging
from typing import Callable, Optional, Tuple

from .config import ClipboardPolicy

logger = logging.getLogger(__name__)

ClipboardWriter = Callable[[str], None]

DEFAULT_COPY_ERROR = "Copy failed. Try manual copy button."
SIZE_ERROR = "Text too large for clipboard. Use manual copy."
PERMISSION_ERROR = "Clipboard access denied. Use manual copy button."


@dataclass(frozen=True)
class ClipboardResult:
    """Outcome of a clipboard copy attempt."""

    success: bool
    error: Optional[str] = None
    error_type: Optional[str] = None


def _classify_error(exc: Exception) -> Tuple[str, str]:
    """Map a writer exception onto an error type and user-facing message."""

    message = str(exc).lower()
    if "too large" in message:
        return "size", SIZE_ERROR
    if (
        isinstance(exc, PermissionError)
        or type(exc).__name__ == "NotAllowedError"
        or "permission" in message
    ):
        return "permission", PERMISSION_ERROR
    return "unknown", DEFAULT_COPY_ERROR


def copy_to_clipboard(
    text: str,
    policy: ClipboardPolicy,
    writer: ClipboardWriter,
    fallback_writer: Optional[ClipboardWriter] = None,
) -> ClipboardResult:
    """Copy ``text`` with ``writer``, retrying once with ``fallback_writer``.

    Never raises: failures are reported through the returned ClipboardResult.
    """

    if len(text) > policy.max_size:
        return ClipboardResult(
            success=False, error="Text too large for clipboard", error_type="size"
        )

    try:
        writer(text)
        return ClipboardResult(success=True)
    except Exception as exc:
        logger.warning("primary clipboard copy failed: %s", exc)
        error_type, error_message = _classify_error(exc)

    if fallback_writer is None:
        return ClipboardResult(success=False, error=error_message, error_type=error_type)

    try:
        fallback_writer(text)
        return ClipboardResult(success=True)
    except Exception as exc:
        logger.warning("fallback clipboard copy failed: %s", exc)
        return ClipboardResult(success=False, error=error_message, error_type=error_type)


def clipboard_error_message(result: ClipboardResult) -> str:
    """Return the message to show for a failed copy, or '' on success."""

    if result.success:
        return ""
    if result.error_type == "size":
        return SIZE_ERROR
    if result.error_type == "permission":
        return PERMISSION_ERROR
    if result.error_type == "fallback":
        return DEFAULT_COPY_ERROR
    return result.error or DEFAULT_COPY_ERROR
