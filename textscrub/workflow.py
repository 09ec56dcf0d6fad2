"""Processing workflow tying cleaning, callbacks and clipboard copy together."""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .audit import AuditEvent, build_audit_event
from .clipboard import ClipboardResult, ClipboardWriter, clipboard_error_message, copy_to_clipboard
from .config import TextscrubConfig, apply_defaults
from .feedback import FEEDBACK_MESSAGES, FeedbackManager
from .pipeline import clean_text
from .types import CleaningResult

CompletionCallback = Callable[[CleaningResult], None]


@dataclass(frozen=True)
class ProcessingOutcome:
    """Cleaning result, its audit summary and the clipboard outcome if a copy ran."""

    result: CleaningResult
    audit: AuditEvent
    copy: Optional[ClipboardResult] = None


def process_text(
    text: str,
    on_complete: CompletionCallback,
    config: Optional[TextscrubConfig] = None,
    auto_copy: bool = False,
    writer: Optional[ClipboardWriter] = None,
    fallback_writer: Optional[ClipboardWriter] = None,
    feedback: Optional[FeedbackManager] = None,
) -> Optional[ProcessingOutcome]:
    """Clean ``text``, report it to ``on_complete`` and optionally copy it.

    Blank input is rejected with None before any cleaning happens. When a
    FeedbackManager is given it shows progress, then the copy outcome.
    """

    if not text.strip():
        if feedback is not None:
            feedback.show(FEEDBACK_MESSAGES["EMPTY_TEXT"], "info")
        return None
    if auto_copy and writer is None:
        raise ValueError("auto_copy requires a clipboard writer")

    resolved = config or apply_defaults()
    if feedback is not None:
        feedback.show(FEEDBACK_MESSAGES["PROCESSING"], "processing")
    result = clean_text(text)
    on_complete(result)

    copy_result = None
    if auto_copy:
        copy_result = copy_to_clipboard(
            result.cleaned, resolved.clipboard, writer, fallback_writer=fallback_writer
        )
    if feedback is not None:
        _report(feedback, copy_result)
    return ProcessingOutcome(result=result, audit=build_audit_event(result), copy=copy_result)


def _report(feedback: FeedbackManager, copy_result: Optional[ClipboardResult]) -> None:
    if copy_result is None:
        feedback.clear()
    elif copy_result.success:
        feedback.show(FEEDBACK_MESSAGES["SUCCESS"], "success")
    else:
        feedback.show(clipboard_error_message(copy_result), "error")


def handle_paste(
    pasted_text: Optional[str],
    on_complete: CompletionCallback,
    writer: ClipboardWriter,
    config: Optional[TextscrubConfig] = None,
    fallback_writer: Optional[ClipboardWriter] = None,
    feedback: Optional[FeedbackManager] = None,
) -> Tuple[str, Optional[ProcessingOutcome]]:
    """Clean pasted text and copy the result straight back."""

    if not pasted_text:
        return "", None
    if feedback is not None:
        feedback.show(FEEDBACK_MESSAGES["PASTE_SUCCESS"], "info")
    outcome = process_text(
        pasted_text,
        on_complete,
        config=config,
        auto_copy=True,
        writer=writer,
        fallback_writer=fallback_writer,
        feedback=feedback,
    )
    return pasted_text, outcome
