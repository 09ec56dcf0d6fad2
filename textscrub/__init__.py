from .audit import AuditEvent, build_audit_event
from .classify import classify_character
from .clipboard import ClipboardResult, clipboard_error_message, copy_to_clipboard
from .config import (
    ClipboardPolicy,
    ConfigError,
    FeedbackPolicy,
    TextscrubConfig,
    apply_defaults,
    load_config,
    merge_config,
)
from .feedback import FEEDBACK_MESSAGES, FeedbackManager, FeedbackMessage
from .pipeline import clean_text
from .rules import RULES_VERSION
from .schedule import debounce, throttle
from .types import CATEGORIES, CleaningResult, Edit
from .workflow import ProcessingOutcome, handle_paste, process_text

__all__ = [
    "AuditEvent",
    "CATEGORIES",
    "CleaningResult",
    "ClipboardPolicy",
    "ClipboardResult",
    "ConfigError",
    "Edit",
    "FEEDBACK_MESSAGES",
    "FeedbackManager",
    "FeedbackMessage",
    "FeedbackPolicy",
    "ProcessingOutcome",
    "RULES_VERSION",
    "TextscrubConfig",
    "apply_defaults",
    "build_audit_event",
    "classify_character",
    "clean_text",
    "clipboard_error_message",
    "copy_to_clipboard",
    "debounce",
    "handle_paste",
    "load_config",
    "merge_config",
    "process_text",
    "throttle",
]
