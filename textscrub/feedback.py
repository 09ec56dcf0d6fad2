"""Short-lived feedback messages with cancellable auto-expiry."""

from dataclasses import dataclass
import threading
from typing import Callable, Dict, List, Optional

from .clipboard import DEFAULT_COPY_ERROR, PERMISSION_ERROR, SIZE_ERROR
from .config import FeedbackPolicy

FEEDBACK_TYPES = ("success", "error", "processing", "info")

FEEDBACK_MESSAGES: Dict[str, str] = {
    "SUCCESS": "Copied to clipboard!",
    "ERROR": DEFAULT_COPY_ERROR,
    "PROCESSING": "Processing text...",
    "PASTE_SUCCESS": "Text pasted - cleaning automatically...",
    "EMPTY_TEXT": "Please enter some text to clean",
    "CLEANING": "Cleaning text...",
    "CLIPBOARD_LARGE": SIZE_ERROR,
    "CLIPBOARD_PERMISSION": PERMISSION_ERROR,
}


@dataclass(frozen=True)
class FeedbackMessage:
    """A message shown to the user, optionally tagged with an id."""

    message: str
    type: str
    id: Optional[str] = None


Listener = Callable[[Optional[FeedbackMessage]], None]
TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


class FeedbackManager:
    """Hold the current feedback message and expire it on a timer.

    Success and error messages clear themselves after the delays in the
    FeedbackPolicy; processing and info messages stay until replaced or
    cleared. Showing a new message cancels the previous timer. Listeners are
    called with the new current message after every change.
    """

    def __init__(
        self,
        policy: Optional[FeedbackPolicy] = None,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self._policy = policy or FeedbackPolicy()
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._current: Optional[FeedbackMessage] = None
        self._timer: Optional[threading.Timer] = None
        self._listeners: List[Listener] = []

    @property
    def current(self) -> Optional[FeedbackMessage]:
        return self._current

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener and return a function that removes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def show(self, message: str, type: str, id: Optional[str] = None) -> FeedbackMessage:
        """Replace the current message and schedule its expiry."""

        if type not in FEEDBACK_TYPES:
            raise ValueError(f"unknown feedback type: {type}")
        feedback = FeedbackMessage(message=message, type=type, id=id)
        with self._lock:
            self._cancel_timer()
            self._current = feedback
            delay = self._expiry_delay(type)
            if delay > 0:
                self._timer = self._timer_factory(delay, lambda: self._expire(feedback))
                self._timer.daemon = True
                self._timer.start()
        self._notify(feedback)
        return feedback

    def clear(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._current = None
        self._notify(None)

    def clear_by_id(self, id: str) -> None:
        """Clear the current message only if it carries ``id``."""

        current = self._current
        if current is not None and current.id == id:
            self.clear()

    def cleanup(self) -> None:
        """Cancel any pending timer without touching the current message."""

        with self._lock:
            self._cancel_timer()

    def _expiry_delay(self, type: str) -> float:
        if type == "success":
            return self._policy.success_seconds
        if type == "error":
            return self._policy.error_seconds
        return 0.0

    def _expire(self, feedback: FeedbackMessage) -> None:
        with self._lock:
            if self._current is not feedback:
                return
            self._current = None
            self._timer = None
        self._notify(None)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _notify(self, feedback: Optional[FeedbackMessage]) -> None:
        for listener in list(self._listeners):
            listener(feedback)
