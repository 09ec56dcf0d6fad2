"""Debounce and throttle wrappers built on threading timers."""

import threading
import time
from typing import Any, Callable, Optional

TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


class Debounced:
    """Delay calls to ``func`` until ``wait`` seconds pass without a new call.

    With ``immediate`` the first call of a burst runs at once and the
    trailing call is suppressed.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        wait: float,
        immediate: bool = False,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self._func = func
        self._wait = wait
        self._immediate = immediate
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            call_now = self._immediate and self._timer is None
            if self._timer is not None:
                self._timer.cancel()
            timer = self._timer_factory(self._wait, lambda: self._later(timer, args, kwargs))
            timer.daemon = True
            self._timer = timer
            timer.start()
        if call_now:
            self._func(*args, **kwargs)

    def _later(self, timer: threading.Timer, args: tuple, kwargs: dict) -> None:
        with self._lock:
            if self._timer is not timer:
                return
            self._timer = None
        if not self._immediate:
            self._func(*args, **kwargs)

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


class Throttled:
    """Run ``func`` at most once per ``wait`` seconds.

    Calls inside the window are coalesced into one trailing call that fires
    when the window closes, using the latest arguments.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        wait: float,
        clock: Callable[[], float] = time.monotonic,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self._func = func
        self._wait = wait
        self._clock = clock
        self._timer_factory = timer_factory
        self._last_ran: Optional[float] = None
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._last_ran is None:
                self._last_ran = self._clock()
                run_now = True
            else:
                run_now = False
                if self._timer is not None:
                    self._timer.cancel()
                remaining = max(self._wait - (self._clock() - self._last_ran), 0.0)
                timer = self._timer_factory(
                    remaining, lambda: self._trailing(timer, args, kwargs)
                )
                timer.daemon = True
                self._timer = timer
                timer.start()
        if run_now:
            self._func(*args, **kwargs)

    def _trailing(self, timer: threading.Timer, args: tuple, kwargs: dict) -> None:
        with self._lock:
            if self._timer is not timer:
                return
            self._timer = None
            if self._clock() - self._last_ran < self._wait:
                return
            self._last_ran = self._clock()
        self._func(*args, **kwargs)

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


def debounce(
    func: Callable[..., Any],
    wait: float,
    immediate: bool = False,
    timer_factory: TimerFactory = threading.Timer,
) -> Debounced:
    """Return a debounced wrapper around ``func``."""

    return Debounced(func, wait, immediate=immediate, timer_factory=timer_factory)


def throttle(
    func: Callable[..., Any],
    wait: float,
    clock: Callable[[], float] = time.monotonic,
    timer_factory: TimerFactory = threading.Timer,
) -> Throttled:
    """Return a throttled wrapper around ``func``."""

    return Throttled(func, wait, clock=clock, timer_factory=timer_factory)
