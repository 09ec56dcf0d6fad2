"""Configuration parsing and defaults for textscrub."""

from dataclasses import dataclass, field, replace
import json
from pathlib import Path
from typing import Optional

DEFAULT_MAX_CLIPBOARD_SIZE = 1_000_000
DEFAULT_DEBOUNCE_SECONDS = 0.1


class ConfigError(ValueError):
    """Raised when configuration parsing or validation fails."""

    pass


@dataclass(frozen=True)
class ClipboardPolicy:
    """Limits applied before handing cleaned text to a clipboard."""

    max_size: int = DEFAULT_MAX_CLIPBOARD_SIZE


@dataclass(frozen=True)
class FeedbackPolicy:
    """Auto-expiry delays for feedback messages, in seconds."""

    success_seconds: float = 3.0
    error_seconds: float = 5.0


@dataclass(frozen=True)
class TextscrubConfig:
    """Root configuration object for textscrub."""

    clipboard: ClipboardPolicy = field(default_factory=ClipboardPolicy)
    feedback: FeedbackPolicy = field(default_factory=FeedbackPolicy)
    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS


DEFAULT_CONFIG = TextscrubConfig()


def load_config(path: Path) -> TextscrubConfig:
    """Load configuration from a JSON-compatible YAML file path."""

    if not path.exists():
        return DEFAULT_CONFIG

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError("config must be JSON-compatible YAML") from exc
    if not isinstance(data, dict):
        raise ConfigError("config must be a JSON object")
    return config_from_dict(data)


def config_from_dict(data: dict) -> TextscrubConfig:
    """Parse configuration from a Python dict."""

    return merge_config(DEFAULT_CONFIG, data)


def apply_defaults(overrides: Optional[dict] = None) -> TextscrubConfig:
    """Fill any field missing from ``overrides`` with its default."""

    return merge_config(DEFAULT_CONFIG, overrides or {})


def merge_config(base: TextscrubConfig, overrides: dict) -> TextscrubConfig:
    """Return a copy of ``base`` with the fields present in ``overrides`` replaced."""

    clipboard = _section(overrides, "clipboard")
    max_size = _as_int(
        clipboard.get("max_size", base.clipboard.max_size), "clipboard.max_size"
    )

    feedback = _section(overrides, "feedback")
    success_seconds = _as_number(
        feedback.get("success_seconds", base.feedback.success_seconds),
        "feedback.success_seconds",
    )
    error_seconds = _as_number(
        feedback.get("error_seconds", base.feedback.error_seconds),
        "feedback.error_seconds",
    )

    debounce_seconds = _as_number(
        overrides.get("debounce_seconds", base.debounce_seconds), "debounce_seconds"
    )

    return replace(
        base,
        clipboard=replace(base.clipboard, max_size=max_size),
        feedback=replace(
            base.feedback,
            success_seconds=success_seconds,
            error_seconds=error_seconds,
        ),
        debounce_seconds=debounce_seconds,
    )


def _section(data: dict, name: str) -> dict:
    """Return a nested object from ``data``, treating null as empty."""

    value = data.get(name, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{name} must be an object")
    return value


def _as_int(value: Optional[object], name: str) -> int:
    """Validate integer limits in configuration."""

    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer")
    if value <= 0:
        raise ConfigError(f"{name} must be positive")
    return value


def _as_number(value: Optional[object], name: str) -> float:
    """Validate numeric delays in configuration."""

    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ConfigError(f"{name} must be a number")
    if value <= 0:
        raise ConfigError(f"{name} must be positive")
    return float(value)
