"""In-memory audit summaries of cleaning runs."""

import hashlib
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Optional

from .rules import RULES_VERSION
from .types import CleaningResult


@dataclass(frozen=True)
class AuditEvent:
    """Summary of one cleaning run that never carries the text itself."""

    timestamp: str
    content_hash: str
    input_length: int
    output_length: int
    change_count: int
    categories: Dict[str, int]
    rules_version: str


def content_hash(text: str) -> str:
    """Hash the original text so runs can be correlated without storing it."""

    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def build_audit_event(result: CleaningResult, timestamp: Optional[str] = None) -> AuditEvent:
    event_time = timestamp or datetime.now(timezone.utc).isoformat()
    return AuditEvent(
        timestamp=event_time,
        content_hash=content_hash(result.original),
        input_length=len(result.original),
        output_length=len(result.cleaned),
        change_count=len(result.changes),
        categories=result.counts_by_category(),
        rules_version=RULES_VERSION,
    )
