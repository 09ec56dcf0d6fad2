from dataclasses import asdict
import inspect
import unittest

from textscrub.audit import build_audit_event, content_hash
from textscrub.pipeline import clean_text
from textscrub.rules import RULES_VERSION


class AuditEventTests(unittest.TestCase):
    def test_audit_event_never_holds_text(self) -> None:
        result = clean_text("secret\u2014value")
        event = build_audit_event(result, timestamp="2024-01-01T00:00:00+00:00")
        data = asdict(event)

        expected_keys = {
            "timestamp",
            "content_hash",
            "input_length",
            "output_length",
            "change_count",
            "categories",
            "rules_version",
        }
        self.assertEqual(set(data.keys()), expected_keys)
        self.assertNotIn("secret", repr(event))

    def test_audit_event_summarizes_changes(self) -> None:
        text = "\u201Cx\u201D\u2026"
        result = clean_text(text)
        event = build_audit_event(result, timestamp="2024-01-01T00:00:00+00:00")
        self.assertEqual(event.timestamp, "2024-01-01T00:00:00+00:00")
        self.assertEqual(event.content_hash, content_hash(text))
        self.assertEqual(event.input_length, 4)
        self.assertEqual(event.output_length, 6)
        self.assertEqual(event.change_count, 3)
        self.assertEqual(event.categories, {"smart-quotes": 2, "ellipsis": 1})
        self.assertEqual(event.rules_version, RULES_VERSION)

    def test_default_timestamp_is_utc(self) -> None:
        event = build_audit_event(clean_text("plain"))
        self.assertTrue(event.timestamp.endswith("+00:00"))
        self.assertEqual(event.change_count, 0)

    def test_clean_text_takes_only_text(self) -> None:
        self.assertEqual(list(inspect.signature(clean_text).parameters), ["text"])


if __name__ == "__main__":
    unittest.main()
