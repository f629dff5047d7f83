"""Tests for structured JSON logging."""

import json
import logging
import unittest
from datetime import datetime, timezone

from utils.logging import MAX_LOG_MESSAGE_LENGTH, JSONFormatter, sanitize_log_message


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("jobapp", logging.INFO, __file__, 1, "User logged in", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter(unittest.TestCase):

    def test_emits_json_with_extras(self):
        output = json.loads(JSONFormatter().format(_record(userId=7)))

        self.assertEqual(output["level"], "INFO")
        self.assertEqual(output["logger"], "jobapp")
        self.assertEqual(output["message"], "User logged in")
        self.assertEqual(output["userId"], 7)
        self.assertTrue(output["timestamp"].endswith("Z"))

    def test_redacts_sensitive_extras(self):
        output = json.loads(JSONFormatter().format(_record(password="hunter2", Token="abc")))

        self.assertEqual(output["password"], "[REDACTED]")
        self.assertEqual(output["Token"], "[REDACTED]")

    def test_non_json_values_are_stringified(self):
        created = datetime(2024, 5, 1, tzinfo=timezone.utc)
        output = json.loads(JSONFormatter().format(_record(createdAt=created)))
        self.assertEqual(output["createdAt"], str(created))


class TestSanitizeLogMessage(unittest.TestCase):

    def test_flattens_newlines(self):
        self.assertEqual(sanitize_log_message("line1\r\nline2"), "line1  line2")

    def test_truncates_long_messages(self):
        result = sanitize_log_message("x" * (MAX_LOG_MESSAGE_LENGTH + 10))
        self.assertEqual(len(result), MAX_LOG_MESSAGE_LENGTH + 3)
        self.assertTrue(result.endswith("..."))

    def test_empty(self):
        self.assertEqual(sanitize_log_message(None), "")


if __name__ == '__main__':
    unittest.main()
