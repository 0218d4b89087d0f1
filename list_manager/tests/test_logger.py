import os
import unittest
from unittest import mock

import simple_logger
from simple_logger import LogLevel, Slogger

from .support import TempLogTestCase


class TestSlogger(TempLogTestCase):
    def read_log(self):
        if not os.path.exists(Slogger.log_path):
            return ""
        with open(Slogger.log_path, encoding="utf-8") as f:
            return f.read()

    def test_writes_level_and_context(self):
        Slogger.warning("Sort field missing", {"field": "title", "missing": 2})

        line = self.read_log()
        self.assertIn(" - WARNING - Sort field missing | field=title | missing=2", line)

    def test_min_level_drops_lower_levels(self):
        with mock.patch.object(Slogger, "min_level", LogLevel.INFO):
            Slogger.debug("Computed page")
            Slogger.info("Starting List Manager...")

        output = self.read_log()
        self.assertNotIn("Computed page", output)
        self.assertIn("Starting List Manager...", output)

    def test_exception_includes_traceback(self):
        try:
            raise ValueError("bad records")
        except ValueError as e:
            Slogger.exception(e, "Could not load")

        output = self.read_log()
        self.assertIn("Could not load: ValueError - bad records", output)
        self.assertIn("TRACEBACK:", output)
        self.assertIn('raise ValueError("bad records")', output)


class TestLevelFromEnvironment(unittest.TestCase):
    def test_reads_level_name(self):
        with mock.patch.dict(os.environ, {"LIST_MANAGER_LOG_LEVEL": "warning"}):
            self.assertEqual(simple_logger._level_from_env(), LogLevel.WARNING)

    def test_unknown_or_unset_keeps_default(self):
        with mock.patch.dict(os.environ, {"LIST_MANAGER_LOG_LEVEL": "loud"}):
            self.assertEqual(simple_logger._level_from_env(), LogLevel.DEBUG)
        with mock.patch.dict(os.environ, {}):
            os.environ.pop("LIST_MANAGER_LOG_LEVEL", None)
            self.assertEqual(simple_logger._level_from_env(LogLevel.INFO), LogLevel.INFO)


if __name__ == "__main__":
    unittest.main()
