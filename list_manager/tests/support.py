"""Shared test helpers."""

import os
import tempfile
import unittest
from unittest import mock

from simple_logger import LogLevel, Slogger


class TempLogTestCase(unittest.TestCase):
    """Sends Slogger output to a throwaway directory."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmp_path = self._tmp.name
        patcher = mock.patch.object(Slogger, "log_path", os.path.join(self.tmp_path, "logs", "test.log"))
        patcher.start()
        self.addCleanup(patcher.stop)
        level_patcher = mock.patch.object(Slogger, "min_level", LogLevel.DEBUG)
        level_patcher.start()
        self.addCleanup(level_patcher.stop)


def numbered_records(count):
    return [{"id": i, "name": f"item {i:03d}"} for i in range(1, count + 1)]
