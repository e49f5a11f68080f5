"""Tests for logging configuration."""

import logging
import unittest

from nutrition_planner.app_logging import configure_logging


class TestConfigureLogging(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger("nutrition_planner")
        self.logger.handlers.clear()

    def test_idempotent(self):
        configure_logging()
        configure_logging()
        self.assertEqual(len(self.logger.handlers), 1)
        self.assertFalse(self.logger.propagate)

    def test_level(self):
        configure_logging("debug")
        self.assertEqual(self.logger.level, logging.DEBUG)
        configure_logging("WARNING")
        self.assertEqual(self.logger.level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
