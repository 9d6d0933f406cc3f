import logging
import unittest

from violin_tuner.logger import get_logger
from violin_tuner.logging_config import setup_logging


class TestLogging(unittest.TestCase):
    def test_get_logger_is_cached(self):
        self.assertIs(get_logger("violin_tuner.services.targets"), get_logger("violin_tuner.services.targets"))

    def test_foreign_names_are_placed_under_package(self):
        self.assertEqual(get_logger("__main__").name, "violin_tuner.__main__")
        self.assertEqual(get_logger("violin_tuner").name, "violin_tuner")

    def test_level_override(self):
        setup_logging("DEBUG")
        self.assertEqual(logging.getLogger("violin_tuner.detection").level, logging.DEBUG)
        self.assertEqual(logging.getLogger("violin_tuner.ui").level, logging.DEBUG)
        self.assertEqual(logging.getLogger("").level, logging.ERROR)

        setup_logging()
        self.assertEqual(logging.getLogger("violin_tuner.detection").level, logging.INFO)
        self.assertEqual(logging.getLogger("violin_tuner.ui").level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
