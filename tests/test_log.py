from __future__ import annotations

import logging
import os
import unittest
from unittest import mock

from polynav.log import LOG_LEVEL_ENV_VAR, configure_logging, resolve_log_level


class LogLevelTests(unittest.TestCase):
    def test_verbosity_maps_to_levels(self) -> None:
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: ""}):
            self.assertEqual(resolve_log_level(0), logging.WARNING)
            self.assertEqual(resolve_log_level(1), logging.INFO)
            self.assertEqual(resolve_log_level(3), logging.DEBUG)

    def test_environment_overrides_verbosity(self) -> None:
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "error"}):
            self.assertEqual(resolve_log_level(2), logging.ERROR)

    def test_invalid_environment_value_is_ignored(self) -> None:
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "chatty"}):
            self.assertEqual(resolve_log_level(1), logging.INFO)

    def test_configure_installs_single_handler(self) -> None:
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: ""}):
            configure_logging(1)
            configure_logging(2)

        logger = logging.getLogger("polynav")
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertFalse(logger.propagate)


if __name__ == "__main__":
    unittest.main()
