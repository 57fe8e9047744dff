import logging
import unittest

from mazegen.utils.logger import ENGINE_LOGGER_NAME, configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(logging.WARNING)

    def test_modules_log_under_engine_namespace(self) -> None:
        self.assertEqual(get_logger().name, ENGINE_LOGGER_NAME)
        self.assertTrue(get_logger("mazegen.engine.grid").name.startswith(ENGINE_LOGGER_NAME + "."))

    def test_engine_level_overrides_root(self) -> None:
        configure_logging(logging.WARNING, engine_level=logging.DEBUG)
        self.assertTrue(get_logger("mazegen.engine.grid").isEnabledFor(logging.DEBUG))
        self.assertFalse(logging.getLogger("elsewhere").isEnabledFor(logging.INFO))

    def test_reconfiguring_resets_engine_level(self) -> None:
        configure_logging(logging.WARNING, engine_level=logging.DEBUG)
        configure_logging(logging.WARNING)
        self.assertFalse(get_logger("mazegen.engine.grid").isEnabledFor(logging.INFO))
        self.assertEqual(len(logging.getLogger().handlers), 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
