import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from hoiola_core import logging_setup


class LoggingSetupTests(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger("hoiola")
        self._saved = list(self.logger.handlers)
        for h in self._saved:
            self.logger.removeHandler(h)

    def tearDown(self):
        for h in list(self.logger.handlers):
            h.close()
            self.logger.removeHandler(h)
        for h in self._saved:
            self.logger.addHandler(h)

    def test_child_loggers_write_json_lines(self):
        with tempfile.TemporaryDirectory() as tmp:
            with patch.object(logging_setup, "log_dir", return_value=Path(tmp)):
                logging_setup.configure_logging(console=False, level="DEBUG")
                logging.getLogger("hoiola.telemetry.thermal").warning(
                    "cpu temperature unavailable", extra={"event": "probe_failed"}
                )
                for h in self.logger.handlers:
                    h.flush()

                lines = (Path(tmp) / "hoiola.log").read_text(encoding="utf-8").splitlines()
                records = [json.loads(line) for line in lines]
                last = records[-1]
                self.assertEqual(last["level"], "WARNING")
                self.assertEqual(last["logger"], "hoiola.telemetry.thermal")
                self.assertEqual(last["event"], "probe_failed")
                self.assertIn("ts_utc", last)

    def test_configure_is_idempotent(self):
        with tempfile.TemporaryDirectory() as tmp:
            with patch.object(logging_setup, "log_dir", return_value=Path(tmp)):
                first = logging_setup.configure_logging(console=True)
                count = len(first.handlers)
                second = logging_setup.configure_logging(console=True)
                self.assertIs(first, second)
                self.assertEqual(len(second.handlers), count)
                self.assertEqual(count, 2)

    def test_unwritable_log_dir_is_tolerated(self):
        with patch.object(logging_setup, "log_dir", side_effect=PermissionError("read-only")):
            logger = logging_setup.configure_logging(console=False)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.NullHandler)

    def test_log_dir_env_override(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "nested" / "logs"
            with patch.dict("os.environ", {"HOIOLA_LOG_DIR": str(target)}):
                self.assertEqual(logging_setup.log_dir(), target)
            self.assertTrue(target.is_dir())

    def test_crash_hook_records_crash_id(self):
        with tempfile.TemporaryDirectory() as tmp:
            saved_hook = sys.excepthook
            try:
                with patch.object(logging_setup, "log_dir", return_value=Path(tmp)), patch.object(
                    logging_setup.faulthandler, "enable"
                ), patch.object(sys, "__excepthook__"):
                    logging_setup.configure_logging(console=False)
                    logging_setup.install_crash_hooks()
                    try:
                        raise RuntimeError("sensor table corrupt")
                    except RuntimeError:
                        sys.excepthook(*sys.exc_info())
            finally:
                sys.excepthook = saved_hook
            for h in self.logger.handlers:
                h.flush()

            lines = (Path(tmp) / "hoiola.log").read_text(encoding="utf-8").splitlines()
            last = json.loads(lines[-1])
            self.assertEqual(last["level"], "CRITICAL")
            self.assertEqual(last["event"], "uncaught_exception")
            self.assertEqual(len(last["crash_id"]), 36)
            self.assertIn("sensor table corrupt", last["exc"])

    def test_get_logger_namespaces(self):
        self.assertEqual(logging_setup.get_logger().name, "hoiola")
        self.assertEqual(logging_setup.get_logger("app").name, "hoiola.app")


if __name__ == "__main__":
    unittest.main()
