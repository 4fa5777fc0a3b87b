import io
import json
import unittest
from contextlib import redirect_stderr

from optionpy import NONE, some, unwrap, expect, UnwrapError
from optionpy.config import Settings, load_settings
from optionpy.logger import ConsoleLogger, get_logger, set_logger


class TestConsoleLogger(unittest.TestCase):
    def test_text_output_with_fields(self):
        log = ConsoleLogger("t", level="DEBUG")
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.debug("hello", op="unwrap", n=1)
        line = buf.getvalue().strip()
        self.assertIn("t DEBUG: hello", line)
        self.assertTrue(line.endswith(" n=1 op=unwrap"))

    def test_json_output(self):
        log = ConsoleLogger("t", level="DEBUG", json_output=True)
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.debug("bad", k="v")
        rec = json.loads(buf.getvalue())
        self.assertEqual(rec["level"], "DEBUG")
        self.assertEqual(rec["msg"], "bad")
        self.assertEqual(rec["fields"], {"k": "v"})

    def test_level_filtering(self):
        log = ConsoleLogger("t")
        self.assertEqual(log.level_name, "WARN")
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.debug("hidden")
            log.set_level("debug")
            log.debug("shown")
        self.assertNotIn("hidden", buf.getvalue())
        self.assertIn("shown", buf.getvalue())
        self.assertEqual(log.level_name, "DEBUG")
        log.set_level("nonsense")
        self.assertEqual(log.level_name, "DEBUG")


class TestPackageLogger(unittest.TestCase):
    def tearDown(self):
        set_logger(None)

    def test_unwrap_logs_before_raising(self):
        set_logger(ConsoleLogger(level="DEBUG", json_output=True))
        buf = io.StringIO()
        with redirect_stderr(buf):
            self.assertEqual(unwrap(some(1)), 1)
            with self.assertRaises(UnwrapError):
                expect(NONE, "port missing")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        rec = json.loads(lines[0])
        self.assertEqual(rec["name"], "optionpy")
        self.assertEqual(rec["level"], "DEBUG")
        self.assertEqual(rec["fields"], {"reason": "port missing"})

    def test_default_logger_is_cached(self):
        set_logger(None)
        self.assertIs(get_logger(), get_logger())


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        s = load_settings({})
        self.assertEqual(s, Settings(log_level="WARN", log_json=False))

    def test_from_environment(self):
        s = load_settings({"OPTIONPY_LOG_LEVEL": "debug", "OPTIONPY_LOG_JSON": "Yes"})
        self.assertEqual(s.log_level, "DEBUG")
        self.assertTrue(s.log_json)
        log = ConsoleLogger.from_settings(s)
        self.assertEqual(log.level_name, "DEBUG")
        self.assertTrue(log.json_output)

    def test_unknown_level_falls_back_to_default(self):
        s = load_settings({"OPTIONPY_LOG_LEVEL": "verbose"})
        self.assertEqual(s.log_level, "WARN")
        self.assertEqual(ConsoleLogger.from_settings(s).level_name, "WARN")


if __name__ == "__main__":
    unittest.main()
