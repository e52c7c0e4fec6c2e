#!/usr/bin/env python3
"""
Tests for the Command-Line Interface and Configuration
"""

import os
import tempfile
import unittest
from datetime import date
from io import StringIO
from unittest.mock import patch
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from date_fragments import cli
from date_fragments.config import load_config, load_env_file

TODAY = date(2024, 8, 4)


def clock():
    return TODAY


class TestRun(unittest.TestCase):
    """Test cases for the stdin loop"""

    def test_recognized_lines(self):
        """Test a session mixing quick offsets, numbers and words"""
        out = StringIO()
        lines = ["+ 10\n", "10\n", "22-04\n", "yesterday\n", "- 4\n"]

        failures = cli.run(lines, cli.versatile_parser("en", "dmy"), clock=clock, out=out)

        self.assertEqual(failures, 0)
        self.assertEqual(out.getvalue().splitlines(), [
            "Today is: 2024-08-04",
            "recognized: 2024-08-14",
            "recognized: 2024-08-10",
            "recognized: 2024-04-22",
            "recognized: 2024-08-03",
            "recognized: 2024-07-31",
        ])

    def test_unrecognized_line(self):
        """Test failures are reported and counted"""
        out = StringIO()

        failures = cli.run(["42", "someday"], cli.versatile_parser("en", "dmy"), clock=clock, out=out)

        self.assertEqual(failures, 2)
        reported = out.getvalue().splitlines()[1:]
        self.assertEqual(len(reported), 2)
        for line in reported:
            self.assertTrue(line.startswith("unable to recognize the input as a date: "))

    def test_month_first(self):
        """Test the month-first bundle"""
        out = StringIO()
        cli.run(["04/22"], cli.versatile_parser("en", "mdy"), clock=clock, out=out)
        self.assertIn("recognized: 2024-04-22", out.getvalue())

    def test_huge_offset_does_not_stop_the_loop(self):
        """Test an oversized offset is reported and the next line still parsed"""
        out = StringIO()

        failures = cli.run(["+" + "1" * 5000, "10"], cli.versatile_parser("en", "dmy"), clock=clock, out=out)

        self.assertEqual(failures, 1)
        reported = out.getvalue().splitlines()[1:]
        self.assertTrue(reported[0].startswith("unable to recognize the input as a date: "))
        self.assertEqual(reported[1], "recognized: 2024-08-10")

    def test_russian(self):
        """Test the Russian bundle behind the quick offsets"""
        out = StringIO()
        cli.run(["послезавтра", "+1"], cli.versatile_parser("ru", "dmy"), clock=clock, out=out)
        self.assertEqual(out.getvalue().splitlines()[1:], [
            "recognized: 2024-08-06",
            "recognized: 2024-08-05",
        ])

    def test_unknown_locale(self):
        """Test an unknown locale is rejected"""
        with self.assertRaises(ValueError):
            cli.versatile_parser("fr", "dmy")


class TestMain(unittest.TestCase):
    """Test cases for the CLI entry point"""

    def setUp(self):
        """Isolate from any settings file and environment overrides"""
        self.env = patch.dict(os.environ, {'LOG_LEVEL': 'ERROR'})
        self.env.start()
        for key in ('DATE_FRAGMENTS_LOCALE', 'DATE_FRAGMENTS_ORDER'):
            os.environ.pop(key, None)
        self.default_config = patch('date_fragments.config.DEFAULT_CONFIG', '/nonexistent/settings.env')
        self.default_config.start()

    def tearDown(self):
        self.default_config.stop()
        self.env.stop()

    def test_main_reads_stdin(self):
        """Test main wires stdin through the selected parser"""
        with patch('sys.stdin', StringIO("13/07/2024\nnope\n")), \
                patch('sys.stdout', new_callable=StringIO) as stdout:
            code = cli.main(['--locale', 'en', '--order', 'dmy'])

        self.assertEqual(code, 0)
        output = stdout.getvalue().splitlines()
        self.assertTrue(output[0].startswith("Today is: "))
        self.assertEqual(output[1], "recognized: 2024-07-13")
        self.assertTrue(output[2].startswith("unable to recognize"))

    def test_main_uses_config_locale(self):
        """Test the locale comes from the environment when not given"""
        os.environ['DATE_FRAGMENTS_LOCALE'] = 'ru'
        with patch('sys.stdin', StringIO("31.12.2023\n")), \
                patch('sys.stdout', new_callable=StringIO) as stdout:
            cli.main([])

        self.assertIn("recognized: 2023-12-31", stdout.getvalue())

    def test_main_invalid_config_locale(self):
        """Test an unknown configured locale exits with an error"""
        os.environ['DATE_FRAGMENTS_LOCALE'] = 'fr'
        with patch('sys.stderr', new_callable=StringIO) as stderr:
            code = cli.main([])
        self.assertEqual(code, 2)
        self.assertIn("fr", stderr.getvalue())

    def test_main_missing_config_file(self):
        """Test a missing config file is reported"""
        with patch('sys.stderr', new_callable=StringIO) as stderr:
            code = cli.main(['--config', '/nonexistent/custom.env'])
        self.assertEqual(code, 1)
        self.assertIn("Config file not found", stderr.getvalue())


class TestConfig(unittest.TestCase):
    """Test cases for configuration loading"""

    def setUp(self):
        self.env = patch.dict(os.environ, {})
        self.env.start()
        for key in ('DATE_FRAGMENTS_LOCALE', 'DATE_FRAGMENTS_ORDER', 'LOG_LEVEL'):
            os.environ.pop(key, None)
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()
        self.env.stop()

    def test_defaults(self):
        """Test defaults without file or environment"""
        with patch('date_fragments.config.DEFAULT_CONFIG', '/nonexistent/settings.env'):
            config = load_config()
        self.assertEqual(config, {"locale": "en", "order": "dmy", "log_level": "INFO"})

    def test_env_file(self):
        """Test values from an env file, skipping comments and blanks"""
        path = os.path.join(self.tmp.name, "settings.env")
        with open(path, 'w', encoding='utf-8') as f:
            f.write("# bundle selection\n\nDATE_FRAGMENTS_LOCALE=RU\nDATE_FRAGMENTS_ORDER = mdy\nLOG_LEVEL=debug\n")

        config = load_config(path)

        self.assertEqual(config, {"locale": "ru", "order": "mdy", "log_level": "DEBUG"})

    def test_missing_env_file(self):
        """Test a missing file is reported as a failure"""
        self.assertFalse(load_env_file(os.path.join(self.tmp.name, "missing.env")))


if __name__ == '__main__':
    unittest.main()
