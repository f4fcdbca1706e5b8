import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from pysugar.core.exceptions import EnvError
from pysugar.utils.env import env_bool, env_file, env_int, env_string, must_env


class TestEnvFile(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)
        patcher = patch.dict(os.environ, {}, clear=False)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _write(self, content):
        path = Path(self.tmp_dir.name) / ".env"
        path.write_text(content, encoding="utf-8")
        return path

    def test_loads_values(self):
        """Test that keys are loaded while comments and blank lines are skipped."""
        path = self._write("# comment\n\nSUGAR_A=1\n SUGAR_B = two \nSUGAR_C=\"quoted value\"\n")
        os.environ.pop("SUGAR_A", None)
        os.environ.pop("SUGAR_B", None)
        os.environ.pop("SUGAR_C", None)

        loaded = env_file(path)

        self.assertEqual(os.environ["SUGAR_A"], "1")
        self.assertEqual(os.environ["SUGAR_B"], "two")
        self.assertEqual(os.environ["SUGAR_C"], "quoted value")
        self.assertEqual(set(loaded), {"SUGAR_A", "SUGAR_B", "SUGAR_C"})

    def test_does_not_override_existing(self):
        path = self._write("SUGAR_EXISTING=from-file\n")
        os.environ["SUGAR_EXISTING"] = "from-env"

        loaded = env_file(path)

        self.assertEqual(os.environ["SUGAR_EXISTING"], "from-env")
        self.assertEqual(loaded, {})

    def test_override(self):
        path = self._write("SUGAR_EXISTING=from-file\n")
        os.environ["SUGAR_EXISTING"] = "from-env"

        env_file(path, override=True)

        self.assertEqual(os.environ["SUGAR_EXISTING"], "from-file")

    def test_line_without_equals(self):
        path = self._write("SUGAR_OK=1\nNOT_AN_ASSIGNMENT\n")
        with self.assertRaises(EnvError) as cm:
            env_file(path)
        self.assertIn("invalid env line", str(cm.exception))

    def test_sentence_without_equals(self):
        """Test that a multi-word line with no '=' is rejected and nothing is loaded."""
        path = self._write("SUGAR_FIRST=1\nthis line has no equals\n")
        os.environ.pop("SUGAR_FIRST", None)

        with self.assertRaises(EnvError) as cm:
            env_file(path)

        self.assertEqual(str(cm.exception), "invalid env line: 'this line has no equals'")
        self.assertNotIn("SUGAR_FIRST", os.environ)

    def test_inline_comment_dropped(self):
        """Test that an inline comment after an unquoted value is not part of the value."""
        path = self._write("SUGAR_INLINE=a # b\nSUGAR_QUOTED=\"a # b\"\n")
        os.environ.pop("SUGAR_INLINE", None)
        os.environ.pop("SUGAR_QUOTED", None)

        env_file(path)

        self.assertEqual(os.environ["SUGAR_INLINE"], "a")
        self.assertEqual(os.environ["SUGAR_QUOTED"], "a # b")

    def test_missing_file(self):
        missing = Path(self.tmp_dir.name) / "nope.env"
        with self.assertRaises(EnvError) as cm:
            env_file(missing)
        self.assertEqual(str(cm.exception), f"cannot open env file: {missing}")


class TestTypedGetters(unittest.TestCase):

    def setUp(self):
        patcher = patch.dict(os.environ, {
            "SUGAR_STR": "hello",
            "SUGAR_EMPTY": "",
            "SUGAR_INT": "42",
            "SUGAR_BAD_INT": "forty-two",
            "SUGAR_TRUE": "Yes",
            "SUGAR_FALSE": "off",
            "SUGAR_BAD_BOOL": "maybe",
        })
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop("SUGAR_UNSET", None)

    def test_env_string(self):
        self.assertEqual(env_string("SUGAR_STR"), "hello")
        self.assertEqual(env_string("SUGAR_EMPTY", "fallback"), "fallback")
        self.assertEqual(env_string("SUGAR_UNSET"), "")

    def test_env_int(self):
        self.assertEqual(env_int("SUGAR_INT"), 42)
        self.assertEqual(env_int("SUGAR_BAD_INT", 7), 7)
        self.assertEqual(env_int("SUGAR_UNSET", 0), 0)

    def test_env_int_errors(self):
        with self.assertRaises(EnvError) as cm:
            env_int("SUGAR_UNSET")
        self.assertEqual(str(cm.exception), "missing env var: SUGAR_UNSET")

        with self.assertRaises(EnvError) as cm:
            env_int("SUGAR_BAD_INT")
        self.assertEqual(str(cm.exception), "invalid int env var SUGAR_BAD_INT='forty-two'")

    def test_env_bool(self):
        self.assertTrue(env_bool("SUGAR_TRUE"))
        self.assertFalse(env_bool("SUGAR_FALSE"))
        self.assertTrue(env_bool("SUGAR_BAD_BOOL", True))
        self.assertFalse(env_bool("SUGAR_EMPTY", False))

    def test_env_bool_errors(self):
        with self.assertRaises(EnvError):
            env_bool("SUGAR_UNSET")
        with self.assertRaises(EnvError):
            env_bool("SUGAR_BAD_BOOL")

    def test_must_env(self):
        self.assertEqual(must_env("SUGAR_STR"), "hello")
        for key in ("SUGAR_EMPTY", "SUGAR_UNSET"):
            with self.assertRaises(EnvError) as cm:
                must_env(key)
            self.assertEqual(str(cm.exception), f"required env var missing: {key}")


if __name__ == '__main__':
    unittest.main()
