import unittest

from pysugar.core.errors import Outcome, attempt, catch, check, ignore, must, or_default
from pysugar.core.exceptions import SugarError


class TestAttempt(unittest.TestCase):

    def test_success(self):
        """Test that a normal return is reported as (value, True)."""
        value, ok = attempt(lambda: 42)
        self.assertEqual(value, 42)
        self.assertTrue(ok)

    def test_failure_reports_default(self):
        """Test that a raised exception is contained and the default is returned."""
        value, ok = attempt(lambda: 1 // 0, 0)
        self.assertEqual(value, 0)
        self.assertFalse(ok)

    def test_failure_default_is_none(self):
        outcome = attempt(lambda: int("abc"))
        self.assertIsNone(outcome.value)
        self.assertFalse(outcome.ok)
        self.assertIsInstance(outcome.error, ValueError)

    def test_outcome_unpacks_to_pair(self):
        self.assertEqual(tuple(Outcome(1, True)), (1, True))

    def test_keyboard_interrupt_propagates(self):
        """Test that signals that are not ordinary exceptions are not contained."""
        def interrupted():
            raise KeyboardInterrupt

        with self.assertRaises(KeyboardInterrupt):
            attempt(interrupted)

    def test_independent_calls(self):
        """Test that a failed call never reports a value from an earlier call."""
        attempt(lambda: 42)
        value, ok = attempt(lambda: [][0], 0)
        self.assertEqual((value, ok), (0, False))


class TestOrDefault(unittest.TestCase):

    def test_selection(self):
        self.assertEqual(or_default(5, True, 0), 5)
        self.assertEqual(or_default(5, False, 0), 0)


class TestMustCheckIgnore(unittest.TestCase):

    def test_must_returns_value(self):
        self.assertEqual(must("v", None), "v")
        self.assertEqual(must("v"), "v")

    def test_must_raises_error(self):
        err = OSError("disk full")
        with self.assertRaises(OSError) as cm:
            must("v", err)
        self.assertIs(cm.exception, err)

    def test_must_wraps_non_exception_payload(self):
        with self.assertRaises(SugarError) as cm:
            must("v", "required env var missing: X")
        self.assertEqual(str(cm.exception), "required env var missing: X")

    def test_check(self):
        self.assertIsNone(check(None))
        with self.assertRaises(ValueError):
            check(ValueError("bad"))

    def test_ignore_never_raises(self):
        for err in (None, ValueError("bad"), "text", 0):
            self.assertIsNone(ignore(err))


class TestCatch(unittest.TestCase):

    def test_catch_pairs(self):
        self.assertEqual(catch(int, "42"), (42, None))
        value, err = catch(int, "abc")
        self.assertIsNone(value)
        self.assertIsInstance(err, ValueError)

    def test_parse_failure_end_to_end(self):
        """Test a parse failure raised by must, contained by attempt, then defaulted."""
        value, ok = attempt(lambda: must(*catch(int, "abc")), 0)
        self.assertFalse(ok)
        self.assertEqual(or_default(value, ok, 0), 0)

        value, ok = attempt(lambda: must(*catch(int, "17")), 0)
        self.assertEqual(or_default(value, ok, 0), 17)


if __name__ == '__main__':
    unittest.main()
