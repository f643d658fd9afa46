import math
import unittest

from pyvalq.checks import byte_strings, check, convert, floats, integers, strings
from pyvalq.core.validation import Err, Issues, Ok, accept, extend, valid, validate, validator


def run(pipeline, value):
    return validate(accept(pipeline, value))


class TestIntegerChecks(unittest.TestCase):

    def test_in_range_inclusive(self):
        pipeline = integers.in_range(validator(), 1600, 2023, "out of range")
        self.assertEqual(run(pipeline, 1600), Ok(1600))
        self.assertEqual(run(pipeline, 2023), Ok(2023))
        self.assertEqual(run(pipeline, 1599), Err(["out of range"]))
        self.assertEqual(run(pipeline, 2024), Err(["out of range"]))

    def test_checks_accumulate(self):
        pipeline = integers.maximum(integers.minimum(validator(), 10, "too small"), 5, "too big")
        self.assertEqual(run(pipeline, 7), Err(["too small", "too big"]))

    def test_strict_bounds(self):
        self.assertEqual(run(integers.greater_than(validator(), 3, "gt"), 3), Err(["gt"]))
        self.assertEqual(run(integers.less_than(validator(), 3, "lt"), 2), Ok(2))
        self.assertEqual(run(integers.positive(validator(), "pos"), 0), Err(["pos"]))
        self.assertEqual(run(integers.non_negative(validator(), "neg"), 0), Ok(0))


class TestFloatChecks(unittest.TestCase):

    def test_in_range(self):
        pipeline = floats.in_range(validator(), 0.0, 1.0, "not a fraction")
        self.assertEqual(run(pipeline, 0.5), Ok(0.5))
        self.assertEqual(run(pipeline, 1.5), Err(["not a fraction"]))

    def test_nan_fails_bounds_and_finite(self):
        pipeline = floats.finite(floats.minimum(validator(), 0.0, "below"), "not finite")
        self.assertEqual(run(pipeline, math.nan), Err(["below", "not finite"]))
        self.assertEqual(run(floats.finite(validator(), "inf"), math.inf), Err(["inf"]))
        self.assertEqual(run(floats.maximum(validator(), 2.5, "max"), 2.5), Ok(2.5))


class TestStringChecks(unittest.TestCase):

    def test_emptiness(self):
        self.assertEqual(run(strings.not_empty(validator(), "empty"), ""), Err(["empty"]))
        self.assertEqual(run(strings.not_empty(validator(), "empty"), " "), Ok(" "))
        self.assertEqual(run(strings.not_blank(validator(), "blank"), " \t"), Err(["blank"]))

    def test_lengths(self):
        pipeline = strings.length_between(validator(), 2, 4, "length")
        self.assertEqual(run(pipeline, "abc"), Ok("abc"))
        self.assertEqual(run(pipeline, "a"), Err(["length"]))
        self.assertEqual(run(strings.min_length(validator(), 3, "short"), "ab"), Err(["short"]))
        self.assertEqual(run(strings.max_length(validator(), 1, "long"), "ab"), Err(["long"]))

    def test_length_counts_code_points(self):
        self.assertEqual(run(strings.max_length(validator(), 1, "long"), "é"), Ok("é"))

    def test_matches_whole_string(self):
        pipeline = strings.matches(validator(), r"[a-z]+", "pattern")
        self.assertEqual(run(pipeline, "abc"), Ok("abc"))
        self.assertEqual(run(pipeline, "abc1"), Err(["pattern"]))


class TestByteStringChecks(unittest.TestCase):

    def test_utf8_decodes(self):
        self.assertEqual(run(byte_strings.utf8(validator(), "bad utf-8"), "héllo".encode("utf-8")), Ok("héllo"))

    def test_utf8_halts(self):
        calls = []

        def after(value):
            calls.append(value)
            return valid(value)

        pipeline = extend(byte_strings.utf8(byte_strings.max_size(validator(), 1, "too big"), "bad utf-8"), after)
        self.assertEqual(run(pipeline, b"\xff\xfe"), Err(["too big", "bad utf-8"]))
        self.assertEqual(calls, [])

    def test_checks_after_decoding_see_strings(self):
        pipeline = strings.not_empty(byte_strings.utf8(validator(), "bad utf-8"), "empty")
        self.assertEqual(run(pipeline, b""), Err(["empty"]))


class TestBase(unittest.TestCase):

    def test_convert_halts_on_listed_errors(self):
        pipeline = convert(validator(), int, "not a number")
        self.assertEqual(run(pipeline, "12"), Ok(12))
        self.assertEqual(run(pipeline, "twelve"), Err(["not a number"]))

    def test_convert_propagates_other_errors(self):
        def explode(value):
            raise RuntimeError("unexpected")

        with self.assertRaises(RuntimeError):
            run(convert(validator(), explode, "unused"), 1)

    def test_check_keeps_value(self):
        pipeline = check(validator(), lambda value: False, "always")
        self.assertEqual(accept(pipeline, 3)(Issues.empty()).value, 3)


if __name__ == '__main__':
    unittest.main()
