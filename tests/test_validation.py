import unittest

from pyvalq.core.validation import (
    Continue,
    Err,
    Halt,
    Issues,
    Ok,
    accept,
    apply,
    chain,
    continuing,
    extend,
    halt,
    invalid,
    map_output,
    valid,
    validate,
    validator,
)


def flag_below(bound, issue):
    def build(value):
        return invalid(value, issue) if value < bound else valid(value)
    return build


def halt_below(bound, issue):
    def build(value):
        return halt(issue) if value < bound else valid(value)
    return build


def double(value):
    return valid(value * 2)


def counting(counter):
    def build(value):
        counter.append(value)
        return valid(value)
    return build


class TestIssues(unittest.TestCase):

    def test_push_does_not_mutate(self):
        base = Issues.of("a")
        pushed = base.push("b")
        self.assertEqual(base.to_list(), ["a"])
        self.assertEqual(pushed.to_list(), ["a", "b"])
        self.assertEqual(len(pushed), 2)

    def test_empty_is_falsy(self):
        self.assertFalse(Issues.empty())
        self.assertEqual(len(Issues.empty()), 0)
        self.assertTrue(Issues.of(1))

    def test_iteration_is_oldest_first(self):
        self.assertEqual(list(Issues.of(1, 2, 3)), [1, 2, 3])

    def test_constructor_builds_empty_stack(self):
        issues = Issues()
        self.assertEqual(len(issues), 0)
        self.assertEqual(issues.to_list(), [])
        self.assertEqual(issues.push("x").to_list(), ["x"])

    def test_constructor_rejects_contents(self):
        with self.assertRaises(TypeError):
            Issues("x")

    def test_equality(self):
        self.assertEqual(Issues.of("x", "y"), Issues.empty().push("x").push("y"))
        self.assertNotEqual(Issues.of("x", "y"), Issues.of("y", "x"))


class TestSteps(unittest.TestCase):

    def test_valid_keeps_accumulator(self):
        issues = Issues.of("earlier")
        self.assertEqual(valid(5)(issues), Continue(5, issues))

    def test_invalid_records_issue_and_keeps_value(self):
        outcome = invalid(5, "bad")(Issues.of("earlier"))
        self.assertIsInstance(outcome, Continue)
        self.assertEqual(outcome.value, 5)
        self.assertEqual(outcome.issues.to_list(), ["earlier", "bad"])

    def test_halt_records_issue_and_drops_value(self):
        outcome = halt("fatal")(Issues.of("earlier"))
        self.assertEqual(outcome, Halt(Issues.of("earlier", "fatal")))


class TestContinuing(unittest.TestCase):

    def test_continue_invokes_function(self):
        outcome = continuing(Continue(2, Issues.empty()), lambda value, issues: Continue(value + 1, issues))
        self.assertEqual(outcome.value, 3)

    def test_halt_skips_function(self):
        calls = []
        stopped = Halt(Issues.of("x"))
        outcome = continuing(stopped, lambda value, issues: calls.append(value))
        self.assertIs(outcome, stopped)
        self.assertEqual(calls, [])

    def test_associativity(self):
        f = lambda value, issues: invalid(value + 1, "f")(issues)
        g = lambda value, issues: invalid(value * 3, "g")(issues)
        start = Continue(1, Issues.empty())
        left = continuing(continuing(start, f), g)
        right = continuing(start, lambda value, issues: continuing(f(value, issues), g))
        self.assertEqual(left, right)


class TestPipelines(unittest.TestCase):

    def test_identity_law(self):
        for value in (0, "text", None, [1, 2], {"a": 1}):
            self.assertEqual(validate(accept(validator(), value)), Ok(value))

    def test_extend_runs_in_order(self):
        pipeline = extend(extend(validator(), double), flag_below(10, "small"))
        self.assertEqual(validate(accept(pipeline, 7)), Ok(14))
        self.assertEqual(validate(accept(pipeline, 3)), Err(["small"]))

    def test_extend_is_associative(self):
        a = flag_below(5, "a")
        b = double
        c = flag_below(20, "c")
        left = extend(extend(a, b), c)
        right = extend(a, extend(b, c))
        for value in (1, 4, 6, 12):
            self.assertEqual(left(value)(Issues.empty()), right(value)(Issues.empty()))

    def test_short_circuit_after_halt(self):
        counter = []
        pipeline = extend(extend(validator(), halt_below(0, "negative")), counting(counter))
        self.assertEqual(validate(accept(pipeline, -1)), Err(["negative"]))
        self.assertEqual(counter, [])
        self.assertEqual(validate(accept(pipeline, 1)), Ok(1))
        self.assertEqual(counter, [1])

    def test_soft_issues_accumulate_oldest_first(self):
        pipeline = chain(flag_below(10, "first"), flag_below(20, "second"), halt_below(30, "third"))
        self.assertEqual(validate(accept(pipeline, 1)), Err(["first", "second", "third"]))

    def test_chain_with_no_validators_is_identity(self):
        self.assertEqual(validate(accept(chain(), "same")), Ok("same"))

    def test_map_output_transforms_value(self):
        pipeline = map_output(flag_below(0, "negative"), str)
        self.assertEqual(validate(accept(pipeline, 12)), Ok("12"))
        self.assertEqual(validate(accept(pipeline, -1)), Err(["negative"]))

    def test_apply_supports_dependent_validation(self):
        pair = {"low": 3, "high": 2}

        def build(data):
            return apply(lambda d: valid(d["low"]), data)(lambda low:
                apply(lambda d: flag_below(low + 1, "high must exceed low")(d["high"]), data)(lambda high:
                    valid((low, high))))

        self.assertEqual(validate(build(pair)), Err(["high must exceed low"]))
        self.assertEqual(validate(build({"low": 1, "high": 2})), Ok((1, 2)))

    def test_apply_matches_extend(self):
        first = flag_below(5, "a")
        second = flag_below(7, "b")
        for value in (1, 6, 9):
            self.assertEqual(
                apply(first, value)(second)(Issues.empty()),
                extend(first, second)(value)(Issues.empty()),
            )

    def test_validatable_is_reusable(self):
        validatable = accept(flag_below(10, "small"), 1)
        self.assertEqual(validate(validatable), validate(validatable))

    def test_value_discarded_when_issues_present(self):
        result = validate(invalid("value", "problem"))
        self.assertTrue(result.is_err())
        self.assertEqual(result.issues, ["problem"])


if __name__ == '__main__':
    unittest.main()
