import json
import unittest

from pyvalq.checks import integers
from pyvalq.core.validation import Err, Ok, accept, valid, validate
from pyvalq.utils.dynamic import (
    boolean,
    dict_of,
    field,
    integer,
    json_object,
    list_of,
    number,
    optional_field,
    string,
)


def run(decoder, value):
    return validate(accept(decoder, value))


class TestScalarDecoders(unittest.TestCase):

    def test_integer(self):
        self.assertEqual(run(integer("int"), 3), Ok(3))
        self.assertEqual(run(integer("int"), 3.0), Err(["int"]))
        self.assertEqual(run(integer("int"), True), Err(["int"]))

    def test_number(self):
        result = run(number("num"), 3)
        self.assertEqual(result, Ok(3.0))
        self.assertIsInstance(result.value, float)
        self.assertEqual(run(number("num"), "3"), Err(["num"]))
        self.assertEqual(run(number("num"), False), Err(["num"]))
        self.assertEqual(run(number("num"), json.loads("1" + "0" * 400)), Err(["num"]))

    def test_string_and_boolean(self):
        self.assertEqual(run(string("str"), "x"), Ok("x"))
        self.assertEqual(run(string("str"), None), Err(["str"]))
        self.assertEqual(run(boolean("bool"), False), Ok(False))
        self.assertEqual(run(boolean("bool"), 0), Err(["bool"]))

    def test_json_object(self):
        self.assertEqual(run(json_object("obj"), {"a": 1}), Ok({"a": 1}))
        self.assertEqual(run(json_object("obj"), [1]), Err(["obj"]))


class TestContainerDecoders(unittest.TestCase):

    def test_list_of(self):
        decoder = list_of(integers.positive(integer("int"), "positive"), "list")
        self.assertEqual(run(decoder, [1, 2]), Ok([1, 2]))
        self.assertEqual(run(decoder, [1, -2, 0]), Err(["positive", "positive"]))
        self.assertEqual(run(decoder, [1, "x", -1]), Err(["int"]))
        self.assertEqual(run(decoder, {"a": 1}), Err(["list"]))

    def test_dict_of(self):
        decoder = dict_of(integer("int"), "dict")
        self.assertEqual(run(decoder, {"a": 1, "b": 2}), Ok({"a": 1, "b": 2}))
        self.assertEqual(run(decoder, [1]), Err(["dict"]))
        self.assertEqual(run(decoder, {"a": "1"}), Err(["int"]))

    def test_dict_of_colliding_keys_keep_last(self):
        decoder = dict_of(integer("int"), "dict", lambda key: valid(key.lower()))
        self.assertEqual(run(decoder, {"A": 1, "a": 2}), Ok({"a": 2}))


class TestFieldDecoders(unittest.TestCase):

    def test_required_field(self):
        decoder = field("age", integer("age must be an integer"), "age is required")
        self.assertEqual(run(decoder, {"age": 4}), Ok(4))
        self.assertEqual(run(decoder, {}), Err(["age is required"]))
        self.assertEqual(run(decoder, {"age": None}), Err(["age must be an integer"]))

    def test_optional_field(self):
        decoder = optional_field("age", integer("age must be an integer"))
        self.assertEqual(run(decoder, {}), Ok(None))
        self.assertEqual(run(decoder, {"age": None}), Ok(None))
        self.assertEqual(run(decoder, {"age": 9}), Ok(9))
        self.assertEqual(run(decoder, {"age": "9"}), Err(["age must be an integer"]))


if __name__ == '__main__':
    unittest.main()
