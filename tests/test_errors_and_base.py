from __future__ import annotations

import unittest
from dataclasses import FrozenInstanceError

from morphisms import (
    EMPTY,
    EmptyStructureError,
    IndexOutOfRangeError,
    MalformedReturnError,
    MorphismError,
    NotApplicableError,
    TypeMismatchError,
    compare,
    compose,
    constant,
    curried,
    even,
    flip,
    fold,
    head,
    identity,
    index,
    list_inf,
    list_of,
    odd,
    until,
)
from morphisms.errors import describe


class ErrorContextTests(unittest.TestCase):
    def test_all_errors_share_a_catchable_base(self) -> None:
        for error_type in (
            TypeMismatchError,
            NotApplicableError,
            EmptyStructureError,
            IndexOutOfRangeError,
            MalformedReturnError,
        ):
            with self.subTest(error_type=error_type.__name__):
                self.assertTrue(issubclass(error_type, MorphismError))

    def test_messages_name_the_operands_and_the_operation(self) -> None:
        with self.assertRaises(TypeMismatchError) as mismatch:
            compare(1, "a")
        self.assertIn("'1'", str(mismatch.exception))
        self.assertIn("compare", str(mismatch.exception))

        with self.assertRaises(EmptyStructureError) as empty:
            head(EMPTY)
        self.assertIn("head", str(empty.exception))
        self.assertIn("[]", str(empty.exception))

        with self.assertRaises(IndexOutOfRangeError) as out_of_range:
            index(list_of(1, 2), 5)
        self.assertEqual(out_of_range.exception.index, 5)
        self.assertIn("index", str(out_of_range.exception))

        with self.assertRaises(NotApplicableError) as not_applicable:
            fold(5)
        self.assertIn("Foldable", str(not_applicable.exception))

    def test_infinite_operands_are_described_briefly(self) -> None:
        text = str(NotApplicableError(list_inf(1), "fold"))
        self.assertLess(len(text), 200)
        self.assertIn("...", text)

    def test_functions_are_described_by_name(self) -> None:
        def positive(x):
            return x > 0

        self.assertEqual(describe(positive), "function positive")
        self.assertIn("positive", str(MalformedReturnError(positive, "filter", 3)))

    def test_errors_are_immutable(self) -> None:
        error = IndexOutOfRangeError(3, "index")
        with self.assertRaises(FrozenInstanceError):
            error.index = 4  # type: ignore[misc]


class BaseCombinatorTests(unittest.TestCase):
    def test_function_helpers(self) -> None:
        self.assertEqual(identity(7), 7)
        self.assertEqual(constant(3)("ignored"), 3)
        self.assertEqual(flip(lambda x, y: x - y)(1, 10), 9)
        self.assertEqual(compose(lambda x: x + 1, lambda x: x * 2)(5), 11)
        self.assertTrue(even(4))
        self.assertTrue(odd(3))
        self.assertFalse(odd(0))

    def test_until_applies_the_step_until_the_predicate_holds(self) -> None:
        self.assertEqual(until(lambda x: x > 100, lambda x: x * 2, 1), 128)
        self.assertEqual(until(lambda x: True, lambda x: x + 1, 0), 0)

    def test_until_rejects_non_boolean_predicates(self) -> None:
        with self.assertRaises(MalformedReturnError):
            until(lambda x: x, lambda x: x - 1, 3)

    def test_curried_functions_take_arguments_in_groups(self) -> None:
        @curried
        def volume(x, y, z, scale=1):
            return x * y * z * scale

        self.assertEqual(volume(2, 3, 4), 24)
        self.assertEqual(volume(2)(3)(4), 24)
        self.assertEqual(volume(2, 3)(4), 24)
        self.assertEqual(volume(2)(3, 4, scale=2), 48)
        self.assertEqual(volume(2, z=4)(3), 24)
        self.assertEqual(volume.__name__, "volume")

    def test_base_helpers_are_curried(self) -> None:
        self.assertEqual(flip(lambda x, y: x - y)(1)(10), 9)
        self.assertEqual(compose(lambda x: x + 1)(lambda x: x * 2)(5), 11)
        self.assertEqual(until(lambda x: x > 10)(lambda x: x * 3)(1), 27)


if __name__ == "__main__":
    unittest.main()
