from __future__ import annotations

import copy
import pickle
import unittest

from morphisms import (
    GT,
    LT,
    NOTHING,
    EmptyStructureError,
    MalformedReturnError,
    NotApplicableError,
    ap,
    bind,
    compare,
    do,
    fmap,
    foldr,
    from_just,
    from_maybe,
    is_just,
    is_maybe,
    is_nothing,
    join,
    just,
    list_of,
    mappend,
    maybe,
    mconcat,
    traverse,
)


class MaybeConstructionTests(unittest.TestCase):
    def test_missing_values_collapse_to_nothing(self) -> None:
        self.assertIs(just(None), NOTHING)
        self.assertIs(just(float("nan")), NOTHING)
        self.assertIsNot(just(0), NOTHING)
        self.assertIsNot(just(""), NOTHING)

    def test_predicates_and_extractors(self) -> None:
        self.assertTrue(is_maybe(NOTHING))
        self.assertFalse(is_maybe(3))
        self.assertTrue(is_just(just(1)))
        self.assertTrue(is_nothing(NOTHING))
        self.assertEqual(from_just(just("x")), "x")
        self.assertEqual(from_maybe(7, NOTHING), 7)
        self.assertEqual(from_maybe(7, just(8)), 8)
        self.assertEqual(maybe(0, lambda x: x * 2, just(21)), 42)
        self.assertEqual(maybe(0, lambda x: x * 2, NOTHING), 0)

    def test_extracting_from_nothing_is_an_empty_structure(self) -> None:
        with self.assertRaises(EmptyStructureError):
            from_just(NOTHING)

    def test_helpers_reject_plain_values(self) -> None:
        for helper in (is_just, is_nothing, from_just):
            with self.subTest(helper=helper.__name__):
                with self.assertRaises(NotApplicableError):
                    helper(5)

    def test_repr_and_hash(self) -> None:
        self.assertEqual(repr(NOTHING), "Nothing")
        self.assertEqual(repr(just(3)), "Just 3")
        self.assertEqual(repr(just(just(3))), "Just (Just 3)")
        self.assertEqual(repr(just(list_of(1))), "Just [1:[]]")
        self.assertEqual(hash(just(1)), hash(just(1)))
        self.assertEqual(len({just(1), just(1), NOTHING}), 2)

    def test_copies_and_pickles_keep_nothing_unique(self) -> None:
        for restored in (
            copy.copy(NOTHING),
            copy.deepcopy(NOTHING),
            pickle.loads(pickle.dumps(NOTHING)),
        ):
            self.assertIs(restored, NOTHING)
            self.assertTrue(is_nothing(restored))
        self.assertEqual(pickle.loads(pickle.dumps(just(3))), just(3))
        self.assertEqual(copy.deepcopy(just("a")), just("a"))

    def test_helpers_can_be_partially_applied(self) -> None:
        self.assertEqual(maybe(0)(lambda x: x * 2)(just(21)), 42)
        self.assertEqual(from_maybe(7)(NOTHING), 7)


class MaybeInstanceTests(unittest.TestCase):
    def test_equality_and_ordering(self) -> None:
        self.assertEqual(just(1), just(1))
        self.assertNotEqual(just(1), just(2))
        self.assertNotEqual(just(1), NOTHING)
        self.assertEqual(NOTHING, NOTHING)
        self.assertIs(compare(NOTHING, just(0)), LT)
        self.assertIs(compare(just(2), just(1)), GT)
        self.assertLess(NOTHING, just(-5))

    def test_monoid_combines_payloads(self) -> None:
        self.assertEqual(mappend(just(list_of(1)), just(list_of(2))), just(list_of(1, 2)))
        self.assertEqual(mappend(NOTHING, just(list_of(1))), just(list_of(1)))
        self.assertEqual(mappend(just(list_of(1)), NOTHING), just(list_of(1)))
        self.assertEqual(
            mconcat(list_of(just(list_of(1)), NOTHING, just(list_of(2)))),
            just(list_of(1, 2)),
        )

    def test_functor_applicative_monad(self) -> None:
        self.assertEqual(fmap(lambda x: x + 1, just(1)), just(2))
        self.assertIs(fmap(lambda x: x + 1, NOTHING), NOTHING)
        self.assertEqual(ap(just(lambda x: x * 2), just(3)), just(6))
        self.assertIs(ap(NOTHING, just(3)), NOTHING)
        self.assertEqual(bind(just(3), lambda x: just(x + 1)), just(4))
        self.assertIs(bind(just(3), lambda x: NOTHING), NOTHING)
        self.assertIs(bind(NOTHING, lambda x: just(x + 1)), NOTHING)
        self.assertEqual(join(just(just(1))), just(1))

    def test_bind_requires_an_optional_result(self) -> None:
        with self.assertRaises(MalformedReturnError):
            bind(just(3), lambda x: x + 1)
        with self.assertRaises(MalformedReturnError):
            join(just(5))

    def test_do_block_chains_steps(self) -> None:
        self.assertEqual(do(just(2)).bind(lambda x: just(x * 10)).value, just(20))
        self.assertEqual(do(just(1)).chain(just(2)).value, just(2))
        self.assertIs(do(NOTHING).bind(lambda x: just(x)).value, NOTHING)
        self.assertEqual(do(just(1)).inject(4).value, just(4))
        self.assertIs(do(NOTHING).inject(4).value, NOTHING)

    def test_foldable_and_traversable(self) -> None:
        self.assertEqual(foldr(lambda x, acc: x + acc, 10, just(5)), 15)
        self.assertEqual(foldr(lambda x, acc: x + acc, 10, NOTHING), 10)
        self.assertEqual(traverse(lambda x: list_of(x, x + 1), just(1)), list_of(just(1), just(2)))
        self.assertEqual(traverse(lambda x: list_of(x), NOTHING), just(NOTHING))


if __name__ == "__main__":
    unittest.main()
