from __future__ import annotations

import random
import unittest

from morphisms import (
    EMPTY,
    NOTHING,
    IndexOutOfRangeError,
    MalformedReturnError,
    NotApplicableError,
    TypeMismatchError,
    compare,
    delete_firsts,
    delete_firsts_by,
    delete_l,
    drop,
    drop_while,
    elem_index,
    elem_indices,
    even,
    find,
    find_index,
    find_indices,
    flip,
    from_array_to_list,
    from_list_to_string,
    from_string_to_list,
    fst,
    group,
    group_by,
    index,
    insert,
    insert_by,
    intercalate,
    intersperse,
    just,
    list_of,
    list_range,
    lookup,
    merge_sort,
    merge_sort_by,
    nub,
    nub_by,
    sort,
    sort_by,
    span,
    span_not,
    split_at,
    strip_prefix,
    take,
    take_while,
    transpose,
    tuple_of,
    zip3,
    zip_with,
    zip_with3,
)
from morphisms import algorithms

UNSORTED = [9, 8, 7, 6, 5, 4, 3, 10, 13, 11, 14, 23, 24, 26, 25, 2, 1]
SORTED = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 14, 23, 24, 25, 26]


class SortingTests(unittest.TestCase):
    def test_both_sorts_order_any_permutation(self) -> None:
        expected = from_array_to_list(SORTED)
        rng = random.Random(7)
        permutations = [UNSORTED, list(reversed(SORTED)), SORTED]
        for _ in range(5):
            shuffled = list(UNSORTED)
            rng.shuffle(shuffled)
            permutations.append(shuffled)
        for values in permutations:
            with self.subTest(values=values):
                xs = from_array_to_list(values)
                self.assertEqual(sort(xs), expected)
                self.assertEqual(merge_sort(xs), expected)

    def test_sorts_are_stable_and_agree(self) -> None:
        pairs = list_of(tuple_of(1, "b"), tuple_of(0, "z"), tuple_of(1, "a"), tuple_of(0, "y"))

        def by_key(a, b):
            return compare(fst(a), fst(b))

        expected = list_of(tuple_of(0, "z"), tuple_of(0, "y"), tuple_of(1, "b"), tuple_of(1, "a"))
        self.assertEqual(sort_by(by_key, pairs), expected)
        self.assertEqual(merge_sort_by(by_key, pairs), expected)

    def test_custom_comparator_and_edge_cases(self) -> None:
        descending = flip(compare)
        self.assertEqual(sort_by(descending, list_of(1, 3, 2)), list_of(3, 2, 1))
        self.assertEqual(merge_sort_by(descending, list_of(1, 3, 2)), list_of(3, 2, 1))
        self.assertIs(sort(EMPTY), EMPTY)
        self.assertEqual(merge_sort(list_of("b", "a")), list_of("a", "b"))

    def test_comparator_must_return_an_ordering(self) -> None:
        with self.assertRaises(MalformedReturnError):
            sort_by(lambda a, b: a - b, list_of(2, 1))
        with self.assertRaises(MalformedReturnError):
            merge_sort_by(lambda a, b: a < b, list_of(2, 1))

    def test_insert_keeps_order_and_shares_the_rest(self) -> None:
        xs = list_of(1, 3, 5, 7)
        inserted = insert(4, xs)
        self.assertEqual(inserted, list_of(1, 3, 4, 5, 7))
        self.assertIs(drop(3, inserted), drop(2, xs))
        self.assertEqual(insert(0, EMPTY), list_of(0))
        self.assertEqual(insert(3, list_of(1, 3, 3)), list_of(1, 3, 3, 3))
        self.assertEqual(insert_by(flip(compare), 4, list_of(9, 5, 1)), list_of(9, 5, 4, 1))


class SublistTests(unittest.TestCase):
    def test_take_drop_split_at(self) -> None:
        xs = list_of(1, 2, 3)
        self.assertEqual(take(2, xs), list_of(1, 2))
        self.assertIs(take(-1, xs), EMPTY)
        self.assertEqual(take(10, xs), xs)
        self.assertIs(drop(0, xs), xs)
        self.assertIs(drop(10, xs), EMPTY)
        self.assertEqual(split_at(2, xs), tuple_of(list_of(1, 2), list_of(3)))
        with self.assertRaises(NotApplicableError):
            take("2", xs)

    def test_while_and_span(self) -> None:
        xs = list_of(1, 2, 3, 1)
        self.assertEqual(take_while(lambda x: x < 3, xs), list_of(1, 2))
        self.assertEqual(drop_while(lambda x: x < 3, xs), list_of(3, 1))
        self.assertEqual(span(lambda x: x < 3, xs), tuple_of(list_of(1, 2), list_of(3, 1)))
        self.assertEqual(span_not(lambda x: x > 2, xs), tuple_of(list_of(1, 2), list_of(3, 1)))
        with self.assertRaises(MalformedReturnError):
            drop_while(lambda x: None, xs)

    def test_strip_prefix(self) -> None:
        self.assertEqual(strip_prefix(list_of(1, 2), list_of(1, 2, 3)), just(list_of(3)))
        self.assertEqual(strip_prefix(list_of(1, 2), list_of(1, 2)), just(EMPTY))
        self.assertIs(strip_prefix(list_of(2), list_of(1, 2)), NOTHING)
        self.assertIs(strip_prefix(list_of(1, 2, 3), list_of(1, 2)), NOTHING)

    def test_group_concatenates_back_to_the_input(self) -> None:
        self.assertEqual(
            group(from_string_to_list("aabccc")),
            list_of(from_string_to_list("aa"), from_string_to_list("b"), from_string_to_list("ccc")),
        )
        self.assertEqual(
            group_by(lambda a, b: a <= b, list_of(1, 2, 2, 3, 1, 2, 0, 4, 5, 2)),
            list_of(list_of(1, 2, 2, 3, 1, 2), list_of(0, 4, 5, 2)),
        )
        self.assertIs(group(EMPTY), EMPTY)


class SearchTests(unittest.TestCase):
    def test_index_is_zero_based_and_strict(self) -> None:
        xs = list_of(10, 20, 30)
        self.assertEqual(index(xs, 0), 10)
        self.assertEqual(index(xs, 2), 30)
        for n in (-1, 3, 100):
            with self.subTest(n=n):
                with self.assertRaises(IndexOutOfRangeError):
                    index(xs, n)
        with self.assertRaises(NotApplicableError):
            index(xs, 1.0)

    def test_element_and_predicate_searches(self) -> None:
        self.assertEqual(elem_index(3, list_of(1, 3, 3)), just(1))
        self.assertIs(elem_index(9, list_of(1, 3, 3)), NOTHING)
        self.assertEqual(elem_indices(3, list_of(3, 1, 3)), list_of(0, 2))
        self.assertEqual(find(lambda x: x > 1, list_of(1, 2, 3)), just(2))
        self.assertIs(find(lambda x: x > 5, list_of(1, 2, 3)), NOTHING)
        self.assertEqual(find_index(lambda x: x > 1, list_of(1, 2, 3)), just(1))
        self.assertEqual(find_indices(even, list_of(1, 2, 3, 4)), list_of(1, 3))
        self.assertIs(find_indices(even, list_of(1, 3)), EMPTY)

    def test_lookup_in_association_lists(self) -> None:
        table = list_of(tuple_of(1, "one"), tuple_of(2, "two"), tuple_of(2, "deux"))
        self.assertEqual(lookup(2, table), just("two"))
        self.assertIs(lookup(3, table), NOTHING)
        self.assertIs(lookup(3, EMPTY), NOTHING)


class SetLikeTests(unittest.TestCase):
    def test_nub_keeps_first_occurrences(self) -> None:
        self.assertEqual(nub(list_of(1, 1, 2, 3, 2)), list_of(1, 2, 3))
        self.assertEqual(nub_by(lambda a, b: a % 3 == b % 3, list_of(1, 2, 4, 5, 3)), list_of(1, 2, 3))

    def test_delete_removes_only_the_first_match(self) -> None:
        xs = list_of(1, 3, 2, 3)
        self.assertEqual(delete_l(3, xs), list_of(1, 2, 3))
        self.assertIs(delete_l(9, xs), xs)

    def test_delete_firsts_is_list_difference(self) -> None:
        self.assertEqual(
            delete_firsts(list_range(1, 11), list_range(1, 6)),
            list_of(6, 7, 8, 9, 10),
        )
        self.assertEqual(delete_firsts(list_of(1, 1, 2), list_of(1)), list_of(1, 2))
        self.assertEqual(delete_firsts(list_of(1, 1, 2), list_of(1, 1, 1)), list_of(2))
        self.assertEqual(
            delete_firsts_by(lambda a, b: a * 10 == b, list_of(10, 20, 30), list_of(2)),
            list_of(10, 30),
        )


class TransformTests(unittest.TestCase):
    def test_intersperse_and_intercalate(self) -> None:
        self.assertEqual(intersperse(0, list_of(1, 2, 3)), list_of(1, 0, 2, 0, 3))
        self.assertIs(intersperse(0, EMPTY), EMPTY)
        with self.assertRaises(TypeMismatchError):
            intersperse("a", list_of(1))
        words = list_of(from_string_to_list("a"), from_string_to_list("b"), from_string_to_list("c"))
        self.assertEqual(from_list_to_string(intercalate(from_string_to_list(", "), words)), "a, b, c")

    def test_transpose_tolerates_ragged_rows(self) -> None:
        matrix = list_of(list_of(10, 11), list_of(20), EMPTY, list_of(30, 31, 32))
        self.assertEqual(
            transpose(matrix),
            list_of(list_of(10, 20, 30), list_of(11, 31), list_of(32)),
        )
        self.assertIs(transpose(EMPTY), EMPTY)


class ZipTests(unittest.TestCase):
    def test_zip_pairs_elements(self) -> None:
        self.assertEqual(
            algorithms.zip(list_of(1, 2, 3, 4, 5), list_of(5, 4, 3, 2, 1)),
            list_of(tuple_of(1, 5), tuple_of(2, 4), tuple_of(3, 3), tuple_of(4, 2), tuple_of(5, 1)),
        )

    def test_zips_truncate_to_the_shortest_input(self) -> None:
        self.assertEqual(zip_with(lambda x, y: x + y, list_of(1, 2, 3), list_of(10, 20)), list_of(11, 22))
        self.assertEqual(
            zip3(list_of(1, 2), list_of("a", "b", "c"), list_of(True)),
            list_of(tuple_of(1, "a", True)),
        )
        self.assertEqual(
            zip_with3(lambda x, y, z: x * y + z, list_of(1, 2), list_of(3, 4), list_of(5, 6)),
            list_of(8, 14),
        )
        self.assertIs(algorithms.zip(EMPTY, list_of(1)), EMPTY)


class PartialApplicationTests(unittest.TestCase):
    def test_partially_applied_functions_match_full_calls(self) -> None:
        xs = list_of(5, 3, 8, 1)
        self.assertEqual(take(3)(xs), take(3, xs))
        self.assertEqual(drop(1)(xs), drop(1, xs))
        self.assertEqual(elem_index(8)(xs), just(2))
        self.assertEqual(sort_by(flip(compare))(xs), list_of(8, 5, 3, 1))
        self.assertEqual(insert_by(compare)(4)(list_of(1, 5)), list_of(1, 4, 5))
        self.assertEqual(zip_with(lambda a, b: a + b)(xs)(xs), list_of(10, 6, 16, 2))

    def test_partial_applications_are_reusable(self) -> None:
        first_two = take(2)
        self.assertEqual(first_two(list_of(1, 2, 3)), list_of(1, 2))
        self.assertEqual(first_two(from_string_to_list("abc")), from_string_to_list("ab"))
        self.assertEqual(algorithms.take_while(even)(list_of(2, 4, 5, 6)), list_of(2, 4))


if __name__ == "__main__":
    unittest.main()
