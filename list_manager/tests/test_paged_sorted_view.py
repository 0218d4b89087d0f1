import unittest
from unittest import mock

from ..core.paged_sorted_view import PagedSortedView
from ..errors import ConfigurationError
from ..models.pagination import PageSpec
from ..models.record import coerce_to_text
from ..models.sorting import SortSpec
from .support import TempLogTestCase, numbered_records


def ids(result):
    return [row["id"] for row in result.rows]


class TestComputePage(TempLogTestCase):
    def setUp(self):
        super().setUp()
        self.records = [
            {"id": 1, "name": "b"},
            {"id": 2, "name": "a"},
            {"id": 3, "name": "c"},
        ]

    def test_first_page_ascending(self):
        view = PagedSortedView(self.records)
        result = view.compute_page(SortSpec("name", "asc"), PageSpec(1, 2))

        self.assertEqual(ids(result), [2, 1])
        self.assertEqual(result.total_items, 3)
        self.assertEqual(result.page_size, 2)

    def test_second_page_descending_holds_the_remainder(self):
        view = PagedSortedView(self.records)
        result = view.compute_page(SortSpec("name", "desc"), PageSpec(2, 2))

        self.assertEqual(ids(result), [2])
        self.assertEqual(result.total_items, 3)

    def test_default_page_size_is_ten(self):
        view = PagedSortedView(numbered_records(25))
        result = view.compute_page(SortSpec("name"), PageSpec(3))

        self.assertEqual(view.page_size, 10)
        self.assertEqual(len(result.rows), 5)
        self.assertEqual(result.total_pages, 3)
        self.assertEqual(result.rows[0]["name"], "item 021")

    def test_numeric_looking_values_sort_as_strings(self):
        records = [{"id": 1, "count": "2"}, {"id": 2, "count": "9"}, {"id": 3, "count": "10"}]
        view = PagedSortedView(records)
        result = view.compute_page(SortSpec("count", "asc"), PageSpec(1))

        self.assertEqual([row["count"] for row in result.rows], ["10", "2", "9"])

    def test_integer_ids_sort_lexicographically(self):
        view = PagedSortedView(numbered_records(12))
        result = view.compute_page(SortSpec(), PageSpec(1, 5))

        self.assertEqual(ids(result), [1, 10, 11, 12, 2])

    def test_page_past_the_end_is_empty(self):
        view = PagedSortedView(self.records)
        result = view.compute_page(SortSpec("name"), PageSpec(7, 2))

        self.assertEqual(list(result.rows), [])
        self.assertEqual(result.total_items, 3)
        self.assertFalse(result.has_next())

    def test_empty_result_set(self):
        view = PagedSortedView([])
        result = view.compute_page(SortSpec("name"), PageSpec(1))

        self.assertEqual(list(result.rows), [])
        self.assertEqual(result.total_items, 0)
        self.assertEqual(result.total_pages, 1)

    def test_pages_cover_every_record_once(self):
        records = numbered_records(23)
        view = PagedSortedView(records, {"per_page": 4})
        sort = SortSpec("name", "desc")

        seen = []
        for number in range(1, view.total_pages() + 2):
            seen.extend(ids(view.compute_page(sort, PageSpec(number))))

        self.assertEqual(len(seen), 23)
        self.assertEqual(sorted(seen), list(range(1, 24)))

    def test_repeated_calls_are_identical(self):
        records = [{"id": i, "group": "x" if i % 2 else "y"} for i in range(1, 9)]
        view = PagedSortedView(records, {"per_page": 3})
        sort = SortSpec("group", "asc")

        first = ids(view.compute_page(sort, PageSpec(2)))
        second = ids(view.compute_page(sort, PageSpec(2)))

        self.assertEqual(first, second)

    def test_reversing_direction_reverses_order_for_distinct_keys(self):
        records = numbered_records(9)
        asc = PagedSortedView(records).compute_page(SortSpec("name", "asc"), PageSpec(1, 9))
        desc = PagedSortedView(records).compute_page(SortSpec("name", "desc"), PageSpec(1, 9))

        self.assertEqual(ids(desc), list(reversed(ids(asc))))

    def test_ties_keep_input_order_in_both_directions(self):
        records = [{"id": 1, "g": "x"}, {"id": 2, "g": "x"}, {"id": 3, "g": "a"}]

        asc = PagedSortedView(records).compute_page(SortSpec("g", "asc"), PageSpec(1))
        desc = PagedSortedView(records).compute_page(SortSpec("g", "desc"), PageSpec(1))

        self.assertEqual(ids(asc), [3, 1, 2])
        self.assertEqual(ids(desc), [1, 2, 3])


class TestSortResolution(TempLogTestCase):
    def test_blank_field_falls_back_to_id(self):
        records = [{"id": "b"}, {"id": "c"}, {"id": "a"}]
        view = PagedSortedView(records)

        result = view.compute_page(SortSpec("   ", "asc"), PageSpec(1))

        self.assertEqual(ids(result), ["a", "b", "c"])

    def test_field_is_trimmed(self):
        records = [{"id": 1, "name": "b"}, {"id": 2, "name": "a"}]
        result = PagedSortedView(records).compute_page(SortSpec("  name "), PageSpec(1))

        self.assertEqual(ids(result), [2, 1])

    def test_anything_but_desc_is_ascending(self):
        records = [{"id": "b"}, {"id": "a"}]
        for direction in ("", "ASC", "DESC", "down", "asc"):
            with self.subTest(direction=direction):
                result = PagedSortedView(records).compute_page(SortSpec("id", direction), PageSpec(1))
                self.assertEqual(ids(result), ["a", "b"])

    def test_defaults_when_no_specs_given(self):
        view = PagedSortedView([{"id": "b"}, {"id": "a"}])
        result = view.compute_page()

        self.assertEqual(ids(result), ["a", "b"])
        self.assertEqual(result.page_number, 1)
        self.assertEqual(result.page_size, 10)

    def test_missing_field_sorts_as_empty_and_is_logged(self):
        records = [{"id": 1, "name": "b"}, {"id": 2}, {"id": 3, "name": "a"}]
        view = PagedSortedView(records)

        with mock.patch("list_manager.core.paged_sorted_view.Slogger.warning") as warning:
            result = view.compute_page(SortSpec("name"), PageSpec(1))

        self.assertEqual(ids(result), [2, 3, 1])
        warning.assert_called_once()
        self.assertIn("missing from 1 record", warning.call_args[0][0])

    def test_unknown_field_does_not_raise(self):
        view = PagedSortedView(numbered_records(4))
        result = view.compute_page(SortSpec("nope", "desc"), PageSpec(1))

        self.assertEqual(result.total_items, 4)
        self.assertEqual(len(result.rows), 4)

    def test_null_and_boolean_values(self):
        records = [
            {"id": 1, "flag": True},
            {"id": 2, "flag": None},
            {"id": 3, "flag": False},
            {"id": 4, "flag": 0},
        ]
        result = PagedSortedView(records).compute_page(SortSpec("flag"), PageSpec(1))

        # "", "", "0", "1"
        self.assertEqual(ids(result), [2, 3, 4, 1])


class TestPageSpecHandling(TempLogTestCase):
    def test_page_below_one_is_first_page(self):
        view = PagedSortedView(numbered_records(5), {"per_page": 2})
        for number in (0, -4):
            with self.subTest(number=number):
                result = view.compute_page(SortSpec("name"), PageSpec(number))
                self.assertEqual(result.page_number, 1)
                self.assertEqual(ids(result), [1, 2])

    def test_page_spec_size_overrides_configured_size(self):
        view = PagedSortedView(numbered_records(12), {"per_page": 10})
        result = view.compute_page(SortSpec("name"), PageSpec(2, 5))

        self.assertEqual(result.page_size, 5)
        self.assertEqual(ids(result), [6, 7, 8, 9, 10])
        self.assertEqual(result.total_pages, 3)

    def test_non_positive_page_spec_size_uses_configured_size(self):
        view = PagedSortedView(numbered_records(12), {"per_page": 4})
        result = view.compute_page(SortSpec("name"), PageSpec(1, 0))

        self.assertEqual(result.page_size, 4)

    def test_page_navigation_flags(self):
        view = PagedSortedView(numbered_records(9), {"per_page": 3})
        middle = view.compute_page(SortSpec("name"), PageSpec(2))

        self.assertTrue(middle.has_next())
        self.assertTrue(middle.has_prev())
        self.assertEqual(middle.offset, 3)


class TestConstruction(TempLogTestCase):
    def test_non_positive_page_size_defaults(self):
        for value in (None, 0, -3):
            with self.subTest(value=value):
                self.assertEqual(PagedSortedView([], {"per_page": value}).page_size, 10)

    def test_page_size_alias_and_numeric_strings(self):
        self.assertEqual(PagedSortedView([], {"page_size": 7}).page_size, 7)
        self.assertEqual(PagedSortedView([], {"per_page": "25"}).page_size, 25)

    def test_invalid_page_size_raises(self):
        for value in ("ten", 2.5, True, [3]):
            with self.subTest(value=value):
                with self.assertRaises(ConfigurationError):
                    PagedSortedView([], {"per_page": value})

    def test_owns_a_copy_of_the_records(self):
        records = [{"id": "b"}, {"id": "a"}]
        view = PagedSortedView(records)
        view.compute_page(SortSpec("id"), PageSpec(1))

        self.assertEqual([r["id"] for r in records], ["b", "a"])
        self.assertEqual([r["id"] for r in view.records], ["a", "b"])
        self.assertEqual(view.total_items, 2)


class TestCoercion(unittest.TestCase):
    def test_coerce_to_text(self):
        self.assertEqual(coerce_to_text(None), "")
        self.assertEqual(coerce_to_text(True), "1")
        self.assertEqual(coerce_to_text(False), "")
        self.assertEqual(coerce_to_text(2.0), "2")
        self.assertEqual(coerce_to_text(2.5), "2.5")
        self.assertEqual(coerce_to_text(10), "10")
        self.assertEqual(coerce_to_text("x"), "x")


if __name__ == "__main__":
    unittest.main()
