"""
Tests for the Selector.

Tests verify that selection:
    - Keeps exactly the items satisfying the rule
    - Preserves source order and never mutates input
    - Treats the <= / < boundary correctly
    - Handles empty input and arbitrary callables
"""

import warnings

import pytest
from tfr.model import Item, pair_items
from tfr.predicates import ComparisonOperator, Threshold, at_most, below, equal_to
from tfr.selector import (
    count_matching,
    evaluate,
    select,
    select_by_threshold,
    select_labels,
)


def library_items():
    titles = [
        "JavaScript Basics", "Python Guide", "Web Development", "Data Structures",
        "Algorithms", "React Fundamentals", "Node.js", "Database Design",
        "Machine Learning", "CSS Mastery",
    ]
    return pair_items(titles, [12, 2, 25, 1, 0, 8, 3, 15, 20, 4])


class TestEvaluate:
    """Single-value rule checks."""

    @pytest.mark.parametrize(
        "op, value, expected",
        [
            (ComparisonOperator.LESS_THAN, 4, True),
            (ComparisonOperator.LESS_THAN, 5, False),
            (ComparisonOperator.LESS_EQUAL, 5, True),
            (ComparisonOperator.EQUALS, 5, True),
            (ComparisonOperator.NOT_EQUALS, 5, False),
            (ComparisonOperator.GREATER_THAN, 6, True),
            (ComparisonOperator.GREATER_EQUAL, 5, True),
        ],
    )
    def test_operators(self, op, value, expected):
        assert evaluate(Threshold(op, 5), value) is expected

    def test_boolean_equality(self):
        assert evaluate(equal_to(False), False) is True
        assert evaluate(equal_to(False), True) is False


class TestSelect:
    """Order-preserving filtering."""

    def test_strictly_less_than(self):
        items = pair_items(list("abcde"), [5, 1, 9, 4, 5])
        assert select_labels(items, below(5)) == ["b", "d"]

    def test_boundary_included_with_less_equal(self):
        items = [Item("edge", 3)]
        assert select(items, at_most(3)) == items
        assert select(items, below(3)) == []

    def test_empty_input(self):
        assert select([], below(5)) == []
        assert select([], lambda item: True) == []

    def test_no_matches(self):
        assert select(library_items(), below(0)) == []

    def test_preserves_order(self):
        matches = select(library_items(), at_most(3))
        assert [m.value for m in matches] == [2, 1, 0, 3]

    def test_does_not_mutate_input(self):
        items = library_items()
        before = list(items)
        select(items, at_most(3))
        assert items == before

    def test_idempotent(self):
        items = library_items()
        assert select(items, at_most(3)) == select(items, at_most(3))

    def test_returns_new_list(self):
        items = [Item("a", 1)]
        result = select(items, below(5))
        assert result == items
        assert result is not items

    def test_keeps_duplicates(self):
        items = [Item("a", 1), Item("a", 1)]
        assert len(select(items, below(5))) == 2

    def test_accepts_generator(self):
        items = (Item(str(i), i) for i in range(10))
        assert select_labels(items, below(3)) == ["0", "1", "2"]

    def test_callable_predicate(self):
        items = [Item("Bananas", 3, "Fruits"), Item("Carrots", 1, "Vegetables")]
        result = select(items, lambda item: item.category == "Fruits")
        assert [i.label for i in result] == ["Bananas"]

    def test_unsupported_predicate(self):
        with pytest.raises(TypeError):
            select([Item("a", 1)], 5)

    def test_select_by_threshold(self):
        matches = select_by_threshold(library_items(), ComparisonOperator.LESS_EQUAL, 3)
        assert len(matches) == 4

    def test_count_matching(self):
        assert count_matching(library_items(), at_most(3)) == 4


class TestScenarios:
    """The four teaching datasets."""

    def test_library_restock(self):
        assert select_labels(library_items(), at_most(3)) == [
            "Python Guide", "Data Structures", "Algorithms", "Node.js",
        ]

    def test_students_needing_support(self):
        names = ["Alice", "Bob", "Charlie", "Diana", "Eve", "Frank", "Grace", "Henry", "Iris", "Jack"]
        items = pair_items(names, [85, 67, 92, 45, 78, 55, 88, 62, 95, 40])
        assert select_labels(items, below(70)) == ["Bob", "Diana", "Frank", "Henry", "Jack"]

    def test_available_tables(self):
        numbers = [f"T{i}" for i in range(1, 11)]
        status = [True, False] * 5
        items = pair_items(numbers, status)
        assert select_labels(items, equal_to(False)) == ["T2", "T4", "T6", "T8", "T10"]


class TestMixedKinds:
    """Boolean rules against numeric data (and vice versa) warn."""

    def test_warns_on_numeric_rule_against_flags(self):
        with pytest.warns(UserWarning):
            select([Item("T1", False)], below(5))

    def test_no_warning_when_kinds_agree(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            select([Item("T1", False)], equal_to(False))
            select([Item("a", 1)], below(5))
