"""
Tests for the selection summary.

Tests verify that the summary correctly:
    - Counts matched vs. total items
    - Splits matches into out-of-stock and low-stock
    - Flags empty datasets and catch-all rules
"""

from tfr.examples import build_grocery_dataset, build_tables_dataset
from tfr.model import Dataset, Item
from tfr.predicates import below, equal_to
from tfr.summary import summarize_selection


def test_inventory_breakdown():
    """Stock < 5 keeps Bananas(3), Berries(0), Mangoes(2)."""
    summary = summarize_selection(build_grocery_dataset(), below(5))

    assert summary.dataset_name == "grocery"
    assert summary.total_items == 8
    assert summary.matched_items == 3
    assert summary.matched_labels == ["Bananas", "Berries", "Mangoes"]
    assert summary.out_of_stock == 1
    assert summary.low_stock == 2
    assert summary.match_percent == 37.5
    assert summary.warnings == []


def test_flag_dataset_has_no_stock_breakdown():
    summary = summarize_selection(build_tables_dataset(), equal_to(False))

    assert summary.matched_labels == ["T2", "T4", "T6", "T8", "T10"]
    assert summary.out_of_stock == 0
    assert summary.low_stock == 0


def test_empty_dataset():
    summary = summarize_selection(Dataset(name="nothing"), below(5))

    assert summary.total_items == 0
    assert summary.matched_items == 0
    assert summary.match_percent == 0.0
    assert "Dataset 'nothing' is empty" in summary.warnings


def test_every_item_matched_warning():
    ds = Dataset(name="all", items=[Item("a", 1), Item("b", 2)])
    summary = summarize_selection(ds, below(100))
    assert summary.match_percent == 100.0
    assert any("Every item" in w for w in summary.warnings)


def test_negative_values_warning():
    ds = Dataset(name="neg", items=[Item("a", -1), Item("b", 20)])
    summary = summarize_selection(ds, below(0))
    assert summary.matched_labels == ["a"]
    assert "Negative values: a" in summary.warnings


def test_add_warning_deduplicates():
    summary = summarize_selection(Dataset(name="x"), below(5))
    summary.add_warning("same")
    summary.add_warning("same")
    assert summary.warnings.count("same") == 1


def test_does_not_mutate_dataset():
    ds = build_grocery_dataset()
    before = list(ds.items)
    summarize_selection(ds, below(5))
    assert ds.items == before
