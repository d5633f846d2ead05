"""
Selection Summary — read-only statistics over a filtered dataset.

This module provides lightweight analysis of a selection:
    - Matched vs. total counts
    - Out-of-stock / low-stock breakdown of the matches
    - Warning flags worth showing next to a report

IMPORTANT: This is an analysis layer. It does NOT modify the dataset.
It only produces read-only summaries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from tfr.model import Dataset
from tfr.predicates import Threshold
from tfr.selector import select

logger = logging.getLogger(__name__)


@dataclass
class SelectionSummary:
    """Summary of one dataset filtered by one threshold."""

    dataset_name: str
    threshold: Threshold
    total_items: int = 0
    matched_items: int = 0
    matched_labels: List[str] = field(default_factory=list)

    # Stock breakdown of the matches
    out_of_stock: int = 0  # value == 0
    low_stock: int = 0     # value > 0

    match_percent: float = 0.0

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the summary."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def summarize_selection(dataset: Dataset, threshold: Threshold) -> SelectionSummary:
    """
    Filter `dataset` by `threshold` and describe the result.

    Boolean values are left out of the stock breakdown; both
    counters stay at 0 for flag datasets.
    """
    summary = SelectionSummary(dataset_name=dataset.name, threshold=threshold)
    summary.total_items = len(dataset.items)

    matches = select(dataset.items, threshold)
    summary.matched_items = len(matches)
    summary.matched_labels = [item.label for item in matches]

    numeric = [item for item in matches if not isinstance(item.value, bool)]
    summary.out_of_stock = len([item for item in numeric if item.value == 0])
    summary.low_stock = len([item for item in numeric if item.value > 0])

    if summary.total_items > 0:
        summary.match_percent = (summary.matched_items / summary.total_items) * 100

    if summary.total_items == 0:
        summary.add_warning(f"Dataset '{dataset.name}' is empty")
    elif summary.matched_items == summary.total_items:
        summary.add_warning(f"Every item in '{dataset.name}' matched '{threshold}'")

    negatives = [item.label for item in numeric if item.value < 0]
    if negatives:
        summary.add_warning(f"Negative values: {', '.join(negatives)}")

    logger.debug(
        "Summary for %s: %d/%d matched",
        dataset.name, summary.matched_items, summary.total_items,
    )
    return summary
