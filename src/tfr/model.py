"""
Core Dataset Model Objects

Defines the data structures every report is built from:
    - Items (one labelled value, optionally with a category)
    - Datasets (named ordered collections of items)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about thresholds or console output
        - Are never mutated after construction
        - Are fully serializable
        - Represent data, not behavior
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .predicates import Scalar


class DatasetShapeError(ValueError):
    """Raised when parallel arrays cannot be paired into items."""
    pass


@dataclass(frozen=True)
class Item:
    """
    A single labelled entry of a dataset.

    Examples:
        - Item("Python Guide", 2)          (copies on the shelf)
        - Item("T2", False)                (table occupied?)
        - Item("Bananas", 3, "Fruits")     (units in stock)

    Properties:
        label: What gets printed (title, name, table number)
        value: The attribute rules are evaluated against
        category: Optional grouping shown by the inventory report
    """

    label: str
    value: Scalar
    category: Optional[str] = None


@dataclass
class Dataset:
    """
    Root container for one report's data.

    Properties:
        name:
            Dataset identifier (e.g., "library")

        items:
            Items in source order. Order is significant: every
            selection preserves it.

        metadata:
            Arbitrary key-value pairs (use sparingly)
            Example: {"unit": "copies"}

    INVARIANTS:
        - Item order is the order the data was declared in
        - Labels need not be unique (no dedup anywhere)
    """

    name: str
    items: List[Item] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def labels(self) -> List[str]:
        return [item.label for item in self.items]

    def get_item(self, label: str) -> Optional[Item]:
        """
        Retrieve the first item with the given label.

        Args:
            label: Item label

        Returns:
            Item object or None if not found
        """
        for item in self.items:
            if item.label == label:
                return item
        return None


def pair_items(
    labels: Sequence[str],
    values: Sequence[Scalar],
    categories: Optional[Sequence[Optional[str]]] = None,
) -> List[Item]:
    """
    Zip parallel label/value arrays into Items.

    Raises:
        DatasetShapeError: If the arrays differ in length
    """
    if len(labels) != len(values):
        raise DatasetShapeError(
            f"Got {len(labels)} labels but {len(values)} values"
        )
    if categories is None:
        categories = [None] * len(labels)
    elif len(categories) != len(labels):
        raise DatasetShapeError(
            f"Got {len(labels)} labels but {len(categories)} categories"
        )
    return [
        Item(label=label, value=value, category=category)
        for label, value, category in zip(labels, values, categories)
    ]
