"""
Selector: evaluate predicates against datasets.

This is the only layer that applies rules to values. Predicates
(Layer 1) stay pure structure; reports (Layer 3) only consume the
ordered result sets produced here.

Guarantees:
    - Source order is preserved
    - Inputs are never mutated
    - Same inputs always give the same output
"""

from __future__ import annotations

import logging
import operator
import warnings
from typing import Callable, Iterable, List, Union

from tfr.model import Item
from tfr.predicates import ComparisonOperator, Scalar, Threshold

logger = logging.getLogger(__name__)

Predicate = Union[Threshold, Callable[[Item], bool]]

_COMPARATORS = {
    ComparisonOperator.EQUALS: operator.eq,
    ComparisonOperator.NOT_EQUALS: operator.ne,
    ComparisonOperator.GREATER_THAN: operator.gt,
    ComparisonOperator.GREATER_EQUAL: operator.ge,
    ComparisonOperator.LESS_THAN: operator.lt,
    ComparisonOperator.LESS_EQUAL: operator.le,
}


def evaluate(threshold: Threshold, value: Scalar) -> bool:
    """Return True if `value <operator> threshold.value` holds."""
    compare = _COMPARATORS[threshold.operator]
    return bool(compare(value, threshold.value))


def _as_callable(predicate: Predicate) -> Callable[[Item], bool]:
    if isinstance(predicate, Threshold):
        return lambda item: evaluate(predicate, item.value)
    if callable(predicate):
        return predicate
    raise TypeError(f"Unsupported predicate type: {type(predicate)}")


def _warn_on_mixed_kinds(items: List[Item], threshold: Threshold) -> None:
    # bool is an int subclass, so "False < 5" silently works
    rule_is_flag = isinstance(threshold.value, bool)
    for item in items:
        if isinstance(item.value, bool) != rule_is_flag:
            warnings.warn(
                f"Comparing {item.label!r}={item.value!r} against rule '{threshold}' "
                "mixes boolean and numeric values",
                UserWarning,
            )
            return


def select(items: Iterable[Item], predicate: Predicate) -> List[Item]:
    """
    Return the ordered subsequence of items satisfying the predicate.

    Args:
        items: Items in source order (any iterable, consumed once)
        predicate: A Threshold (checked against item.value) or any
            callable taking an Item and returning a bool

    Returns:
        New list; empty when nothing matches or input is empty
    """
    items = list(items)
    if isinstance(predicate, Threshold):
        _warn_on_mixed_kinds(items, predicate)
    keep = _as_callable(predicate)

    matches = [item for item in items if keep(item)]
    logger.debug("Selected %d of %d items (%s)", len(matches), len(items), predicate)
    return matches


def select_by_threshold(
    items: Iterable[Item], op: ComparisonOperator, value: Scalar
) -> List[Item]:
    """Shorthand for select(items, Threshold(op, value))."""
    return select(items, Threshold(op, value))


def select_labels(items: Iterable[Item], predicate: Predicate) -> List[str]:
    """Labels of the matching items, in source order."""
    return [item.label for item in select(items, predicate)]


def count_matching(items: Iterable[Item], predicate: Predicate) -> int:
    return len(select(items, predicate))
