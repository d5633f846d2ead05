"""
Predicate System for TFR

Every inclusion rule (restock cutoffs, grade floors, availability flags)
is represented as a small immutable object, never as a bare lambda
or a string.

This ensures:
    - Rules can be printed and serialized
    - Rules compare equal when they mean the same thing
    - The selector can stay generic across domains

ARCHITECTURAL RULE:
    Predicates describe the rule.
    They do not walk datasets (that belongs in the selector layer).
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union


Scalar = Union[int, float, bool]


class ThresholdParseError(ValueError):
    """Raised when a rule string cannot be parsed."""
    pass


class ComparisonOperator(Enum):
    """
    Comparison operators supported by threshold rules.

    The value of each member is its conventional symbol, so
    ComparisonOperator("<=") round-trips through text.
    """

    EQUALS = "=="
    NOT_EQUALS = "!="
    GREATER_THAN = ">"
    GREATER_EQUAL = ">="
    LESS_THAN = "<"
    LESS_EQUAL = "<="


@dataclass(frozen=True, eq=False)
class Threshold:
    """
    A comparison rule: "attribute <operator> value".

    Examples:
        Library restock policy (3 or fewer copies):
            Threshold(ComparisonOperator.LESS_EQUAL, 3)

        Table is free:
            Threshold(ComparisonOperator.EQUALS, False)

    Properties:
        operator: ComparisonOperator enum
        value: The cutoff (int, float or bool)

    IMPORTANT:
        This object is immutable (frozen=True).
        The attribute always sits on the left-hand side.
        A boolean cutoff never equals a numeric one (False != 0 here),
        while 3 and 3.0 compare equal.
    """

    operator: ComparisonOperator
    value: Scalar

    def _key(self):
        return (self.operator, isinstance(self.value, bool), self.value)

    def __eq__(self, other):
        if not isinstance(other, Threshold):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self) -> str:
        value = str(self.value).lower() if isinstance(self.value, bool) else self.value
        return f"{self.operator.value} {value}"


def below(value: Scalar) -> Threshold:
    """Shorthand for Threshold(LESS_THAN, value)."""
    return Threshold(ComparisonOperator.LESS_THAN, value)


def at_most(value: Scalar) -> Threshold:
    """Shorthand for Threshold(LESS_EQUAL, value)."""
    return Threshold(ComparisonOperator.LESS_EQUAL, value)


def equal_to(value: Scalar) -> Threshold:
    """Shorthand for Threshold(EQUALS, value)."""
    return Threshold(ComparisonOperator.EQUALS, value)


# Longest symbols first so "<=" is not read as "<" followed by "=".
_RULE_RE = re.compile(r"^\s*(==|!=|<=|>=|<|>|=)\s*(\S+)\s*$")
_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?$")


def _parse_literal(token: str) -> Scalar:
    lowered = token.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if _INT_RE.match(token):
        return int(token)
    if _FLOAT_RE.match(token):
        return float(token)
    raise ThresholdParseError(f"Not a number or boolean: {token!r}")


def parse_threshold(text: str) -> Threshold:
    """
    Convert a rule string to a Threshold.

    Accepts:
        "<= 3", "<70", "== false", "!= 2.5", "= true"

    A single "=" is read as "==".

    Args:
        text: Rule in "<operator> <literal>" form

    Returns:
        Threshold

    Raises:
        ThresholdParseError: If the operator or literal is invalid
    """
    if not text or not text.strip():
        raise ThresholdParseError("Empty rule")

    match = _RULE_RE.match(text)
    if match is None:
        raise ThresholdParseError(f"Failed to parse rule '{text.strip()}'")

    symbol, literal = match.groups()
    if symbol == "=":
        symbol = "=="
    return Threshold(ComparisonOperator(symbol), _parse_literal(literal))
