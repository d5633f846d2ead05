"""
Console reports for selections.

Two report shapes:
    - Label reports: banner, heading, one line per matching label, total
    - Inventory report: numbered record lines with stock status and a
      summary/breakdown footer

Formatting is split from printing: format_* returns lines, print_*
writes them to stdout (or any text stream).
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO

from tfr.model import Item
from tfr.predicates import ComparisonOperator, Threshold, equal_to
from tfr.selector import count_matching

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 50
INVENTORY_WIDTH = 60


@dataclass(frozen=True)
class ReportLayout:
    """
    Static description of a label report.

    Properties:
        title: Upper-case banner title
        heading: Line printed above the entries
        line_template: Per-entry line; receives `label`
        total_template: Footer line; receives `count`
        width: Divider width
        char: Divider character
        spacing: Blank lines printed after the footer
    """

    title: str
    heading: str
    line_template: str
    total_template: str
    width: int = DEFAULT_WIDTH
    char: str = "="
    spacing: int = 2


def banner(width: int = DEFAULT_WIDTH, char: str = "=") -> str:
    return char * width


def _write(lines: List[str], stream: Optional[TextIO]) -> None:
    out = stream if stream is not None else sys.stdout
    out.write("\n".join(lines) + "\n")


def format_report(labels: Sequence[str], layout: ReportLayout) -> List[str]:
    divider = banner(layout.width, layout.char)
    lines = [divider, layout.title, divider, layout.heading]
    for label in labels:
        lines.append(layout.line_template.format(label=label))
    lines.append(divider)
    lines.append(layout.total_template.format(count=len(labels)))
    lines.extend([""] * layout.spacing)
    return lines


def print_report(
    labels: Sequence[str], layout: ReportLayout, stream: Optional[TextIO] = None
) -> None:
    """Write a label report to `stream` (stdout by default)."""
    logger.debug("Printing '%s' with %d entries", layout.title, len(labels))
    _write(format_report(labels, layout), stream)


def stock_status(item: Item) -> str:
    return "OUT OF STOCK" if item.value == 0 else "LOW STOCK"


def _describe(item: Item) -> str:
    if item.category:
        return f"{item.label} ({item.category})"
    return item.label


def format_inventory_report(
    matches: Sequence[Item],
    total: int,
    title: str = "ADVANCED INVENTORY MANAGEMENT SYSTEM",
    width: int = INVENTORY_WIDTH,
) -> List[str]:
    """
    Lines of the record-style inventory report.

    Args:
        matches: Items that need attention, in source order
        total: Size of the whole inventory (for the summary line)
        title: Banner title
        width: Divider width
    """
    divider = banner(width)
    lines = ["", divider, title, divider, "📦 Items requiring immediate attention:"]
    for index, item in enumerate(matches, 1):
        lines.append(
            f"   {index}. {_describe(item)} - {stock_status(item)} [{item.value} units]"
        )
    lines.append(divider)
    lines.append(f"📈 Summary: {len(matches)} out of {total} items need attention")

    out_of_stock = count_matching(matches, equal_to(0))
    low_stock = count_matching(matches, Threshold(ComparisonOperator.GREATER_THAN, 0))
    lines.append(f"   🔴 Out of stock: {out_of_stock} items")
    lines.append(f"   🟡 Low stock: {low_stock} items")
    return lines


def print_inventory_report(
    matches: Sequence[Item],
    total: int,
    stream: Optional[TextIO] = None,
    title: str = "ADVANCED INVENTORY MANAGEMENT SYSTEM",
    width: int = INVENTORY_WIDTH,
) -> None:
    _write(format_inventory_report(matches, total, title=title, width=width), stream)
