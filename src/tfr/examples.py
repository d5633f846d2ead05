"""
Example datasets and the four teaching problems built on them.

Each builder returns a fresh Dataset so callers (and tests) never share
state. Problems pair a dataset with its rule and report layout; the
registry order is the order the reports are printed in.
"""
from dataclasses import dataclass
from typing import List, Optional, TextIO

from tfr.config import FilterConfig
from tfr.model import Dataset, pair_items
from tfr.predicates import Threshold, at_most, below, equal_to
from tfr.reporter import ReportLayout, print_inventory_report, print_report
from tfr.selector import select, select_labels


def build_library_dataset() -> Dataset:
    titles = [
        "JavaScript Basics",
        "Python Guide",
        "Web Development",
        "Data Structures",
        "Algorithms",
        "React Fundamentals",
        "Node.js",
        "Database Design",
        "Machine Learning",
        "CSS Mastery",
    ]
    copies = [12, 2, 25, 1, 0, 8, 3, 15, 20, 4]
    return Dataset(name="library", items=pair_items(titles, copies), metadata={"unit": "copies"})


def build_grades_dataset() -> Dataset:
    names = ["Alice", "Bob", "Charlie", "Diana", "Eve", "Frank", "Grace", "Henry", "Iris", "Jack"]
    grades = [85, 67, 92, 45, 78, 55, 88, 62, 95, 40]
    return Dataset(name="grades", items=pair_items(names, grades), metadata={"unit": "percent"})


def build_tables_dataset() -> Dataset:
    numbers = [f"T{i}" for i in range(1, 11)]
    # True = occupied
    occupied = [True, False, True, False, True, False, True, False, True, False]
    capacity = [4, 2, 6, 8, 2, 4, 10, 6, 4, 2]
    seats = [f"{c} seats" for c in capacity]
    return Dataset(name="tables", items=pair_items(numbers, occupied, seats), metadata={"unit": "occupied"})


def build_grocery_dataset() -> Dataset:
    names = ["Apples", "Bananas", "Oranges", "Grapes", "Berries", "Pears", "Mangoes", "Kiwis"]
    stock = [25, 3, 45, 8, 0, 12, 2, 30]
    return Dataset(
        name="grocery",
        items=pair_items(names, stock, ["Fruits"] * len(names)),
        metadata={"unit": "units"},
    )


def build_inventory_dataset() -> Dataset:
    """The grocery stock as records, for the record-style inventory report."""
    grocery = build_grocery_dataset()
    return Dataset(name="inventory", items=grocery.items, metadata=grocery.metadata)


@dataclass(frozen=True)
class Problem:
    """One dataset, the rule applied to it, and how its report looks."""

    key: str
    dataset: Dataset
    threshold: Threshold
    layout: ReportLayout


def build_problems(config: Optional[FilterConfig] = None) -> List[Problem]:
    config = config or FilterConfig()
    return [
        Problem(
            key="library",
            dataset=build_library_dataset(),
            # Library policy: restock when 3 or fewer copies
            threshold=at_most(3),
            layout=ReportLayout(
                title="LIBRARY INVENTORY REPORT",
                heading="📚 Books needing restocking:",
                line_template='   📖 "{label}" - needs immediate attention',
                total_template="📊 Total books needing restock: {count}",
            ),
        ),
        Problem(
            key="grades",
            dataset=build_grades_dataset(),
            threshold=below(70),
            layout=ReportLayout(
                title="ACADEMIC SUPPORT REPORT",
                heading="🎓 Students needing academic support:",
                line_template="   👤 {label} - requires tutoring",
                total_template="📈 Total students needing support: {count}",
            ),
        ),
        Problem(
            key="tables",
            dataset=build_tables_dataset(),
            threshold=equal_to(False),
            layout=ReportLayout(
                title="RESTAURANT TABLE AVAILABILITY",
                heading="🍽️  Available tables for booking:",
                line_template="   🪑 Table {label} - ready for guests",
                total_template="🎯 Total available tables: {count}",
            ),
        ),
        Problem(
            key="grocery",
            dataset=build_grocery_dataset(),
            threshold=below(config.threshold),
            layout=ReportLayout(
                title="GROCERY STORE INVENTORY REPORT",
                heading="🛒 Products low in stock:",
                line_template="   🔴 {label} - needs reordering",
                total_template="📊 Total items needing restock: {count}",
                spacing=0,
            ),
        ),
    ]


def get_problem(key: str, config: Optional[FilterConfig] = None) -> Problem:
    for problem in build_problems(config):
        if problem.key == key:
            return problem
    raise KeyError(f"Unknown problem: {key}")


def run_problem(problem: Problem, stream: Optional[TextIO] = None) -> List[str]:
    """Select and print one problem's report. Returns the matching labels."""
    labels = select_labels(problem.dataset.items, problem.threshold)
    print_report(labels, problem.layout, stream=stream)
    return labels


def run_inventory(config: Optional[FilterConfig] = None, stream: Optional[TextIO] = None) -> List[str]:
    """Print the record-style inventory report for the grocery dataset."""
    config = config or FilterConfig()
    inventory = build_inventory_dataset()
    matches = select(inventory.items, below(config.threshold))
    print_inventory_report(matches, len(inventory.items), stream=stream)
    return [item.label for item in matches]
