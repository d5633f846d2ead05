#!/usr/bin/env python3
"""
Demo: print every threshold report in order.

Library restock (<= 3 copies), academic support (< 70), free tables,
grocery restock (< 5 units), then the record-style inventory report.
"""

from tfr.config import FilterConfig
from tfr.examples import build_problems, run_inventory, run_problem


def main():
    config = FilterConfig()

    for problem in build_problems(config):
        run_problem(problem)

    run_inventory(config)


if __name__ == "__main__":
    main()
