"""
Command-line entry point: print the threshold reports.

Report text goes to stdout; diagnostics go to stderr through logging.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from tfr.config import ConfigError, FilterConfig, load_config, merge_config
from tfr.examples import build_inventory_dataset, build_problems, run_inventory, run_problem
from tfr.predicates import below
from tfr.serialization import summary_to_dict
from tfr.summary import SelectionSummary, summarize_selection

LOGGER_NAME = "tfr"

PROBLEM_CHOICES = ["library", "grades", "tables", "grocery", "inventory", "all"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tfr",
        description="Filter the example datasets against their thresholds and print reports.",
    )
    parser.add_argument(
        "--problem",
        choices=PROBLEM_CHOICES,
        default="all",
        help="which report to print (default: all)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="stock threshold for the grocery/inventory reports (default: 5)",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="text report or a machine-readable selection summary",
    )
    parser.add_argument("--verbose", action="store_true", help="log details to stderr")
    return parser.parse_args(argv)


def setup_logger(verbose: bool) -> logging.Logger:
    """
    Configure the package logger to write to stderr.
    - verbose=False: WARNING and above
    - verbose=True : DEBUG and above
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    logger.handlers.clear()

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger


def resolve_config(args: argparse.Namespace) -> FilterConfig:
    """CLI > config file > defaults."""
    config = load_config(args.config) if args.config is not None else FilterConfig()
    return merge_config(config, args.threshold)


def collect_summaries(selected: str, config: FilterConfig) -> List[SelectionSummary]:
    summaries = []
    for problem in build_problems(config):
        if selected in (problem.key, "all"):
            summaries.append(summarize_selection(problem.dataset, problem.threshold))
    if selected in ("inventory", "all"):
        summaries.append(summarize_selection(build_inventory_dataset(), below(config.threshold)))
    return summaries


def print_text(selected: str, config: FilterConfig) -> None:
    for problem in build_problems(config):
        if selected in (problem.key, "all"):
            run_problem(problem)
    if selected in ("inventory", "all"):
        run_inventory(config)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = setup_logger(args.verbose)

    try:
        config = resolve_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.info("run start: problem=%s threshold=%s format=%s", args.problem, config.threshold, args.format)

    if args.format == "text":
        print_text(args.problem, config)
        return 0

    payload = [summary_to_dict(s) for s in collect_summaries(args.problem, config)]
    if args.format == "json":
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(yaml.safe_dump(payload, allow_unicode=True, sort_keys=False), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
