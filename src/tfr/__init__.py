"""
Threshold Filter Reports (TFR) Package

Small labelled datasets, a threshold rule, and a console report of the
entries that satisfy it.

LAYERS:
-------
    predicates / model   structure only (rules and data)
    selector             applies rules to data, order-preserving
    summary              read-only statistics over a selection
    reporter             console formatting

Nothing below the reporter writes to stdout.
"""

__version__ = "0.1.0"
