"""
Serialization helpers for TFR objects (Item, Threshold, Dataset, summaries).

Provides JSON/YAML text renderings via an intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
Nothing here touches the filesystem.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from tfr.model import Dataset, Item
from tfr.predicates import ComparisonOperator, Threshold
from tfr.summary import SelectionSummary


def item_to_dict(item: Item) -> Dict[str, Any]:
    return {"label": item.label, "value": item.value, "category": item.category}


def item_from_dict(d: Dict[str, Any]) -> Item:
    return Item(label=d["label"], value=d["value"], category=d.get("category"))


def threshold_to_dict(t: Threshold) -> Dict[str, Any]:
    return {"operator": t.operator.value, "value": t.value}


def threshold_from_dict(d: Dict[str, Any]) -> Threshold:
    return Threshold(operator=ComparisonOperator(d["operator"]), value=d["value"])


def dataset_to_dict(ds: Dataset) -> Dict[str, Any]:
    if not isinstance(ds, Dataset):
        raise TypeError(f"Unsupported dataset type: {type(ds)}")
    return {
        "name": ds.name,
        "items": [item_to_dict(i) for i in ds.items],
        "metadata": ds.metadata,
    }


def dataset_from_dict(d: Dict[str, Any]) -> Dataset:
    return Dataset(
        name=d.get("name", ""),
        items=[item_from_dict(i) for i in d.get("items", [])],
        metadata=d.get("metadata", {}),
    )


def dataset_to_json(ds: Dataset) -> str:
    return json.dumps(dataset_to_dict(ds), sort_keys=True, ensure_ascii=False)


def dataset_from_json(s: str) -> Dataset:
    return dataset_from_dict(json.loads(s))


def dataset_to_yaml(ds: Dataset) -> str:
    return yaml.safe_dump(dataset_to_dict(ds), allow_unicode=True)


def dataset_from_yaml(s: str) -> Dataset:
    return dataset_from_dict(yaml.safe_load(s))


def summary_to_dict(s: SelectionSummary) -> Dict[str, Any]:
    return {
        "dataset": s.dataset_name,
        "threshold": threshold_to_dict(s.threshold),
        "total_items": s.total_items,
        "matched_items": s.matched_items,
        "matched_labels": list(s.matched_labels),
        "out_of_stock": s.out_of_stock,
        "low_stock": s.low_stock,
        "match_percent": round(s.match_percent, 2),
        "warnings": list(s.warnings),
    }


def summary_to_json(s: SelectionSummary) -> str:
    return json.dumps(summary_to_dict(s), sort_keys=True, ensure_ascii=False)


def summary_to_yaml(s: SelectionSummary) -> str:
    return yaml.safe_dump(summary_to_dict(s), allow_unicode=True)
