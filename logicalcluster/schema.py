"""Cluster reference document contracts (v0.1).

Schemas live next to this module under contracts/*.schema.json. The schema
only checks document shape; identifier grammar is checked with the
predicates from grammar.py so there is a single authority for it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from .grammar import valid_name, valid_path


def contracts_dir() -> Path:
    return Path(__file__).resolve().parent / "contracts"


def load_schema(name: str) -> dict:
    path = contracts_dir() / f"{name}.schema.json"
    if not path.exists():
        raise FileNotFoundError(f"missing schema: {name} ({path})")
    obj = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(obj, dict):
        raise TypeError(f"schema must be a JSON object: {path}")
    return obj


def _error_path(e: ValidationError) -> list[str]:
    # YAML mappings may carry int keys next to str keys
    return [str(p) for p in e.path]


def schema_errors(instance: Any, schema: dict) -> list[str]:
    v = Draft202012Validator(schema)
    errors = sorted(v.iter_errors(instance), key=lambda e: (_error_path(e), e.message))
    return [f"{_error_path(e)}: {e.message}" for e in errors]


def validate_cluster_ref(obj: Any) -> list[str]:
    """Return human-readable errors for a cluster reference document (empty if valid)."""
    errs = schema_errors(obj, load_schema("cluster_ref_v0_1"))
    if not isinstance(obj, dict):
        return errs

    name = obj.get("clusterName")
    if isinstance(name, str) and not valid_name(name):
        errs.append(f"['clusterName']: invalid logical cluster name: {name!r}")

    path = obj.get("clusterPath")
    if isinstance(path, str) and not valid_path(path):
        errs.append(f"['clusterPath']: invalid logical cluster path: {path!r}")

    return errs
