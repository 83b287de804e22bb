"""Serialization of Name/Path as bare strings (JSON and YAML).

Decoding only checks the document type: a JSON/YAML string is always accepted,
whether or not it is a valid identifier. Call `is_valid()` afterwards.
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from .name import Name
from .path import Path


def encode(value: Name | Path) -> str:
    return json.dumps(value.value, ensure_ascii=False)


def _decode_str(raw: str | bytes, what: str) -> str:
    obj = json.loads(raw)
    if not isinstance(obj, str):
        raise TypeError(f"{what} must be a JSON string, got {type(obj).__name__}")
    return obj


def decode_name(raw: str | bytes) -> Name:
    return Name(_decode_str(raw, "logical cluster name"))


def decode_path(raw: str | bytes) -> Path:
    return Path(_decode_str(raw, "logical cluster path"))


def json_default(obj: Any) -> Any:
    """`default=` hook for json.dump(s)."""
    if isinstance(obj, (Name, Path)):
        return obj.value
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(obj: Any, **kwargs: Any) -> str:
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(obj, default=json_default, **kwargs)


class ClusterDumper(yaml.SafeDumper):
    pass


def _represent_identifier(dumper: yaml.SafeDumper, data: Name | Path) -> yaml.Node:
    return dumper.represent_str(data.value)


ClusterDumper.add_representer(Name, _represent_identifier)
ClusterDumper.add_representer(Path, _represent_identifier)


def dump_yaml(obj: Any) -> str:
    return yaml.dump(obj, Dumper=ClusterDumper, allow_unicode=True, sort_keys=False)


def _load_yaml_str(raw: str, what: str) -> str:
    obj = yaml.safe_load(raw)
    if not isinstance(obj, str):
        raise TypeError(f"{what} must be a YAML string, got {type(obj).__name__}")
    return obj


def load_yaml_name(raw: str) -> Name:
    return Name(_load_yaml_str(raw, "logical cluster name"))


def load_yaml_path(raw: str) -> Path:
    return Path(_load_yaml_str(raw, "logical cluster path"))
