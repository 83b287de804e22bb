"""lc config (v0.1) — load/validate CLI runtime config.

Config format: JSON (lc_config_v0_1.schema.json)
Example:
{
  "log_path": "/var/log/lc.jsonl",
  "default_kind": "path"
}

Rules:
- log_path defaults to ./logs/lc.jsonl when absent/null.
- default_kind ("name" | "path") is the view used when a command gets no
  --kind; defaults to "path".
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .schema import load_schema, schema_errors

DEFAULT_LOG_PATH = Path("logs") / "lc.jsonl"


def default_config() -> dict[str, Any]:
    return {
        "log_path": str(DEFAULT_LOG_PATH),
        "default_kind": "path",
    }


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    if path is None:
        return default_config()

    p = Path(path)
    obj = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(obj, dict):
        raise TypeError("config must be a JSON object")

    errs = schema_errors(obj, load_schema("lc_config_v0_1"))
    if errs:
        raise ValueError(f"invalid config {p}: {errs[:5]}")

    for k, v in default_config().items():
        if obj.get(k) in (None, ""):
            obj[k] = v

    return obj
