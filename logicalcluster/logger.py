"""Identifier check log (jsonl).

Each `lc` command run with `--log` appends one line recording which
identifiers it looked at, under which view (name/path), and whether they
passed the grammar:

  {"ts": ..., "event": "lc.validate", "exit_code": 2,
   "checks": [{"kind": "name", "value": "root:org", "valid": false}]}

Identifier types never log; only the CLI does.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class IdentifierCheck:
    kind: str  # "name" | "path"
    value: str
    valid: bool


def log_checks(
    *,
    command: str,
    log_path: Path,
    checks: list[IdentifierCheck],
    exit_code: int,
    errors: list[str] | None = None,
) -> dict[str, Any]:
    record: dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": f"lc.{command}",
        "exit_code": exit_code,
        "checks": [asdict(c) for c in checks],
    }
    if errors:
        record["errors"] = errors

    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")
    return record
