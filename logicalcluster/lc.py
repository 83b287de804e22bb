"""lc — command line access to logical cluster identifiers.

Usage:
  python -m logicalcluster.lc validate --kind name root org-a
  python -m logicalcluster.lc split root:org:team
  python -m logicalcluster.lc join root:org team
  python -m logicalcluster.lc name root:org
  python -m logicalcluster.lc check --in ref.yaml

Exit codes:
  0 OK
  1 usage / io error
  2 invalid identifier or document
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path as FsPath
from typing import Any

import yaml

from .codec import dumps
from .lc_config import load_config
from .logger import IdentifierCheck, log_checks
from .name import Name
from .path import Path
from .schema import validate_cluster_ref


Outcome = tuple[int, list[IdentifierCheck], list[str]]


def _identifier(value: str, kind: str) -> Name | Path:
    return Name(value) if kind == "name" else Path(value)


def _check(value: str, kind: str) -> IdentifierCheck:
    return IdentifierCheck(kind=kind, value=value, valid=_identifier(value, kind).is_valid())


def _load_document(p: FsPath) -> Any:
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    return json.loads(text)


def cmd_validate(ns: argparse.Namespace) -> Outcome:
    checks = [_check(value, ns.kind) for value in ns.values]
    for c in checks:
        print(f"{'VALID' if c.valid else 'INVALID'} {c.value!r}")
    rc = 0 if all(c.valid for c in checks) else 2
    return rc, checks, []


def cmd_split(ns: argparse.Namespace) -> Outcome:
    ident = _identifier(ns.value, ns.kind)
    parent, has_parent = ident.parent()
    print(dumps({"parent": parent, "base": ident.base(), "has_parent": has_parent}))
    return 0, [_check(ns.value, ns.kind)], []


def cmd_join(ns: argparse.Namespace) -> Outcome:
    joined = _identifier(ns.parent, ns.kind).join(ns.name)
    print(joined)
    return 0, [_check(str(joined), ns.kind)], []


def cmd_name(ns: argparse.Namespace) -> Outcome:
    name, ok = Path(ns.value).name()
    if not ok:
        print(f"ERROR: {ns.value!r} has no logical cluster name")
        return 2, [IdentifierCheck(kind="name", value=ns.value, valid=False)], []
    print(name)
    return 0, [IdentifierCheck(kind="name", value=str(name), valid=True)], []


def cmd_check(ns: argparse.Namespace) -> Outcome:
    try:
        obj = _load_document(FsPath(ns.inp))
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: cannot read {ns.inp}: {e}")
        return 1, [], [str(e)]

    checks: list[IdentifierCheck] = []
    if isinstance(obj, dict):
        for field, kind in (("clusterName", "name"), ("clusterPath", "path")):
            if isinstance(obj.get(field), str):
                checks.append(_check(obj[field], kind))

    errs = validate_cluster_ref(obj)
    if errs:
        print("INVALID")
        for line in errs:
            print(f"- {line}")
        return 2, checks, errs
    print("OK")
    return 0, checks, []


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="lc")
    ap.add_argument("--config", default=None, help="lc config JSON")
    ap.add_argument("--log", action="store_true", help="append an event to the configured log")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("validate")
    p.add_argument("--kind", choices=["name", "path"], default=None)
    p.add_argument("values", nargs="+")
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser("split")
    p.add_argument("--kind", choices=["name", "path"], default=None)
    p.add_argument("value")
    p.set_defaults(func=cmd_split)

    p = sub.add_parser("join")
    p.add_argument("--kind", choices=["name", "path"], default=None)
    p.add_argument("parent")
    p.add_argument("name")
    p.set_defaults(func=cmd_join)

    p = sub.add_parser("name")
    p.add_argument("value")
    p.set_defaults(func=cmd_name)

    p = sub.add_parser("check")
    p.add_argument("--in", dest="inp", required=True)
    p.set_defaults(func=cmd_check)

    return ap


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)

    try:
        cfg = load_config(ns.config)
    except (OSError, TypeError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    if getattr(ns, "kind", "") is None:
        ns.kind = cfg["default_kind"]

    rc, checks, errors = ns.func(ns)

    if ns.log:
        log_checks(
            command=ns.cmd,
            log_path=FsPath(cfg["log_path"]),
            checks=checks,
            exit_code=rc,
            errors=errors,
        )
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
