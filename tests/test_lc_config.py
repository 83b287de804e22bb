from __future__ import annotations

import json
from pathlib import Path

import pytest


def test_lc_config_defaults(tmp_path: Path):
    from logicalcluster.lc_config import DEFAULT_LOG_PATH, load_config

    cfg_path = tmp_path / "lc_config.json"
    cfg_path.write_text(json.dumps({"log_path": None}), encoding="utf-8")

    cfg = load_config(cfg_path)
    assert cfg["log_path"] == str(DEFAULT_LOG_PATH)
    assert cfg["default_kind"] == "path"


def test_lc_config_keeps_explicit_values(tmp_path: Path):
    from logicalcluster.lc_config import load_config

    log = tmp_path / "logs" / "x.jsonl"
    cfg_path = tmp_path / "lc_config.json"
    cfg_path.write_text(json.dumps({"log_path": str(log), "default_kind": "name"}), encoding="utf-8")

    cfg = load_config(cfg_path)
    assert cfg["log_path"] == str(log)
    assert cfg["default_kind"] == "name"


def test_lc_config_rejects_bad_documents(tmp_path: Path):
    from logicalcluster.lc_config import load_config

    p = tmp_path / "a.json"
    p.write_text("[]", encoding="utf-8")
    with pytest.raises(TypeError):
        load_config(p)

    p.write_text(json.dumps({"default_kind": "tree"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)

    p.write_text(json.dumps({"unknown": 1}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)

    p.write_text(json.dumps({"annotation_key": "x/cluster"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)


def test_lc_config_without_file():
    from logicalcluster.lc_config import load_config

    assert load_config(None)["default_kind"] == "path"
