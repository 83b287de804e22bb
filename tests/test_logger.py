import json
from pathlib import Path


def test_log_checks_appends_jsonl(tmp_path: Path):
    from logicalcluster.logger import IdentifierCheck, log_checks

    p = tmp_path / "logs" / "lc.jsonl"
    log_checks(
        command="validate",
        log_path=p,
        checks=[IdentifierCheck(kind="path", value="root:org", valid=True)],
        exit_code=0,
    )
    log_checks(
        command="check",
        log_path=p,
        checks=[IdentifierCheck(kind="name", value="root:org", valid=False)],
        exit_code=2,
        errors=["['clusterName']: invalid logical cluster name: 'root:org'"],
    )

    lines = p.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first, second = json.loads(lines[0]), json.loads(lines[1])
    assert first["event"] == "lc.validate"
    assert first["checks"] == [{"kind": "path", "value": "root:org", "valid": True}]
    assert "errors" not in first
    assert first["ts"]
    assert second["exit_code"] == 2
    assert second["errors"] == ["['clusterName']: invalid logical cluster name: 'root:org'"]
