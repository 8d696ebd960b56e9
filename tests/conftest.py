import json

import pytest

from unused_keys import cli, logutil


@pytest.fixture(autouse=True)
def _isolated_log(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(logutil, "LOG_DIRS", [str(log_dir)])
    monkeypatch.setattr(logutil, "LOG_PATH", None)
    monkeypatch.setattr(logutil, "LOG_LEVEL", "TRACE")
    monkeypatch.setattr(cli, "RESULT_LOG_PATH", None)
    return log_dir / logutil.LOG_NAME


@pytest.fixture
def log_records(_isolated_log):
    def _read():
        if not _isolated_log.exists():
            return []
        lines = _isolated_log.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines if line]

    return _read


@pytest.fixture
def project_tree(tmp_path):
    """The greeting/unused_key sample: one JSON table and one source file."""

    table = tmp_path / "fallbackTexts.json"
    table.write_text(json.dumps({"greeting": "hi", "unused_key": "bye"}), encoding="utf-8")
    src = tmp_path / "src"
    src.mkdir()
    (src / "app.ts").write_text('console.log(t("greeting"));\n', encoding="utf-8")
    return table, src
