import os

from unused_keys import scanner
from unused_keys.model import Options


def _opts(tmp_path, **kwargs):
    return Options(json_path=str(tmp_path / "t.json"), root_dir=str(tmp_path), **kwargs)


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_scan_marks_used_keys(tmp_path):
    f = _write(tmp_path / "a.ts", 'const x = t("greeting");\nconst y = fooBar;\n')
    result = scanner.scan([f], ["greeting", "foo", "unused_key"], _opts(tmp_path))
    assert result.files_scanned == 1
    assert result.found == {"greeting": True, "foo": False, "unused_key": False}
    assert result.unused == ["foo", "unused_key"]


def test_scan_skips_other_extensions(tmp_path):
    f = _write(tmp_path / "notes.md", '"greeting"')
    result = scanner.scan([f], ["greeting"], _opts(tmp_path))
    assert result.files_scanned == 0
    assert result.unused == ["greeting"]

    result = scanner.scan([f], ["greeting"], _opts(tmp_path, exts=[]))
    assert result.files_scanned == 1
    assert result.unused == []


def test_scan_skips_oversized_files(tmp_path):
    big = _write(tmp_path / "big.js", '"greeting"' + " " * 100)
    small = _write(tmp_path / "small.js", "nothing here")
    result = scanner.scan([big, small], ["greeting"], _opts(tmp_path, max_file_bytes=50))
    assert result.files_scanned == 1
    assert result.unused == ["greeting"]


def test_scan_skips_unreadable_files(tmp_path, log_records):
    missing = str(tmp_path / "gone.ts")
    result = scanner.scan([missing], ["greeting"], _opts(tmp_path))
    assert result.files_scanned == 0
    assert any(r["event"] == "scan.skip" and r["reason"] == "stat" for r in log_records())


def test_case_insensitive_mode(tmp_path):
    f = _write(tmp_path / "a.ts", 't("GREETING")')
    assert scanner.scan([f], ["greeting"], _opts(tmp_path)).unused == ["greeting"]
    assert scanner.scan([f], ["greeting"], _opts(tmp_path, case_sensitive=False)).unused == []


def test_found_key_is_not_retested(tmp_path, monkeypatch):
    first = _write(tmp_path / "1.ts", 't("alpha")')
    second = _write(tmp_path / "2.ts", 't("alpha"); t("beta")')
    calls = []
    real = scanner.key_matches

    def counting(content, patterns):
        calls.append(content)
        return real(content, patterns)

    monkeypatch.setattr(scanner, "key_matches", counting)
    result = scanner.scan([first, second], ["alpha", "beta"], _opts(tmp_path))
    assert result.unused == []
    # alpha is tested once (file 1), beta once (file 2, substring gate skips file 1)
    assert len(calls) == 2


def test_invalid_utf8_is_tolerated(tmp_path):
    path = tmp_path / "a.js"
    path.write_bytes(b'\xff\xfe t("greeting")')
    result = scanner.scan([str(path)], ["greeting"], _opts(tmp_path))
    assert result.files_scanned == 1
    assert result.unused == []


def test_find_unused_walks_root(tmp_path):
    _write(tmp_path / "src" / "a.tsx", "<p>{texts.title}</p>")
    _write(tmp_path / "node_modules" / "x" / "b.js", '"subtitle"')
    result = scanner.find_unused(_opts(tmp_path), ["title", "subtitle"])
    assert result.unused == ["subtitle"]
    assert result.files_scanned == 1


def test_size_cap_is_inclusive(tmp_path):
    f = _write(tmp_path / "edge.js", 't("greeting")')
    size = os.path.getsize(f)

    at_cap = scanner.scan([f], ["greeting"], _opts(tmp_path, max_file_bytes=size))
    assert at_cap.files_scanned == 1
    assert at_cap.unused == []

    over_cap = scanner.scan([f], ["greeting"], _opts(tmp_path, max_file_bytes=size - 1))
    assert over_cap.files_scanned == 0
    assert over_cap.unused == ["greeting"]
