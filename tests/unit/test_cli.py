import os
import subprocess
import sys

import pytest

import json_decoder as jd

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SCRIPT = os.path.join(REPO_ROOT, "json_decoder.py")


def _write(tmp_path, text, name="doc.json"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)

def test_valid_file_is_silent(tmp_path, capsys):
    assert jd._cli([_write(tmp_path, '{"a": [1, 2, 3]}')]) == 0
    out, err = capsys.readouterr()
    assert out == "" and err == ""

def test_invalid_file_reports_syntax_error(tmp_path, capsys):
    assert jd._cli([_write(tmp_path, "{}")]) == 1
    _, err = capsys.readouterr()
    assert err.startswith("SyntaxError: unexpected character")

def test_missing_file(tmp_path, capsys):
    assert jd._cli([str(tmp_path / "nope.json")]) == 1
    _, err = capsys.readouterr()
    assert "FileNotFoundError" in err

def test_missing_argument_is_usage_error():
    with pytest.raises(SystemExit) as ei:
        jd._cli([])
    assert ei.value.code == 2

def test_debug_prints_tree(tmp_path, capsys):
    assert jd._cli([_write(tmp_path, "[true]"), "--debug"]) == 0
    out, _ = capsys.readouterr()
    assert out.strip() == "Array(items=[Bool(value=True)])"

def test_max_depth_flag(tmp_path, capsys):
    assert jd._cli([_write(tmp_path, "[[[1]]]"), "--max-depth", "2"]) == 1
    _, err = capsys.readouterr()
    assert "depth limit exceeded" in err

def test_deep_nesting_without_limit_fails_cleanly(tmp_path, capsys):
    depth = sys.getrecursionlimit() * 2
    assert jd._cli([_write(tmp_path, "[" * depth + "]" * depth)]) == 1
    _, err = capsys.readouterr()
    assert "RecursionError" in err

def test_script_entrypoint_exit_codes(tmp_path):
    good = _write(tmp_path, "[1]", "good.json")
    bad = _write(tmp_path, "[1,]", "bad.json")
    assert subprocess.run([sys.executable, SCRIPT, good]).returncode == 0
    cp = subprocess.run([sys.executable, SCRIPT, bad], capture_output=True, text=True)
    assert cp.returncode == 1
    assert "SyntaxError" in cp.stderr
