"""
Tests for the structure_resume command-line script.
"""
import json
import os
import subprocess
import sys
from pathlib import Path

SCRIPT = Path(__file__).parent.parent / "scripts" / "structure_resume.py"


def _run(*args, stdin=None):
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8",
        env={**os.environ, "PYTHONIOENCODING": "utf-8"},
    )


def test_file_argument_prints_json(tmp_path):
    resume = tmp_path / "resume.txt"
    resume.write_text("Jane Doe\nEXPERIENCE\nAcme | Engineer\n", encoding="utf-8")

    result = _run(str(resume))

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["name"] == "Jane Doe"
    assert data["experience"][0]["company"] == "Acme"


def test_stdin_input(sample_resume_text):
    result = _run(stdin=sample_resume_text)

    assert result.returncode == 0
    assert json.loads(result.stdout)["email"] == "jane.doe@example.com"


def test_unreadable_file_fails_without_stdout(tmp_path):
    result = _run(str(tmp_path / "missing.txt"))

    assert result.returncode == 1
    assert result.stdout == ""
    assert "Could not read" in result.stderr
