"""Tests for the cosmo CLI."""

import io
import json
import subprocess
import sys
from pathlib import Path

import pytest

from cosmo.__main__ import EXIT_INVALID, EXIT_OK, EXIT_USAGE, main

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def candidate_file(tmp_path):
    """Write a candidate to a temp file and return its path as a string."""

    def write(content) -> str:
        path = tmp_path / "candidate.json"
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return str(path)

    return write


# =============================================================================
# Schema commands
# =============================================================================


@pytest.mark.unit
def test_kinds_lists_every_component(capsys):
    """kinds should print one line per component kind."""
    assert main(["kinds"]) == EXIT_OK
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 16
    assert lines[0].startswith("hud_card")


@pytest.mark.unit
def test_schema_prints_constraints(capsys):
    """schema should print the constraints export as JSON."""
    assert main(["schema", "badge"]) == EXIT_OK
    exported = json.loads(capsys.readouterr().out)
    assert exported["kind"] == "context_badge"
    assert exported["fields"]["label"]["maxLength"] == 30


@pytest.mark.unit
def test_schema_prints_json_schema(capsys):
    """schema --json-schema should print the typed record's JSON Schema."""
    assert main(["schema", "HUDCard", "--json-schema"]) == EXIT_OK
    schema = json.loads(capsys.readouterr().out)
    assert "autoHideAfterSeconds" in schema["properties"]


@pytest.mark.unit
def test_unknown_kind_is_a_usage_error(capsys):
    """An unknown kind should exit with the usage code."""
    assert main(["schema", "hologram"]) == EXIT_USAGE


@pytest.mark.unit
def test_no_arguments_prints_help(capsys):
    """No arguments should print help and exit with the usage code."""
    assert main([]) == EXIT_USAGE
    assert "usage" in capsys.readouterr().out.lower()


@pytest.mark.unit
@pytest.mark.parametrize("command", ["validate", "sanitize", "correct"])
def test_invalid_id_strategy_is_a_usage_error(capsys, monkeypatch, candidate_file, command):
    """A bad COSMO_ID_STRATEGY should be logged, not raised."""
    monkeypatch.setenv("COSMO_ID_STRATEGY", "uuid")
    path = candidate_file({"label": "Live"})
    assert main([command, "badge", path]) == EXIT_USAGE
    assert capsys.readouterr().out == ""


@pytest.mark.unit
def test_unknown_command_is_a_usage_error(capsys):
    """argparse errors should not escape as SystemExit."""
    assert main(["frobnicate"]) == EXIT_USAGE


# =============================================================================
# Candidate commands
# =============================================================================


@pytest.mark.unit
def test_validate_valid_candidate(capsys, candidate_file):
    """validate should exit 0 for a valid candidate."""
    path = candidate_file({"id": "badge-1", "label": "Live"})
    assert main(["validate", "context_badge", path]) == EXIT_OK
    assert "No errors or warnings" in capsys.readouterr().out


@pytest.mark.unit
def test_validate_invalid_candidate(capsys, candidate_file):
    """validate should report errors with hints and exit 1."""
    path = candidate_file({"id": "badge-1", "label": "", "contextualColor": "red"})
    assert main(["validate", "context_badge", path]) == EXIT_INVALID
    out = capsys.readouterr().out
    assert "Errors:" in out
    assert "[label]" in out
    assert "Hints:" in out
    assert "Use a hex color like #ff5500 for contextualColor" in out


@pytest.mark.unit
def test_validate_json_output(capsys, candidate_file):
    """validate --json should print the full result."""
    path = candidate_file({"id": "r1", "value": 150})
    assert main(["validate", "progress_ring", path, "--json"]) == EXIT_OK
    result = json.loads(capsys.readouterr().out)
    assert result["valid"] is True
    assert result["warnings"][0]["field"] == "value"
    assert result["sanitized"]["value"] == 100


@pytest.mark.unit
def test_validate_reads_stdin(capsys, monkeypatch):
    """A - input should read the candidate from stdin."""
    monkeypatch.setattr(sys, "stdin", io.StringIO('{"id": "i1", "state": "idle"}'))
    assert main(["validate", "status_indicator", "-"]) == EXIT_OK


@pytest.mark.unit
def test_invalid_json_is_a_usage_error(capsys, candidate_file):
    """Malformed JSON should be an input error for validate."""
    path = candidate_file('{"id": "b1",')
    assert main(["validate", "context_badge", path]) == EXIT_USAGE


@pytest.mark.unit
def test_missing_file_is_a_usage_error(capsys, tmp_path):
    """A missing file should be an input error."""
    assert main(["sanitize", "badge", str(tmp_path / "nope.json")]) == EXIT_USAGE


@pytest.mark.unit
def test_sanitize_prints_wire_record(capsys, candidate_file):
    """sanitize should print the repaired camelCase record."""
    path = candidate_file({"id": "i1", "state": "loading", "size": 99})
    assert main(["sanitize", "status_indicator", path]) == EXIT_OK
    record = json.loads(capsys.readouterr().out)
    assert record["size"] == 32
    assert record["pulse"] is True


@pytest.mark.unit
def test_correct_repairs_fenced_response(capsys, candidate_file):
    """correct should accept fenced model output with trailing commas."""
    path = candidate_file('Here you go:\n```json\n{"id": "b1", "label": "Live",}\n```')
    assert main(["correct", "badge", path, "--json"]) == EXIT_OK
    outcome = json.loads(capsys.readouterr().out)
    assert outcome["state"] == "accepted"
    assert outcome["record"]["label"] == "Live"


@pytest.mark.unit
def test_correct_without_repair_rejects(capsys, candidate_file):
    """correct --no-repair should reject malformed output."""
    path = candidate_file('{"id": "b1", "label": "Live",}')
    assert main(["correct", "badge", path, "--no-repair"]) == EXIT_INVALID
    assert "rejected" in capsys.readouterr().out


@pytest.mark.unit
def test_correct_unsafe_record(capsys, candidate_file):
    """A corrected record still missing content should exit 1."""
    path = candidate_file({"label": ""})
    assert main(["correct", "badge", path]) == EXIT_INVALID
    out = capsys.readouterr().out
    assert "corrected" in out
    assert "Still invalid after correction:" in out


# =============================================================================
# Module entry point
# =============================================================================


def test_module_entry_point():
    """python -m cosmo kinds should run and exit cleanly."""
    result = subprocess.run(
        [sys.executable, "-m", "cosmo", "kinds"],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        timeout=60,
    )
    assert result.returncode == 0
    assert "context_badge" in result.stdout
