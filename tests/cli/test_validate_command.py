"""Tests for the validate and normalize CLI commands."""

import json

import pytest


@pytest.mark.cli
def test_validate_valid_document(run_cli, sample_schema_file):
    """A valid document exits 0 and prints a passing report."""
    result = run_cli("validate", sample_schema_file)
    assert result.returncode == 0
    assert "Schema validation passed" in result.stdout
    assert "COMPLEX_GRID_LAYOUT_DETECTED" in result.stdout


@pytest.mark.cli
def test_validate_reports_overlap(run_cli, tmp_path, sample_schema_dict):
    """Overlapping placements are reported as warnings and still exit 0."""
    sample_schema_dict["components"][2]["canvasLayout"]["x"] = 2
    path = tmp_path / "overlap.json"
    path.write_text(json.dumps(sample_schema_dict), encoding="utf-8")

    result = run_cli("validate", path, "--json")
    assert result.returncode == 0
    report = json.loads(result.stdout)
    assert report["valid"] is True
    assert "CANVAS_COMPONENTS_OVERLAP" in [w["code"] for w in report["warnings"]]
    assert "CANVAS_COMPONENTS_OVERLAP" not in [e["code"] for e in report["errors"]]


@pytest.mark.cli
def test_validate_rejects_malformed_document(run_cli, tmp_path):
    """Documents of the wrong shape are reported, not crashed on."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"components": "nope"}), encoding="utf-8")

    result = run_cli("validate", path)
    assert result.returncode == 1
    assert "schema_validation" in result.stderr
    assert "Traceback" not in result.stderr


@pytest.mark.cli
def test_validate_rejects_invalid_json(run_cli, tmp_path):
    """Unparseable files are reported as input errors."""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    result = run_cli("validate", path)
    assert result.returncode == 1
    assert "schema_validation: invalid JSON" in result.stderr


@pytest.mark.cli
def test_normalize_sorts_and_fills_layouts(run_cli, tmp_path, sample_schema_dict):
    """normalize sorts breakpoints and rebuilds a missing layout."""
    sample_schema_dict["breakpoints"].reverse()
    del sample_schema_dict["layouts"]["mobile"]
    source = tmp_path / "in.json"
    target = tmp_path / "out.json"
    source.write_text(json.dumps(sample_schema_dict), encoding="utf-8")

    result = run_cli("normalize", source, "-o", target)
    assert result.returncode == 0

    normalized = json.loads(target.read_text(encoding="utf-8"))
    assert [b["name"] for b in normalized["breakpoints"]] == ["mobile", "desktop"]
    assert normalized["layouts"]["mobile"] == {
        "structure": "vertical",
        "components": ["c1", "c3", "c4"],
    }


@pytest.mark.cli
def test_normalize_rejects_unknown_mode(run_cli, sample_schema_file):
    """Only known normalization modes are accepted."""
    result = run_cli("normalize", sample_schema_file, "--mode", "cascade")
    assert result.returncode != 0
    assert "invalid choice" in result.stderr


@pytest.mark.cli
def test_unknown_command(run_cli):
    """Unknown commands print help and exit 1."""
    result = run_cli("frobnicate")
    assert result.returncode == 1
    assert "Usage: python . {command}" in result.stdout
