"""Tests for the grid, links and export-schema CLI commands."""

import json

import pytest


@pytest.mark.cli
def test_grid_json(run_cli, sample_schema_file):
    """grid --json reports positions and complexity for a breakpoint."""
    result = run_cli("grid", sample_schema_file, "-b", "desktop", "--json")
    assert result.returncode == 0

    data = json.loads(result.stdout)
    areas = {p["componentId"]: p["gridArea"] for p in data["layout"]["positions"]}
    assert areas["c1"] == "1 / 1 / 2 / 13"
    assert areas["c2"] == "2 / 1 / 8 / 4"
    assert data["complexity"]["recommendation"] == "grid"


@pytest.mark.cli
def test_grid_resize_check(run_cli, sample_schema_file):
    """--resize reports which components would be clipped."""
    result = run_cli(
        "grid", sample_schema_file, "-b", "desktop", "--resize", "6", "12", "--json"
    )
    assert result.returncode == 0
    resize = json.loads(result.stdout)["resize"]
    assert resize["safe"] is False
    assert resize["minimumRequired"] == {"rows": 8, "cols": 12}
    assert resize["affectedComponents"] == ["c2", "c3", "c4"]


@pytest.mark.cli
def test_grid_text_report(run_cli, sample_schema_file):
    """The text report lists grid areas and the recommendation."""
    result = run_cli("grid", sample_schema_file, "-b", "mobile")
    assert result.returncode == 0
    assert "Breakpoint: mobile (4x8)" in result.stdout
    assert "grid-area: 1 / 1 / 2 / 5" in result.stdout
    assert "Recommendation: flexbox" in result.stdout


@pytest.mark.cli
def test_grid_unknown_breakpoint(run_cli, sample_schema_file):
    """Unknown breakpoints are reported with the available names."""
    result = run_cli("grid", sample_schema_file, "-b", "watch")
    assert result.returncode == 1
    assert "available: mobile, desktop" in result.stderr


@pytest.mark.cli
def test_links_groups_and_validation(run_cli, tmp_path, sample_schema_file):
    """links computes groups and validates endpoints against a schema."""
    path = tmp_path / "links.json"
    path.write_text(
        json.dumps(
            {
                "links": [
                    {"source": "c1", "target": "c2"},
                    {"source": "c3", "target": "c2"},
                    {"source": "c4", "target": "c9"},
                ]
            }
        ),
        encoding="utf-8",
    )

    result = run_cli("links", path, "--schema", sample_schema_file, "-c", "c3")
    assert result.returncode == 1

    data = json.loads(result.stdout)
    assert data["groups"] == [["c1", "c2", "c3"], ["c4", "c9"]]
    assert data["group"] == ["c1", "c2", "c3"]
    assert data["valid"] is False
    assert data["errors"] == [
        '[ORPHAN_TARGET] Link 2: Target component "c9" does not exist'
    ]


@pytest.mark.cli
def test_links_strict_lookup(run_cli, tmp_path):
    """--strict reports unlinked components as not found."""
    path = tmp_path / "links.json"
    path.write_text(json.dumps([["c1", "c2"]]), encoding="utf-8")

    loose = json.loads(run_cli("links", path, "-c", "c7").stdout)
    strict = json.loads(run_cli("links", path, "-c", "c7", "--strict").stdout)
    assert loose["group"] == ["c7"]
    assert strict["group"] is None


@pytest.mark.cli
def test_export_schema(run_cli):
    """export-schema prints the JSON Schema with wire field names."""
    result = run_cli("export-schema")
    assert result.returncode == 0
    assert "schemaVersion" in json.loads(result.stdout)["properties"]
