"""
Tests for the click CLI.
"""
import json

import pytest
from click.testing import CliRunner

from docdirectory.cli import cli


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "doctors.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "a",
                    "slug": "dr-a",
                    "name": "Dr. A",
                    "specialty": "Cardiology",
                    "specialties": ["Cardiology"],
                    "location": {"city": "New York", "state": "NY"},
                    "conditions": ["arrhythmia"],
                    "bio": "Heart rhythm specialist.",
                },
                {
                    "id": "b",
                    "slug": "dr-b",
                    "name": "Dr. B",
                    "specialty": "Orthopedics",
                    "specialties": ["Orthopedics", "Sports Medicine"],
                    "location": {"city": "Los Angeles", "state": "CA"},
                    "conditions": ["ACL reconstruction"],
                },
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def runner():
    return CliRunner()


def test_search_text_output(runner, data_file):
    result = runner.invoke(cli, ["--data-path", str(data_file), "search", "acl"])
    assert result.exit_code == 0, result.output
    assert "Found 1 doctors for 'acl'" in result.output
    assert "Dr. B - Orthopedics (Los Angeles, CA)" in result.output


def test_search_multiple_keywords(runner, data_file):
    result = runner.invoke(
        cli, ["--data-path", str(data_file), "search", "dr", "sports", "--format", "json"]
    )
    assert result.exit_code == 0, result.output
    assert [d["id"] for d in json.loads(result.output)] == ["b"]


def test_search_with_filters(runner, data_file):
    result = runner.invoke(
        cli,
        ["--data-path", str(data_file), "search", "--state", "NY", "--format", "json"],
    )
    assert result.exit_code == 0, result.output
    assert [d["id"] for d in json.loads(result.output)] == ["a"]

    result = runner.invoke(
        cli,
        ["--data-path", str(data_file), "search", "-s", "Cardiology", "--state", "CA"],
    )
    assert "Found 0 doctors" in result.output


def test_facets(runner, data_file):
    result = runner.invoke(cli, ["--data-path", str(data_file), "facets", "--format", "json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "specialties": ["Cardiology", "Orthopedics", "Sports Medicine"],
        "states": ["CA", "NY"],
    }


def test_show_by_slug_and_id(runner, data_file):
    result = runner.invoke(cli, ["--data-path", str(data_file), "show", "dr-a"])
    assert result.exit_code == 0, result.output
    assert "Dr. A" in result.output
    assert "Heart rhythm specialist." in result.output

    result = runner.invoke(cli, ["--data-path", str(data_file), "show", "b", "--format", "json"])
    assert json.loads(result.output)["slug"] == "dr-b"


def test_show_missing_doctor_aborts(runner, data_file):
    result = runner.invoke(cli, ["--data-path", str(data_file), "show", "nobody"])
    assert result.exit_code != 0
    assert "Doctor not found" in result.output


def test_invalid_data_file_aborts(runner, tmp_path):
    path = tmp_path / "doctors.json"
    path.write_text("{broken", encoding="utf-8")
    result = runner.invoke(cli, ["--data-path", str(path), "search", "x"])
    assert result.exit_code != 0
    assert "Error loading directory" in result.output


def test_info(runner, data_file):
    result = runner.invoke(cli, ["--data-path", str(data_file), "info"])
    assert result.exit_code == 0, result.output
    assert "Doctors: 2" in result.output
    assert "States: 2" in result.output


@pytest.mark.parametrize("limit", ["0", "-1"])
def test_search_rejects_non_positive_limit(runner, data_file, limit):
    result = runner.invoke(
        cli, ["--data-path", str(data_file), "search", "dr", "--limit", limit]
    )
    assert result.exit_code == 2
    assert "--limit" in result.output


def test_search_limit_reports_remaining(runner, data_file):
    result = runner.invoke(cli, ["--data-path", str(data_file), "search", "dr", "--limit", "1"])
    assert result.exit_code == 0, result.output
    assert "Found 2 doctors" in result.output
    assert "... and 1 more" in result.output
