import json
import subprocess
from types import SimpleNamespace
from unittest.mock import patch

from raidcalc import version


@patch("raidcalc.version.subprocess.run")
def test_get_version_info(mock_run):
    mock_run.side_effect = [
        SimpleNamespace(stdout="abc1234\n"),
        SimpleNamespace(stdout="2 days ago\n"),
    ]

    assert version.get_version_info() == {"commit": "abc1234", "date": "2 days ago"}
    mock_run.assert_any_call(
        ["git", "log", "-1", "--format=%cd", "--date=relative"],
        capture_output=True, text=True, check=True,
    )


@patch("raidcalc.version.subprocess.run")
def test_get_version_info_without_git(mock_run):
    mock_run.side_effect = FileNotFoundError("git")

    assert version.get_version_info() == {"commit": "unknown", "date": "unknown"}


@patch("raidcalc.version.subprocess.run")
def test_get_version_falls_back_to_test(mock_run):
    mock_run.side_effect = subprocess.CalledProcessError(128, "git")

    assert version.get_version() == "test"


def test_get_version_prefers_release_version(monkeypatch):
    monkeypatch.setattr(version, "__version__", "1.2.3")

    assert version.get_version() == "1.2.3"


@patch("raidcalc.version.subprocess.run")
def test_write_version_file(mock_run, tmp_path):
    mock_run.side_effect = [
        SimpleNamespace(stdout="abc1234\n"),
        SimpleNamespace(stdout="5 minutes ago\n"),
    ]
    path = tmp_path / "version.json"

    version.write_version_file(str(path))

    assert json.loads(path.read_text()) == {"commit": "abc1234", "date": "5 minutes ago"}
