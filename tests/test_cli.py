"""Tests for the command line interface."""

import json
import logging
import os
import subprocess
import sys
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]

import pytest

from coverage_import.cli import main

# Get the project root directory
PROJECT_ROOT = Path(__file__).parent.parent

SECTOR_FILE = """\
[POSITIONS]
EDDM_GND:München Ground:121.980:MG:G:EDDM:GND:-:-:0001:0777
EDMM_CTR:München Radar:129.100:MR:R:EDMM:CTR:-:-:0001:0777
LFPG_TWR:De Gaulle Tower:119.250:PT:T:LFPG:TWR:-:-:0001:0777
EDDM_BAD:Broken
"""

VATGLASSES = {
    "airspace": [
        {"id": "EDMM_ZUG", "group": "CTR", "owner": ["EDMM_CTR"]},
        {"id": "EDMM_ALB", "group": "CTR", "owner": ["EDMM_CTR"]},
    ],
    "positions": {
        "EDMM_CTR": {"pre": ["EDMM"], "type": "CTR", "frequency": "129.100"},
        "EDDM_TWR": {"pre": ["EDDM"], "type": "TWR"},
    },
}


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run every test from an empty directory so no .env file is picked up."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sector_file(tmp_path: Path) -> Path:
    """Write a sample sector file."""
    path = tmp_path / "sample.ese"
    path.write_bytes(SECTOR_FILE.encode("cp1252"))
    return path


@pytest.fixture
def vatglasses_file(tmp_path: Path) -> Path:
    """Write a sample VATglasses export."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps(VATGLASSES), encoding="utf-8")
    return path


def _load(path: Path) -> dict:
    with open(path, "rb") as f:
        return tomllib.load(f)


def test_euroscope_command_writes_positions(sector_file: Path, tmp_path: Path) -> None:
    """Given a sector file, when running euroscope, then a sorted positions file is written."""
    output = tmp_path / "out"

    exit_code = main(["euroscope", str(sector_file), str(output)])

    assert exit_code == 0
    data = _load(output / "positions.toml")
    assert [p["id"] for p in data["positions"]] == ["EDMM_CTR", "LFPG_TWR", "EDDM_GND"]
    assert not (output / "stations.toml").exists()


def test_euroscope_command_applies_prefixes(sector_file: Path, tmp_path: Path) -> None:
    """Given prefix filters, when running euroscope, then only matching positions are written."""
    output = tmp_path / "out"

    exit_code = main(["euroscope", str(sector_file), str(output), "--prefix", "ED"])

    assert exit_code == 0
    data = _load(output / "positions.toml")
    assert [p["id"] for p in data["positions"]] == ["EDMM_CTR", "EDDM_GND"]


def test_vatglasses_command_writes_both_files(vatglasses_file: Path, tmp_path: Path) -> None:
    """Given a VATglasses export, when running vatglasses, then both files are written."""
    output = tmp_path / "out"

    exit_code = main(["vatglasses", str(vatglasses_file), str(output)])

    assert exit_code == 0
    stations = _load(output / "stations.toml")
    positions = _load(output / "positions.toml")
    assert [s["id"] for s in stations["stations"]] == ["EDMM_ALB", "EDMM_ZUG"]
    assert positions["positions"][1] == {
        "id": "EDDM_TWR",
        "facility_type": "TWR",
        "frequency": "199.998",
        "prefixes": ["EDDM"],
    }


def test_existing_output_without_overwrite_fails(
    vatglasses_file: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Given existing output, when running without overwrite, then the run fails with status 1."""
    output = tmp_path / "out"
    output.mkdir()
    (output / "positions.toml").write_text("positions = []\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        exit_code = main(["vatglasses", str(vatglasses_file), str(output)])

    assert exit_code == 1
    assert not (output / "stations.toml").exists()
    assert any("already exists" in record.getMessage() for record in caplog.records)


def test_merge_adds_new_stations(vatglasses_file: Path, tmp_path: Path) -> None:
    """Given an existing stations file, when merging, then new stations are appended."""
    output = tmp_path / "out"
    output.mkdir()
    (output / "stations.toml").write_text(
        '[[stations]]\nid = "EDMM_ALB"\ncontrolled_by = ["EDMM_ALB_CTR"]\n', encoding="utf-8"
    )

    exit_code = main(["vatglasses", str(vatglasses_file), str(output), "--merge"])

    assert exit_code == 0
    stations = _load(output / "stations.toml")["stations"]
    assert stations == [
        {"id": "EDMM_ALB", "controlled_by": ["EDMM_ALB_CTR"]},
        {"id": "EDMM_ZUG", "controlled_by": ["EDMM_CTR"]},
    ]


def test_document_missing_positions_writes_nothing(tmp_path: Path) -> None:
    """Given a document without positions, when running vatglasses, then no file is written."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"airspace": []}), encoding="utf-8")
    output = tmp_path / "out"

    exit_code = main(["vatglasses", str(path), str(output)])

    assert exit_code == 1
    assert list(output.iterdir()) == []


def test_missing_input_fails(tmp_path: Path) -> None:
    """Given a missing input file, when running, then the run fails without creating output."""
    output = tmp_path / "out"

    exit_code = main(["euroscope", str(tmp_path / "missing.ese"), str(output)])

    assert exit_code == 1
    assert not output.exists()


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no command, when running, then help is printed and status is 1."""
    exit_code = main([])

    assert exit_code == 1
    assert "usage:" in capsys.readouterr().out


def _run_cli_command(command: list[str], timeout: int = 60) -> tuple[str, str, int]:
    """Run the CLI module in a subprocess and return stdout, stderr, and exit code."""
    result = subprocess.run(
        [sys.executable, "-m", "coverage_import.cli", *command],
        cwd=PROJECT_ROOT,
        env={**os.environ, "PYTHONPATH": str(PROJECT_ROOT / "src")},
        capture_output=True,
        text=True,
        timeout=timeout,
    )
    return result.stdout, result.stderr, result.returncode


def test_module_entry_point_exit_status(sector_file: Path, tmp_path: Path) -> None:
    """Given the module run as a script, when importing twice, then the second run fails."""
    command = ["euroscope", str(sector_file), str(tmp_path / "out")]

    _, first_stderr, first_code = _run_cli_command(command)
    _, second_stderr, second_code = _run_cli_command(command)

    assert first_code == 0, first_stderr
    assert second_code == 1
    assert "already exists" in second_stderr


def test_merge_with_unencodable_id_keeps_existing_files(tmp_path: Path) -> None:
    """Given an id that cannot be written as UTF-8, when merging, then no file is changed."""
    document = {
        "airspace": [{"id": "EDMM_ALB", "group": "CTR", "owner": ["A\ud800"]}],
        "positions": {"A\ud800": {"pre": ["A"], "type": "TWR"}},
    }
    path = tmp_path / "data.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    output = tmp_path / "out"
    output.mkdir()
    existing = '[[positions]]\nid = "OLD"\nfacility_type = "TWR"\n'
    (output / "positions.toml").write_text(existing, encoding="utf-8")

    exit_code = main(["vatglasses", str(path), str(output), "--merge"])

    assert exit_code == 1
    assert (output / "positions.toml").read_text(encoding="utf-8") == existing
    assert not (output / "stations.toml").exists()


def test_invalid_environment_fails_with_status(
    monkeypatch: pytest.MonkeyPatch,
    sector_file: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Given an invalid setting in the environment, when running, then status is 1."""
    monkeypatch.setenv("SECTOR_FILE_ENCODING", "no-such-codec")

    exit_code = main(["euroscope", str(sector_file), str(tmp_path / "out")])

    assert exit_code == 1
    assert "invalid configuration" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_unexpected_error_fails_with_status(
    monkeypatch: pytest.MonkeyPatch,
    sector_file: Path,
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Given an unexpected exception, when running, then it is logged and status is 1."""

    def _explode(self: object) -> None:
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(
        "coverage_import.adapters.euroscope.EuroscopeSectorFileParser.parse_positions", _explode
    )

    with caplog.at_level(logging.ERROR):
        exit_code = main(["euroscope", str(sector_file), str(tmp_path / "out")])

    assert exit_code == 1
    assert any("disk on fire" in record.getMessage() for record in caplog.records)
