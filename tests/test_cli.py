"""Tests for the command-line interface."""

import json
import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from projprops.cli import main


@pytest.fixture
def project_dir() -> Generator[Path, None, None]:
    """Create a temporary project with two library references."""
    with tempfile.TemporaryDirectory() as tmpdir:
        project = Path(tmpdir)
        (project / "project.properties").write_bytes(
            b"target=android-21\n"
            b"android.library.reference.1=../lib-a\n"
            b"android.library.reference.2=../lib-b"
        )
        yield project


def run_cli(*argv: str) -> int:
    with patch("sys.argv", ["projprops", *argv]):
        with pytest.raises(SystemExit) as excinfo:
            main()
    return excinfo.value.code


def test_list(project_dir: Path, capsys: pytest.CaptureFixture[str]):
    """Test listing references as N=value lines."""
    assert run_cli("--project", str(project_dir), "list") == 0

    assert capsys.readouterr().out == "1=../lib-a\n2=../lib-b\n"


def test_list_json(project_dir: Path, capsys: pytest.CaptureFixture[str]):
    """Test listing references as JSON."""
    assert run_cli("--project", str(project_dir), "list", "--json") == 0

    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"index": 1, "key": "android.library.reference.1", "value": "../lib-a"},
        {"index": 2, "key": "android.library.reference.2", "value": "../lib-b"},
    ]


def test_add_and_remove(project_dir: Path):
    """Test the add and remove subcommands update the file."""
    assert run_cli("--project", str(project_dir), "add", "../lib-c") == 0
    assert run_cli("--project", str(project_dir), "remove", "../lib-a") == 0

    content = (project_dir / "project.properties").read_text(encoding="utf-8")
    assert content == "\n".join(
        [
            "target=android-21",
            "android.library.reference.1=../lib-b",
            "android.library.reference.2=../lib-c",
        ]
    )


def test_remove_missing(project_dir: Path):
    """Test the missing-reference exit codes."""
    assert run_cli("--project", str(project_dir), "remove", "nope") == 1
    assert run_cli("--project", str(project_dir), "remove", "nope", "--missing-ok") == 0


def test_target(project_dir: Path, capsys: pytest.CaptureFixture[str]):
    """Test showing and setting the target."""
    assert run_cli("--project", str(project_dir), "target", "android-23") == 0
    assert run_cli("--project", str(project_dir), "target") == 0

    assert capsys.readouterr().out == "android-23\n"


def test_missing_project_file():
    """Test that a missing project.properties exits with an error."""
    with tempfile.TemporaryDirectory() as tmpdir:
        assert run_cli("--project", tmpdir, "list") == 1


def test_no_subcommand():
    """Test that running without a subcommand fails."""
    assert run_cli() == 1


@pytest.mark.parametrize(
    "argv",
    [
        ("list",),
        ("add", "../lib-c"),
        ("remove", "../lib-a"),
        ("target",),
    ],
)
def test_undecodable_project_file(argv: tuple[str, ...]):
    """Test that a project.properties that is not UTF-8 exits with an error."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "project.properties"
        path.write_bytes(b"target=\xff")

        assert run_cli("--project", tmpdir, *argv) == 1
        assert path.read_bytes() == b"target=\xff"
