import pytest

from treegrep.cli import USAGE, main, parse_options
from treegrep.search import Options


def test_parse_options_defaults():
    assert parse_options(["dir", "query"]) == Options()


def test_parse_options_all_flags():
    options = parse_options(["dir", "query", "-v", "-m", r"\.txt$", "-di"])
    assert options == Options(ignore_binaries=False, verbose_mode=True, file_mask=r"\.txt$")


def test_parse_options_mask_without_value():
    assert parse_options(["dir", "query", "-m"]).file_mask == ""


@pytest.mark.parametrize("argv", [[], ["only-dir"]])
def test_main_requires_two_arguments(argv, capsys):
    assert main(argv) == 1
    assert USAGE in capsys.readouterr().err


def test_main_rejects_non_directory(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert main([str(missing), "foo"]) == 1
    assert "is not a directory" in capsys.readouterr().err


def test_main_searches_directory(tmp_path, capsys):
    (tmp_path / "notes.txt").write_text("alpha\nbeta needle\n")
    assert main([str(tmp_path), "needle"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith(f"2:{tmp_path / 'notes.txt'}:beta ")


def test_main_help_still_searches(tmp_path, capsys):
    (tmp_path / "notes.txt").write_text("needle\n")
    assert main([str(tmp_path), "needle", "-h"]) == 0
    out = capsys.readouterr().out
    assert "Options:" in out
    assert "notes.txt" in out


def test_main_invalid_query(tmp_path, capsys):
    assert main([str(tmp_path), "("]) == 1
    assert "invalid search query" in capsys.readouterr().err