"""Test the identifier checking CLI."""
import pytest

import check_id_cli


@pytest.fixture(autouse=True)
def cli_log_level(monkeypatch):
    """Keep JSON log lines out of the CLI output."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


def test_no_arguments_prints_usage(capsys):
    exit_code = check_id_cli.main([])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "Usage:" in out


def test_reports_every_identifier(capsys):
    exit_code = check_id_cli.main(["8505155559", "1234567893", "AB123456CD"])

    lines = capsys.readouterr().out.strip().splitlines()
    assert exit_code == 0
    assert lines == [
        "[VALID] EGN '8505155559' is valid. Date of birth: 1985-05-15, sex: male.",
        "[VALID] LNCh '1234567893' is valid.",
        "[FOREIGN] 'AB123456CD' is treated as a foreign ID / passport number.",
    ]


def test_invalid_identifier_sets_exit_code(capsys):
    exit_code = check_id_cli.main(["8505155559", ""])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "[INVALID]" in out


def test_reads_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["check_id_cli.py", "1234567893"])

    assert check_id_cli.main() == 0
    assert "[VALID] LNCh" in capsys.readouterr().out


def test_whitespace_argument_is_foreign(capsys):
    exit_code = check_id_cli.main(["   "])

    assert exit_code == 0
    assert capsys.readouterr().out.startswith("[FOREIGN]")


def test_unknown_log_level_exits_cleanly(monkeypatch, capsys):
    """A bad LOG_LEVEL is reported, not raised, and nothing is checked."""
    monkeypatch.setenv("LOG_LEVEL", "CHATTY")

    exit_code = check_id_cli.main(["8505155559"])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "Unknown log level: 'CHATTY'" in out
    assert "[VALID]" not in out
