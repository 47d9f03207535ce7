"""CLI wiring tests for the logkeep Typer apps."""

import json
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from logkeep.cli import main
from logkeep.cli._create_app import _create_app
from logkeep.cli.backup import backup
from logkeep.cli.log import log

runner = CliRunner()


def test_help_without_subcommand():
    result = runner.invoke(_create_app(), [])
    assert result.exit_code == 0
    for name in ("config", "log", "maintenance", "backup"):
        assert name in result.output


def test_invalid_display_format(configured_home):
    result = runner.invoke(_create_app(), ["--display", "xml", "config", "show"])
    assert result.exit_code == 1


def test_config_init_then_show(logkeep_home, tmp_path):
    app = _create_app()
    init = runner.invoke(app, ["config", "init", "--base-dir", str(tmp_path / "data")])
    assert init.exit_code == 0, init.output
    assert (logkeep_home / "config.json").exists()

    show = runner.invoke(app, ["--display", "json", "config", "show"])
    assert show.exit_code == 0
    assert '"categories"' in show.output


def test_log_write_and_files(configured_home, tmp_path):
    app = _create_app()
    write = runner.invoke(app, ["log", "write", "Production", "from the cli", "--level", "ERROR"])
    assert write.exit_code == 0, write.output

    (path,) = (tmp_path / "Logs" / "Production").glob("*.csv")
    assert '"from the cli"' in path.read_text(encoding="utf-8")

    files = runner.invoke(app, ["log", "files", "Production"])
    assert files.exit_code == 0
    assert path.name in files.output


def test_log_read_missing_file_fails(tmp_path):
    result = runner.invoke(log(), ["read", str(tmp_path / "absent.csv")])
    assert result.exit_code == 1


def test_log_read_by_category(configured_home):
    app = _create_app()
    runner.invoke(app, ["log", "write", "Audit", "audited"])
    result = runner.invoke(app, ["--display", "json", "log", "read", "--category", "Audit"])
    assert result.exit_code == 0, result.output
    assert "audited" in result.output


def test_log_read_category_bad_date(configured_home):
    result = runner.invoke(log(), ["read", "-c", "Audit", "--date", "March"])
    assert result.exit_code == 1


def test_backup_due_flag(configured_home):
    result = runner.invoke(backup(), ["due", "Production", "--at", "2024-03-04T03:00"])
    assert result.exit_code == 0
    assert "due: false" in result.output


def test_maintenance_sweep(configured_home):
    result = runner.invoke(_create_app(), ["maintenance", "sweep"])
    assert result.exit_code == 0, result.output


def test_missing_config_exits_nonzero(logkeep_home):
    result = runner.invoke(_create_app(), ["backup", "run", "Audit"])
    assert result.exit_code == 1


def test_write_command_forwards_arguments():
    with patch("logkeep.cli.log._handle_stage_result") as mock_handle:
        mock_wrapped = MagicMock()
        mock_handle.return_value = mock_wrapped
        result = runner.invoke(log(), ["write", "Audit", "msg", "-l", "WARN"])
    assert result.exit_code == 0
    mock_wrapped.assert_called_once_with("Audit", "msg", level="WARN")


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("logkeep ")


def test_main_returns_exit_code(logkeep_home, capsys):
    assert main(["--display", "json", "config", "show"]) == 1
    output = json.loads(capsys.readouterr().out)
    assert output["errors"]


@pytest.mark.parametrize("group", ["config", "log", "maintenance", "backup"])
def test_group_help(group):
    result = runner.invoke(_create_app(), [group, "--help"])
    assert result.exit_code == 0
