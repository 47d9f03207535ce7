"""Unit tests for log cmd_write, cmd_files and cmd_read."""

import pytest

from logkeep.api.log.cmd_files import cmd_files
from logkeep.api.log.cmd_read import cmd_read
from logkeep.api.log.cmd_write import cmd_write
from logkeep.api.validate_output import validate_output
from tests.unit.conftest import category_config_dict, run_cmd, write_config

pytestmark = pytest.mark.log


def test_write_then_list_then_read(configured_home, tmp_path):
    result = run_cmd(cmd_write, "Production", 'hello, "world"', level="WARN")
    assert result.success, result.output
    assert result.output["written"] is True
    log_path = result.output["log_path"]
    assert log_path.startswith(str(tmp_path / "Logs" / "Production"))
    validate_output(cmd_write, result.output)

    listing = run_cmd(cmd_files, "Production")
    assert listing.success
    assert listing.output["status"] == "ok"
    assert [f["full_path"] for f in listing.output["files"]] == [log_path]
    validate_output(cmd_files, listing.output)

    read = run_cmd(cmd_read, log_path)
    assert read.success
    assert read.output["count"] == 1
    assert read.output["entries"][0]["message"] == 'hello, "world"'
    assert read.output["entries"][0]["level"] == "WARN"
    assert read.output["entries"][0]["source"] == "Production"
    validate_output(cmd_read, read.output)


def test_write_accepts_warning_alias(configured_home):
    result = run_cmd(cmd_write, "audit", "x", level="warning")
    assert result.success
    assert result.output["level"] == "WARN"
    assert result.output["category"] == "Audit"


def test_write_diagnostics_error_prefixed(configured_home):
    result = run_cmd(cmd_write, "Diagnostics", "bad thing", level="ERROR")
    read = run_cmd(cmd_read, result.output["log_path"])
    assert read.output["entries"][0]["message"].endswith(" : bad thing")
    assert read.output["entries"][0]["message"].startswith("[")


def test_write_unknown_level(configured_home):
    result = run_cmd(cmd_write, "Production", "x", level="TRACE")
    assert not result.success
    assert "Unknown log level" in result.output["errors"][0]


def test_write_unknown_category(configured_home):
    result = run_cmd(cmd_write, "Metrics", "x")
    assert not result.success
    assert result.output["written"] is False


def test_write_disabled_category_is_noop(logkeep_home, tmp_path):
    write_config(logkeep_home, {"categories": [category_config_dict(tmp_path, "Audit", enabled=False)]})
    result = run_cmd(cmd_write, "Audit", "x")
    assert result.success
    assert result.output["written"] is False
    assert result.output["log_path"] == ""
    assert not (tmp_path / "Logs" / "Audit").exists()


def test_write_without_config(logkeep_home):
    result = run_cmd(cmd_write, "Production", "x")
    assert not result.success
    assert result.output["errors"]


def test_files_missing_folder(configured_home):
    result = run_cmd(cmd_files, "Error")
    assert result.success
    assert result.output["status"] == "missing_folder"
    assert result.output["files"] == []
    assert result.output["warnings"]


def test_files_unconfigured(logkeep_home, tmp_path):
    write_config(logkeep_home, {"categories": [category_config_dict(tmp_path, "Audit")]})
    result = run_cmd(cmd_files, "Production")
    assert result.output["status"] == "missing_config"


def test_files_without_config(logkeep_home):
    result = run_cmd(cmd_files, "Production")
    assert not result.success
    assert result.output["status"] == "missing_config"


def test_read_missing_file(tmp_path):
    result = run_cmd(cmd_read, str(tmp_path / "nope.csv"))
    assert not result.success
    assert result.output["count"] == 0


def test_read_limit(configured_home):
    for i in range(3):
        path = run_cmd(cmd_write, "Audit", f"m{i}").output["log_path"]
    result = run_cmd(cmd_read, path, limit=2)
    assert result.output["count"] == 2


def test_read_by_category_today(configured_home):
    written = run_cmd(cmd_write, "Audit", "by category").output["log_path"]
    result = run_cmd(cmd_read, category="audit")
    assert result.success, result.output
    assert result.output["log_path"] == written
    assert [e["message"] for e in result.output["entries"]] == ["by category"]
    validate_output(cmd_read, result.output)


def test_read_by_category_and_date(configured_home, tmp_path):
    folder = tmp_path / "Logs" / "Error"
    folder.mkdir(parents=True)
    (folder / "Error_20240304.csv").write_text(
        'Timestamp,Level,Message,Source\n2024-03-04 10:00:00:000,ERROR,"boom",Error\n', encoding="utf-8"
    )
    result = run_cmd(cmd_read, category="Error", date="20240304")
    assert result.success
    assert result.output["count"] == 1
    assert result.output["entries"][0]["level"] == "ERROR"


def test_read_by_category_no_file_for_date(configured_home):
    result = run_cmd(cmd_read, category="Production", date="19990101")
    assert result.success
    assert result.output["count"] == 0
    assert result.output["warnings"]


def test_read_by_category_disabled(logkeep_home, tmp_path):
    write_config(logkeep_home, {"categories": [category_config_dict(tmp_path, "Audit", enabled=False)]})
    result = run_cmd(cmd_read, category="Audit")
    assert result.success
    assert result.output["log_path"] == ""
    assert result.output["entries"] == []


def test_read_by_category_bad_date(configured_home):
    result = run_cmd(cmd_read, category="Audit", date="2024-03-04")
    assert not result.success
    assert "YYYYMMDD" in result.output["errors"][0]


def test_read_by_category_without_config(logkeep_home):
    result = run_cmd(cmd_read, category="Audit")
    assert not result.success


def test_read_needs_path_or_category():
    result = run_cmd(cmd_read)
    assert not result.success
    assert result.output["errors"]
