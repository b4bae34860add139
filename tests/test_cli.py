from typer.testing import CliRunner

from boojo.terminal.app import app
from boojo.view import state as view_state

runner = CliRunner()

LEDGER = """x 2024-01-02 2024-01-01 (A) Buy milk +home @shop
. (B) Call dentist due:2030-01-01 rec:+2w @phone
- Remember the +home insurance
. (C) Write report +work ph:2.5
"""


def test_ls_lists_daily_log(data_dir):
    (data_dir / "daily.txt").write_text(LEDGER)

    result = runner.invoke(app, ["--no-header", "ls"])

    assert result.exit_code == 0
    assert "Call dentist @phone" in result.output
    assert "Buy milk" not in result.output
    assert "daily log | 4/4 parsed line(s)" in result.output
    assert "ph 2.50" in result.output


def test_ls_alias_with_all_and_keywords(data_dir):
    (data_dir / "daily.txt").write_text(LEDGER)

    result = runner.invoke(app, ["--no-header", "l", "-a", "home"])

    assert result.exit_code == 0
    assert "Buy milk" in result.output
    assert "Write report" not in result.output
    assert '1 filter(s): "home"' in result.output


def test_ls_meta(data_dir):
    (data_dir / "daily.txt").write_text(LEDGER)

    result = runner.invoke(app, ["--no-header", "ls", "--meta", "report"])

    assert result.exit_code == 0
    assert "ph:2.50" in result.output


def test_ls_other_log(data_dir):
    (data_dir / "future.txt").write_text(". Learn to sail\n")

    result = runner.invoke(app, ["--no-header", "ls", "--log", "future"])

    assert result.exit_code == 0
    assert "Learn to sail" in result.output
    assert "future log | 1/1 parsed line(s)" in result.output


def test_ls_default_log_from_configuration(data_dir):
    config_path = data_dir.parent / "config" / "config.yaml"
    config_path.write_text("data_path: null\ndefault_log: monthly\nshow_header: true\n")
    (data_dir / "monthly.txt").write_text("- Monthly goals\n")

    result = runner.invoke(app, ["--no-header", "ls"])

    assert result.exit_code == 0
    assert "Monthly goals" in result.output
    assert "monthly log" in result.output


def test_ls_unknown_log(data_dir):
    result = runner.invoke(app, ["ls", "--log", "weekly"])

    assert result.exit_code == 2


def test_ls_missing_file(data_dir):
    result = runner.invoke(app, ["ls", "--log", "daily"])

    assert result.exit_code == 1
    assert "Error reading file" in result.output


def test_ls_header(data_dir):
    (data_dir / "daily.txt").write_text(LEDGER)
    view_state.set_show_header(True)

    result = runner.invoke(app, ["ls"])

    assert result.exit_code == 0
    assert "boojo" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "boojo 0.1.0" in result.output


def test_config_set_and_view(data_dir):
    result = runner.invoke(app, ["config", "set", "--default-log", "future"])

    assert result.exit_code == 0
    config_path = data_dir.parent / "config" / "config.yaml"
    assert "default_log: future" in config_path.read_text()

    result = runner.invoke(app, ["c", "v"])

    assert result.exit_code == 0
    assert "future" in result.output


def test_config_set_rejects_unknown_log(data_dir):
    result = runner.invoke(app, ["config", "set", "--default-log", "weekly"])

    assert result.exit_code == 2


def test_ls_latin1_log(data_dir):
    (data_dir / "daily.txt").write_bytes(b". caf\xe9 task @b\xfcro\n")

    result = runner.invoke(app, ["--no-header", "ls"])

    assert result.exit_code == 0
    assert "task" in result.output
    assert "daily log | 1/1 parsed line(s)" in result.output
