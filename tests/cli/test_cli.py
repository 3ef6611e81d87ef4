"""Tests for the top-level CLI group and the main entry point."""

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from qtchooser.cli.cli import cli, main
from tests.fakes.process import FakeProcessOps
from tests.test_utils.registry_helpers import make_registry, write_descriptor


def test_help_groups_commands_and_lists_environment(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, ["-h"], obj=layout.context())

    assert result.exit_code == 0
    assert "Registry:" in result.output
    assert "Dispatch:" in result.output
    assert "Quick Access (Aliases):" in result.output
    assert "Environment variables:" in result.output
    assert "QTCHOOSER_NO_GLOBAL_DIR" in result.output


def test_unknown_command_is_usage_error(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, ["frobnicate"], obj=layout.context())

    assert result.exit_code == 2


def test_main_command_mode(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    layout = make_registry(tmp_path)
    write_descriptor(layout.user_dir, "6", "/qt6/bin", "/qt6/lib")

    with patch("qtchooser.cli.cli.create_context", return_value=layout.context()):
        with pytest.raises(SystemExit) as exc_info:
            main(["qtchooser", "list-versions"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.splitlines() == ["6"]


def test_main_wrapper_mode(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    write_descriptor(layout.user_dir, "default", "/qt6/bin", "/qt6/lib")
    process = FakeProcessOps()
    ctx = layout.context(process=process, program="lupdate")

    with patch("qtchooser.cli.cli.create_context", return_value=ctx):
        with pytest.raises(SystemExit) as exc_info:
            main(["/usr/bin/lupdate", "app.pro"])

    assert exc_info.value.code == 0
    assert process.exec_calls == [("/qt6/bin/lupdate", ["/qt6/bin/lupdate", "app.pro"])]


def test_main_legacy_run_tool_form(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    write_descriptor(layout.user_dir, "5", "/qt5/bin", "/qt5/lib")
    process = FakeProcessOps()

    with patch("qtchooser.cli.cli.create_context", return_value=layout.context(process=process)):
        with pytest.raises(SystemExit):
            main(["qtchooser", "-qt=5", "-run-tool=moc", "in.h"])

    assert process.exec_calls == [("/qt5/bin/moc", ["/qt5/bin/moc", "in.h"])]
