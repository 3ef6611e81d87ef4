"""Tests for the list-versions command."""

import json
from pathlib import Path

from click.testing import CliRunner

from qtchooser.cli.cli import cli
from tests.test_utils.registry_helpers import make_registry, write_descriptor


def test_list_versions_empty_registry_prints_nothing(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, ["list-versions"], obj=layout.context())

    assert result.exit_code == 0
    assert result.stdout == ""


def test_list_versions_sorted_and_deduplicated(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    write_descriptor(layout.user_dir, "59", "/qt59/bin", "/qt59/lib")
    write_descriptor(layout.user_dir, "default", "/qt510/bin", "/qt510/lib")
    write_descriptor(layout.system_dirs[0], "510", "/qt510/bin", "/qt510/lib")
    write_descriptor(layout.system_dirs[1], "59", "/other/bin", "/other/lib")

    runner = CliRunner()
    result = runner.invoke(cli, ["list-versions"], obj=layout.context())

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["510", "59", "default"]


def test_list_versions_alias(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    write_descriptor(layout.user_dir, "6", "/qt6/bin", "/qt6/lib")

    runner = CliRunner()
    result = runner.invoke(cli, ["l"], obj=layout.context())

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["6"]


def test_list_versions_ignores_other_files(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    write_descriptor(layout.user_dir, "6", "/qt6/bin", "/qt6/lib")
    (layout.user_dir / "notes.txt").write_text("not a descriptor\n", encoding="utf-8")
    (layout.user_dir / "nested.conf").mkdir()

    runner = CliRunner()
    result = runner.invoke(cli, ["list-versions"], obj=layout.context())

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["6"]


def test_list_versions_json(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    write_descriptor(layout.user_dir, "6", "/qt6/bin", "/qt6/lib")
    write_descriptor(layout.system_dirs[0], "5", "/qt5/bin", "/qt5/lib")

    runner = CliRunner()
    result = runner.invoke(cli, ["list-versions", "--json"], obj=layout.context())

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"versions": ["5", "6"]}
