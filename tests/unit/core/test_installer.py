"""Tests for SDK registration."""

import os
from pathlib import Path

import pytest

from qtchooser.core.errors import (
    InstallError,
    InstallWriteError,
    QueryHelperError,
    SdkAlreadyExistsError,
)
from qtchooser.core.installer import InstallOptions, install_candidates, install_sdk
from qtchooser.core.selection import select_sdk
from tests.fakes.qmake import FakeQtQuery
from tests.test_utils.registry_helpers import make_registry, write_descriptor

QMAKE5 = "/opt/qt5/bin/qmake"
QMAKE6 = "/opt/qt6/bin/qmake"


def fake_qmake() -> FakeQtQuery:
    return FakeQtQuery(
        answers={
            QMAKE5: {"QT_INSTALL_BINS": "/opt/qt5/bin", "QT_INSTALL_LIBS": "/opt/qt5/lib"},
            QMAKE6: {"QT_INSTALL_BINS": "/opt/qt6/bin", "QT_INSTALL_LIBS": "/opt/qt6/lib"},
        }
    )


def test_install_then_select_returns_helper_paths(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    ctx = layout.context(qmake=fake_qmake())

    install_sdk(ctx, "x", QMAKE5)
    sdk = select_sdk(ctx, "x")

    assert sdk.tools_dir == "/opt/qt5/bin"
    assert sdk.libraries_dir == "/opt/qt5/lib"


def test_install_lands_in_most_general_directory(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    ctx = layout.context(qmake=fake_qmake())

    descriptor = install_sdk(ctx, "5", QMAKE5)

    assert descriptor == layout.system_dirs[-1] / "5.conf"


def test_local_install_lands_in_user_directory(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    ctx = layout.context(qmake=fake_qmake())

    descriptor = install_sdk(ctx, "5", QMAKE5, InstallOptions(local_only=True))

    assert descriptor == layout.user_dir / "5.conf"


def test_install_creates_missing_parents_with_exact_contents(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    ctx = layout.context(qmake=fake_qmake())
    assert not layout.system_dirs[-1].parent.exists()

    descriptor = install_sdk(ctx, "5", QMAKE5)

    assert descriptor.read_bytes() == b"/opt/qt5/bin\n/opt/qt5/lib\n"


def test_install_leaves_no_temporary_files(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    ctx = layout.context(qmake=fake_qmake())

    descriptor = install_sdk(ctx, "5", QMAKE5)

    assert sorted(p.name for p in descriptor.parent.iterdir()) == ["5.conf"]


def test_second_install_without_force_fails(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    ctx = layout.context(qmake=fake_qmake())
    install_sdk(ctx, "x", QMAKE5)

    with pytest.raises(SdkAlreadyExistsError, match='SDK "x" already exists'):
        install_sdk(ctx, "x", QMAKE6)


def test_existing_sdk_is_checked_before_running_qmake(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    write_descriptor(layout.user_dir, "x", "/old/bin", "/old/lib")
    qmake = fake_qmake()

    with pytest.raises(SdkAlreadyExistsError):
        install_sdk(layout.context(qmake=qmake), "x", QMAKE5)

    assert qmake.queries == []


def test_forced_install_replaces_content(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    ctx = layout.context(qmake=fake_qmake())
    install_sdk(ctx, "x", QMAKE5)

    install_sdk(ctx, "x", QMAKE6, InstallOptions(force_overwrite=True))
    sdk = select_sdk(ctx, "x")

    assert sdk.tools_dir == "/opt/qt6/bin"
    assert sdk.libraries_dir == "/opt/qt6/lib"


def test_empty_name_registers_default(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    ctx = layout.context(qmake=fake_qmake())

    descriptor = install_sdk(ctx, "", QMAKE5)

    assert descriptor.name == "default.conf"
    assert select_sdk(ctx, "").tools_dir == "/opt/qt5/bin"


def test_missing_qmake_path_fails(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)

    with pytest.raises(InstallError, match="missing option: path to qmake"):
        install_sdk(layout.context(qmake=fake_qmake()), "5", "")


def test_qmake_failure_is_reported(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)

    with pytest.raises(QueryHelperError, match="error running /nowhere/qmake"):
        install_sdk(layout.context(qmake=fake_qmake()), "5", "/nowhere/qmake")


def test_qmake_queries_bins_then_libs(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    qmake = fake_qmake()

    install_sdk(layout.context(qmake=qmake), "5", QMAKE5)

    assert qmake.queries == [(QMAKE5, "QT_INSTALL_BINS"), (QMAKE5, "QT_INSTALL_LIBS")]


@pytest.mark.skipif(
    os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced",
)
def test_unwritable_directory_falls_back_to_more_specific(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    locked = layout.system_dirs[-1]
    locked.mkdir(parents=True)
    locked.chmod(0o555)
    ctx = layout.context(qmake=fake_qmake())

    try:
        descriptor = install_sdk(ctx, "5", QMAKE5)
    finally:
        locked.chmod(0o755)

    assert descriptor == layout.system_dirs[0] / "5.conf"


@pytest.mark.skipif(
    os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced",
)
def test_no_writable_directory_fails_with_last_path(tmp_path: Path) -> None:
    layout = make_registry(tmp_path)
    layout.user_dir.mkdir(parents=True)
    layout.user_dir.chmod(0o555)
    ctx = layout.context(qmake=fake_qmake())

    try:
        with pytest.raises(InstallWriteError) as exc_info:
            install_sdk(ctx, "5", QMAKE5, InstallOptions(local_only=True))
    finally:
        layout.user_dir.chmod(0o755)

    assert str(layout.user_dir / "5.conf") in str(exc_info.value)
    assert "could not create SDK" in str(exc_info.value)


def test_install_candidates_order() -> None:
    paths = (Path("/user"), Path("/a"), Path("/b"))

    assert install_candidates(paths, local_only=False) == [Path("/b"), Path("/a"), Path("/user")]
    assert install_candidates(paths, local_only=True) == [Path("/user")]
    assert install_candidates((), local_only=True) == []
