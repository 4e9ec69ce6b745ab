"""Tests for configuration loading and defaults."""

from __future__ import annotations

import tomllib
from collections.abc import Iterator
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from vimtab.config.config import EDITOR_DEFAULT, SERVER_NAME_DEFAULT, Config


@pytest.fixture
def fresh_config() -> Iterator[None]:
    """Reset the configuration singleton around a test."""

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield None
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]


def test_missing_file_writes_defaults(tmp_path: Path, fresh_config: None) -> None:
    target = tmp_path / "nested" / "config.toml"

    loaded = Config.load(target)

    assert loaded.editor == EDITOR_DEFAULT
    assert loaded.server_name == SERVER_NAME_DEFAULT
    assert loaded.log_file is None
    content = target.read_text(encoding="utf-8")
    assert 'editor = "gvim"' in content
    assert 'server_name = "GVIM"' in content


def test_existing_file_is_read(tmp_path: Path, fresh_config: None) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text(
        'editor = "gvim.exe"\nserver_name = "EDIT"\nlog_file = "/tmp/v.log"\n',
        encoding="utf-8",
    )

    loaded = Config.load(target)

    assert loaded.editor == "gvim.exe"
    assert loaded.server_name == "EDIT"
    assert loaded.log_file == Path("/tmp/v.log")


def test_unknown_keys_are_ignored(tmp_path: Path, fresh_config: None) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text('editor = "gvim"\nmax_files = 9000\n', encoding="utf-8")

    loaded = Config.load(target)

    assert not hasattr(loaded, "max_files")


def test_blank_log_file_means_unset(tmp_path: Path, fresh_config: None) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text('log_file = ""\n', encoding="utf-8")

    assert Config.load(target).log_file is None


def test_malformed_file_raises(tmp_path: Path, fresh_config: None) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text("editor = \n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load(target)


def test_load_is_cached(tmp_path: Path, fresh_config: None) -> None:
    target = tmp_path / "config.toml"

    first = Config.load(target)

    assert Config.load(target) is first


def test_save_round_trips_paths(tmp_path: Path) -> None:
    target = tmp_path / "saved.toml"

    Config(editor="gvim", log_file=tmp_path / "x.log").save(target)

    assert f'log_file = "{tmp_path / "x.log"}"' in target.read_text(encoding="utf-8")


def test_missing_file_is_created_through_save(
    tmp_path: Path, fresh_config: None, mocker: MockerFixture
) -> None:
    target = tmp_path / "config.toml"
    save = mocker.spy(Config, "save")

    loaded = Config.load(target)

    save.assert_called_once_with(loaded, target)


def test_unwritable_default_file_still_loads(
    tmp_path: Path, fresh_config: None, mocker: MockerFixture
) -> None:
    target = tmp_path / "config.toml"
    _ = mocker.patch(
        "vimtab.config.config.write_text_file", side_effect=PermissionError("read-only")
    )

    loaded = Config.load(target)

    assert loaded.editor == EDITOR_DEFAULT
    assert not target.exists()
