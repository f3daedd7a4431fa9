"""Tests for .envloader.toml config loading."""

from __future__ import annotations

import os

import pytest

from envloader.config import EnvLoaderConfig, find_config_file, load_config


def test_load_config_invalid_toml_syntax(tmp_path):
    """Invalid TOML syntax in project file raises when loading config."""
    toml = tmp_path / ".envloader.toml"
    toml.write_text("[envloader\nfilename = \"x\"")  # unclosed bracket
    with pytest.raises(ValueError):  # TOMLDecodeError subclasses ValueError
        load_config(toml)


def test_load_config_from_file(tmp_path):
    toml = tmp_path / ".envloader.toml"
    toml.write_text("""\
[envloader]
folders = ["config", "/etc/app"]
filename = "app.env"
cache = true
endline = "<br />"
max_depth = 3
""")
    cfg = load_config(toml)
    assert cfg.folders == ["config", "/etc/app"]
    assert cfg.filename == "app.env"
    assert cfg.cache is True
    assert cfg.endline == "<br />"
    assert cfg.max_depth == 3
    assert cfg.config_path == toml


def test_load_config_single_folder_string(tmp_path):
    toml = tmp_path / ".envloader.toml"
    toml.write_text('[envloader]\nfolders = "config"\n')
    assert load_config(toml).folders == ["config"]


def test_load_config_defaults():
    cfg = load_config(path=None)
    assert cfg.folders == ["."]
    assert cfg.filename == ".env"
    assert cfg.cache is False
    assert cfg.endline == os.linesep
    assert cfg.max_depth == 5
    assert cfg.config_path is None


def test_resolved_folders_relative_to_config_file(tmp_path):
    cfg = EnvLoaderConfig(folders=["config", str(tmp_path / "abs")], config_path=tmp_path / ".envloader.toml")
    assert cfg.resolved_folders() == [tmp_path / "config", tmp_path / "abs"]


def test_find_config_file_walks_upward(tmp_path):
    toml = tmp_path / ".envloader.toml"
    toml.write_text("[envloader]\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_config_file(nested) == toml.resolve()


def test_env_vars_override_config(tmp_path, monkeypatch):
    toml = tmp_path / ".envloader.toml"
    toml.write_text('[envloader]\nfolders = ["config"]\nfilename = "app.env"\n')
    monkeypatch.setenv("ENVLOADER_FOLDERS", os.pathsep.join([str(tmp_path / "x"), str(tmp_path / "y")]))
    monkeypatch.setenv("ENVLOADER_FILENAME", "other.env")
    cfg = load_config(toml)
    assert cfg.folders == [str(tmp_path / "x"), str(tmp_path / "y")]
    assert cfg.filename == "other.env"

    cfg = load_config(toml, use_env=False)
    assert cfg.folders == ["config"]
    assert cfg.filename == "app.env"
