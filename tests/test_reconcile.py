"""Tests for environment reconciliation (complete / override)."""

from __future__ import annotations

from conftest import write_env

from envloader import Environment, Source
from envloader.reconcile import complete, is_valid_key, override


def test_source_bits_are_independent():
    bits = [int(s) for s in Source]
    assert len(set(bits)) == 6
    assert all(b & (b - 1) == 0 for b in bits)


def test_complete_fills_only_empty_values(monkeypatch):
    monkeypatch.setenv("EMPTY", "from-env")
    monkeypatch.setenv("SET", "from-env")
    values = {"EMPTY": "", "SET": "file", "NULL": None}
    written = complete(values, Source.GETENV)
    assert written == 1
    assert values == {"EMPTY": "from-env", "SET": "file", "NULL": None}


def test_complete_coerces_text(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DEBUG", "TRUE")
    values = {"PORT": "", "DEBUG": ""}
    complete(values, Source.GETENV)
    assert values == {"PORT": 8080, "DEBUG": True}


def test_complete_does_not_substitute_variables():
    values = {"A": ""}
    complete(values, Source.ENV, environ={"A": "$HOME"})
    assert values == {"A": "$HOME"}


def test_override_replaces_existing_only():
    values = {"A": "file", "B": 1}
    written = override(values, Source.ENV, environ={"A": "1.5", "OTHER": "x"})
    assert written == 1
    assert values == {"A": 1.5, "B": 1}


def test_all_variant_imports_new_keys():
    environ = {"A": "env", "NEW": "null", "lower": "x", "42": "y"}
    values = {"A": ""}
    complete(values, Source.ENV_ALL, environ=environ)
    assert values == {"A": "env", "NEW": None}


def test_all_variant_in_complete_mode_keeps_set_values():
    values = {"A": "file"}
    complete(values, Source.ENV_ALL, environ={"A": "env", "B": "2"})
    assert values == {"A": "file", "B": 2}


def test_server_source_keeps_scalars_and_skips_others():
    server = {"REQUEST_TIME": 1700000000, "HTTPS": "on", "WSGI_VERSION": (1, 0)}
    values = {"REQUEST_TIME": "", "HTTPS": "", "WSGI_VERSION": ""}
    complete(values, Source.SERVER, server=server)
    assert values == {"REQUEST_TIME": 1700000000, "HTTPS": "on", "WSGI_VERSION": ""}


def test_unselected_sources_ignored(monkeypatch):
    monkeypatch.setenv("A", "getenv")
    values = {"A": ""}
    assert complete(values, Source.SERVER, server={}) == 0
    assert values == {"A": ""}


def test_sources_applied_in_bit_order(monkeypatch):
    monkeypatch.setenv("A", "getenv")
    values = {"A": "file"}
    override(values, Source.GETENV | Source.SERVER, server={"A": "server"})
    assert values == {"A": "server"}

    values = {"A": ""}
    complete(values, Source.GETENV | Source.SERVER, server={"A": "server"})
    assert values == {"A": "getenv"}


def test_is_valid_key():
    assert is_valid_key("PATH")
    assert not is_valid_key("Path")
    assert not is_valid_key("123")
    assert not is_valid_key("")


def test_environment_complete(tmp_path, monkeypatch):
    write_env(tmp_path, ".env", "DB_HOST=\nDB_PORT=5432\n")
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "6543")
    env = Environment(tmp_path)
    env.complete(Source.GETENV)
    assert env.get_all() == {"DB_HOST": "db.internal", "DB_PORT": 5432}


def test_environment_override_with_server_block(tmp_path):
    write_env(tmp_path, ".env", "HOST=localhost\nPORT=80\n")
    env = Environment(tmp_path, server={"HOST": "example.com", "SERVER_PORT": "443"})
    env.override(Source.SERVER_ALL)
    assert env.get_all() == {"HOST": "example.com", "PORT": 80, "SERVER_PORT": 443}


def test_environment_uses_supplied_environ(tmp_path, monkeypatch):
    write_env(tmp_path, ".env", "MODE=\n")
    monkeypatch.setenv("MODE", "process")
    env = Environment(tmp_path, environ={"MODE": "injected"})
    env.complete(Source.ENV)
    assert env.get("MODE") == "injected"
