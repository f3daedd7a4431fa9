"""Shared fixtures for envloader tests."""

from __future__ import annotations

from pathlib import Path

import pytest

EXPECTED_BASIC = {
    "STRING": "STRING",
    "STRING_QUOTES": " STRING QUOTES ",
    "INTEGER": 9,
    "FLOAT": 9.0,
    "BOOL_TRUE": True,
    "BOOL_FALSE": False,
    "NULL_VALUE": None,
}

BASIC_ENV = """\
# basic values
STRING=STRING
STRING_QUOTES=" STRING QUOTES "
  ; indented comment
INTEGER=9

FLOAT=9.0
BOOL_TRUE=TRUE
BOOL_FALSE=false
NULL_VALUE=null
"""

MULTILINES_ENV = (
    'RGPD="\n'
    "i understand\n"
    "\n"
    '    enough of email fo \\"me\\"    \n'
    "\n"
    "thanks\n"
    '"\n'
    'ONE="one \\" two"\n'
    'TOW="t\\"w\\"o"\n'
    'TEST="testA  \n'
    "Btest ok   a\n"
    'ok"\n'
)


def write_env(folder: Path, name: str, content: str) -> Path:
    p = folder / name
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content)
    return p


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests away from a real .envloader.toml and ENVLOADER_* variables."""
    monkeypatch.delenv("ENVLOADER_FOLDERS", raising=False)
    monkeypatch.delenv("ENVLOADER_FILENAME", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def env_dir(tmp_path: Path) -> Path:
    """A folder holding every sample env file used across the tests."""
    folder = tmp_path / "envs"
    folder.mkdir()
    write_env(folder, ".env", BASIC_ENV)
    write_env(
        folder, "variables.env",
        'HOME=/user/www\nCORE=$HOME/core\nUSE_DOLLAR_IN_STRING="$HOME"\n',
    )
    write_env(folder, "missing_variables.env", "TEST=$TEST\n")
    write_env(
        folder, "root.env",
        "STRING=STRING\n@sub/first.env\nNULL_VALUE=null\n",
    )
    write_env(
        folder, "sub/first.env",
        'STRING_QUOTES=" STRING QUOTES "\nINTEGER=9\n@second.env\n',
    )
    write_env(
        folder, "sub/second.env",
        "FLOAT=9.0\r\nBOOL_TRUE=true\r\nBOOL_FALSE=FALSE\r\n",
    )
    write_env(folder, "missing_include.env", "A=1\n@missing.env\n")
    write_env(folder, "recursion_1.env", "A=1\n@recursion_2.env\n")
    write_env(folder, "recursion_2.env", "B=2\n@recursion_1.env\n")
    write_env(folder, "multilines.env", MULTILINES_ENV)
    write_env(folder, "multilines_not_ending.env", 'B=1\nA="never\nclosed\n')
    write_env(folder, "lowercase.env", "a=1\n")
    write_env(folder, "numeric.env", "11=x\n")
    return folder
