"""``envloader export`` command."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console

from envloader.cli import HAS_YAML, cli, console, load_environment
from envloader.values import Value, coerce, to_text

if HAS_YAML:
    import yaml


@cli.command("export")
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "unix", "win", "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, KEY=value), unix (export KEY=value), win (PowerShell), json, yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@click.pass_context
def export(ctx: click.Context, fmt: str, output: str | None) -> None:
    """Export the loaded values to stdout or file.

    dotenv output parses back to the same typed values (includes already
    inlined, variables already substituted), except multi-line values whose
    later lines contain ``=``.  json and yaml keep the types.
    Use --format unix for shell sourcing: eval "$(envloader export --format unix)".
    """
    if fmt == "yaml" and not HAS_YAML:
        console.print("[red]PyYAML is not installed. Install with: pip install pyyaml[/red]")
        return
    values = load_environment(ctx).get_all()

    if output:
        path = Path(output)
        with path.open("w") as f:
            if fmt == "json":
                f.write(json.dumps(values, indent=2))
                f.write("\n")
            elif fmt == "yaml":
                yaml.dump(values, f, default_flow_style=False, sort_keys=True)
            else:
                for line in _format_export_lines(values, fmt):
                    f.write(line + "\n")
        console.print(f"[green]Exported {len(values)} value(s) to {output}[/green]")
    else:
        out = Console(file=sys.stdout, highlight=False, markup=False, emoji=False, soft_wrap=True)
        if fmt == "json":
            out.print(json.dumps(values, indent=2))
        elif fmt == "yaml":
            yaml.dump(values, sys.stdout, default_flow_style=False, sort_keys=True)
        else:
            for line in _format_export_lines(values, fmt):
                out.print(line)


def _dotenv_value(value: Value) -> str:
    """Format a value so that parsing it again yields the same value."""
    if isinstance(value, float):
        text = repr(value)
        # 1e+20 has no decimal point and would come back as an int
        return text if "." in text else text.replace("e", ".0e")
    if not isinstance(value, str):
        return "null" if value is None else to_text(value)
    needs_quotes = (
        value != value.rstrip()
        or any(c in value for c in '$"\n\r')
        or not isinstance(coerce(value), str)
    )
    if needs_quotes:
        return '"' + value.replace('"', '\\"') + '"'
    return value


def _shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in value for c in " \t'\"\\$`!#&|;(){}\n"):
        return "'" + value.replace("'", "'\\''") + "'"
    return value


def _powershell_escape(value: str) -> str:
    """Escape for PowerShell single-quoted string: ' -> ''."""
    return value.replace("'", "''")


def _format_export_lines(values: dict[str, Value], fmt: str) -> list[str]:
    lines: list[str] = []
    for key, value in sorted(values.items()):
        if fmt == "unix":
            lines.append(f"export {key}={_shell_escape(to_text(value))}")
        elif fmt == "win":
            lines.append(f"$env:{key} = '{_powershell_escape(to_text(value))}'")
        else:
            lines.append(f"{key}={_dotenv_value(value)}")
    return lines
