# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``python -m envloader`` and the ``envloader`` console script."""

from envloader.cli import cli


def main() -> None:
    cli(prog_name="envloader")


if __name__ == "__main__":
    main()
