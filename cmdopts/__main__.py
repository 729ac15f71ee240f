"""
Cmdopts Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Inspect how an argument list is parsed against a declaration file:

    python -m cmdopts cmdopts.yaml --BufferSize:23 -o "C://Temp//"

When the first argument is not an existing declaration file, the file is looked
up with `find_config()` and every argument is parsed.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from cmdopts.config import find_config, loader
from cmdopts.console import console
from cmdopts.exceptions import ConfigError
from cmdopts.utils import setup_logging

USAGE = "usage: cmdopts [DECLARATIONS] [OPTIONS...]"


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging(log_filename=None)
    arguments = list(sys.argv[1:] if argv is None else argv)

    if arguments and not arguments[0].startswith("-") and Path(arguments[0]).is_file():
        config_path: Path | None = Path(arguments.pop(0))
    else:
        config_path = find_config()

    if not config_path:
        console.print(
            f"[bold red]No option declaration file found.[/]\n{escape(USAGE)}",
            highlight=False,
        )
        return 2

    try:
        cmd = loader(config_path)
    except (ConfigError, FileNotFoundError) as error:
        console.print(f"[bold red]{escape(str(error))}[/]", highlight=False)
        return 2

    ok = cmd.init(len(arguments) + 1, ["cmdopts", *arguments])
    if not ok or cmd.has_errors():
        for error in cmd.get_errors():
            console.print(f"[red]❌ {escape(error)}[/]", highlight=False)
        cmd.render_help()
        return 1

    table = Table(title=escape(str(config_path)))
    table.add_column("Option", style="bold")
    table.add_column("Short")
    table.add_column("Default", style="dim")
    table.add_column("Value")
    for option in cmd.get_param_options():
        table.add_row(
            escape(option.long_name),
            escape(option.short_name),
            escape(option.default_value),
            escape(option.value_as_text()) if option.present else "",
        )
    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
