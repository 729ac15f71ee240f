import sys

from rich.markup import escape

from cmdopts import CmdParse, Option
from cmdopts.console import console
from cmdopts.utils import setup_logging

setup_logging(log_filename=None)

# Declare the supported options
cmd = CmdParse()
cmd.add_param_option(Option("BufferSize", "1000", "b", help="Read buffer size"))
cmd.add_param_option(Option("OutputFile", "output.txt", "o", help="Where to write"))
cmd.add_param_option(Option("Ratio", "0.5", "r"))

# Entry point
if __name__ == "__main__":
    if not cmd.init(len(sys.argv), sys.argv):
        for error in cmd.get_errors():
            console.print(f"[red]{escape(error)}[/]")
        cmd.render_help()
        sys.exit(1)

    console.print(f"buffer size: {cmd.get_value('BufferSize', int)}")
    console.print(f"output file: {cmd.get_value('OutputFile')}")
    console.print(f"ratio:       {cmd.get_value('Ratio', float)}")
