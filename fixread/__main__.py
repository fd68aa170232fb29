"""fixread CLI entry point.

Allows running via `python -m fixread` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys
from typing import Optional

from .version import get_version_string

USAGE = """\
Usage: fixread [options] FILE

Read a text file page by page with fixation points in bold.

Options:
  -f, --file FILE        Text file to read
  --style prefix|anchor  Bold the start of each word (default) or only its anchor
  --log-level LEVEL      Log level for the log file (default: WARNING)
  -V, --version          Show version and exit
  -h, --help             Show this help and exit

Keys:
  a, Space, PgDn   Next page          q, PgUp   Previous page
  Home, End        First/last page    /         Search
  n, p             Next/previous match
  Enter            Run search (empty query leaves search)
  Esc              Leave search, or quit      Ctrl-Q    Quit
"""


class UsageError(Exception):
    pass


def _parse_args(args: list[str]) -> dict:
    options = {"file": None, "style": "prefix", "log_level": None}
    it = iter(args)
    for arg in it:
        if arg in ("-h", "--help", "-V", "--version"):
            options[arg.lstrip("-")[0].lower()] = True
        elif arg in ("-f", "--file", "--style", "--log-level"):
            value = next(it, None)
            if value is None:
                raise UsageError(f"Option {arg} needs a value")
            key = {"-f": "file", "--file": "file", "--style": "style", "--log-level": "log_level"}[arg]
            options[key] = value
        elif arg.startswith("-") and arg != "-":
            raise UsageError(f"Unknown option: {arg}")
        elif options["file"] is None:
            options["file"] = arg
        else:
            raise UsageError(f"Unexpected argument: {arg}")
    if options["style"] not in ("prefix", "anchor"):
        raise UsageError(f"Unknown style: {options['style']}")
    return options


def main(argv: Optional[list[str]] = None) -> int:
    try:
        options = _parse_args(sys.argv[1:] if argv is None else argv)
    except UsageError as e:
        print(f"fixread: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2
    if options.get("h"):
        print(USAGE)
        return 0
    if options.get("v"):
        print(get_version_string())
        return 0
    if not options["file"]:
        print("Please enter a file, see option --help.", file=sys.stderr)
        return 2

    # Lazy import to avoid importing UI deps for --version
    from .errors import InvalidViewport
    from .fixation import EmphasisStyle
    from .logging_config import configure_logging
    from .reader import Reader

    configure_logging(options["log_level"])
    reader = Reader(style=EmphasisStyle(options["style"]))
    try:
        reader.load_file(options["file"])
    except FileNotFoundError:
        print(f"Error: The text file '{options['file']}' doesn't exist!", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: While reading file ... {e}", file=sys.stderr)
        return 1
    try:
        reader.run()
    except InvalidViewport as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
