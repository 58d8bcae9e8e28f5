from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .indent import IndentationTracker
from .lua_table import dump, dumps
from .writer import ForwardingIndentedWriter, StreamSink

log = logging.getLogger("indented_output")


def indent_unit(value: str) -> str:
    """``tab`` or a number of spaces."""
    if value == "tab":
        return "\t"
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'tab' or a number of spaces, got {value!r}")
    if width < 0:
        raise argparse.ArgumentTypeError("indent width must not be negative")
    return " " * width


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    ap = argparse.ArgumentParser(description="Render JSON as an indented Lua table")
    ap.add_argument("input", help="JSON file, '-' for stdin")
    ap.add_argument("-o", "--output", help="Lua output file (default: stdout)")
    ap.add_argument("--indent", type=indent_unit, default="tab",
                    help="'tab' (default) or a number of spaces")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ns = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        if ns.input == "-":
            data = json.load(sys.stdin)
        else:
            data = json.loads(Path(ns.input).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        ap.error(f"{ns.input}: invalid JSON: {exc}")

    if ns.output:
        log.debug("writing %s", ns.output)
        with StreamSink(open(ns.output, "w", encoding="utf-8")) as sink:
            writer = ForwardingIndentedWriter(sink, IndentationTracker(unit=ns.indent))
            dump(data, writer)
    else:
        sys.stdout.write(dumps(data, unit=ns.indent))


if __name__ == "__main__":
    main()
