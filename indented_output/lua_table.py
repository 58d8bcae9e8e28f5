"""
Pretty-print nested Python data as a Lua table constructor, using the
indented writers. Output only: there is no parser to read it back.
"""

from __future__ import annotations
import math
import re
from typing import Any, Mapping

from .indent import DEFAULT_UNIT, IndentationTracker
from .writer import BufferedIndentedWriter

LUA_KEYWORDS = frozenset({
    "and", "break", "do", "else", "elseif", "end", "false", "for",
    "function", "goto", "if", "in", "local", "nil", "not", "or",
    "repeat", "return", "then", "true", "until", "while",
})

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\000",
}


def quote(text: str) -> str:
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'


def scalar(value: Any) -> str:
    """Lua literal for a non-table value."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "0/0"
        if math.isinf(value):
            return "math.huge" if value > 0 else "-math.huge"
        return repr(value)
    if isinstance(value, str):
        return quote(value)
    raise TypeError(f"cannot render {type(value).__name__} as a Lua value")


def key(k: Any) -> str:
    """Field prefix for mapping key *k*, e.g. ``name = `` or ``[1] = ``."""
    if isinstance(k, str):
        if _IDENT.match(k) and k not in LUA_KEYWORDS:
            return f"{k} = "
        return f"[{quote(k)}] = "
    if isinstance(k, float) and math.isnan(k):
        raise TypeError("NaN cannot be a Lua table key")
    if isinstance(k, (bool, int, float)):
        return f"[{scalar(k)}] = "
    raise TypeError(f"cannot use {type(k).__name__} as a Lua table key")


def _is_table(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _emit(writer, prefix: str, value: Any, suffix: str) -> None:
    if not _is_table(value):
        writer.print(prefix, scalar(value), suffix)
        return
    if isinstance(value, Mapping):
        fields = [(key(k), v) for k, v in value.items()]
    else:
        fields = [("", v) for v in value]
    if not fields:
        writer.print(prefix, "{}", suffix)
        return

    writer.print(prefix, "{")
    with writer.indented():
        last = len(fields) - 1
        for i, (field_prefix, v) in enumerate(fields):
            _emit(writer, field_prefix, v, "" if i == last else ",")
    writer.print("}", suffix)


def dump(data: Any, writer) -> None:
    """Emit *data* into *writer* (buffered or forwarding), one field per line."""
    _emit(writer, "", data, "")


def dumps(data: Any, unit: str = DEFAULT_UNIT) -> str:
    writer = BufferedIndentedWriter(tracker=IndentationTracker(unit=unit))
    dump(data, writer)
    return writer.to_string()
