"""
Indentation-aware output: an in-memory buffer and a wrapper that forwards
to any object with a ``write`` method.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, TextIO

from .errors import ConfigurationError
from .indent import IndentationStack, IndentationTracker

log = logging.getLogger(__name__)

NEWLINE = "\n"

Tracker = IndentationTracker  # or its IndentationStack subclass


class _TrackerMethods:
    """Forwards the tracker operations so callers only hold the writer."""

    tracker: Tracker

    def increment(self) -> None:
        self.tracker.increment()

    def decrement(self) -> None:
        self.tracker.decrement()

    def get(self) -> str:
        return self.tracker.get()

    def set(self, value: Optional[str] = None) -> None:
        self.tracker.set(value)

    def indented(self):
        return self.tracker.indented()

    def push(self) -> None:
        self._stack().push()

    def pop(self) -> Optional[str]:
        return self._stack().pop()

    def _stack(self) -> IndentationStack:
        if not isinstance(self.tracker, IndentationStack):
            raise AttributeError(
                f"{type(self.tracker).__name__} has no push/pop, use an IndentationStack"
            )
        return self.tracker


class BufferedIndentedWriter(_TrackerMethods):
    """
    Remembers every written value in order and renders them to one string
    on demand.

    The rendered string is cached until the next ``write``/``print``/``clear``.
    """

    def __init__(self, initial: Optional[List[Any]] = None,
                 tracker: Optional[Tracker] = None) -> None:
        if initial is not None and not isinstance(initial, list):
            raise TypeError(
                f"initial entries must be a list, got {type(initial).__name__}"
            )
        self._entries: List[Any] = initial if initial is not None else []
        self._text: str = ""
        self._fresh: bool = False
        self.tracker: Tracker = tracker if tracker is not None else IndentationTracker()
        log.debug("buffered writer created with %d entries, tracker %r",
                  len(self._entries), self.tracker)

    # -------------------------------- API ------------------------------- #

    def write(self, *values: Any) -> None:
        """Append *values* as they are, no indent and no newline."""
        self._fresh = False
        self._entries.extend(values)

    def print(self, *values: Any) -> None:
        """Append the current indent, *values* and a newline."""
        self._fresh = False
        self._entries.append(self.tracker.get())
        self._entries.extend(values)
        self._entries.append(NEWLINE)

    def extend(self, lines: Iterable[Any]) -> None:
        for ln in lines:
            self.print(ln)

    def to_string(self) -> str:
        if not self._fresh:
            self._text = "".join(str(v) for v in self._entries)
            self._fresh = True
        return self._text

    def to_list(self) -> List[Any]:
        # live list, call invalidate() after editing it by hand
        return self._entries

    entries = property(to_list)

    def invalidate(self) -> None:
        self._fresh = False

    def clear(self) -> None:
        """Drop all entries and the cached text, and clear the tracker."""
        self._entries = []
        self._text = ""
        self._fresh = False
        self.tracker.clear()
        log.debug("buffered writer cleared")

    def save(self, path: Path | str) -> None:
        text = self.to_string()
        Path(path).write_text(text, encoding="utf-8")
        log.debug("wrote %d characters to %s", len(text), path)

    # ----------------------------- dunder ------------------------------- #

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        # an empty writer is still a writer
        return True


class ForwardingIndentedWriter(_TrackerMethods):
    """
    Sends every operation straight to *sink* (anything with a
    ``write(*values)`` method). Closing the sink is up to the caller,
    see :meth:`get_output`.
    """

    def __init__(self, sink: Any, tracker: Optional[Tracker] = None) -> None:
        if sink is None:
            raise ConfigurationError("a sink must be provided")
        if not callable(getattr(sink, "write", None)):
            raise ConfigurationError(
                f"sink {type(sink).__name__} must have a callable 'write'"
            )
        self.sink = sink
        self.tracker: Tracker = tracker if tracker is not None else IndentationTracker()
        log.debug("forwarding writer created for %r", sink)

    def write(self, *values: Any) -> Any:
        return self.sink.write(*values)

    def print(self, *values: Any) -> None:
        # two separate calls: indent + values, then the newline
        self.sink.write(self.tracker.get(), *values)
        self.sink.write(NEWLINE)

    def extend(self, lines: Iterable[Any]) -> None:
        for ln in lines:
            self.print(ln)

    def get_output(self) -> Any:
        return self.sink

    def clear(self) -> None:
        self.tracker.clear()


class StreamSink:
    """Adapts a text stream (``write(str)``) to the ``write(*values)`` sink contract."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, *values: Any) -> int:
        return self.stream.write("".join(str(v) for v in values))

    def flush(self) -> None:
        self.stream.flush()

    def close(self) -> None:
        self.stream.close()

    @property
    def closed(self) -> bool:
        return self.stream.closed

    def __enter__(self) -> "StreamSink":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
