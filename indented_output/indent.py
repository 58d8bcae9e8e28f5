"""
Indentation trackers: a flat one and one with an internal stack of saved
indent values.
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, List, Optional

DEFAULT_UNIT = "\t"


class IndentationTracker:
    """Holds the current indent string and the unit one level adds."""

    def __init__(self, initial: str = "", unit: str = DEFAULT_UNIT) -> None:
        self.current: str = initial
        self.unit: str = unit

    # -------------------------------- API ------------------------------- #

    def increment(self) -> None:   # one level deeper
        self.current += self.unit

    def decrement(self) -> None:
        """
        Drop the last copy of *unit* from the end of the indent.

        Leaves the value untouched when it does not end with *unit*
        (empty, or a custom prefix set with :meth:`set`).
        """
        if self.unit and self.current.endswith(self.unit):
            self.current = self.current[: -len(self.unit)]

    def get(self) -> str:
        return self.current

    def set(self, value: Optional[str] = None) -> None:
        """Replace the indent; ``None`` keeps the current one."""
        if value is not None:
            self.current = value

    def clear(self) -> None:
        self.current = ""

    @contextmanager
    def indented(self) -> Iterator[None]:
        self.increment()
        try:
            yield
        finally:
            self.decrement()

    # ----------------------------- dunder ------------------------------- #

    def __str__(self) -> str:
        return self.current

    def __repr__(self) -> str:
        return f"{type(self).__name__}(initial={self.current!r}, unit={self.unit!r})"


class IndentationStack(IndentationTracker):
    """
    Tracker with a stack of saved indents.

    :meth:`push` saves the current value and starts again from an empty
    indent, :meth:`pop` brings the saved value back.
    """

    def __init__(self, initial: str = "", unit: str = DEFAULT_UNIT) -> None:
        super().__init__(initial, unit)
        self.frames: List[str] = []

    def push(self) -> None:
        self.frames.append(self.current)
        self.current = ""

    def pop(self) -> Optional[str]:
        # empty stack: nothing to restore
        if not self.frames:
            return None
        self.current = self.frames.pop()
        return self.current

    def clear(self) -> None:
        self.frames = []
        self.current = ""

    @property
    def depth(self) -> int:
        return len(self.frames)

    @contextmanager
    def scoped(self) -> Iterator[None]:
        """Indent from scratch inside the block, restore afterwards."""
        self.push()
        try:
            yield
        finally:
            self.pop()
