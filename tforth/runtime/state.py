"""
tforth Runtime State

Pending input and data live here; the dictionary lives in environment.py.

Key classes:
- TokenQueue: Double-ended queue of pending token names
- DataStack: LIFO store of signed 32-bit integers
- RuntimeState: Queue + stack + output sink for one session
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Any, Iterable, Iterator, List, Optional, TextIO
import sys

from tforth.errors import StackUnderflow

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def wrap_i32(value: int) -> int:
    """Wrap an arbitrary Python int into the signed 32-bit range."""
    return ((value - INT_MIN) % 2 ** 32) + INT_MIN


class TokenQueue:
    """
    Ordered sequence of pending token names.

    New source text goes to the back; expanded procedure and conditional
    bodies go to the front so they run before anything queued after them.
    """

    def __init__(self, tokens: Iterable[str] = ()):
        self._tokens: Deque[str] = deque(tokens)

    def append(self, text: str) -> int:
        """Split text on whitespace and queue the tokens at the back."""
        names = text.split()
        self._tokens.extend(names)
        return len(names)

    def prepend(self, tokens: Iterable[str]) -> None:
        """Queue tokens at the front; tokens[0] becomes the next token read."""
        self._tokens.extendleft(reversed(list(tokens)))

    def next(self) -> Optional[str]:
        """Pop the front token, or None when the queue is exhausted."""
        if not self._tokens:
            return None
        return self._tokens.popleft()

    def clear(self) -> None:
        self._tokens.clear()

    def to_list(self) -> List[str]:
        return list(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tokens))

    def __repr__(self) -> str:
        return f"TokenQueue({self.to_list()!r})"


class DataStack:
    """The single integer data stack."""

    def __init__(self, values: Iterable[int] = ()):
        self._values: List[int] = [wrap_i32(v) for v in values]

    def push(self, value: int) -> None:
        self._values.append(wrap_i32(value))

    def pop(self) -> int:
        if not self._values:
            raise StackUnderflow()
        return self._values.pop()

    def peek(self) -> Optional[int]:
        return self._values[-1] if self._values else None

    @property
    def depth(self) -> int:
        return len(self._values)

    def clear(self) -> None:
        self._values.clear()

    def to_list(self) -> List[int]:
        """Stack contents, bottom first."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DataStack):
            return self._values == other._values
        if isinstance(other, list):
            return self._values == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"DataStack({self._values!r})"


@dataclass
class RuntimeState:
    """
    Mutable per-session state.

    Tracks:
    - Pending tokens for the current eval call
    - The data stack (persists across eval calls)
    - Where `.` writes its output
    - Number of tokens dispatched and values printed during the current eval call
    """
    queue: TokenQueue = field(default_factory=TokenQueue)
    stack: DataStack = field(default_factory=DataStack)
    output: Optional[TextIO] = None
    steps: int = 0
    emitted: List[int] = field(default_factory=list)

    def emit(self, value: int) -> None:
        """Write a value to the output sink, one per line."""
        self.emitted.append(value)
        stream = self.output if self.output is not None else sys.stdout
        stream.write(f"{value}\n")

    # Shorthand used by the native words
    def push(self, value: int) -> None:
        self.stack.push(value)

    def pop(self) -> int:
        return self.stack.pop()

    def reset(self) -> None:
        """Drop stack contents and pending tokens."""
        self.queue.clear()
        self.stack.clear()
        self.steps = 0
        self.emitted.clear()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stack": self.stack.to_list(),
            "pending": self.queue.to_list(),
            "steps": self.steps,
        }
