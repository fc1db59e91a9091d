"""
tforth Word Evaluator

Resolves a single token to a binding and dispatches on the binding kind:
- NativeProcedure: call it with this evaluator
- Procedure: put its tokens at the front of the queue
- Literal: push the value
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any, Optional, TYPE_CHECKING
import logging
import re

from tforth.errors import ForthError, UndefinedWord
from tforth.runtime.state import RuntimeState, INT_MIN, INT_MAX
from tforth.runtime.environment import Dictionary, Binding, NativeProcedure, Procedure, Literal

if TYPE_CHECKING:
    from tforth.runtime.executor import ExecutionConfig

logger = logging.getLogger(__name__)

_LITERAL_RE = re.compile(r"[+-]?[0-9]+")


def parse_literal(token: str) -> Optional[int]:
    """Parse a signed 32-bit decimal literal, or return None."""
    if not _LITERAL_RE.fullmatch(token):
        return None
    value = int(token)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


@dataclass
class EvaluatorResult:
    """Result of evaluating one token."""
    success: bool
    token: str
    kind: Optional[str] = None
    error: Optional[ForthError] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "token": self.token,
            "kind": self.kind,
            "error": self.error.to_dict() if self.error else None,
        }


class WordEvaluator:
    """
    Evaluates individual tokens against a dictionary and runtime state.

    Native words receive the evaluator itself, which gives them the stack,
    the token queue (the compilers read ahead from it), the dictionary and
    the execution config.
    """

    def __init__(self,
                 dictionary: Dictionary,
                 state: RuntimeState,
                 config: "ExecutionConfig"):
        self.dictionary = dictionary
        self.state = state
        self.config = config

    def resolve(self, name: str) -> Binding:
        """Dictionary first, then integer literal, else UndefinedWord."""
        binding = self.dictionary.lookup(name)
        if binding is not None:
            return binding
        value = parse_literal(name)
        if value is None:
            raise UndefinedWord(name)
        return Literal(value)

    def dispatch(self, binding: Binding) -> None:
        if isinstance(binding, NativeProcedure):
            binding.func(self)
        elif isinstance(binding, Procedure):
            self.state.queue.prepend(binding.tokens)
        elif isinstance(binding, Literal):
            self.state.push(binding.value)
        else:
            raise TypeError(f"Unknown binding kind: {binding!r}")

    def evaluate(self, token: str) -> EvaluatorResult:
        """Resolve and dispatch a token, turning language errors into a result."""
        try:
            binding = self.resolve(token)
            logger.debug(f"{token!r} -> {binding.kind}")
            self.dispatch(binding)
        except ForthError as e:
            return EvaluatorResult(success=False, token=token, error=e)
        return EvaluatorResult(success=True, token=token, kind=binding.kind)

    # Helpers for native words

    def push(self, value: int) -> None:
        self.state.push(value)

    def pop(self) -> int:
        return self.state.pop()

    def next_token(self) -> Optional[str]:
        return self.state.queue.next()

    def prepend(self, tokens) -> None:
        self.state.queue.prepend(tokens)

    def emit(self, value: int) -> None:
        self.state.emit(value)

    def register(self, name: str, binding: Binding) -> None:
        self.dictionary.register(name, binding)
