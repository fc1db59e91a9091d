"""
tforth Error Kinds

Every failure raised while evaluating a line is a ForthError. All of them are
terminal for the current eval call: the executor clears the pending tokens
and reports the error to the caller.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ForthError(Exception):
    """Base class for language-level failures."""

    kind: str = "ForthError"
    default_message: str = "Evaluation failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message}


class UndefinedWord(ForthError):
    """Token is neither a dictionary name nor a 32-bit integer literal."""

    kind = "UndefinedWord"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Undefined word "{name}"')


class StackUnderflow(ForthError):
    kind = "StackUnderflow"
    default_message = "Stack underflow"


class EmptyName(ForthError):
    kind = "EmptyName"
    default_message = "Attempt to use zero-length string as name"


class UnterminatedDefinition(ForthError):
    kind = "UnterminatedDefinition"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Unterminated definition of "{name}": missing ";"')


class UnterminatedConditional(ForthError):
    kind = "UnterminatedConditional"
    default_message = 'Unterminated conditional: missing "then"'


class DivideByZero(ForthError):
    kind = "DivideByZero"
    default_message = "Division by zero"


class StepLimitExceeded(ForthError):
    """Raised when one eval call dispatches more tokens than the configured budget."""

    kind = "StepLimitExceeded"

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Step limit of {limit} exceeded")


__all__ = [
    "ForthError",
    "UndefinedWord",
    "StackUnderflow",
    "EmptyName",
    "UnterminatedDefinition",
    "UnterminatedConditional",
    "DivideByZero",
    "StepLimitExceeded",
]
