"""
tforth - Threaded interpreter for a minimal stack language

Whitespace-delimited tokens are resolved against a dictionary of words and
run against a single integer data stack. Colon-definitions are expanded back
into the token queue at call time, so they always see the latest definitions.

Exports:
- Interpreter: A session with its own dictionary, stack and token queue
- ExecutionConfig: Step budget and conditional scanning mode
- ExecutionResult: Outcome of one eval call
- ForthError and its subclasses: Language-level failures
"""

from tforth.errors import (
    ForthError,
    UndefinedWord,
    StackUnderflow,
    EmptyName,
    UnterminatedDefinition,
    UnterminatedConditional,
    DivideByZero,
    StepLimitExceeded,
)
from tforth.runtime import (
    Interpreter,
    ExecutionConfig,
    ExecutionResult,
    NativeProcedure,
    Procedure,
    Literal,
)

__version__ = "0.3.0"

__all__ = [
    "Interpreter",
    "ExecutionConfig",
    "ExecutionResult",
    "NativeProcedure",
    "Procedure",
    "Literal",
    "ForthError",
    "UndefinedWord",
    "StackUnderflow",
    "EmptyName",
    "UnterminatedDefinition",
    "UnterminatedConditional",
    "DivideByZero",
    "StepLimitExceeded",
]
