"""
tforth Runtime Engine

This module provides the core runtime for evaluating source text:
- Interpreter: Session object with eval/register
- Executor: Token queue drain loop and abort policy
- Evaluator: Token resolution and dispatch (native, procedure, literal)
- State: Token queue, data stack, output sink
- Environment: Dictionary and binding kinds
"""

from tforth.runtime.executor import Executor, ExecutionResult, ExecutionConfig
from tforth.runtime.evaluator import WordEvaluator, EvaluatorResult, parse_literal
from tforth.runtime.interpreter import Interpreter
from tforth.runtime.state import RuntimeState, TokenQueue, DataStack
from tforth.runtime.environment import Dictionary, NativeProcedure, Procedure, Literal

__all__ = [
    "Executor",
    "ExecutionResult",
    "ExecutionConfig",
    "WordEvaluator",
    "EvaluatorResult",
    "parse_literal",
    "Interpreter",
    "RuntimeState",
    "TokenQueue",
    "DataStack",
    "Dictionary",
    "NativeProcedure",
    "Procedure",
    "Literal",
]
