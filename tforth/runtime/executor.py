"""
tforth Executor

Drains the token queue for one eval call.

Key classes:
- ExecutionConfig: Configuration for evaluation
- ExecutionResult: Result of one eval call
- Executor: The drain loop and its abort policy
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
import logging
import time

from tforth.errors import ForthError, StepLimitExceeded
from tforth.runtime.environment import Dictionary
from tforth.runtime.state import RuntimeState
from tforth.runtime.evaluator import WordEvaluator

logger = logging.getLogger(__name__)


@dataclass
class ExecutionConfig:
    """Configuration for evaluation."""
    max_steps: Optional[int] = None
    nested_conditionals: bool = False
    history_limit: int = 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_steps": self.max_steps,
            "nested_conditionals": self.nested_conditionals,
            "history_limit": self.history_limit,
        }


@dataclass
class ExecutionResult:
    """Result of one eval call."""
    success: bool
    source: str = ""
    error: Optional[ForthError] = None
    tokens_consumed: int = 0
    output: List[int] = field(default_factory=list)
    stack: List[int] = field(default_factory=list)
    execution_time_ms: float = 0.0

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error else None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "source": self.source,
            "error": self.error_message,
            "error_kind": self.error_kind,
            "tokens_consumed": self.tokens_consumed,
            "output": self.output,
            "stack": self.stack,
            "execution_time_ms": self.execution_time_ms,
        }


class Executor:
    """
    Main evaluation loop.

    - Append the source tokens to the back of the queue
    - Pop, resolve and dispatch until the queue is empty
    - On the first failure discard everything still pending and report it
    """

    def __init__(self,
                 dictionary: Dictionary,
                 state: RuntimeState,
                 config: ExecutionConfig = None):
        self.config = config or ExecutionConfig()
        self.state = state
        self.evaluator = WordEvaluator(dictionary, state, self.config)

    def run(self, source: str) -> ExecutionResult:
        start = time.time()
        state = self.state
        state.steps = 0
        state.emitted = []

        result = ExecutionResult(success=False, source=source)
        state.queue.append(source)

        try:
            while True:
                token = state.queue.next()
                if token is None:
                    result.success = True
                    break

                if self.config.max_steps is not None and state.steps >= self.config.max_steps:
                    result.error = StepLimitExceeded(self.config.max_steps)
                    break
                state.steps += 1

                eval_result = self.evaluator.evaluate(token)
                if not eval_result.success:
                    result.error = eval_result.error
                    break
        finally:
            # Nothing pending may survive into the next call, even on interrupt.
            if state.queue:
                logger.debug(f"Aborting with {len(state.queue)} pending tokens")
            state.queue.clear()

        if result.error is not None:
            logger.debug(f"eval failed at step {state.steps}: {result.error}")

        result.tokens_consumed = state.steps
        result.output = list(state.emitted)
        result.stack = state.stack.to_list()
        result.execution_time_ms = (time.time() - start) * 1000
        return result
