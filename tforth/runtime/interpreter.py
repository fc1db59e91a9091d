"""
tforth Interpreter

The session object: one dictionary, one data stack, one token queue.

Key classes:
- Interpreter: Owns the runtime and exposes eval/register
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Any, List, Optional, TextIO
import logging

from tforth.runtime.state import RuntimeState
from tforth.runtime.environment import Dictionary, Binding, Procedure
from tforth.runtime.executor import Executor, ExecutionConfig, ExecutionResult

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Interpreter session.

    Each instance is independent, so several sessions can live in the same
    process. Dictionary and stack persist across eval calls; pending tokens
    never do.
    """

    def __init__(self,
                 config: ExecutionConfig = None,
                 output: Optional[TextIO] = None,
                 install_stdlib: bool = True):
        self.config = config or ExecutionConfig()
        self.dictionary = Dictionary()
        self.state = RuntimeState(output=output)
        self.executor = Executor(self.dictionary, self.state, self.config)
        # Most recent results only; older ones fall off the left.
        self.history: Deque[ExecutionResult] = deque(maxlen=self.config.history_limit)

        if install_stdlib:
            from tforth.words import register_standard_words
            register_standard_words(self.dictionary)

    def eval(self, source: str) -> ExecutionResult:
        """
        Evaluate a line of source text.

        Args:
            source: Whitespace-delimited tokens

        Returns:
            ExecutionResult; on failure the rest of the line was discarded
        """
        result = self.executor.run(source)
        self.history.append(result)
        return result

    def register(self, name: str, binding: Binding) -> None:
        """Install or overwrite a dictionary entry."""
        self.dictionary.register(name, binding)

    @property
    def stack(self) -> List[int]:
        return self.state.stack.to_list()

    def procedures(self) -> Dict[str, Procedure]:
        return self.dictionary.procedures()

    def reset(self) -> None:
        """Clear the stack; definitions are kept."""
        self.state.reset()

    def snapshot(self) -> Dict[str, Any]:
        """Stack and user definitions, suitable for JSON."""
        return {
            "stack": self.stack,
            "procedures": {
                name: list(proc.tokens) for name, proc in sorted(self.procedures().items())
            },
            "words": len(self.dictionary),
            "config": self.config.to_dict(),
        }

    def get_history(self) -> List[ExecutionResult]:
        return list(self.history)
