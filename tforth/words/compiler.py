"""
Compiling words. Both read ahead from the token queue of the current eval
call, so a definition or conditional must be complete within one line.

- `:` name body... `;`  registers a Procedure
- `if` consequent... [`else` alternative...] `then`  selects one branch
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING
import logging

from tforth.errors import EmptyName, UnterminatedDefinition, UnterminatedConditional
from tforth.runtime.environment import Procedure

if TYPE_CHECKING:
    from tforth.runtime.evaluator import WordEvaluator

logger = logging.getLogger(__name__)


def forth_colon(vm: "WordEvaluator") -> None:
    name = vm.next_token()
    if name is None:
        raise EmptyName()

    body: List[str] = []
    while True:
        token = vm.next_token()
        if token is None:
            # Nothing is registered for an incomplete definition.
            raise UnterminatedDefinition(name)
        if token == ";":
            break
        body.append(token)

    vm.register(name, Procedure(tuple(body)))
    logger.debug(f"Defined {name.lower()!r} as {body!r}")


def forth_if(vm: "WordEvaluator") -> None:
    """
    Pop a flag and put the selected branch back at the front of the queue.

    Every `else` toggles between the consequent and the alternative, so
    `if a else b else c then` runs `a c` on a true flag and `b` on false.

    The default scan is flat: the first `then` ends the conditional even when
    it belongs to an inner `if`. Set ExecutionConfig.nested_conditionals to
    count `if`/`then` depth instead.
    """
    condition = vm.pop() != 0
    nested = vm.config.nested_conditionals

    selected: List[str] = []
    in_consequent = True
    depth = 0

    while True:
        token = vm.next_token()
        if token is None:
            raise UnterminatedConditional()

        lowered = token.lower()
        if depth == 0 and lowered == "then":
            break
        if depth == 0 and lowered == "else":
            in_consequent = not in_consequent
            continue

        if nested:
            if lowered == "if":
                depth += 1
            elif lowered == "then":
                depth -= 1

        if condition == in_consequent:
            selected.append(token)

    logger.debug(f"if {int(condition)}: selected {selected!r}")
    vm.prepend(selected)
