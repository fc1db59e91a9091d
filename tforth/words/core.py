"""
Standard native words: printing, arithmetic, comparison, stack shuffling.

Binary words pop `a` (top) then `b` and push `b OP a`. Pops are not undone
when a later pop fails: `1 +` consumes the 1 and then reports underflow.
"""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from tforth.errors import DivideByZero

if TYPE_CHECKING:
    from tforth.runtime.evaluator import WordEvaluator


def binary_word(op: Callable[[int, int], int]) -> Callable[["WordEvaluator"], None]:
    def word(vm: "WordEvaluator") -> None:
        a = vm.pop()
        b = vm.pop()
        vm.push(op(b, a))
    return word


def _truncating_div(b: int, a: int) -> int:
    if a == 0:
        raise DivideByZero()
    q = abs(b) // abs(a)
    return q if (b < 0) == (a < 0) else -q


def forth_print(vm: "WordEvaluator") -> None:
    vm.emit(vm.pop())


forth_add = binary_word(lambda b, a: b + a)
forth_sub = binary_word(lambda b, a: b - a)
forth_mul = binary_word(lambda b, a: b * a)
forth_div = binary_word(_truncating_div)

forth_eq = binary_word(lambda b, a: int(b == a))
forth_gt = binary_word(lambda b, a: int(b > a))
forth_lt = binary_word(lambda b, a: int(b < a))


def forth_invert(vm: "WordEvaluator") -> None:
    vm.push(int(vm.pop() == 0))


def forth_dup(vm: "WordEvaluator") -> None:
    value = vm.pop()
    vm.push(value)
    vm.push(value)


def forth_drop(vm: "WordEvaluator") -> None:
    vm.pop()
