"""
tforth Standard Word Set

Native words installed into every new Interpreter:
- Output: .
- Arithmetic: + - * /
- Comparison: = > <
- Logic and stack: invert dup drop
- Compilers: : if
"""

from tforth.runtime.environment import Dictionary, NativeProcedure
from tforth.words.core import (
    forth_print,
    forth_add,
    forth_sub,
    forth_mul,
    forth_div,
    forth_eq,
    forth_gt,
    forth_lt,
    forth_invert,
    forth_dup,
    forth_drop,
)
from tforth.words.compiler import forth_colon, forth_if

STANDARD_WORDS = {
    ".": forth_print,
    "+": forth_add,
    "-": forth_sub,
    "*": forth_mul,
    "/": forth_div,
    "=": forth_eq,
    ">": forth_gt,
    "<": forth_lt,
    "invert": forth_invert,
    "dup": forth_dup,
    "drop": forth_drop,
    ":": forth_colon,
    "if": forth_if,
}


def register_standard_words(dictionary: Dictionary) -> None:
    """Install the native words, overwriting any existing entries."""
    for name, func in STANDARD_WORDS.items():
        dictionary.register(name, NativeProcedure(name, func))


__all__ = ["STANDARD_WORDS", "register_standard_words"]
