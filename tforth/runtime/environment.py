"""
tforth Dictionary

The dictionary maps lower-cased names to bindings. A binding is one of:
- NativeProcedure: a Python callable run against the evaluator
- Procedure: a colon-definition, stored as the token names it expands to
- Literal: an integer produced by the resolver; never stored

Key classes:
- NativeProcedure, Procedure, Literal: the Binding variants
- Dictionary: name -> Binding mapping
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Any, Iterator, List, Optional, Tuple, Union, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from tforth.runtime.evaluator import WordEvaluator

logger = logging.getLogger(__name__)

NativeFunc = Callable[["WordEvaluator"], None]


@dataclass(frozen=True)
class NativeProcedure:
    """Built-in word. Compared by identity of the wrapped function."""
    name: str
    func: NativeFunc

    kind = "native"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "name": self.name}


@dataclass(frozen=True)
class Procedure:
    """
    User colon-definition.

    The tokens are re-resolved every time the procedure is expanded, so
    redefining a word it mentions changes what it does next time.
    """
    tokens: Tuple[str, ...] = ()

    kind = "procedure"

    def __post_init__(self):
        # Callers may hand in a list; freeze it so lookups never alias.
        object.__setattr__(self, "tokens", tuple(self.tokens))

    @property
    def source(self) -> str:
        return " ".join(self.tokens)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "tokens": list(self.tokens)}


@dataclass(frozen=True)
class Literal:
    """Integer literal resolved from a token."""
    value: int

    kind = "literal"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "value": self.value}


Binding = Union[NativeProcedure, Procedure, Literal]


class Dictionary:
    """
    Name -> Binding mapping with case-insensitive keys.

    Later registrations overwrite earlier ones; there is no delete.
    """

    def __init__(self):
        self._words: Dict[str, Binding] = {}

    def register(self, name: str, binding: Binding) -> None:
        """Install or overwrite a binding."""
        if isinstance(binding, Literal):
            raise TypeError("Literals cannot be registered in the dictionary")
        if not isinstance(binding, (NativeProcedure, Procedure)):
            raise TypeError(f"Not a binding: {binding!r}")
        key = name.lower()
        if key in self._words:
            logger.debug(f"Redefining {key!r}")
        self._words[key] = binding

    def lookup(self, name: str) -> Optional[Binding]:
        return self._words.get(name.lower())

    def names(self) -> List[str]:
        return sorted(self._words)

    def procedures(self) -> Dict[str, Procedure]:
        """User colon-definitions only."""
        return {
            name: binding
            for name, binding in self._words.items()
            if isinstance(binding, Procedure)
        }

    def to_dict(self) -> Dict[str, Any]:
        return {name: self._words[name].to_dict() for name in self.names()}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
