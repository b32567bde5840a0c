"""Expression tree for parsed search queries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Expression(ABC):
    """A node of a query expression tree."""

    @abstractmethod
    def eval(self) -> str:
        """Render the node as a nested ISR description."""


def _isr(name: str, children: Iterable[Expression]) -> str:
    return f"{name}({', '.join(child.eval() for child in children)})"


@dataclass(frozen=True)
class Constraint(Expression):
    """Base constraints joined by OR."""

    children: tuple[Expression, ...]

    def eval(self) -> str:
        if len(self.children) == 1:
            return self.children[0].eval()
        return _isr("OrISR", self.children)


class BaseKind(Enum):
    """How the children of a base constraint combine."""

    AND = "And"
    NOT = "Not"


@dataclass(frozen=True)
class BaseConstraint(Expression):
    """Simple constraints joined by AND, or one excluded from another by NOT."""

    children: tuple[Expression, ...]
    kind: BaseKind = BaseKind.AND

    def eval(self) -> str:
        if len(self.children) == 1:
            return self.children[0].eval()
        if self.kind is BaseKind.NOT:
            return f"NotISR({self.children[0].eval()}, {self.children[1].eval()})"
        return _isr("AndISR", self.children)


@dataclass(frozen=True)
class SimpleConstraint(Expression):
    """A phrase, nested constraint or single word."""

    inner: Expression

    def eval(self) -> str:
        return self.inner.eval()


@dataclass(frozen=True)
class Phrase(Expression):
    """Words that must appear consecutively."""

    words: tuple[Expression, ...]

    def eval(self) -> str:
        if len(self.words) == 1:
            return self.words[0].eval()
        return _isr("PhraseISR", self.words)


@dataclass(frozen=True)
class NestedConstraint(Expression):
    """A parenthesised constraint."""

    inner: Expression

    def eval(self) -> str:
        return self.inner.eval()


@dataclass(frozen=True)
class SearchWord(Expression):
    """A single search term."""

    value: str

    def eval(self) -> str:
        return f"WordISR({self.value})"