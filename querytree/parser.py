"""Recursive-descent parser turning a query string into an expression tree."""

from __future__ import annotations

from .expression import (
    BaseConstraint,
    BaseKind,
    Constraint,
    Expression,
    NestedConstraint,
    Phrase,
    SearchWord,
    SimpleConstraint,
)
from .tokenizer import TokenStream, TokenType


class QuerySyntaxError(ValueError):
    """Raised when a query does not follow the query grammar."""


class Parser:
    """Parses one query; tokens consumed by a failed branch stay consumed."""

    def __init__(self, query: str) -> None:
        self._query = query
        self._stream = TokenStream(query)

    def parse(self) -> Expression:
        """Build the expression tree or raise QuerySyntaxError."""
        expr = self._constraint()
        head = self._stream.head
        if expr is None or head is None or head.type is not TokenType.END:
            raise QuerySyntaxError(f"syntax error in query {self._query!r}")
        return expr

    # <Constraint> ::= <BaseConstraint> { <OrOp> <BaseConstraint> }
    def _constraint(self) -> Expression | None:
        first = self._base_constraint()
        if first is None:
            return None
        children = [first]
        while self._stream.match(TokenType.OROP) is not None:
            nxt = self._base_constraint()
            if nxt is None:
                return None
            children.append(nxt)
        return Constraint(tuple(children))

    # <BaseConstraint> ::= <SimpleConstraint> { [ <AndOp> ] <SimpleConstraint> }
    #                    | <SimpleConstraint> <NotOp> <SimpleConstraint>
    def _base_constraint(self) -> Expression | None:
        first = self._simple_constraint()
        if first is None:
            return None
        if self._stream.match(TokenType.NOTOP) is not None:
            right = self._simple_constraint()
            if right is None:
                return None
            return BaseConstraint((first, right), BaseKind.NOT)
        children = [first]
        while True:
            if self._stream.match(TokenType.ANDOP) is not None:
                nxt = self._simple_constraint()
                if nxt is None:
                    return None
            else:
                nxt = self._simple_constraint()
                if nxt is None:
                    break
            children.append(nxt)
        return BaseConstraint(tuple(children), BaseKind.AND)

    # <SimpleConstraint> ::= <Phrase> | <NestedConstraint> | <SearchWord>
    def _simple_constraint(self) -> Expression | None:
        for finder in (self._phrase, self._nested_constraint, self._search_word):
            inner = finder()
            if inner is not None:
                return SimpleConstraint(inner)
        return None

    # <Phrase> ::= '"' { <SearchWord> } '"'
    def _phrase(self) -> Expression | None:
        if self._stream.match(TokenType.QUOTE) is None:
            return None
        words = []
        while self._stream.match(TokenType.QUOTE) is None:
            if self._stream.match(TokenType.END) is not None:
                return None
            word = self._search_word()
            if word is None:
                return None
            words.append(word)
        return Phrase(tuple(words))

    # <NestedConstraint> ::= '(' <Constraint> ')'
    def _nested_constraint(self) -> Expression | None:
        if self._stream.match(TokenType.LPAREN) is None:
            return None
        inner = self._constraint()
        if inner is None or self._stream.match(TokenType.RPAREN) is None:
            return None
        return NestedConstraint(inner)

    def _search_word(self) -> Expression | None:
        token = self._stream.match(TokenType.WORD)
        if token is None:
            return None
        return SearchWord(token.value)


def parse(query: str) -> Expression:
    """Parse a query string into an expression tree."""
    return Parser(query).parse()