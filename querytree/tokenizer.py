"""Lexical analysis of search queries into a consumable token stream."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Kinds of token produced by the tokenizer."""

    WORD = auto()  # individual words
    QUOTE = auto()  # '"'
    ANDOP = auto()  # AND, &, &&
    OROP = auto()  # OR, |, ||
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    NOTOP = auto()  # NOT, -
    END = auto()  # end of input


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    type: TokenType
    value: str = ""


_SPACE = frozenset(" \t\n\v\f\r")
_ALPHA = frozenset(string.ascii_letters)
_ALNUM = _ALPHA | frozenset(string.digits)
_PUNCT = frozenset(string.punctuation)

# word -> (token type, token value, label recorded for the ranker)
_KEYWORDS: dict[str, tuple[TokenType, str, str]] = {
    "AND": (TokenType.ANDOP, "", "AND"),
    "OR": (TokenType.OROP, "", "OR"),
    "NOT": (TokenType.NOTOP, "-", "NOT"),
}

# character -> (token type, token value, ranker label or None when not recorded)
_SYMBOLS: dict[str, tuple[TokenType, str, str | None]] = {
    "&": (TokenType.ANDOP, "", "AND"),
    "|": (TokenType.OROP, "", "OR"),
    "-": (TokenType.NOTOP, "-", "NOT"),
    '"': (TokenType.QUOTE, "", "QUOTE"),
    "(": (TokenType.LPAREN, "", None),
    ")": (TokenType.RPAREN, "", None),
}

_DESCRIPTIONS = {
    TokenType.OROP: " OR",
    TokenType.QUOTE: ' "',
    TokenType.ANDOP: " AND",
    TokenType.LPAREN: " (",
    TokenType.RPAREN: " )",
    TokenType.NOTOP: " NOT",
}


def _scan(text: str) -> tuple[list[Token], list[str]]:
    """Split text into tokens (ending with END) and the ranker's labels."""
    tokens: list[Token] = []
    labels: list[str] = []
    i, n = 0, len(text)
    while i < n:
        c = text[i]
        if c in _SPACE:
            i += 1
            continue
        if c in _ALPHA:
            j = i
            while j < n and text[j] in _ALNUM:
                j += 1
            word = text[i:j]
            i = j
            kind, value, label = _KEYWORDS.get(word, (TokenType.WORD, word, word))
            tokens.append(Token(kind, value))
            labels.append(label)
            continue
        symbol = _SYMBOLS.get(c)
        if symbol is not None:
            kind, value, label = symbol
            if c in "&|" and i + 1 < n and text[i + 1] == c:
                i += 1
            tokens.append(Token(kind, value))
            if label is not None:
                labels.append(label)
        else:
            j = i
            while j < n and text[j] not in _SPACE and text[j] not in _PUNCT:
                j += 1
            if j > i:
                tokens.append(Token(TokenType.WORD, text[i:j]))
                i = j
                continue
        i += 1
    tokens.append(Token(TokenType.END))
    return tokens, labels


def tokenize(text: str) -> list[Token]:
    """Return every token of text, terminated by an END token."""
    return _scan(text)[0]


class TokenStream:
    """Tokens of a query, consumed from the front."""

    def __init__(self, text: str) -> None:
        self._tokens, self._labels = _scan(text)
        self._pos = 0

    @property
    def head(self) -> Token | None:
        """The next unconsumed token, or None once everything is consumed."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def match(self, token_type: TokenType) -> Token | None:
        """Consume and return the head token if it has the given type."""
        current = self.head
        if current is not None and current.type is token_type:
            self._pos += 1
            return current
        return None

    @property
    def tokens(self) -> list[str]:
        """Labels of the query's tokens for ranking; parentheses are omitted."""
        return list(self._labels)

    def describe(self) -> str:
        """Render the remaining tokens up to END as a readable string."""
        parts = []
        for token in self._tokens[self._pos:]:
            if token.type is TokenType.END:
                break
            if token.type is TokenType.WORD:
                parts.append(" " + token.value)
            else:
                parts.append(_DESCRIPTIONS[token.type])
        return "".join(parts)