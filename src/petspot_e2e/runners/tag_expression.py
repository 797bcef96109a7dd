"""Cucumber tag expressions.

Grammar::

    expr   := term ("or" term)*
    term   := factor ("and" factor)*
    factor := "not" factor | "(" expr ")" | TAG

Tags are written with a leading ``@``. Expressions evaluate against a set
of scenario tags and convert to pytest ``-m`` marker expressions, where
pytest-bdd exposes each Gherkin tag as a marker of the same name.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_TOKEN_RE = re.compile(r"\s*(\(|\)|@[\w:.+-]+|[A-Za-z]+)")
_KEYWORDS = frozenset({"and", "or", "not"})


class TagExpressionError(ValueError):
    """Raised for malformed tag expressions."""


@dataclass(frozen=True)
class _Tag:
    name: str

    def evaluate(self, tags: frozenset[str]) -> bool:
        return self.name in tags

    def to_marker(self) -> str:
        return self.name

    def __str__(self) -> str:
        return f"@{self.name}"


@dataclass(frozen=True)
class _Not:
    operand: _Node

    def evaluate(self, tags: frozenset[str]) -> bool:
        return not self.operand.evaluate(tags)

    def to_marker(self) -> str:
        return f"not {_wrap(self.operand, self.operand.to_marker())}"

    def __str__(self) -> str:
        return f"not {_wrap(self.operand, str(self.operand))}"


@dataclass(frozen=True)
class _And:
    left: _Node
    right: _Node

    def evaluate(self, tags: frozenset[str]) -> bool:
        return self.left.evaluate(tags) and self.right.evaluate(tags)

    def to_marker(self) -> str:
        left = _group(self.left, self.left.to_marker())
        return f"{left} and {_group(self.right, self.right.to_marker())}"

    def __str__(self) -> str:
        return f"{_group(self.left, str(self.left))} and {_group(self.right, str(self.right))}"


@dataclass(frozen=True)
class _Or:
    left: _Node
    right: _Node

    def evaluate(self, tags: frozenset[str]) -> bool:
        return self.left.evaluate(tags) or self.right.evaluate(tags)

    def to_marker(self) -> str:
        return f"{self.left.to_marker()} or {self.right.to_marker()}"

    def __str__(self) -> str:
        return f"{self.left} or {self.right}"


_Node = _Tag | _Not | _And | _Or


def _wrap(node: _Node, text: str) -> str:
    # "not" binds tightest; anything but a tag or another "not" needs parens.
    return text if isinstance(node, (_Tag, _Not)) else f"({text})"


def _group(node: _Node, text: str) -> str:
    return f"({text})" if isinstance(node, _Or) else text


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens = self._tokenize(text)
        self.pos = 0

    @staticmethod
    def _tokenize(text: str) -> list[str]:
        tokens: list[str] = []
        pos = 0
        stripped = text.rstrip()
        while pos < len(stripped):
            match = _TOKEN_RE.match(stripped, pos)
            if not match:
                raise TagExpressionError(f"Unexpected input at {pos} in tag expression: {text!r}")
            token = match.group(1)
            if token[0].isalpha() and token not in _KEYWORDS:
                raise TagExpressionError(f"Tags must start with '@': {token!r} in {text!r}")
            tokens.append(token)
            pos = match.end()
        return tokens

    def _peek(self) -> str | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            raise TagExpressionError(f"Unexpected end of tag expression: {self.text!r}")
        self.pos += 1
        return token

    def parse(self) -> _Node:
        if not self.tokens:
            raise TagExpressionError("Tag expression is empty")
        node = self._expr()
        if self._peek() is not None:
            raise TagExpressionError(f"Unexpected {self._peek()!r} in tag expression: {self.text!r}")
        return node

    def _expr(self) -> _Node:
        node = self._term()
        while self._peek() == "or":
            self._next()
            node = _Or(node, self._term())
        return node

    def _term(self) -> _Node:
        node = self._factor()
        while self._peek() == "and":
            self._next()
            node = _And(node, self._factor())
        return node

    def _factor(self) -> _Node:
        token = self._next()
        if token == "not":
            return _Not(self._factor())
        if token == "(":
            node = self._expr()
            if self._next() != ")":
                raise TagExpressionError(f"Missing ')' in tag expression: {self.text!r}")
            return node
        if token.startswith("@"):
            return _Tag(token[1:])
        raise TagExpressionError(f"Unexpected {token!r} in tag expression: {self.text!r}")


class TagExpression:
    """Parsed tag expression.

    Example:
        expr = TagExpression.parse("@web and not @pending")
        expr.evaluate({"web", "smoke"})   # True
        expr.marker_expression()          # "web and not pending"
    """

    def __init__(self, root: _Node, source: str) -> None:
        self._root = root
        self.source = source

    @classmethod
    def parse(cls, text: str) -> TagExpression:
        return cls(_Parser(text).parse(), text.strip())

    def evaluate(self, tags: Iterable[str]) -> bool:
        """Evaluate against scenario tags (with or without leading ``@``)."""
        return self._root.evaluate(frozenset(tag.lstrip("@") for tag in tags))

    def marker_expression(self) -> str:
        return self._root.to_marker()

    def and_(self, other: TagExpression) -> TagExpression:
        """Combine so that both expressions must hold."""
        return TagExpression(_And(self._root, other._root), f"({self.source}) and ({other.source})")

    def __str__(self) -> str:
        return str(self._root)

    def __repr__(self) -> str:
        return f"TagExpression({self.source!r})"
