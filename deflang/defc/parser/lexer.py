# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tokenizer for the `def` language.

Token classes are tried in the fixed order of `TOKEN_PATTERNS`, each anchored at
the cursor; the first match wins. Keywords come before the generic identifier
pattern, otherwise `def`/`end` would lex as identifiers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
	"""Lexical classes; each value is the regular expression for the class."""

	DEF = r"\bdef\b"
	END = r"\bend\b"
	IDENTIFIER = r"\b[a-zA-Z]+\b"
	INTEGER = r"\b[0-9]+\b"
	OPEN_PAREN = r"\("
	CLOSE_PAREN = r"\)"
	COMMA = r","

	def __str__(self) -> str:
		return self.name


# Priority order; reordering changes which class keywords fall into.
TOKEN_PATTERNS: tuple[tuple[TokenKind, re.Pattern[str]], ...] = tuple(
	(kind, re.compile(kind.value))
	for kind in (
		TokenKind.DEF,
		TokenKind.END,
		TokenKind.IDENTIFIER,
		TokenKind.INTEGER,
		TokenKind.OPEN_PAREN,
		TokenKind.CLOSE_PAREN,
		TokenKind.COMMA,
	)
)


@dataclass(frozen=True)
class Token:
	kind: TokenKind
	text: str

	def __str__(self) -> str:
		return f"{self.kind} {self.text}"


class LexError(ValueError):
	"""
	Raised when no token pattern matches at the cursor.

	`remaining` is the unconsumed source starting at the offending character.
	"""

	def __init__(self, remaining: str) -> None:
		super().__init__(f"couldn't match token on {remaining!r}")
		self.remaining = remaining


class Tokenizer:
	def __init__(self, source: str) -> None:
		self.source = source
		self.pos = 0

	def tokenize(self) -> list[Token]:
		tokens: list[Token] = []
		self._skip_whitespace()
		while self.pos < len(self.source):
			tokens.append(self._tokenize_one_token())
			self._skip_whitespace()
		return tokens

	def _skip_whitespace(self) -> None:
		while self.pos < len(self.source) and self.source[self.pos].isspace():
			self.pos += 1

	def _tokenize_one_token(self) -> Token:
		for kind, pattern in TOKEN_PATTERNS:
			match = pattern.match(self.source, self.pos)
			if match is not None:
				self.pos = match.end()
				return Token(kind, match.group(0))
		raise LexError(self.source[self.pos:])


def tokenize(source: str) -> list[Token]:
	"""Split `source` into tokens, failing on the first unrecognized character."""
	return Tokenizer(source).tokenize()


__all__ = ["TokenKind", "TOKEN_PATTERNS", "Token", "LexError", "Tokenizer", "tokenize"]
