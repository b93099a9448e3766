# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Recursive-descent parser for the `def` language.

Grammar (one top-level definition):

  def    ::= "def" IDENTIFIER params expr "end"
  params ::= "(" [ IDENTIFIER ("," IDENTIFIER)* ] ")"
  expr   ::= INTEGER
           | IDENTIFIER args        (call)
           | IDENTIFIER             (variable reference)
  args   ::= "(" [ expr ("," expr)* ] ")"

Each production is one method. `expr` picks its alternative with a two-token
lookahead that consumes nothing.
"""

from __future__ import annotations

from typing import Sequence

from .ast import Call, Def, Integer, Node, VarRef
from .lexer import Token, TokenKind, tokenize

END_OF_INPUT = "end of input"

# Deepest call nesting the parser accepts.
MAX_NESTING = 200


class ParseError(ValueError):
	"""
	Raised when a required token is missing or of the wrong kind.

	`expected` is a TokenKind, or END_OF_INPUT when leftover tokens follow the
	definition. `actual` is the offending token, or None when the stream ran out.
	"""

	def __init__(
		self,
		expected: TokenKind | str,
		actual: Token | None,
		*,
		message: str | None = None,
	) -> None:
		if message is None:
			got = END_OF_INPUT if actual is None else f"{actual.kind} {actual.text!r}"
			message = f"expected {expected} but got {got}"
		super().__init__(message)
		self.expected = expected
		self.actual = actual


class Parser:
	def __init__(self, tokens: Sequence[Token]) -> None:
		self.tokens = tuple(tokens)
		self.pos = 0
		self.depth = 0

	def parse(self, *, allow_trailing: bool = False) -> Def:
		"""
		Parse exactly one definition.

		Tokens left over after `end` are an error unless `allow_trailing` is set,
		in which case they are ignored.
		"""
		tree = self._parse_def()
		if not allow_trailing and self.pos < len(self.tokens):
			raise ParseError(END_OF_INPUT, self.tokens[self.pos])
		return tree

	def _parse_def(self) -> Def:
		self.consume(TokenKind.DEF)
		name = self.consume(TokenKind.IDENTIFIER).text
		params = self._parse_params()
		body = self._parse_expr()
		self.consume(TokenKind.END)
		return Def(name=name, params=params, body=body)

	def _parse_params(self) -> tuple[str, ...]:
		params: list[str] = []
		self.consume(TokenKind.OPEN_PAREN)
		if self.peek(TokenKind.IDENTIFIER):
			params.append(self.consume(TokenKind.IDENTIFIER).text)
			while self.peek(TokenKind.COMMA):
				self.consume(TokenKind.COMMA)
				params.append(self.consume(TokenKind.IDENTIFIER).text)
		self.consume(TokenKind.CLOSE_PAREN)
		return tuple(params)

	def _parse_expr(self) -> Node:
		if self.peek(TokenKind.INTEGER):
			return self._parse_integer()
		if self.peek(TokenKind.IDENTIFIER) and self.peek(TokenKind.OPEN_PAREN, offset=1):
			return self._parse_call()
		return self._parse_var_ref()

	def _parse_integer(self) -> Integer:
		return Integer(value=int(self.consume(TokenKind.INTEGER).text))

	def _parse_call(self) -> Call:
		name_tok = self.consume(TokenKind.IDENTIFIER)
		if self.depth >= MAX_NESTING:
			raise ParseError(
				f"at most {MAX_NESTING} nested calls",
				name_tok,
				message=f"calls nested deeper than {MAX_NESTING} levels at {name_tok.text!r}",
			)
		self.depth += 1
		try:
			args = self._parse_args()
		finally:
			self.depth -= 1
		return Call(name=name_tok.text, args=args)

	def _parse_args(self) -> tuple[Node, ...]:
		args: list[Node] = []
		self.consume(TokenKind.OPEN_PAREN)
		if not self.peek(TokenKind.CLOSE_PAREN):
			args.append(self._parse_expr())
			while self.peek(TokenKind.COMMA):
				self.consume(TokenKind.COMMA)
				args.append(self._parse_expr())
		self.consume(TokenKind.CLOSE_PAREN)
		return tuple(args)

	def _parse_var_ref(self) -> VarRef:
		return VarRef(name=self.consume(TokenKind.IDENTIFIER).text)

	def consume(self, kind: TokenKind) -> Token:
		"""Return the next token and advance, if it is of `kind`."""
		if self.pos >= len(self.tokens):
			raise ParseError(kind, None)
		token = self.tokens[self.pos]
		if token.kind is not kind:
			raise ParseError(kind, token)
		self.pos += 1
		return token

	def peek(self, kind: TokenKind, offset: int = 0) -> bool:
		idx = self.pos + offset
		return idx < len(self.tokens) and self.tokens[idx].kind is kind


def parse(tokens: Sequence[Token], *, allow_trailing: bool = False) -> Def:
	return Parser(tokens).parse(allow_trailing=allow_trailing)


def parse_program(source: str, *, allow_trailing: bool = False) -> Def:
	"""Tokenize and parse `source` into a single definition."""
	return parse(tokenize(source), allow_trailing=allow_trailing)


__all__ = ["END_OF_INPUT", "MAX_NESTING", "ParseError", "Parser", "parse", "parse_program"]
