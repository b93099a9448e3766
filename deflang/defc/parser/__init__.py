# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Front-end for the `def` language: tokenizer, AST model and parser.

Errors from each stage propagate unchanged; the driver in
`deflang.defc.defc` converts them into diagnostics.
"""

from __future__ import annotations

from . import ast
from .ast import Call, Def, Integer, Node, VarRef, format_tree
from .lexer import LexError, Token, TokenKind, TOKEN_PATTERNS, Tokenizer, tokenize
from .parser import END_OF_INPUT, MAX_NESTING, ParseError, Parser, parse, parse_program

__all__ = [
	"ast",
	"Call",
	"Def",
	"Integer",
	"Node",
	"VarRef",
	"format_tree",
	"LexError",
	"Token",
	"TokenKind",
	"TOKEN_PATTERNS",
	"Tokenizer",
	"tokenize",
	"END_OF_INPUT",
	"MAX_NESTING",
	"ParseError",
	"Parser",
	"parse",
	"parse_program",
]
