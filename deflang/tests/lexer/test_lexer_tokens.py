# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from deflang.defc.parser import LexError, Token, TokenKind, TOKEN_PATTERNS, tokenize


def _kinds(source: str) -> list[TokenKind]:
	return [tok.kind for tok in tokenize(source)]


def test_tokenize_simple_definition() -> None:
	assert tokenize("def f(x,y) add(x,y) end") == [
		Token(TokenKind.DEF, "def"),
		Token(TokenKind.IDENTIFIER, "f"),
		Token(TokenKind.OPEN_PAREN, "("),
		Token(TokenKind.IDENTIFIER, "x"),
		Token(TokenKind.COMMA, ","),
		Token(TokenKind.IDENTIFIER, "y"),
		Token(TokenKind.CLOSE_PAREN, ")"),
		Token(TokenKind.IDENTIFIER, "add"),
		Token(TokenKind.OPEN_PAREN, "("),
		Token(TokenKind.IDENTIFIER, "x"),
		Token(TokenKind.COMMA, ","),
		Token(TokenKind.IDENTIFIER, "y"),
		Token(TokenKind.CLOSE_PAREN, ")"),
		Token(TokenKind.END, "end"),
	]


@pytest.mark.parametrize("source,kind", [("def", TokenKind.DEF), ("end", TokenKind.END)])
def test_keywords_win_over_identifier(source: str, kind: TokenKind) -> None:
	assert tokenize(source) == [Token(kind, source)]


def test_keyword_prefix_is_an_identifier() -> None:
	assert tokenize("define ending") == [
		Token(TokenKind.IDENTIFIER, "define"),
		Token(TokenKind.IDENTIFIER, "ending"),
	]


def test_integer_text_is_kept_verbatim() -> None:
	assert tokenize("007 42") == [Token(TokenKind.INTEGER, "007"), Token(TokenKind.INTEGER, "42")]


def test_whitespace_is_ignored() -> None:
	assert tokenize("def f(x) x end") == tokenize("def  f ( x )  x  end")
	assert tokenize("\tdef f(x)\n  x\nend\n") == tokenize("def f(x) x end")


def test_tokenize_is_deterministic() -> None:
	source = "def f() add(1,add(2,3)) end"
	assert tokenize(source) == tokenize(source)


def test_empty_source_yields_no_tokens() -> None:
	assert tokenize("") == []
	assert tokenize("  \n\t ") == []


def test_pattern_table_order() -> None:
	assert [kind for kind, _ in TOKEN_PATTERNS] == [
		TokenKind.DEF,
		TokenKind.END,
		TokenKind.IDENTIFIER,
		TokenKind.INTEGER,
		TokenKind.OPEN_PAREN,
		TokenKind.CLOSE_PAREN,
		TokenKind.COMMA,
	]


def test_unknown_character_raises_lex_error() -> None:
	with pytest.raises(LexError) as excinfo:
		tokenize("def f(x) $ end")
	assert excinfo.value.remaining == "$ end"


@pytest.mark.parametrize("source", ["abc123", "12ab", "x_y"])
def test_glued_word_and_digits_do_not_lex(source: str) -> None:
	with pytest.raises(LexError):
		tokenize(source)


def test_lex_error_stops_at_first_failure() -> None:
	with pytest.raises(LexError) as excinfo:
		tokenize("def f() 1 end # trailing comment")
	assert excinfo.value.remaining.startswith("#")
	assert "#" in str(excinfo.value)


def test_token_kinds_for_call_expression() -> None:
	assert _kinds("add(1,x)") == [
		TokenKind.IDENTIFIER,
		TokenKind.OPEN_PAREN,
		TokenKind.INTEGER,
		TokenKind.COMMA,
		TokenKind.IDENTIFIER,
		TokenKind.CLOSE_PAREN,
	]
