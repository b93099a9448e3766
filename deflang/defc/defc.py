#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
defc driver: `def` source → JavaScript program.

The three stages run in order and the first failure aborts the compilation;
no output is written for a failed compile.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .codegen import generate
from .core.diagnostics import CODE_IO, CODE_LEX, CODE_PARSE, Diagnostic
from .parser import LexError, ParseError, format_tree, parse, tokenize
from .runtime import DEFAULT_INVOCATION, RUNTIME_PRELUDE


def compile_source(source: str, *, allow_trailing: bool = False) -> str:
	"""Compile one definition to JavaScript (without prelude/invocation)."""
	tokens = tokenize(source)
	tree = parse(tokens, allow_trailing=allow_trailing)
	return generate(tree)


def compile_file(path: Path, *, allow_trailing: bool = False) -> str:
	return compile_source(Path(path).read_text(encoding="utf-8"), allow_trailing=allow_trailing)


def link_program(
	generated: str,
	*,
	prelude: bool = True,
	invocation: str | None = DEFAULT_INVOCATION,
) -> str:
	"""Join the runtime prelude, generated code and invocation snippet."""
	parts = []
	if prelude:
		parts.append(RUNTIME_PRELUDE)
	parts.append(generated)
	if invocation:
		parts.append(invocation)
	return "\n".join(parts)


def _diagnostic_for(err: Exception, path: Path) -> Diagnostic:
	if isinstance(err, LexError):
		return Diagnostic(message=str(err), code=CODE_LEX, phase="lexer", file=str(path))
	if isinstance(err, ParseError):
		notes = []
		if err.actual is None:
			notes.append("the definition must be closed with `end`")
		return Diagnostic(message=str(err), code=CODE_PARSE, phase="parser", file=str(path), notes=notes)
	return Diagnostic(message=str(err), code=CODE_IO, phase="io", file=str(path))


def _report_failure(diags: list[Diagnostic], as_json: bool) -> int:
	if as_json:
		payload = {"exit_code": 1, "diagnostics": [d.to_json() for d in diags]}
		print(json.dumps(payload))
	else:
		for d in diags:
			print(d.render(), file=sys.stderr)
	return 1


def _emit_text(args: argparse.Namespace, source: str) -> str:
	tokens = tokenize(source)
	if args.emit == "tokens":
		return "\n".join(str(tok) for tok in tokens)
	tree = parse(tokens, allow_trailing=args.allow_trailing)
	if args.emit == "ast":
		return format_tree(tree)
	invocation = None if args.no_invoke else args.invoke
	return link_program(generate(tree), prelude=not args.no_prelude, invocation=invocation)


def main(argv: list[str] | None = None) -> int:
	"""
	Compile a `def` source file to a runnable JavaScript program.

	With --json, prints structured diagnostics (phase/message/severity/file)
	and an exit_code; otherwise prints human-readable messages to stderr.
	"""
	parser = argparse.ArgumentParser(prog="defc", description="defc: def-language → JavaScript compiler")
	parser.add_argument("source", type=Path, help="Path to the def source file")
	parser.add_argument("-o", "--output", type=Path, help="Write the result to this path instead of stdout")
	parser.add_argument(
		"--emit",
		choices=["js", "tokens", "ast"],
		default="js",
		help="What to print: the linked JavaScript program (default), the token stream, or the AST",
	)
	parser.add_argument("--no-prelude", action="store_true", help="Do not prepend the runtime prelude")
	invoke = parser.add_mutually_exclusive_group()
	invoke.add_argument(
		"--invoke",
		default=DEFAULT_INVOCATION,
		metavar="SNIPPET",
		help=f"JavaScript appended after the generated code (default: {DEFAULT_INVOCATION!r})",
	)
	invoke.add_argument("--no-invoke", action="store_true", help="Do not append an invocation snippet")
	parser.add_argument(
		"--allow-trailing",
		action="store_true",
		help="Ignore tokens after the closing `end` instead of reporting them",
	)
	parser.add_argument("--json", action="store_true", help="Emit diagnostics as JSON on stdout")
	args = parser.parse_args(argv)

	source_path: Path = args.source
	try:
		source = source_path.read_text(encoding="utf-8")
	except (OSError, UnicodeDecodeError) as err:
		return _report_failure([_diagnostic_for(err, source_path)], args.json)

	try:
		text = _emit_text(args, source)
	except (LexError, ParseError) as err:
		return _report_failure([_diagnostic_for(err, source_path)], args.json)

	if args.output is not None:
		try:
			args.output.parent.mkdir(parents=True, exist_ok=True)
			args.output.write_text(text + "\n", encoding="utf-8")
		except OSError as err:
			return _report_failure([_diagnostic_for(err, args.output)], args.json)
		if args.json:
			print(json.dumps({"exit_code": 0, "diagnostics": []}))
		return 0

	if args.json:
		print(json.dumps({"exit_code": 0, "diagnostics": [], "output": text}))
	else:
		print(text)
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
