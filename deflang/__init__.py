# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
deflang: a three-stage compiler for the single-function `def` language.

Stages:
  lexer:   source text → tokens
  parser:  tokens → AST
  codegen: AST → JavaScript text
"""

__all__ = ["defc"]
