# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
deflang compiler package (`defc`).

Front-end modules live under `parser`, the JavaScript emitter under `codegen`.
The CLI entrypoint is `deflang.defc.defc:main`.
"""

from .defc import compile_file, compile_source, link_program, main

__all__ = ["compile_file", "compile_source", "link_program", "main"]
