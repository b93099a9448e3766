# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
AST definitions for the `def` language.

The tree is built bottom-up by the parser and never mutated afterwards: nodes
are frozen and child sequences are tuples.

Pipeline placement:
  Surface syntax → tokens → AST (this file) → JavaScript
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Def:
	"""Function definition: `def name(params) body end`."""
	name: str
	params: tuple[str, ...]
	body: "Node"


@dataclass(frozen=True)
class Integer:
	"""Integer literal."""
	value: int


@dataclass(frozen=True)
class Call:
	"""Call expression: `name(args)`."""
	name: str
	args: tuple[Node, ...]


@dataclass(frozen=True)
class VarRef:
	"""Bare identifier reference."""
	name: str


Node = Def | Integer | Call | VarRef


def format_tree(node: Node, indent: int = 0) -> str:
	"""Render `node` as an indented tree, one node per line."""
	pad = "  " * indent
	if isinstance(node, Def):
		params = ", ".join(node.params)
		lines = [f"{pad}Def {node.name}({params})", format_tree(node.body, indent + 1)]
		return "\n".join(lines)
	if isinstance(node, Call):
		lines = [f"{pad}Call {node.name}"]
		lines.extend(format_tree(arg, indent + 1) for arg in node.args)
		return "\n".join(lines)
	if isinstance(node, VarRef):
		return f"{pad}VarRef {node.name}"
	if isinstance(node, Integer):
		return f"{pad}Integer {node.value}"
	raise TypeError(f"unexpected node type: {type(node).__name__}")


__all__ = ["Def", "Integer", "Call", "VarRef", "Node", "format_tree"]
