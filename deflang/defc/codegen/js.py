# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
AST → JavaScript text.

Post-order tree walk: children are generated first and their text is spliced
into the parent. Output formats:

  Def     → function NAME(P1,P2) { return BODY };
  Call    → NAME(A1,A2)
  VarRef  → NAME
  Integer → decimal literal

The emitter holds no state, so generating the same tree twice yields identical
text.
"""

from __future__ import annotations

from ..parser.ast import Call, Def, Integer, Node, VarRef


def generate(node: Node) -> str:
	if isinstance(node, Def):
		return "function {}({}) {{ return {} }};".format(
			node.name,
			",".join(node.params),
			generate(node.body),
		)
	if isinstance(node, Call):
		return "{}({})".format(node.name, ",".join(generate(arg) for arg in node.args))
	if isinstance(node, VarRef):
		return node.name
	if isinstance(node, Integer):
		return str(node.value)
	# Unreachable for trees built by the parser.
	raise TypeError(f"unexpected node type: {type(node).__name__}")


__all__ = ["generate"]
