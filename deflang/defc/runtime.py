# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Fixed JavaScript text linked around generated code.

The prelude defines the builtins generated code may call; the invocation
snippet exercises the compiled function when the program is run under node.
"""

from __future__ import annotations

RUNTIME_PRELUDE = "function add(x, y) { return x + y };"

DEFAULT_INVOCATION = "console.log(f(1,2));"

__all__ = ["RUNTIME_PRELUDE", "DEFAULT_INVOCATION"]
