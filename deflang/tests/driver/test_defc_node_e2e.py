# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Top-surface defc → JavaScript → node execution smoke test.
"""

from __future__ import annotations

import shutil
import subprocess

import pytest

from deflang.defc import compile_source, link_program


def _run_js_with_node(program: str) -> str:
	"""Run the program under node and return its stdout."""
	node = shutil.which("node") or shutil.which("nodejs")
	if node is None:
		pytest.skip("node not available")
	res = subprocess.run([node], input=program, capture_output=True, text=True)
	if res.returncode != 0:
		raise RuntimeError(f"node failed: {res.stderr}")
	return res.stdout


def test_add_two_params() -> None:
	program = link_program(compile_source("def f(x,y) add(x,y) end"))
	assert _run_js_with_node(program).strip() == "3"


def test_nested_adds() -> None:
	program = link_program(compile_source("def f(a,b) add(a,add(b,add(10,20))) end"))
	assert _run_js_with_node(program).strip() == "33"
