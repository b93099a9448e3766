# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure for the driver.

Stages raise their own exceptions (`LexError`, `ParseError`); the driver turns
them into a Diagnostic so both the human and the JSON renderers work from the
same record. There is no line/column tracking: the message names the offending
token or text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Stable diagnostic codes, one per failing stage.
CODE_LEX = "E-LEX"
CODE_PARSE = "E-PARSE"
CODE_IO = "E-IO"


@dataclass
class Diagnostic:
	"""Represents a compiler diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	# Stage that produced the diagnostic: "lexer", "parser" or "io".
	phase: str | None = None
	severity: str = "error"
	file: str | None = None
	notes: list[str] = field(default_factory=list)

	def to_json(self) -> dict:
		"""Render to a structured JSON-friendly dict."""
		return {
			"phase": self.phase,
			"message": self.message,
			"severity": self.severity,
			"file": self.file,
			"code": self.code,
			"notes": list(self.notes),
		}

	def render(self) -> str:
		where = self.file or "<input>"
		text = f"{where}: {self.severity}: {self.message}"
		for note in self.notes:
			text += f"\n  note: {note}"
		return text


__all__ = ["CODE_IO", "CODE_LEX", "CODE_PARSE", "Diagnostic"]
