"""
deflang.defc.core: shared records used across compiler stages.

Modules:
  - diagnostics: Diagnostic record produced by the driver
"""

__all__ = [
	"diagnostics",
]
