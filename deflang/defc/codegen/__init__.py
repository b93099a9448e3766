# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Code generators. Only the JavaScript emitter exists.
"""

from .js import generate

__all__ = ["generate"]
