"""Composition utilities: pipe() for threading a value through steps."""

from klaw_option.compose.pipe import pipe

__all__ = ['pipe']
