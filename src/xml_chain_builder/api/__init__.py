"""Composition API for building XML documents.

Provides ``step`` and ``pipe`` for threading outcomes through the pure builder
operations, and the configured ``XMLBuilder`` fluent wrapper.
"""

from .pipeline import XMLBuilder, pipe, step

__all__ = [
    "XMLBuilder",
    "pipe",
    "step",
]
