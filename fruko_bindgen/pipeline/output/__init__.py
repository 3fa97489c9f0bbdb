"""
Output module.

Writes generated code to disk safely.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter, OutputWriteError, validate_brackets

__all__ = [
    "AtomicWriter",
    "OutputWriteError",
    "validate_brackets",
]
