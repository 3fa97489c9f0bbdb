"""
Code generation backends.

Contains target specific code generators.
"""

from __future__ import annotations

from .base import CodeBackend, CompilationError, InvalidASTError, UnknownTargetError
from .cxx_backend import CXXAstTransformer, CXXBackend
from .ts_mobx_backend import TSMobXBackend

__all__ = [
    "CodeBackend",
    "CompilationError",
    "InvalidASTError",
    "UnknownTargetError",
    "CXXAstTransformer",
    "CXXBackend",
    "TSMobXBackend",
]
