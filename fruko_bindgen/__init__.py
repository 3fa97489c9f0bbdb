"""Fruko Bindgen

A Python package for generating code from data definition files.
Supports C++ struct/enum and TypeScript mobx-state-tree generation with
a lexer/parser/backend pipeline.
"""

from .pipeline import (
    AtomicWriter,
    CompilationInfo,
    FrukoBindgenError,
    GeneratorConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
)
from .version import __version__

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "CompilationInfo",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "FrukoBindgenError",
]
