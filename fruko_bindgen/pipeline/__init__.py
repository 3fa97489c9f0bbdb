"""
Pipeline - data definition to code generator.

This module provides a multi-phase architecture for generating code from
data definition sources:

1. Phase 1 (Lexer): Turn source text into tokens
2. Phase 2 (Parser): Parse tokens into an AST
3. Phase 3 (Target registry): Select the backend for a target identifier
4. Phase 4 (Backend): Transform the AST if the target needs it, and emit code
5. Phase 5 (Output): Validate and atomically write the generated file
"""

from __future__ import annotations

from .backends import CompilationError, InvalidASTError, UnknownTargetError
from .config import CompilationInfo, GeneratorConfig, OutputConfig, OutputMode
from .errors import FrukoBindgenError
from .generator import PipelineGenerator
from .lexer import LexError, UnknownCharacterError, lex_tokens
from .output import AtomicWriter, OutputWriteError
from .schema_ast import ParseError, UnexpectedEndOfTokensError, UnexpectedTokenError, parse_tokens
from .targets import available_targets, resolve_target

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "CompilationInfo",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "lex_tokens",
    "parse_tokens",
    "resolve_target",
    "available_targets",
    "FrukoBindgenError",
    "LexError",
    "UnknownCharacterError",
    "ParseError",
    "UnexpectedTokenError",
    "UnexpectedEndOfTokensError",
    "CompilationError",
    "UnknownTargetError",
    "InvalidASTError",
    "OutputWriteError",
]
