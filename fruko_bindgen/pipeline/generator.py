"""
Pipeline generator.

Runs the phases of the pipeline for one data definition source:

1. Lexer: source text to tokens
2. Parser: tokens to AST
3. Target registry: target identifier to backend
4. Backend: AST to generated code

The source is lexed and parsed once; every requested target reuses the same
AST, which backends never modify.
"""

from __future__ import annotations

import logging

from .config import CompilationInfo, GeneratorConfig
from .lexer import lex_tokens
from .schema_ast import DataDefinition, parse_tokens
from .targets import resolve_target

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates code for one or more targets from a data definition source."""

    def __init__(
        self,
        source_name: str,
        source: str,
        config: GeneratorConfig | None = None,
        command_line: str | None = None,
    ):
        """
        Initialize the generator.

        Args:
            source_name: Name of the source file, used in the preamble
            source: Data definition source text
            config: Code generation configuration
            command_line: Command line mentioned in the preamble, if enabled
        """
        self.source_name = source_name
        self.source = source
        self.config = config or GeneratorConfig()
        self.compilation_info = CompilationInfo.build(source_name, self.config, command_line)
        self._ast: DataDefinition | None = None

    @property
    def ast(self) -> DataDefinition:
        """The parsed AST (lexed and parsed on first access)."""
        if self._ast is None:
            logger.debug("Parsing %s", self.source_name)
            self._ast = parse_tokens(lex_tokens(self.source))
        return self._ast

    def generate(self, target: str) -> str:
        """
        Generate code for a target.

        Args:
            target: Target identifier, e.g. "cpp" or "ts-mobx"

        Returns:
            Generated code

        Raises:
            LexError: If the source cannot be tokenized
            ParseError: If the tokens do not form a data definition
            CompilationError: If the target is unknown or the AST is invalid
        """
        backend = resolve_target(target)
        return backend.generate(self.ast, self.compilation_info)

    def generate_targets(self, targets: list[str]) -> dict[str, str]:
        """
        Generate code for several targets.

        Args:
            targets: Target identifiers

        Returns:
            Mapping from target identifier to generated code, in request order
        """
        return {target: self.generate(target) for target in targets}
