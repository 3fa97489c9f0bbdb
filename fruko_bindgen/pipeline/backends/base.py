"""
Base class for code generation backends.

Defines the interface that all target specific backends must implement,
and the errors they raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..config import CompilationInfo
from ..errors import FrukoBindgenError
from ..schema_ast.nodes import ASTNode, DataType, PrimitiveKind


class CompilationError(FrukoBindgenError):
    """Raised when code cannot be generated for a target."""

    pass


class UnknownTargetError(CompilationError):
    """Raised when a target identifier does not match any backend."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        message = f"Unknown compilation target: {name}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class InvalidASTError(CompilationError):
    """Raised when a backend is handed a node it cannot generate code for."""

    def __init__(self, node: ASTNode | None = None, reason: str = ""):
        self.node = node
        detail = reason or (f"unexpected {type(node).__name__}" if node is not None else "")
        message = "Invalid AST to generator"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from primitive kinds to target types
    TYPE_MAP: dict[PrimitiveKind, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self) -> None:
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

    def get_template(self, name: str) -> jinja2.Template:
        """Load the template NAME.FILE_EXTENSION.jinja2 for this target."""
        return self.jinja_env.get_template(f"{name}.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(self, ast: ASTNode, compilation_info: CompilationInfo) -> str:
        """
        Generate code from a parsed AST.

        Args:
            ast: The data definition AST (never mutated)
            compilation_info: Source file name and preamble comment lines

        Returns:
            Generated code as a string

        Raises:
            InvalidASTError: If the AST is malformed
        """

    @abstractmethod
    def translate_type(self, data_type: DataType) -> str:
        """
        Translate a data type to a target specific type string.

        Args:
            data_type: The data type

        Returns:
            Target specific type string
        """

    def _get_comment_prefix(self) -> str:
        """Get the line comment prefix for the target."""
        return "//"
