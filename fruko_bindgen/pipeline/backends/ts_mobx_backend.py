"""
TypeScript code generation backend using mobx-state-tree models.

The AST is not transformed at all, as mobx-state-tree allows inline model
definitions, so the declaration structure maps directly onto the output.

Each root level declaration is exported twice: once as the runtime model
built from `types`, and once as a snapshot type derived from it.
"""

from __future__ import annotations

import logging

from ..config import CompilationInfo
from ..schema_ast.nodes import (
    ArrayType,
    ASTNode,
    DataDefinition,
    DataType,
    EnumDeclaration,
    EnumMemberDeclaration,
    NamedStatementList,
    OptionType,
    PrimitiveKind,
    PrimitiveType,
    StructDeclaration,
    StructMemberDeclaration,
    TypeLiteral,
    UserDefinedType,
    is_declaration,
)
from .base import CodeBackend, InvalidASTError

logger = logging.getLogger(__name__)

NUMERIC_TYPE = "types.num"


class TSMobXBackend(CodeBackend):
    """TypeScript mobx-state-tree code generation backend."""

    TEMPLATE_LANG = "ts_mobx"
    FILE_EXTENSION = "ts"

    # Every numeric width collapses onto the single runtime number type
    TYPE_MAP = {
        PrimitiveKind.U8: NUMERIC_TYPE,
        PrimitiveKind.I8: NUMERIC_TYPE,
        PrimitiveKind.U16: NUMERIC_TYPE,
        PrimitiveKind.I16: NUMERIC_TYPE,
        PrimitiveKind.U32: NUMERIC_TYPE,
        PrimitiveKind.I32: NUMERIC_TYPE,
        PrimitiveKind.U64: NUMERIC_TYPE,
        PrimitiveKind.I64: NUMERIC_TYPE,
        PrimitiveKind.F32: NUMERIC_TYPE,
        PrimitiveKind.F64: NUMERIC_TYPE,
        PrimitiveKind.CHAR: "types.char",
        PrimitiveKind.STRING: "types.string",
        PrimitiveKind.BOOL: "types.bool",
    }

    def __init__(self) -> None:
        super().__init__()
        self.prefix_template = self.get_template("prefix")
        self.export_template = self.get_template("export")

    def generate(self, ast: ASTNode, compilation_info: CompilationInfo) -> str:
        """Generate the preamble followed by the model exports."""
        body = self.render(ast)
        prefix = self.prefix_template.render(
            comment_prefix=self._get_comment_prefix(),
            preamble_comments=self._comment_lines(compilation_info.preamble_comments),
        )
        return prefix + body

    @staticmethod
    def _comment_lines(preamble_comments) -> list[str]:
        """Split multi-line preamble entries so that every line stays a comment."""
        lines: list[str] = []
        for comment in preamble_comments:
            lines.extend(comment.splitlines() or [comment])
        return lines

    def render(self, node: ASTNode) -> str:
        """Render an AST node; a DataDefinition renders as top level exports."""
        if isinstance(node, DataDefinition):
            logger.debug("Generating TypeScript MobX exports for %d declarations", len(node.child_nodes))
            return "".join(self.render_export(child) for child in node.child_nodes)

        if isinstance(node, StructDeclaration):
            members = "".join(f"{self.render(child)}, " for child in node.child_nodes)
            return f"types.model({{ {members} }})"

        if isinstance(node, EnumDeclaration):
            labels = "".join(f"{self.render(child)}, " for child in node.child_nodes)
            return f"types.enum([ {labels} ])"

        if isinstance(node, StructMemberDeclaration):
            return f"{node.name}: {self.render(node.data_type)}"

        if isinstance(node, EnumMemberDeclaration):
            return f"'{node.name}'"

        if isinstance(node, TypeLiteral):
            return self.translate_type(node.data_type)

        raise InvalidASTError(node)

    def render_export(self, node: ASTNode) -> str:
        """
        Render a root level declaration as a model export and its snapshot type.

        Raises:
            InvalidASTError: If node is not a struct or enum declaration
        """
        if not is_declaration(node):
            raise InvalidASTError(node, "only struct and enum declarations can be exported")

        declaration: NamedStatementList = node
        return self.export_template.render(name=declaration.name, model=self.render(declaration))

    def translate_type(self, data_type: DataType) -> str:
        """Translate a data type to a mobx-state-tree type."""
        if isinstance(data_type, PrimitiveType):
            return self.TYPE_MAP[data_type.kind]

        if isinstance(data_type, OptionType):
            return f"types.maybe({self.translate_type(data_type.inner)})"

        if isinstance(data_type, ArrayType):
            return f"types.array({self.translate_type(data_type.inner)})"

        if isinstance(data_type, UserDefinedType):
            return data_type.name

        raise InvalidASTError(reason=f"unknown data type {data_type!r}")
