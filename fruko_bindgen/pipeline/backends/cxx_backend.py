"""
C++ code generation backend.

C++ has no inline type declarations inside a field, so the AST is first
normalized: inline struct and enum declarations are pulled out of line into
top level declarations placed before their first use. The normalized AST is
then rendered bottom-up into struct and enum class declarations.
"""

from __future__ import annotations

import copy
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


class CXXAstTransformer:
    """
    Pulls inline struct and enum declarations out of line.

    The input AST is left untouched; a new DataDefinition is built holding
    every declaration at top level, children before the declarations that
    reference them.
    """

    def __init__(self) -> None:
        self.declarations: list[ASTNode] = []

    def transform(self, ast: ASTNode) -> DataDefinition:
        """
        Normalize an AST.

        Args:
            ast: A DataDefinition, or a single struct/enum declaration

        Returns:
            A flat DataDefinition without inline declarations

        Raises:
            InvalidASTError: If a top level node is not a declaration
        """
        self.declarations = []

        if isinstance(ast, DataDefinition):
            for child in ast.child_nodes:
                self._hoist(child)
        else:
            self._hoist(ast)

        return DataDefinition(child_nodes=self.declarations)

    def _hoist(self, declaration: ASTNode) -> None:
        if not is_declaration(declaration):
            raise InvalidASTError(declaration, "expected a struct or enum declaration")

        child_nodes = [self._transform_member(member) for member in declaration.child_nodes]
        self.declarations.append(type(declaration)(name=declaration.name, child_nodes=child_nodes))

    def _transform_member(self, member: ASTNode) -> ASTNode:
        if isinstance(member, StructMemberDeclaration) and is_declaration(member.data_type):
            inline_declaration: NamedStatementList = member.data_type
            self._hoist(inline_declaration)
            logger.debug("Hoisted inline declaration '%s' out of member '%s'", inline_declaration.name, member.name)
            return StructMemberDeclaration(
                name=member.name,
                data_type=TypeLiteral(UserDefinedType(inline_declaration.name)),
            )
        return copy.deepcopy(member)


class CXXBackend(CodeBackend):
    """C++ code generation backend."""

    TEMPLATE_LANG = "cxx"
    FILE_EXTENSION = "hpp"

    # Standard fixed width numeric types
    TYPE_MAP = {
        PrimitiveKind.U8: "std::uint8_t",
        PrimitiveKind.I8: "std::int8_t",
        PrimitiveKind.U16: "std::uint16_t",
        PrimitiveKind.I16: "std::int16_t",
        PrimitiveKind.U32: "std::uint32_t",
        PrimitiveKind.I32: "std::int32_t",
        PrimitiveKind.U64: "std::uint64_t",
        PrimitiveKind.I64: "std::int64_t",
        PrimitiveKind.F32: "float",
        PrimitiveKind.F64: "double",
        PrimitiveKind.CHAR: "char",
        PrimitiveKind.STRING: "std::string",
        PrimitiveKind.BOOL: "bool",
    }

    def __init__(self) -> None:
        super().__init__()
        self.struct_template = self.get_template("struct")
        self.enum_template = self.get_template("enum")

    def generate(self, ast: ASTNode, compilation_info: CompilationInfo) -> str:
        """Generate C++ code. The preamble is not used by this target."""
        normalized = self.transform(ast)
        logger.debug("Generating C++ for %d declarations", len(normalized.child_nodes))
        return self.render(normalized)

    def transform(self, ast: ASTNode) -> DataDefinition:
        """Normalize the AST so that no declaration is inline."""
        return CXXAstTransformer().transform(ast)

    def render(self, node: ASTNode) -> str:
        """Render a normalized AST node to C++."""
        if isinstance(node, DataDefinition):
            return "".join(self.render(child) for child in node.child_nodes)

        if isinstance(node, StructDeclaration):
            body = "".join(self.render(child) for child in node.child_nodes)
            return self.struct_template.render(name=node.name, body=body)

        if isinstance(node, EnumDeclaration):
            labels = [self.render(child) for child in node.child_nodes]
            return self.enum_template.render(name=node.name, labels=labels)

        if isinstance(node, StructMemberDeclaration):
            if not isinstance(node.data_type, TypeLiteral):
                raise InvalidASTError(node.data_type, f"member '{node.name}' type must be a type literal")
            return f"{self.render(node.data_type)} {node.name};"

        if isinstance(node, EnumMemberDeclaration):
            return node.name

        if isinstance(node, TypeLiteral):
            return self.translate_type(node.data_type)

        raise InvalidASTError(node)

    def translate_type(self, data_type: DataType) -> str:
        """Translate a data type to a C++ type; containers are translated recursively."""
        if isinstance(data_type, PrimitiveType):
            return self.TYPE_MAP[data_type.kind]

        if isinstance(data_type, OptionType):
            return f"std::optional<{self.translate_type(data_type.inner)}>"

        if isinstance(data_type, ArrayType):
            return f"std::vector<{self.translate_type(data_type.inner)}>"

        if isinstance(data_type, UserDefinedType):
            return data_type.name

        raise InvalidASTError(reason=f"unknown data type {data_type!r}")
