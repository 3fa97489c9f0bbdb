"""
Schema AST (Abstract Syntax Tree) module.

Contains the AST node definitions and the parser for data definitions.
"""

from __future__ import annotations

from .nodes import (
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
from .parser import (
    DataDefinitionParser,
    ParseError,
    UnexpectedEndOfTokensError,
    UnexpectedTokenError,
    parse_tokens,
)

__all__ = [
    "ASTNode",
    "DataDefinition",
    "NamedStatementList",
    "StructDeclaration",
    "EnumDeclaration",
    "StructMemberDeclaration",
    "EnumMemberDeclaration",
    "TypeLiteral",
    "DataType",
    "PrimitiveKind",
    "PrimitiveType",
    "OptionType",
    "ArrayType",
    "UserDefinedType",
    "is_declaration",
    "DataDefinitionParser",
    "ParseError",
    "UnexpectedTokenError",
    "UnexpectedEndOfTokensError",
    "parse_tokens",
]
