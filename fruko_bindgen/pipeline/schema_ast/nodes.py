"""
AST (Abstract Syntax Tree) node definitions for data definitions.

These nodes represent the parsed structure of a data definition source.
User defined type names are carried as opaque strings; nothing here checks
that they resolve to a declared struct or enum.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PrimitiveKind(str, Enum):
    """Leaf data types of the language."""

    U8 = "u8"
    I8 = "i8"
    U16 = "u16"
    I16 = "i16"
    U32 = "u32"
    I32 = "i32"
    U64 = "u64"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"
    CHAR = "char"
    STRING = "string"
    BOOL = "bool"


@dataclass
class DataType:
    """Base class for all data types."""

    pass


@dataclass
class PrimitiveType(DataType):
    """A primitive type such as u32 or string."""

    kind: PrimitiveKind = PrimitiveKind.U8


@dataclass
class OptionType(DataType):
    """option(T)"""

    inner: DataType | None = None


@dataclass
class ArrayType(DataType):
    """array(T)"""

    inner: DataType | None = None


@dataclass
class UserDefinedType(DataType):
    """A reference to a struct or enum by name (unresolved)."""

    name: str = ""


@dataclass
class ASTNode:
    """Base class for all AST nodes."""

    pass


@dataclass
class NamedStatementList(ASTNode):
    """A named body of child nodes: either a struct or an enum."""

    name: str = ""
    child_nodes: list[ASTNode] = field(default_factory=list)


@dataclass
class StructDeclaration(NamedStatementList):
    """struct NAME { ... }"""

    pass


@dataclass
class EnumDeclaration(NamedStatementList):
    """enum NAME { ... }"""

    pass


@dataclass
class StructMemberDeclaration(ASTNode):
    """
    A struct member.

    data_type is a TypeLiteral, or an inline StructDeclaration/EnumDeclaration.
    """

    name: str = ""
    data_type: ASTNode | None = None


@dataclass
class EnumMemberDeclaration(ASTNode):
    """An enum label; there is no underlying value."""

    name: str = ""


@dataclass
class TypeLiteral(ASTNode):
    """A leaf wrapping a data type."""

    data_type: DataType | None = None


@dataclass
class DataDefinition(ASTNode):
    """Root of the parsed AST; children are top level declarations in source order."""

    child_nodes: list[ASTNode] = field(default_factory=list)


DECLARATION_TYPES = (StructDeclaration, EnumDeclaration)


def is_declaration(node: ASTNode) -> bool:
    """Whether node is a struct or enum declaration."""
    return isinstance(node, DECLARATION_TYPES)
