"""
Recursive descent parser that builds an AST from tokens.

Phase 2 of the pipeline: parse the token list into a DataDefinition without
resolving user defined type names or doing any target specific processing.
"""

from __future__ import annotations

import logging

from ..errors import FrukoBindgenError
from ..lexer import Token, TokenType
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
)

logger = logging.getLogger(__name__)


class ParseError(FrukoBindgenError):
    """Raised when the tokens do not form a valid data definition."""

    pass


class UnexpectedTokenError(ParseError):
    """An out of place token was found while parsing."""

    def __init__(self, token: Token, expected: str = ""):
        self.token = token
        self.expected = expected
        message = f"Unexpected token {token} at {token.source_location}"
        if expected:
            message += f", expected {expected}"
        super().__init__(message)


class UnexpectedEndOfTokensError(ParseError):
    """The tokens ended before a construct was finished parsing."""

    def __init__(self, expected: str = ""):
        self.expected = expected
        message = "Unexpected end of tokens"
        if expected:
            message += f", expected {expected}"
        super().__init__(message)


class DataDefinitionParser:
    """Parses a token list into a DataDefinition AST."""

    # Type keywords that map directly to a primitive kind
    PRIMITIVE_TYPES: dict[TokenType, PrimitiveKind] = {
        TokenType.U8: PrimitiveKind.U8,
        TokenType.U16: PrimitiveKind.U16,
        TokenType.U32: PrimitiveKind.U32,
        TokenType.U64: PrimitiveKind.U64,
        TokenType.I8: PrimitiveKind.I8,
        TokenType.I16: PrimitiveKind.I16,
        TokenType.I32: PrimitiveKind.I32,
        TokenType.I64: PrimitiveKind.I64,
        TokenType.F32: PrimitiveKind.F32,
        TokenType.F64: PrimitiveKind.F64,
        TokenType.STRING: PrimitiveKind.STRING,
        TokenType.CHAR: PrimitiveKind.CHAR,
        TokenType.BOOL: PrimitiveKind.BOOL,
    }

    # Container keywords and the data type they construct
    CONTAINER_TYPES: dict[TokenType, type[DataType]] = {
        TokenType.OPTION: OptionType,
        TokenType.ARRAY: ArrayType,
    }

    def __init__(self) -> None:
        self.tokens: list[Token] = []
        self.index = 0

    def parse(self, tokens: list[Token]) -> DataDefinition:
        """
        Parse tokens into a DataDefinition.

        Args:
            tokens: Tokens produced by the lexer

        Returns:
            The root DataDefinition node

        Raises:
            UnexpectedTokenError: If a token is out of place
            UnexpectedEndOfTokensError: If the tokens end mid construct
        """
        self.tokens = list(tokens)
        self.index = 0

        data_definition = DataDefinition()
        while self._peek() is not None:
            data_definition.child_nodes.append(self._parse_declaration())

        logger.debug("Parsed %d top level declarations", len(data_definition.child_nodes))
        return data_definition

    # Token helpers

    def _peek(self) -> Token | None:
        if self.index >= len(self.tokens):
            return None
        return self.tokens[self.index]

    def _peek_or_error(self, expected: str) -> Token:
        token = self._peek()
        if token is None:
            raise UnexpectedEndOfTokensError(expected)
        return token

    def _next(self, expected: str) -> Token:
        token = self._peek_or_error(expected)
        self.index += 1
        return token

    def _expect(self, token_type: TokenType) -> Token:
        """Consume the next token, asserting its type."""
        expected = f"'{token_type.value}'"
        token = self._next(expected)
        if token.token_type is not token_type:
            raise UnexpectedTokenError(token, expected)
        return token

    # Grammar

    def _parse_declaration(self) -> ASTNode:
        """Parse a top level struct or enum declaration."""
        token = self._next("'struct' or 'enum'")
        if token.token_type is TokenType.STRUCT:
            return self._parse_named_statement_list(StructDeclaration)
        if token.token_type is TokenType.ENUM:
            return self._parse_named_statement_list(EnumDeclaration)
        raise UnexpectedTokenError(token, "'struct' or 'enum'")

    def _parse_named_statement_list(self, node_class: type[NamedStatementList]) -> NamedStatementList:
        """Parse NAME { MEMBERS } after a struct or enum keyword."""
        name_token = self._next("a name")
        if name_token.token_type is not TokenType.IDENTIFIER:
            raise UnexpectedTokenError(name_token, "a name")

        self._expect(TokenType.LCURLY)
        child_nodes = self._parse_members()
        self._expect(TokenType.RCURLY)

        return node_class(name=name_token.value, child_nodes=child_nodes)

    def _parse_members(self) -> list[ASTNode]:
        """
        Parse the members of a named statement list.

        A member followed by a colon is a struct member, a member followed by
        a comma or a closing brace is an enum member. This does not take into
        account whether the enclosing list is a struct or an enum, so both
        kinds may be mixed.
        """
        members: list[ASTNode] = []
        while True:
            name_token = self._peek_or_error("a member or '}'")
            if name_token.token_type is not TokenType.IDENTIFIER:
                break
            self.index += 1

            following = self._peek_or_error("':', ',' or '}'")
            if following.token_type is TokenType.COLON:
                self.index += 1
                members.append(
                    StructMemberDeclaration(
                        name=name_token.value,
                        data_type=self._parse_member_type(),
                    )
                )
            elif following.token_type in (TokenType.COMMA, TokenType.RCURLY):
                members.append(EnumMemberDeclaration(name=name_token.value))
            else:
                raise UnexpectedTokenError(following, "':', ',' or '}'")

            if self._peek_or_error("',' or '}'").token_type is TokenType.COMMA:
                self.index += 1

        return members

    def _parse_member_type(self) -> ASTNode:
        """Parse a member type: a type literal or an inline struct/enum declaration."""
        token = self._next("a type")
        if token.token_type is TokenType.STRUCT:
            return self._parse_named_statement_list(StructDeclaration)
        if token.token_type is TokenType.ENUM:
            return self._parse_named_statement_list(EnumDeclaration)
        return TypeLiteral(self._parse_literal_type(token))

    def _parse_literal_type(self, token: Token) -> DataType:
        """Parse a type literal; option and array inner types are parsed recursively."""
        if token.token_type in self.PRIMITIVE_TYPES:
            return PrimitiveType(self.PRIMITIVE_TYPES[token.token_type])

        if token.token_type in self.CONTAINER_TYPES:
            self._expect(TokenType.LPAREN)
            inner = self._parse_literal_type(self._next("a type"))
            self._expect(TokenType.RPAREN)
            return self.CONTAINER_TYPES[token.token_type](inner)

        if token.token_type is TokenType.IDENTIFIER:
            return UserDefinedType(token.value)

        raise UnexpectedTokenError(token, "a type")


def parse_tokens(tokens: list[Token]) -> DataDefinition:
    """
    Parse tokens into an AST.

    Args:
        tokens: Tokens produced by lex_tokens

    Returns:
        The root DataDefinition node
    """
    return DataDefinitionParser().parse(tokens)
