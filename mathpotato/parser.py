"""Building the abstract syntax tree from lexer tokens."""

from __future__ import annotations

import uuid
from typing import Sequence

from mathpotato.ast_tree import AstTree, AstTreeError
from mathpotato.nodes import (
    IntegerStatementNode,
    IntegerValueExpressionNode,
    VariableState,
)
from mathpotato.tokens import Token, TokenType

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class ParserError(Exception):
    """Raised when the tokens do not form a valid program."""

    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details


def parse(tokens: Sequence[Token]) -> AstTree:
    """Parse every ``Integer`` statement in ``tokens`` into one tree."""
    tree = AstTree()
    for index, item in enumerate(tokens):
        if item.token_type == TokenType.KEYWORD_INTEGER:
            _, statement_tree = parse_integer_statement(index, tokens)
            tree.merge(statement_tree.nodes())
    return tree


def _token_at(tokens: Sequence[Token], index: int, message: str) -> Token:
    if 0 <= index < len(tokens):
        return tokens[index]
    raise ParserError(message)


def _expect(tokens: Sequence[Token], index: int, expected: TokenType, message: str) -> Token:
    found = _token_at(tokens, index, f"There is no character at the {index} position.")
    if found.token_type != expected:
        raise ParserError(message)
    return found


def parse_integer_statement(index: int, tokens: Sequence[Token]) -> tuple[int, AstTree]:
    """Parse ``Integer name = expression;`` starting at ``index``.

    Returns the position just after the closing ``;`` and the tree holding
    the statement node and its expression nodes.
    """
    _expect(
        tokens,
        index,
        TokenType.KEYWORD_INTEGER,
        f"The keyword is invalid, it should be {TokenType.KEYWORD_INTEGER}",
    )
    identifier = _expect(
        tokens,
        index + 1,
        TokenType.LITERAL_VALUE_VARIABLE_IDENTIFIER,
        f"The token is not type of: {TokenType.LITERAL_VALUE_VARIABLE_IDENTIFIER}",
    )
    _expect(
        tokens,
        index + 2,
        TokenType.SIGN_ASSIGNMENT,
        f"The token is not type of: {TokenType.SIGN_ASSIGNMENT}",
    )
    _token_at(tokens, index + 3, f"There is no character at the {index + 3} position.")

    semicolon_index, expression_tree = _parse_expression(index + 3, tokens, AstTree())

    statement = IntegerStatementNode(
        guid=uuid.uuid4(),
        variable_name=identifier.literal_value,
        variable_state=VariableState.FINAL,
        token_type=TokenType.KEYWORD_INTEGER,
    )
    values = [
        node
        for node in expression_tree.nodes().values()
        if isinstance(node, IntegerValueExpressionNode)
    ]
    for node in values:
        node.parent = statement.guid
    if values:
        statement.variable_value = values[0].value

    tree = AstTree()
    tree.merge(expression_tree.nodes())
    tree.add_node(statement)
    return semicolon_index + 1, tree


def parse_integer_statement_expression(
    index: int, tokens: Sequence[Token], tree: AstTree
) -> AstTree:
    """Parse the expression between ``=`` and ``;`` starting at ``index`` into ``tree``."""
    _, result = _parse_expression(index, tokens, tree)
    return result


def _parse_expression(index: int, tokens: Sequence[Token], tree: AstTree) -> tuple[int, AstTree]:
    while True:
        current = _token_at(tokens, index, f"There is no character at {index}")
        if current.token_type == TokenType.SIGN_SEMICOLON:
            return index, tree
        if current.token_type != TokenType.LITERAL_INTEGER_VALUE:
            raise ParserError(f"Case of {current.token_type} is not covered.")

        try:
            last_added = tree.last_modified()
        except AstTreeError:
            last_added = None

        if isinstance(last_added, IntegerValueExpressionNode):
            raise ParserError(
                "A value, like Integer value, cannot follow directly another value, like Integer."
            )
        if isinstance(last_added, IntegerStatementNode):
            raise ParserError(
                "Syntax error. The `Integer` string is present between `Integer` and `;`, "
                "and this is not allowed"
            )

        node = IntegerValueExpressionNode(value=_parse_int32(current))
        tree.add_node_as_last_modified(node.guid, node)
        index += 1


def _parse_int32(literal: Token) -> int:
    text = literal.literal_value
    try:
        value = int(text, 10)
    except ValueError as exc:
        raise ParserError(
            f"Error while parsing literal value to i32. Error message is {exc}"
        ) from None
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ParserError(
            "Error while parsing literal value to i32. "
            "Error message is number too large to fit in target type"
        )
    return value