"""Token kinds, the character patterns that produce them, and the token record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

KEYWORD_INTEGER = "Integer"
SIGN_ASSIGNMENT = "="
SIGN_OPEN_PARENTHESES = "("
SIGN_CLOSE_PARENTHESES = ")"
SIGN_SEMICOLON = ";"
SIGN_ADDITION = "+"
SIGN_DIVISION = "/"
WHITESPACE = " "


class TokenType(Enum):
    """The kinds of token the lexer produces."""

    SIGN_OPEN_PARENTHESES = "SignOpenParentheses"
    SIGN_CLOSE_PARENTHESES = "SignCloseParentheses"
    SIGN_SEMICOLON = "SignSemicolon"
    OPERATION_ADDITION = "OperationAddition"
    OPERATION_DIVISION = "OperationDivision"
    KEYWORD_INTEGER = "KeywordInteger"
    SIGN_ASSIGNMENT = "SignAssignment"
    LITERAL_VALUE_VARIABLE_IDENTIFIER = "LiteralValueVariableIdentifier"
    LITERAL_INTEGER_VALUE = "LiteralIntegerValue"
    NONE = "None"

    def __str__(self) -> str:
        return f"TokenType.{self.value}"


@dataclass(frozen=True)
class Token:
    """A keyword, sign or literal taken from the source code.

    ``literal_value`` holds the text the token was made from; for identifiers
    it is the variable name.
    """

    token_type: TokenType
    literal_value: str