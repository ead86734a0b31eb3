"""Splitting source text into tokens."""

from __future__ import annotations

from mathpotato.tokens import (
    KEYWORD_INTEGER,
    SIGN_ADDITION,
    SIGN_ASSIGNMENT,
    SIGN_CLOSE_PARENTHESES,
    SIGN_DIVISION,
    SIGN_OPEN_PARENTHESES,
    SIGN_SEMICOLON,
    WHITESPACE,
    Token,
    TokenType,
)

_FIXED_TOKENS = {
    SIGN_OPEN_PARENTHESES: TokenType.SIGN_OPEN_PARENTHESES,
    SIGN_CLOSE_PARENTHESES: TokenType.SIGN_CLOSE_PARENTHESES,
    SIGN_SEMICOLON: TokenType.SIGN_SEMICOLON,
    SIGN_ASSIGNMENT: TokenType.SIGN_ASSIGNMENT,
    SIGN_ADDITION: TokenType.OPERATION_ADDITION,
    SIGN_DIVISION: TokenType.OPERATION_DIVISION,
    KEYWORD_INTEGER: TokenType.KEYWORD_INTEGER,
}

_ASCII_DIGITS = frozenset("0123456789")


def lex(source: str) -> list[Token]:
    """Split ``source`` into tokens.

    A space ends the current word and a semicolon ends it too, adding a
    semicolon token after it. Text after the last space or semicolon is not
    tokenized.
    """
    tokens: list[Token] = []
    current: list[str] = []
    for char in source:
        if char in (WHITESPACE, SIGN_SEMICOLON):
            tokens.append(tokenize("".join(current)))
            current = []
            if char == SIGN_SEMICOLON:
                tokens.append(tokenize(char))
        else:
            current.append(char)
    return tokens


def tokenize(word: str) -> Token:
    """Turn a single word into a token."""
    token_type = _FIXED_TOKENS.get(word)
    if token_type is None:
        if all(char in _ASCII_DIGITS for char in word):
            token_type = TokenType.LITERAL_INTEGER_VALUE
        else:
            token_type = TokenType.LITERAL_VALUE_VARIABLE_IDENTIFIER
    return Token(token_type, word)