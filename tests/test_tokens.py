import dataclasses

import pytest

from mathpotato.tokens import KEYWORD_INTEGER, SIGN_SEMICOLON, Token, TokenType


def test_tokens_with_same_type_and_value_are_equal():
    first = Token(TokenType.KEYWORD_INTEGER, KEYWORD_INTEGER)
    second = Token(TokenType.KEYWORD_INTEGER, KEYWORD_INTEGER)
    assert first == second
    assert hash(first) == hash(second)


def test_tokens_differ_by_type_or_value():
    base = Token(TokenType.LITERAL_VALUE_VARIABLE_IDENTIFIER, "asd")
    other_type = Token(TokenType.LITERAL_INTEGER_VALUE, "asd")
    other_value = Token(TokenType.LITERAL_VALUE_VARIABLE_IDENTIFIER, "qwe")
    assert not base == other_type
    assert not base == other_value
    assert len({base, other_type, other_value}) == 3


def test_token_is_immutable():
    token = Token(TokenType.SIGN_SEMICOLON, SIGN_SEMICOLON)
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.literal_value = "x"  # type: ignore[misc]
    assert token.literal_value == SIGN_SEMICOLON


def test_token_type_is_named_when_shown():
    token = Token(TokenType.KEYWORD_INTEGER, KEYWORD_INTEGER)
    assert str(token.token_type) == "TokenType.KeywordInteger"
    tokens = {Token(member, "x") for member in TokenType}
    assert len(tokens) == len(list(TokenType))