"""Node records of the abstract syntax tree."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from mathpotato.tokens import TokenType

NIL_UUID = uuid.UUID(int=0)


class VariableState(Enum):
    """Processing state of a variable."""

    DEFAULT = "Default"
    PROCESSING = "Processing"
    FINAL = "Final"


@dataclass
class IntegerStatementNode:
    """An integer value assigned to a named variable, as in ``Integer asd = a + b;``."""

    guid: uuid.UUID = NIL_UUID
    variable_name: str = ""
    variable_value: int = 0
    variable_state: VariableState = VariableState.DEFAULT
    token_type: TokenType = TokenType.NONE


@dataclass
class IntegerValueExpressionNode:
    """An integer value inside an expression tree.

    A fresh random ``guid`` is given unless one is passed; ``parent`` is the
    nil UUID when the node has no parent.
    """

    value: int = 0
    guid: uuid.UUID = field(default_factory=uuid.uuid4)
    parent: uuid.UUID = NIL_UUID


@dataclass
class InfixExpressionNode:
    """An infix operator such as the ``+`` in ``a + b``, linking two operand nodes."""

    token_type: TokenType
    left: uuid.UUID = NIL_UUID
    right: uuid.UUID = NIL_UUID


AstNode = Optional[Union[IntegerStatementNode, IntegerValueExpressionNode]]