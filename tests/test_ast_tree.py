import uuid

import pytest

from mathpotato.ast_tree import AstTree, AstTreeError
from mathpotato.nodes import (
    InfixExpressionNode,
    IntegerStatementNode,
    IntegerValueExpressionNode,
)
from mathpotato.tokens import TokenType


def test_new_tree_is_empty():
    tree = AstTree()
    assert len(tree) == 0
    assert tree.nodes() == {}


def test_add_node_stores_under_guid():
    tree = AstTree()
    node = IntegerValueExpressionNode(1)
    tree.add_node(node)
    assert len(tree) == 1
    assert tree.get(node.guid) == node


def test_add_statement_node():
    tree = AstTree()
    node = IntegerStatementNode(guid=uuid.uuid4(), variable_name="asd")
    tree.add_node(node)
    assert tree.get(node.guid).variable_name == "asd"


def test_add_none_is_ignored():
    tree = AstTree()
    tree.add_node(None)
    assert len(tree) == 0


def test_add_unsupported_node_raises():
    tree = AstTree()
    with pytest.raises(AstTreeError):
        tree.add_node(InfixExpressionNode(TokenType.OPERATION_ADDITION))
    assert len(tree) == 0


def test_get_missing_key_raises():
    tree = AstTree()
    key = uuid.uuid4()
    with pytest.raises(AstTreeError, match=str(key)):
        tree.get(key)


def test_last_modified_empty_raises():
    tree = AstTree()
    with pytest.raises(AstTreeError, match="Last changed is empty"):
        tree.last_modified()


def test_last_modified_round_trip_and_clean():
    tree = AstTree()
    node = IntegerValueExpressionNode(2)
    tree.add_node_as_last_modified(node.guid, node)
    assert tree.last_modified() == node
    tree.clean_last_modified()
    with pytest.raises(AstTreeError):
        tree.last_modified()
    assert tree.get(node.guid) == node


def test_merge_into_empty_tree():
    source = AstTree()
    first = IntegerValueExpressionNode(1)
    second = IntegerValueExpressionNode(2)
    source.add_node(first)
    source.add_node(second)
    target = AstTree()
    target.merge(source.nodes())
    assert len(target) == len(source)
    assert target.nodes() == source.nodes()


def test_merge_replaces_same_key():
    guid = uuid.uuid4()
    tree = AstTree()
    tree.add_node(IntegerValueExpressionNode(1, guid=guid))
    replacement = IntegerValueExpressionNode(9, guid=guid)
    tree.merge({guid: replacement})
    assert len(tree) == 1
    assert tree.get(guid) == replacement


def test_nodes_returns_copy():
    tree = AstTree()
    node = IntegerValueExpressionNode(3)
    tree.add_node(node)
    snapshot = tree.nodes()
    snapshot.clear()
    assert len(tree) == 1
    assert tree.get(node.guid) == node