"""A flat abstract syntax tree keyed by node UUID."""

from __future__ import annotations

import uuid
from typing import Mapping, Optional

from mathpotato.nodes import AstNode, IntegerStatementNode, IntegerValueExpressionNode


class AstTreeError(Exception):
    """Raised when a lookup in the tree fails or a node cannot be stored."""


class AstTree:
    """Nodes of the syntax tree, stored by their UUID, with a last-modified marker."""

    def __init__(self) -> None:
        self._nodes: dict[uuid.UUID, AstNode] = {}
        self._last_changed: Optional[uuid.UUID] = None

    def merge(self, nodes: Mapping[uuid.UUID, AstNode]) -> None:
        """Insert every node of ``nodes``, replacing nodes with the same key."""
        self._nodes.update(nodes)

    def add_node(self, node: AstNode) -> None:
        """Store ``node`` under its own guid; ``None`` is ignored."""
        if node is None:
            return
        if not isinstance(node, (IntegerStatementNode, IntegerValueExpressionNode)):
            raise AstTreeError(f"Unsupported node type: {type(node).__name__}")
        self._nodes[node.guid] = node

    def add_node_as_last_modified(self, guid: uuid.UUID, node: AstNode) -> None:
        """Store ``node`` under ``guid`` and mark it as the last modified one."""
        self._nodes[guid] = node
        self._last_changed = guid

    def clean_last_modified(self) -> None:
        """Forget which node was modified last."""
        self._last_changed = None

    def last_modified(self) -> AstNode:
        """Return the node that was modified last."""
        if self._last_changed is None:
            raise AstTreeError("Last changed is empty")
        try:
            return self._nodes[self._last_changed]
        except KeyError:
            raise AstTreeError("There is no node with the given key") from None

    def nodes(self) -> dict[uuid.UUID, AstNode]:
        """Return a copy of the mapping from guid to node."""
        return dict(self._nodes)

    def get(self, key: uuid.UUID) -> AstNode:
        """Return the node stored under ``key``."""
        try:
            return self._nodes[key]
        except KeyError:
            raise AstTreeError(f"There is no item in tree with key: {key}") from None

    def __len__(self) -> int:
        return len(self._nodes)