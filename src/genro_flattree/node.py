# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FlatTree handle classes: read-only nodes and write cursors."""

from __future__ import annotations

from typing import Any, Iterator, TYPE_CHECKING

from .traversal import iter_ancestors, iter_children, iter_siblings, iter_subtree

if TYPE_CHECKING:
    from .store import FlatTree


class TreeNode:
    """A read-only handle on one node of a FlatTree.

    A TreeNode is just a (tree, position) pair: it holds no data of its
    own, so any number of them can be created and shared freely. Two
    handles are equal when they point at the same position of the same
    tree.

    Example:
        >>> node = tree.node(5)
        >>> node.value
        'cat.jpg'
        >>> [a.value for a in node.ancestors()]
        ['jane_doe', 'Users']
    """

    __slots__ = ('tree', '_position')

    def __init__(self, tree: FlatTree, position: int) -> None:
        """Initialize a TreeNode.

        Args:
            tree: The FlatTree holding the node.
            position: The node's position in pre-order.
        """
        self.tree = tree
        self._position = position

    def __repr__(self) -> str:
        return f"TreeNode({self._position}:{self.value!r})"

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.tree is other.tree and self._position == other._position

    def __hash__(self) -> int:
        return hash((id(self.tree), self._position))

    @property
    def position(self) -> int:
        """The node's position in pre-order."""
        return self._position

    @property
    def value(self) -> Any:
        return self.tree._values[self._position]

    @property
    def level(self) -> int:
        """Depth of the node (root=0)."""
        return self.tree._levels[self._position]

    @property
    def parent(self) -> TreeNode | None:
        """The parent node, or None for the root."""
        if self._position == 0:
            return None
        return TreeNode(self.tree, self.tree._parents[self._position])

    @property
    def is_root(self) -> bool:
        return self._position == 0

    @property
    def is_leaf(self) -> bool:
        """True if no node was pushed under this one."""
        next_position = self._position + 1
        return (
            next_position >= len(self.tree)
            or self.tree._levels[next_position] <= self.level
        )

    def children(self) -> Iterator[TreeNode]:
        """Iterate over direct children, first pushed first."""
        for position in iter_children(self.tree, self._position):
            yield TreeNode(self.tree, position)

    def ancestors(self) -> Iterator[TreeNode]:
        """Iterate from the parent up to the root (root last)."""
        for position in iter_ancestors(self.tree, self._position):
            yield TreeNode(self.tree, position)

    def siblings(self) -> Iterator[TreeNode]:
        """Iterate over the parent's other children in insertion order.

        The root yields nothing.
        """
        for position in iter_siblings(self.tree, self._position):
            yield TreeNode(self.tree, position)

    def subtree(self) -> Iterator[TreeNode]:
        """Iterate over this node and all its descendants in pre-order."""
        for position in iter_subtree(self.tree, self._position):
            yield TreeNode(self.tree, position)


class TreeCursor:
    """A write handle used to grow a FlatTree in pre-order.

    Cursors are only obtained from ``FlatTree.root_cursor()`` or returned
    by ``push``. Pushing through a cursor whose subtree has been closed
    (because a later sibling branch was started) raises BranchClosedError.

    Example:
        >>> tree = FlatTree('Users')
        >>> root = tree.root_cursor()
        >>> jhon = root.push('jhon_doe')
        >>> jhon.push('file1.rs')
        TreeCursor(2:'file1.rs')
        >>> jhon.push('file2.rs')
        TreeCursor(3:'file2.rs')
        >>> cat = root.push('jane_doe').push('cat.jpg')
    """

    __slots__ = ('tree', '_position')

    def __init__(self, tree: FlatTree, position: int) -> None:
        self.tree = tree
        self._position = position

    def __repr__(self) -> str:
        return f"TreeCursor({self._position}:{self.value!r})"

    @property
    def position(self) -> int:
        return self._position

    @property
    def value(self) -> Any:
        return self.tree._values[self._position]

    @property
    def level(self) -> int:
        return self.tree._levels[self._position]

    def push(self, value: Any) -> TreeCursor:
        """Append ``value`` as the last child of this node.

        Args:
            value: The new node's value.

        Returns:
            A TreeCursor on the new node. This cursor stays usable.
        """
        return TreeCursor(self.tree, self.tree.append(self._position, value))

    def node(self) -> TreeNode:
        """Return the read-only handle at this cursor's position."""
        return TreeNode(self.tree, self._position)
