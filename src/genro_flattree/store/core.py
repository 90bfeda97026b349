# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FlatTree - A pre-order tree stored in three flat columns.

This module provides the FlatTree class, the single owner of all tree data
in the genro-flattree library. Instead of nodes pointing at their children,
a FlatTree keeps three parallel columns indexed by the node's position in
pre-order:

    ======== ======= ========== ========== ========== ========== =========
    values   Users   jhon_doe   file1.rs   file2.rs   jane_doe   cat.jpg
    levels   0       1          2          2          1          2
    parents  0       0          1          1          0          4
    ======== ======= ========== ========== ========== ========== =========

Key Features:
    - **Append-only growth**: nodes are added through cursors, always at the
      tail of the columns, so positions never move once assigned
    - **Contiguous subtrees**: every subtree is an unbroken run of positions,
      which turns children/subtree queries into linear scans
    - **Capacity hints**: backing slots can be reserved up front and grow
      geometrically when full
    - **Build/read phases**: ``freeze()`` closes the build phase for good

Example:
    Building the tree above::

        tree = FlatTree('Users')
        root = tree.root_cursor()

        jhon = root.push('jhon_doe')
        jhon.push('file1.rs')
        jhon.push('file2.rs')

        jane = root.push('jane_doe')
        jane.push('cat.jpg')

        tree.as_levels()  # [0, 1, 2, 2, 1, 2]
        [n.value for n in tree.root_node().children()]  # ['jhon_doe', 'jane_doe']
"""

from __future__ import annotations

from array import array
from typing import Any, Iterator

from ..config import runtime_config
from ..exceptions import (
    BranchClosedError,
    FrozenTreeError,
    InvalidStructureError,
    OutOfRangeError,
)
from ..logging import get_logger
from ..node import TreeCursor, TreeNode
from ..traversal import subtree_end
from .views import ColumnView

logger = get_logger('store')

# Unsigned 64-bit items for the level and parent columns.
_UINT = 'Q'


def _check_capacity(capacity: int) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ValueError(f"capacity must be an int, not {type(capacity).__name__}")
    if capacity < 0:
        raise ValueError(f"capacity must be >= 0, got {capacity}")
    # The root always occupies a slot.
    return max(capacity, 1)


class FlatTree:
    """A rooted, ordered tree built and traversed in pre-order.

    FlatTree provides:
    - root_cursor(): a TreeCursor to push children in pre-order
    - push_level(level, value): append from a stream of depths
    - root_node() / node(i) / get(i): TreeNode handles for queries
    - value_at(i) / level_at(i) / parent_at(i): direct column access
    - as_values() / as_levels() / as_parents(): read-only column views

    The root sits at position 0, has level 0 and is its own parent.

    Only the nodes on the open path (the chain from the root to the last
    appended node) can receive children. Appending anywhere else would
    split an already closed subtree, so it raises BranchClosedError.

    Example:
        >>> tree = FlatTree('Users')
        >>> jhon = tree.root_cursor().push('jhon_doe')
        >>> file1 = jhon.push('file1.rs')
        >>> tree.as_parents()
        ColumnView(parents, [0, 0, 1])
    """

    __slots__ = ('_values', '_levels', '_parents', '_length', '_open', '_frozen')

    def __init__(self, root: Any, capacity: int | None = None) -> None:
        """Initialize a FlatTree holding only the root.

        Args:
            root: The root node's value.
            capacity: Optional number of backing slots to reserve. Purely a
                performance hint; defaults to the configured
                ``default_capacity``.
        """
        if capacity is None:
            capacity = runtime_config().default_capacity
        capacity = _check_capacity(capacity)

        self._values: list[Any] = [None] * capacity
        self._levels = array(_UINT, [0]) * capacity
        self._parents = array(_UINT, [0]) * capacity

        self._values[0] = root
        self._length = 1
        # Open path, indexed by level: _open[n] is the open node at level n.
        self._open: list[int] = [0]
        self._frozen = False

    @classmethod
    def with_capacity(cls, root: Any, capacity: int) -> FlatTree:
        """Create a FlatTree reserving ``capacity`` slots up front.

        Example:
            >>> tree = FlatTree.with_capacity('Users', 6)
            >>> tree.capacity
            6
        """
        return cls(root, capacity=capacity)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"FlatTree({self.to_values()!r})"

    def __str__(self) -> str:
        from ..render import render
        return render(self)

    def __len__(self) -> int:
        """Return the number of nodes, root included."""
        return self._length

    def __iter__(self) -> Iterator[TreeNode]:
        """Iterate over all nodes in pre-order (insertion order)."""
        for position in range(self._length):
            yield TreeNode(self, position)

    def __eq__(self, other: object) -> bool:
        """Trees are equal when their three columns are equal."""
        if not isinstance(other, FlatTree):
            return NotImplemented
        n = self._length
        return (
            n == other._length
            and self._values[:n] == other._values[:n]
            and self._levels[:n] == other._levels[:n]
            and self._parents[:n] == other._parents[:n]
        )

    __hash__ = None  # type: ignore[assignment]

    # ==================== Storage ====================

    @property
    def capacity(self) -> int:
        """Number of reserved backing slots (always >= len(tree))."""
        return len(self._values)

    def _reserve(self, needed: int) -> None:
        """Grow backing storage geometrically to hold ``needed`` slots."""
        current = len(self._values)
        if needed <= current:
            return
        new_capacity = max(needed, current * 2)
        extra = new_capacity - current
        self._values.extend([None] * extra)
        self._levels.extend(array(_UINT, [0]) * extra)
        self._parents.extend(array(_UINT, [0]) * extra)
        logger.debug("grew backing storage from %d to %d slots", current, new_capacity)

    def _check_position(self, position: int) -> None:
        if position < 0 or position >= self._length:
            raise OutOfRangeError(position, self._length)

    def append(self, parent: int, value: Any) -> int:
        """Append ``value`` as the last child of ``parent``.

        The new node goes at the tail of all three columns, one level
        below its parent.

        Args:
            parent: Position of the parent node. Must be on the open path.
            value: The new node's value.

        Returns:
            The position assigned to the new node.

        Raises:
            FrozenTreeError: If the tree has been frozen.
            OutOfRangeError: If ``parent`` is not an existing position.
            BranchClosedError: If ``parent``'s subtree is already closed.
        """
        if self._frozen:
            raise FrozenTreeError("Tree is frozen, no more nodes can be appended")
        self._check_position(parent)

        level = self._levels[parent] + 1
        open_path = self._open
        if level > len(open_path) or open_path[level - 1] != parent:
            raise BranchClosedError(parent, subtree_end(self, parent))

        position = self._length
        self._reserve(position + 1)
        self._values[position] = value
        self._levels[position] = level
        self._parents[position] = parent
        self._length = position + 1

        del open_path[level:]
        open_path.append(position)
        return position

    def push_level(self, level: int, value: Any) -> int:
        """Append ``value`` at depth ``level`` under the open path.

        For sources that yield (value, depth) pairs in pre-order, such as a
        directory walk or an indented outline. The parent is the open node
        one level up.

        Args:
            level: Depth of the new node. Must be between 1 and one more
                than the last appended node's level.
            value: The new node's value.

        Returns:
            The position assigned to the new node.

        Raises:
            FrozenTreeError: If the tree has been frozen.
            InvalidStructureError: If ``level`` is 0 (a second root) or
                skips a level below the last appended node.

        Example:
            >>> tree = FlatTree('Users')
            >>> tree.push_level(1, 'jhon_doe')
            1
            >>> tree.push_level(2, 'file1.rs')
            2
            >>> tree.push_level(1, 'jane_doe')
            3
        """
        if self._frozen:
            raise FrozenTreeError("Tree is frozen, no more nodes can be appended")
        if level < 1:
            raise InvalidStructureError(
                f"Level {level} is not below the root; only one root is allowed"
            )
        if level > len(self._open):
            raise InvalidStructureError(
                f"Level {level} skips a level: the deepest open node is at "
                f"level {len(self._open) - 1}"
            )
        return self.append(self._open[level - 1], value)

    # ==================== Column Access ====================

    def value_at(self, position: int) -> Any:
        """Return the value stored at ``position``."""
        self._check_position(position)
        return self._values[position]

    def level_at(self, position: int) -> int:
        """Return the level (depth) of the node at ``position``."""
        self._check_position(position)
        return self._levels[position]

    def parent_at(self, position: int) -> int:
        """Return the parent position of ``position`` (0 for the root)."""
        self._check_position(position)
        return self._parents[position]

    def as_values(self) -> ColumnView:
        """Read-only view of the values column, in pre-order."""
        return ColumnView(self, '_values')

    def as_levels(self) -> ColumnView:
        """Read-only view of the levels column, in pre-order."""
        return ColumnView(self, '_levels')

    def as_parents(self) -> ColumnView:
        """Read-only view of the parents column, in pre-order."""
        return ColumnView(self, '_parents')

    def to_values(self) -> list[Any]:
        """Return a new list with all values in pre-order."""
        return self._values[:self._length]

    # ==================== Handles ====================

    def root_cursor(self) -> TreeCursor:
        """Get a TreeCursor at the root to push children.

        Raises:
            FrozenTreeError: If the tree has been frozen.
        """
        if self._frozen:
            raise FrozenTreeError("Tree is frozen, no cursor can be created")
        return TreeCursor(self, 0)

    def root_node(self) -> TreeNode:
        """Get the TreeNode handle of the root."""
        return TreeNode(self, 0)

    def node(self, position: int) -> TreeNode:
        """Get the TreeNode handle at ``position``.

        Raises:
            OutOfRangeError: If ``position`` does not exist.
        """
        self._check_position(position)
        return TreeNode(self, position)

    def get(self, position: int, default: Any = None) -> TreeNode | Any:
        """Get the TreeNode at ``position``, or ``default`` if missing."""
        if 0 <= position < self._length:
            return TreeNode(self, position)
        return default

    # ==================== Build Phase ====================

    @property
    def frozen(self) -> bool:
        """True once ``freeze()`` has been called."""
        return self._frozen

    def freeze(self) -> None:
        """End the build phase: every later append raises FrozenTreeError."""
        if not self._frozen:
            self._frozen = True
            logger.debug("froze tree with %d nodes", self._length)
