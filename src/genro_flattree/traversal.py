# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Traversal algorithms over the flat columns of a FlatTree.

Every function here yields positions rather than handles, reads the
columns directly and keeps O(1) state. They rely on the pre-order layout:
the descendants of a node at position ``p`` are exactly the positions after
``p`` up to (excluding) the first one whose level is not deeper than
``p``'s.

Functions:
    iter_children: Direct children, first child first
    iter_ancestors: Parent, grandparent, ... up to and including the root
    iter_siblings: The parent's children except the node itself
    iter_subtree: The node and all its descendants in pre-order
    subtree_end: First position after the node's subtree
"""

from __future__ import annotations

from typing import Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from .store import FlatTree


def subtree_end(tree: FlatTree, position: int) -> int:
    """Return the first position after the subtree rooted at ``position``.

    Equals ``len(tree)`` when the subtree runs to the end of the tree.
    """
    levels = tree._levels
    length = tree._length
    level = levels[position]
    end = position + 1
    while end < length and levels[end] > level:
        end += 1
    return end


def iter_children(tree: FlatTree, position: int) -> Iterator[int]:
    """Yield the positions of the direct children of ``position``.

    Deeper descendants are skipped by their level alone: within the
    subtree, a node one level down is necessarily a direct child.
    """
    levels = tree._levels
    length = tree._length
    level = levels[position]
    child_level = level + 1
    current = position + 1
    while current < length:
        current_level = levels[current]
        if current_level <= level:
            return
        if current_level == child_level:
            yield current
        current += 1


def iter_ancestors(tree: FlatTree, position: int) -> Iterator[int]:
    """Yield ancestor positions, nearest first, ending with the root.

    The root itself has no ancestors.
    """
    if position == 0:
        return
    parents = tree._parents
    current = parents[position]
    while True:
        yield current
        if current == 0:
            return
        current = parents[current]


def iter_siblings(tree: FlatTree, position: int) -> Iterator[int]:
    """Yield the positions of the other children of ``position``'s parent.

    The root has no parent and therefore no siblings.
    """
    if position == 0:
        return
    for child in iter_children(tree, tree._parents[position]):
        if child != position:
            yield child


def iter_subtree(tree: FlatTree, position: int) -> Iterator[int]:
    """Yield ``position`` followed by all its descendants in pre-order."""
    levels = tree._levels
    length = tree._length
    level = levels[position]
    yield position
    current = position + 1
    while current < length and levels[current] > level:
        yield current
        current += 1
