# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Functions to build a FlatTree from other representations.

This module provides:
- from_nested: Build from (value, children) pairs
- from_dict: Build from a nested mapping of labels
- from_flat: Rebuild from the values/levels/parents columns
- from_levels: Build from values and their depths in pre-order
- to_nested: Convert a FlatTree back to (value, children) pairs

All builders append nodes in pre-order and never recurse, so
arbitrarily deep inputs are fine.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Iterator

from .exceptions import BranchClosedError, InvalidStructureError
from .logging import get_logger
from .node import TreeCursor
from .store import FlatTree

logger = get_logger('loading')

_MISSING = object()


def _split_nested(item: Any) -> tuple[Any, list]:
    """Split a nested item into (value, children).

    A 2-tuple whose second element is a list is a branch; anything else is
    a leaf value.
    """
    if isinstance(item, tuple) and len(item) == 2 and isinstance(item[1], list):
        return item[0], item[1]
    return item, []


def _fill(
    root: TreeCursor,
    children: Iterable[Any],
    split: Any,
) -> None:
    """Push ``children`` under ``root`` depth-first, without recursion."""
    stack: list[tuple[TreeCursor, Iterator[Any]]] = [(root, iter(children))]
    while stack:
        cursor, pending = stack[-1]
        item = next(pending, _MISSING)
        if item is _MISSING:
            stack.pop()
            continue
        value, grandchildren = split(item)
        child = cursor.push(value)
        if grandchildren:
            stack.append((child, iter(grandchildren)))


def from_nested(source: Any, capacity: int | None = None) -> FlatTree:
    """Build a FlatTree from nested (value, children) pairs.

    Args:
        source: A ``(value, children)`` pair for the root. Each item of
            ``children`` is either another pair or a bare leaf value.
        capacity: Optional capacity hint passed to FlatTree.

    Example:
        >>> tree = from_nested(
        ...     ('Users', [
        ...         ('jhon_doe', ['file1.rs', 'file2.rs']),
        ...         ('jane_doe', ['cat.jpg']),
        ...     ])
        ... )
        >>> tree.as_parents()
        ColumnView(parents, [0, 0, 1, 1, 0, 4])
    """
    value, children = _split_nested(source)
    tree = FlatTree(value, capacity=capacity)
    _fill(tree.root_cursor(), children, _split_nested)
    logger.debug("loaded %d nodes from nested pairs", len(tree))
    return tree


def _split_mapping_item(item: tuple[Any, Any]) -> tuple[Any, Iterable[Any]]:
    key, value = item
    if isinstance(value, Mapping):
        return key, list(value.items())
    return key, []


def from_dict(
    root: Any,
    mapping: Mapping[Any, Any],
    capacity: int | None = None,
) -> FlatTree:
    """Build a FlatTree whose nodes are the keys of a nested mapping.

    Keys become children in mapping order. A Mapping value holds the key's
    children; any other value (typically None) makes the key a leaf.

    Args:
        root: Value of the root node.
        mapping: Nested mapping of child labels.
        capacity: Optional capacity hint passed to FlatTree.

    Example:
        >>> tree = from_dict('Users', {
        ...     'jhon_doe': {'file1.rs': None, 'file2.rs': None},
        ...     'jane_doe': {'cat.jpg': None},
        ... })
        >>> tree.as_levels()
        ColumnView(levels, [0, 1, 2, 2, 1, 2])
    """
    tree = FlatTree(root, capacity=capacity)
    _fill(tree.root_cursor(), list(mapping.items()), _split_mapping_item)
    logger.debug("loaded %d nodes from mapping", len(tree))
    return tree


def from_flat(
    values: Iterable[Any],
    levels: Iterable[int],
    parents: Iterable[int],
) -> FlatTree:
    """Rebuild a FlatTree from its three columns.

    This is the inverse of ``as_values()``, ``as_levels()`` and
    ``as_parents()``: the columns are reproduced exactly.

    Raises:
        InvalidStructureError: If the columns differ in length, are empty,
            or do not describe a tree built in pre-order.
    """
    values = list(values)
    levels = list(levels)
    parents = list(parents)

    length = len(values)
    if not length == len(levels) == len(parents):
        raise InvalidStructureError(
            f"Columns differ in length: {length} values, "
            f"{len(levels)} levels, {len(parents)} parents"
        )
    if length == 0:
        raise InvalidStructureError("A tree needs at least a root")
    if levels[0] != 0 or parents[0] != 0:
        raise InvalidStructureError(
            "Position 0 must be the root with level 0 and parent 0"
        )

    tree = FlatTree(values[0], capacity=length)
    for position in range(1, length):
        parent = parents[position]
        if not 0 <= parent < position:
            raise InvalidStructureError(
                f"Position {position}: parent {parent} must precede it"
            )
        if levels[position] != levels[parent] + 1:
            raise InvalidStructureError(
                f"Position {position}: level {levels[position]} is not one "
                f"below its parent's level {levels[parent]}"
            )
        try:
            tree.append(parent, values[position])
        except BranchClosedError as exc:
            raise InvalidStructureError(
                f"Position {position}: subtree of parent {parent} is not "
                f"contiguous (columns are not in pre-order)"
            ) from exc

    logger.debug("rebuilt %d nodes from flat columns", length)
    return tree


def to_nested(tree: FlatTree) -> tuple[Any, list]:
    """Convert a FlatTree to nested (value, children) pairs.

    Leaves are emitted as bare values, so ``from_nested(to_nested(tree))``
    equals ``tree`` as long as no leaf value is itself a
    ``(value, list)`` pair.
    """
    values = tree.to_values()
    parents = list(tree.as_parents())
    kids: list[list[int]] = [[] for _ in values]
    for position in range(1, len(values)):
        kids[parents[position]].append(position)

    # Children always follow their parent, so a backward pass sees them first.
    built: list[Any] = [None] * len(values)
    for position in range(len(values) - 1, 0, -1):
        if kids[position]:
            built[position] = (values[position], [built[c] for c in kids[position]])
        else:
            built[position] = values[position]
    return values[0], [built[c] for c in kids[0]]


def from_levels(values: Iterable[Any], levels: Iterable[int]) -> FlatTree:
    """Build a FlatTree from values paired with their depths, in pre-order.

    Each node's parent is the nearest preceding node one level up, so no
    parents column is needed. This fits sources that only report depth,
    like a directory walk or an indented outline.

    Args:
        values: Node values in pre-order, the root first.
        levels: The depth of each value; the root must be at level 0.

    Raises:
        InvalidStructureError: If the columns differ in length, are empty,
            the first level is not 0, another level is 0, or a level skips
            more than one step deeper than the node before it.

    Example:
        >>> tree = from_levels(
        ...     ['Users', 'jhon_doe', 'file1.rs', 'file2.rs', 'jane_doe', 'cat.jpg'],
        ...     [0, 1, 2, 2, 1, 2],
        ... )
        >>> tree.as_parents()
        ColumnView(parents, [0, 0, 1, 1, 0, 4])
    """
    values = list(values)
    levels = list(levels)
    if len(values) != len(levels):
        raise InvalidStructureError(
            f"Columns differ in length: {len(values)} values, {len(levels)} levels"
        )
    if not values:
        raise InvalidStructureError("A tree needs at least a root")
    if levels[0] != 0:
        raise InvalidStructureError("Position 0 must be the root with level 0")

    tree = FlatTree(values[0], capacity=len(values))
    for position in range(1, len(values)):
        try:
            tree.push_level(levels[position], values[position])
        except InvalidStructureError as exc:
            raise InvalidStructureError(f"Position {position}: {exc}") from exc

    logger.debug("built %d nodes from levels", len(tree))
    return tree
