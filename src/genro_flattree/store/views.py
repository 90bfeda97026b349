# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Read-only views over one column of a FlatTree."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterator, TYPE_CHECKING

from ..exceptions import OutOfRangeError

if TYPE_CHECKING:
    from .core import FlatTree


class ColumnView(Sequence):
    """Live, read-only sequence over a single FlatTree column.

    The view is bounded by the tree's logical length, so reserved but
    unused backing slots are never exposed. Appends made after the view
    was taken are visible through it. Integer indexes are positions:
    negative ones are not wrapped and raise OutOfRangeError like any
    other missing position.

    Example:
        >>> tree = FlatTree('Users')
        >>> levels = tree.as_levels()
        >>> jhon = tree.root_cursor().push('jhon_doe')
        >>> list(levels)
        [0, 1]
    """

    __slots__ = ('_tree', '_column')

    def __init__(self, tree: FlatTree, column: str) -> None:
        self._tree = tree
        self._column = column

    def _backing(self) -> Sequence:
        return getattr(self._tree, self._column)

    def __len__(self) -> int:
        return len(self._tree)

    def __getitem__(self, index: int | slice) -> Any:
        length = len(self._tree)
        if isinstance(index, slice):
            return list(self._backing()[:length][index])
        if index < 0 or index >= length:
            raise OutOfRangeError(index, length)
        return self._backing()[index]

    def __iter__(self) -> Iterator[Any]:
        backing = self._backing()
        for i in range(len(self._tree)):
            yield backing[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (ColumnView, list, tuple)):
            return len(self) == len(other) and all(
                a == b for a, b in zip(self, other)
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ColumnView({self._column.lstrip('_')}, {list(self)!r})"
