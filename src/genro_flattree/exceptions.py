# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FlatTree exceptions."""

from __future__ import annotations


class FlatTreeError(Exception):
    """Base exception for FlatTree errors."""

    pass


class OutOfRangeError(FlatTreeError, IndexError):
    """Raised when a position does not exist in the tree."""

    def __init__(self, position: int, length: int) -> None:
        self.position = position
        self.length = length
        super().__init__(
            f"Position {position} out of range (tree has {length} nodes)"
        )


class BranchClosedError(FlatTreeError):
    """Raised when appending under a node whose subtree is already closed.

    Only the nodes on the open path (root to the last appended node) can
    still receive children without breaking pre-order contiguity.
    """

    def __init__(self, position: int, closed_at: int) -> None:
        self.position = position
        self.closed_at = closed_at
        super().__init__(
            f"Cannot append under position {position}: its subtree was "
            f"closed at position {closed_at}"
        )


class FrozenTreeError(FlatTreeError):
    """Raised when a frozen tree is asked to grow."""

    pass


class InvalidStructureError(FlatTreeError, ValueError):
    """Raised when flat columns do not describe a pre-order tree."""

    pass
