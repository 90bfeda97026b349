# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-FlatTree - Flat, append-only pre-order trees.

A lightweight, zero-dependency library storing a rooted, ordered tree in
three flat columns (values, levels, parents) built and traversed in
pre-order, for the Genro ecosystem (Genro Kyō).
"""

__version__ = "0.1.0"

from .exceptions import (
    BranchClosedError,
    FlatTreeError,
    FrozenTreeError,
    InvalidStructureError,
    OutOfRangeError,
)
from .loading import from_dict, from_flat, from_levels, from_nested, to_nested
from .node import TreeCursor, TreeNode
from .render import RenderStyle, render
from .store import ColumnView, FlatTree

__all__ = [
    # Core classes
    "FlatTree",
    "ColumnView",
    "TreeNode",
    "TreeCursor",
    # Loading
    "from_nested",
    "from_dict",
    "from_flat",
    "from_levels",
    "to_nested",
    # Rendering
    "RenderStyle",
    "render",
    # Exceptions
    "FlatTreeError",
    "OutOfRangeError",
    "BranchClosedError",
    "FrozenTreeError",
    "InvalidStructureError",
]
