# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FlatTree store package - Flat, append-only pre-order storage.

The package is organized into:
- core: Main FlatTree class owning the value, level and parent columns
- views: Read-only live views over a single column

Example:
    >>> from genro_flattree import FlatTree
    >>> tree = FlatTree('Users')
    >>> jhon = tree.root_cursor().push('jhon_doe')
    >>> tree.to_values()
    ['Users', 'jhon_doe']
"""

from .core import FlatTree
from .views import ColumnView

__all__ = ["FlatTree", "ColumnView"]
