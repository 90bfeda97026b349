# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Box-drawing rendering of a FlatTree.

The renderer only reads the tree through its column views, one line per
node in pre-order::

    . Users
    ├── jhon_doe
    │   ├── file1.rs
    │   └── file2.rs
    └── jane_doe
        └── cat.jpg
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, TYPE_CHECKING

from .config import runtime_config

if TYPE_CHECKING:
    from .store import FlatTree


@dataclass(frozen=True)
class RenderStyle:
    """Glyphs used to draw the tree.

    Attributes:
        root: Marker printed before the root value.
        tee: Connector for a node followed by a sibling.
        elbow: Connector for the last child of its parent.
        pipe: Column drawn under an ancestor that still has siblings below.
        blank: Column drawn under an ancestor that was a last child.
    """

    root: str = "."
    tee: str = "├── "
    elbow: str = "└── "
    pipe: str = "│   "
    blank: str = "    "

    @classmethod
    def unicode(cls) -> RenderStyle:
        return cls()

    @classmethod
    def ascii(cls) -> RenderStyle:
        return cls(root=".", tee="|-- ", elbow="`-- ", pipe="|   ", blank="    ")


def default_style() -> RenderStyle:
    """Return the style selected by the runtime configuration."""
    if runtime_config().ascii_render:
        return RenderStyle.ascii()
    return RenderStyle.unicode()


def _has_next_sibling(parents: list[int]) -> list[bool]:
    # A node has a later sibling iff its parent shows up again further on.
    flags = [False] * len(parents)
    seen: set[int] = set()
    for position in range(len(parents) - 1, 0, -1):
        parent = parents[position]
        flags[position] = parent in seen
        seen.add(parent)
    return flags


def iter_lines(
    tree: FlatTree,
    style: RenderStyle | None = None,
    formatter: Callable[[Any], str] = str,
) -> Iterator[str]:
    """Yield one rendered line per node, in pre-order.

    Args:
        tree: The tree to render.
        style: Glyphs to use. Defaults to ``default_style()``.
        formatter: Converts a node value to text.
    """
    if style is None:
        style = default_style()
    values = tree.as_values()
    levels = list(tree.as_levels())
    has_next = _has_next_sibling(list(tree.as_parents()))

    # columns[n] is the prefix drawn under the open ancestor at level n + 1.
    columns: list[str] = []
    for position, value in enumerate(values):
        level = levels[position]
        if level == 0:
            yield f"{style.root} {formatter(value)}"
            continue
        del columns[level - 1:]
        connector = style.tee if has_next[position] else style.elbow
        yield "".join(columns) + connector + formatter(value)
        columns.append(style.pipe if has_next[position] else style.blank)


def render(
    tree: FlatTree,
    style: RenderStyle | None = None,
    formatter: Callable[[Any], str] = str,
) -> str:
    """Render the whole tree as a string, lines joined with newlines.

    Example:
        >>> print(render(tree, RenderStyle.ascii()))
        . Users
        |-- jhon_doe
        |   |-- file1.rs
        |   `-- file2.rs
        `-- jane_doe
            `-- cat.jpg
    """
    return "\n".join(iter_lines(tree, style, formatter))
