#!/usr/bin/env python3
# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Mirror a directory into a FlatTree, two ways, and print it.

Hidden entries are skipped. Directories are pushed before their contents,
which is exactly the pre-order a FlatTree needs.

- walk_dir pushes through cursors, one recursive call per directory
- walk_dir_flat consumes a flat stream of (name, depth) entries

Both must give the same tree.

Usage:
    python examples/folders/walkdir.py [PATH]
"""

import os
import sys
from pathlib import Path
from typing import Iterator

from genro_flattree import FlatTree, TreeCursor


def ignore(name: str) -> bool:
    return name.startswith('.') or name == '__pycache__'


def _entries(path: Path) -> list:
    with os.scandir(path) as entries:
        return sorted(
            (e for e in entries if not ignore(e.name)), key=lambda e: e.name
        )


def walk_into(cursor: TreeCursor, path: Path) -> None:
    """Push the contents of ``path`` under ``cursor``."""
    for entry in _entries(path):
        child = cursor.push(entry.name)
        if entry.is_dir(follow_symlinks=False):
            walk_into(child, Path(entry.path))


def walk_dir(path: Path) -> FlatTree:
    tree = FlatTree(str(path))
    walk_into(tree.root_cursor(), path)
    tree.freeze()
    return tree


def iter_depths(path: Path) -> Iterator[tuple[str, int]]:
    """Yield (name, depth) for every entry under ``path``, in pre-order."""
    stack = [iter(_entries(path))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        yield entry.name, len(stack)
        if entry.is_dir(follow_symlinks=False):
            stack.append(iter(_entries(Path(entry.path))))


def walk_dir_flat(path: Path) -> FlatTree:
    tree = FlatTree(str(path))
    for name, depth in iter_depths(path):
        tree.push_level(depth, name)
    tree.freeze()
    return tree


def main():
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    tree = walk_dir(path)
    print(tree)

    flat = walk_dir_flat(path)
    assert str(flat) == str(tree)
    assert flat == tree

    dirs = [n for n in tree if not n.is_leaf]
    print(f"\n{len(tree)} entries, {len(dirs)} non-empty directories")


if __name__ == '__main__':
    main()
