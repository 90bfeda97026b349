#!/usr/bin/env python3
# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Build a virtual folder structure and walk it.

Usage:
    python examples/folders/simple.py
"""

from genro_flattree import FlatTree


def main():
    tree = FlatTree.with_capacity('Users', 6)
    root = tree.root_cursor()

    child = root.push('jhon_doe')
    child.push('file1.rs')
    child.push('file2.rs')

    child = root.push('jane_doe')
    child.push('cat.jpg')
    tree.freeze()

    # All the data is flat
    print('values: ', list(tree.as_values()))
    print('levels: ', list(tree.as_levels()))
    print('parents:', list(tree.as_parents()))
    print()
    print(tree)
    print()

    # Iteration is in pre-order, as built
    for node in tree:
        parent = node.parent.value if node.parent else '-'
        print(f"LEVEL {node.level} / PARENT: {parent} : {node}")


if __name__ == '__main__':
    main()
