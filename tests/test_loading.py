# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for building FlatTrees from nested data and flat columns."""

import pytest

from genro_flattree import (
    FlatTree,
    InvalidStructureError,
    from_dict,
    from_flat,
    from_levels,
    from_nested,
    to_nested,
)

USERS_NESTED = (
    'Users', [
        ('jhon_doe', ['file1.rs', 'file2.rs']),
        ('jane_doe', ['cat.jpg']),
    ],
)


class TestFromNested:
    """Tests for from_nested."""

    def test_users(self):
        """Test the folder example from nested pairs."""
        tree = from_nested(USERS_NESTED)
        assert tree.as_values() == [
            'Users', 'jhon_doe', 'file1.rs', 'file2.rs', 'jane_doe', 'cat.jpg',
        ]
        assert tree.as_levels() == [0, 1, 2, 2, 1, 2]
        assert tree.as_parents() == [0, 0, 1, 1, 0, 4]

    def test_root_only(self):
        """Test a bare value becomes a single-node tree."""
        tree = from_nested('alone')
        assert tree.to_values() == ['alone']

    def test_empty_children_pair_is_leaf(self):
        """Test (value, []) is a leaf."""
        tree = from_nested(('r', [('a', []), 'b']))
        assert tree.as_levels() == [0, 1, 1]

    def test_deep_nesting_does_not_recurse(self):
        """Test a very deep chain loads without hitting recursion limits."""
        source = 'leaf'
        for depth in range(5000):
            source = (depth, [source])
        tree = from_nested(source)
        assert len(tree) == 5001
        assert tree.level_at(5000) == 5000

    def test_capacity_hint(self):
        """Test the capacity hint reaches the tree."""
        tree = from_nested(USERS_NESTED, capacity=32)
        assert tree.capacity == 32


class TestFromDict:
    """Tests for from_dict."""

    def test_users(self):
        """Test the folder example from a nested mapping."""
        tree = from_dict('Users', {
            'jhon_doe': {'file1.rs': None, 'file2.rs': None},
            'jane_doe': {'cat.jpg': None},
        })
        assert tree == from_nested(USERS_NESTED)

    def test_non_mapping_values_are_leaves(self):
        """Test scalar and empty mapping values make leaves."""
        tree = from_dict('root', {'a': 1, 'b': {}, 'c': {'d': 'x'}})
        assert tree.to_values() == ['root', 'a', 'b', 'c', 'd']
        assert tree.as_levels() == [0, 1, 1, 1, 2]


class TestFromFlat:
    """Tests for from_flat."""

    def test_rebuilds_from_views(self):
        """Test the column views rebuild an equal tree."""
        tree = from_nested(USERS_NESTED)
        rebuilt = from_flat(tree.as_values(), tree.as_levels(), tree.as_parents())
        assert rebuilt == tree
        assert rebuilt is not tree

    def test_root_only(self):
        """Test a single root."""
        assert from_flat(['r'], [0], [0]) == FlatTree('r')

    def test_length_mismatch(self):
        """Test columns of different length are rejected."""
        with pytest.raises(InvalidStructureError, match="differ in length"):
            from_flat(['a', 'b'], [0, 1], [0])

    def test_empty(self):
        """Test empty columns are rejected."""
        with pytest.raises(InvalidStructureError, match="at least a root"):
            from_flat([], [], [])

    def test_bad_root(self):
        """Test the root must have level 0 and parent 0."""
        with pytest.raises(InvalidStructureError, match="Position 0"):
            from_flat(['a'], [1], [0])

    def test_parent_after_child(self):
        """Test a parent must precede its child."""
        with pytest.raises(InvalidStructureError, match="must precede"):
            from_flat(['a', 'b', 'c'], [0, 1, 1], [0, 2, 0])

    def test_wrong_level(self):
        """Test a child must be one level below its parent."""
        with pytest.raises(InvalidStructureError, match="level 2"):
            from_flat(['a', 'b'], [0, 2], [0, 0])

    def test_not_preorder(self):
        """Test a child appearing after its parent's subtree closed."""
        with pytest.raises(InvalidStructureError, match="not contiguous"):
            from_flat(['a', 'b', 'c', 'd'], [0, 1, 1, 2], [0, 0, 0, 1])

    def test_is_value_error(self):
        """Test InvalidStructureError is a ValueError."""
        with pytest.raises(ValueError):
            from_flat(['a'], [0], [1])


class TestFromLevels:
    """Tests for from_levels."""

    def test_users(self):
        """Test the folder example from values and depths."""
        tree = from_levels(
            ['Users', 'jhon_doe', 'file1.rs', 'file2.rs', 'jane_doe', 'cat.jpg'],
            [0, 1, 2, 2, 1, 2],
        )
        assert tree == from_nested(USERS_NESTED)

    def test_root_only(self):
        """Test a single root."""
        assert from_levels(['r'], [0]) == FlatTree('r')

    def test_length_mismatch(self):
        """Test columns of different length are rejected."""
        with pytest.raises(InvalidStructureError, match="differ in length"):
            from_levels(['a', 'b'], [0])

    def test_empty(self):
        """Test empty columns are rejected."""
        with pytest.raises(InvalidStructureError, match="at least a root"):
            from_levels([], [])

    def test_bad_root(self):
        """Test the first level must be 0."""
        with pytest.raises(InvalidStructureError, match="Position 0"):
            from_levels(['a'], [1])

    def test_second_root(self):
        """Test level 0 after the root is rejected."""
        with pytest.raises(InvalidStructureError, match="Position 2.*only one root"):
            from_levels(['a', 'b', 'c'], [0, 1, 0])

    def test_skipped_level(self):
        """Test a jump of more than one level down is rejected."""
        with pytest.raises(InvalidStructureError, match="Position 2.*skips a level"):
            from_levels(['a', 'b', 'c'], [0, 1, 3])


class TestToNested:
    """Tests for to_nested."""

    def test_users(self):
        """Test the folder example converts back to nested pairs."""
        assert to_nested(from_nested(USERS_NESTED)) == USERS_NESTED

    def test_root_only(self):
        """Test the root is always a pair."""
        assert to_nested(FlatTree('r')) == ('r', [])
