# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the tree renderer."""

import pytest

from genro_flattree import FlatTree, RenderStyle, from_nested, render
from genro_flattree.config import reset_runtime_config_cache
from genro_flattree.render import default_style, iter_lines

USERS = from_nested((
    'Users', [
        ('jhon_doe', ['file1.rs', 'file2.rs']),
        ('jane_doe', ['cat.jpg']),
    ],
))


@pytest.fixture(autouse=True)
def _reset_config():
    reset_runtime_config_cache()
    yield
    reset_runtime_config_cache()


class TestRender:
    """Tests for render and iter_lines."""

    def test_unicode(self):
        """Test the default box-drawing output."""
        assert render(USERS, RenderStyle.unicode()) == '\n'.join([
            '. Users',
            '├── jhon_doe',
            '│   ├── file1.rs',
            '│   └── file2.rs',
            '└── jane_doe',
            '    └── cat.jpg',
        ])

    def test_ascii(self):
        """Test the ASCII preset."""
        assert render(USERS, RenderStyle.ascii()) == '\n'.join([
            '. Users',
            '|-- jhon_doe',
            '|   |-- file1.rs',
            '|   `-- file2.rs',
            '`-- jane_doe',
            '    `-- cat.jpg',
        ])

    def test_root_only(self):
        """Test a single node renders one line."""
        assert render(FlatTree('alone')) == '. alone'

    def test_deep_continuation_columns(self):
        """Test pipes only continue under ancestors with later siblings."""
        tree = from_nested(('r', [('a', [('b', ['c'])]), 'd']))
        assert list(iter_lines(tree, RenderStyle.ascii())) == [
            '. r',
            '|-- a',
            '|   `-- b',
            '|       `-- c',
            '`-- d',
        ]

    def test_formatter(self):
        """Test a custom value formatter."""
        tree = from_nested((1, [2, 3]))
        lines = list(iter_lines(tree, RenderStyle.ascii(), formatter=lambda v: f'#{v}'))
        assert lines == ['. #1', '|-- #2', '`-- #3']

    def test_default_style_from_env(self, monkeypatch):
        """Test GENRO_FLATTREE_ASCII selects the ASCII preset."""
        monkeypatch.setenv('GENRO_FLATTREE_ASCII', '1')
        reset_runtime_config_cache()
        assert default_style() == RenderStyle.ascii()
        assert str(USERS).splitlines()[1] == '|-- jhon_doe'

    def test_default_style_is_unicode(self, monkeypatch):
        """Test the unicode preset is the default."""
        monkeypatch.delenv('GENRO_FLATTREE_ASCII', raising=False)
        assert default_style() == RenderStyle.unicode()
