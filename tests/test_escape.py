"""Unit tests for identifier and literal escaping."""

import pytest

from coldef import escape_identifier, escape_value_for_create_table, unescape_value


@pytest.mark.parametrize('name, expected', [
    ('id', '`id`'),
    ('select', '`select`'),
    ('with space', '`with space`'),
    ('a`b', '`a``b`'),
    ('100%', '`100%`'),
])
def test_escape_identifier(name, expected):
    assert escape_identifier(name) == expected


def test_escape_identifier_keeps_distinct_names_distinct():
    assert escape_identifier('a`') != escape_identifier('a``')


def test_escape_value_for_create_table():
    assert escape_value_for_create_table('plain') == 'plain'
    assert escape_value_for_create_table("it's") == "it''s"
    assert escape_value_for_create_table('back\\slash') == 'back\\\\slash'
    assert escape_value_for_create_table('line\nbreak\r') == 'line\\nbreak\\r'
    assert escape_value_for_create_table('nul\000') == 'nul\\0'


@pytest.mark.parametrize('value', [
    '',
    "it's",
    "''",
    '\\',
    "\\'",
    'multi\nline\r\ntext',
    'nul\000byte',
    '한글 값',
])
def test_unescape_restores_original(value):
    assert unescape_value(escape_value_for_create_table(value)) == value
