from __future__ import annotations

from .column import (
    Column, ColumnDefault, COLUMN_DEFAULT_NULL, column_default_value,
    column_default_expression, columns_equal
)
from .escape import (
    escape_identifier, escape_value_for_create_table, unescape_value
)
from .meta import ColumnMeta, DEFAULT_COLLATIONS, column_from_meta
from .table import Table, ColumnNotFoundException

__all__ = [
    'Column', 'ColumnDefault', 'COLUMN_DEFAULT_NULL', 'column_default_value',
    'column_default_expression', 'columns_equal', 'escape_identifier',
    'escape_value_for_create_table', 'unescape_value', 'ColumnMeta',
    'DEFAULT_COLLATIONS', 'column_from_meta', 'Table',
    'ColumnNotFoundException',
]
