from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple
from dataclasses import dataclass
from .column import (
    Column, ColumnDefault, COLUMN_DEFAULT_NULL, column_default_value,
    column_default_expression
)

logger = logging.getLogger(__name__)

# MySQL 5.7 기준 문자셋별 기본 collation
DEFAULT_COLLATIONS: Dict[str, str] = {
    'armscii8': 'armscii8_general_ci',
    'ascii': 'ascii_general_ci',
    'big5': 'big5_chinese_ci',
    'binary': 'binary',
    'cp1250': 'cp1250_general_ci',
    'cp1251': 'cp1251_general_ci',
    'cp932': 'cp932_japanese_ci',
    'euckr': 'euckr_korean_ci',
    'gb2312': 'gb2312_chinese_ci',
    'gbk': 'gbk_chinese_ci',
    'greek': 'greek_general_ci',
    'hebrew': 'hebrew_general_ci',
    'latin1': 'latin1_swedish_ci',
    'latin2': 'latin2_general_ci',
    'sjis': 'sjis_japanese_ci',
    'ucs2': 'ucs2_general_ci',
    'ujis': 'ujis_japanese_ci',
    'utf16': 'utf16_general_ci',
    'utf32': 'utf32_general_ci',
    'utf8': 'utf8_general_ci',
    'utf8mb3': 'utf8mb3_general_ci',
    'utf8mb4': 'utf8mb4_general_ci',
}

_TEMPORAL_TYPES = ('timestamp', 'datetime')


@dataclass
class ColumnMeta:
    """ SHOW FULL COLUMNS 결과의 한 행
    """
    field: str
    type: str
    collation: Optional[str]
    null: str
    key: str
    default: Optional[str]
    extra: str
    privileges: str
    comment: str


def column_from_meta(
        meta: ColumnMeta,
        default_collations: Optional[Dict[str, str]] = None) -> Column:
    if default_collations is None:
        default_collations = DEFAULT_COLLATIONS

    type_in_db = _normalize_type(meta.type)
    extra = (meta.extra or '').strip()
    nullable = (meta.null == 'YES')
    char_set, collation = _split_collation(meta.collation, default_collations)

    return Column(
        name=meta.field,
        type_in_db=type_in_db,
        nullable=nullable,
        auto_increment=('auto_increment' in extra.lower()),
        default=_parse_default(meta.default, type_in_db, extra),
        on_update=_parse_on_update(extra),
        char_set=char_set,
        collation=collation,
        comment=meta.comment or '',
    )


def _normalize_type(type: str) -> str:
    # enum, set 멤버 값은 대소문자를 유지해야 함
    type = type.strip()
    name, paren, rest = type.partition('(')
    return name.lower() + paren + rest


def _split_collation(
        collation: Optional[str],
        default_collations: Dict[str, str]) -> Tuple[str, str]:
    if not collation:
        return '', ''

    char_set = collation.split('_', 1)[0]
    if char_set not in default_collations:
        logger.debug(
            'Unknown default collation for character set %s, keeping %s',
            char_set, collation)
        return char_set, collation

    if default_collations[char_set] == collation:
        return char_set, ''
    return char_set, collation


def _is_current_timestamp(value: str) -> bool:
    return value.upper().startswith('CURRENT_TIMESTAMP')


def _parse_default(
        default: Optional[str], type_in_db: str,
        extra: str) -> ColumnDefault:
    # NOT NULL 컬럼의 DEFAULT NULL 은 렌더링 시 생략됨
    if default is None:
        return COLUMN_DEFAULT_NULL

    # MySQL 8 은 표현식 기본값에 DEFAULT_GENERATED 를 표시함
    if 'default_generated' in extra.lower():
        return column_default_expression(default)

    if type_in_db.startswith(_TEMPORAL_TYPES) and _is_current_timestamp(default):
        logger.debug(
            'Treating default %s of %s column as expression', default,
            type_in_db)
        return column_default_expression(default.upper())

    return column_default_value(default)


def _parse_on_update(extra: str) -> str:
    index = extra.lower().find('on update ')
    if index < 0:
        return ''

    expression = extra[index + len('on update '):].strip()
    if _is_current_timestamp(expression):
        return expression.upper()
    return expression
