from __future__ import annotations

from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass, field
from .escape import escape_identifier, escape_value_for_create_table

if TYPE_CHECKING:
    from .table import Table


@dataclass(frozen=True)
class ColumnDefault:
    null: bool = False
    quoted: bool = False
    value: str = ''

    def clause(self) -> str:
        if self.null:
            return 'DEFAULT NULL'
        elif self.quoted:
            return f"DEFAULT '{escape_value_for_create_table(self.value)}'"
        else:
            return f'DEFAULT {self.value}'


COLUMN_DEFAULT_NULL = ColumnDefault(null=True)


def column_default_value(value: str) -> ColumnDefault:
    return ColumnDefault(quoted=True, value=value)


""" 따옴표로 감싸지 않는 SQL 표현식 기본값
    (CURRENT_TIMESTAMP 또는 소수점 정밀도가 있는 경우 CURRENT_TIMESTAMP(N))
"""
def column_default_expression(expression: str) -> ColumnDefault:
    return ColumnDefault(value=expression)


@dataclass(frozen=True)
class Column:
    name: str
    type_in_db: str
    nullable: bool = False
    auto_increment: bool = False
    default: ColumnDefault = field(default_factory=ColumnDefault)
    on_update: str = ''
    char_set: str = ''  # 문자열 타입에서만 채워짐
    collation: str = ''  # char_set의 기본 collation과 다를 때만 채워짐
    comment: str = ''

    def can_have_default(self) -> bool:
        if self.auto_increment:
            return False
        # MySQL은 blob/text 계열 타입에 DEFAULT를 허용하지 않음
        if self.type_in_db.endswith('blob') or self.type_in_db.endswith('text'):
            return False
        return True

    def definition(self, table: Optional[Table] = None) -> str:
        """ CREATE TABLE 구문에 들어가는 컬럼 정의절 반환
        table이 전달되면 테이블과 문자셋이 겹치는 경우 CHARACTER SET 절을 생략함
        (SHOW CREATE TABLE의 표시 방식과 동일)
        """
        clauses = [
            self._char_set_clause(table),
            self._collation_clause(),
            self._nullability_clause(),
            self._auto_increment_clause(),
            self._default_clause(),
            self._on_update_clause(),
            self._comment_clause(),
        ]
        return f'{escape_identifier(self.name)} {self.type_in_db}' \
            + ''.join(clauses)

    def _char_set_clause(self, table: Optional[Table]) -> str:
        if self.char_set == '':
            return ''
        # collation ''은 char_set의 기본 collation을 뜻하므로 둘 다 비교해야 함
        if table is not None and self.collation == table.collation \
                and self.char_set == table.char_set:
            return ''
        return f' CHARACTER SET {self.char_set}'

    def _collation_clause(self) -> str:
        if self.collation == '':
            return ''
        return f' COLLATE {self.collation}'

    def _nullability_clause(self) -> str:
        if not self.nullable:
            return ' NOT NULL'
        elif self.type_in_db == 'timestamp':
            # timestamp는 NULL 허용 여부를 항상 표시함
            return ' NULL'
        return ''

    def _auto_increment_clause(self) -> str:
        return ' AUTO_INCREMENT' if self.auto_increment else ''

    def _default_clause(self) -> str:
        if not self.can_have_default():
            return ''
        # NOT NULL 컬럼의 DEFAULT NULL은 기본값 없음으로 표시
        if not self.nullable and self.default.null:
            return ''
        return f' {self.default.clause()}'

    def _on_update_clause(self) -> str:
        if self.on_update == '':
            return ''
        return f' ON UPDATE {self.on_update}'

    def _comment_clause(self) -> str:
        if self.comment == '':
            return ''
        return f" COMMENT '{escape_value_for_create_table(self.comment)}'"

    def equals(self, other: Optional[Column]) -> bool:
        return columns_equal(self, other)


def columns_equal(a: Optional[Column], b: Optional[Column]) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False
    return a == b
