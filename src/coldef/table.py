from __future__ import annotations

from typing import List, Optional, Iterator
from dataclasses import dataclass, field
from rich.console import Console
from .column import Column
from .escape import escape_identifier


class ColumnNotFoundException(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


@dataclass
class Table:
    """ 컬럼 정의 렌더링에는 char_set, collation 두 필드만 사용됨

    렌더링/비교 중인 Table, Column 값은 불변 스냅샷으로 취급하며,
    변경이 필요하면 dataclasses.replace 로 통째로 교체해야 함
    """
    name: str
    char_set: str = ''
    collation: str = ''
    columns: List[Column] = field(default_factory=list)

    def fields(self) -> List[str]:
        return list(map(lambda column: column.name, self.columns))

    def column_definitions(self) -> List[str]:
        return [column.definition(self) for column in self.columns]

    def describe(self, console: Optional[Console] = None) -> None:
        if console is None:
            console = Console()
        title = escape_identifier(self.name)
        console.print(title, markup=False, highlight=False)
        console.print('-' * len(title))
        for definition in self.column_definitions():
            console.print(f'  {definition}', markup=False, highlight=False)

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def __len__(self):
        return len(self.columns)

    def __contains__(self, column_name: str) -> bool:
        column = next(filter(
            lambda column: column.name == column_name, self.columns
        ), None)
        return column is not None

    def __getitem__(self, column_name: str) -> Column:
        column = next(filter(
            lambda column: column.name == column_name, self.columns
        ), None)
        if column is None:
            raise ColumnNotFoundException(column_name)
        else:
            return column
