from __future__ import annotations

from sqlalchemy.dialects import mysql


# named paramstyle keeps the preparer from doubling `%` in identifiers
_preparer = mysql.dialect(paramstyle='named').identifier_preparer

_VALUE_ESCAPES = {
    '\\': '\\\\',
    '\000': '\\0',
    "'": "''",
    '\n': '\\n',
    '\r': '\\r',
}

_VALUE_UNESCAPES = {
    '\\': '\\',
    '0': '\000',
    'n': '\n',
    'r': '\r',
}


def escape_identifier(name: str) -> str:
    return _preparer.quote_identifier(name)


def escape_value_for_create_table(value: str) -> str:
    """ SHOW CREATE TABLE 출력과 동일한 방식으로 작은따옴표 리터럴 내부 값을 이스케이프
    """
    return ''.join(map(lambda char: _VALUE_ESCAPES.get(char, char), value))


def unescape_value(text: str) -> str:
    chars = []
    index = 0
    while index < len(text):
        char = text[index]
        pair = text[index:index + 2]
        if char == '\\' and len(pair) == 2:
            chars.append(_VALUE_UNESCAPES.get(pair[1], pair[1]))
            index += 2
        elif pair == "''":
            chars.append("'")
            index += 2
        else:
            chars.append(char)
            index += 1
    return ''.join(chars)
