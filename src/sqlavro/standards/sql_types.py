"""
JDBC SQL type codes (java.sql.Types).

Column metadata coming from a database driver identifies each column's
declared type by one of these integer codes. Configuration files may use
either the code or its name.
"""

from typing import Dict, Optional, Union

BIT = -7
TINYINT = -6
SMALLINT = 5
INTEGER = 4
BIGINT = -5
FLOAT = 6
REAL = 7
DOUBLE = 8
NUMERIC = 2
DECIMAL = 3
CHAR = 1
VARCHAR = 12
LONGVARCHAR = -1
DATE = 91
TIME = 92
TIMESTAMP = 93
BINARY = -2
VARBINARY = -3
LONGVARBINARY = -4
NULL = 0
OTHER = 1111
JAVA_OBJECT = 2000
DISTINCT = 2001
STRUCT = 2002
ARRAY = 2003
BLOB = 2004
CLOB = 2005
REF = 2006
DATALINK = 70
BOOLEAN = 16
ROWID = -8
NCHAR = -15
NVARCHAR = -9
LONGNVARCHAR = -16
NCLOB = 2011
SQLXML = 2009
REF_CURSOR = 2012
TIME_WITH_TIMEZONE = 2013
TIMESTAMP_WITH_TIMEZONE = 2014


SQL_TYPE_CODES: Dict[str, int] = {
    name: value
    for name, value in globals().items()
    if name.isupper() and isinstance(value, int)
}

_NAMES_BY_CODE: Dict[int, str] = {v: k for k, v in SQL_TYPE_CODES.items()}


def sql_type_name(code: int) -> Optional[str]:
    """
    Return the JDBC name for a type code, or None for vendor-specific codes.
    """
    return _NAMES_BY_CODE.get(code)


def resolve_sql_type(value: Union[int, str]) -> int:
    """
    Resolve a SQL type given as an integer code, a numeric string,
    or a case-insensitive JDBC type name.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid SQL type: {value!r}")

    if isinstance(value, int):
        return value

    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid SQL type: {value!r}")

    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass

    key = text.upper().replace(" ", "_")
    if key not in SQL_TYPE_CODES:
        raise ValueError(f"Unknown SQL type name: {value}")

    return SQL_TYPE_CODES[key]
