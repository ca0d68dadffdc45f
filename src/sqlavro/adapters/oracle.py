from typing import Dict

from sqlavro.adapters.generic import GenericTypeMapping

# Oracle JDBC vendor type codes (oracle.jdbc.OracleTypes)
BINARY_FLOAT = 100
BINARY_DOUBLE = 101
TIMESTAMPTZ = -101
TIMESTAMPLTZ = -102
INTERVALYM = -103
INTERVALDS = -104

# NUMBER declared without precision reports precision 0, scale -127
_UNDECLARED_SCALE = -127

_ORACLE_TYPE_MAP: Dict[int, str] = {
    BINARY_FLOAT: "float",
    BINARY_DOUBLE: "double",
    TIMESTAMPTZ: "string",
    TIMESTAMPLTZ: "string",
    INTERVALYM: "string",
    INTERVALDS: "string",
}


class OracleTypeMapping(GenericTypeMapping):
    """
    Oracle rules on top of the generic mapping.
    """

    vendor = "oracle"

    def _lookup(self, sql_type):
        if sql_type in _ORACLE_TYPE_MAP:
            return _ORACLE_TYPE_MAP[sql_type]
        return super()._lookup(sql_type)

    def default_decimal_logical_type(
        self, table_name, column_name, sql_type, precision, scale
    ):
        if scale == _UNDECLARED_SCALE:
            # Bare NUMBER: fall back to configured defaults for both
            precision, scale = None, None
        return super().default_decimal_logical_type(
            table_name, column_name, sql_type, precision, scale
        )
