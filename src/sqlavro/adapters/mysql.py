from typing import Dict, Iterable, Optional, Tuple

from sqlavro.adapters.generic import GenericTypeMapping
from sqlavro.canonical.column import ColumnDescriptor
from sqlavro.standards import sql_types as T


class MySQLTypeMapping(GenericTypeMapping):
    """
    MySQL rules on top of the generic mapping.

    - INT UNSIGNED does not fit a signed 32-bit int -> long
    - BIGINT UNSIGNED does not fit a signed 64-bit long -> string
    - TINYINT(1) is MySQL's boolean

    Vendor type labels are taken per (table, column) from the column
    descriptors in prepare(), since the JDBC code alone cannot tell
    them apart.
    """

    vendor = "mysql"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._type_names: Dict[Tuple[Optional[str], str], str] = {}

    def prepare(self, table_name: Optional[str], columns: Iterable[ColumnDescriptor]):
        # Replace, not merge: labels from an earlier read of this table are dropped
        self._type_names = {
            key: label for key, label in self._type_names.items() if key[0] != table_name
        }
        for column in columns:
            if column.type_name:
                self._type_names[(table_name, column.name)] = column.type_name.strip().upper()

    def _type_name(self, table_name, column_name) -> str:
        if column_name is None:
            return ""
        return self._type_names.get((table_name, column_name), "")

    def default_primitive_mapping(self, table_name, column_name, sql_type):
        type_name = self._type_name(table_name, column_name)
        unsigned = "UNSIGNED" in type_name

        if unsigned and sql_type == T.INTEGER:
            return "long"

        if unsigned and sql_type == T.BIGINT:
            return "string"

        if sql_type == T.TINYINT and type_name.startswith("TINYINT(1)"):
            return "boolean"

        return super().default_primitive_mapping(table_name, column_name, sql_type)

