"""
Pipeline step: SQL column type -> nullable Avro type

Resolution order (first match wins):
1. User override for the column (map_column_types)
2. Decimal logical type, when enabled and the column is DECIMAL/NUMERIC
3. Vendor default mapping

Every column is modeled as a union of null and the resolved type.
"""

import logging
from enum import Enum
from typing import Dict, Optional

from sqlavro.adapters.base import VendorTypeMapping
from sqlavro.canonical.schema import NullableUnion, ValueType
from sqlavro.observability.logger import log_event
from sqlavro.standards import sql_types as T
from sqlavro.utils.exceptions import InvalidTypeOverrideError


class OverrideType(Enum):
    """
    Types a user may force onto a column, with their Avro primitive.
    """
    INTEGER = "int"
    LONG = "long"
    BOOLEAN = "boolean"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    BYTES = "bytes"

    @property
    def avro_type(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token, column: Optional[str] = None) -> "OverrideType":
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise InvalidTypeOverrideError(column, token)

        key = token.strip().upper()
        if key not in cls.__members__:
            raise InvalidTypeOverrideError(column, token)

        return cls[key]


def parse_override_types(mapping: Optional[Dict]) -> Dict[str, OverrideType]:
    """
    Parse a column -> type-name mapping, failing on the first bad token.
    """
    return {
        str(column): OverrideType.parse(token, column=str(column))
        for column, token in (mapping or {}).items()
    }


def is_decimal_type(sql_type: int) -> bool:
    return sql_type in (T.DECIMAL, T.NUMERIC)


class TypeMapper:
    """
    Resolves Avro types for the columns of one table.
    """

    def __init__(self, options, mapping: VendorTypeMapping, table_name: Optional[str] = None):
        self.options = options
        self.mapping = mapping
        self.table_name = table_name

    def _override_for(self, column_name: Optional[str]) -> Optional[OverrideType]:
        # No column name (bare sql type) means no override can apply.
        if column_name is None:
            return None
        return self.options.map_column_types.get(column_name)

    def resolve_value_type(
        self,
        sql_type: int,
        column_name: Optional[str] = None,
        precision: Optional[int] = None,
        scale: Optional[int] = None,
    ) -> ValueType:
        override = self._override_for(column_name)
        if override is not None:
            log_event("TYPE_OVERRIDE_APPLIED", {
                "table": self.table_name,
                "column": column_name,
                "sql_type": sql_type,
                "avro_type": override.avro_type,
            }, level=logging.DEBUG)
            return override.avro_type

        if self.options.decimal_logical_type and is_decimal_type(sql_type):
            return self.mapping.default_decimal_logical_type(
                self.table_name, column_name, sql_type, precision, scale
            )

        return self.mapping.default_primitive_mapping(
            self.table_name, column_name, sql_type
        )

    def map_column(
        self,
        sql_type: int,
        column_name: Optional[str] = None,
        precision: Optional[int] = None,
        scale: Optional[int] = None,
    ) -> NullableUnion:
        """
        Map one column to a union of null and its resolved type.
        """
        return NullableUnion(
            self.resolve_value_type(sql_type, column_name, precision, scale)
        )

    def map_sql_type(self, sql_type: int) -> NullableUnion:
        return self.map_column(sql_type, None, None, None)
