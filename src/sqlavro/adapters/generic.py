import logging
from typing import Dict, Optional

from sqlavro.adapters.base import VendorTypeMapping
from sqlavro.canonical.schema import DecimalLogicalType
from sqlavro.inference.numeric_inference import (
    DEFAULT_SCALE,
    MAX_PRECISION,
    create_decimal_type,
)
from sqlavro.observability.logger import log_event
from sqlavro.standards import sql_types as T
from sqlavro.standards.sql_types import sql_type_name


_SQL_TO_AVRO_TYPE_MAP: Dict[int, str] = {
    T.TINYINT: "int",
    T.SMALLINT: "int",
    T.INTEGER: "int",
    T.BIGINT: "long",
    T.BIT: "boolean",
    T.BOOLEAN: "boolean",
    T.REAL: "float",
    T.FLOAT: "double",
    T.DOUBLE: "double",
    T.NUMERIC: "string",
    T.DECIMAL: "string",
    T.CHAR: "string",
    T.VARCHAR: "string",
    T.LONGVARCHAR: "string",
    T.NCHAR: "string",
    T.NVARCHAR: "string",
    T.LONGNVARCHAR: "string",
    T.CLOB: "string",
    T.NCLOB: "string",
    T.SQLXML: "string",
    T.DATE: "long",
    T.TIME: "long",
    T.TIMESTAMP: "long",
    T.BINARY: "bytes",
    T.VARBINARY: "bytes",
    T.LONGVARBINARY: "bytes",
    T.BLOB: "bytes",
}

FALLBACK_AVRO_TYPE = "string"


class GenericTypeMapping(VendorTypeMapping):
    """
    Standard JDBC type rules shared by all vendors.
    """

    vendor = "generic"

    def __init__(
        self,
        decimal_default_precision: int = MAX_PRECISION,
        decimal_default_scale: int = DEFAULT_SCALE,
    ):
        self.decimal_default_precision = decimal_default_precision
        self.decimal_default_scale = decimal_default_scale

    def _lookup(self, sql_type: int) -> Optional[str]:
        return _SQL_TO_AVRO_TYPE_MAP.get(sql_type)

    def default_primitive_mapping(self, table_name, column_name, sql_type):
        avro_type = self._lookup(sql_type)
        if avro_type is not None:
            return avro_type

        log_event("SQL_TYPE_FALLBACK", {
            "vendor": self.vendor,
            "table": table_name,
            "column": column_name,
            "sql_type": sql_type,
            "sql_type_name": sql_type_name(sql_type),
            "avro_type": FALLBACK_AVRO_TYPE,
        }, level=logging.WARNING)
        return FALLBACK_AVRO_TYPE

    def default_decimal_logical_type(
        self, table_name, column_name, sql_type, precision, scale
    ) -> DecimalLogicalType:
        return create_decimal_type(
            precision,
            scale,
            default_precision=self.decimal_default_precision,
            default_scale=self.decimal_default_scale,
        )
