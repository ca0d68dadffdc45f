from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from sqlavro.canonical.column import ColumnDescriptor
from sqlavro.canonical.schema import DecimalLogicalType


class ColumnMetadataSource(ABC):
    """
    Supplies column metadata for a table, or for a free-form query when
    table_name is None.

    Implementations raise MetadataUnavailableError when metadata
    cannot be retrieved.
    """

    @abstractmethod
    def get_column_names(self, table_name: Optional[str]) -> List[str]:
        """Column names in ordinal order."""
        raise NotImplementedError

    @abstractmethod
    def get_column_info(self, table_name: Optional[str]) -> Dict[str, ColumnDescriptor]:
        """Column descriptors keyed by column name."""
        raise NotImplementedError


class VendorTypeMapping(ABC):
    """
    Database-specific SQL type -> Avro type rules.

    Must resolve every SQL type code; there is no "unmappable" outcome.
    """

    vendor = "generic"

    def prepare(
        self,
        table_name: Optional[str],
        columns: Iterable[ColumnDescriptor],
    ) -> None:
        """Called with the table's descriptors before its columns are mapped."""
        return None

    @abstractmethod
    def default_primitive_mapping(
        self,
        table_name: Optional[str],
        column_name: Optional[str],
        sql_type: int,
    ) -> str:
        """Avro primitive type name for the column."""
        raise NotImplementedError

    @abstractmethod
    def default_decimal_logical_type(
        self,
        table_name: Optional[str],
        column_name: Optional[str],
        sql_type: int,
        precision: Optional[int],
        scale: Optional[int],
    ) -> DecimalLogicalType:
        """Decimal logical type for a DECIMAL/NUMERIC column."""
        raise NotImplementedError
