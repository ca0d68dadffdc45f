import os
from typing import Dict, Iterable, List, Optional

import yaml

from sqlavro.adapters.base import ColumnMetadataSource
from sqlavro.canonical.column import ColumnDescriptor
from sqlavro.standards.sql_types import resolve_sql_type
from sqlavro.utils.exceptions import MetadataUnavailableError


def _optional_int(value, label: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid {label}: {value!r}")
    return int(value)


def parse_column(entry: Dict) -> ColumnDescriptor:
    """
    Build a ColumnDescriptor from a config mapping:
    {name, sql_type, precision?, scale?, type_name?}
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Column entry must be a mapping, got: {entry!r}")

    name = entry.get("name")
    if not name or not str(name).strip():
        raise ValueError(f"Column entry is missing a name: {entry!r}")

    if "sql_type" not in entry:
        raise ValueError(f"Column '{name}' is missing sql_type")

    return ColumnDescriptor(
        name=str(name),
        sql_type=resolve_sql_type(entry["sql_type"]),
        precision=_optional_int(entry.get("precision"), "precision"),
        scale=_optional_int(entry.get("scale"), "scale"),
        type_name=entry.get("type_name"),
    )


class StaticColumnSource(ColumnMetadataSource):
    """
    Column metadata held in memory, keyed by table name.
    The None key holds the columns of a free-form query import.
    """

    def __init__(self, tables: Optional[Dict[Optional[str], Iterable[ColumnDescriptor]]] = None):
        self._tables: Dict[Optional[str], List[ColumnDescriptor]] = {}
        for table_name, columns in (tables or {}).items():
            self.add_table(table_name, columns)

    def add_table(self, table_name: Optional[str], columns: Iterable[ColumnDescriptor]):
        self._tables[table_name] = list(columns)

    def _columns(self, table_name: Optional[str]) -> List[ColumnDescriptor]:
        if table_name not in self._tables:
            label = table_name if table_name is not None else "<query>"
            raise MetadataUnavailableError(
                f"No column metadata available for table: {label}"
            )
        return self._tables[table_name]

    def get_column_names(self, table_name):
        return [c.name for c in self._columns(table_name)]

    def get_column_info(self, table_name):
        return {c.name: c for c in self._columns(table_name)}

    # ------------------------------------------
    # Construction from YAML
    # ------------------------------------------
    @classmethod
    def from_dict(cls, document: Dict) -> "StaticColumnSource":
        """
        Accepts either {"tables": {name: [columns...]}} or a single
        {"table": name, "columns": [...]} document. A missing table
        name registers the columns as a query import.
        """
        if not isinstance(document, dict):
            raise MetadataUnavailableError("Column metadata document must be a mapping")

        source = cls()
        try:
            if "tables" in document:
                for table_name, columns in (document["tables"] or {}).items():
                    source.add_table(table_name, [parse_column(c) for c in columns or []])
            else:
                source.add_table(
                    document.get("table"),
                    [parse_column(c) for c in document.get("columns") or []],
                )
        except ValueError as e:
            raise MetadataUnavailableError(f"Invalid column metadata: {e}") from e
        return source

    @classmethod
    def from_yaml_file(cls, file_path: str) -> "StaticColumnSource":
        if not os.path.exists(file_path):
            raise MetadataUnavailableError(f"Column metadata file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            try:
                document = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise MetadataUnavailableError(
                    f"Cannot parse column metadata file {file_path}: {e}"
                ) from e

        return cls.from_dict(document or {})
