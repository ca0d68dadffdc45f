from typing import List, Optional

from sqlavro.adapters.base import ColumnMetadataSource, VendorTypeMapping
from sqlavro.canonical.schema import NullableUnion, RecordSchema, SchemaField
from sqlavro.pipeline.datatype import TypeMapper
from sqlavro.pipeline.naming import (
    QUERY_RESULT,
    TableNaming,
    dedupe_identifiers,
    to_avro_identifier,
)
from sqlavro.utils.exceptions import MetadataUnavailableError


DEFAULT_SCHEMA_NAME = "AutoGeneratedSchema"


class AvroSchemaGenerator:
    """
    Creates an Avro record schema for a table (or query result).

    Assumptions:
    - Column order from the metadata source is the field order
    - Every field is nullable
    - Errors abort the whole schema; no partial result is returned
    """

    def __init__(
        self,
        options,
        source: ColumnMetadataSource,
        mapping: VendorTypeMapping,
        table_name: Optional[str] = None,
    ):
        self.options = options
        self.source = source
        self.mapping = mapping
        self.table_name = table_name
        self.type_mapper = TypeMapper(options, mapping, table_name)
        self.naming = TableNaming(
            class_name=options.class_name,
            package_name=options.package_name,
        )

    def to_avro_schema(
        self,
        sql_type: int,
        column_name: Optional[str] = None,
        precision: Optional[int] = None,
        scale: Optional[int] = None,
    ) -> NullableUnion:
        return self.type_mapper.map_column(sql_type, column_name, precision, scale)

    def _build_fields(self) -> List[SchemaField]:
        column_names = self.source.get_column_names(self.table_name)
        column_info = self.source.get_column_info(self.table_name)
        self.mapping.prepare(self.table_name, column_info.values())

        cleaned_names = dedupe_identifiers(
            to_avro_identifier(name) for name in column_names
        )

        fields: List[SchemaField] = []
        for column_name, cleaned in zip(column_names, cleaned_names):
            column = column_info.get(column_name)
            if column is None:
                raise MetadataUnavailableError(
                    f"No type information for column '{column_name}'"
                )

            fields.append(SchemaField(
                name=cleaned,
                type_schema=self.to_avro_schema(
                    column.sql_type, column_name, column.precision, column.scale
                ),
                column_name=column_name,
                sql_type=column.sql_type,
            ))

        return fields

    def generate(self, schema_name_override: Optional[str] = None) -> RecordSchema:
        fields = self._build_fields()

        if self.table_name is None:
            short_name = DEFAULT_SCHEMA_NAME
            avro_table_name = QUERY_RESULT
        else:
            short_name = self.naming.short_record_name(self.table_name)
            avro_table_name = self.table_name

        if schema_name_override is not None:
            name = schema_name_override
        else:
            name = short_name or avro_table_name

        return RecordSchema(
            name=name,
            namespace=self.naming.namespace_for_table(),
            doc=f"Import of {avro_table_name}",
            fields=tuple(fields),
            table_name=avro_table_name,
        )
