import pytest

from sqlavro.adapters.base import ColumnMetadataSource
from sqlavro.adapters.mysql import MySQLTypeMapping
from sqlavro.adapters.static_source import StaticColumnSource
from sqlavro.canonical.column import ColumnDescriptor
from sqlavro.canonical.schema import DecimalLogicalType
from sqlavro.execution.options import GeneratorOptions
from sqlavro.pipeline.avro_schema import DEFAULT_SCHEMA_NAME, AvroSchemaGenerator
from sqlavro.pipeline.naming import QUERY_RESULT
from sqlavro.standards import sql_types as T
from sqlavro.utils.exceptions import InvalidTypeOverrideError, MetadataUnavailableError


class FailingSource(ColumnMetadataSource):
    def get_column_names(self, table_name):
        raise MetadataUnavailableError("connection refused")

    def get_column_info(self, table_name):
        raise MetadataUnavailableError("connection refused")


class MissingInfoSource(ColumnMetadataSource):
    def get_column_names(self, table_name):
        return ["a", "b"]

    def get_column_info(self, table_name):
        return {"a": ColumnDescriptor(name="a", sql_type=T.INTEGER)}


def test_fields_follow_retrieval_order(options, mapping, orders_source):
    schema = AvroSchemaGenerator(options, orders_source, mapping, "ORDERS").generate()

    assert [f.column_name for f in schema.fields] == ["order_id", "Amount", "created-at"]
    assert [f.name for f in schema.fields] == ["order_id", "Amount", "created_at"]


def test_non_alphabetical_order_is_preserved(options, mapping):
    source = StaticColumnSource({"T": [
        ColumnDescriptor(name="zeta", sql_type=T.VARCHAR),
        ColumnDescriptor(name="alpha", sql_type=T.BIGINT),
        ColumnDescriptor(name="mid", sql_type=T.BOOLEAN),
    ]})

    schema = AvroSchemaGenerator(options, source, mapping, "T").generate()

    assert [f.name for f in schema.fields] == ["zeta", "alpha", "mid"]
    assert [f.type_schema.value_type for f in schema.fields] == ["string", "long", "boolean"]


def test_field_provenance(options, mapping, orders_source):
    schema = AvroSchemaGenerator(options, orders_source, mapping, "ORDERS").generate()
    field = schema.get_field("created_at")

    assert field.properties == {"columnName": "created-at", "sqlType": str(T.TIMESTAMP)}
    assert field.to_dict() == {
        "name": "created_at",
        "type": ["null", "long"],
        "default": None,
        "columnName": "created-at",
        "sqlType": "93",
    }


def test_record_metadata_for_table(options, mapping, orders_source):
    schema = AvroSchemaGenerator(options, orders_source, mapping, "ORDERS").generate()

    assert schema.name == "ORDERS"
    assert schema.namespace is None
    assert schema.doc == "Import of ORDERS"
    assert schema.properties == {"tableName": "ORDERS"}


def test_schema_name_override_wins(mapping, orders_source):
    options = GeneratorOptions(class_name="com.acme.Orders")
    schema = AvroSchemaGenerator(options, orders_source, mapping, "ORDERS").generate("CustomName")

    assert schema.name == "CustomName"
    assert schema.namespace == "com.acme"
    assert schema.table_name == "ORDERS"


def test_class_and_package_naming(mapping, orders_source):
    options = GeneratorOptions(package_name="com.acme.imports")
    schema = AvroSchemaGenerator(options, orders_source, mapping, "ORDERS").generate()

    assert schema.name == "ORDERS"
    assert schema.namespace == "com.acme.imports"


def test_query_import_uses_default_names(options, mapping):
    source = StaticColumnSource({None: [ColumnDescriptor(name="total", sql_type=T.DOUBLE)]})

    schema = AvroSchemaGenerator(options, source, mapping, None).generate(None)

    assert schema.name == DEFAULT_SCHEMA_NAME
    assert schema.doc == f"Import of {QUERY_RESULT}"
    assert schema.to_dict()["tableName"] == QUERY_RESULT


def test_generate_is_idempotent(mapping, orders_source):
    options = GeneratorOptions(decimal_logical_type=True)
    generator = AvroSchemaGenerator(options, orders_source, mapping, "ORDERS")

    first = generator.generate()
    second = generator.generate()

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_decimal_column_with_flag(mapping, orders_source):
    options = GeneratorOptions(decimal_logical_type=True)
    schema = AvroSchemaGenerator(options, orders_source, mapping, "ORDERS").generate()

    assert schema.get_field("Amount").type_schema.value_type == DecimalLogicalType(10, 2)


def test_duplicate_sanitized_names_are_suffixed(options, mapping):
    source = StaticColumnSource({"T": [
        ColumnDescriptor(name="first name", sql_type=T.VARCHAR),
        ColumnDescriptor(name="first-name", sql_type=T.VARCHAR),
    ]})

    schema = AvroSchemaGenerator(options, source, mapping, "T").generate()

    assert [f.name for f in schema.fields] == ["first_name", "first_name_2"]
    assert [f.column_name for f in schema.fields] == ["first name", "first-name"]


def test_metadata_failure_propagates(options, mapping):
    generator = AvroSchemaGenerator(options, FailingSource(), mapping, "ORDERS")

    with pytest.raises(OSError):
        generator.generate()


def test_missing_column_info_is_fatal(options, mapping):
    generator = AvroSchemaGenerator(options, MissingInfoSource(), mapping, "T")

    with pytest.raises(MetadataUnavailableError, match="'b'"):
        generator.generate()


def test_unknown_table_is_fatal(options, mapping, orders_source):
    generator = AvroSchemaGenerator(options, orders_source, mapping, "CUSTOMERS")

    with pytest.raises(MetadataUnavailableError):
        generator.generate()


def test_invalid_override_fails_before_generation():
    with pytest.raises(InvalidTypeOverrideError):
        GeneratorOptions(map_column_types={"order_id": "UUID"})


def test_empty_schema_name_override_is_used(options, mapping, orders_source):
    schema = AvroSchemaGenerator(options, orders_source, mapping, "ORDERS").generate("")
    assert schema.name == ""


def test_vendor_type_names_apply_through_generator(options):
    source = StaticColumnSource({"T": [
        ColumnDescriptor(name="id", sql_type=T.INTEGER, type_name="INT UNSIGNED"),
        ColumnDescriptor(name="active", sql_type=T.TINYINT, type_name="TINYINT(1)"),
    ]})

    schema = AvroSchemaGenerator(options, source, MySQLTypeMapping(), "T").generate()

    assert [f.type_schema.to_list() for f in schema.fields] == [
        ["null", "long"],
        ["null", "boolean"],
    ]


def test_vendor_type_names_refresh_between_runs(options):
    mapping = MySQLTypeMapping()
    source = StaticColumnSource({"T": [
        ColumnDescriptor(name="id", sql_type=T.INTEGER, type_name="INT UNSIGNED"),
    ]})
    generator = AvroSchemaGenerator(options, source, mapping, "T")
    assert generator.generate().fields[0].type_schema.value_type == "long"

    source.add_table("T", [ColumnDescriptor(name="id", sql_type=T.INTEGER)])

    assert generator.generate().fields[0].type_schema.value_type == "int"
