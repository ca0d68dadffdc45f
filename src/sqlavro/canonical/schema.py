from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class DecimalLogicalType:
    """
    Avro decimal logical type, carried on a bytes schema.
    """
    precision: int
    scale: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "bytes",
            "logicalType": "decimal",
            "precision": self.precision,
            "scale": self.scale,
        }


# A resolved value branch: an Avro primitive name ("int", "string", ...)
# or a decimal logical type.
ValueType = Union[str, DecimalLogicalType]


@dataclass(frozen=True)
class NullableUnion:
    """
    Two-branch union: null first, then the value type.
    """
    value_type: ValueType

    @property
    def branches(self) -> Tuple[Any, ...]:
        return ("null", self.value_type)

    def to_list(self) -> list:
        value = self.value_type
        if isinstance(value, DecimalLogicalType):
            value = value.to_dict()
        return ["null", value]


@dataclass(frozen=True)
class SchemaField:
    """
    One record field per source column.
    """
    name: str                       # sanitized Avro identifier
    type_schema: NullableUnion
    column_name: str                # original column name
    sql_type: int                   # original SQL type code

    @property
    def properties(self) -> Dict[str, str]:
        return {
            "columnName": self.column_name,
            "sqlType": str(self.sql_type),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type_schema.to_list(),
            "default": None,
            **self.properties,
        }


@dataclass(frozen=True)
class RecordSchema:
    """
    Avro record schema describing one imported table or query result.
    """
    name: str
    namespace: Optional[str]
    doc: str
    fields: Tuple[SchemaField, ...]
    table_name: str

    @property
    def properties(self) -> Dict[str, str]:
        return {"tableName": self.table_name}

    def get_field(self, name: str) -> Optional[SchemaField]:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def to_dict(self) -> Dict[str, Any]:
        """
        Return the schema as an Avro JSON document.
        """
        schema: Dict[str, Any] = {
            "type": "record",
            "name": self.name,
        }
        if self.namespace:
            schema["namespace"] = self.namespace
        schema["doc"] = self.doc
        schema["fields"] = [f.to_dict() for f in self.fields]
        schema.update(self.properties)
        return schema
