import json
from typing import Dict

from fastavro import parse_schema
from fastavro.schema import SchemaParseException

from sqlavro.canonical.schema import RecordSchema
from sqlavro.utils.exceptions import AcceleratorError


class AvroJSONSchemaExporter:
    """
    Exports a RecordSchema as an Avro JSON schema (.avsc).
    """

    def __init__(self, schema: RecordSchema):
        self.schema = schema

    def export(self) -> Dict:
        """
        Return schema as JSON-serializable object.
        """
        return self.schema.to_dict()

    def validate(self) -> Dict:
        """
        Check the document is a legal Avro schema; returns the parsed form.
        """
        try:
            return parse_schema(self.export())
        except (SchemaParseException, ValueError, TypeError) as e:
            raise AcceleratorError(
                f"Generated schema '{self.schema.name}' is not valid Avro: {e}"
            ) from e

    def export_to_string(self, indent: int = 2) -> str:
        """
        Export schema as formatted JSON string.
        """
        return json.dumps(self.export(), indent=indent)

    def export_to_file(self, file_path: str, indent: int = 2):
        """
        Write schema to an .avsc file.
        """
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self.export(), f, indent=indent)
            f.write("\n")
