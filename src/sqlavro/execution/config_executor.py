import os
from typing import Dict

import yaml

from sqlavro.adapters.static_source import StaticColumnSource
from sqlavro.execution.options import GeneratorOptions
from sqlavro.governance.adapter_registry import AdapterRegistry
from sqlavro.observability.logger import (
    RequestTimer,
    generate_request_id,
    log_event,
)
from sqlavro.outputs.avro_json_generator import AvroJSONSchemaExporter
from sqlavro.pipeline.avro_schema import AvroSchemaGenerator


def run_generation(options: GeneratorOptions, source: StaticColumnSource, table_name=None,
                   schema_name=None, output_path=None) -> Dict:
    """
    Generate, validate and optionally write the schema for one table.
    Logs STARTED / COMPLETED / FAILED events around the run.
    """
    request_id = generate_request_id()
    timer = RequestTimer()

    log_event("SCHEMA_GENERATION_STARTED", {
        "request_id": request_id,
        "table": table_name,
        "vendor": options.vendor,
        "decimal_logical_type": options.decimal_logical_type,
    })

    try:
        mapping = AdapterRegistry.get_mapping(options.vendor, options)
        generator = AvroSchemaGenerator(options, source, mapping, table_name)
        schema = generator.generate(schema_name)

        exporter = AvroJSONSchemaExporter(schema)
        exporter.validate()
        if output_path:
            exporter.export_to_file(output_path)

        log_event("SCHEMA_GENERATION_COMPLETED", {
            "request_id": request_id,
            "table": table_name,
            "schema_name": schema.name,
            "field_count": len(schema.fields),
            "output": output_path,
            "duration_seconds": timer.duration(),
        })
        return exporter.export()

    except Exception as e:
        log_event("SCHEMA_GENERATION_FAILED", {
            "request_id": request_id,
            "table": table_name,
            "error": str(e),
        })
        raise


class ConfigExecutor:
    """
    Executes schema generation from a YAML configuration.

    Expected layout:
        table: ORDERS            # omit for a query import
        schema_name: Orders      # optional
        output: orders.avsc      # optional
        settings:
          vendor: mysql
          decimal_logical_type: true
          map_column_types: {ID: Long}
        columns:                 # or columns_file: path.yaml
          - {name: ID, sql_type: INTEGER}
    """

    def __init__(self, config_path: str):
        self.config_path = config_path
        self.config = self._load_config()

    # ------------------------------------------
    # Load YAML
    # ------------------------------------------
    def _load_config(self) -> Dict:
        if not os.path.exists(self.config_path):
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError(f"Config file must contain a mapping: {self.config_path}")
        return config

    def _resolve_path(self, path: str) -> str:
        # Relative paths are taken from the config file's directory
        if os.path.isabs(path):
            return path
        return os.path.join(os.path.dirname(os.path.abspath(self.config_path)), path)

    # ------------------------------------------
    # Build collaborators
    # ------------------------------------------
    def build_options(self) -> GeneratorOptions:
        settings = dict(self.config.get("settings") or {})
        if "vendor" in self.config:
            settings.setdefault("vendor", self.config["vendor"])
        return GeneratorOptions.from_dict(settings)

    def build_source(self) -> StaticColumnSource:
        columns_file = self.config.get("columns_file")
        if columns_file:
            return StaticColumnSource.from_yaml_file(self._resolve_path(columns_file))

        return StaticColumnSource.from_dict({
            "table": self.config.get("table"),
            "columns": self.config.get("columns") or [],
        })

    # ------------------------------------------
    # Execute
    # ------------------------------------------
    def execute(self) -> Dict:
        output = self.config.get("output")
        return run_generation(
            options=self.build_options(),
            source=self.build_source(),
            table_name=self.config.get("table"),
            schema_name=self.config.get("schema_name"),
            output_path=self._resolve_path(output) if output else None,
        )
