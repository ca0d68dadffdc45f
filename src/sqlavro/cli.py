import argparse
import json
import sys

from sqlavro.adapters.static_source import StaticColumnSource
from sqlavro.execution.config_executor import ConfigExecutor, run_generation
from sqlavro.execution.options import GeneratorOptions, parse_override_map


class C:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    BLUE = "\033[34m"


def cprint(text: str, color: str = C.RESET, bold: bool = False):
    prefix = (C.BOLD if bold else "") + color
    print(f"{prefix}{text}{C.RESET}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SQL table to Avro schema generator")

    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument("--columns", help="YAML file with column metadata")
    parser.add_argument("--table", help="Table name (omit for a query import)")
    parser.add_argument("--schema-name", help="Record name override")
    parser.add_argument("--class-name", help="Fully qualified record name")
    parser.add_argument("--package-name", help="Record namespace")
    parser.add_argument("--vendor", default="generic", help="Database vendor")
    parser.add_argument(
        "--map-column-java",
        help="Column type overrides, e.g. ID=Long,FLAG=Boolean",
    )
    parser.add_argument(
        "--decimal-logical-type",
        action="store_true",
        help="Map DECIMAL/NUMERIC to the Avro decimal logical type",
    )
    parser.add_argument("--output", help="Write schema to this .avsc file")
    return parser


def _execute(args: argparse.Namespace):
    if args.config:
        return ConfigExecutor(args.config).execute()

    if not args.columns:
        raise ValueError("Either --config or --columns is required")

    options = GeneratorOptions(
        decimal_logical_type=args.decimal_logical_type,
        map_column_types=parse_override_map(args.map_column_java),
        class_name=args.class_name,
        package_name=args.package_name,
        vendor=args.vendor,
    )
    return run_generation(
        options=options,
        source=StaticColumnSource.from_yaml_file(args.columns),
        table_name=args.table,
        schema_name=args.schema_name,
        output_path=args.output,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        schema = _execute(args)
    except Exception as e:
        cprint("[FAILED] Schema generation failed.", C.RED, bold=True)
        cprint(str(e), C.RED)
        return 1

    if args.output:
        cprint(f"[DONE] Schema written to: {args.output}", C.GREEN, bold=True)
    else:
        print(json.dumps(schema, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
