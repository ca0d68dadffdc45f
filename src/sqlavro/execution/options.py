from dataclasses import dataclass, field
from typing import Dict, Optional

from sqlavro.inference.numeric_inference import DEFAULT_SCALE, MAX_PRECISION
from sqlavro.pipeline.datatype import OverrideType, parse_override_types


def parse_override_map(text: Optional[str]) -> Dict[str, OverrideType]:
    """
    Parse the command-line form "col1=Integer,col2=String".
    """
    if not text:
        return {}

    raw: Dict[str, str] = {}
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        if "=" not in item:
            raise ValueError(f"Malformed column type mapping: '{item}' (expected column=Type)")
        column, token = item.split("=", 1)
        column = column.strip()
        if not column:
            raise ValueError(f"Malformed column type mapping: '{item}' (missing column)")
        raw[column] = token.strip()

    return parse_override_types(raw)


@dataclass
class GeneratorOptions:
    """
    Settings that shape schema generation.
    Override tokens are parsed when options are built, so a bad
    token fails before any column is mapped.
    """
    decimal_logical_type: bool = False
    decimal_default_precision: int = MAX_PRECISION
    decimal_default_scale: int = DEFAULT_SCALE
    map_column_types: Dict[str, OverrideType] = field(default_factory=dict)

    class_name: Optional[str] = None
    package_name: Optional[str] = None
    vendor: str = "generic"

    def __post_init__(self):
        self.map_column_types = parse_override_types(self.map_column_types)

        if not isinstance(self.decimal_logical_type, bool):
            raise ValueError(
                f"decimal_logical_type must be true or false, got: {self.decimal_logical_type!r}"
            )
        if not (0 < self.decimal_default_precision <= MAX_PRECISION):
            raise ValueError(
                f"decimal_default_precision must be between 1 and {MAX_PRECISION}"
            )
        if not (0 <= self.decimal_default_scale <= self.decimal_default_precision):
            raise ValueError(
                "decimal_default_scale must be between 0 and decimal_default_precision"
            )

    @classmethod
    def from_dict(cls, settings: Optional[Dict]) -> "GeneratorOptions":
        settings = settings or {}
        return cls(
            decimal_logical_type=settings.get("decimal_logical_type", False),
            decimal_default_precision=settings.get("decimal_default_precision", MAX_PRECISION),
            decimal_default_scale=settings.get("decimal_default_scale", DEFAULT_SCALE),
            map_column_types=settings.get("map_column_types") or {},
            class_name=settings.get("class_name"),
            package_name=settings.get("package_name"),
            vendor=settings.get("vendor", "generic"),
        )
