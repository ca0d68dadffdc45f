"""
Pipeline step: source names -> Avro names

Responsibilities:
- Sanitize column names into legal Avro field names
- Keep field names unique within a record
- Derive record name and namespace for a table
"""

import re
from typing import Dict, Iterable, List, Optional


QUERY_RESULT = "QueryResult"

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]+")
_VALID_START = re.compile(r"[A-Za-z_]")


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def to_avro_identifier(name: str) -> str:
    """
    Normalize a raw name to an Avro identifier.

    Rules:
    - Each run of characters outside [A-Za-z0-9_] becomes one "_"
    - Must start with a letter or underscore, else prefixed with "AVRO_"
    """
    cleaned = _INVALID_CHARS.sub("_", name)

    if not cleaned or not _VALID_START.match(cleaned[0]):
        cleaned = f"AVRO_{cleaned}"

    return cleaned


def dedupe_identifiers(names: Iterable[str]) -> List[str]:
    """
    Deterministic deduplication: repeats get _2, _3, ... suffixes.
    """
    seen: Dict[str, int] = {}
    taken = set()
    result: List[str] = []

    for name in names:
        count = seen.get(name, 0) + 1
        candidate = name if count == 1 else f"{name}_{count}"
        while candidate in taken:
            count += 1
            candidate = f"{name}_{count}"
        seen[name] = count
        taken.add(candidate)
        result.append(candidate)

    return result


# ------------------------------------------------------------------
# Record naming
# ------------------------------------------------------------------

class TableNaming:
    """
    Record name and namespace policy.

    An explicit class_name ("pkg.sub.Name") fixes both the record name
    and the namespace; otherwise package_name supplies the namespace.
    """

    def __init__(self, class_name: Optional[str] = None, package_name: Optional[str] = None):
        self.class_name = class_name
        self.package_name = package_name

    def short_record_name(self, table_name: Optional[str]) -> str:
        if self.class_name:
            return self.class_name.rsplit(".", 1)[-1]

        return to_avro_identifier(table_name if table_name is not None else QUERY_RESULT)

    def namespace_for_table(self) -> Optional[str]:
        if self.class_name:
            if "." not in self.class_name:
                return None
            return self.class_name.rsplit(".", 1)[0]

        return self.package_name or None
