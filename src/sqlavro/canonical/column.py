from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Column metadata as reported by the source database.
    Order of descriptors follows the table's ordinal positions.
    """
    name: str
    sql_type: int                   # java.sql.Types code
    precision: Optional[int] = None
    scale: Optional[int] = None

    # Vendor type label, e.g. "INT UNSIGNED" (informational)
    type_name: Optional[str] = None
