import math
from typing import Optional, Tuple

from sqlavro.canonical.schema import DecimalLogicalType
from sqlavro.utils.exceptions import InvalidDecimalError

MAX_PRECISION = 38
DEFAULT_SCALE = 0


def _estimate_byte_count(precision: int) -> int:
    # Bytes needed to hold the unscaled two's-complement value.
    return int(math.ceil((math.log2(10 ** precision - 1) + 1) / 8))


# Index 0 holds precision 1.
PRECISION_TO_BYTE_COUNT: Tuple[int, ...] = tuple(
    _estimate_byte_count(prec) for prec in range(1, MAX_PRECISION + 1)
)


def byte_count_for_precision(precision: int) -> int:
    """
    Number of bytes needed to store a decimal of the given precision.
    """
    if precision < 1 or precision > MAX_PRECISION:
        raise InvalidDecimalError(
            f"Decimal precision must be between 1 and {MAX_PRECISION}, got {precision}"
        )
    return PRECISION_TO_BYTE_COUNT[precision - 1]


def create_decimal_type(
    precision: Optional[int],
    scale: Optional[int],
    default_precision: int = MAX_PRECISION,
    default_scale: int = DEFAULT_SCALE,
) -> DecimalLogicalType:
    """
    Build a decimal logical type from column precision and scale.

    Rules:
    - Missing or non-positive precision -> default_precision
    - Missing or negative scale -> default_scale
    - Precision above MAX_PRECISION is capped
    - Scale greater than precision is rejected
    """
    if precision is None or precision <= 0:
        precision = default_precision

    if scale is None or scale < 0:
        scale = default_scale

    if precision <= 0:
        raise InvalidDecimalError(
            f"Invalid decimal precision: {precision}"
        )

    precision = min(precision, MAX_PRECISION)

    if scale > precision:
        raise InvalidDecimalError(
            f"Invalid decimal scale: {scale} (greater than precision {precision})"
        )

    return DecimalLogicalType(precision=precision, scale=scale)
