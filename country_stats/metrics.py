import logging
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

import numpy as np
import pandas as pd


logger = logging.getLogger(__name__)

DECIMALS = 2
_QUANTUM = Decimal(1).scaleb(-DECIMALS)

# digits may be grouped with single underscores ("1_000")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+(?:_\d+)*)")


def is_missing(value: Any) -> bool:
    return value is None or (pd.api.types.is_scalar(value) and pd.isna(value))


def to_int(value: Any) -> int:
    """
    Parse-int-or-zero coercion for raw dataset cells.

    Integers pass through, floats are truncated, strings contribute their
    leading integer prefix ("12abc" -> 12, "3.9" -> 3, "1_000" -> 1000).
    Anything else, including None, NaN, empty strings and digit runs too
    long to convert, becomes 0. Never raises.
    """
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        if not np.isfinite(value):
            logger.debug("coercing non-finite value %r to 0", value)
            return 0
        return int(value)
    if is_missing(value):
        return 0
    m = _INT_PREFIX.match(str(value))
    if m is None:
        if str(value).strip():
            logger.debug("coercing non-numeric value %r to 0", value)
        return 0
    try:
        return int(m.group(1))
    except ValueError:
        logger.debug("coercing oversized value (%d chars) to 0", len(m.group(1)))
        return 0


def safe_ratio(num: float, den: float, scale: float = 1) -> float:
    """
    num / den * scale rounded to DECIMALS places, half-way values rounded up.

    The quotient is computed in Decimal so that exact halves such as 21 / 8
    (2.625) round to 2.63. A zero denominator means "no matches played" and
    gives 0.0.
    """
    if den == 0:
        return 0.0
    n, s, d = Decimal(num), Decimal(scale), Decimal(den)
    with localcontext() as ctx:
        # enough digits for an exact product and a quotient quantized to _QUANTUM
        ctx.prec = max(ctx.prec, n.adjusted() + s.adjusted() + abs(d.adjusted()) + DECIMALS + 10)
        exact = n * s / d
        return float(exact.quantize(_QUANTUM, rounding=ROUND_HALF_UP))
