# contract_cost/utils/decimal_helpers.py

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

# Shared zero constant for financial calculations
ZERO_DECIMAL = Decimal('0.00')
# Standard quantization unit for money
TWO_PLACES = Decimal('0.01')
# Enough digits to quantize any finite float to cents (max float is ~1.8e308)
MONEY_PRECISION = 400


def to_money(value) -> Decimal:
    """Quantize a number to two places with ROUND_HALF_UP rounding.

    Floats go through their shortest repr so that 242000.00000000003
    becomes Decimal('242000.00') rather than carrying binary noise.
    """
    if isinstance(value, Decimal):
        d = value
    else:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Cannot convert non-finite value to money: {value}")
        d = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION
        result = d.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    # Normalise negative zero so it displays as 0.00
    return result if result != 0 else ZERO_DECIMAL
