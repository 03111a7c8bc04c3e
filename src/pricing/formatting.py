from __future__ import annotations

import numpy as np


def format_price(raw: float) -> float:
    """
    Truncate a price to two decimal places (toward zero, never rounded).

    21.7897 -> 21.78

    Truncation runs on the binary float `raw * 100`, so a value stored just
    below its decimal drops a cent (4.35 -> 4.34). Quoted figures depend on
    this: 79 - 7.9 must format to 71.09. Do not switch to Decimal.
    """
    return float(np.trunc(raw * 100) / 100)
