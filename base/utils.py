# base/utils.py
from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round like the dashboard does: 0.5 always goes up (12.5 → 13, -0.5 → 0)."""
    return int(math.floor(value + 0.5))


def percent(part: int, total: int) -> int:
    # 0 عندما لا توجد عناصر
    if not total:
        return 0
    return round_half_up(100 * part / total)
