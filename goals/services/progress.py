# goals/services/progress.py
"""
Progress helpers for goals and key results. Kept small & testable.
Inputs are duck-typed: anything with current_value / target_value.
"""
from typing import Iterable, Optional

from base.utils import round_half_up


def key_result_progress(current: Optional[float], target: Optional[float]) -> float:
    """
    current/target as a percentage clamped to 0..100.
    A non-positive target counts as complete once current reaches it.
    """
    current = current or 0
    target = target or 0
    if target <= 0:
        return 100.0 if current >= target else 0.0
    return max(0.0, min(current / target * 100, 100.0))


def calculate_goal_progress(key_results: Iterable) -> int:
    """Mean of the key results' progress, rounded half-up; 0 when there are none."""
    items = list(key_results or [])
    if not items:
        return 0
    total = sum(key_result_progress(kr.current_value, kr.target_value) for kr in items)
    return round_half_up(total / len(items))
