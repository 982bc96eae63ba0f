from typing import Optional
from app.schemas.kpi import PerformanceCategory

CRITICAL = PerformanceCategory(name="Critical", color="#EF4444", range="0-66%")
BAD = PerformanceCategory(name="Bad", color="#F59E0B", range="67-83%")
TARGET = PerformanceCategory(name="Target", color="#10B981", range="84-119%")
GOOD = PerformanceCategory(name="Good", color="#3B82F6", range="120%+")

# Ordered worst to best
PERFORMANCE_CATEGORIES = [CRITICAL, BAD, TARGET, GOOD]


def round_ratio(numerator: int, denominator: int) -> int:
    """Integer round of numerator / denominator, halves away from zero."""
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    magnitude = (2 * abs(numerator) + denominator) // (2 * denominator)
    return magnitude if numerator >= 0 else -magnitude


def achievement(actual: int, target: int) -> Optional[int]:
    """Achievement % of ``actual`` against ``target``; None when there is no target to measure against."""
    if not target or target <= 0:
        return None
    return round_ratio(actual * 100, target)


def classify(achievement_percentage: int) -> PerformanceCategory:
    if achievement_percentage <= 66:
        return CRITICAL
    elif achievement_percentage <= 83:
        return BAD
    elif achievement_percentage <= 119:
        return TARGET
    else:
        return GOOD
