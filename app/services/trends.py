from typing import Iterable
from app.schemas.kpi import Trend

IMPROVING = "improving"
DECLINING = "declining"
STABLE = "stable"

# Changes within ±DEAD_ZONE percent count as stable
DEAD_ZONE = 5


def round_change(numerator: int, denominator: int) -> int:
    """Integer round of numerator / denominator with halves going up, so -5.5 becomes -5."""
    return (2 * numerator + denominator) // (2 * denominator)


def metric_value(record, metric_key: str) -> int:
    return int((record.metrics or {}).get(metric_key, 0) or 0)


def _is_same_record(record, current) -> bool:
    if record is current:
        return True
    record_id = getattr(record, "id", None)
    if record_id is not None and record_id == getattr(current, "id", None):
        return True
    # One record per member and period, so a matching period is the current record
    return record.month == current.month and record.year == current.year


def previous_record(current_record, historical_records: Iterable):
    """Most recent record of the same member before ``current_record``, or None.

    Ties on (year, month) resolve to the first one in input order.
    """
    candidates = [
        r for r in historical_records
        if r.member_id == current_record.member_id and not _is_same_record(r, current_record)
    ]
    if not candidates:
        return None
    return max(candidates, key=lambda r: (r.year, r.month))


def analyze_trend(metric_key: str, current_record, historical_records: Iterable) -> Trend:
    current = metric_value(current_record, metric_key)
    prior = previous_record(current_record, historical_records)
    previous = metric_value(prior, metric_key) if prior is not None else 0

    if previous == 0:
        if current > 0:
            direction, change = IMPROVING, 100
        else:
            direction, change = STABLE, 0
    else:
        change = round_change((current - previous) * 100, previous)
        if change > DEAD_ZONE:
            direction = IMPROVING
        elif change < -DEAD_ZONE:
            direction = DECLINING
        else:
            direction = STABLE

    return Trend(
        metric_key=metric_key,
        current=current,
        previous=previous,
        direction=direction,
        change_percentage=change,
    )
