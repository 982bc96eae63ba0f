import logging
from typing import Dict, Iterable, List, Optional, Sequence
from app.data.defaults import DEFAULT_METRIC_KEYS
from app.schemas.kpi import ActionItem, ActionItemGroups
from app.services.categories import achievement, classify
from app.services.recommendations import RecommendationCatalog, select_recommendations
from app.services.targets import ROLE_WITH_FALLBACK, find_target
from app.services.trends import DECLINING, analyze_trend, metric_value

logger = logging.getLogger(__name__)

SEVERITY_BY_CATEGORY = {
    "Critical": "critical",
    "Bad": "warning",
    "Target": "info",
    "Good": "success",
}

PRIORITY_BY_CATEGORY = {
    "Critical": 1,
    "Bad": 2,
    "Target": 3,
    "Good": 4,
}


def format_change(change_percentage: int) -> str:
    sign = "+" if change_percentage >= 0 else ""
    return f"{sign}{change_percentage}%"


def generate_action_items(
    current_record,
    previous_records: Iterable,
    targets: Iterable,
    *,
    role: Optional[str] = None,
    lookup: str = ROLE_WITH_FALLBACK,
    metric_keys: Optional[Sequence[str]] = None,
    catalog: Optional[RecommendationCatalog] = None,
) -> List[ActionItem]:
    """Build the prioritized action items for one performance record.

    Metrics without a usable target, or without recommendation text for their
    category, are left out. Items come back sorted by priority (1 first); the
    sort is stable, so equal priorities keep metric order.
    """
    previous_records = list(previous_records)
    targets = list(targets)
    items: List[ActionItem] = []

    for metric_key in metric_keys or DEFAULT_METRIC_KEYS:
        target = find_target(targets, metric_key, role=role, mode=lookup)
        if target is None:
            logger.debug("No target for %s, skipping", metric_key)
            continue

        actual = metric_value(current_record, metric_key)
        pct = achievement(actual, target.monthly_target)
        if pct is None:
            logger.debug("Zero monthly target for %s, skipping", metric_key)
            continue
        category = classify(pct)

        trend = analyze_trend(metric_key, current_record, previous_records)

        severity = SEVERITY_BY_CATEGORY[category.name]
        priority = PRIORITY_BY_CATEGORY[category.name]
        if trend.direction == DECLINING and category.name != "Good":
            priority = max(1, priority - 1)

        recommendation = select_recommendations(metric_key, category.name, catalog)
        if recommendation is None:
            logger.debug("No recommendation text for %s/%s, skipping", metric_key, category.name)
            continue

        description = (
            f"Current: {actual} | Target: {target.monthly_target} | Achievement: {pct}% | "
            f"Trend: {trend.direction} ({format_change(trend.change_percentage)})"
        )

        items.append(ActionItem(
            id=f"{metric_key}-{current_record.id}",
            metric_key=metric_key,
            severity=severity,
            title=recommendation.title,
            description=description,
            recommendations=list(recommendation.recommendations),
            priority=priority,
        ))

    return sorted(items, key=lambda item: item.priority)


def group_by_severity(items: Iterable[ActionItem]) -> ActionItemGroups:
    groups: Dict[str, List[ActionItem]] = {"critical": [], "warning": [], "info": [], "success": []}
    for item in items:
        groups[item.severity].append(item)
    return ActionItemGroups(**groups)
