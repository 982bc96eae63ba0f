"""
Report aggregates over performance records.

Everything here is pure: callers load members, records and targets first and
pass fully materialized lists in.

- category_stats():   band counts over every (record, metric) pair with a target.
- member_summaries(): per-member average achievement and critical/good counts.
- team_insights():    team-wide roll-up of the member summaries.
- annual_report():    yearly totals against annual targets, strengths,
                      improvements and recommendations.
- export_csv():       flat CSV of the records, one row per record.
"""
import csv
import io
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
from app.data.defaults import DEFAULT_METRIC_KEYS
from app.schemas.member import MemberResponse
from app.schemas.report import (
    AnnualReport, CategoryStats, MemberSummary, MetricAchievement, TeamInsights
)
from app.services.action_items import generate_action_items
from app.services.categories import achievement, classify, round_ratio
from app.services.performance import UNKNOWN_MEMBER, to_record_response
from app.services.recommendations import RecommendationCatalog
from app.services.targets import ROLE_WITH_FALLBACK, find_target
from app.services.trends import metric_value

DEFAULT_STRENGTHS = ["Consistent performance across all KPIs", "Reliable team member"]
DEFAULT_IMPROVEMENTS = ["Continue maintaining current performance levels"]
DEFAULT_RECOMMENDATIONS = ["Continue current strategies", "Focus on consistency"]

# Annual achievements below this are listed as improvements
IMPROVEMENT_THRESHOLD = 84


def _monthly_achievements(record, targets, metric_keys, role, lookup) -> List[int]:
    results = []
    for metric_key in metric_keys:
        target = find_target(targets, metric_key, role=role, mode=lookup)
        if target is None:
            continue
        pct = achievement(metric_value(record, metric_key), target.monthly_target)
        if pct is not None:
            results.append(pct)
    return results


def category_stats(
    records: Iterable,
    targets: Iterable,
    member_roles: Optional[Mapping[int, str]] = None,
    metric_keys: Optional[Sequence[str]] = None,
    lookup: str = ROLE_WITH_FALLBACK,
) -> CategoryStats:
    targets = list(targets)
    member_roles = member_roles or {}
    stats = CategoryStats()
    for record in records:
        role = member_roles.get(record.member_id)
        for pct in _monthly_achievements(record, targets, metric_keys or DEFAULT_METRIC_KEYS, role, lookup):
            name = classify(pct).name.lower()
            setattr(stats, name, getattr(stats, name) + 1)
            stats.total += 1
    return stats


def member_summaries(
    records: Iterable,
    members: Mapping[int, object],
    targets: Iterable,
    metric_keys: Optional[Sequence[str]] = None,
    lookup: str = ROLE_WITH_FALLBACK,
) -> List[MemberSummary]:
    targets = list(targets)
    metric_keys = metric_keys or DEFAULT_METRIC_KEYS
    summaries: Dict[int, MemberSummary] = {}
    achievements: Dict[int, List[int]] = {}

    for record in records:
        member = members.get(record.member_id)
        summary = summaries.get(record.member_id)
        if summary is None:
            summary = MemberSummary(
                member_id=record.member_id,
                member_name=member.name if member is not None else UNKNOWN_MEMBER,
            )
            summaries[record.member_id] = summary
            achievements[record.member_id] = []

        role = member.role if member is not None else None
        pcts = _monthly_achievements(record, targets, metric_keys, role, lookup)
        achievements[record.member_id].extend(pcts)

        summary.total_records += 1
        summary.critical_kpis += sum(1 for pct in pcts if classify(pct).name == "Critical")
        summary.good_kpis += sum(1 for pct in pcts if classify(pct).name == "Good")
        if summary.latest_year is None or (record.year, record.month) > (summary.latest_year, summary.latest_month):
            summary.latest_year, summary.latest_month = record.year, record.month

    for member_id, summary in summaries.items():
        pcts = achievements[member_id]
        summary.average_performance = round_ratio(sum(pcts), len(pcts)) if pcts else 0
    return list(summaries.values())


def top_performers(summaries: Iterable[MemberSummary], limit: int = 3) -> List[MemberSummary]:
    return sorted(summaries, key=lambda s: s.average_performance, reverse=True)[:limit]


def team_insights(summaries: Sequence[MemberSummary]) -> TeamInsights:
    total = len(summaries)
    return TeamInsights(
        total_members=total,
        total_critical_kpis=sum(s.critical_kpis for s in summaries),
        total_good_kpis=sum(s.good_kpis for s in summaries),
        average_team_performance=round_ratio(sum(s.average_performance for s in summaries), total) if total else 0,
    )


def annual_report(
    member,
    records: Iterable,
    targets: Iterable,
    year: int,
    metric_keys: Optional[Sequence[str]] = None,
    display_names: Optional[Mapping[str, str]] = None,
    lookup: str = ROLE_WITH_FALLBACK,
    catalog: Optional[RecommendationCatalog] = None,
) -> AnnualReport:
    """Roll one member's year up against the annual targets for their role.

    ``records`` must be non-empty; only the ones for ``year`` and ``member`` count.
    """
    targets = list(targets)
    metric_keys = list(metric_keys or DEFAULT_METRIC_KEYS)
    display_names = display_names or {}
    monthly = sorted(
        (r for r in records if r.member_id == member.id and r.year == year),
        key=lambda r: r.month,
    )

    totals = {key: sum(metric_value(r, key) for r in monthly) for key in metric_keys}

    metric_achievements: List[MetricAchievement] = []
    for metric_key in metric_keys:
        target = find_target(targets, metric_key, role=member.role, mode=lookup)
        if target is None or target.annual_target <= 0:
            continue
        metric_achievements.append(MetricAchievement(
            metric_key=metric_key,
            actual=totals[metric_key],
            target=target.annual_target,
            achievement=achievement(totals[metric_key], target.annual_target),
        ))

    if metric_achievements:
        average = round_ratio(sum(m.achievement for m in metric_achievements), len(metric_achievements))
    else:
        average = 0

    strengths, improvements = [], []
    for m in metric_achievements:
        name = display_names.get(m.metric_key, m.metric_key)
        if m.achievement >= 100:
            strengths.append(f"Exceeded {name} target by {m.achievement - 100}% ({m.actual}/{m.target})")
        elif m.achievement < IMPROVEMENT_THRESHOLD:
            improvements.append(f"{name} needs improvement: {m.achievement}% of target ({m.actual}/{m.target})")

    recommendations: List[str] = []
    if monthly:
        items = generate_action_items(
            monthly[-1], monthly[:-1], targets,
            role=member.role, lookup=lookup, metric_keys=metric_keys, catalog=catalog,
        )
        recommendations = [item.recommendations[0] for item in items[:5]]

    return AnnualReport(
        member=MemberResponse.model_validate(member),
        year=year,
        monthly_records=[to_record_response(r, member.name) for r in monthly],
        total_performance=totals,
        metric_achievements=metric_achievements,
        average_performance=average,
        performance_grade=classify(average).name,
        strengths=strengths or list(DEFAULT_STRENGTHS),
        improvements=improvements or list(DEFAULT_IMPROVEMENTS),
        recommendations=recommendations or list(DEFAULT_RECOMMENDATIONS),
    )


def export_csv(
    records: Iterable,
    member_names: Mapping[int, str],
    metric_keys: Optional[Sequence[str]] = None,
    display_names: Optional[Mapping[str, str]] = None,
) -> str:
    metric_keys = list(metric_keys or DEFAULT_METRIC_KEYS)
    display_names = display_names or {}

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Member", "Month", "Year"] + [display_names.get(k, k) for k in metric_keys])
    for record in records:
        writer.writerow(
            [member_names.get(record.member_id, UNKNOWN_MEMBER), f"{record.month:02d}", record.year]
            + [metric_value(record, k) for k in metric_keys]
        )
    return buffer.getvalue()
