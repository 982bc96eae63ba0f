"""
Tests for app/services/reports.py.

What we test
------------
category_stats():
  - Counts one band per (record, metric) pair with a positive monthly target.
  - Role-specific targets are used when the member's role is known.

member_summaries() / top_performers() / team_insights():
  - Average achievement, critical/good counts and latest period per member.
  - Records whose member no longer exists are reported as "Unknown".

annual_report():
  - Totals, achievement against annual targets, grade, strengths,
    improvements, and recommendations from the latest month.
  - Default sentences when there is nothing to report.

export_csv():
  - Header uses display names; unresolved members become "Unknown".
"""

from datetime import date
from types import SimpleNamespace

import pytest

from app.services import reports


@pytest.fixture
def member():
    return SimpleNamespace(
        id=1, name="Priya", email="priya@example.com", hire_date=date(2024, 1, 15),
        role="SEO Analyst", status="active", created_at=None,
    )


class TestCategoryStats:
    def test_counts_each_metric(self, make_record, make_target):
        targets = [make_target("outreaches", 525), make_target("live_links", 15), make_target("new_blogs", 0)]
        records = [
            make_record(member_id=1, outreaches=400, live_links=30, new_blogs=3),
            make_record(member_id=2, outreaches=100, live_links=15),
        ]

        stats = reports.category_stats(records, targets)

        assert stats.model_dump() == {"critical": 1, "bad": 1, "target": 1, "good": 1, "total": 4}

    def test_uses_member_role(self, make_record, make_target):
        targets = [
            make_target("outreaches", 525, role="SEO Analyst"),
            make_target("outreaches", 400, role="SEO Specialist"),
        ]
        records = [make_record(member_id=7, outreaches=400)]

        stats = reports.category_stats(records, targets, member_roles={7: "SEO Specialist"})

        assert (stats.target, stats.bad) == (1, 0)


class TestSummaries:
    def test_member_summary(self, make_record, make_target, member):
        targets = [make_target("outreaches", 500), make_target("live_links", 10)]
        records = [
            make_record(member_id=1, month=8, outreaches=250, live_links=10),   # 50%, 100%
            make_record(member_id=1, month=9, outreaches=750, live_links=15),   # 150%, 150%
            make_record(member_id=99, month=9, outreaches=500),
        ]

        summaries = reports.member_summaries(records, {1: member}, targets)

        first, orphan = summaries
        assert first.member_name == "Priya"
        assert first.total_records == 2
        assert first.average_performance == 113
        assert (first.critical_kpis, first.good_kpis) == (1, 2)
        assert (first.latest_month, first.latest_year) == (9, 2025)
        assert orphan.member_name == "Unknown"

    def test_top_performers_and_insights(self, make_record, make_target, member):
        targets = [make_target("outreaches", 100)]
        others = {
            1: member,
            2: SimpleNamespace(name="Sam", role="SEO Analyst"),
            3: SimpleNamespace(name="Lee", role="SEO Analyst"),
            4: SimpleNamespace(name="Kim", role="SEO Analyst"),
        }
        records = [
            make_record(member_id=1, outreaches=90),
            make_record(member_id=2, outreaches=130),
            make_record(member_id=3, outreaches=50),
            make_record(member_id=4, outreaches=110),
        ]

        summaries = reports.member_summaries(records, others, targets)
        top = reports.top_performers(summaries)
        insights = reports.team_insights(summaries)

        assert [s.member_name for s in top] == ["Sam", "Kim", "Priya"]
        assert insights.total_members == 4
        assert insights.total_critical_kpis == 1
        assert insights.total_good_kpis == 1
        assert insights.average_team_performance == 95

    def test_empty_team(self):
        insights = reports.team_insights([])
        assert insights.average_team_performance == 0


class TestAnnualReport:
    def test_rolls_up_year(self, make_record, make_target, member):
        targets = [
            make_target("outreaches", 525, annual_target=6825),
            make_target("live_links", 15, annual_target=195),
        ]
        records = [make_record(member_id=1, month=m, outreaches=600, live_links=5) for m in range(1, 13)]
        records.append(make_record(member_id=1, month=1, year=2024, outreaches=9999))

        report = reports.annual_report(
            member, records, targets, 2025,
            display_names={"outreaches": "Monthly Outreaches", "live_links": "Live Links"},
        )

        assert [r.month for r in report.monthly_records] == list(range(1, 13))
        assert report.total_performance["outreaches"] == 7200
        assert report.total_performance["live_links"] == 60
        achievements = {m.metric_key: m.achievement for m in report.metric_achievements}
        assert achievements == {"outreaches": 105, "live_links": 31}
        assert report.average_performance == 68
        assert report.performance_grade == "Bad"
        assert report.strengths == ["Exceeded Monthly Outreaches target by 5% (7200/6825)"]
        assert report.improvements == ["Live Links needs improvement: 31% of target (60/195)"]
        # December: live links critical first, outreaches on target after
        assert report.recommendations[0] == (
            "Review outreach-to-link conversion rates and identify bottlenecks"
        )
        assert len(report.recommendations) == 2

    def test_defaults_when_nothing_stands_out(self, make_record, make_target, member):
        targets = [make_target("outreaches", 0, annual_target=0)]
        records = [make_record(member_id=1, month=1, outreaches=10)]

        report = reports.annual_report(member, records, targets, 2025)

        assert report.average_performance == 0
        assert report.performance_grade == "Critical"
        assert report.strengths == reports.DEFAULT_STRENGTHS
        assert report.improvements == reports.DEFAULT_IMPROVEMENTS
        assert report.recommendations == reports.DEFAULT_RECOMMENDATIONS


class TestExportCsv:
    def test_rows(self, make_record):
        records = [
            make_record(member_id=1, month=9, outreaches=400, live_links=12),
            make_record(member_id=5, month=10, outreaches=20),
        ]

        content = reports.export_csv(
            records, {1: "Priya"},
            metric_keys=["outreaches", "live_links"],
            display_names={"outreaches": "Monthly Outreaches", "live_links": "Live Links"},
        )

        assert content.splitlines() == [
            "Member,Month,Year,Monthly Outreaches,Live Links",
            "Priya,09,2025,400,12",
            "Unknown,10,2025,20,0",
        ]
