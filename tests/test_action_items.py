"""
Tests for app/services/action_items.py.

What we test
------------
generate_action_items():
  - End-to-end: 400 outreaches against 525 -> 76% -> Bad -> warning, priority 2.
  - Declining escalates priority by one (floored at 1), except in Good.
  - Metrics without a target, with a zero target, or without recommendation
    text are left out.
  - Output is sorted by priority and the sort is stable.
  - Description embeds actual, target, achievement, direction and signed change.
  - Role-specific targets are honored through the lookup mode.

group_by_severity():
  - Items land in the bucket named by their severity.
"""

from app.services.action_items import format_change, generate_action_items, group_by_severity
from app.services.recommendations import RecommendationCatalog
from app.services.targets import BY_METRIC, ROLE_WITH_FALLBACK


class TestEndToEnd:
    def test_bad_outreaches(self, make_record, make_target):
        record = make_record(record_id=42, outreaches=400)
        items = generate_action_items(record, [], [make_target("outreaches", 525)])

        assert len(items) == 1
        item = items[0]
        assert item.id == "outreaches-42"
        assert item.severity == "warning"
        assert item.priority == 2
        assert item.title == "Outreach Performance Below Target - Needs Improvement"
        assert item.description == (
            "Current: 400 | Target: 525 | Achievement: 76% | Trend: improving (+100%)"
        )

    def test_bad_and_declining_escalates_to_one(self, make_record, make_target):
        prior = make_record(month=8, outreaches=500)
        record = make_record(month=9, outreaches=400)

        items = generate_action_items(record, [prior], [make_target("outreaches", 525)])

        assert items[0].priority == 1
        assert items[0].severity == "warning"
        assert "Trend: declining (-20%)" in items[0].description


class TestPriority:
    def test_target_band_declining_becomes_two(self, make_record, make_target):
        prior = make_record(month=8, live_links=20)
        record = make_record(month=9, live_links=15)
        items = generate_action_items(record, [prior], [make_target("live_links", 15)])
        assert (items[0].severity, items[0].priority) == ("info", 2)

    def test_good_band_declining_stays_four(self, make_record, make_target):
        prior = make_record(month=8, live_links=40)
        record = make_record(month=9, live_links=30)
        items = generate_action_items(record, [prior], [make_target("live_links", 15)])
        assert (items[0].severity, items[0].priority) == ("success", 4)

    def test_critical_declining_floors_at_one(self, make_record, make_target):
        prior = make_record(month=8, new_blogs=5)
        record = make_record(month=9, new_blogs=1)
        items = generate_action_items(record, [prior], [make_target("new_blogs", 10)])
        assert (items[0].severity, items[0].priority) == ("critical", 1)

    def test_stable_keeps_base_priority(self, make_record, make_target):
        prior = make_record(month=8, new_blogs=10)
        record = make_record(month=9, new_blogs=10)
        items = generate_action_items(record, [prior], [make_target("new_blogs", 10)])
        assert (items[0].severity, items[0].priority) == ("info", 3)
        assert "(+0%)" in items[0].description


class TestOmissions:
    def test_metrics_without_targets_are_skipped(self, make_record, make_target):
        record = make_record(outreaches=100, live_links=3)
        items = generate_action_items(record, [], [make_target("live_links", 15)])
        assert [i.metric_key for i in items] == ["live_links"]

    def test_zero_monthly_target_is_skipped(self, make_record, make_target):
        record = make_record(outreaches=100)
        assert generate_action_items(record, [], [make_target("outreaches", 0)]) == []

    def test_missing_recommendation_text_is_skipped(self, make_record, make_target):
        catalog = RecommendationCatalog({
            "guest_posts": {"good": {"title": "Guest posts ahead", "recommendations": ["Share the pitch"]}},
        })
        targets = [make_target("guest_posts", 4)]

        behind = make_record(guest_posts=1)
        ahead = make_record(guest_posts=8)

        assert generate_action_items(behind, [], targets, metric_keys=["guest_posts"], catalog=catalog) == []
        items = generate_action_items(ahead, [], targets, metric_keys=["guest_posts"], catalog=catalog)
        assert [i.title for i in items] == ["Guest posts ahead"]

    def test_unknown_metric_in_default_catalog(self, make_record, make_target):
        record = make_record(social_posts=30)
        items = generate_action_items(
            record, [], [make_target("social_posts", 25)], metric_keys=["social_posts"]
        )
        assert items == []


class TestOrdering:
    def test_sorted_by_priority(self, make_record, make_target):
        targets = [
            make_target("outreaches", 525),
            make_target("live_links", 15),
            make_target("high_da_links", 3),
        ]
        # Good, Critical, Target
        record = make_record(outreaches=700, live_links=2, high_da_links=3)

        items = generate_action_items(record, [], targets)

        assert [i.metric_key for i in items] == ["live_links", "high_da_links", "outreaches"]
        assert [i.priority for i in items] == [1, 3, 4]

    def test_equal_priorities_keep_metric_order(self, make_record, make_target):
        targets = [make_target("content_distribution", 8), make_target("outreaches", 525)]
        record = make_record(outreaches=10, content_distribution=1)

        items = generate_action_items(record, [], targets)

        assert [i.priority for i in items] == [1, 1]
        assert [i.metric_key for i in items] == ["outreaches", "content_distribution"]

    def test_explicit_metric_order_is_used(self, make_record, make_target):
        targets = [make_target("content_distribution", 8), make_target("outreaches", 525)]
        record = make_record(outreaches=10, content_distribution=1)

        items = generate_action_items(
            record, [], targets, metric_keys=["content_distribution", "outreaches"]
        )

        assert [i.metric_key for i in items] == ["content_distribution", "outreaches"]


class TestTargetLookup:
    def test_role_specific_target(self, make_record, make_target):
        targets = [
            make_target("outreaches", 525, role="SEO Analyst"),
            make_target("outreaches", 400, role="SEO Specialist"),
        ]
        record = make_record(outreaches=400)

        by_role = generate_action_items(record, [], targets, role="SEO Specialist", lookup=ROLE_WITH_FALLBACK)
        by_metric = generate_action_items(record, [], targets, role="SEO Specialist", lookup=BY_METRIC)

        assert by_role[0].severity == "info"
        assert by_metric[0].severity == "warning"


class TestHelpers:
    def test_format_change(self):
        assert format_change(12) == "+12%"
        assert format_change(0) == "+0%"
        assert format_change(-8) == "-8%"

    def test_group_by_severity(self, make_record, make_target):
        targets = [make_target("outreaches", 525), make_target("live_links", 15)]
        record = make_record(outreaches=10, live_links=15)

        groups = group_by_severity(generate_action_items(record, [], targets))

        assert [i.metric_key for i in groups.critical] == ["outreaches"]
        assert [i.metric_key for i in groups.info] == ["live_links"]
        assert groups.warning == [] and groups.success == []
