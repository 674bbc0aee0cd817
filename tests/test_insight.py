"""Tests for api/insight.py — what-if narrative composition."""

from __future__ import annotations

import pytest

from swapnet_whatif.api.insight import compose_insight
from swapnet_whatif.engine.ownership import classify_ownership
from swapnet_whatif.models.results import ImpactEstimate, ImprovementSummary, KPISet


@pytest.fixture
def impact() -> ImpactEstimate:
    return ImpactEstimate(
        kpis=KPISet(total_swaps=133, total_lost_swaps=3, success_rate=97.79,
                    avg_battery_availability=8.0, avg_wait_time_mins=4.3),
        absorption_factor=0.874,
        offload_factor=0.2,
        absorbed_demand=27,
        offloaded_swaps=20,
        station_capacity=15,
        max_daily_capacity=53,
        improvement=ImprovementSummary(
            lost_swaps_reduction=27,
            swaps_increase=33,
            success_rate_improvement=20.877,
            wait_time_reduction=13.68,
        ),
    )


class TestCompose:

    def test_line_order_without_ownership(self, impact, virtual_station):
        report = compose_insight(impact, virtual_station)
        labels = [line.label for line in report.lines]
        assert labels == [
            "headline", "blank", "heading",
            "bullet", "bullet", "bullet", "bullet", "bullet",
            "blank", "recommendation",
        ]

    def test_headline_capacity(self, impact, virtual_station):
        text = compose_insight(impact, virtual_station).to_text()
        assert "A new station (15 capacity, ~53 swaps/day potential)" in text

    def test_bullets_rounding(self, impact, virtual_station):
        bullets = [l.text for l in compose_insight(impact, virtual_station).lines if l.label == "bullet"]
        assert bullets == [
            "• 87% of unmet demand absorbed",
            "• 27 additional swaps captured",
            "• Lost swaps reduced by 27",
            "• Success rate improved by 20.9%",
            "• Wait time reduced by 13.7 min",
        ]

    def test_closing_names_parent_and_distance(self, impact, virtual_station):
        closing = compose_insight(impact, virtual_station).lines[-1]
        assert closing.label == "recommendation"
        assert "1.00 km from DEL_CENTRAL" in closing.text

    def test_ownership_section(self, impact, virtual_station, far_roster):
        ownership = classify_ownership(virtual_station, far_roster)
        report = compose_insight(impact, virtual_station, ownership)
        own = [l.text for l in report.lines if l.label == "ownership"]
        assert own[0] == "Ownership Recommendation: COCO"
        assert own[1].strip() == "Company Owned Company Operated"
        assert own[2].strip().startswith("Greenfield location")
        assert report.lines[-1].label == "recommendation"

    def test_to_text_joins_lines(self, impact, virtual_station):
        report = compose_insight(impact, virtual_station)
        assert report.to_text().count("\n") == len(report.lines) - 1


class TestMissingInput:

    def test_no_impact(self, virtual_station):
        assert compose_insight(None, virtual_station) is None

    def test_no_virtual_station(self, impact):
        assert compose_insight(impact, None) is None
