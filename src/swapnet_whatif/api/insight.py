"""Insight composer — plain-English summary of a what-if station addition.

Converts an ``ImpactEstimate`` (and optionally an ``OwnershipRecommendation``)
into labelled lines for the recommendation panel:

  1. Capacity headline
  2. Simulation results (absorption, captured swaps, deltas)
  3. Ownership recommendation (optional)
  4. Closing recommendation naming the parent station and distance

Formatting only: every figure comes from the estimate.  Deltas use the same
half-up, one-decimal rounding as the estimator; percentages of demand are
whole numbers.
"""

from __future__ import annotations

from swapnet_whatif.engine.kpi import round_half_up
from swapnet_whatif.models.results import (
    ImpactEstimate,
    InsightLine,
    InsightReport,
    OwnershipRecommendation,
)
from swapnet_whatif.models.station import VirtualStation


def compose_insight(
    impact: ImpactEstimate | None,
    virtual_station: VirtualStation | None,
    ownership: OwnershipRecommendation | None = None,
) -> InsightReport | None:
    """Build the what-if narrative; ``None`` when impact or station is missing."""
    if impact is None or virtual_station is None:
        return None

    imp = impact.improvement
    absorbed_pct = round_half_up(impact.absorption_factor * 100)
    lost_reduction = round_half_up(imp.lost_swaps_reduction)
    success_delta = round_half_up(imp.success_rate_improvement, 1)
    wait_delta = round_half_up(imp.wait_time_reduction, 1)

    lines: list[InsightLine] = [
        InsightLine(
            label="headline",
            text=(
                f"AI Insight: A new station ({impact.station_capacity} capacity, "
                f"~{impact.max_daily_capacity} swaps/day potential) provides significantly "
                "more capacity than adding chargers to existing stations."
            ),
        ),
        InsightLine(label="blank"),
        InsightLine(label="heading", text="Simulation Results:"),
        InsightLine(label="bullet", text=f"• {absorbed_pct:.0f}% of unmet demand absorbed"),
        InsightLine(label="bullet", text=f"• {impact.absorbed_demand} additional swaps captured"),
        InsightLine(label="bullet", text=f"• Lost swaps reduced by {lost_reduction:.0f}"),
        InsightLine(label="bullet", text=f"• Success rate improved by {success_delta:.1f}%"),
        InsightLine(label="bullet", text=f"• Wait time reduced by {wait_delta:.1f} min"),
        InsightLine(label="blank"),
    ]

    if ownership is not None:
        lines += [
            InsightLine(label="ownership", text=f"Ownership Recommendation: {ownership.model}"),
            InsightLine(label="ownership", text=f"   {ownership.full_name}"),
            InsightLine(label="ownership", text=f"   {ownership.reason}"),
            InsightLine(label="blank"),
        ]

    lines.append(
        InsightLine(
            label="recommendation",
            text=(
                f"Recommendation: This location ({virtual_station.distance_km:.2f} km from "
                f"{virtual_station.parent_station_id}) shows strong potential for a new "
                "station deployment."
            ),
        )
    )
    return InsightReport(lines=lines)
