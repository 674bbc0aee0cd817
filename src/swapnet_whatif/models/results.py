"""Result types — the contract between the engine and the presentation layer.

Every result is frozen: a new virtual station or a new baseline produces new
values, nothing is updated in place.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ═══════════════════════════════════════════════════════════════════════════
# KPIs
# ═══════════════════════════════════════════════════════════════════════════

class KPISet(BaseModel):
    """Five-field performance summary, network-wide or for one station."""

    model_config = ConfigDict(frozen=True)

    total_swaps: float = Field(default=0.0, ge=0)
    """Completed swaps (daily total when aggregated from a timeline)."""

    total_lost_swaps: float = Field(default=0.0, ge=0)
    """Demand events that found no charged battery."""

    success_rate: float = Field(default=100.0, ge=0, le=100.0)
    """Served / attempted × 100.  Derived from the counts when not supplied;
    100 when nothing was attempted."""

    avg_battery_availability: float = Field(default=0.0, ge=0)
    """Time-averaged available batteries (count)."""

    avg_wait_time_mins: float | None = Field(default=None, ge=0)
    """Minutes. None when the upstream service did not report it."""

    @model_validator(mode="before")
    @classmethod
    def _derive_success_rate(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("success_rate") is not None:
            return data
        served = float(data.get("total_swaps") or 0.0)
        attempts = served + float(data.get("total_lost_swaps") or 0.0)
        rate = served / attempts * 100.0 if attempts > 0 else 100.0
        return {**data, "success_rate": rate}


class KPIComparison(BaseModel):
    """Baseline vs scenario KPIs as shown on the dashboard."""

    model_config = ConfigDict(frozen=True)

    baseline: KPISet | None = None
    scenario: KPISet | None = None
    label_prefix: Literal["Total", "Station"] = "Total"


# ═══════════════════════════════════════════════════════════════════════════
# Impact of a virtual station
# ═══════════════════════════════════════════════════════════════════════════

class ImprovementSummary(BaseModel):
    """Deltas against the pre-addition KPIs (positive = better)."""

    model_config = ConfigDict(frozen=True)

    lost_swaps_reduction: float
    swaps_increase: float
    success_rate_improvement: float
    """Percentage points."""
    wait_time_reduction: float
    """Minutes, before the one-decimal rounding of the new wait time."""


class ImpactEstimate(BaseModel):
    """Post-addition KPIs plus the figures that produced them."""

    model_config = ConfigDict(frozen=True)

    kpis: KPISet
    absorption_factor: float
    """Share of lost demand the new station could take (0.80–0.95)."""
    offload_factor: float
    """Share of served swaps shifted away from congested neighbours (0.15–0.25)."""
    absorbed_demand: int
    """Lost swaps actually captured, capped by the station's daily capacity."""
    offloaded_swaps: int
    station_capacity: int
    max_daily_capacity: int
    improvement: ImprovementSummary


# ═══════════════════════════════════════════════════════════════════════════
# Ownership recommendation
# ═══════════════════════════════════════════════════════════════════════════

class FinancialProfile(BaseModel):
    """Illustrative figures only — not a costed business case."""

    model_config = ConfigDict(frozen=True)

    estimated_setup_cost: str
    revenue_share: str
    breakeven: str


class OwnershipRecommendation(BaseModel):
    """POPO (partner-owned, partner-operated) or COCO (company-owned, company-operated)."""

    model_config = ConfigDict(frozen=True)

    model: Literal["POPO", "COCO"]
    full_name: str
    reason: str
    nearby_station_count: int | None = None
    """None when no roster was available to count against."""
    benefits: list[str] = Field(default_factory=list)
    financials: FinancialProfile | None = None


# ═══════════════════════════════════════════════════════════════════════════
# Insight text
# ═══════════════════════════════════════════════════════════════════════════

InsightLabel = Literal[
    "headline", "heading", "bullet", "blank", "ownership", "recommendation",
]


class InsightLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: InsightLabel
    text: str = ""


class InsightReport(BaseModel):
    """Ordered, labelled lines of the what-if narrative."""

    model_config = ConfigDict(frozen=True)

    lines: list[InsightLine]

    def to_text(self) -> str:
        return "\n".join(line.text for line in self.lines)


class RecommendationContent(BaseModel):
    """What the recommendation panel shows: the what-if insight or the upstream advice."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["virtual", "simulation"]
    content: str
