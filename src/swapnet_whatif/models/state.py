"""Application state — the explicit input of every what-if transition.

The dashboard keeps selection, the active virtual station and pin mode in
this single frozen value.  Transitions in ``engine.whatif`` return a new
``AppState`` instead of mutating ambient UI state.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from swapnet_whatif.models.results import ImpactEstimate, KPISet, OwnershipRecommendation
from swapnet_whatif.models.station import GeoPoint, Station, TimelineRecord, VirtualStation


class SimulationRun(BaseModel):
    """One run returned by the simulation service (baseline or scenario)."""

    model_config = ConfigDict(frozen=True)

    timeline: list[TimelineRecord] = Field(default_factory=list)
    kpis: KPISet | None = None
    """Network-wide KPIs computed upstream."""


class SimulationSnapshot(BaseModel):
    """Baseline/scenario pair plus the service's textual recommendation."""

    model_config = ConfigDict(frozen=True)

    baseline: SimulationRun | None = None
    scenario: SimulationRun | None = None
    recommendation: str | None = None


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    stations: list[Station] = Field(default_factory=list)
    """Station roster as loaded from the service."""

    snapshot: SimulationSnapshot | None = None
    selected_station_id: str | None = None

    virtual_station: VirtualStation | None = None
    impact: ImpactEstimate | None = None
    ownership: OwnershipRecommendation | None = None

    pin_mode: bool = False
    pinned_location: GeoPoint | None = None

    @property
    def is_virtual_station_active(self) -> bool:
        return self.virtual_station is not None
