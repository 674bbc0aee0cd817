"""What-if workflow — pure transitions over ``AppState``.

Every dashboard action (select a station, start a simulation, add or remove
a virtual station, pin a location) is a function ``AppState → AppState``.
Derived values (selected station, current KPIs, insight text) are recomputed
from the state on demand and never stored beyond the action that made them.

Add-station sequence:
  placement → impact  (needs current KPIs)
            → ownership (needs the roster)
Impact and ownership share only the placement output.
"""

from __future__ import annotations

import logging

import numpy as np

from swapnet_whatif.api.insight import compose_insight
from swapnet_whatif.config.scenario import WhatIfConfig
from swapnet_whatif.engine.impact import estimate_impact
from swapnet_whatif.engine.kpi import roster_kpis, station_kpis
from swapnet_whatif.engine.ownership import classify_ownership
from swapnet_whatif.engine.placement import generate_virtual_station
from swapnet_whatif.engine.timeline import stations_at_hour
from swapnet_whatif.models.results import (
    InsightReport,
    KPIComparison,
    KPISet,
    RecommendationContent,
)
from swapnet_whatif.models.state import AppState, SimulationSnapshot
from swapnet_whatif.models.station import GeoPoint, Station

logger = logging.getLogger(__name__)

_CLEARED_VIRTUAL = {"virtual_station": None, "impact": None, "ownership": None}


# ═══════════════════════════════════════════════════════════════════════════
# Selection & simulation
# ═══════════════════════════════════════════════════════════════════════════

def select_station(state: AppState, station_id: str | None) -> AppState:
    return state.model_copy(update={"selected_station_id": station_id})


def start_simulation(state: AppState, snapshot: SimulationSnapshot) -> AppState:
    """Install a new simulation snapshot; any virtual station is discarded."""
    return state.model_copy(update={"snapshot": snapshot, **_CLEARED_VIRTUAL})


def _baseline_timeline(state: AppState):
    snap = state.snapshot
    return snap.baseline.timeline if snap and snap.baseline else None


def _scenario_timeline(state: AppState):
    snap = state.snapshot
    return snap.scenario.timeline if snap and snap.scenario else None


def resolve_selected_station(state: AppState, config: WhatIfConfig | None = None) -> Station | None:
    """The selected station as the dashboard shows it.

    Prefers the representative-hour record from the baseline timeline, then
    the roster entry with ``available_batteries = initial_stock``.
    """
    if not state.selected_station_id:
        return None
    cfg = config or WhatIfConfig()

    for station in stations_at_hour(_baseline_timeline(state), cfg.kpi.map_hour):
        if station.station_id == state.selected_station_id:
            # Timeline rows often omit coordinates; borrow them from the roster.
            roster_entry = _roster_entry(state, station.station_id)
            if station.position is None and roster_entry is not None:
                station = station.model_copy(update={
                    "lat": roster_entry.lat,
                    "lon": roster_entry.lon,
                    "initial_stock": roster_entry.initial_stock,
                    "capacity": roster_entry.capacity,
                })
            return station

    roster_entry = _roster_entry(state, state.selected_station_id)
    return roster_entry.with_initial_stock() if roster_entry is not None else None


def _roster_entry(state: AppState, station_id: str) -> Station | None:
    return next((s for s in state.stations if s.station_id == station_id), None)


def map_stations(state: AppState, config: WhatIfConfig | None = None) -> list[Station]:
    """Stations to draw: the representative hour of the baseline, else the roster."""
    cfg = config or WhatIfConfig()
    timeline = _baseline_timeline(state)
    if timeline:
        return stations_at_hour(timeline, cfg.kpi.map_hour)
    return [s.with_initial_stock() for s in state.stations]


# ═══════════════════════════════════════════════════════════════════════════
# KPI resolution
# ═══════════════════════════════════════════════════════════════════════════

def resolve_current_kpis(state: AppState, config: WhatIfConfig | None = None) -> KPISet | None:
    """KPIs the impact estimate starts from.

    Order: selected station on the scenario timeline, then on the baseline
    timeline, then network scenario KPIs, then network baseline KPIs, then
    the pre-simulation roster KPIs of the selected station.
    """
    cfg = config or WhatIfConfig()
    selected = state.selected_station_id
    snap = state.snapshot

    candidates = [
        station_kpis(_scenario_timeline(state), selected, cfg.kpi),
        station_kpis(_baseline_timeline(state), selected, cfg.kpi),
        snap.scenario.kpis if snap and snap.scenario else None,
        snap.baseline.kpis if snap and snap.baseline else None,
    ]
    for kpis in candidates:
        if kpis is not None:
            return kpis

    station = resolve_selected_station(state, cfg)
    return roster_kpis([station] if station else [], cfg.kpi)


def displayed_kpis(state: AppState, config: WhatIfConfig | None = None) -> KPIComparison:
    """Baseline vs scenario for the KPI cards — per station when possible."""
    cfg = config or WhatIfConfig()
    snap = state.snapshot
    network = KPIComparison(
        baseline=snap.baseline.kpis if snap and snap.baseline else None,
        scenario=snap.scenario.kpis if snap and snap.scenario else None,
        label_prefix="Total",
    )
    if not state.selected_station_id:
        return network

    baseline = station_kpis(_baseline_timeline(state), state.selected_station_id, cfg.kpi)
    scenario = station_kpis(_scenario_timeline(state), state.selected_station_id, cfg.kpi)
    if baseline is None and scenario is None:
        return network

    return KPIComparison(
        baseline=baseline,
        # No scenario yet shows "no change".
        scenario=scenario or baseline,
        label_prefix="Station",
    )


# ═══════════════════════════════════════════════════════════════════════════
# Virtual station
# ═══════════════════════════════════════════════════════════════════════════

def add_virtual_station(
    state: AppState,
    rng: np.random.Generator | None = None,
    config: WhatIfConfig | None = None,
) -> AppState:
    """Place a virtual station near the selected one and estimate its effect.

    Returns ``state`` unchanged when nothing is selected or the selected
    station has no coordinates.
    """
    cfg = config or WhatIfConfig()
    if rng is None:
        rng = np.random.default_rng(cfg.random_seed)

    parent = resolve_selected_station(state, cfg)
    virtual = generate_virtual_station(parent, rng, cfg.placement)
    if virtual is None:
        logger.info("Cannot add virtual station: no usable parent station selected")
        return state

    current = resolve_current_kpis(state, cfg)
    impact = estimate_impact(current, parent, virtual, rng, cfg.impact)
    if impact is None:
        logger.info("No KPIs available for %s, impact estimate skipped", parent.station_id)

    ownership = classify_ownership(virtual, state.stations, cfg.ownership)
    logger.debug(
        "Virtual station %.2f km from %s → %s",
        virtual.distance_km, parent.station_id, ownership.model,
    )

    return state.model_copy(update={
        "virtual_station": virtual,
        "impact": impact,
        "ownership": ownership,
    })


def remove_virtual_station(state: AppState) -> AppState:
    return state.model_copy(update=_CLEARED_VIRTUAL)


def virtual_station_insight(state: AppState) -> InsightReport | None:
    if not state.is_virtual_station_active:
        return None
    return compose_insight(state.impact, state.virtual_station, state.ownership)


def recommendation_content(state: AppState) -> RecommendationContent | None:
    """The what-if insight while a virtual station is active, else the upstream advice."""
    insight = virtual_station_insight(state)
    if insight is not None:
        return RecommendationContent(kind="virtual", content=insight.to_text())
    if state.snapshot and state.snapshot.recommendation:
        return RecommendationContent(kind="simulation", content=state.snapshot.recommendation)
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Pin mode
# ═══════════════════════════════════════════════════════════════════════════

def toggle_pin_mode(state: AppState) -> AppState:
    """Flip pin mode; leaving it clears the pinned location."""
    if state.pin_mode:
        return state.model_copy(update={"pin_mode": False, "pinned_location": None})
    return state.model_copy(update={"pin_mode": True})


def pin_location(state: AppState, lat: float, lon: float) -> AppState:
    """Record a map click as the pinned location; ignored outside pin mode."""
    if not state.pin_mode:
        return state
    return state.model_copy(update={"pinned_location": GeoPoint(lat=lat, lon=lon)})


def clear_pin(state: AppState) -> AppState:
    return state.model_copy(update={"pin_mode": False, "pinned_location": None})
