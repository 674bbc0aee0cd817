"""FastAPI server — HTTP access to the what-if impact engine.

Run with:
    uvicorn swapnet_whatif.api.server:app --reload --port 8000

Or:
    swapnet-whatif-api

Endpoints:
    GET  /health              — liveness probe
    GET  /config/defaults     — default engine configuration as JSON
    POST /kpis/aggregate      — timeline → KPISet (network or one station)
    POST /kpis/roster         — station roster → pre-simulation KPISet
    POST /whatif/placement    — propose a virtual station near a parent
    POST /whatif/impact       — KPIs after adding a virtual station
    POST /whatif/ownership    — POPO / COCO recommendation
    POST /whatif/insight      — plain-English summary of an estimate
    POST /whatif/add-station  — full add-station workflow on an AppState

Missing inputs never raise: the engine's ``None`` comes back as JSON ``null``
and the caller decides what to hide.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from swapnet_whatif.api.insight import compose_insight
from swapnet_whatif.config.scenario import WhatIfConfig
from swapnet_whatif.engine.impact import estimate_impact
from swapnet_whatif.engine.kpi import aggregate_kpis, roster_kpis
from swapnet_whatif.engine.ownership import classify_ownership
from swapnet_whatif.engine.placement import generate_virtual_station
from swapnet_whatif.engine.whatif import add_virtual_station, recommendation_content
from swapnet_whatif.logging_config import configure_logging
from swapnet_whatif.models.results import (
    ImpactEstimate,
    KPISet,
    OwnershipRecommendation,
    RecommendationContent,
)
from swapnet_whatif.models.state import AppState
from swapnet_whatif.models.station import Station, TimelineRecord, VirtualStation

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Swap Network What-If API",
    version="1.0",
    description=(
        "What-if impact engine for a battery swap station network. Propose a "
        "new station near an existing one, estimate how network KPIs change, "
        "and get an ownership model recommendation with a plain-English summary."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class EngineRequest(BaseModel):
    """Common fields: optional config overrides and RNG seed."""
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial WhatIfConfig JSON. Missing fields use defaults. "
                    "Example: {'impact': {'swaps_per_slot_per_day': 4.0}}",
    )
    seed: int | None = Field(
        default=None,
        description="RNG seed for a reproducible estimate. Falls back to config.random_seed.",
    )


class AggregateRequest(EngineRequest):
    timeline: list[TimelineRecord] = Field(default_factory=list)
    station_id: str | None = Field(default=None, description="Omit to aggregate the whole network")


class RosterRequest(EngineRequest):
    stations: list[Station] = Field(default_factory=list)


class PlacementRequest(EngineRequest):
    parent: Station | None = None


class ImpactRequest(EngineRequest):
    current_kpis: KPISet | None = None
    parent: Station | None = None
    virtual_station: VirtualStation | None = None


class OwnershipRequest(EngineRequest):
    virtual_station: VirtualStation | None = None
    stations: list[Station] = Field(default_factory=list)


class InsightRequest(BaseModel):
    impact: ImpactEstimate | None = None
    virtual_station: VirtualStation | None = None
    ownership: OwnershipRecommendation | None = None


class AddStationRequest(EngineRequest):
    state: AppState = Field(default_factory=AppState)


class KPIResponse(BaseModel):
    kpis: KPISet | None


class PlacementResponse(BaseModel):
    virtual_station: VirtualStation | None


class ImpactResponse(BaseModel):
    impact: ImpactEstimate | None


class InsightResponse(BaseModel):
    lines: list[dict[str, str]] | None
    text: str | None


class AddStationResponse(BaseModel):
    state: AppState
    recommendation: RecommendationContent | None


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_config(overrides: dict[str, Any]) -> WhatIfConfig:
    """Build a WhatIfConfig from partial overrides merged onto defaults."""
    defaults = WhatIfConfig().model_dump()
    _deep_merge(defaults, overrides)
    return WhatIfConfig(**defaults)


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _rng(req: EngineRequest, config: WhatIfConfig) -> np.random.Generator:
    seed = req.seed if req.seed is not None else config.random_seed
    return np.random.default_rng(seed)


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Swap Network What-If API",
        "version": "1.0",
        "docs": "GET /docs (interactive Swagger UI)",
        "start_here": "POST /whatif/add-station",
    }


@app.get("/config/defaults")
def get_config_defaults():
    """Default engine configuration. Use as a starting point for overrides."""
    return WhatIfConfig().model_dump()


@app.post("/kpis/aggregate", response_model=KPIResponse)
def kpis_aggregate(req: AggregateRequest):
    """Reduce a simulation timeline to daily KPIs, network-wide or for one station."""
    config = _build_config(req.config)
    kpis = aggregate_kpis(req.timeline, req.station_id, config.kpi)
    if kpis is None:
        logger.info("No timeline rows for station %s", req.station_id or "<network>")
    return KPIResponse(kpis=kpis)


@app.post("/kpis/roster", response_model=KPIResponse)
def kpis_roster(req: RosterRequest):
    """Pre-simulation KPIs from the station roster (zero swaps, initial stock)."""
    config = _build_config(req.config)
    return KPIResponse(kpis=roster_kpis(req.stations, config.kpi))


@app.post("/whatif/placement", response_model=PlacementResponse)
def whatif_placement(req: PlacementRequest):
    """Propose a virtual station 0.8–1.8 km from the parent in a random direction."""
    config = _build_config(req.config)
    virtual = generate_virtual_station(req.parent, _rng(req, config), config.placement)
    return PlacementResponse(virtual_station=virtual)


@app.post("/whatif/impact", response_model=ImpactResponse)
def whatif_impact(req: ImpactRequest):
    """Estimate KPIs after adding the virtual station."""
    config = _build_config(req.config)
    impact = estimate_impact(
        req.current_kpis, req.parent, req.virtual_station,
        _rng(req, config), config.impact,
    )
    if impact is None:
        logger.info("Impact unavailable: current KPIs or virtual station missing")
    return ImpactResponse(impact=impact)


@app.post("/whatif/ownership", response_model=OwnershipRecommendation)
def whatif_ownership(req: OwnershipRequest):
    """POPO when ≥ 3 stations sit within the catchment, else COCO."""
    config = _build_config(req.config)
    return classify_ownership(req.virtual_station, req.stations, config.ownership)


@app.post("/whatif/insight", response_model=InsightResponse)
def whatif_insight(req: InsightRequest):
    """Plain-English summary of an impact estimate."""
    report = compose_insight(req.impact, req.virtual_station, req.ownership)
    if report is None:
        return InsightResponse(lines=None, text=None)
    return InsightResponse(
        lines=[line.model_dump() for line in report.lines],
        text=report.to_text(),
    )


@app.post("/whatif/add-station", response_model=AddStationResponse)
def whatif_add_station(req: AddStationRequest):
    """Run placement → impact + ownership for the selected station of ``state``.

    Returns the new state and the recommendation panel content.  The state
    comes back unchanged when no usable station is selected.
    """
    config = _build_config(req.config)
    new_state = add_virtual_station(req.state, _rng(req, config), config)
    return AddStationResponse(
        state=new_state,
        recommendation=recommendation_content(new_state),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "swapnet_whatif.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
