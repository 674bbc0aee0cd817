"""Shared test fixtures — a small Delhi network matching scenarios/delhi_network.yaml."""

from __future__ import annotations

import numpy as np
import pytest

from swapnet_whatif.config import ImpactConfig, WhatIfConfig
from swapnet_whatif.models.results import KPISet
from swapnet_whatif.models.state import AppState, SimulationRun, SimulationSnapshot
from swapnet_whatif.models.station import Station, TimelineRecord, VirtualStation


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def parent_station() -> Station:
    """Connaught Place area, the reference point of the end-to-end scenario."""
    return Station(station_id="DEL_CENTRAL", lat=28.6139, lon=77.2090, initial_stock=20)


@pytest.fixture
def virtual_station() -> VirtualStation:
    return VirtualStation(
        station_id="VIRTUAL_STATION_001",
        lat=28.6229,
        lon=77.2090,
        capacity=15,
        parent_station_id="DEL_CENTRAL",
        distance_km=1.0,
    )


@pytest.fixture
def current_kpis() -> KPISet:
    return KPISet(
        total_swaps=100,
        total_lost_swaps=30,
        success_rate=100 / 130 * 100,
        avg_battery_availability=5,
        avg_wait_time_mins=18,
    )


@pytest.fixture
def pinned_impact_config() -> ImpactConfig:
    """Collapses every random range to a point so estimates are exact."""
    return ImpactConfig(
        absorption_min=0.9,
        absorption_max=0.9,
        offload_min=0.2,
        offload_max=0.2,
        availability_random_span=0.0,
    )


@pytest.fixture
def far_roster() -> list[Station]:
    """Stations 10+ km from DEL_CENTRAL — nothing inside a 2 km catchment."""
    return [
        Station(station_id="DEL_DW_04", lat=28.5921, lon=77.0460, initial_stock=12),
        Station(station_id="NOI_18_05", lat=28.5708, lon=77.3261, initial_stock=16),
        Station(station_id="DEL_RH_06", lat=28.7158, lon=77.1150, initial_stock=10),
    ]


@pytest.fixture
def timeline() -> list[TimelineRecord]:
    """Two simulated days, two hours, two stations."""
    rows = [
        ("DEL_CENTRAL", 11, 0, 4, 1, 6.0),
        ("DEL_CENTRAL", 12, 0, 6, 1, 4.0),
        ("DEL_CENTRAL", 11, 1, 5, 0, 7.0),
        ("DEL_CENTRAL", 12, 1, 9, 2, 3.0),
        ("DEL_KB_02", 11, 0, 3, 0, 8.0),
        ("DEL_KB_02", 12, 0, 3, 0, 8.0),
        ("DEL_KB_02", 11, 1, 2, 0, 9.0),
        ("DEL_KB_02", 12, 1, 4, 0, 7.0),
    ]
    return [
        TimelineRecord(
            station_id=sid, hour=hour, iteration=it,
            swaps_completed=swaps, lost_swaps=lost, available_batteries=avail,
        )
        for sid, hour, it, swaps, lost, avail in rows
    ]


@pytest.fixture
def snapshot(timeline: list[TimelineRecord], current_kpis: KPISet) -> SimulationSnapshot:
    return SimulationSnapshot(
        baseline=SimulationRun(timeline=timeline, kpis=current_kpis),
        recommendation="Add chargers at DEL_CENTRAL.",
    )


@pytest.fixture
def roster(parent_station: Station) -> list[Station]:
    return [
        parent_station,
        Station(station_id="DEL_KB_02", lat=28.6519, lon=77.1909, initial_stock=15),
        Station(station_id="DEL_LN_03", lat=28.5677, lon=77.2433, initial_stock=18),
    ]


@pytest.fixture
def state(roster: list[Station]) -> AppState:
    return AppState(stations=roster)


@pytest.fixture
def config() -> WhatIfConfig:
    return WhatIfConfig(random_seed=7)
