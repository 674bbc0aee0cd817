"""Engine — geo math, KPI aggregation, and the what-if heuristics.

The AppState workflow lives in ``engine.whatif`` and is imported from there
directly; it depends on ``api.insight``, which in turn uses this package.
"""

from swapnet_whatif.engine.geo import distance_km, offset_point
from swapnet_whatif.engine.kpi import aggregate_kpis, roster_kpis, station_kpis
from swapnet_whatif.engine.placement import generate_virtual_station
from swapnet_whatif.engine.impact import estimate_impact
from swapnet_whatif.engine.ownership import classify_ownership, count_nearby_stations
from swapnet_whatif.engine.timeline import (
    ingest_timeline_csv,
    load_network_snapshot,
    stations_at_hour,
)

__all__ = [
    "distance_km",
    "offset_point",
    "aggregate_kpis",
    "station_kpis",
    "roster_kpis",
    "generate_virtual_station",
    "estimate_impact",
    "classify_ownership",
    "count_nearby_stations",
    "ingest_timeline_csv",
    "load_network_snapshot",
    "stations_at_hour",
]
