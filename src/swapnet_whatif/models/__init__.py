"""Domain models — stations, KPI results, and application state."""

from swapnet_whatif.models.station import GeoPoint, Station, TimelineRecord, VirtualStation
from swapnet_whatif.models.results import (
    FinancialProfile,
    ImpactEstimate,
    ImprovementSummary,
    InsightLine,
    InsightReport,
    KPIComparison,
    KPISet,
    OwnershipRecommendation,
    RecommendationContent,
)
from swapnet_whatif.models.state import AppState, SimulationRun, SimulationSnapshot

__all__ = [
    "GeoPoint",
    "Station",
    "TimelineRecord",
    "VirtualStation",
    "KPISet",
    "KPIComparison",
    "ImprovementSummary",
    "ImpactEstimate",
    "FinancialProfile",
    "OwnershipRecommendation",
    "InsightLine",
    "InsightReport",
    "RecommendationContent",
    "AppState",
    "SimulationRun",
    "SimulationSnapshot",
]
