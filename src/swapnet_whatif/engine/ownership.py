"""Ownership model classifier — POPO vs COCO for a proposed station.

Hard density rule over the 2 km catchment:

  - ≥ 3 existing stations nearby → **POPO** (Partner Owned Partner Operated):
    a dense, proven area where a local partner can carry the capital.
  - 0–2 stations nearby → **COCO** (Company Owned Company Operated):
    a greenfield (0) or emerging (1–2) area where the company should build
    the brand itself before partnering.

Financial figures are illustrative ranges shown to operators, not a costed
business case.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from swapnet_whatif.config.ownership import OwnershipConfig
from swapnet_whatif.engine.geo import distance_km
from swapnet_whatif.models.results import FinancialProfile, OwnershipRecommendation
from swapnet_whatif.models.station import GeoPoint, Station, VirtualStation

logger = logging.getLogger(__name__)

POPO_FULL_NAME = "Partner Owned Partner Operated"
COCO_FULL_NAME = "Company Owned Company Operated"

NO_DATA_BENEFITS = [
    "Full control over operations",
    "Direct quality assurance",
    "Faster decision making",
]

POPO_BENEFITS = [
    "Lower capital investment for company",
    "Partner has local market knowledge",
    "Faster deployment timeline",
    "Shared operational risk",
    "Partner incentivized for performance",
]

COCO_BENEFITS = [
    "Full control over customer experience",
    "Higher long-term margins",
    "Direct data ownership",
    "Brand building in new area",
    "Flexibility in operations",
]

POPO_FINANCIALS = FinancialProfile(
    estimated_setup_cost="₹3-5 Lakhs (partner bears)",
    revenue_share="70% Partner / 30% Company",
    breakeven="6-9 months",
)

COCO_FINANCIALS = FinancialProfile(
    estimated_setup_cost="₹15-20 Lakhs",
    revenue_share="100% Company",
    breakeven="12-18 months",
)


def count_nearby_stations(
    point: GeoPoint,
    stations: Iterable[Station],
    radius_km: float,
) -> int:
    """Stations with coordinates within ``radius_km`` of ``point`` (boundary inclusive)."""
    count = 0
    for station in stations:
        position = station.position
        if position is None:
            continue
        if distance_km(point, position) <= radius_km:
            count += 1
    return count


def classify_ownership(
    virtual_station: VirtualStation | None,
    stations: Iterable[Station] | None,
    config: OwnershipConfig | None = None,
) -> OwnershipRecommendation:
    """Recommend POPO or COCO for ``virtual_station``.

    Never fails: with no roster (or no usable candidate) the company-owned
    model is returned with a "no data" rationale.
    """
    cfg = config or OwnershipConfig()
    roster = list(stations or [])

    if virtual_station is None or virtual_station.position is None or not roster:
        return OwnershipRecommendation(
            model="COCO",
            full_name=COCO_FULL_NAME,
            reason="No existing stations data available - default to company ownership.",
            benefits=list(NO_DATA_BENEFITS),
        )

    radius = cfg.catchment_radius_km
    nearby = count_nearby_stations(virtual_station.position, roster, radius)
    logger.debug("%d stations within %.1f km of %s", nearby, radius, virtual_station.station_id)

    if nearby >= cfg.popo_min_nearby:
        return OwnershipRecommendation(
            model="POPO",
            full_name=POPO_FULL_NAME,
            nearby_station_count=nearby,
            reason=(
                f"{nearby} existing stations within {radius:g}km radius. "
                "High-density area suitable for partner model - leverages local "
                "expertise and existing customer relationships."
            ),
            benefits=list(POPO_BENEFITS),
            financials=POPO_FINANCIALS,
        )

    if nearby == 0:
        reason = (
            "Greenfield location with no existing stations nearby. "
            "Company ownership ensures brand standards in new market."
        )
    else:
        reason = (
            f"Only {nearby} station(s) within {radius:g}km radius. "
            "Emerging market area - company ownership recommended to establish "
            "strong brand presence before partnering."
        )

    return OwnershipRecommendation(
        model="COCO",
        full_name=COCO_FULL_NAME,
        nearby_station_count=nearby,
        reason=reason,
        benefits=list(COCO_BENEFITS),
        financials=COCO_FINANCIALS,
    )
