"""Virtual station placement — propose a candidate site near a parent station.

Each call draws a fresh bearing and distance, so repeated "add" actions
explore different directions around the same parent.  The caller passes in a
``numpy.random.Generator`` to pin the draw in tests.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from swapnet_whatif.config.placement import PlacementConfig
from swapnet_whatif.engine.geo import offset_point
from swapnet_whatif.engine.kpi import round_half_up
from swapnet_whatif.models.station import Station, VirtualStation

logger = logging.getLogger(__name__)


def generate_virtual_station(
    parent: Station | None,
    rng: np.random.Generator | None = None,
    config: PlacementConfig | None = None,
) -> VirtualStation | None:
    """Draw a virtual station 0.8–1.8 km from ``parent`` in a random direction.

    Parameters
    ----------
    parent : Station | None
        Existing station the candidate is generated around.
    rng : numpy.random.Generator | None
        Source of the bearing and distance draws.  A fresh unseeded
        generator when omitted.
    config : PlacementConfig | None
        Distance bounds, capacity and synthetic id.

    Returns
    -------
    VirtualStation | None
        ``None`` when the parent is missing or has no coordinates.
    """
    if parent is None or parent.position is None:
        logger.debug("No placement: parent station missing or without coordinates")
        return None
    cfg = config or PlacementConfig()
    rng = rng if rng is not None else np.random.default_rng()

    bearing = rng.uniform(0.0, 2.0 * math.pi)
    distance = rng.uniform(cfg.min_distance_km, cfg.max_distance_km)

    point = offset_point(parent.position, bearing, distance)
    if point is None:
        logger.debug("No placement: offset undefined at parent %s", parent.station_id)
        return None

    return VirtualStation(
        station_id=cfg.virtual_station_id,
        lat=point.lat,
        lon=point.lon,
        capacity=cfg.default_capacity,
        parent_station_id=parent.station_id,
        distance_km=round_half_up(float(distance), 2),
    )
