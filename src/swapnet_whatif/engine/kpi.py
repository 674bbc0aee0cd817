"""KPI aggregation — raw simulation timelines → one ``KPISet``.

Swap and loss counts are reported as **daily** totals (sum ÷ number of
simulated days), while battery availability is a **time average** (sum ÷
number of hourly observations).  The two use different units of analysis on
purpose; do not "harmonise" them.

Wait time is not simulated per station, so it is derived from the loss rate:
``5 + loss_rate × 25`` minutes, i.e. bounded to [5, 30].
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from swapnet_whatif.config.kpi import KPIConfig
from swapnet_whatif.models.results import KPISet
from swapnet_whatif.models.station import Station, TimelineRecord


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from zero for positives (2.5 → 3), unlike ``round``.

    KPI figures are displayed next to values computed by the dashboard, which
    rounds this way; banker's rounding would drift by one on every half.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def aggregate_kpis(
    timeline: Sequence[TimelineRecord] | None,
    station_id: str | None = None,
    config: KPIConfig | None = None,
) -> KPISet | None:
    """Reduce a per-hour, per-iteration timeline to a single ``KPISet``.

    Parameters
    ----------
    timeline : Sequence[TimelineRecord] | None
        Rows from the simulation service.
    station_id : str | None
        Restrict to one station.  ``None`` aggregates the whole network.
    config : KPIConfig | None
        Wait-time derivation constants.  Defaults when omitted.

    Returns
    -------
    KPISet | None
        ``None`` when there is no timeline or no row matches.
    """
    if not timeline:
        return None
    cfg = config or KPIConfig()

    items = [r for r in timeline if station_id is None or r.station_id == station_id]
    if not items:
        return None

    iterations = len({r.iteration for r in items}) or 1

    daily_swaps = sum(r.swaps_completed for r in items) / iterations
    daily_lost = sum(r.lost_swaps for r in items) / iterations
    avg_availability = sum(r.available_batteries for r in items) / len(items)

    attempts = daily_swaps + daily_lost
    if attempts > 0:
        success_rate = daily_swaps / attempts * 100.0
        loss_rate = daily_lost / attempts
    else:
        # Zero demand counts as fully served.
        success_rate = 100.0
        loss_rate = 0.0

    wait_time = cfg.base_wait_time_mins + loss_rate * cfg.loss_wait_span_mins

    return KPISet(
        total_swaps=daily_swaps,
        total_lost_swaps=daily_lost,
        success_rate=success_rate,
        avg_battery_availability=avg_availability,
        avg_wait_time_mins=round_half_up(wait_time, 1),
    )


def station_kpis(
    timeline: Sequence[TimelineRecord] | None,
    station_id: str | None,
    config: KPIConfig | None = None,
) -> KPISet | None:
    """Per-station KPIs; ``None`` unless both a timeline and a station are given."""
    if not timeline or not station_id:
        return None
    return aggregate_kpis(timeline, station_id, config)


def roster_kpis(
    stations: Iterable[Station] | None,
    config: KPIConfig | None = None,
) -> KPISet | None:
    """Pre-simulation fallback built from the raw station roster.

    No swaps have happened yet, so swaps and losses are zero, the success
    rate is 100 and the wait time sits at its base value.  Availability is
    the mean current stock, falling back to ``initial_stock``.
    """
    roster = list(stations or [])
    if not roster:
        return None
    cfg = config or KPIConfig()

    stock = [
        s.available_batteries if s.available_batteries is not None else float(s.initial_stock)
        for s in roster
    ]
    return KPISet(
        total_swaps=0.0,
        total_lost_swaps=0.0,
        success_rate=100.0,
        avg_battery_availability=sum(stock) / len(stock),
        avg_wait_time_mins=round_half_up(cfg.base_wait_time_mins, 1),
    )
