"""What-if impact estimate — KPIs after adding one virtual station.

Closed-form demand redistribution, no queueing simulation:

  1. Capacity ceiling     — slots × 3.5 swaps/slot/day
  2. Lost-demand capture  — 80–95 % of lost swaps, capped by the ceiling
  3. Offload              — 15–25 % of served swaps move to the new station;
                            only 30 % of that is net-new throughput
  4. Availability         — load spreads out, so every station keeps more
                            charged stock (never decreases)
  5. Wait time            — cut by 40–80 % depending on how much lost demand
                            was captured, floored at 3 minutes

Two fractions (absorption, offload) plus the availability gain are random
draws from the caller's ``numpy.random.Generator``; everything else is
deterministic.  Re-running with an unseeded generator gives a different but
range-bounded estimate.
"""

from __future__ import annotations

import numpy as np

from swapnet_whatif.config.impact import ImpactConfig
from swapnet_whatif.engine.kpi import round_half_up
from swapnet_whatif.models.results import ImpactEstimate, ImprovementSummary, KPISet
from swapnet_whatif.models.station import Station, VirtualStation


def estimate_impact(
    current_kpis: KPISet | None,
    parent: Station | None,
    virtual_station: VirtualStation | None,
    rng: np.random.Generator | None = None,
    config: ImpactConfig | None = None,
) -> ImpactEstimate | None:
    """Estimate the post-addition ``KPISet``.

    Parameters
    ----------
    current_kpis : KPISet | None
        Post-simulation KPIs when available, else the pre-simulation roster
        KPIs.
    parent : Station | None
        Station the candidate was generated near.  Carried for context only;
        the estimate depends on the candidate's capacity.
    virtual_station : VirtualStation | None
        The candidate from ``generate_virtual_station``.
    rng : numpy.random.Generator | None
        Draws absorption, offload and availability gain, in that order.
    config : ImpactConfig | None
        Heuristic constants.

    Returns
    -------
    ImpactEstimate | None
        ``None`` when ``current_kpis`` or ``virtual_station`` is missing.
    """
    if current_kpis is None or virtual_station is None:
        return None
    cfg = config or ImpactConfig()
    rng = rng if rng is not None else np.random.default_rng()

    # ── Current values ─────────────────────────────────────────────────
    current_lost = current_kpis.total_lost_swaps or 0.0
    current_total = current_kpis.total_swaps or 0.0
    current_success = current_kpis.success_rate or 0.0
    current_availability = current_kpis.avg_battery_availability or 0.0
    current_wait = current_kpis.avg_wait_time_mins or cfg.default_wait_time_mins

    # ── 1. Capacity ceiling ────────────────────────────────────────────
    capacity = virtual_station.capacity
    max_daily_capacity = int(round_half_up(capacity * cfg.swaps_per_slot_per_day))

    # ── 2. Lost-demand capture ─────────────────────────────────────────
    absorption_factor = float(rng.uniform(cfg.absorption_min, cfg.absorption_max))
    potential_absorption = int(round_half_up(current_lost * absorption_factor))
    absorbed = min(potential_absorption, max_daily_capacity)

    # ── 3. Offload from congested neighbours ───────────────────────────
    offload_factor = float(rng.uniform(cfg.offload_min, cfg.offload_max))
    offloaded = int(round_half_up(current_total * offload_factor))

    # ── 4–5. New swap counts ───────────────────────────────────────────
    new_lost = max(0.0, current_lost - absorbed)
    swaps_increase = absorbed + int(round_half_up(offloaded * cfg.offload_net_new_share))
    new_total = current_total + swaps_increase

    # ── 6. Success rate ────────────────────────────────────────────────
    if current_total + current_lost > 0:
        new_success = new_total / (new_total + new_lost) * 100.0
    else:
        # No demand at all: nothing to improve.
        new_success = current_success
    new_success = min(100.0, new_success)

    # ── 7. Availability ────────────────────────────────────────────────
    load_reduction = 1.0 + capacity / cfg.capacity_scale_slots
    availability_gain = (
        cfg.availability_base_increment
        + float(rng.uniform(0.0, cfg.availability_random_span)) * load_reduction
    )
    new_availability = current_availability + availability_gain

    # ── 8. Wait time ───────────────────────────────────────────────────
    capture_ratio = absorbed / current_lost if current_lost > 0 else 0.0
    reduction = cfg.wait_reduction_base + capture_ratio * cfg.wait_reduction_span
    new_wait = max(cfg.min_wait_time_mins, current_wait * (1.0 - reduction))

    return ImpactEstimate(
        kpis=KPISet(
            total_swaps=new_total,
            total_lost_swaps=new_lost,
            success_rate=new_success,
            avg_battery_availability=new_availability,
            avg_wait_time_mins=round_half_up(new_wait, 1),
        ),
        absorption_factor=absorption_factor,
        offload_factor=offload_factor,
        absorbed_demand=absorbed,
        offloaded_swaps=offloaded,
        station_capacity=capacity,
        max_daily_capacity=max_daily_capacity,
        improvement=ImprovementSummary(
            lost_swaps_reduction=current_lost - new_lost,
            swaps_increase=swaps_increase,
            success_rate_improvement=new_success - current_success,
            wait_time_reduction=current_wait - new_wait,
        ),
    )
