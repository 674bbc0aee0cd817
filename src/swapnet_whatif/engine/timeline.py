"""Timeline ingestion — simulation service exports → typed records.

  1. ``ingest_timeline_csv``   — parse an hourly timeline CSV export
  2. ``load_network_snapshot`` — read a YAML network snapshot (roster,
     baseline/scenario runs, recommendation)
  3. ``stations_at_hour``      — one record per station for a given hour
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from pathlib import Path

import yaml

from swapnet_whatif.models.state import SimulationSnapshot
from swapnet_whatif.models.station import Station, TimelineRecord

_MISSING = (None, "", "NA", "null")


def ingest_timeline_csv(source: str | Path | io.StringIO) -> list[TimelineRecord]:
    """Parse a timeline CSV into ``TimelineRecord`` rows.

    Expected columns (header row required):
      station_id, hour, iteration, swaps_completed, lost_swaps,
      available_batteries[, lat, lon, initial_stock]

    Rows that fail validation are skipped.
    """
    rows = _read_csv(source)
    records: list[TimelineRecord] = []
    for row in rows:
        try:
            rec = TimelineRecord(
                station_id=str(row["station_id"]).strip(),
                hour=int(row["hour"]),
                iteration=int(row.get("iteration") or 0),
                swaps_completed=int(float(row.get("swaps_completed") or 0)),
                lost_swaps=int(float(row.get("lost_swaps") or 0)),
                available_batteries=float(row.get("available_batteries") or 0),
                lat=float(row["lat"]) if row.get("lat") not in _MISSING else None,
                lon=float(row["lon"]) if row.get("lon") not in _MISSING else None,
                initial_stock=int(float(row.get("initial_stock") or 0)),
            )
            records.append(rec)
        except (ValueError, KeyError, TypeError):
            continue  # skip malformed rows
    return records


def load_network_snapshot(path: str | Path) -> tuple[list[Station], SimulationSnapshot]:
    """Read a YAML snapshot with ``stations``, ``baseline``, ``scenario`` and
    ``recommendation`` keys.  Missing runs stay ``None``."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    stations = [Station(**s) for s in data.get("stations") or []]
    snapshot = SimulationSnapshot(
        baseline=data.get("baseline"),
        scenario=data.get("scenario"),
        recommendation=data.get("recommendation"),
    )
    return stations, snapshot


def stations_at_hour(timeline: Iterable[TimelineRecord] | None, hour: int) -> list[Station]:
    """Records at ``hour`` as stations, first occurrence per station (iteration order)."""
    seen: set[str] = set()
    stations: list[Station] = []
    for rec in timeline or []:
        if rec.hour != hour or rec.station_id in seen:
            continue
        seen.add(rec.station_id)
        stations.append(rec.to_station())
    return stations


def _read_csv(source: str | Path | io.StringIO) -> list[dict[str, str]]:
    if isinstance(source, io.StringIO):
        return list(csv.DictReader(source))
    with open(source, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))
