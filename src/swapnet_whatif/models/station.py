"""Input types — stations and timeline records from the simulation service.

These mirror the data contract of the upstream simulation/analytics service.
Coordinates are optional because the roster occasionally carries stations
without a surveyed position; engine functions treat those as missing input.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """A latitude/longitude pair in degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class Station(BaseModel):
    """One swap station, either from the roster or from a timeline snapshot."""

    model_config = ConfigDict(frozen=True)

    station_id: str = Field(min_length=1)
    """Unique within one network snapshot."""

    lat: float | None = Field(default=None, ge=-90.0, le=90.0)
    lon: float | None = Field(default=None, ge=-180.0, le=180.0)

    capacity: int | None = Field(default=None, ge=0)
    """Installed battery slots. Unknown for most roster entries."""

    initial_stock: int = Field(default=0, ge=0)
    """Batteries on hand before any simulation."""

    available_batteries: float | None = Field(default=None, ge=0)
    """Current available battery count. None before a simulation has run."""

    swaps_completed: int = Field(default=0, ge=0)
    lost_swaps: int = Field(default=0, ge=0)

    hour: int | None = Field(default=None, ge=0, le=23)
    """Hour-of-day marker when drawn from a simulated timeline."""

    iteration: int | None = Field(default=None, ge=0)
    """Simulated day index when drawn from a simulated timeline."""

    @property
    def position(self) -> GeoPoint | None:
        if self.lat is None or self.lon is None:
            return None
        return GeoPoint(lat=self.lat, lon=self.lon)

    def with_initial_stock(self) -> Station:
        """Pre-simulation view: available batteries = initial stock."""
        return self.model_copy(update={"available_batteries": float(self.initial_stock)})


class VirtualStation(Station):
    """A proposed, non-physical station generated near an existing one.

    Lives only in transient application state; it is never persisted or sent
    upstream.
    """

    is_virtual: Literal[True] = True
    capacity: int = Field(default=15, ge=1)
    parent_station_id: str
    distance_km: float = Field(ge=0)
    """Straight-line distance from the parent station (km, 2 decimals)."""


class TimelineRecord(BaseModel):
    """One per-hour, per-station row of a simulated timeline."""

    model_config = ConfigDict(frozen=True)

    station_id: str = Field(min_length=1)
    hour: int = Field(ge=0, le=23)
    iteration: int = Field(default=0, ge=0)
    """Simulated day this row belongs to."""

    swaps_completed: int = Field(default=0, ge=0)
    lost_swaps: int = Field(default=0, ge=0)
    available_batteries: float = Field(default=0.0, ge=0)

    lat: float | None = Field(default=None, ge=-90.0, le=90.0)
    lon: float | None = Field(default=None, ge=-180.0, le=180.0)
    initial_stock: int = Field(default=0, ge=0)

    def to_station(self) -> Station:
        return Station(
            station_id=self.station_id,
            lat=self.lat,
            lon=self.lon,
            initial_stock=self.initial_stock,
            available_batteries=self.available_batteries,
            swaps_completed=self.swaps_completed,
            lost_swaps=self.lost_swaps,
            hour=self.hour,
            iteration=self.iteration,
        )
