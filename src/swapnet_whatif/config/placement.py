"""Virtual station placement inputs."""

from pydantic import BaseModel, Field, model_validator


class PlacementConfig(BaseModel):
    """Where and how big a proposed station is drawn around its parent."""

    min_distance_km: float = Field(default=0.8, gt=0, description="Closest allowed offset from the parent (km)")
    max_distance_km: float = Field(
        default=1.8, gt=0, le=2.0,
        description="Farthest allowed offset from the parent (km). "
                    "Kept inside the 2 km catchment radius.",
    )
    default_capacity: int = Field(default=15, ge=1, description="Battery slots installed at a new station")
    virtual_station_id: str = Field(
        default="VIRTUAL_STATION_001",
        description="Synthetic identifier marking the station as non-physical",
    )

    @model_validator(mode="after")
    def _check_range(self) -> "PlacementConfig":
        if self.min_distance_km > self.max_distance_km:
            raise ValueError("min_distance_km must not exceed max_distance_km")
        return self
