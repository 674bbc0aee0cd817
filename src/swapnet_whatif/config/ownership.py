"""Ownership model thresholds."""

from pydantic import BaseModel, Field


class OwnershipConfig(BaseModel):
    """Density rule that separates partner-run from company-run stations."""

    catchment_radius_km: float = Field(default=2.0, gt=0, description="Radius counted as overlapping demand (km)")
    popo_min_nearby: int = Field(
        default=3, ge=1,
        description="Existing stations inside the catchment at which the partner model wins",
    )
