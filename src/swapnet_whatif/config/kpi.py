"""KPI aggregation settings."""

from pydantic import BaseModel, Field


class KPIConfig(BaseModel):
    """Wait time is derived from the loss rate: base + loss_rate × span."""

    base_wait_time_mins: float = Field(default=5.0, ge=0, description="Wait time at zero loss rate (min)")
    loss_wait_span_mins: float = Field(default=25.0, ge=0, description="Extra wait time at 100% loss rate (min)")
    map_hour: int = Field(
        default=12, ge=0, le=23,
        description="Timeline hour used as the representative station snapshot for maps and selection",
    )
