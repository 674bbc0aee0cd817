"""Demand redistribution heuristics.

Every constant used by the impact estimate lives here so a scenario file can
tune it.  Defaults reproduce the closed-form model shown to operators.
"""

from pydantic import BaseModel, Field, model_validator


class ImpactConfig(BaseModel):
    """Closed-form heuristics for the effect of adding one station."""

    swaps_per_slot_per_day: float = Field(
        default=3.5, gt=0,
        description="Average throughput of one battery slot per day, charging cycles included",
    )

    # --- Randomised fractions ---
    absorption_min: float = Field(default=0.80, ge=0, le=1.0, description="Lower bound of lost demand absorbed")
    absorption_max: float = Field(default=0.95, ge=0, le=1.0, description="Upper bound of lost demand absorbed")
    offload_min: float = Field(default=0.15, ge=0, le=1.0, description="Lower bound of served swaps offloaded")
    offload_max: float = Field(default=0.25, ge=0, le=1.0, description="Upper bound of served swaps offloaded")
    offload_net_new_share: float = Field(
        default=0.3, ge=0, le=1.0,
        description="Share of offloaded swaps that becomes net-new throughput. "
                    "The remainder is redistribution between stations.",
    )

    # --- Availability ---
    availability_base_increment: float = Field(default=3.0, ge=0, description="Guaranteed availability gain (batteries)")
    availability_random_span: float = Field(default=3.0, ge=0, description="Width of the random availability gain")
    capacity_scale_slots: float = Field(
        default=20.0, gt=0,
        description="Slots at which the random availability gain doubles: factor = 1 + capacity / scale",
    )

    # --- Wait time ---
    wait_reduction_base: float = Field(default=0.4, ge=0, le=1.0, description="Wait-time cut applied regardless of absorption")
    wait_reduction_span: float = Field(default=0.4, ge=0, le=1.0, description="Extra cut at full absorption")
    min_wait_time_mins: float = Field(default=3.0, ge=0, description="Floor for the estimated wait time")
    default_wait_time_mins: float = Field(default=15.0, gt=0, description="Used when current KPIs carry no wait time")

    @model_validator(mode="after")
    def _check_ranges(self) -> "ImpactConfig":
        if self.absorption_min > self.absorption_max:
            raise ValueError("absorption_min must not exceed absorption_max")
        if self.offload_min > self.offload_max:
            raise ValueError("offload_min must not exceed offload_max")
        if self.wait_reduction_base + self.wait_reduction_span > 1.0:
            raise ValueError("wait_reduction_base + wait_reduction_span must not exceed 1.0")
        return self
