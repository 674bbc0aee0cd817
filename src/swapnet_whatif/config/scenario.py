"""Top-level engine settings — bundles every config section."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from swapnet_whatif.config.impact import ImpactConfig
from swapnet_whatif.config.kpi import KPIConfig
from swapnet_whatif.config.ownership import OwnershipConfig
from swapnet_whatif.config.placement import PlacementConfig


class WhatIfConfig(BaseModel):
    """Complete input bundle for the what-if engine."""

    kpi: KPIConfig = Field(default_factory=KPIConfig)
    placement: PlacementConfig = Field(default_factory=PlacementConfig)
    impact: ImpactConfig = Field(default_factory=ImpactConfig)
    ownership: OwnershipConfig = Field(default_factory=OwnershipConfig)
    random_seed: int | None = Field(
        default=None,
        description="Optional RNG seed for reproducible estimates. None = non-deterministic.",
    )


def load_config(path: str | Path | None = None) -> WhatIfConfig:
    """Load a ``WhatIfConfig`` from a YAML file.

    The file may hold a top-level ``engine:`` section (as in the shipped
    scenario files) or the config sections directly.  Missing sections use
    defaults; ``path=None`` returns the defaults.
    """
    if path is None:
        return WhatIfConfig()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if "engine" in data:
        data = data["engine"] or {}
    return WhatIfConfig(**data)
