"""Configuration models — engine heuristics and thresholds."""

from swapnet_whatif.config.kpi import KPIConfig
from swapnet_whatif.config.placement import PlacementConfig
from swapnet_whatif.config.impact import ImpactConfig
from swapnet_whatif.config.ownership import OwnershipConfig
from swapnet_whatif.config.scenario import WhatIfConfig, load_config

__all__ = [
    "KPIConfig",
    "PlacementConfig",
    "ImpactConfig",
    "OwnershipConfig",
    "WhatIfConfig",
    "load_config",
]
