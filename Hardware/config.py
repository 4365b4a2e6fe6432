"""
Configuration for vehicle hardware (engine classes, engine masses, payload limits).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from Hardware.builders import HeavyLiftRocketBuilder, LightCargoRocketBuilder
    from Main.telemetry import AdvisoryLog


@dataclass
class HardwareConfig:
    # --- Heavy-lift vehicles (deep-space missions) ---
    heavy_engine_type: str = "high-thrust liquid-propellant engines"
    heavy_engine_mass_t: float = 50.0   # mass of the engine cluster itself

    # --- Light-cargo vehicles (satellite launches) ---
    light_engine_type: str = "solid-fuel boosters"
    light_engine_mass_t: float = 10.0
    light_stage_prefix: str = "Light Stage: "

    # Payloads above this mass raise an advisory on light vehicles (strictly greater).
    light_payload_limit_t: float = 500.0

    def create_heavy_lift_builder(
        self, advisories: Optional[AdvisoryLog] = None
    ) -> HeavyLiftRocketBuilder:
        from Hardware.builders import HeavyLiftRocketBuilder  # Local import
        return HeavyLiftRocketBuilder(hw_config=self, advisories=advisories)

    def create_light_cargo_builder(
        self, advisories: Optional[AdvisoryLog] = None
    ) -> LightCargoRocketBuilder:
        from Hardware.builders import LightCargoRocketBuilder  # Local import
        return LightCargoRocketBuilder(hw_config=self, advisories=advisories)
