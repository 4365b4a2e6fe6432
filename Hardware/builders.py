"""
Rocket builders: the step-by-step construction contract and its two variants.
"""

from __future__ import annotations

from typing import Optional, Protocol

from Hardware.config import HardwareConfig
from Hardware.rocket import RocketConfiguration, as_weight
from Main.telemetry import AdvisoryLog


class RocketBuilder(Protocol):
    """
    Construction steps shared by every rocket builder.

    Any object providing these methods can be handed to the director; no
    base class is required. Steps may be called in any order and none of
    them returns a value except `get_product()`.
    """

    def reset(self) -> None: ...

    def set_name(self, name: str) -> None: ...

    def add_stage(self, description: str, weight: float) -> None: ...

    def install_engines(self) -> None: ...

    def load_payload(self, name: str, weight: float) -> None: ...

    def get_product(self) -> RocketConfiguration: ...


class HeavyLiftRocketBuilder:
    """
    Builder for heavy rockets (Moon / Mars missions).

    Installs high-thrust liquid-propellant engines and stores stage
    descriptions verbatim. Payloads are loaded without any check.
    """

    def __init__(
        self,
        hw_config: Optional[HardwareConfig] = None,
        advisories: Optional[AdvisoryLog] = None,
    ):
        self.hw_config = hw_config or HardwareConfig()
        self.advisories = advisories if advisories is not None else AdvisoryLog()
        self.reset()

    def reset(self):
        self._rocket = RocketConfiguration()

    def set_name(self, name: str):
        self._rocket.name = name

    def add_stage(self, description: str, weight: float):
        weight = as_weight(weight)
        self._rocket.stages.append(description)
        self._rocket.total_weight += weight

    def install_engines(self):
        self._rocket.engine_type = self.hw_config.heavy_engine_type
        self._rocket.total_weight += self.hw_config.heavy_engine_mass_t

    def load_payload(self, name: str, weight: float):
        weight = as_weight(weight)
        self._rocket.payload = name
        self._rocket.total_weight += weight

    def get_product(self) -> RocketConfiguration:
        result = self._rocket
        self.reset()
        return result


class LightCargoRocketBuilder:
    """
    Builder for light rockets (satellite launches).

    Installs solid-fuel boosters, marks every stage as a light stage and
    reports an advisory when the payload exceeds the light-vehicle limit.
    The overweight payload is still loaded with its full weight.
    """

    def __init__(
        self,
        hw_config: Optional[HardwareConfig] = None,
        advisories: Optional[AdvisoryLog] = None,
    ):
        self.hw_config = hw_config or HardwareConfig()
        self.advisories = advisories if advisories is not None else AdvisoryLog()
        self.reset()

    def reset(self):
        self._rocket = RocketConfiguration()

    def set_name(self, name: str):
        self._rocket.name = name

    def add_stage(self, description: str, weight: float):
        weight = as_weight(weight)
        self._rocket.stages.append(f"{self.hw_config.light_stage_prefix}{description}")
        self._rocket.total_weight += weight

    def install_engines(self):
        self._rocket.engine_type = self.hw_config.light_engine_type
        self._rocket.total_weight += self.hw_config.light_engine_mass_t

    def load_payload(self, name: str, weight: float):
        weight = as_weight(weight)
        if weight > self.hw_config.light_payload_limit_t:
            self.advisories.warn(
                type(self).__name__,
                f"Payload '{name}' ({weight:g} t) is too heavy for a light rocket "
                f"(limit {self.hw_config.light_payload_limit_t:g} t).",
            )
        self._rocket.payload = name
        self._rocket.total_weight += weight

    def get_product(self) -> RocketConfiguration:
        result = self._rocket
        self.reset()
        return result
