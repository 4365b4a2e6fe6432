"""
mission_profile.py

Defines the mission recipes the director knows: which stages to stack,
which payload to load, and in what order.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import List, Optional

from Hardware.rocket import as_weight


@dataclass(frozen=True)
class StagePlan:
    description: str
    weight: float  # [t]

    def __post_init__(self):
        object.__setattr__(self, "weight", as_weight(self.weight))


@dataclass
class MissionProfile:
    rocket_name: str
    stages: List[StagePlan] = dataclasses.field(default_factory=list)
    payload_name: Optional[str] = None   # None skips the payload step
    payload_weight: float = 0.0          # [t]
    install_engines: bool = True

    def __post_init__(self):
        self.validate()

    def validate(self):
        """
        Check every weight the profile will hand to a builder.

        Raises ValueError for the first invalid weight, so a bad profile is
        rejected before any builder step runs.
        """
        for stage in self.stages:
            as_weight(stage.weight)
        if self.payload_name is not None:
            as_weight(self.payload_weight)

    def expected_weight(self, engine_mass: float) -> float:
        """
        Total weight a builder accumulates when driven through this profile.

        Parameters
        ----------
        engine_mass : float
            Fixed engine mass of the builder variant [t]. Ignored when the
            profile skips the engine step.
        """
        total = sum(stage.weight for stage in self.stages)
        if self.install_engines:
            total += engine_mass
        if self.payload_name is not None:
            total += self.payload_weight
        return float(total)


def mars_mission_profile() -> MissionProfile:
    # Full configuration: three stages and a crewed-science payload.
    return MissionProfile(
        rocket_name="Mars Explorer V",
        stages=[
            StagePlan("Stage 1: Super Heavy Booster", 2000.0),
            StagePlan("Stage 2: Interplanetary Transfer Stage", 500.0),
            StagePlan("Stage 3: Landing Module", 100.0),
        ],
        payload_name="Scientific Rover & Life Support",
        payload_weight=50.0,
    )


def satellite_launch_profile() -> MissionProfile:
    # Minimal configuration for a communications satellite.
    return MissionProfile(
        rocket_name="StarLink Carrier",
        stages=[
            StagePlan("Main Booster", 300.0),
            StagePlan("Orbital Insertion Stage", 50.0),
        ],
        payload_name="Communication Satellite Array",
        payload_weight=15.0,
    )
