# Software/director.py

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from Software.mission_profile import (
    MissionProfile,
    mars_mission_profile,
    satellite_launch_profile,
)

if TYPE_CHECKING:
    from Hardware.builders import RocketBuilder


class InvalidStateError(RuntimeError):
    """Raised when a recipe is run while no builder is set."""


class MissionControlDirector:
    """
    Knows the construction recipes, but not how any part is made.

    The director only sequences builder steps. It never retrieves the
    finished configuration: callers take it from the builder itself with
    `get_product()` once a recipe has completed.
    """
    def __init__(self, builder: Optional[RocketBuilder] = None):
        self._builder = builder

    @property
    def builder(self) -> Optional[RocketBuilder]:
        return self._builder

    def set_builder(self, builder: RocketBuilder):
        """Swap the active builder. Any object honouring RocketBuilder is accepted."""
        self._builder = builder

    def _require_builder(self) -> RocketBuilder:
        if self._builder is None:
            raise InvalidStateError("Builder is not set")
        return self._builder

    def build_mars_mission_rocket(self):
        """Recipe for a Mars mission rocket (full configuration)."""
        self.build_from_profile(mars_mission_profile())

    def build_satellite_rocket(self):
        """Recipe for a communications satellite launcher (minimal configuration)."""
        self.build_from_profile(satellite_launch_profile())

    def build_from_profile(self, profile: MissionProfile):
        """
        Drive the current builder through `profile`.

        Order: name, stages (in profile order), engines, payload. Engines and
        payload are skipped when the profile says so.

        Raises
        ------
        InvalidStateError
            If no builder has been set.
        ValueError
            If any weight in the profile is invalid. Raised before the first
            builder step, so the builder is left untouched.
        """
        builder = self._require_builder()
        profile.validate()

        builder.set_name(profile.rocket_name)
        for stage in profile.stages:
            builder.add_stage(stage.description, stage.weight)
        if profile.install_engines:
            builder.install_engines()
        if profile.payload_name is not None:
            builder.load_payload(profile.payload_name, profile.payload_weight)
