"""
Configuration for the demo run (which scenarios to build, exit behaviour).
"""

import dataclasses
from dataclasses import dataclass
from typing import List


SCENARIO_NAMES = ("mars", "satellite", "custom")


@dataclass
class DemoConfig:
    # --- Scenarios ---
    # Run in this order: director + heavy builder, director + light builder,
    # manual build without the director.
    scenarios: List[str] = dataclasses.field(default_factory=lambda: list(SCENARIO_NAMES))

    # --- Exit ---
    pause_on_exit: bool = True  # wait for Enter before the process ends
