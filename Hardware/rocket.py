"""
Vehicle model: the rocket configuration assembled by the builders.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import List

import numpy as np


SEPARATOR_LINE = "-----------------------------------"
NO_STAGES_LINE = "   [No stages]"


def as_weight(weight: float) -> float:
    """
    Return `weight` as a float [t].

    Raises
    ------
    ValueError
        For text, booleans, values that cannot be converted, and negative or
        non-finite numbers.
    """
    if isinstance(weight, (str, bytes, bool, np.bool_)):
        raise ValueError(f"Weight must be a number; got {weight!r}.")
    try:
        value = float(weight)
    except (TypeError, OverflowError) as exc:
        raise ValueError(f"Weight must be a finite, non-negative number; got {weight!r}.") from exc
    if not np.isfinite(value) or value < 0.0:
        raise ValueError(f"Weight must be a finite, non-negative number; got {weight!r}.")
    return value


def format_weight(weight: float) -> str:
    """Format a weight in tonnes at full precision; whole values print without '.0'."""
    value = float(weight)
    if value.is_integer():
        return f"{value:.0f}"
    return repr(value)


@dataclass
class RocketConfiguration:
    """
    Rocket configuration accumulated step by step by a builder.

    This is a plain data holder: it performs no validation of its own. Each
    builder owns exactly one in-progress instance and hands it over in
    `get_product()`, so a retrieved configuration is never touched again by
    the builder that produced it.

    Fields
    ------
    name : str
        Mission / vehicle label. Empty until set.
    stages : list[str]
        Stage descriptions in the order they were added.
    engine_type : str
        Installed engine class. Empty until engines are installed.
    payload : str
        Cargo description. Empty until a payload is loaded.
    total_weight : float
        Running sum of every weight contribution [t].
    """

    name: str = ""
    stages: List[str] = dataclasses.field(default_factory=list)
    engine_type: str = ""
    payload: str = ""
    total_weight: float = 0.0

    def stage_count(self) -> int:
        return len(self.stages)

    def is_empty(self) -> bool:
        """True when every field still holds its default value."""
        return self == RocketConfiguration()

    def summary(self) -> str:
        """
        Render the configuration as a multi-line text block.

        Layout: header with the name, one line per scalar field, a numbered
        stage list (or a placeholder line when no stages exist) and a
        trailing separator. The block ends with a newline.
        """
        lines = [
            f"--- Rocket Configuration: {self.name} ---",
            f" Engine type: {self.engine_type}",
            f" Payload: {self.payload}",
            f" Total weight: {format_weight(self.total_weight)} t",
            " Stages:",
        ]
        if self.stages:
            for i, stage in enumerate(self.stages, start=1):
                lines.append(f"   {i}. {stage}")
        else:
            lines.append(NO_STAGES_LINE)
        lines.append(SEPARATOR_LINE)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.summary()
