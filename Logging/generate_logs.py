"""
Functions for saving finished rocket configurations to text logs.
"""
from __future__ import annotations

import datetime as dt
from typing import Iterable, Optional

from Hardware.rocket import RocketConfiguration
from Main.telemetry import AdvisoryLog


def _header_line() -> str:
    stamp = dt.datetime.now().isoformat(timespec="seconds")
    return f"# Rocket configurations generated {stamp}\n"


def format_advisories(advisories: AdvisoryLog) -> str:
    """One line per recorded advisory, or a placeholder when there are none."""
    if len(advisories) == 0:
        return "Advisories: none\n"
    lines = [f"Advisories ({len(advisories)}):"]
    for entry in advisories.entries:
        lines.append(f"  [{entry.source}] {entry.message}")
    return "\n".join(lines) + "\n"


def save_configurations_to_txt(
    configs: Iterable[RocketConfiguration],
    filename: str,
    advisories: Optional[AdvisoryLog] = None,
):
    """Write every rendered configuration (and any advisories) to a text file."""
    with open(filename, "w", encoding="utf-8") as f:
        f.write(_header_line())
        for config in configs:
            f.write("\n")
            f.write(config.summary())
        if advisories is not None:
            f.write("\n")
            f.write(format_advisories(advisories))
    print(f"Saved rocket configurations to {filename}")
