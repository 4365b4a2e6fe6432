"""
Configuration for advisory output, text logs and the weights chart.
"""

from __future__ import annotations

from dataclasses import dataclass

from Main.telemetry import AdvisoryLog


@dataclass
class LoggingConfig:
    # Advisories
    echo_advisories: bool = True
    # Text log
    save_log: bool = False
    log_filename: str = "rocket_configurations.txt"
    # Analysis
    plot_weights: bool = False
    plot_filename: str = "rocket_weights.png"

    def create_advisory_log(self) -> AdvisoryLog:
        return AdvisoryLog(echo=self.echo_advisories)
