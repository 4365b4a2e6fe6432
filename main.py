"""
Entry point to run the rocket-assembly demo.

Builds a heavy Mars-mission rocket and a light satellite launcher through the
mission-control director, then assembles a one-off prototype by hand without
the director, and prints every resulting configuration.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from Hardware.builders import HeavyLiftRocketBuilder, LightCargoRocketBuilder, RocketBuilder
from Hardware.config import HardwareConfig
from Hardware.rocket import RocketConfiguration, format_weight

from Software.director import MissionControlDirector

from Main.config import DemoConfig, SCENARIO_NAMES
from Main.telemetry import AdvisoryLog

from Logging.config import LoggingConfig
from Logging.generate_logs import save_configurations_to_txt

from Analysis.plotting import plot_total_weights


def main_orchestrator(
    hw_config: Optional[HardwareConfig] = None,
    log_config: Optional[LoggingConfig] = None,
    demo_config: Optional[DemoConfig] = None,
) -> Tuple[MissionControlDirector, HeavyLiftRocketBuilder, LightCargoRocketBuilder, AdvisoryLog, LoggingConfig, DemoConfig]:
    # 1. Instantiate all config objects if not provided
    hw_config = hw_config or HardwareConfig()
    log_config = log_config or LoggingConfig()
    demo_config = demo_config or DemoConfig()

    # 2. Both builders report to the same advisory log
    advisories = log_config.create_advisory_log()
    heavy_builder = hw_config.create_heavy_lift_builder(advisories)
    light_builder = hw_config.create_light_cargo_builder(advisories)

    # 3. The director starts without a builder; each scenario assigns one.
    director = MissionControlDirector()

    return director, heavy_builder, light_builder, advisories, log_config, demo_config


def build_mars_rocket(director: MissionControlDirector, builder: RocketBuilder) -> RocketConfiguration:
    """Assign `builder`, run the Mars recipe and collect the product from the builder."""
    director.set_builder(builder)
    director.build_mars_mission_rocket()
    return builder.get_product()


def build_satellite_rocket(director: MissionControlDirector, builder: RocketBuilder) -> RocketConfiguration:
    director.set_builder(builder)
    director.build_satellite_rocket()
    return builder.get_product()


def build_custom_prototype(builder: RocketBuilder) -> RocketConfiguration:
    """Manual, one-off build without the director. No payload is loaded."""
    builder.reset()
    builder.set_name("Test Prototype X")
    builder.add_stage("Single Stage To Orbit (SSTO)", 1000)
    builder.install_engines()
    return builder.get_product()


def run_scenarios(
    director: MissionControlDirector,
    heavy_builder: RocketBuilder,
    light_builder: RocketBuilder,
    scenarios: Optional[List[str]] = None,
) -> List[RocketConfiguration]:
    """Run the requested demo scenarios in order and print each configuration."""
    scenarios = list(SCENARIO_NAMES) if scenarios is None else scenarios
    unknown = [name for name in scenarios if name not in SCENARIO_NAMES]
    if unknown:
        raise ValueError(f"Unknown scenario(s) {unknown}. Expected a subset of {list(SCENARIO_NAMES)}.")

    configs = []
    for name in scenarios:
        if name == "mars":
            print("1. Preparing the Mars mission...")
            config = build_mars_rocket(director, heavy_builder)
        elif name == "satellite":
            print("\n2. Preparing the satellite launch...")
            config = build_satellite_rocket(director, light_builder)
        else:
            print("\n3. Experimental custom build...")
            config = build_custom_prototype(heavy_builder)
        print(config.summary())
        configs.append(config)
    return configs


def print_summary(configs: List[RocketConfiguration], advisories: AdvisoryLog):
    print("=== Build summary ===")
    print(f"Configurations built: {len(configs)}")
    for config in configs:
        print(f"  {config.name:<20s}: {config.stage_count()} stage(s), {format_weight(config.total_weight)} t")
    print(f"Advisories      : {len(advisories)}")
    for message in advisories.messages():
        print(f"  - {message}")


def main():
    director, heavy_builder, light_builder, advisories, log_config, demo_config = main_orchestrator()
    configs = run_scenarios(director, heavy_builder, light_builder, demo_config.scenarios)
    print_summary(configs, advisories)

    if log_config.save_log:
        save_configurations_to_txt(configs, log_config.log_filename, advisories)
    if log_config.plot_weights:
        plot_total_weights(configs, log_config.plot_filename)

    if demo_config.pause_on_exit:
        input()


if __name__ == "__main__":
    main()
