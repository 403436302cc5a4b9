"""
HyperSynergy — Startup Sequence

Host applications call bootstrap() once at startup:

  1. Load configuration (YAML + environment)
  2. Set up structured logging
  3. Initialise the process-wide coordinator
  4. Initialise the process-wide reinforcement layer, bound to it
  5. Register the hub module auto-healing attaches to
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import structlog

from hypersynergy.config import SynergyConfig, load_config
from hypersynergy.systems.coordinator import HypergraphCoordinator, init_coordinator
from hypersynergy.systems.reinforcement import ConfigReinforcement, init_reinforcement
from hypersynergy.telemetry.logging import setup_logging

logger = structlog.get_logger("hypersynergy.bootstrap")


@dataclass(frozen=True)
class SynergyRuntime:
    config: SynergyConfig
    coordinator: HypergraphCoordinator
    reinforcement: ConfigReinforcement


def bootstrap(config_path: str | Path | None = None) -> SynergyRuntime:
    """Build and install the process-wide singletons. Succeeds at most once."""
    if config_path is None:
        config_path = os.environ.get("HYPERSYNERGY_CONFIG_PATH", "config/default.yaml")
    config = load_config(config_path)

    setup_logging(config.logging, instance_id=config.instance_id)
    logger.info(
        "hypersynergy_starting",
        instance_id=config.instance_id,
        config_path=str(config_path),
    )

    coordinator = init_coordinator(config.coordinator)
    reinforcement = init_reinforcement(config.reinforcement, coordinator=coordinator)
    coordinator.register_module(config.reinforcement.hub_module)

    logger.info(
        "hypersynergy_ready",
        hub_module=config.reinforcement.hub_module,
        auto_healing=config.reinforcement.enable_auto_healing,
    )
    return SynergyRuntime(config=config, coordinator=coordinator, reinforcement=reinforcement)
