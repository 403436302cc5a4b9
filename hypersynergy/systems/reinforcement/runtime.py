"""
HyperSynergy — Process-wide Configuration Reinforcement

Same init-once / read-many contract as the coordinator. The async
convenience functions serialise on the instance's own lock.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from hypersynergy.config import ReinforcementConfig
from hypersynergy.systems.coordinator.errors import (
    AlreadyInitialisedError,
    NotInitialisedError,
)
from hypersynergy.systems.reinforcement.service import ConfigReinforcement

if TYPE_CHECKING:
    from hypersynergy.systems.coordinator.service import HypergraphCoordinator

# Global instance (initialised by the host application)
_reinforcement: ConfigReinforcement | None = None
_init_lock = threading.Lock()


def init_reinforcement(
    config: ReinforcementConfig | None = None,
    coordinator: HypergraphCoordinator | None = None,
) -> ConfigReinforcement:
    """Initialise the global configuration reinforcement. Succeeds at most once."""
    global _reinforcement
    with _init_lock:
        if _reinforcement is not None:
            raise AlreadyInitialisedError("Configuration reinforcement already initialised")
        _reinforcement = ConfigReinforcement(config, coordinator=coordinator)
        return _reinforcement


def get_reinforcement() -> ConfigReinforcement:
    """Get the global configuration reinforcement."""
    reinforcement = _reinforcement
    if reinforcement is None:
        raise NotInitialisedError("Configuration reinforcement not initialised")
    return reinforcement


async def validate_configurations(global_config: Any = None) -> list[str]:
    return await get_reinforcement().validate_configurations(global_config)


async def apply_auto_healing() -> list[str]:
    return await get_reinforcement().apply_auto_healing()
