"""
HyperSynergy — Configuration Reinforcement

Scheduled audits, recommendation lines and auto-healing on top of the
hypergraph coordinator.
"""

from hypersynergy.systems.reinforcement.runtime import (
    apply_auto_healing,
    get_reinforcement,
    init_reinforcement,
    validate_configurations,
)
from hypersynergy.systems.reinforcement.service import ConfigReinforcement

__all__ = [
    "ConfigReinforcement",
    "init_reinforcement",
    "get_reinforcement",
    "validate_configurations",
    "apply_auto_healing",
]
