"""Tests for the process-wide reinforcement instance."""

from __future__ import annotations

import pytest

from hypersynergy.config import ReinforcementConfig
from hypersynergy.systems.coordinator import (
    AlreadyInitialisedError,
    ModuleStatus,
    NotInitialisedError,
    audit_core_modules,
    establish_connection,
    init_coordinator,
    register_module,
)
from hypersynergy.systems.reinforcement import (
    ConfigReinforcement,
    apply_auto_healing,
    get_reinforcement,
    init_reinforcement,
    validate_configurations,
)


class TestLifecycle:
    def test_get_before_init_fails(self):
        with pytest.raises(NotInitialisedError, match="Configuration reinforcement not initialised"):
            get_reinforcement()

    @pytest.mark.asyncio
    async def test_convenience_before_init_fails(self):
        with pytest.raises(NotInitialisedError):
            await apply_auto_healing()

    def test_init_returns_cached_handle(self):
        reinforcement = init_reinforcement(ReinforcementConfig(enable_auto_healing=False))
        assert isinstance(reinforcement, ConfigReinforcement)
        assert get_reinforcement() is reinforcement
        assert reinforcement.config.enable_auto_healing is False

    def test_second_init_fails(self):
        init_reinforcement()
        with pytest.raises(AlreadyInitialisedError, match="already initialised"):
            init_reinforcement()

    def test_defaults(self):
        config = init_reinforcement().config
        assert config.max_module_errors == 20
        assert config.synergy_threshold == 0.6
        assert config.audit_interval_seconds == 300
        assert config.enable_auto_healing is True
        assert config.connection_strength_decay == 0.95


class TestEndToEnd:
    @pytest.mark.asyncio
    async def test_auto_heal_through_globals(self):
        init_coordinator()
        init_reinforcement()
        for name in ("Y", "Z", "config"):
            register_module(name)
        establish_connection("Y", "Z", 0.9)
        establish_connection("config", "Y", 0.9)
        register_module("W")

        actions = await apply_auto_healing()
        assert actions == ["Reconnected disconnected module 'W'"]

        statuses = {a.module_name: a.status for a in audit_core_modules()}
        assert statuses["W"] != ModuleStatus.DISCONNECTED

    @pytest.mark.asyncio
    async def test_validate_through_globals(self):
        coordinator = init_coordinator()
        init_reinforcement()
        register_module("config")

        lines = await validate_configurations({"model": "any"})
        assert "Configuration paths validated successfully" in lines
        assert "Connection health assessment completed" in lines
        assert coordinator.get_module("config").message_count == 2
