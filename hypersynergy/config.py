"""
HyperSynergy — Configuration System

All configuration is Pydantic-validated and loaded from:
1. default.yaml (defaults)
2. Environment variables (overrides)

Every tunable parameter of the coordinator and the reinforcement layer
lives here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# ─── Sub-configs ──────────────────────────────────────────────────


class CoordinatorConfig(BaseModel):
    # Audit classification thresholds
    critical_error_threshold: int = Field(10, ge=0)  # strictly greater => critical
    warning_synergy_threshold: float = Field(0.5, ge=0.0, le=1.0)
    # Extra probes (do not change status)
    stale_activity_seconds: float = Field(300.0, ge=0.0)
    cognitive_load_threshold: float = Field(0.9, ge=0.0)
    # Smoothing
    response_time_alpha: float = Field(0.1, gt=0.0, le=1.0)
    cognitive_load_decay: float = Field(0.9, ge=0.0, lt=1.0)
    # Audit history ring: drop the oldest `trim` once `limit` is exceeded
    audit_history_limit: int = Field(1000, ge=1)
    audit_history_trim: int = Field(500, ge=1)

    @model_validator(mode="after")
    def _trim_within_limit(self) -> CoordinatorConfig:
        if self.audit_history_trim > self.audit_history_limit:
            raise ValueError("audit_history_trim must not exceed audit_history_limit")
        return self


class ReinforcementConfig(BaseModel):
    max_module_errors: int = Field(20, ge=0)
    synergy_threshold: float = Field(0.6, ge=0.0, le=1.0)
    audit_interval_seconds: float = Field(300.0, gt=0.0)
    enable_auto_healing: bool = True
    # Stored for tuning, not applied to edges yet
    connection_strength_decay: float = Field(0.95, ge=0.0, le=1.0)
    # Auto-heal attaches disconnected modules to this hub
    hub_module: str = "config"
    heal_connection_strength: float = Field(0.5, ge=0.0, le=1.0)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "console"  # "console" | "json"


# ─── Root Configuration ──────────────────────────────────────────


class SynergyConfig(BaseSettings):
    """
    Root configuration. Loads from YAML, overridable by env vars.
    """

    model_config = SettingsConfigDict(
        env_prefix="HYPERSYNERGY_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Instance identity
    instance_id: str = "hypersynergy-default"

    # Sub-configurations
    coordinator: CoordinatorConfig = Field(default_factory=CoordinatorConfig)
    reinforcement: ReinforcementConfig = Field(default_factory=ReinforcementConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment overrides whatever the YAML file passed in
        return env_settings, init_settings, file_secret_settings


def load_config(config_path: str | Path | None = None) -> SynergyConfig:
    """
    Load configuration from YAML file, then apply environment variable overrides.
    """
    raw: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}

    return SynergyConfig(**raw)
