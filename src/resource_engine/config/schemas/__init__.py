"""Configuration schemas."""

from resource_engine.config.schemas.engine_schema import (
    EngineConfig,
    LoggingConfig,
    PollingConfig,
    load_engine_config,
)

__all__: list[str] = ["EngineConfig", "LoggingConfig", "PollingConfig", "load_engine_config"]
