"""Engine configuration schema."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from resource_engine.config.settings import settings


class PollingConfig(BaseModel):
    """Backoff parameters for asynchronous operation polling."""

    model_config = ConfigDict(frozen=True)

    initial_interval: float = Field(2.0, gt=0, description="First wait between polls in seconds")
    max_interval: float = Field(30.0, gt=0, description="Upper bound of a single wait in seconds")
    timeout: float = Field(300.0, gt=0, description="Overall polling deadline in seconds")
    multiplier: float = Field(2.0, ge=1, description="Growth factor applied after each wait")

    @model_validator(mode="after")
    def validate_intervals(self) -> "PollingConfig":
        if self.initial_interval > self.max_interval:
            raise ValueError("initial_interval must not exceed max_interval")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Logging level")
    destination: str = Field("stdout", description="Where to send logs: file, stdout or both")
    format: str = Field("console", description="Rendering: console or json")
    log_dir: str = Field("./logs", description="Directory for the log file")
    log_filename: str = Field("resource_engine.log", description="Log file name")


class EngineConfig(BaseModel):
    """Top-level engine configuration."""

    base_url: str = Field("", description="Base URL prepended to every API path")
    cloud_project_id: Optional[str] = Field(
        None, description="Project injected as serviceName into target configuration"
    )
    request_timeout: float = Field(30.0, gt=0, description="Per-request timeout in seconds")
    polling: PollingConfig = Field(
        default_factory=PollingConfig, description="Asynchronous operation polling"
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging")


def _normalize_keys(value: Any) -> Any:
    """Lower-case mapping keys, Dynaconf upper-cases keys read from the environment."""
    if hasattr(value, "to_dict"):
        value = value.to_dict()
    if isinstance(value, dict):
        return {str(k).lower(): _normalize_keys(v) for k, v in value.items()}
    return value


def load_engine_config(overrides: Optional[dict[str, Any]] = None) -> EngineConfig:
    """
    Build the engine configuration from Dynaconf settings.

    Args:
        overrides: Values taking precedence over settings

    Returns:
        Validated engine configuration
    """
    data: dict[str, Any] = {}
    for key in EngineConfig.model_fields:
        value = settings.get(key.upper())
        if value is not None:
            data[key] = _normalize_keys(value)
    if overrides:
        data.update(overrides)
    return EngineConfig.model_validate(data)
