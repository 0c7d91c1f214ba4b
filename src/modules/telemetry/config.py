from enum import Enum
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ValidationError, model_validator

from src.modules.telemetry.errors import ConfigError

class LoggerType(str, Enum):
    COLORFUL = "colorful"
    PLAIN = "plain"
    JSON = "json"

class LoggingConfig(BaseModel):
    output: LoggerType = LoggerType.PLAIN
    level: str = "INFO"
    file: Optional[str] = None  # Log file path; stdout when unset

class MetricsCollectorType(str, Enum):
    JSON = "json"
    PROMETHEUS = "prometheus"
    CONSOLE = "console"

class MetricsConfig(BaseModel):
    enabled: bool = False
    collector: MetricsCollectorType = MetricsCollectorType.JSON
    # JSON collector specific config
    output_file: Optional[str] = None
    # Prometheus collector specific config
    push_gateway: Optional[str] = None
    job_name: str = "sockstat"
    # Console collector specific config
    verbosity: str = "info"  # debug, info, warning

    @model_validator(mode='after')
    def validate_collector_config(self) -> 'MetricsConfig':
        """Validate collector-specific configuration."""
        if not self.enabled:
            return self
            
        if self.collector == MetricsCollectorType.JSON and not self.output_file:
            raise ValueError("output_file is required when using JSON collector")
            
        if self.collector == MetricsCollectorType.PROMETHEUS and not self.push_gateway:
            raise ValueError("push_gateway is required when using Prometheus collector")
            
        return self

class TelemetryConfig(BaseModel):
    log_sessions: bool = True  # Write a [STAT] line per session event
    logging: LoggingConfig = LoggingConfig()
    metrics: MetricsConfig = MetricsConfig()  # Default to disabled


def load_telemetry_config(path: Union[str, Path]) -> TelemetryConfig:
    """Load telemetry configuration from a YAML file.

    An empty file yields the defaults.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(str(path), f"cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(str(path), f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(str(path), "top-level value must be a mapping")

    try:
        return TelemetryConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(str(path), str(e)) from e
