"""Client configuration - where the statsd daemon listens"""
import logging
from pathlib import Path
from typing import Optional, Tuple
from pydantic import Field, validator
from pydantic_settings import BaseSettings


class StatsdConfig(BaseSettings):
    """Statsd client configuration, read from STATSD_* environment variables"""

    # Destination
    host: str = Field(default="localhost", min_length=1, description="statsd daemon host")
    port: int = Field(default=8125, ge=1, le=65535, description="statsd daemon UDP port")

    # Metric naming
    prefix: str = Field(default="", description="Prefix joined to every metric name with a dot")

    # Sampling
    default_sample_rate: float = Field(
        default=1.0, gt=0, le=1,
        description="Sample rate used when a call does not pass one"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file")

    class Config:
        env_prefix = "STATSD_"
        case_sensitive = False

    @validator('prefix')
    def strip_prefix_dots(cls, v):
        return v.strip().strip('.')

    @validator('log_level')
    def validate_log_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @validator('log_file')
    def ensure_log_directory(cls, v):
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    @property
    def address(self) -> Tuple[str, int]:
        """Get the (host, port) pair of the daemon"""
        return self.host, self.port

    def qualify(self, name: str) -> str:
        """Get the metric name as sent on the wire"""
        if self.prefix:
            return f"{self.prefix}.{name}"
        return name


def default_config() -> StatsdConfig:
    """Get the process-wide default configuration (localhost:8125 unless overridden by env)"""
    return StatsdConfig()
