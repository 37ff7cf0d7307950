"""
Pydantic configuration schemas for logfacade.

Configuration is optional. A factory built in code needs none of this; the
schemas exist so an application can declare its providers in YAML.

Usage:
    config = LoggingConfig.from_yaml("logging.yaml")
    factory = LoggerFactory()
    factory.configure(config)

Example YAML:
    default_provider: console
    providers:
      console:
        type: console
      audit:
        type: file
        path: logs/audit.log
        formatter: leveled
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, model_validator


class ProviderConfig(BaseModel):
    type: Literal["console", "file"] = "console"
    stream: Literal["stdout", "stderr"] = "stdout"  # console
    path: Optional[str] = None                      # file
    formatter: Literal["plain", "leveled"] = "plain"

    @model_validator(mode="after")
    def validate_file_path(self) -> "ProviderConfig":
        if self.type == "file" and not self.path:
            raise ValueError("File provider requires 'path'")
        return self


class LoggingConfig(BaseModel):
    """Providers to register, keyed by the name they are registered under."""
    default_provider: Optional[str] = None
    providers: dict[str, ProviderConfig] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_default_provider(self) -> "LoggingConfig":
        if self.default_provider is not None and self.default_provider not in self.providers:
            raise ValueError(
                f"default_provider '{self.default_provider}' is not a configured provider"
            )
        return self

    @classmethod
    def from_yaml(cls, path: str | Path) -> "LoggingConfig":
        """Load and validate from a YAML file."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.from_yaml_string(raw)

    @classmethod
    def from_yaml_string(cls, yaml_string: str) -> "LoggingConfig":
        """Load and validate from a YAML string. An empty document is an empty config."""
        data = yaml.safe_load(yaml_string) or {}
        return cls.model_validate(data)

    @classmethod
    def from_dict(cls, data: dict) -> "LoggingConfig":
        """Load and validate from a dict."""
        return cls.model_validate(data)
