"""Configuration management for running the downstream tools."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field


class ToolConfig(BaseModel):
    """Configuration for one downstream tool."""

    model_config = ConfigDict(extra="forbid")

    executable: str
    extra_args: list[str] = Field(
        default_factory=list,
        description="Arguments placed before the geometry flags",
    )


class Config(BaseModel):
    """Main configuration for geometry conversion."""

    model_config = ConfigDict(extra="forbid")

    piscem: ToolConfig = Field(default_factory=lambda: ToolConfig(executable="piscem"))
    salmon: ToolConfig = Field(default_factory=lambda: ToolConfig(executable="salmon"))
    output_format: Literal["text", "json"] = "text"

    def tool(self, name: str) -> ToolConfig:
        """Return the configuration of the tool called ``name``."""
        if name not in ("piscem", "salmon"):
            raise ValueError(f"Unknown tool: {name}")
        return getattr(self, name)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
