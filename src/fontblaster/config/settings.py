"""Configuration settings for FontBlaster."""

from pathlib import Path

from pydantic import BaseModel, Field


class DiscoveryConfig(BaseModel):
    """Configuration for bundle traversal."""

    bundle_marker: str = Field(
        default=".bundle",
        min_length=1,
        description="Substring identifying nested bundle directories",
    )
    max_depth: int | None = Field(
        default=None,
        ge=0,
        description="Deepest nested bundle level to descend into (None = unbounded)",
    )
    detect_cycles: bool = Field(
        default=True,
        description="Skip bundles whose resolved path was already visited",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    debug_enabled: bool = Field(
        default=False,
        description="Emit diagnostic messages",
    )
    tag: str = Field(
        default="FontBlaster",
        description="Prefix tag for diagnostic messages",
    )
    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="DEBUG",
        description="Log level for configured handlers",
    )


class BlasterSettings(BaseModel):
    """Main library settings."""

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BlasterSettings:
    """Get default library settings."""
    return BlasterSettings()
