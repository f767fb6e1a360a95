"""ParamConfig: Expert defaults for the zipout pipeline.

This module defines the complete default configuration. ALL pipeline
parameters must have defaults here. No runtime code should define fallback
values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from zipout.schemas.base import ZipoutBaseModel, normalize_format_tag


# =============================================================================
# Nested Configuration Models
# =============================================================================

class OutputConfig(ZipoutBaseModel):
    """Simulation output settings: where snapshots live and how to zip them."""
    output_path: Optional[str] = None
    output_format: Literal["mat", "jld2"] = "jld2"
    prefix: str = ""
    zip_format: Literal["nc", "none"] = "nc"
    archive_name: Optional[str] = Field(
        None, description="Archive file name; defaults to '<prefix>.nc'"
    )

    @field_validator("output_format", "zip_format", mode="before")
    @classmethod
    def normalize_tags(cls, v):
        """Accept '.MAT', 'Jld2', etc."""
        return normalize_format_tag(v)


class CoordNamesConfig(ZipoutBaseModel):
    """Names of the coordinate and time keys inside each snapshot."""
    x: str = "x"
    y: str = "y"
    time: str = "t"


class AggregatorConfig(ZipoutBaseModel):
    """Variable aggregation configuration."""
    coord_names: CoordNamesConfig = Field(default_factory=CoordNamesConfig)
    read_strategy: Literal["reopen", "cache"] = "reopen"
    order: Literal["name", "time"] = "name"


class CoordinateAttributes(ZipoutBaseModel):
    """Fixed attribute record attached to a coordinate variable."""
    longname: str
    units: str


class ArchiveConfig(ZipoutBaseModel):
    """NetCDF archive configuration."""
    compression: Literal["zlib", "none"] = "zlib"
    complevel: int = Field(4, ge=1, le=9)
    x_attrs: CoordinateAttributes = Field(
        default_factory=lambda: CoordinateAttributes(
            longname="x co-ordinates of ice grid points (h grid)", units="m"
        )
    )
    y_attrs: CoordinateAttributes = Field(
        default_factory=lambda: CoordinateAttributes(
            longname="y co-ordinates of ice grid points (h grid)", units="m"
        )
    )
    time_attrs: CoordinateAttributes = Field(
        default_factory=lambda: CoordinateAttributes(longname="Time", units="years")
    )


class LoggingConfig(ZipoutBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = None


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(ZipoutBaseModel):
    """Complete expert configuration with all defaults.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    output: OutputConfig = Field(default_factory=OutputConfig)
    aggregator: AggregatorConfig = Field(default_factory=AggregatorConfig)
    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
