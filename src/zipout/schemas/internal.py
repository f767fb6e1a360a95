"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and immutable.
"""

from typing import Literal, Optional
from pydantic import ConfigDict, Field
from zipout.schemas.base import ZipoutBaseModel


class InternalOutputConfig(ZipoutBaseModel):
    """Runtime output configuration.

    Note: output_path may be None for library use where run() receives
    explicit paths; zip_output() requires it.
    """
    output_path: Optional[str]
    output_format: Literal["mat", "jld2"]
    prefix: str
    zip_format: Literal["nc", "none"]
    archive_name: Optional[str]


class InternalCoordNamesConfig(ZipoutBaseModel):
    """Runtime coordinate key names."""
    x: str
    y: str
    time: str


class InternalAggregatorConfig(ZipoutBaseModel):
    """Runtime aggregation configuration."""
    coord_names: InternalCoordNamesConfig
    read_strategy: Literal["reopen", "cache"]
    order: Literal["name", "time"]


class InternalCoordinateAttributes(ZipoutBaseModel):
    """Runtime coordinate attribute record."""
    longname: str
    units: str

    def as_dict(self) -> dict:
        return {"longname": self.longname, "units": self.units}


class InternalArchiveConfig(ZipoutBaseModel):
    """Runtime archive configuration."""
    compression: Literal["zlib", "none"]
    complevel: int = Field(ge=1, le=9)
    x_attrs: InternalCoordinateAttributes
    y_attrs: InternalCoordinateAttributes
    time_attrs: InternalCoordinateAttributes


class InternalLoggingConfig(ZipoutBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_file: Optional[str]


class InternalConfig(ZipoutBaseModel):
    """Authoritative runtime configuration.

    Usage
    -----
    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.coord_names = config.aggregator.coord_names  # NOT .get()

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation in runtime code
    """

    output: InternalOutputConfig
    aggregator: InternalAggregatorConfig
    archive: InternalArchiveConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
