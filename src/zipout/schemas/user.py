"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs with aliases for the naming used by
simulation output parameter files (e.g., OUTPUT_PATH -> output_path,
ZIP_FORMAT -> zip_format).

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from zipout.schemas.base import ZipoutBaseModel, normalize_format_tag


class UserOutputConfig(ZipoutBaseModel):
    """User-facing output config."""
    output_path: Optional[str] = None
    output_format: Optional[str] = None
    prefix: Optional[str] = None
    zip_format: Optional[str] = None
    archive_name: Optional[str] = None

    @field_validator("output_format", "zip_format", mode="before")
    @classmethod
    def normalize_tags(cls, v):
        return normalize_format_tag(v)


class UserAggregatorConfig(ZipoutBaseModel):
    """User-facing aggregator config."""
    coord_names: Optional[dict[str, str]] = None
    read_strategy: Optional[str] = None
    order: Optional[str] = None

    @field_validator("read_strategy", "order", mode="before")
    @classmethod
    def normalize_choice(cls, v):
        if isinstance(v, str):
            return v.lower().strip()
        return v


class UserArchiveConfig(ZipoutBaseModel):
    """User-facing archive config."""
    compression: Optional[str] = None
    complevel: Optional[int] = None
    x_attrs: Optional[dict[str, str]] = None
    y_attrs: Optional[dict[str, str]] = None
    time_attrs: Optional[dict[str, str]] = None


class UserConfig(ZipoutBaseModel):
    """User-facing configuration schema.

    Usage
    -----
        user_cfg = UserConfig(
            output_path="/data/run01",
            output_format="mat",
            prefix="outfile",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Simulation output settings (flat aliases)
    output_path: Optional[str] = Field(None, alias="OUTPUT_PATH")
    output_format: Optional[str] = Field(None, alias="OUTPUT_FORMAT")
    prefix: Optional[str] = Field(None, alias="PREFIX")
    zip_format: Optional[str] = Field(None, alias="ZIP_FORMAT")
    archive_name: Optional[str] = Field(None, alias="ARCHIVE_NAME")

    # Aggregation settings (flat aliases)
    read_strategy: Optional[Literal["reopen", "cache"]] = Field(None, alias="READ_STRATEGY")
    order: Optional[Literal["name", "time"]] = Field(None, alias="ORDER")

    # Archive settings (flat aliases)
    compression: Optional[Literal["zlib", "none"]] = Field(None, alias="COMPRESSION")
    complevel: Optional[int] = Field(None, alias="COMPLEVEL")

    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        None, alias="LOG_LEVEL"
    )
    log_file: Optional[str] = Field(None, alias="LOG_FILE")

    # Nested overrides (advanced users)
    output: Optional[UserOutputConfig] = None
    aggregator: Optional[UserAggregatorConfig] = None
    archive: Optional[UserArchiveConfig] = None

    model_config = ZipoutBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("output_format", "zip_format", mode="before")
    @classmethod
    def normalize_tags(cls, v):
        """Accept '.MAT', 'NC', etc."""
        return normalize_format_tag(v)

    @field_validator("read_strategy", "order", "compression", mode="before")
    @classmethod
    def normalize_choices(cls, v):
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        # Output section
        output = {}
        for key in ("output_path", "output_format", "prefix", "zip_format", "archive_name"):
            value = getattr(self, key)
            if value is not None:
                output[key] = value

        # Merge with explicit output config
        if self.output is not None:
            output.update(self.output.model_dump(exclude_none=True))

        if output:
            overrides["output"] = output

        # Aggregator section
        aggregator = {}
        if self.read_strategy is not None:
            aggregator["read_strategy"] = self.read_strategy
        if self.order is not None:
            aggregator["order"] = self.order

        if self.aggregator is not None:
            aggregator.update(self.aggregator.model_dump(exclude_none=True))

        if aggregator:
            overrides["aggregator"] = aggregator

        # Archive section
        archive = {}
        if self.compression is not None:
            archive["compression"] = self.compression
        if self.complevel is not None:
            archive["complevel"] = self.complevel

        if self.archive is not None:
            archive.update(self.archive.model_dump(exclude_none=True))

        if archive:
            overrides["archive"] = archive

        # Logging section
        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level
        if self.log_file is not None:
            logging_cfg["log_file"] = self.log_file

        if logging_cfg:
            overrides["logging"] = logging_cfg

        return overrides
