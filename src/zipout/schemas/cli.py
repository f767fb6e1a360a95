"""CLIConfig: Command-line operational overrides.

Minimal configuration for parameters that commonly change between runs:
snapshot folder, format, prefix, archive name, verbosity.
"""

from typing import Literal, Optional
from pydantic import field_validator
from zipout.schemas.base import ZipoutBaseModel, normalize_format_tag


class CLIConfig(ZipoutBaseModel):
    """Command-line configuration overrides.

    Highest priority in config resolution.

    Usage
    -----
        cli_cfg = CLIConfig(output_path="/scratch/run01", prefix="outfile")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    output_path: Optional[str] = None
    output_format: Optional[Literal["mat", "jld2"]] = None
    prefix: Optional[str] = None
    zip_format: Optional[Literal["nc", "none"]] = None
    archive_name: Optional[str] = None
    order: Optional[Literal["name", "time"]] = None
    read_strategy: Optional[Literal["reopen", "cache"]] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    log_file: Optional[str] = None

    @field_validator("output_format", "zip_format", mode="before")
    @classmethod
    def normalize_tags(cls, v):
        return normalize_format_tag(v)

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        output = {}
        for key in ("output_path", "output_format", "prefix", "zip_format", "archive_name"):
            value = getattr(self, key)
            if value is not None:
                output[key] = value
        if output:
            overrides["output"] = output

        aggregator = {}
        if self.order is not None:
            aggregator["order"] = self.order
        if self.read_strategy is not None:
            aggregator["read_strategy"] = self.read_strategy
        if aggregator:
            overrides["aggregator"] = aggregator

        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level
        if self.log_file is not None:
            logging_cfg["log_file"] = self.log_file
        if logging_cfg:
            overrides["logging"] = logging_cfg

        return overrides
