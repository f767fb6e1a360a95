"""Tests for CLIConfig schema and conversion to internal overrides."""

import pytest
from pydantic import ValidationError

from zipout.schemas.cli import CLIConfig


def test_cli_to_internal_overrides_empty():
    """Empty CLI config produces no overrides."""
    assert CLIConfig().to_internal_overrides() == {}


def test_cli_output_overrides():
    """Output flags map to the output section."""
    cli = CLIConfig(output_path="/run", output_format="mat", prefix="out", archive_name="a.nc")
    overrides = cli.to_internal_overrides()

    assert overrides == {"output": {"output_path": "/run", "output_format": "mat",
                                    "prefix": "out", "archive_name": "a.nc"}}


def test_cli_aggregator_and_logging_overrides():
    """Order, read strategy and logging flags map to their sections."""
    cli = CLIConfig(order="time", read_strategy="cache", log_level="DEBUG", log_file="z.log")
    overrides = cli.to_internal_overrides()

    assert overrides["aggregator"] == {"order": "time", "read_strategy": "cache"}
    assert overrides["logging"] == {"level": "DEBUG", "log_file": "z.log"}


def test_cli_empty_prefix_is_an_override():
    """An explicit empty prefix still overrides."""
    assert CLIConfig(prefix="").to_internal_overrides() == {"output": {"prefix": ""}}


def test_cli_normalizes_format():
    """Format tags are lowercased and lose their dot."""
    assert CLIConfig(output_format=".JLD2").output_format == "jld2"


def test_cli_rejects_unknown_field():
    """Unknown CLI fields are rejected."""
    with pytest.raises(ValidationError):
        CLIConfig(nc_name="all.nc")
