"""Pydantic configuration schemas for the zipout pipeline.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
CLIConfig : class
    Command-line operational overrides
"""

from zipout.schemas.resolve import resolve_config
from zipout.schemas.internal import InternalConfig
from zipout.schemas.param import ParamConfig
from zipout.schemas.user import UserConfig
from zipout.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
