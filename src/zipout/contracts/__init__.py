"""Pipeline contracts and error types.

Contracts fail immediately and loudly when pipeline stages don't produce
their promised invariants.

Key principle:
- Pydantic validates config correctness
- Contracts validate pipeline correctness
- Typed errors describe bad input files
"""

from zipout.contracts.failure import (
    ZipoutError,
    ConfigurationError,
    UnsupportedFormatError,
    MissingKeyError,
    ShapeMismatchError,
    ContractViolation,
)
from zipout.contracts.base import require
from zipout.contracts.axes import assert_axes, assert_time_axis
from zipout.contracts.fields import assert_fields

__all__ = [
    "ZipoutError",
    "ConfigurationError",
    "UnsupportedFormatError",
    "MissingKeyError",
    "ShapeMismatchError",
    "ContractViolation",
    "require",
    "assert_axes",
    "assert_time_axis",
    "assert_fields",
]
