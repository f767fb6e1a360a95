"""`zipout` - aggregate per-timestep simulation snapshots into one NetCDF archive.

Subpackages:
- snapshot: Format resolution, snapshot reading, file discovery, axes
- pipeline: Variable aggregation, archive writing, orchestration
- schemas: Pydantic configuration layers
- contracts: Stage invariants and error types
"""

__version__ = "0.1.0"
