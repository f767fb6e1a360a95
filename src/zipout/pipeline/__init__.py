"""Pipeline modules.

- aggregator: Stack snapshot variables along time
- writer: NetCDF archive writer
- orchestrator: Discovery-to-archive runner
"""

from zipout.pipeline.aggregator import VariableAggregator
from zipout.pipeline.writer import ArchiveWriter
from zipout.pipeline.orchestrator import ZipOrchestrator, make_ncfile, zip_output

__all__ = [
    "VariableAggregator",
    "ArchiveWriter",
    "ZipOrchestrator",
    "make_ncfile",
    "zip_output",
]
