"""Root-level pytest fixtures for the zipout test suite.

Provides shared configuration fixtures following the Pydantic-based
architecture. Tests use these fixtures instead of creating raw dict configs.
"""

import pytest

from zipout.schemas import ParamConfig, UserConfig, resolve_config
from tests.helpers.fake_snapshots import write_snapshot_series


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Examples
    --------
    >>> def test_cached_reads(make_config):
    ...     config = make_config(read_strategy="cache")
    ...     assert config.aggregator.read_strategy == "cache"
    """
    def _make(**user_overrides):
        if user_overrides:
            return resolve_config(param_config, UserConfig(**user_overrides), None)
        return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Snapshot Fixtures
# =============================================================================

@pytest.fixture
def snapshot_dir(tmp_path):
    """Empty folder for snapshot files."""
    d = tmp_path / "outputs"
    d.mkdir()
    return d


@pytest.fixture
def snapshot_series(snapshot_dir):
    """Factory writing a snapshot series into snapshot_dir."""
    def _write(**kwargs):
        return write_snapshot_series(snapshot_dir, **kwargs)

    return _write
