"""
Tests for settings validation.
"""

import pytest

from route_cache.config import Settings


def test_defaults():
    """Test the default TTL is accepted."""
    assert Settings(cache_default_ttl=60).cache_default_ttl == 60


@pytest.mark.parametrize("ttl", [0, -5])
def test_default_ttl_must_be_positive(ttl):
    """Test a default TTL below one second is rejected."""
    with pytest.raises(ValueError, match="CACHE_DEFAULT_TTL"):
        Settings(cache_default_ttl=ttl)


def test_unknown_log_level():
    """Test an unknown log level is rejected."""
    with pytest.raises(ValueError, match="CACHE_LOG_LEVEL"):
        Settings(cache_log_level="verbose")
