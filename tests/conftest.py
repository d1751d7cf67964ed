"""Shared fixtures."""

import pytest

import cachematrix.config as config_module
from cachematrix import SolveConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test with default solver settings, whatever the environment says."""
    previous = config_module._config
    set_config(SolveConfig())
    yield
    set_config(previous)
