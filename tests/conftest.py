"""Pytest fixtures for buildsim tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from buildsim.core.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from BUILDSIM_* variables of the calling shell."""
    for key in list(os.environ):
        if key.startswith("BUILDSIM_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_building_data():
    """Sample building attributes for testing."""
    return {
        "height": 35.0,
        "cost": 90000.0,
        "efficiency": 55.0,
        "aesthetic": 65.0,
    }


@pytest.fixture
def sample_plan_specs():
    """One improvement of every kind, in dictionary form."""
    return [
        {"kind": "solar_panels", "area": 30},
        {"kind": "facade_renovation", "level": 3},
        {"kind": "insulation_upgrade", "level": 2},
        {"kind": "window_replacement", "count": 10},
        {"kind": "green_roof", "area": 25.0},
    ]
