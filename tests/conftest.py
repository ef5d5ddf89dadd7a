"""Shared test fixtures for Terrain."""

import sys
import os
import pytest

# Add repo root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from terrain.reference_data import get_reference_data
from terrain.schemas import MarketSizingInput


@pytest.fixture
def reference():
    """The bundled reference dataset."""
    return get_reference_data()


@pytest.fixture
def make_input():
    """Factory for MarketSizingInput with the NSCLC phase 2 defaults."""
    def _make(**overrides):
        fields = {
            "indication": "Non-Small Cell Lung Cancer",
            "geography": ["US"],
            "development_stage": "phase2",
            "pricing_assumption": "base",
            "launch_year": 2028,
        }
        fields.update(overrides)
        return MarketSizingInput(**fields)
    return _make


@pytest.fixture
def nsclc(reference):
    """The NSCLC indication record."""
    return reference.index.by_name["non small cell lung cancer"]
