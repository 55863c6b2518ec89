"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from app.main import app
from app.calculations.amortization import amortize
from app.calculations.rent import project_rent


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def standard_mortgage():
    """800k purchase, 20% down, 5% rate, 25 years, rounded to cents."""
    return amortize(800000, 20, 5.0, 25)


@pytest.fixture
def ten_year_rent():
    """Ten years of rent starting in 2024 at 1000/month, 10% increases."""
    return project_rent(1000, 10, 10, start_year=2024)
