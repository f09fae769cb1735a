"""
Pytest fixtures for Medicaid reform dashboard tests.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from medicaid_model.calculator import PolicyImpactCalculator
from medicaid_model.policies import Scenario, baseline_scenario


# =============================================================================
# SCENARIO FIXTURES
# =============================================================================

@pytest.fixture
def california_baseline():
    """California with every lever at baseline."""
    return baseline_scenario("California")


@pytest.fixture
def california_levers():
    """California, all thresholds 0, work requirements on, 1pp income tax."""
    scenario = baseline_scenario("California")
    for group in ("children", "parents", "adults", "elderly", "disabled"):
        scenario = scenario.with_threshold(group, 0)
    return scenario.with_work(enabled=True, hours_per_week=30).with_revenue(income_tax_increase=1.0)


@pytest.fixture
def full_package():
    """Texas with every lever in use."""
    return Scenario.from_record(
        {
            "state": "Texas",
            "eligibility_adults": 100,
            "eligibility_parents": 90,
            "work_enabled": True,
            "snap_enabled": True,
            "snap_share_percent": 20,
            "income_tax_increase": 1.5,
            "property_tax_increase": 0.5,
            "sin_tax_increase": 40,
        }
    )


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def calculator():
    """Policy impact calculator."""
    return PolicyImpactCalculator()
