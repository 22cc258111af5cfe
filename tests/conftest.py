"""
Pytest Configuration and Fixtures

Shared fixtures for the mWHO classification tests.
"""
import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mwho.core.clinical import ClassificationEngine, DiseaseGroup


@pytest.fixture
def engine() -> ClassificationEngine:
    """A classification engine (stateless, cheap to build)."""
    return ClassificationEngine()


@pytest.fixture(params=list(DiseaseGroup), ids=lambda g: g.name.lower())
def group(request) -> DiseaseGroup:
    """Each of the seven disease groups in turn."""
    return request.param
