# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations and data for models, scoring and APIs

SEED DATA ID REFERENCE:
- Organization: org-1
- Departments:  dept-1 (Tecnología) .. dept-6 (Gestión de Proyectos)
- Templates:    template-1 (Evaluación Técnica), template-2 (Evaluación de Ventas)
- Employees:    emp-1 .. emp-12 (emp-1..emp-4 in Tecnología, emp-5..emp-8 in Ventas)
- Applicants:   appl-1 .. appl-3
"""

import os

# The suite always runs against the in-memory store
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["APP_ENV"] = "development"
os.environ["SEED_ON_STARTUP"] = "true"


import pytest
from fastapi.testclient import TestClient

from talentflow.core.dependencies import get_backend
from talentflow.main import app
from talentflow.models.criteria import Characteristic, Factor
from talentflow.models.evaluation import EvaluationScore
from talentflow.repositories.backends import InMemoryBackend
from talentflow.seed import seed_store


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_store():
    """Every test starts from freshly seeded shared storage."""
    backend = get_backend()
    backend.clear()
    seed_store(backend)
    yield backend


@pytest.fixture
def backend():
    """Isolated in-memory backend, unseeded."""
    return InMemoryBackend()


# =============================================================================
# CRITERIA FIXTURES
# =============================================================================

@pytest.fixture
def factor_a():
    """Two equally weighted characteristics."""
    return Factor(
        id="A",
        name="Factor A",
        characteristics=[
            Characteristic(id="a1", name="a1", weight=1),
            Characteristic(id="a2", name="a2", weight=1),
        ],
    )


@pytest.fixture
def factor_b():
    """A single characteristic with weight 2."""
    return Factor(
        id="B",
        name="Factor B",
        characteristics=[Characteristic(id="b1", name="b1", weight=2)],
    )


@pytest.fixture
def sample_criteria(factor_a, factor_b):
    return [factor_a, factor_b]


@pytest.fixture
def sample_scores():
    """a1=8, a2=6, b1=10 -> A=7, B=10, overall=8.5"""
    return [
        EvaluationScore(characteristic_id="a1", score=8),
        EvaluationScore(characteristic_id="a2", score=6),
        EvaluationScore(characteristic_id="b1", score=10),
    ]

