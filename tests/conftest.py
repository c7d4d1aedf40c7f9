"""
Pytest configuration and shared fixtures.
"""

import pytest

from db.user_panel import USER_PANEL
from models.schemas import MedicationRecord, UserDrugEntry


@pytest.fixture
def sample_catalog():
    """Two analgesics, as in the reference search examples."""
    return [
        MedicationRecord(
            id=1,
            name="Paracetamol",
            category="Analgesic",
            indications={"keywords": ["fever", "pain"]},
        ),
        MedicationRecord(
            id=2,
            name="Ibuprofen",
            category="Analgesic",
            indications={"keywords": ["pain", "inflammation"]},
        ),
    ]


@pytest.fixture
def mixed_catalog():
    """Catalog spanning several categories with overlapping names."""
    return [
        MedicationRecord(id=1, name="Omeprazol", category="Gastric", indications={"keywords": ["heartburn"]}),
        MedicationRecord(id=2, name="Pantoprazol", category="Gastric", indications={"keywords": ["Reflux", "heartburn"]}),
        MedicationRecord(id=3, name="Esomeprazol", category="Gastric", indications={"keywords": ["ulcer"]}),
        MedicationRecord(id=4, name="Omeprazol Plus", category="Combination", indications={"keywords": ["heartburn", "pain"]}),
        MedicationRecord(id=5, name="Loratadine", category="Antihistamine", indications={"keywords": ["allergy"]}),
    ]


@pytest.fixture
def sample_user_drugs():
    """User panel with a single tracked drug."""
    return [
        UserDrugEntry(name="Aspirin", adverse_reactions={"symptoms": ["nausea", "bleeding"]}),
    ]


@pytest.fixture
def clean_panel():
    """Empty the process-wide user panel around a test."""
    USER_PANEL.clear()
    yield USER_PANEL
    USER_PANEL.clear()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
