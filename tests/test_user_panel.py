"""
Tests for the in-memory user panel.
"""

import pytest
from pydantic import ValidationError

from db.user_panel import UserPanel
from models.schemas import MedicationRecord, UserDrugEntry


class TestUserPanel:
    """Test cases for UserPanel."""

    @pytest.fixture
    def panel(self):
        return UserPanel()

    def test_starts_empty(self, panel):
        assert panel.list_drugs() == []

    def test_add_keeps_insertion_order(self, panel):
        panel.add_drug(UserDrugEntry(name="Aspirin"))
        panel.add_drug(UserDrugEntry(name="Metformin"))

        assert [d.name for d in panel.list_drugs()] == ["Aspirin", "Metformin"]

    def test_duplicate_names_rejected_case_insensitively(self, panel):
        panel.add_drug(UserDrugEntry(name="Aspirin"))

        with pytest.raises(ValueError, match="already in the panel"):
            panel.add_drug(UserDrugEntry(name="  aspirin "))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            UserDrugEntry(name="   ")

    def test_padded_name_stored_trimmed(self, panel):
        panel.add_drug(UserDrugEntry(name="  Aspirin \t", adverse_reactions={"symptoms": ["nausea"]}))

        assert [d.name for d in panel.list_drugs()] == ["Aspirin"]
        assert panel.get_drug("aspirin").name == "Aspirin"

    def test_list_returns_a_copy(self, panel):
        panel.add_drug(UserDrugEntry(name="Aspirin"))
        panel.list_drugs().clear()

        assert len(panel.list_drugs()) == 1

    def test_remove(self, panel):
        panel.add_drug(UserDrugEntry(name="Aspirin"))
        panel.add_drug(UserDrugEntry(name="Metformin"))

        removed = panel.remove_drug("ASPIRIN")

        assert removed.name == "Aspirin"
        assert [d.name for d in panel.list_drugs()] == ["Metformin"]

    def test_remove_missing(self, panel):
        with pytest.raises(KeyError):
            panel.remove_drug("Aspirin")

    def test_add_from_catalog_copies_adverse_reactions(self, panel):
        record = MedicationRecord(
            id=7,
            name="Amoxicilina",
            category="Antibiótico",
            adverseReactions={"symptoms": ["diarreia"]},
        )

        entry = panel.add_from_catalog(record)

        assert entry.name == "Amoxicilina"
        assert entry.adverse_reactions.symptoms == ["diarreia"]
        assert panel.get_drug("amoxicilina") == entry

    def test_clear(self, panel):
        panel.add_drug(UserDrugEntry(name="Aspirin"))
        panel.clear()

        assert panel.list_drugs() == []
