from typing import List, Optional

from config import logger
from models.schemas import MedicationRecord, UserDrugEntry


class UserPanel:
    """In-memory list of the medications a user is tracking."""

    def __init__(self):
        self._drugs: List[UserDrugEntry] = []

    def list_drugs(self) -> List[UserDrugEntry]:
        return list(self._drugs)

    def get_drug(self, name: str) -> Optional[UserDrugEntry]:
        key = name.strip().casefold()
        return next((drug for drug in self._drugs if drug.name.casefold() == key), None)

    def add_drug(self, entry: UserDrugEntry) -> UserDrugEntry:
        """Track a new medication. Names are unique regardless of case."""
        if self.get_drug(entry.name) is not None:
            raise ValueError(f"Medication {entry.name} is already in the panel")
        self._drugs.append(entry)
        logger.info(f"Added {entry.name} to user panel")
        return entry

    def add_from_catalog(self, record: MedicationRecord) -> UserDrugEntry:
        return self.add_drug(UserDrugEntry(name=record.name, adverse_reactions=record.adverse_reactions))

    def remove_drug(self, name: str) -> UserDrugEntry:
        drug = self.get_drug(name)
        if drug is None:
            raise KeyError(f"Medication {name} is not in the panel")
        self._drugs.remove(drug)
        logger.info(f"Removed {drug.name} from user panel")
        return drug

    def clear(self):
        self._drugs.clear()


USER_PANEL = UserPanel()
