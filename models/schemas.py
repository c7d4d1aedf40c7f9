from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Indications(BaseModel):
    """What a medication is indicated for."""
    model_config = ConfigDict(frozen=True)

    keywords: List[str] = []


class AdverseReactions(BaseModel):
    """Known side effects of a medication."""
    model_config = ConfigDict(frozen=True)

    symptoms: List[str] = []


class MedicationRecord(BaseModel):
    """Catalog entry. Immutable once loaded."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    category: str
    indications: Indications = Indications()
    adverse_reactions: AdverseReactions = Field(default=AdverseReactions(), alias="adverseReactions")


class UserDrugEntry(BaseModel):
    """Medication tracked in the user's panel."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    adverse_reactions: AdverseReactions = Field(default=AdverseReactions(), alias="adverseReactions")


class SearchResultSet(BaseModel):
    """Search results split into exact, similar and symptom buckets."""
    model_config = ConfigDict(populate_by_name=True)

    exact: List[MedicationRecord] = []
    similar: List[MedicationRecord] = []
    for_symptom: List[MedicationRecord] = Field(default=[], alias="forSymptom")


class SearchResponse(SearchResultSet):
    """API response model for a medication search."""
    query: str
    symptom_alert: Optional[str] = None
    processing_time_ms: Optional[float] = None


class PanelResponse(BaseModel):
    """Current contents of the user panel."""
    drugs: List[UserDrugEntry] = []
    total: int = 0
