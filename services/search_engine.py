from typing import List, Optional, Sequence, Tuple

from config import settings, logger
from models.schemas import MedicationRecord, SearchResultSet, UserDrugEntry


def normalize_query(query) -> str:
    """Trim and case-fold a query. Anything that is not a string normalizes to empty."""
    if not isinstance(query, str):
        return ""
    return query.strip().casefold()


def find_exact(catalog: Sequence[MedicationRecord], term: str) -> List[MedicationRecord]:
    return [m for m in catalog if m.name.casefold() == term]


def find_partial(catalog: Sequence[MedicationRecord], term: str) -> List[MedicationRecord]:
    """Records whose name contains the term without being equal to it."""
    return [
        m for m in catalog
        if term in m.name.casefold() and m.name.casefold() != term
    ]


def find_same_category(catalog: Sequence[MedicationRecord], exact: List[MedicationRecord]) -> List[MedicationRecord]:
    """Other records sharing the category of the first exact match."""
    if not exact:
        return []
    anchor = exact[0]
    return [m for m in catalog if m.category == anchor.category and m.id != anchor.id]


def merge_similar(
    exact: List[MedicationRecord],
    same_category: List[MedicationRecord],
    partial: List[MedicationRecord],
) -> List[MedicationRecord]:
    """Category matches first, then partial matches; unique by id and disjoint from exact."""
    seen_ids = {m.id for m in exact}
    similar = []
    for medication in same_category + partial:
        if medication.id in seen_ids:
            continue
        seen_ids.add(medication.id)
        similar.append(medication)
    return similar


def find_for_symptom(catalog: Sequence[MedicationRecord], term: str) -> List[MedicationRecord]:
    return [
        m for m in catalog
        if any(term in keyword.casefold() for keyword in m.indications.keywords)
    ]


def find_conflicting_drugs(user_drugs: Sequence[UserDrugEntry], term: str) -> List[str]:
    """Names of tracked drugs listing the term among their adverse reactions, in panel order."""
    return [
        drug.name for drug in user_drugs
        if any(term in symptom.casefold() for symptom in drug.adverse_reactions.symptoms)
    ]


def build_symptom_alert(query: str, drug_names: List[str]) -> Optional[str]:
    if not drug_names:
        return None
    return settings.symptom_alert_template.format(query=query, drugs=", ".join(drug_names))


def search(
    catalog: Sequence[MedicationRecord],
    query,
    user_drugs: Sequence[UserDrugEntry] = (),
) -> Tuple[SearchResultSet, Optional[str]]:
    """
    Search the catalog by medication name or symptom and check the query
    against the adverse reactions of the user's tracked drugs.

    Returns the result buckets and an optional alert message. Empty,
    whitespace-only and non-string queries return empty buckets and no alert.
    """
    term = normalize_query(query)
    if not term:
        return SearchResultSet(), None

    exact = find_exact(catalog, term)
    partial = find_partial(catalog, term)
    similar = merge_similar(exact, find_same_category(catalog, exact), partial)
    for_symptom = find_for_symptom(catalog, term)

    results = SearchResultSet(exact=exact, similar=similar, for_symptom=for_symptom)

    conflicting = find_conflicting_drugs(user_drugs, term)
    alert = build_symptom_alert(query.strip(), conflicting)
    if alert:
        logger.warning(f"Query '{query.strip()}' matches adverse reactions of: {', '.join(conflicting)}")

    logger.info(
        f"Search '{term}': {len(exact)} exact, {len(similar)} similar, {len(for_symptom)} for symptom"
    )
    return results, alert
