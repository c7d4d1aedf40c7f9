import json
from typing import List, Optional

from pydantic import ValidationError

from config import settings, logger
from models.schemas import MedicationRecord

# Built-in medication catalog
MEDICATIONS = [
    {
        "id": 1,
        "name": "Paracetamol",
        "category": "Analgésico",
        "indications": {"keywords": ["febre", "dor", "dor de cabeça"]},
        "adverseReactions": {"symptoms": ["náusea", "erupção cutânea"]},
    },
    {
        "id": 2,
        "name": "Dipirona",
        "category": "Analgésico",
        "indications": {"keywords": ["febre", "dor", "cólica"]},
        "adverseReactions": {"symptoms": ["hipotensão", "erupção cutânea"]},
    },
    {
        "id": 3,
        "name": "Ibuprofeno",
        "category": "Anti-inflamatório",
        "indications": {"keywords": ["dor", "inflamação", "febre"]},
        "adverseReactions": {"symptoms": ["dor de estômago", "azia", "náusea"]},
    },
    {
        "id": 4,
        "name": "Nimesulida",
        "category": "Anti-inflamatório",
        "indications": {"keywords": ["inflamação", "dor de garganta"]},
        "adverseReactions": {"symptoms": ["dor de estômago", "tontura"]},
    },
    {
        "id": 5,
        "name": "Loratadina",
        "category": "Antialérgico",
        "indications": {"keywords": ["alergia", "coceira", "rinite"]},
        "adverseReactions": {"symptoms": ["sonolência", "dor de cabeça"]},
    },
    {
        "id": 6,
        "name": "Desloratadina",
        "category": "Antialérgico",
        "indications": {"keywords": ["alergia", "rinite", "urticária"]},
        "adverseReactions": {"symptoms": ["boca seca", "fadiga"]},
    },
    {
        "id": 7,
        "name": "Omeprazol",
        "category": "Protetor gástrico",
        "indications": {"keywords": ["azia", "gastrite", "refluxo"]},
        "adverseReactions": {"symptoms": ["dor de cabeça", "diarreia"]},
    },
    {
        "id": 8,
        "name": "Pantoprazol",
        "category": "Protetor gástrico",
        "indications": {"keywords": ["azia", "úlcera", "refluxo"]},
        "adverseReactions": {"symptoms": ["diarreia", "flatulência"]},
    },
    {
        "id": 9,
        "name": "Amoxicilina",
        "category": "Antibiótico",
        "indications": {"keywords": ["infecção", "dor de garganta", "sinusite"]},
        "adverseReactions": {"symptoms": ["diarreia", "náusea", "erupção cutânea"]},
    },
    {
        "id": 10,
        "name": "Azitromicina",
        "category": "Antibiótico",
        "indications": {"keywords": ["infecção", "bronquite"]},
        "adverseReactions": {"symptoms": ["dor abdominal", "diarreia"]},
    },
    {
        "id": 11,
        "name": "Dimenidrinato",
        "category": "Antiemético",
        "indications": {"keywords": ["náusea", "vômito", "enjoo"]},
        "adverseReactions": {"symptoms": ["sonolência", "boca seca"]},
    },
    {
        "id": 12,
        "name": "Ondansetrona",
        "category": "Antiemético",
        "indications": {"keywords": ["náusea", "vômito"]},
        "adverseReactions": {"symptoms": ["constipação", "dor de cabeça"]},
    },
    {
        "id": 13,
        "name": "Ácido Acetilsalicílico",
        "category": "Analgésico",
        "indications": {"keywords": ["dor", "febre", "prevenção de trombose"]},
        "adverseReactions": {"symptoms": ["sangramento", "azia", "náusea"]},
    },
]


def load_catalog(path: Optional[str] = None) -> List[MedicationRecord]:
    """Build the catalog from a JSON file, or from the built-in data when no path is given."""
    if path:
        try:
            with open(path, encoding="utf-8") as catalog_file:
                raw_records = json.load(catalog_file)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to read catalog file {path}: {e}")
        if not isinstance(raw_records, list):
            raise ValueError(f"Catalog file {path} must contain a list of medications")
    else:
        raw_records = MEDICATIONS

    try:
        catalog = [MedicationRecord.model_validate(record) for record in raw_records]
    except ValidationError as e:
        raise ValueError(f"Invalid medication record in catalog: {e}")

    seen_ids = set()
    for record in catalog:
        if record.id in seen_ids:
            raise ValueError(f"Duplicate medication id {record.id} in catalog")
        seen_ids.add(record.id)

    logger.info(f"Loaded {len(catalog)} medications from {path or 'built-in catalog'}")
    return catalog


def get_medication(catalog: List[MedicationRecord], medication_id: int) -> Optional[MedicationRecord]:
    """Look up a catalog record by id."""
    return next((record for record in catalog if record.id == medication_id), None)


# Catalog loaded once at process start
CATALOG = load_catalog(settings.catalog_file)
