import time
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.security import APIKeyHeader

from config import settings, logger
from db.medication_catalog import CATALOG, get_medication
from db.user_panel import USER_PANEL
from models.schemas import MedicationRecord, PanelResponse, SearchResponse, UserDrugEntry
from services.search_engine import search

router = APIRouter()

# API Key security
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)

def verify_api_key(api_key: Optional[str] = Depends(api_key_header)):
    """Verify the API key for protected endpoints. A missing key is rejected like a wrong one."""
    if not api_key or api_key != settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )
    return api_key

def panel_response() -> PanelResponse:
    drugs = USER_PANEL.list_drugs()
    return PanelResponse(drugs=drugs, total=len(drugs))

@router.get("/", tags=["Info"])
async def root():
    """API info endpoint."""
    return {
        "name": "Medication Search API",
        "version": "1.0.0",
        "status": "operational",
        "medications": len(CATALOG)
    }

@router.get("/search", response_model=SearchResponse, tags=["Search"])
async def search_medications(query: Optional[str] = None, api_key: str = Depends(verify_api_key)):
    """Search medications by name or symptom, checking tracked drugs for side-effect conflicts."""
    start_time = time.time()

    results, alert = search(CATALOG, query, USER_PANEL.list_drugs())

    processing_time = (time.time() - start_time) * 1000  # Convert to milliseconds
    return SearchResponse(
        query=(query or "").strip(),
        exact=results.exact,
        similar=results.similar,
        for_symptom=results.for_symptom,
        symptom_alert=alert,
        processing_time_ms=processing_time
    )

@router.get("/medications", response_model=List[MedicationRecord], tags=["Catalog"])
async def list_medications(api_key: str = Depends(verify_api_key)):
    """List the whole medication catalog."""
    return CATALOG

@router.get("/medications/{medication_id}", response_model=MedicationRecord, tags=["Catalog"])
async def medication_details(medication_id: int, api_key: str = Depends(verify_api_key)):
    """Get a single catalog record."""
    medication = get_medication(CATALOG, medication_id)
    if medication is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Medication with ID {medication_id} not found"
        )
    return medication

@router.get("/panel", response_model=PanelResponse, tags=["Panel"])
async def get_panel(api_key: str = Depends(verify_api_key)):
    """List the medications tracked in the user panel."""
    return panel_response()

@router.post("/panel", response_model=PanelResponse, status_code=status.HTTP_201_CREATED, tags=["Panel"])
async def add_to_panel(entry: UserDrugEntry, api_key: str = Depends(verify_api_key)):
    """Track a medication described in the request body."""
    try:
        USER_PANEL.add_drug(entry)
    except ValueError as e:
        logger.error(f"Failed to add {entry.name} to panel: {e}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    return panel_response()

@router.post(
    "/panel/medications/{medication_id}",
    response_model=PanelResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Panel"]
)
async def add_catalog_medication_to_panel(medication_id: int, api_key: str = Depends(verify_api_key)):
    """Track a catalog medication, carrying over its known adverse reactions."""
    medication = get_medication(CATALOG, medication_id)
    if medication is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Medication with ID {medication_id} not found"
        )
    try:
        USER_PANEL.add_from_catalog(medication)
    except ValueError as e:
        logger.error(f"Failed to add {medication.name} to panel: {e}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    return panel_response()

@router.delete("/panel/{name}", response_model=PanelResponse, tags=["Panel"])
async def remove_from_panel(name: str, api_key: str = Depends(verify_api_key)):
    """Stop tracking a medication."""
    try:
        USER_PANEL.remove_drug(name)
    except KeyError:
        logger.warning(f"Tried to remove untracked medication {name}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Medication {name} is not in the panel"
        )
    return panel_response()

@router.get("/health", tags=["Info"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
