"""
Medication API Routes
Current medications, weekly schedule, history and safety signals for a patient
"""
from datetime import date, datetime, time
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from medication_backend.config import settings
from medication_backend.database import get_db
from medication_backend.models.regimen import HistoryFilters
from medication_backend.services.medication_service import MedicationService

router = APIRouter(prefix="/api/patients/{patient_uid}/medications", tags=["Medications"])


def _respond(result: dict):
    """Failed results keep their payload; unknown patients map to 404"""
    if result.get('success'):
        return result
    status_code = 404 if result.get('code') == 'PATIENT_NOT_FOUND' else 400
    return JSONResponse(status_code=status_code, content=result)


@router.get("")
def get_current_medications(patient_uid: str, db: Session = Depends(get_db)):
    """Get the patient's currently active medications"""
    service = MedicationService(db)
    return _respond(service.get_current_medications(patient_uid))


@router.get("/schedule")
def get_medication_schedule(patient_uid: str, db: Session = Depends(get_db)):
    """Get the weekly dosing schedule built from active medications"""
    service = MedicationService(db)
    return _respond(service.get_medication_schedule(patient_uid))


@router.get("/history")
def get_medication_history(
    patient_uid: str,
    start_date: Optional[date] = Query(None, alias="startDate", description="First visit date (inclusive)"),
    end_date: Optional[date] = Query(None, alias="endDate", description="Last visit date (inclusive)"),
    medication_name: Optional[str] = Query(None, alias="medicationName", description="Substring of the medication name"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.HISTORY_PAGE_LIMIT, ge=1),
    db: Session = Depends(get_db)
):
    """
    Get all prescribed medications with activity flags.

    Pagination is applied to visits, so one page may hold only part of the
    patient's medication list.
    """
    filters = HistoryFilters(
        start_date=datetime.combine(start_date, time.min) if start_date else None,
        end_date=datetime.combine(end_date, time.max) if end_date else None,
        medication_name=medication_name,
        page=page,
        limit=limit
    )

    service = MedicationService(db)
    return _respond(service.get_medication_history(patient_uid, filters))


@router.get("/interactions")
def check_medication_interactions(patient_uid: str, db: Session = Depends(get_db)):
    """Check the active medication set for duplicates and polypharmacy"""
    service = MedicationService(db)
    return _respond(service.check_medication_interactions(patient_uid))
