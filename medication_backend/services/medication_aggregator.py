"""
Medication Aggregator Service
Collects prescriptions across a patient's visit history and flags their activity
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload, selectinload

from medication_backend.config import settings
from medication_backend.database.models import Doctor, Patient, Visit, VisitStatus
from medication_backend.models.regimen import (
    EvaluatedPrescription, HistoryFilters, HistoryPage, PrescriptionRecord
)
from medication_backend.services.activity_evaluator import (
    ActivityEvaluator, ActivityView, activity_evaluator
)
from medication_backend.services.errors import PatientNotFoundError

logger = logging.getLogger(__name__)


class MedicationAggregator:
    """
    Read-only view over a patient's prescriptions

    Features:
    - Completed visits with prescriptions, newest first
    - Visit and doctor context attached to every record
    - Current active set (CURRENT view)
    - Paginated history with per-record activity flags (HISTORY view)
    """

    def __init__(self, db: Session, evaluator: ActivityEvaluator = None):
        self.db = db
        self.evaluator = evaluator or activity_evaluator

    def find_patient(self, patient_uid: str) -> Patient:
        patient = self.db.query(Patient).filter(Patient.patient_uid == patient_uid).first()
        if patient is None:
            raise PatientNotFoundError(patient_uid)
        return patient

    # ==================== Visit Queries ====================

    def _visit_query(self, patient: Patient, start_date: datetime = None, end_date: datetime = None):
        query = self.db.query(Visit).filter(
            Visit.patient_id == patient.id,
            Visit.status == VisitStatus.COMPLETED,
            Visit.prescribed_medications.any()
        )

        if start_date:
            query = query.filter(Visit.visit_date >= start_date)
        if end_date:
            query = query.filter(Visit.visit_date <= end_date)

        return query

    def _load_visits(self, query, offset: int = None, limit: int = None) -> List[Visit]:
        query = query.options(
            selectinload(Visit.prescribed_medications),
            joinedload(Visit.doctor).joinedload(Doctor.person)
        ).order_by(desc(Visit.visit_date), desc(Visit.id))

        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        return query.all()

    # ==================== Flattening ====================

    def _doctor_display_name(self, doctor: Optional[Doctor]) -> str:
        if doctor is None or doctor.person is None:
            return settings.UNKNOWN_DOCTOR_NAME
        return f"{settings.DOCTOR_TITLE_PREFIX} {doctor.person.full_name}"

    def collect_prescriptions(self, visits: List[Visit]) -> List[PrescriptionRecord]:
        """Flatten visits into prescription records, preserving visit order"""
        records = []

        for visit in visits:
            doctor_name = self._doctor_display_name(visit.doctor)
            specialty = visit.doctor.specialization if visit.doctor else None

            for med in visit.prescribed_medications:
                records.append(PrescriptionRecord(
                    medication_name=med.medication_name,
                    dosage=med.dosage,
                    frequency=med.frequency,
                    duration=med.duration,
                    instructions=med.instructions,
                    prescribed_date=visit.visit_date,
                    visit_ref=visit.id,
                    prescribing_doctor_ref=visit.doctor_id,
                    prescribing_doctor_name=doctor_name,
                    prescribing_doctor_specialty=specialty
                ))

        return records

    # ==================== Views ====================

    def get_current_medications(self, patient_uid: str, now: datetime = None) -> List[EvaluatedPrescription]:
        """Active prescriptions for a patient, newest visit first"""
        now = now or datetime.utcnow()
        patient = self.find_patient(patient_uid)

        visits = self._load_visits(self._visit_query(patient))
        records = self.collect_prescriptions(visits)

        evaluated = [self.evaluator.evaluate(r, now, ActivityView.CURRENT) for r in records]
        active = [e for e in evaluated if e.is_active]

        logger.info(
            f"Patient {patient_uid}: {len(visits)} visits, "
            f"{len(records)} prescriptions, {len(active)} active"
        )
        return active

    def get_history(self, patient_uid: str, filters: HistoryFilters = None,
                    now: datetime = None) -> HistoryPage:
        """
        Paginated prescription history with activity flags

        Pagination counts visits, not individual prescriptions, so a page can
        end partway through a patient's overall medication list.
        """
        now = now or datetime.utcnow()
        filters = filters or HistoryFilters(limit=settings.HISTORY_PAGE_LIMIT)
        patient = self.find_patient(patient_uid)

        query = self._visit_query(patient, filters.start_date, filters.end_date)
        total_visits = query.count()

        offset = (filters.page - 1) * filters.limit
        visits = self._load_visits(query, offset=offset, limit=filters.limit)
        records = self.collect_prescriptions(visits)

        if filters.medication_name:
            records = [r for r in records if filters.medication_name in r.medication_name]

        items = [self.evaluator.evaluate(r, now, ActivityView.HISTORY) for r in records]

        logger.debug(f"History for {patient_uid}: page {filters.page}, {len(items)} records")
        return HistoryPage(
            items=items,
            total_visits=total_visits,
            page=filters.page,
            limit=filters.limit
        )
