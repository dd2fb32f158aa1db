"""Shared pytest configuration and fixtures for the test suite."""
from datetime import datetime, timedelta

import pytest

from medication_backend.database import (
    DatabaseManager, Doctor, Patient, Person, PrescribedMedication, Visit, VisitStatus
)
from medication_backend.models import EvaluatedPrescription, PrescriptionRecord


NOW = datetime(2025, 6, 15, 12, 0, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def db_manager():
    """Fresh in-memory SQLite database per test."""
    manager = DatabaseManager()
    manager.init_db("sqlite://")
    yield manager
    manager.close()


@pytest.fixture
def db_session(db_manager):
    session = db_manager.get_session()
    yield session
    session.close()


def make_record(name="Metformin", dosage="500mg", frequency="twice daily",
                duration=None, prescribed_date=None, instructions=None, visit_ref=1):
    return PrescriptionRecord(
        medication_name=name,
        dosage=dosage,
        frequency=frequency,
        duration=duration,
        instructions=instructions,
        prescribed_date=prescribed_date or NOW,
        visit_ref=visit_ref,
        prescribing_doctor_ref=1,
        prescribing_doctor_name="د. Sara Haddad",
        prescribing_doctor_specialty="Internal Medicine"
    )


def make_active(name="Metformin", frequency="twice daily", **kwargs):
    return EvaluatedPrescription(record=make_record(name=name, frequency=frequency, **kwargs), is_active=True)


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def active_factory():
    return make_active


class VisitSeeder:
    """Writes patients, doctors and visits into a session."""

    def __init__(self, session):
        self.session = session

    def patient(self, patient_uid="P-001", first_name="Omar", last_name="Khalil"):
        person = Person(first_name=first_name, last_name=last_name)
        patient = Patient(patient_uid=patient_uid, person=person)
        self.session.add(patient)
        self.session.commit()
        return patient

    def doctor(self, first_name="Sara", last_name="Haddad", specialization="Internal Medicine"):
        doctor = Doctor(person=Person(first_name=first_name, last_name=last_name),
                        specialization=specialization)
        self.session.add(doctor)
        self.session.commit()
        return doctor

    def visit(self, patient, visit_date, medications=(), doctor=None,
              status=VisitStatus.COMPLETED):
        visit = Visit(
            patient=patient,
            doctor=doctor,
            visit_date=visit_date,
            status=status,
            chief_complaint="Routine follow-up",
            diagnosis="Type 2 diabetes"
        )
        for med in medications:
            visit.prescribed_medications.append(PrescribedMedication(**med))
        self.session.add(visit)
        self.session.commit()
        return visit


@pytest.fixture
def seeder(db_session):
    return VisitSeeder(db_session)


def days_ago(days, reference=NOW):
    return reference - timedelta(days=days)
