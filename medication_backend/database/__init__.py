"""
Database Package
Provides visit store models, connection management, and session handling
"""
from medication_backend.database.connection import get_db, db_manager, DatabaseManager
from medication_backend.database.models import (
    Base, Person, Doctor, Patient, Visit, VisitStatus, VisitType, PrescribedMedication
)


def init_db():
    """Initialize database - backwards compatible wrapper"""
    db_manager.init_db()


__all__ = [
    'get_db', 'db_manager', 'init_db', 'DatabaseManager',
    'Base', 'Person', 'Doctor', 'Patient', 'Visit', 'VisitStatus', 'VisitType',
    'PrescribedMedication'
]
