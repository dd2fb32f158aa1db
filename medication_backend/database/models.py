"""
Visit Record Models
SQLAlchemy models for the visit store the medication engine reads from
"""
from datetime import datetime
from sqlalchemy import (
    Column, Integer, String, Text, DateTime, ForeignKey, Enum as SQLEnum, Index
)
from sqlalchemy.orm import declarative_base, relationship
import enum

Base = declarative_base()


class VisitStatus(enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class VisitType(enum.Enum):
    REGULAR = "regular"
    EMERGENCY = "emergency"
    FOLLOWUP = "followup"


class Person(Base):
    """Shared identity for patients and doctors"""
    __tablename__ = 'persons'

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    date_of_birth = Column(DateTime)
    gender = Column(String(10))
    phone = Column(String(20))
    created_at = Column(DateTime, default=datetime.utcnow)

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"


class Doctor(Base):
    """Prescribing doctor"""
    __tablename__ = 'doctors'

    id = Column(Integer, primary_key=True, autoincrement=True)
    person_id = Column(Integer, ForeignKey('persons.id'))
    specialization = Column(String(100))

    person = relationship("Person")
    visits = relationship("Visit", back_populates="doctor")


class Patient(Base):
    """Patient records"""
    __tablename__ = 'patients'

    id = Column(Integer, primary_key=True, autoincrement=True)
    patient_uid = Column(String(50), unique=True, nullable=False, index=True)
    person_id = Column(Integer, ForeignKey('persons.id'))
    created_at = Column(DateTime, default=datetime.utcnow)

    person = relationship("Person")
    visits = relationship("Visit", back_populates="patient", order_by="desc(Visit.visit_date)")


class Visit(Base):
    """A clinical visit with its prescriptions"""
    __tablename__ = 'visits'

    id = Column(Integer, primary_key=True, autoincrement=True)
    patient_id = Column(Integer, ForeignKey('patients.id'), nullable=False)
    doctor_id = Column(Integer, ForeignKey('doctors.id'))

    visit_date = Column(DateTime, nullable=False, default=datetime.utcnow)
    visit_type = Column(SQLEnum(VisitType), default=VisitType.REGULAR)
    status = Column(SQLEnum(VisitStatus), nullable=False, default=VisitStatus.COMPLETED)

    chief_complaint = Column(Text)
    diagnosis = Column(Text)
    doctor_notes = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    patient = relationship("Patient", back_populates="visits")
    doctor = relationship("Doctor", back_populates="visits")
    prescribed_medications = relationship(
        "PrescribedMedication",
        back_populates="visit",
        cascade="all, delete-orphan",
        order_by="PrescribedMedication.id"
    )

    __table_args__ = (
        Index('idx_visit_patient_date', 'patient_id', 'visit_date'),
        Index('idx_visit_doctor_date', 'doctor_id', 'visit_date'),
        Index('idx_visit_status', 'status'),
    )


class PrescribedMedication(Base):
    """Medication prescribed during a visit"""
    __tablename__ = 'prescribed_medications'

    id = Column(Integer, primary_key=True, autoincrement=True)
    visit_id = Column(Integer, ForeignKey('visits.id'), nullable=False)

    medication_name = Column(String(100), nullable=False)
    dosage = Column(String(50), nullable=False)
    frequency = Column(String(100), nullable=False)
    duration = Column(String(50))
    instructions = Column(Text)

    visit = relationship("Visit", back_populates="prescribed_medications")

    __table_args__ = (
        Index('idx_prescribed_med_name', 'medication_name'),
    )
