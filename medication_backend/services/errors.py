"""
Medication service errors
"""


class MedicationServiceError(Exception):
    """Base error for upstream data faults seen by the medication engine"""

    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        self.code = code


class PatientNotFoundError(MedicationServiceError):
    """No patient with the requested identifier"""

    def __init__(self, patient_uid: str):
        super().__init__(f"Patient not found: {patient_uid}", code="PATIENT_NOT_FOUND")
        self.patient_uid = patient_uid
