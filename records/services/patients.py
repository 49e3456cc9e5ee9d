"""
Patient aggregate operations.

A patient owns emergency contacts, physical information entries, an
optional doctor diagnosis and lab results.  Every multi-step sequence
here runs inside a single transaction so a failure halfway through
never leaves a partially replaced or partially deleted aggregate.
"""
import logging

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound

from records.exceptions import Conflict
from records.models import (
    DoctorDiagnosis,
    EmergencyContact,
    LabResult,
    Patient,
    PhysicalInformation,
)

logger = logging.getLogger(__name__)

PATIENT_FIELDS = {
    'firstName': 'first_name',
    'lastName': 'last_name',
    'gender': 'gender',
    'phoneNumber': 'phone_number',
    'dateOfBirth': 'date_of_birth',
    'bloodType': 'blood_type',
    'email': 'email',
    'address': 'address',
    'city': 'city',
    'state': 'state',
    'zipCode': 'zip_code',
}

CONTACT_FIELDS = {
    'fullName': 'full_name',
    'phoneNumber': 'phone_number',
    'email': 'email',
    'relationship': 'relationship',
}

PHYSICAL_FIELDS = {
    'name': 'name',
    'diagnosis': 'diagnosis',
    'phone': 'phone',
    'address': 'address',
    'notes': 'notes',
}

DIAGNOSIS_FIELDS = {
    'knownMedicalConditions': 'known_medical_conditions',
    'allergies': 'allergies',
}

DUPLICATE_EMAIL = 'A patient with this email already exists.'


def to_model_fields(data: dict, mapping: dict) -> dict:
    """Translate the camelCase keys present in ``data`` to model fields."""
    return {field: data[key] for key, field in mapping.items() if key in data}


def patient_queryset():
    return Patient.objects.prefetch_related(
        'emergency_contacts',
        'physical_info',
        'diagnoses',
        'lab_results',
    ).order_by('id')


def _create_dependents(patient: Patient, data: dict) -> None:
    contacts = data.get('emergencyContacts') or []
    EmergencyContact.objects.bulk_create([
        EmergencyContact(patient=patient, **to_model_fields(c, CONTACT_FIELDS)) for c in contacts
    ])
    physical = data.get('physicalInfo') or []
    PhysicalInformation.objects.bulk_create([
        PhysicalInformation(patient=patient, **to_model_fields(p, PHYSICAL_FIELDS)) for p in physical
    ])
    diagnosis = data.get('doctorDiagnosis')
    if diagnosis is not None:
        DoctorDiagnosis.objects.create(patient=patient, **to_model_fields(diagnosis, DIAGNOSIS_FIELDS))


def list_patients():
    return list(patient_queryset())


def get_patient(patient_id: int) -> Patient:
    patient = patient_queryset().filter(id=patient_id).first()
    if not patient:
        raise NotFound('Patient not found.')
    return patient


def _email_taken(email: str, exclude_id: int | None = None) -> bool:
    qs = Patient.objects.filter(email=email)
    if exclude_id is not None:
        qs = qs.exclude(id=exclude_id)
    return qs.exists()


def ensure_patient_exists(patient_id: int) -> None:
    if not Patient.objects.filter(id=patient_id).exists():
        raise NotFound('Patient not found')


def add_patient(data: dict) -> Patient:
    """Create a patient with every dependent supplied in ``data``.

    ``data`` is the normalized output of ``PatientSerializer``.
    """
    if _email_taken(data['email']):
        raise Conflict(DUPLICATE_EMAIL)
    try:
        with transaction.atomic():
            patient = Patient.objects.create(**to_model_fields(data, PATIENT_FIELDS))
            _create_dependents(patient, data)
    except IntegrityError:
        raise Conflict(DUPLICATE_EMAIL)
    logger.info('Patient %s created', patient.id)
    return get_patient(patient.id)


def edit_patient(patient_id: int, data: dict) -> Patient:
    """Replace the patient's fields and dependents with ``data``.

    Contacts, physical info and the diagnosis are replaced wholesale,
    so the result holds exactly the dependents of the latest payload.
    Lab results are left untouched.
    """
    patient = Patient.objects.filter(id=patient_id).first()
    if not patient:
        raise NotFound('Patient does not exist.')
    if _email_taken(data['email'], exclude_id=patient_id):
        raise Conflict(DUPLICATE_EMAIL)
    try:
        with transaction.atomic():
            EmergencyContact.objects.filter(patient_id=patient_id).delete()
            PhysicalInformation.objects.filter(patient_id=patient_id).delete()
            DoctorDiagnosis.objects.filter(patient_id=patient_id).delete()
            for field, value in to_model_fields(data, PATIENT_FIELDS).items():
                setattr(patient, field, value)
            patient.save()
            _create_dependents(patient, data)
    except IntegrityError:
        raise Conflict(DUPLICATE_EMAIL)
    logger.info('Patient %s updated', patient_id)
    return get_patient(patient_id)


def delete_patient(patient_id: int) -> None:
    if not Patient.objects.filter(id=patient_id).exists():
        raise NotFound('Patient not found')
    with transaction.atomic():
        # dependents first, the foreign keys are PROTECT
        LabResult.objects.filter(patient_id=patient_id).delete()
        EmergencyContact.objects.filter(patient_id=patient_id).delete()
        PhysicalInformation.objects.filter(patient_id=patient_id).delete()
        DoctorDiagnosis.objects.filter(patient_id=patient_id).delete()
        Patient.objects.filter(id=patient_id).delete()
    logger.info('Patient %s deleted', patient_id)
