"""
Single-row operations on the records that hang off a patient.

These operations take the request body as-is: there is no shape
validation beyond what the database columns accept, apart from markup
being stripped from physical-info notes and lab messages.  Updates only
touch the keys present in the body.
"""
import logging

from django.db import transaction
from rest_framework.exceptions import NotFound

from records.models import Admin, DoctorDiagnosis, EmergencyContact, LabResult, PhysicalInformation
from records.serializers.patient import clean_text
from records.services.patients import (
    CONTACT_FIELDS,
    DIAGNOSIS_FIELDS,
    PHYSICAL_FIELDS,
    ensure_patient_exists,
    to_model_fields,
)

logger = logging.getLogger(__name__)


def _physical_fields(data: dict) -> dict:
    fields = to_model_fields(data, PHYSICAL_FIELDS)
    if 'notes' in fields:
        fields['notes'] = clean_text(fields['notes'])
    return fields


def _update(obj, fields: dict):
    for field, value in fields.items():
        setattr(obj, field, value)
    if fields:
        obj.save(update_fields=list(fields))
    return obj


# ---------------------------------------------------------------------
# Emergency contacts
# ---------------------------------------------------------------------
def add_emergency_contact(patient_id: int, data: dict) -> EmergencyContact:
    ensure_patient_exists(patient_id)
    return EmergencyContact.objects.create(patient_id=patient_id, **to_model_fields(data, CONTACT_FIELDS))


def update_emergency_contact(contact_id: int, data: dict) -> EmergencyContact:
    contact = EmergencyContact.objects.filter(id=contact_id).first()
    if not contact:
        raise NotFound('Emergency contact not found')
    return _update(contact, to_model_fields(data, CONTACT_FIELDS))


def delete_emergency_contact(contact_id: int) -> None:
    deleted, _ = EmergencyContact.objects.filter(id=contact_id).delete()
    if not deleted:
        raise NotFound('Emergency contact not found')


# ---------------------------------------------------------------------
# Doctor diagnosis (0..1 per patient)
# ---------------------------------------------------------------------
def upsert_diagnosis(patient_id: int, data: dict) -> DoctorDiagnosis:
    """Replace whatever diagnosis the patient has with a new one.

    Nothing in the schema stops a second row per patient; deleting
    first is what keeps the count at one.
    """
    ensure_patient_exists(patient_id)
    with transaction.atomic():
        DoctorDiagnosis.objects.filter(patient_id=patient_id).delete()
        diagnosis = DoctorDiagnosis.objects.create(
            patient_id=patient_id, **to_model_fields(data, DIAGNOSIS_FIELDS)
        )
    logger.info('Diagnosis for patient %s replaced', patient_id)
    return diagnosis


def get_diagnosis(patient_id: int) -> DoctorDiagnosis:
    diagnosis = DoctorDiagnosis.objects.filter(patient_id=patient_id).order_by('-id').first()
    if not diagnosis:
        raise NotFound('No diagnosis found')
    return diagnosis


# ---------------------------------------------------------------------
# Lab results
# ---------------------------------------------------------------------
def add_lab_result(patient_id: int, data: dict, *, doctor_id: int) -> LabResult:
    """Record a lab result; ``doctor_id`` is the signed-in admin unless the body names one."""
    ensure_patient_exists(patient_id)
    try:
        doctor_id = int(data.get('doctorId') or doctor_id)
    except (TypeError, ValueError):
        raise NotFound('Doctor not found')
    if not Admin.objects.filter(id=doctor_id).exists():
        raise NotFound('Doctor not found')
    result = LabResult.objects.create(
        patient_id=patient_id,
        doctor_id=doctor_id,
        message=clean_text(data.get('message')),
    )
    logger.info('Lab result %s added for patient %s', result.id, patient_id)
    return result


def get_lab_results(patient_id: int) -> list:
    return list(LabResult.objects.filter(patient_id=patient_id).select_related('doctor'))


def get_lab_result(result_id: int) -> LabResult:
    result = LabResult.objects.select_related('doctor', 'patient').filter(id=result_id).first()
    if not result:
        raise NotFound('Lab result not found')
    return result


# ---------------------------------------------------------------------
# Physical information
# ---------------------------------------------------------------------
def add_physical_info(patient_id: int, data: dict) -> PhysicalInformation:
    ensure_patient_exists(patient_id)
    return PhysicalInformation.objects.create(patient_id=patient_id, **_physical_fields(data))


def update_physical_info(info_id: int, data: dict) -> PhysicalInformation:
    info = PhysicalInformation.objects.filter(id=info_id).first()
    if not info:
        raise NotFound('Physical info not found')
    return _update(info, _physical_fields(data))


def delete_physical_info(info_id: int) -> None:
    deleted, _ = PhysicalInformation.objects.filter(id=info_id).delete()
    if not deleted:
        raise NotFound('Physical info not found')
