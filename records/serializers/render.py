"""
JSON representations of the stored records.

Field names follow the camelCase contract of the front-end.  Patient
rendering expects the dependents to be prefetched (see
``records.services.patients.patient_queryset``) so that a list of
patients costs a fixed number of queries.
"""
from __future__ import annotations

from records.models import (
    Admin,
    DoctorDiagnosis,
    EmergencyContact,
    LabResult,
    Patient,
    PhysicalInformation,
)


def _iso(value):
    return value.isoformat() if value else None


def render_admin(admin: Admin) -> dict:
    return {
        'id': admin.id,
        'email': admin.email,
        'fullName': admin.full_name,
        'role': admin.role,
    }


def render_contact(contact: EmergencyContact) -> dict:
    return {
        'id': contact.id,
        'fullName': contact.full_name,
        'phoneNumber': contact.phone_number,
        'email': contact.email,
        'relationship': contact.relationship,
        'patientId': contact.patient_id,
    }


def render_physical_info(info: PhysicalInformation) -> dict:
    return {
        'id': info.id,
        'name': info.name,
        'diagnosis': info.diagnosis,
        'phone': info.phone,
        'address': info.address,
        'notes': info.notes,
        'patientId': info.patient_id,
    }


def render_diagnosis(diagnosis: DoctorDiagnosis | None) -> dict | None:
    if diagnosis is None:
        return None
    return {
        'id': diagnosis.id,
        'knownMedicalConditions': diagnosis.known_medical_conditions,
        'allergies': diagnosis.allergies,
        'patientId': diagnosis.patient_id,
    }


def render_lab_result(result: LabResult, *, with_doctor: bool = False, with_patient: bool = False) -> dict:
    data: dict[str, object] = {
        'id': result.id,
        'message': result.message,
        'doctorId': result.doctor_id,
        'patientId': result.patient_id,
        'createdAt': _iso(result.created_at),
    }
    if with_doctor:
        data['doctor'] = render_admin(result.doctor)
    if with_patient:
        data['patient'] = render_patient_summary(result.patient)
    return data


def render_patient_summary(patient: Patient) -> dict:
    """Scalar fields only, no dependents."""
    return {
        'id': patient.id,
        'firstName': patient.first_name,
        'lastName': patient.last_name,
        'gender': patient.gender,
        'phoneNumber': patient.phone_number,
        'dateOfBirth': _iso(patient.date_of_birth),
        'bloodType': patient.blood_type,
        'email': patient.email,
        'address': patient.address,
        'city': patient.city,
        'state': patient.state,
        'zipCode': patient.zip_code,
        'createdAt': _iso(patient.created_at),
        'updatedAt': _iso(patient.updated_at),
    }


def render_patient(patient: Patient, *, with_counts: bool = False) -> dict:
    contacts = list(patient.emergency_contacts.all())
    physical = list(patient.physical_info.all())
    diagnoses = list(patient.diagnoses.all())
    labs = list(patient.lab_results.all())
    data = render_patient_summary(patient)
    data.update({
        'emergencyContacts': [render_contact(c) for c in contacts],
        'physicalInfo': [render_physical_info(p) for p in physical],
        'doctorDiagnosis': render_diagnosis(diagnoses[0] if diagnoses else None),
        'labResults': [render_lab_result(r) for r in labs],
    })
    if with_counts:
        data['_count'] = {
            'emergencyContacts': len(contacts),
            'physicalInfo': len(physical),
            'labResults': len(labs),
            'doctorDiagnosis': len(diagnoses),
        }
    return data
