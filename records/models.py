"""
Database models for the hospital administration backend.

These models capture the admin accounts that operate the system and
the patient aggregate they manage: demographics plus emergency
contacts, physical information, a doctor diagnosis and lab results.
Dependents point at their patient with ``PROTECT`` foreign keys, so a
patient can only be removed once its dependents are gone.
"""
from __future__ import annotations

from django.db import models


class Admin(models.Model):
    """An account allowed to use the API.

    The password column only ever stores a salted one-way hash produced
    by :func:`records.services.auth.hash_password`.
    """
    ROLE_CHOICES = [
        ('ADMIN', 'Admin'),
        ('DOCTOR', 'Doctor'),
        ('STAFF', 'Staff'),
    ]
    full_name = models.CharField(max_length=255)
    email = models.EmailField(unique=True)
    password = models.CharField(max_length=255)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.email} ({self.role})"


class Patient(models.Model):
    """Demographic record at the root of the patient aggregate."""
    GENDER_CHOICES = [
        ('Male', 'Male'),
        ('Female', 'Female'),
        ('Other', 'Other'),
    ]
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES)
    phone_number = models.CharField(max_length=32)
    date_of_birth = models.DateField()
    blood_type = models.CharField(max_length=8)
    email = models.EmailField(unique=True)
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    zip_code = models.CharField(max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.email})"


class EmergencyContact(models.Model):
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name='emergency_contacts')
    full_name = models.CharField(max_length=255)
    phone_number = models.CharField(max_length=32)
    email = models.EmailField()
    relationship = models.CharField(max_length=100)

    def __str__(self) -> str:
        return f"{self.full_name} ({self.relationship})"


class PhysicalInformation(models.Model):
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name='physical_info')
    name = models.CharField(max_length=255)
    diagnosis = models.TextField()
    phone = models.CharField(max_length=32)
    address = models.CharField(max_length=255)
    notes = models.TextField(blank=True, default='')

    def __str__(self) -> str:
        return self.name


class DoctorDiagnosis(models.Model):
    """At most one per patient.

    The cap is kept by :func:`records.services.dependents.upsert_diagnosis`
    deleting before creating; there is no unique constraint on ``patient``.
    """
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name='diagnoses')
    known_medical_conditions = models.TextField(blank=True, default='')
    allergies = models.TextField(blank=True, default='')

    def __str__(self) -> str:
        return f"Diagnosis for patient {self.patient_id}"


class LabResult(models.Model):
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name='lab_results')
    doctor = models.ForeignKey(Admin, on_delete=models.PROTECT, related_name='lab_results')
    message = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self) -> str:
        return f"Lab result {self.id} for patient {self.patient_id}"
