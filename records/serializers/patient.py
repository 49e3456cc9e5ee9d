import html

import bleach
from rest_framework import serializers

GENDERS = ['Male', 'Female', 'Other']

# Accept plain dates as well as the ISO timestamps browsers send for date inputs.
DATE_INPUT_FORMATS = ['iso-8601', '%Y-%m-%dT%H:%M:%S.%fZ', '%Y-%m-%dT%H:%M:%SZ']


def clean_text(v) -> str:
    """Drop any markup from free text.

    bleach escapes the characters it keeps, so entities are decoded again
    afterwards: values such as "K+ < 3.5 & Na > 145" are stored as sent.
    """
    text = '' if v is None else str(v).strip()
    return html.unescape(bleach.clean(text, tags=set(), strip=True))


class EmergencyContactSerializer(serializers.Serializer):
    fullName = serializers.CharField(max_length=255)
    phoneNumber = serializers.CharField(max_length=32)
    email = serializers.EmailField()
    relationship = serializers.CharField(max_length=100)


class PhysicalInfoSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    diagnosis = serializers.CharField()
    phone = serializers.CharField(max_length=32)
    address = serializers.CharField(max_length=255)
    notes = serializers.CharField(required=False, allow_blank=True)

    def validate_notes(self, v):
        return clean_text(v)


class DoctorDiagnosisSerializer(serializers.Serializer):
    knownMedicalConditions = serializers.CharField(required=False, allow_blank=True)
    allergies = serializers.CharField(required=False, allow_blank=True)


class PatientSerializer(serializers.Serializer):
    firstName = serializers.CharField(max_length=100)
    lastName = serializers.CharField(max_length=100)
    gender = serializers.ChoiceField(choices=GENDERS)
    phoneNumber = serializers.CharField(max_length=32)
    dateOfBirth = serializers.DateField(input_formats=DATE_INPUT_FORMATS)
    bloodType = serializers.CharField(max_length=8)
    email = serializers.EmailField()
    address = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=100)
    state = serializers.CharField(max_length=100)
    zipCode = serializers.CharField(max_length=20)
    emergencyContacts = EmergencyContactSerializer(many=True, required=False)
    physicalInfo = PhysicalInfoSerializer(many=True, required=False)
    doctorDiagnosis = DoctorDiagnosisSerializer(required=False, allow_null=True)
