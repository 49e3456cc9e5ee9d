"""
Patient aggregate views.

Every endpoint here sits behind the bearer token gate.  Bodies for
create and edit are validated against :class:`PatientSerializer`
before anything is written; edit replaces the dependents wholesale.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status

from records.serializers.patient import PatientSerializer
from records.serializers.render import render_patient
from records.services import patients as patient_service
from records.validation import validate_payload


def _validated_patient(request) -> dict:
    result = validate_payload(PatientSerializer, request.data)
    if not result.ok:
        raise ValidationError(f'Validation Error: {result.error}')
    return result.value


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def add_patient(request):
    data = _validated_patient(request)
    patient = patient_service.add_patient(data)
    return Response({
        'message': 'Patient created successfully.',
        'success': True,
        'patient': render_patient(patient),
    }, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_patients(request):
    patients = patient_service.list_patients()
    return Response({
        'message': 'Patients retrieved successfully.',
        'data': [render_patient(p, with_counts=True) for p in patients],
        'success': True,
    })


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def patient_detail(request, pk: int):
    if request.method == 'GET':
        patient = patient_service.get_patient(pk)
        return Response({
            'message': 'Patient retrieved successfully.',
            'data': render_patient(patient, with_counts=True),
            'success': True,
        })
    if request.method == 'PUT':
        data = _validated_patient(request)
        patient = patient_service.edit_patient(pk, data)
        return Response({
            'message': 'Patient updated successfully.',
            'success': True,
            'patient': render_patient(patient),
        })
    # DELETE
    patient_service.delete_patient(pk)
    return Response({'message': 'Patient deleted successfully.', 'success': True})
