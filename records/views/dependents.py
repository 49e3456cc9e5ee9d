"""
Views for the records attached to a patient.

Emergency contacts, physical information, the doctor diagnosis and lab
results each get small single-row endpoints.  Paths scoped by
``/patient/<id>/...`` act on that patient; paths keyed by the record's
own id (``/emergency-contact/<id>`` and so on) act on the record.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status

from records.serializers.render import (
    render_contact,
    render_diagnosis,
    render_lab_result,
    render_physical_info,
)
from records.services import dependents as dependent_service


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def emergency_contacts(request, pk: int):
    contact = dependent_service.add_emergency_contact(pk, request.data)
    return Response(
        {'message': 'Emergency contact added', 'success': True, 'contact': render_contact(contact)},
        status=status.HTTP_201_CREATED,
    )


@api_view(['PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def emergency_contact_detail(request, pk: int):
    if request.method == 'PUT':
        contact = dependent_service.update_emergency_contact(pk, request.data)
        return Response({'message': 'Contact updated', 'success': True, 'contact': render_contact(contact)})
    dependent_service.delete_emergency_contact(pk)
    return Response({'message': 'Contact deleted', 'success': True})


@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def diagnosis(request, pk: int):
    if request.method == 'GET':
        found = dependent_service.get_diagnosis(pk)
        return Response({'message': 'Diagnosis retrieved', 'success': True, 'diagnosis': render_diagnosis(found)})
    updated = dependent_service.upsert_diagnosis(pk, request.data)
    return Response({'message': 'Diagnosis updated', 'success': True, 'diagnosis': render_diagnosis(updated)})


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def lab_results(request, pk: int):
    if request.method == 'GET':
        results = dependent_service.get_lab_results(pk)
        return Response({
            'message': 'Lab results retrieved',
            'success': True,
            'results': [render_lab_result(r, with_doctor=True) for r in results],
        })
    result = dependent_service.add_lab_result(pk, request.data, doctor_id=request.user.id)
    return Response(
        {'message': 'Lab result added', 'success': True, 'labResult': render_lab_result(result)},
        status=status.HTTP_201_CREATED,
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def lab_result_detail(request, pk: int):
    result = dependent_service.get_lab_result(pk)
    return Response({
        'message': 'Lab result retrieved',
        'success': True,
        'result': render_lab_result(result, with_doctor=True, with_patient=True),
    })


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def physical_info(request, pk: int):
    info = dependent_service.add_physical_info(pk, request.data)
    return Response(
        {'message': 'Physical info added', 'success': True, 'info': render_physical_info(info)},
        status=status.HTTP_201_CREATED,
    )


@api_view(['PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def physical_info_detail(request, pk: int):
    if request.method == 'PUT':
        info = dependent_service.update_physical_info(pk, request.data)
        return Response({'message': 'Physical info updated', 'success': True, 'info': render_physical_info(info)})
    dependent_service.delete_physical_info(pk)
    return Response({'message': 'Physical info deleted', 'success': True})
