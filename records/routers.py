"""
URL mappings for the hospital administration API.

Paths keep the front-end's contract: no ``/api`` prefix and no trailing
slashes.  Everything except login, signup and the health check sits
behind the bearer token gate configured in ``REST_FRAMEWORK``.
"""
from django.urls import path, include

from .auth_views import login_view, signup_view
from .views import dependents, health, music, patients

urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Authentication
    path('login', login_view, name='login_view'),
    path('signup', signup_view, name='signup_view'),
    # Patients
    path('add-patient', patients.add_patient, name='add_patient'),
    path('patients', patients.list_patients, name='list_patients'),
    path('patient/<int:pk>', patients.patient_detail, name='patient_detail'),
    # Patient dependents
    path('patient/<int:pk>/emergency-contacts', dependents.emergency_contacts, name='emergency_contacts'),
    path('emergency-contact/<int:pk>', dependents.emergency_contact_detail, name='emergency_contact_detail'),
    path('patient/<int:pk>/diagnosis', dependents.diagnosis, name='diagnosis'),
    path('patient/<int:pk>/lab-results', dependents.lab_results, name='lab_results'),
    path('lab-result/<int:pk>', dependents.lab_result_detail, name='lab_result_detail'),
    path('patient/<int:pk>/physical-info', dependents.physical_info, name='physical_info'),
    path('physical-info/<int:pk>', dependents.physical_info_detail, name='physical_info_detail'),
    # Music search utility
    path('music/search', music.search_music, name='search_music'),
]
