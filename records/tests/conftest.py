import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from records.models import Admin
from records.services.auth import hash_password, issue_token

ADMIN_PASSWORD = 'P@ssw0rd1'


@pytest.fixture(autouse=True)
def _fast_hashing_and_fresh_throttles(settings):
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
    # throttle counters live in the cache and would leak between tests
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_account(db):
    return Admin.objects.create(
        full_name='Dr. Grey',
        email='grey@example.com',
        password=hash_password(ADMIN_PASSWORD),
        role='DOCTOR',
    )


@pytest.fixture
def auth_client(admin_account):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(admin_account)}')
    return client


def build_patient_payload(**overrides):
    payload = {
        'firstName': 'Jane',
        'lastName': 'Doe',
        'gender': 'Female',
        'phoneNumber': '555-0100',
        'dateOfBirth': '1990-05-01',
        'bloodType': 'O+',
        'email': 'jane.doe@example.com',
        'address': '1 Main St',
        'city': 'Springfield',
        'state': 'IL',
        'zipCode': '62701',
        'emergencyContacts': [
            {
                'fullName': 'John Doe',
                'phoneNumber': '555-0101',
                'email': 'john.doe@example.com',
                'relationship': 'Spouse',
            },
        ],
        'physicalInfo': [
            {
                'name': 'Dr. House',
                'diagnosis': 'Sprained ankle',
                'phone': '555-0199',
                'address': '2 Clinic Rd',
                'notes': 'Follow up in two weeks',
            },
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def patient_payload():
    return build_patient_payload


@pytest.fixture
def patient(auth_client, patient_payload):
    """A patient created through the API; returns its rendered JSON."""
    r = auth_client.post('/add-patient', patient_payload(), format='json')
    assert r.status_code == 201, r.data
    return r.data['patient']


@pytest.fixture
def admin_password():
    return ADMIN_PASSWORD
