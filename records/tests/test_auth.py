from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest
from rest_framework_simplejwt.tokens import AccessToken

from records.authentication import AdminIdentity, BearerTokenAuthentication
from records.models import Admin
from records.services.auth import issue_token, verify_password

SIGNUP = {
    'fullName': 'Alice Admin',
    'email': 'alice@example.com',
    'password': 's3cret!',
    'role': 'ADMIN',
}


@pytest.mark.django_db
def test_signup_returns_token_and_public_view(api_client):
    r = api_client.post('/signup', SIGNUP, format='json')
    assert r.status_code == 200
    assert r.data['message'] == 'Account Created Successfully'
    assert r.data['success'] is True
    assert r.data['admin']['email'] == 'alice@example.com'
    assert r.data['admin']['fullName'] == 'Alice Admin'
    assert r.data['admin']['role'] == 'ADMIN'
    assert 'password' not in r.data['admin']

    claims = AccessToken(r.data['token'])
    assert claims['id'] == r.data['admin']['id']
    assert claims['email'] == 'alice@example.com'
    assert claims['role'] == 'ADMIN'


@pytest.mark.django_db
def test_signup_stores_a_hash_not_the_password(api_client):
    api_client.post('/signup', SIGNUP, format='json')
    stored = Admin.objects.get(email='alice@example.com').password
    assert stored != SIGNUP['password']
    assert verify_password(SIGNUP['password'], stored)


@pytest.mark.django_db
def test_duplicate_signup_is_rejected(api_client):
    assert api_client.post('/signup', SIGNUP, format='json').status_code == 200
    r = api_client.post('/signup', {**SIGNUP, 'fullName': 'Someone Else'}, format='json')
    assert r.status_code == 400
    assert r.data == {'message': 'User Already Exsists', 'success': False}
    assert Admin.objects.filter(email='alice@example.com').count() == 1


@pytest.mark.django_db
@pytest.mark.parametrize('overrides, message', [
    ({'fullName': ''}, 'fullName: First name is required'),
    ({'email': 'not-an-email'}, 'email: Email must be a valid email address'),
    ({'password': 'abc'}, 'password: Password must be at least 5 characters long'),
    ({'role': 'NURSE'}, 'role: Role must be one of ADMIN, DOCTOR, or STAFF'),
])
def test_signup_validation_messages(api_client, overrides, message):
    r = api_client.post('/signup', {**SIGNUP, **overrides}, format='json')
    assert r.status_code == 400
    assert r.data['message'] == message
    assert not Admin.objects.exists()


@pytest.mark.django_db
def test_signup_reports_only_the_first_error(api_client):
    r = api_client.post('/signup', {'role': 'NURSE'}, format='json')
    assert r.status_code == 400
    assert r.data['message'] == 'fullName: First name is required'


def test_login_success(api_client, admin_account, admin_password):
    r = api_client.post('/login', {'email': admin_account.email, 'password': admin_password}, format='json')
    assert r.status_code == 200
    assert r.data['message'] == 'Sign In Successful'
    assert r.data['admin'] == {
        'id': admin_account.id,
        'email': admin_account.email,
        'fullName': admin_account.full_name,
        'role': 'DOCTOR',
    }
    assert AccessToken(r.data['token'])['id'] == admin_account.id


def test_login_wrong_password(api_client, admin_account):
    r = api_client.post('/login', {'email': admin_account.email, 'password': 'wrong-pass'}, format='json')
    assert r.status_code == 401
    assert r.data == {'message': 'Invalid Password', 'success': False}


@pytest.mark.django_db
def test_login_unknown_email(api_client):
    r = api_client.post('/login', {'email': 'nobody@example.com', 'password': 'whatever'}, format='json')
    assert r.status_code == 404
    assert r.data['message'] == 'Admin not found'


@pytest.mark.django_db
def test_login_validation_message(api_client):
    r = api_client.post('/login', {'password': 'whatever'}, format='json')
    assert r.status_code == 400
    assert r.data['message'] == 'email: Email is required'


def test_login_ignores_a_stale_token(api_client, admin_account, admin_password):
    api_client.credentials(HTTP_AUTHORIZATION='Bearer stale.garbage.token')
    r = api_client.post('/login', {'email': admin_account.email, 'password': admin_password}, format='json')
    assert r.status_code == 200


# ---------------------------------------------------------------------
# Bearer token gate
# ---------------------------------------------------------------------
@pytest.mark.django_db
def test_gate_rejects_missing_header(api_client):
    r = api_client.get('/patients')
    assert r.status_code == 401
    assert r.data == {'error': 'Authorization token missing or invalid', 'success': False}


def test_gate_rejects_other_schemes(api_client, admin_account):
    api_client.credentials(HTTP_AUTHORIZATION=f'Token {issue_token(admin_account)}')
    r = api_client.get('/patients')
    assert r.status_code == 401
    assert r.data['error'] == 'Authorization token missing or invalid'


@pytest.mark.django_db
def test_gate_rejects_garbage_token(api_client):
    api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-jwt')
    r = api_client.get('/patients')
    assert r.status_code == 401
    assert r.data == {'error': 'Invalid or expired token', 'success': False}


def test_gate_rejects_tampered_signature(api_client, admin_account):
    header, payload, sig = issue_token(admin_account).split('.')
    sig = ('A' if sig[0] != 'A' else 'B') + sig[1:]
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {header}.{payload}.{sig}')
    r = api_client.get('/patients')
    assert r.status_code == 401
    assert r.data['error'] == 'Invalid or expired token'


def test_gate_rejects_expired_token(api_client, admin_account):
    token = AccessToken()
    token['id'] = admin_account.id
    token['email'] = admin_account.email
    token['role'] = admin_account.role
    token.set_exp(lifetime=-timedelta(minutes=5))
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    r = api_client.get('/patients')
    assert r.status_code == 401
    assert r.data['error'] == 'Invalid or expired token'


@pytest.mark.django_db
def test_gate_rejects_token_without_identity_claims(api_client):
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken()}')
    r = api_client.get('/patients')
    assert r.status_code == 401
    assert r.data['error'] == 'Invalid or expired token'


def test_gate_accepts_valid_token(auth_client):
    r = auth_client.get('/patients')
    assert r.status_code == 200
    assert r.data['success'] is True


def test_identity_is_built_from_claims(admin_account):
    validated = AccessToken(issue_token(admin_account))
    identity = BearerTokenAuthentication().get_user(validated)
    assert identity == AdminIdentity(id=admin_account.id, email=admin_account.email, role='DOCTOR')
    assert identity.is_authenticated
    with pytest.raises(FrozenInstanceError):
        identity.role = 'ADMIN'


@pytest.mark.django_db
def test_signup_then_login_issue_matching_tokens(api_client):
    r = api_client.post('/signup', SIGNUP, format='json')
    assert r.status_code == 200
    signup_claims = AccessToken(r.data['token'])

    r = api_client.post('/login', {'email': SIGNUP['email'], 'password': SIGNUP['password']}, format='json')
    assert r.status_code == 200
    login_claims = AccessToken(r.data['token'])

    for claim in ('id', 'email', 'role'):
        assert login_claims[claim] == signup_claims[claim]
    assert login_claims['email'] == 'alice@example.com'
    assert login_claims['role'] == 'ADMIN'


@pytest.mark.django_db
def test_signup_accepts_a_five_character_password(api_client):
    r = api_client.post('/signup', {**SIGNUP, 'password': 'abcde'}, format='json')
    assert r.status_code == 200
    r = api_client.post('/login', {'email': SIGNUP['email'], 'password': 'abcde'}, format='json')
    assert r.status_code == 200


@pytest.mark.django_db
@pytest.mark.parametrize('header', ['Bearer', 'Bearer one two'])
def test_gate_treats_malformed_bearer_header_as_missing(api_client, header):
    api_client.credentials(HTTP_AUTHORIZATION=header)
    r = api_client.get('/patients')
    assert r.status_code == 401
    assert r.data == {'error': 'Authorization token missing or invalid', 'success': False}
