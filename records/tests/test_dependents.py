from records.models import Admin, DoctorDiagnosis, EmergencyContact, LabResult, PhysicalInformation
from records.services.auth import hash_password


# ---------------------------------------------------------------------
# Emergency contacts
# ---------------------------------------------------------------------
def test_add_update_delete_contact(auth_client, patient):
    body = {'fullName': 'Mary Roe', 'phoneNumber': '555-0111', 'email': 'mary@example.com', 'relationship': 'Sister'}
    r = auth_client.post(f"/patient/{patient['id']}/emergency-contacts", body, format='json')
    assert r.status_code == 201
    assert r.data['message'] == 'Emergency contact added'
    contact = r.data['contact']
    assert contact['patientId'] == patient['id']
    assert EmergencyContact.objects.filter(patient_id=patient['id']).count() == 2

    r = auth_client.put(f"/emergency-contact/{contact['id']}", {'phoneNumber': '555-9999'}, format='json')
    assert r.status_code == 200
    assert r.data['message'] == 'Contact updated'
    assert r.data['contact']['phoneNumber'] == '555-9999'
    assert r.data['contact']['fullName'] == 'Mary Roe'

    r = auth_client.delete(f"/emergency-contact/{contact['id']}")
    assert r.status_code == 200
    assert r.data == {'message': 'Contact deleted', 'success': True}
    assert not EmergencyContact.objects.filter(id=contact['id']).exists()


def test_contact_for_missing_patient(auth_client):
    r = auth_client.post('/patient/9999/emergency-contacts', {'fullName': 'X'}, format='json')
    assert r.status_code == 404
    assert r.data['message'] == 'Patient not found'


def test_update_and_delete_missing_contact(auth_client):
    assert auth_client.put('/emergency-contact/9999', {'fullName': 'X'}, format='json').status_code == 404
    r = auth_client.delete('/emergency-contact/9999')
    assert r.status_code == 404
    assert r.data['message'] == 'Emergency contact not found'


# ---------------------------------------------------------------------
# Doctor diagnosis
# ---------------------------------------------------------------------
def test_upsert_diagnosis_keeps_a_single_row(auth_client, patient):
    url = f"/patient/{patient['id']}/diagnosis"
    r = auth_client.put(url, {'knownMedicalConditions': 'Asthma', 'allergies': 'Dust'}, format='json')
    assert r.status_code == 200
    assert r.data['message'] == 'Diagnosis updated'

    r = auth_client.put(url, {'knownMedicalConditions': 'Hypertension', 'allergies': 'None'}, format='json')
    assert r.status_code == 200
    assert DoctorDiagnosis.objects.filter(patient_id=patient['id']).count() == 1

    r = auth_client.get(url)
    assert r.status_code == 200
    assert r.data['diagnosis']['knownMedicalConditions'] == 'Hypertension'
    assert r.data['diagnosis']['allergies'] == 'None'


def test_get_diagnosis_when_none_recorded(auth_client, patient):
    r = auth_client.get(f"/patient/{patient['id']}/diagnosis")
    assert r.status_code == 404
    assert r.data == {'message': 'No diagnosis found', 'success': False}


def test_upsert_diagnosis_for_missing_patient(auth_client):
    r = auth_client.put('/patient/9999/diagnosis', {'allergies': 'None'}, format='json')
    assert r.status_code == 404
    assert not DoctorDiagnosis.objects.exists()


# ---------------------------------------------------------------------
# Lab results
# ---------------------------------------------------------------------
def test_lab_result_doctor_defaults_to_caller(auth_client, admin_account, patient):
    r = auth_client.post(f"/patient/{patient['id']}/lab-results", {'message': 'CBC normal'}, format='json')
    assert r.status_code == 201
    assert r.data['message'] == 'Lab result added'
    assert r.data['labResult']['doctorId'] == admin_account.id
    assert r.data['labResult']['message'] == 'CBC normal'


def test_lab_result_with_explicit_doctor(auth_client, patient):
    other = Admin.objects.create(
        full_name='Dr. Wilson', email='wilson@example.com', password=hash_password('onc0logy'), role='DOCTOR'
    )
    r = auth_client.post(
        f"/patient/{patient['id']}/lab-results", {'message': 'MRI clear', 'doctorId': other.id}, format='json'
    )
    assert r.status_code == 201
    assert LabResult.objects.get(id=r.data['labResult']['id']).doctor_id == other.id


def test_lab_result_with_unknown_doctor(auth_client, patient):
    r = auth_client.post(
        f"/patient/{patient['id']}/lab-results", {'message': 'MRI clear', 'doctorId': 9999}, format='json'
    )
    assert r.status_code == 404
    assert r.data['message'] == 'Doctor not found'
    assert not LabResult.objects.exists()


def test_list_and_fetch_lab_results(auth_client, admin_account, patient):
    url = f"/patient/{patient['id']}/lab-results"
    auth_client.post(url, {'message': 'first'}, format='json')
    created = auth_client.post(url, {'message': 'second'}, format='json').data['labResult']

    r = auth_client.get(url)
    assert r.status_code == 200
    assert [x['message'] for x in r.data['results']] == ['second', 'first']
    doctor = r.data['results'][0]['doctor']
    assert doctor['id'] == admin_account.id
    assert 'password' not in doctor

    r = auth_client.get(f"/lab-result/{created['id']}")
    assert r.status_code == 200
    result = r.data['result']
    assert result['message'] == 'second'
    assert result['patient']['id'] == patient['id']
    assert 'password' not in result['doctor']


def test_lab_results_for_patient_without_any(auth_client, patient):
    r = auth_client.get(f"/patient/{patient['id']}/lab-results")
    assert r.status_code == 200
    assert r.data['results'] == []


def test_missing_lab_result(auth_client):
    r = auth_client.get('/lab-result/9999')
    assert r.status_code == 404
    assert r.data['message'] == 'Lab result not found'


# ---------------------------------------------------------------------
# Physical information
# ---------------------------------------------------------------------
def test_add_update_delete_physical_info(auth_client, patient):
    body = {'name': 'Dr. Cuddy', 'diagnosis': 'Migraine', 'phone': '555-0123', 'address': 'PPTH'}
    r = auth_client.post(f"/patient/{patient['id']}/physical-info", body, format='json')
    assert r.status_code == 201
    assert r.data['message'] == 'Physical info added'
    info = r.data['info']
    assert info['notes'] == ''

    r = auth_client.put(f"/physical-info/{info['id']}", {'notes': 'Prescribed rest'}, format='json')
    assert r.status_code == 200
    assert r.data['info']['notes'] == 'Prescribed rest'
    assert r.data['info']['diagnosis'] == 'Migraine'

    r = auth_client.delete(f"/physical-info/{info['id']}")
    assert r.status_code == 200
    assert r.data['message'] == 'Physical info deleted'
    assert not PhysicalInformation.objects.filter(id=info['id']).exists()


def test_missing_physical_info(auth_client):
    r = auth_client.put('/physical-info/9999', {'notes': 'x'}, format='json')
    assert r.status_code == 404
    assert r.data['message'] == 'Physical info not found'
    assert auth_client.delete('/physical-info/9999').status_code == 404


def test_lab_message_keeps_comparison_characters(auth_client, patient):
    r = auth_client.post(
        f"/patient/{patient['id']}/lab-results", {'message': 'K+ < 3.5 & Na > 145'}, format='json'
    )
    assert r.status_code == 201
    assert r.data['labResult']['message'] == 'K+ < 3.5 & Na > 145'
    assert LabResult.objects.get().message == 'K+ < 3.5 & Na > 145'


def test_lab_result_with_non_numeric_doctor(auth_client, patient):
    r = auth_client.post(
        f"/patient/{patient['id']}/lab-results", {'message': 'MRI clear', 'doctorId': 'abc'}, format='json'
    )
    assert r.status_code == 404
    assert r.data['message'] == 'Doctor not found'
    assert not LabResult.objects.exists()


def test_physical_info_notes_are_cleaned_on_every_write(auth_client, patient):
    body = {
        'name': 'Dr. Cuddy',
        'diagnosis': 'Tachycardia',
        'phone': '555-0123',
        'address': 'PPTH',
        'notes': '<b>Rest</b> if HR > 100',
    }
    r = auth_client.post(f"/patient/{patient['id']}/physical-info", body, format='json')
    assert r.status_code == 201
    assert r.data['info']['notes'] == 'Rest if HR > 100'

    r = auth_client.put(
        f"/physical-info/{r.data['info']['id']}", {'notes': '<i>Recheck</i> & log < 5 min'}, format='json'
    )
    assert r.status_code == 200
    assert r.data['info']['notes'] == 'Recheck & log < 5 min'
