from rest_framework import serializers

ROLES = ['ADMIN', 'DOCTOR', 'STAFF']

EMAIL_MESSAGES = {
    'required': 'Email is required',
    'blank': 'Email is required',
    'null': 'Email is required',
    'invalid': 'Email must be a valid email address',
}

PASSWORD_MESSAGES = {
    'required': 'Password is required',
    'blank': 'Password is required',
    'null': 'Password is required',
    'min_length': 'Password must be at least 5 characters long',
}


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages=EMAIL_MESSAGES)
    password = serializers.CharField(min_length=5, trim_whitespace=False, error_messages=PASSWORD_MESSAGES)


class SignupSerializer(serializers.Serializer):
    fullName = serializers.CharField(max_length=255, error_messages={
        'required': 'First name is required',
        'blank': 'First name is required',
        'null': 'First name is required',
    })
    role = serializers.ChoiceField(choices=ROLES, error_messages={
        'required': 'Role is required',
        'null': 'Role is required',
        'invalid_choice': 'Role must be one of ADMIN, DOCTOR, or STAFF',
    })
    email = serializers.EmailField(error_messages=EMAIL_MESSAGES)
    password = serializers.CharField(min_length=5, trim_whitespace=False, error_messages=PASSWORD_MESSAGES)
