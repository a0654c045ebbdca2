from rest_framework import serializers


class SessionLoginSerializer(serializers.Serializer):
    """Email + password for session sign-in"""
    email = serializers.EmailField()
    password = serializers.CharField(style={'input_type': 'password'}, trim_whitespace=False)
