from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers
from .models import Admin


class AdminSerializer(serializers.ModelSerializer):
    """Serializer for Admin accounts. The password is write-only and hashed."""
    password = serializers.CharField(write_only=True, required=False, style={'input_type': 'password'})
    created_at = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = Admin
        fields = ['id', 'email', 'name', 'role', 'is_active', 'password', 'created_at', 'updated_at', 'last_login']
        read_only_fields = ['id', 'created_at', 'updated_at', 'last_login']

    def validate_password(self, value):
        validate_password(value)
        return value

    def validate(self, data):
        if self.instance is None and not data.get('password'):
            raise serializers.ValidationError({'password': "A password is required for a new admin"})
        return data

    def create(self, validated_data):
        password = validated_data.pop('password')
        return Admin.objects.create_user(password=password, **validated_data)

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        for key, value in validated_data.items():
            setattr(instance, key, value)
        if password:
            instance.set_password(password)
        instance.save()
        return instance
