from rest_framework import serializers
from .models import Tenant


class TenantSerializer(serializers.ModelSerializer):
    """
    Serializer for Tenant.

    Room and move dates are read-only here: they only change through the
    move-in / move-out operations.
    """
    is_active = serializers.ReadOnlyField()
    location = serializers.ReadOnlyField()
    property_id = serializers.IntegerField(source='room.property_id', read_only=True, allow_null=True)

    class Meta:
        model = Tenant
        fields = [
            'id', 'room', 'property_id', 'location', 'name', 'name_kana',
            'email', 'phone', 'emergency_contact', 'emergency_phone',
            'move_in_date', 'move_out_date', 'contract_start_date', 'contract_end_date',
            'is_active', 'notes', 'created_at', 'updated_at'
        ]
        read_only_fields = [
            'id', 'room', 'move_in_date', 'move_out_date',
            'created_at', 'updated_at'
        ]

    def validate(self, data):
        start = data.get('contract_start_date', getattr(self.instance, 'contract_start_date', None))
        end = data.get('contract_end_date', getattr(self.instance, 'contract_end_date', None))
        if start and end and end < start:
            raise serializers.ValidationError(
                {'contract_end_date': "Contract end date cannot be before contract start date"}
            )
        return data


class TenantListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    location = serializers.ReadOnlyField()
    is_active = serializers.ReadOnlyField()

    class Meta:
        model = Tenant
        fields = ['id', 'name', 'room', 'location', 'phone', 'move_in_date', 'move_out_date', 'is_active']
