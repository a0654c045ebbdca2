from rest_framework import serializers
from core.exceptions import ValidationError as AppValidationError
from core.validators import RoomStatusValidator
from .models import Property, Room


class PropertySerializer(serializers.ModelSerializer):
    """Serializer for Property"""
    total_rooms = serializers.ReadOnlyField()
    vacant_rooms = serializers.ReadOnlyField()
    occupancy_rate = serializers.ReadOnlyField()

    class Meta:
        model = Property
        fields = [
            'id', 'name', 'address', 'description',
            'total_rooms', 'vacant_rooms', 'occupancy_rate',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class RoomSerializer(serializers.ModelSerializer):
    """Serializer for Room"""
    property_name = serializers.CharField(source='property.name', read_only=True)
    current_tenant = serializers.SerializerMethodField()

    class Meta:
        model = Room
        fields = [
            'id', 'property', 'property_name', 'room_number', 'floor',
            'rent', 'management_fee', 'deposit', 'key_money',
            'room_type', 'area', 'status', 'description',
            'current_tenant', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_current_tenant(self, obj):
        tenant = obj.current_tenant()
        if tenant is None:
            return None
        return {'id': tenant.id, 'name': tenant.name, 'move_in_date': tenant.move_in_date}

    def validate_status(self, value):
        """A new room has no tenant, so it can only start vacant or reserved"""
        if self.instance is None:
            try:
                RoomStatusValidator.validate_manual_status(value, has_active_tenant=False)
            except AppValidationError as e:
                raise serializers.ValidationError(e.message)
        return value


class RoomListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    property_name = serializers.CharField(source='property.name', read_only=True)

    class Meta:
        model = Room
        fields = [
            'id', 'property', 'property_name', 'room_number', 'floor',
            'rent', 'room_type', 'status'
        ]


# Public listing - only what a prospective tenant needs to see

class PublicRoomSerializer(serializers.ModelSerializer):
    monthly_cost = serializers.SerializerMethodField()

    class Meta:
        model = Room
        fields = [
            'id', 'room_number', 'floor', 'rent', 'management_fee',
            'deposit', 'key_money', 'monthly_cost', 'room_type', 'area', 'description'
        ]

    def get_monthly_cost(self, obj):
        return obj.monthly_cost()


class PublicPropertyListSerializer(serializers.ModelSerializer):
    vacant_room_count = serializers.IntegerField(read_only=True)
    min_rent = serializers.SerializerMethodField()

    class Meta:
        model = Property
        fields = ['id', 'name', 'address', 'description', 'vacant_room_count', 'min_rent']

    def get_min_rent(self, obj):
        """Lowest rent among vacant rooms, 0 when there are none"""
        return obj.min_rent if obj.min_rent is not None else 0


class PublicPropertyDetailSerializer(serializers.ModelSerializer):
    vacant_rooms = PublicRoomSerializer(source='vacant_room_list', many=True, read_only=True)

    class Meta:
        model = Property
        fields = ['id', 'name', 'address', 'description', 'vacant_rooms']
