from rest_framework import serializers
from .models import Maintenance


class MaintenanceSerializer(serializers.ModelSerializer):
    """Serializer for Maintenance"""
    property_name = serializers.CharField(source='property.name', read_only=True)
    room_number = serializers.CharField(source='room.room_number', read_only=True, allow_null=True)

    class Meta:
        model = Maintenance
        fields = [
            'id', 'property', 'property_name', 'room', 'room_number',
            'title', 'description', 'status', 'priority', 'cost',
            'reported_date', 'scheduled_date', 'completed_date',
            'contractor', 'notes', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate(self, data):
        prop = data.get('property', getattr(self.instance, 'property', None))
        room = data.get('room', getattr(self.instance, 'room', None))
        if room is not None and prop is not None and room.property_id != prop.id:
            raise serializers.ValidationError({'room': "Room does not belong to this property"})
        return data


class MaintenanceListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    property_name = serializers.CharField(source='property.name', read_only=True)
    room_number = serializers.CharField(source='room.room_number', read_only=True, allow_null=True)

    class Meta:
        model = Maintenance
        fields = [
            'id', 'property', 'property_name', 'room', 'room_number',
            'title', 'status', 'priority', 'cost', 'reported_date', 'completed_date'
        ]
