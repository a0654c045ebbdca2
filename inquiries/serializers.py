from rest_framework import serializers
from core.constants import InquiryStatus
from properties.models import Room
from .models import Inquiry


class InquirySerializer(serializers.ModelSerializer):
    """Serializer for Inquiry (admin side)"""
    property_name = serializers.CharField(source='property.name', read_only=True, allow_null=True)
    room_number = serializers.CharField(source='room.room_number', read_only=True, allow_null=True)
    tenant_name = serializers.CharField(source='tenant.name', read_only=True, allow_null=True)

    class Meta:
        model = Inquiry
        fields = [
            'id', 'property', 'property_name', 'room', 'room_number', 'tenant', 'tenant_name',
            'inquirer_type', 'name', 'email', 'phone', 'subject', 'message',
            'status', 'response', 'responded_at', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'responded_at', 'created_at', 'updated_at']

    def validate(self, data):
        prop = data.get('property', getattr(self.instance, 'property', None))
        room = data.get('room', getattr(self.instance, 'room', None))
        if room is not None and prop is not None and room.property_id != prop.id:
            raise serializers.ValidationError({'room': "Room does not belong to this property"})
        return data


class InquiryListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    property_name = serializers.CharField(source='property.name', read_only=True, allow_null=True)

    class Meta:
        model = Inquiry
        fields = [
            'id', 'inquirer_type', 'name', 'email', 'subject',
            'property_name', 'status', 'responded_at', 'created_at'
        ]


class InquiryRespondSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=InquiryStatus.choices)
    response = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class PublicInquirySerializer(serializers.Serializer):
    """
    Visitor inquiry form on the public listing.
    The property comes from the URL; the room, if given, must belong to it.
    """
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    subject = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    message = serializers.CharField()
    room = serializers.PrimaryKeyRelatedField(queryset=Room.objects.all(), required=False, allow_null=True)

    def validate_room(self, value):
        prop = self.context.get('property')
        if value is not None and prop is not None and value.property_id != prop.id:
            raise serializers.ValidationError("Room does not belong to this property")
        return value
