from django.utils import timezone
from rest_framework import serializers
from core.dto import MoveInDTO, MoveOutDTO
from .models import MoveHistory


class MoveInSerializer(serializers.Serializer):
    """Input for a move-in. room_id is optional when registering an unassigned tenant."""
    room_id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(max_length=255)
    name_kana = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    emergency_contact = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    emergency_phone = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    move_in_date = serializers.DateField()
    contract_start_date = serializers.DateField(required=False, allow_null=True)
    contract_end_date = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    move_notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def to_dto(self, room_id=None) -> MoveInDTO:
        data = dict(self.validated_data)
        if room_id is not None:
            data['room_id'] = room_id
        return MoveInDTO(**data)


class MoveOutSerializer(serializers.Serializer):
    """Input for a move-out. The date defaults to today."""
    move_out_date = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def to_dto(self, tenant_id) -> MoveOutDTO:
        return MoveOutDTO(
            tenant_id=tenant_id,
            move_out_date=self.validated_data.get('move_out_date') or timezone.localdate(),
            notes=self.validated_data.get('notes') or None,
        )


class MoveHistorySerializer(serializers.ModelSerializer):
    """Read-only serializer for move history"""
    tenant_name = serializers.CharField(source='tenant.name', read_only=True, allow_null=True)
    room_number = serializers.CharField(source='room.room_number', read_only=True, allow_null=True)
    property_name = serializers.CharField(source='room.property.name', read_only=True, allow_null=True)

    class Meta:
        model = MoveHistory
        fields = [
            'id', 'room', 'room_number', 'property_name', 'tenant', 'tenant_name',
            'move_type', 'move_date', 'notes', 'created_at'
        ]
        read_only_fields = fields
