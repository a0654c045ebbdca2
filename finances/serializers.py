from rest_framework import serializers
from core.exceptions import ValidationError as AppValidationError
from core.validators import FinanceValidator
from .models import Finance


class FinanceSerializer(serializers.ModelSerializer):
    """Serializer for Finance"""
    property_name = serializers.CharField(source='property.name', read_only=True)
    room_number = serializers.CharField(source='room.room_number', read_only=True, allow_null=True)

    class Meta:
        model = Finance
        fields = [
            'id', 'property', 'property_name', 'room', 'room_number',
            'type', 'category', 'amount', 'description', 'date',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_amount(self, value):
        try:
            FinanceValidator.validate_amount(value)
        except AppValidationError as e:
            raise serializers.ValidationError(e.message)
        return value

    def validate(self, data):
        finance_type = data.get('type', getattr(self.instance, 'type', None))
        category = data.get('category', getattr(self.instance, 'category', None))
        try:
            FinanceValidator.validate_category(finance_type, category)
        except AppValidationError as e:
            raise serializers.ValidationError({'category': e.message})

        prop = data.get('property', getattr(self.instance, 'property', None))
        room = data.get('room', getattr(self.instance, 'room', None))
        if room is not None and prop is not None and room.property_id != prop.id:
            raise serializers.ValidationError({'room': "Room does not belong to this property"})
        return data
