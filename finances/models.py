from django.db import models
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from decimal import Decimal
from core.constants import FinanceType, FinanceCategory
from core.exceptions import ValidationError as AppValidationError
from core.validators import FinanceValidator
from properties.models import Property, Room


class Finance(models.Model):
    """Income or expense entry for a property (optionally a single room)"""
    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name='finances')
    room = models.ForeignKey(Room, on_delete=models.SET_NULL, related_name='finances',
                             null=True, blank=True)
    type = models.CharField(max_length=10, choices=FinanceType.choices)
    category = models.CharField(max_length=30, choices=FinanceCategory.choices)
    amount = models.DecimalField(max_digits=12, decimal_places=2,
                                 validators=[MinValueValidator(Decimal('0.01'))])
    description = models.TextField(null=True, blank=True)
    date = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date', '-created_at']
        verbose_name = "Finance"
        verbose_name_plural = "Finances"
        indexes = [
            models.Index(fields=['date'], name='finance_date_idx'),
            models.Index(fields=['property', 'date'], name='finance_property_date_idx'),
            models.Index(fields=['type', 'date'], name='finance_type_date_idx'),
        ]

    def __str__(self):
        return f"{self.date} {self.get_type_display()} {self.get_category_display()} {self.amount}"

    def clean(self):
        errors = {}
        if self.type and self.category:
            try:
                FinanceValidator.validate_category(self.type, self.category)
            except AppValidationError as e:
                errors['category'] = e.message
        if self.room_id and self.property_id and self.room.property_id != self.property_id:
            errors['room'] = "Room does not belong to this property"
        if errors:
            raise ValidationError(errors)
