from django.db import models
from django.core.exceptions import ValidationError
from core.exceptions import ValidationError as AppValidationError
from core.validators import TenancyValidator
from properties.models import Room


class Tenant(models.Model):
    """
    Tenant of a room.

    A tenant is active while move_out_date is null. Moving out keeps the
    room association so the tenant stays queryable for historical reports.
    """
    room = models.ForeignKey(Room, on_delete=models.SET_NULL, related_name='tenants',
                             null=True, blank=True)
    name = models.CharField(max_length=255)
    name_kana = models.CharField(max_length=255, null=True, blank=True,
                                 help_text="Phonetic reading of the name")
    email = models.EmailField(null=True, blank=True)
    phone = models.CharField(max_length=30, null=True, blank=True)
    emergency_contact = models.CharField(max_length=255, null=True, blank=True)
    emergency_phone = models.CharField(max_length=30, null=True, blank=True)

    move_in_date = models.DateField()
    move_out_date = models.DateField(null=True, blank=True)
    contract_start_date = models.DateField()
    contract_end_date = models.DateField()

    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = "Tenant"
        verbose_name_plural = "Tenants"
        indexes = [
            models.Index(fields=['room', 'move_out_date'], name='tenant_room_moveout_idx'),
            models.Index(fields=['move_out_date', 'created_at'], name='tenant_moveout_created_idx'),
            models.Index(fields=['name'], name='tenant_name_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.location})"

    def clean(self):
        """Contract end cannot precede its start, same as the API"""
        try:
            TenancyValidator.validate_contract_dates(self.contract_start_date, self.contract_end_date)
        except AppValidationError as e:
            raise ValidationError({'contract_end_date': e.message})

    @property
    def is_active(self):
        """Active iff no move-out has been recorded"""
        return self.move_out_date is None

    @property
    def location(self):
        """Human-readable location"""
        if self.room_id:
            return f"{self.room.property.name} - {self.room.room_number}"
        return "Unassigned"
