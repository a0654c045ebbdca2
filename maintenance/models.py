from django.db import models
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.utils import timezone
from core.constants import MaintenanceStatus, MaintenancePriority
from properties.models import Property, Room


class Maintenance(models.Model):
    """Repair / maintenance ticket for a property or one of its rooms"""
    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name='maintenance_tickets')
    room = models.ForeignKey(Room, on_delete=models.SET_NULL, related_name='maintenance_tickets',
                             null=True, blank=True)
    title = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=MaintenanceStatus.choices,
                              default=MaintenanceStatus.PENDING)
    priority = models.CharField(max_length=20, choices=MaintenancePriority.choices,
                                default=MaintenancePriority.MEDIUM)
    cost = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True,
                               validators=[MinValueValidator(0)])
    reported_date = models.DateField(default=timezone.localdate)
    scheduled_date = models.DateField(null=True, blank=True)
    completed_date = models.DateField(null=True, blank=True)
    contractor = models.CharField(max_length=255, null=True, blank=True,
                                  help_text="e.g., 'Plumber', contractor company name")
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-reported_date', '-created_at']
        verbose_name = "Maintenance"
        verbose_name_plural = "Maintenance"
        indexes = [
            models.Index(fields=['property', 'status'], name='maint_property_status_idx'),
            models.Index(fields=['status', 'priority'], name='maint_status_priority_idx'),
            models.Index(fields=['reported_date'], name='maint_reported_idx'),
        ]

    def __str__(self):
        return f"{self.property.name} - {self.title} ({self.get_status_display()})"

    def clean(self):
        if self.room_id and self.property_id and self.room.property_id != self.property_id:
            raise ValidationError({'room': "Room does not belong to this property"})

    def save(self, *args, **kwargs):
        """Auto-set completed_date when status changes to COMPLETED"""
        if self.status == MaintenanceStatus.COMPLETED and not self.completed_date:
            self.completed_date = timezone.localdate()
        super().save(*args, **kwargs)
