from django.db import models
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from core.constants import RoomStatus
from core.exceptions import ValidationError as AppValidationError
from core.validators import RoomStatusValidator


class Property(models.Model):
    """Rental property (building) managed from the back office"""
    name = models.CharField(max_length=255)
    address = models.TextField()
    description = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Property"
        verbose_name_plural = "Properties"
        indexes = [
            models.Index(fields=['name'], name='property_name_idx'),
        ]

    def __str__(self):
        return self.name

    @property
    def total_rooms(self):
        """Total rooms in this property - CACHED per instance"""
        if not hasattr(self, '_total_rooms_cache'):
            self._total_rooms_cache = self.rooms.count()
        return self._total_rooms_cache

    @property
    def vacant_rooms(self):
        """Vacant rooms count - CACHED per instance"""
        if not hasattr(self, '_vacant_rooms_cache'):
            self._vacant_rooms_cache = self.rooms.filter(status=RoomStatus.VACANT).count()
        return self._vacant_rooms_cache

    @property
    def occupancy_rate(self):
        from dashboard.stats import occupancy_rate
        return occupancy_rate(self.total_rooms, self.vacant_rooms)


class Room(models.Model):
    """Room (or bed) inside a property. At most one active tenant at a time."""
    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name='rooms')
    room_number = models.CharField(max_length=50, help_text="e.g., '101', 'A-2'")
    floor = models.IntegerField(null=True, blank=True)

    rent = models.DecimalField(max_digits=12, decimal_places=2, default=0, validators=[MinValueValidator(0)])
    management_fee = models.DecimalField(max_digits=12, decimal_places=2, default=0, validators=[MinValueValidator(0)])
    deposit = models.DecimalField(max_digits=12, decimal_places=2, default=0, validators=[MinValueValidator(0)])
    key_money = models.DecimalField(max_digits=12, decimal_places=2, default=0, validators=[MinValueValidator(0)])

    room_type = models.CharField(max_length=50, null=True, blank=True, help_text="e.g., '1K', '1LDK', bed label")
    area = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True,
                               validators=[MinValueValidator(0)], help_text="Floor area in square meters")
    status = models.CharField(max_length=20, choices=RoomStatus.choices, default=RoomStatus.VACANT)
    description = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['floor', 'room_number']
        unique_together = ['property', 'room_number']
        verbose_name = "Room"
        verbose_name_plural = "Rooms"
        indexes = [
            models.Index(fields=['status'], name='room_status_idx'),
            models.Index(fields=['property', 'status'], name='room_property_status_idx'),
        ]

    def __str__(self):
        return f"{self.property.name} - {self.room_number} ({self.get_status_display()})"

    def active_tenants(self):
        """Tenants currently living in this room (move_out_date not recorded)"""
        return self.tenants.filter(move_out_date__isnull=True)

    def current_tenant(self):
        """Get the active tenant, if any"""
        return self.active_tenants().first()

    def monthly_cost(self):
        """Rent plus management fee, as advertised on the public listing"""
        return self.rent + self.management_fee

    def clean(self):
        """Manual status edits must agree with the active tenant"""
        if self.pk is None:
            has_active_tenant = False
        else:
            has_active_tenant = self.active_tenants().exists()
        try:
            RoomStatusValidator.validate_manual_status(self.status, has_active_tenant)
        except AppValidationError as e:
            raise ValidationError({'status': e.message})
