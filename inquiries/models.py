from django.db import models
from core.constants import InquirerType, InquiryStatus, PENDING_INQUIRY_STATUSES
from properties.models import Property, Room
from tenants.models import Tenant


class InquiryQuerySet(models.QuerySet):

    def pending(self):
        """Inquiries still waiting on the office (new or in progress)"""
        return self.filter(status__in=PENDING_INQUIRY_STATUSES)


class Inquiry(models.Model):
    """Question from a tenant or a prospective tenant (visitor)"""
    property = models.ForeignKey(Property, on_delete=models.SET_NULL, related_name='inquiries',
                                 null=True, blank=True)
    room = models.ForeignKey(Room, on_delete=models.SET_NULL, related_name='inquiries',
                             null=True, blank=True)
    tenant = models.ForeignKey(Tenant, on_delete=models.SET_NULL, related_name='inquiries',
                               null=True, blank=True)
    inquirer_type = models.CharField(max_length=20, choices=InquirerType.choices,
                                     default=InquirerType.VISITOR)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=30, null=True, blank=True)
    subject = models.CharField(max_length=255)
    message = models.TextField()
    status = models.CharField(max_length=20, choices=InquiryStatus.choices, default=InquiryStatus.NEW)
    response = models.TextField(null=True, blank=True)
    responded_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = InquiryQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at']
        verbose_name = "Inquiry"
        verbose_name_plural = "Inquiries"
        indexes = [
            models.Index(fields=['status', 'created_at'], name='inquiry_status_created_idx'),
            models.Index(fields=['inquirer_type', 'status'], name='inquiry_type_status_idx'),
        ]

    def __str__(self):
        return f"{self.name} - {self.subject} ({self.get_status_display()})"
