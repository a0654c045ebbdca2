from django.contrib import admin
from django.utils import timezone
from .models import Inquiry


@admin.register(Inquiry)
class InquiryAdmin(admin.ModelAdmin):
    list_display = ['subject', 'name', 'email', 'inquirer_type', 'property', 'status', 'created_at']
    list_filter = ['inquirer_type', 'status', 'property', 'created_at']
    search_fields = ['name', 'email', 'subject', 'message']
    readonly_fields = ['responded_at', 'created_at', 'updated_at']

    fieldsets = (
        ('Inquirer', {
            'fields': ('inquirer_type', 'name', 'email', 'phone', 'tenant')
        }),
        ('About', {
            'fields': ('property', 'room')
        }),
        ('Message', {
            'fields': ('subject', 'message')
        }),
        ('Response', {
            'fields': ('status', 'response', 'responded_at')
        }),
    )

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('property', 'room', 'tenant')

    def save_model(self, request, obj, form, change):
        """Stamp responded_at when the response text changes"""
        if 'response' in form.changed_data:
            obj.responded_at = timezone.now() if obj.response else None
        super().save_model(request, obj, form, change)
