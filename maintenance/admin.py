from django.contrib import admin
from .models import Maintenance


@admin.register(Maintenance)
class MaintenanceAdmin(admin.ModelAdmin):
    list_display = ['title', 'property', 'room', 'status', 'priority', 'cost', 'reported_date', 'completed_date']
    list_filter = ['status', 'priority', 'property', 'reported_date']
    search_fields = ['title', 'description', 'contractor', 'property__name', 'room__room_number']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Ticket', {
            'fields': ('property', 'room', 'title', 'description')
        }),
        ('Status', {
            'fields': ('status', 'priority', 'contractor', 'cost')
        }),
        ('Dates', {
            'fields': ('reported_date', 'scheduled_date', 'completed_date')
        }),
        ('Notes', {
            'fields': ('notes',),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('property', 'room')
