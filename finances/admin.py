from django.contrib import admin
from .models import Finance


@admin.register(Finance)
class FinanceAdmin(admin.ModelAdmin):
    list_display = ['date', 'property', 'room', 'type', 'category', 'amount']
    list_filter = ['type', 'category', 'property', 'date']
    search_fields = ['description', 'property__name', 'room__room_number']
    date_hierarchy = 'date'

    fieldsets = (
        ('Entry', {
            'fields': ('property', 'room', 'type', 'category', 'amount', 'date')
        }),
        ('Details', {
            'fields': ('description',)
        }),
    )

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('property', 'room')
