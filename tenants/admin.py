from django.contrib import admin
from occupancy.services import OccupancyService
from .models import Tenant


class ActiveTenantFilter(admin.SimpleListFilter):
    title = 'residency'
    parameter_name = 'active'

    def lookups(self, request, model_admin):
        return (('yes', 'Active'), ('no', 'Moved out'))

    def queryset(self, request, queryset):
        if self.value() == 'yes':
            return queryset.filter(move_out_date__isnull=True)
        if self.value() == 'no':
            return queryset.filter(move_out_date__isnull=False)
        return queryset


@admin.register(Tenant)
class TenantAdmin(admin.ModelAdmin):
    """
    Room and move dates are read-only: use the move-in / move-out API.
    Deletions go through OccupancyService so the room is freed.
    """
    list_display = ['name', 'location', 'phone', 'move_in_date', 'move_out_date', 'is_active']
    list_filter = [ActiveTenantFilter, 'room__property', 'move_in_date']
    search_fields = ['name', 'name_kana', 'phone', 'email']
    readonly_fields = ['room', 'move_in_date', 'move_out_date', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'name_kana', 'phone', 'email')
        }),
        ('Emergency Contact', {
            'fields': ('emergency_contact', 'emergency_phone')
        }),
        ('Residency', {
            'fields': ('room', 'move_in_date', 'move_out_date')
        }),
        ('Contract', {
            'fields': ('contract_start_date', 'contract_end_date', 'notes')
        }),
    )

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('room', 'room__property')

    def has_add_permission(self, request):
        return False

    def delete_model(self, request, obj):
        OccupancyService().delete_tenant(request.user, obj.id)

    def delete_queryset(self, request, queryset):
        service = OccupancyService()
        for tenant_id in list(queryset.values_list('id', flat=True)):
            service.delete_tenant(request.user, tenant_id)
