from django.contrib import admin
from .models import MoveHistory


@admin.register(MoveHistory)
class MoveHistoryAdmin(admin.ModelAdmin):
    """Move history is append-only: viewable here, never edited"""
    list_display = ['move_date', 'move_type', 'tenant', 'room', 'created_at']
    list_filter = ['move_type', 'move_date', 'room__property']
    search_fields = ['tenant__name', 'room__room_number', 'room__property__name']
    readonly_fields = ['room', 'tenant', 'move_type', 'move_date', 'notes', 'created_at']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('tenant', 'room', 'room__property')

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
