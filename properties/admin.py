from django.contrib import admin, messages
from core.exceptions import BaseApplicationException
from .models import Property, Room
from .repositories import PropertyRepository
from .services import PropertyService


class RoomInline(admin.TabularInline):
    """Rooms are deleted from the room admin so occupied rooms are refused"""
    model = Room
    extra = 1
    show_change_link = True
    can_delete = False
    fields = ['room_number', 'floor', 'rent', 'management_fee', 'room_type', 'status']


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = ['name', 'address', 'total_rooms', 'vacant_rooms', 'occupancy_rate', 'created_at']
    search_fields = ['name', 'address']
    readonly_fields = ['total_rooms', 'vacant_rooms', 'occupancy_rate']
    inlines = [RoomInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'address', 'description')
        }),
        ('Statistics', {
            'fields': ('total_rooms', 'vacant_rooms', 'occupancy_rate'),
            'classes': ('collapse',)
        }),
    )

    def has_delete_permission(self, request, obj=None):
        """Properties with an active tenant in any room cannot be deleted"""
        if obj is not None and PropertyRepository(Property).has_active_tenants(obj.id):
            return False
        return super().has_delete_permission(request, obj)

    def delete_model(self, request, obj):
        try:
            PropertyService().delete_property(request.user, obj.id)
        except BaseApplicationException as e:
            self.message_user(request, e.message, level=messages.ERROR)

    def delete_queryset(self, request, queryset):
        service = PropertyService()
        for property_id in list(queryset.values_list('id', flat=True)):
            try:
                service.delete_property(request.user, property_id)
            except BaseApplicationException as e:
                self.message_user(request, e.message, level=messages.ERROR)


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    """
    Room.clean() rejects status edits that contradict the active tenant.
    Occupied rooms have no delete permission, which also blocks bulk deletes.
    """
    list_display = ['room_number', 'property', 'floor', 'rent', 'management_fee', 'room_type', 'status']
    list_filter = ['status', 'property']
    search_fields = ['room_number', 'property__name']

    fieldsets = (
        ('Basic Information', {
            'fields': ('property', 'room_number', 'floor', 'room_type', 'area', 'description')
        }),
        ('Rent Information', {
            'fields': ('rent', 'management_fee', 'deposit', 'key_money')
        }),
        ('Status', {
            'fields': ('status',)
        }),
    )

    def has_delete_permission(self, request, obj=None):
        if obj is not None and obj.active_tenants().exists():
            return False
        return super().has_delete_permission(request, obj)

    def delete_model(self, request, obj):
        try:
            PropertyService().delete_room(request.user, obj.id)
        except BaseApplicationException as e:
            self.message_user(request, e.message, level=messages.ERROR)

    def delete_queryset(self, request, queryset):
        service = PropertyService()
        for room_id in list(queryset.values_list('id', flat=True)):
            try:
                service.delete_room(request.user, room_id)
            except BaseApplicationException as e:
                self.message_user(request, e.message, level=messages.ERROR)
