"""
Property service - Business logic layer for Property and Room.
Services orchestrate repositories and contain business rules.
"""
from django.db import transaction
from core.exceptions import NotFoundError, BusinessLogicError
from core.services import BaseService
from core.validators import RoomStatusValidator
from tenants.models import Tenant
from tenants.repositories import TenantRepository
from .models import Property, Room
from .repositories import PropertyRepository, RoomRepository


class PropertyService(BaseService):
    """Service for property and room rules that span tables"""

    def __init__(self):
        super().__init__()
        self.property_repo = PropertyRepository(Property)
        self.room_repo = RoomRepository(Room)
        self.tenant_repo = TenantRepository(Tenant)

    def get_property(self, property_id: int) -> Property:
        prop = self.property_repo.get_by_id(property_id)
        if not prop:
            raise NotFoundError(resource_type="Property", resource_id=property_id)
        return prop

    def update_room(self, actor, room_id: int, **fields) -> Room:
        """
        Update a room's attributes.

        Status may only move between VACANT and RESERVED by hand; occupancy
        is owned by the move-in / move-out operations.
        """
        with transaction.atomic():
            room = self.room_repo.get_for_update(room_id)
            if room is None:
                raise NotFoundError(resource_type="Room", resource_id=room_id)

            new_status = fields.get('status')
            if new_status is not None and new_status != room.status:
                RoomStatusValidator.validate_manual_status(
                    new_status, self.tenant_repo.has_active_tenant(room.id)
                )

            self.room_repo.update(room, **fields)

        self.log_info(f"Room updated: {room.room_number}", room_id=room.id,
                      actor_id=getattr(actor, 'id', None), fields=list(fields.keys()))
        return room

    def delete_room(self, actor, room_id: int) -> None:
        """Delete a room; refused while someone lives in it"""
        with transaction.atomic():
            room = self.room_repo.get_for_update(room_id)
            if room is None:
                raise NotFoundError(resource_type="Room", resource_id=room_id)
            if self.tenant_repo.has_active_tenant(room.id):
                self.log_warning("Room deletion refused: active tenant", room_id=room.id,
                                 actor_id=getattr(actor, 'id', None))
                raise BusinessLogicError(
                    message=f"Room {room.room_number} has an active tenant. Move the tenant out first.",
                    code="ROOM_HAS_ACTIVE_TENANT",
                    details={'room_id': room.id}
                )
            self.room_repo.delete(room)

        self.log_info(f"Room deleted: {room.room_number}", room_id=room_id,
                      actor_id=getattr(actor, 'id', None))

    def delete_property(self, actor, property_id: int) -> None:
        """Delete a property and its rooms; refused while any room is occupied"""
        with transaction.atomic():
            prop = self.property_repo.get_for_update(property_id)
            if prop is None:
                raise NotFoundError(resource_type="Property", resource_id=property_id)
            if self.property_repo.has_active_tenants(property_id):
                self.log_warning("Property deletion refused: active tenants", property_id=property_id,
                                 actor_id=getattr(actor, 'id', None))
                raise BusinessLogicError(
                    message=f"{prop.name} still has active tenants. Move them out first.",
                    code="PROPERTY_HAS_ACTIVE_TENANTS",
                    details={'property_id': property_id}
                )
            self.property_repo.delete(prop)

        self.log_info(f"Property deleted: {prop.name}", property_id=property_id,
                      actor_id=getattr(actor, 'id', None))

    def vacant_rooms_for_move_in(self):
        """Rooms that may be offered in move-in forms"""
        return self.room_repo.get_vacant()
