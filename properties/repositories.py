"""
Property repository - Data access layer for Property and Room.
Follows Repository pattern for clean separation of concerns.
"""
from django.db.models import QuerySet, Count, Min, Q, Prefetch
from core.constants import RoomStatus
from core.repositories import BaseRepository
from .models import Property, Room


class PropertyRepository(BaseRepository[Property]):
    """Repository for Property model"""

    def get_with_vacancies(self) -> QuerySet[Property]:
        """Properties that have at least one vacant room, for the public listing"""
        return self.get_queryset().annotate(
            vacant_room_count=Count('rooms', filter=Q(rooms__status=RoomStatus.VACANT)),
            min_rent=Min('rooms__rent', filter=Q(rooms__status=RoomStatus.VACANT)),
        ).filter(vacant_room_count__gt=0).order_by('name')

    def get_with_vacant_rooms(self, property_id: int):
        """Single property with only its vacant rooms prefetched"""
        return self.get_queryset().prefetch_related(
            Prefetch(
                'rooms',
                queryset=Room.objects.filter(status=RoomStatus.VACANT),
                to_attr='vacant_room_list',
            )
        ).filter(id=property_id).first()

    def has_active_tenants(self, property_id: int) -> bool:
        return Room.objects.filter(
            property_id=property_id,
            tenants__move_out_date__isnull=True,
        ).exists()


class RoomRepository(BaseRepository[Room]):
    """Repository for Room model"""

    def get_vacant(self) -> QuerySet[Room]:
        """Rooms that may be offered for move-in"""
        return self.get_all(status=RoomStatus.VACANT).select_related('property')

    def set_status(self, room: Room, status: str) -> Room:
        return self.update(room, status=status)
