"""
Tenant repository - Data access layer for Tenant.
"""
from django.db.models import QuerySet
from core.repositories import BaseRepository
from .models import Tenant


class TenantRepository(BaseRepository[Tenant]):
    """Repository for Tenant model"""

    def get_active(self) -> QuerySet[Tenant]:
        """Tenants without a recorded move-out"""
        return self.get_all(move_out_date__isnull=True)

    def get_active_for_room(self, room_id: int) -> QuerySet[Tenant]:
        return self.get_active().filter(room_id=room_id)

    def has_active_tenant(self, room_id: int) -> bool:
        return self.get_active_for_room(room_id).exists()
