"""
Move history repository - append-only access to MoveHistory.
"""
from typing import Optional
from datetime import date
from django.db.models import QuerySet
from core.repositories import BaseRepository
from .models import MoveHistory


class MoveHistoryRepository(BaseRepository[MoveHistory]):
    """Repository for MoveHistory model"""

    def record(self, room, tenant, move_type: str, move_date: date, notes: Optional[str] = None) -> MoveHistory:
        """Append a move event"""
        return self.create(
            room=room,
            tenant=tenant,
            move_type=move_type,
            move_date=move_date,
            notes=notes or None,
        )

    def get_for_tenant(self, tenant_id: int) -> QuerySet[MoveHistory]:
        return self.get_all(tenant_id=tenant_id).select_related('room', 'room__property')

    def get_for_room(self, room_id: int) -> QuerySet[MoveHistory]:
        return self.get_all(room_id=room_id).select_related('tenant', 'room', 'room__property')
