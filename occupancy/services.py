"""
Occupancy service - the move-in / move-out lifecycle.

Invariant kept by every operation here: a room is OCCUPIED iff exactly one
tenant with move_out_date IS NULL references it; otherwise it is VACANT
(or RESERVED when set by hand).

Each operation runs in a single transaction and locks the rows it touches,
so a failure in any step rolls back the earlier ones and two concurrent
move-ins against one room cannot both succeed.
"""
from datetime import date
from typing import Optional
from django.db import transaction, DatabaseError
from django.utils import timezone
from core.constants import RoomStatus, MoveType, TenancyDefaults
from core.dto import MoveInDTO, MoveOutDTO
from core.exceptions import NotFoundError, BusinessLogicError, StoreError
from core.services import BaseService
from core.validators import RoomStatusValidator, TenancyValidator
from properties.models import Room
from properties.repositories import RoomRepository
from tenants.models import Tenant
from tenants.repositories import TenantRepository
from .models import MoveHistory
from .repositories import MoveHistoryRepository


class OccupancyService(BaseService):
    """Service for room occupancy transitions"""

    def __init__(self):
        super().__init__()
        self.room_repo = RoomRepository(Room)
        self.tenant_repo = TenantRepository(Tenant)
        self.history_repo = MoveHistoryRepository(MoveHistory)

    def move_in(self, actor, data: MoveInDTO) -> Tenant:
        """
        Register a tenant and, when a room is given, move them into it.

        Args:
            actor: Admin performing the operation
            data: Tenant and contract fields

        Returns:
            Created Tenant instance

        Raises:
            ValidationError: If required fields are missing or dates are inconsistent
            NotFoundError: If the room doesn't exist
            BusinessLogicError: If the room is not vacant
            StoreError: If the database rejects any step (nothing is kept)
        """
        TenancyValidator.validate_required(data.name, data.move_in_date)
        contract_start = data.contract_start_date or data.move_in_date
        contract_end = data.contract_end_date or date.fromisoformat(TenancyDefaults.OPEN_CONTRACT_END_DATE)
        TenancyValidator.validate_contract_dates(contract_start, contract_end)

        context = {'actor_id': getattr(actor, 'id', None), 'room_id': data.room_id}
        try:
            with transaction.atomic():
                room = None
                if data.room_id is not None:
                    room = self.room_repo.get_for_update(data.room_id)
                    if room is None:
                        raise NotFoundError(resource_type="Room", resource_id=data.room_id)
                    RoomStatusValidator.validate_vacant_for_move_in(
                        room, self.tenant_repo.has_active_tenant(room.id)
                    )

                tenant = self.tenant_repo.create(
                    room=room,
                    name=data.name.strip(),
                    name_kana=data.name_kana or None,
                    email=data.email or None,
                    phone=data.phone or None,
                    emergency_contact=data.emergency_contact or None,
                    emergency_phone=data.emergency_phone or None,
                    move_in_date=data.move_in_date,
                    move_out_date=None,
                    contract_start_date=contract_start,
                    contract_end_date=contract_end,
                    notes=data.notes or None,
                )

                if room is not None:
                    self.room_repo.set_status(room, RoomStatus.OCCUPIED)
                    self.history_repo.record(room, tenant, MoveType.MOVE_IN, data.move_in_date, data.move_notes)
        except DatabaseError as e:
            self.log_error("Move-in failed, rolled back", error=e, **context)
            raise StoreError(message="Move-in could not be saved", details=context) from e

        self.log_info(f"Tenant moved in: {tenant.name}", tenant_id=tenant.id, **context)
        return tenant

    def move_out(self, actor, data: MoveOutDTO) -> Tenant:
        """
        Record a tenant's move-out and free their room.

        The tenant row is kept (with its room reference) for reporting; it no
        longer counts as active because move_out_date is set.

        Raises:
            NotFoundError: If the tenant doesn't exist
            BusinessLogicError: If the tenant has already moved out
            ValidationError: If the move-out date precedes the move-in date
            StoreError: If the database rejects any step (nothing is kept)
        """
        move_out_date = data.move_out_date or timezone.localdate()
        context = {'actor_id': getattr(actor, 'id', None), 'tenant_id': data.tenant_id}
        try:
            with transaction.atomic():
                tenant = self.tenant_repo.get_for_update(data.tenant_id)
                if tenant is None:
                    raise NotFoundError(resource_type="Tenant", resource_id=data.tenant_id)
                if not tenant.is_active:
                    raise BusinessLogicError(
                        message=f"{tenant.name} already moved out on {tenant.move_out_date}",
                        code="TENANT_NOT_ACTIVE",
                        details={'tenant_id': tenant.id}
                    )
                TenancyValidator.validate_move_out_date(tenant.move_in_date, move_out_date)

                room = None
                if tenant.room_id is not None:
                    room = self.room_repo.get_for_update(tenant.room_id)

                self.tenant_repo.update(tenant, move_out_date=move_out_date)

                if room is not None:
                    self.room_repo.set_status(room, RoomStatus.VACANT)
                    self.history_repo.record(room, tenant, MoveType.MOVE_OUT, move_out_date, data.notes)
        except DatabaseError as e:
            self.log_error("Move-out failed, rolled back", error=e, **context)
            raise StoreError(message="Move-out could not be saved", details=context) from e

        self.log_info(f"Tenant moved out: {tenant.name}", room_id=tenant.room_id, **context)
        return tenant

    def move_out_of_room(self, actor, room_id: int, move_out_date: Optional[date] = None,
                         notes: Optional[str] = None) -> Tenant:
        """Move out whoever currently occupies the room"""
        room = self.room_repo.get_by_id(room_id)
        if room is None:
            raise NotFoundError(resource_type="Room", resource_id=room_id)
        tenant = self.tenant_repo.get_active_for_room(room_id).first()
        if tenant is None:
            raise BusinessLogicError(
                message=f"Room {room.room_number} has no active tenant",
                code="ROOM_HAS_NO_ACTIVE_TENANT",
                details={'room_id': room_id}
            )
        return self.move_out(actor, MoveOutDTO(tenant_id=tenant.id, move_out_date=move_out_date, notes=notes))

    def delete_tenant(self, actor, tenant_id: int) -> None:
        """
        Delete a tenant outside the move-out flow.

        An active tenant's room goes back to VACANT. Deleting a tenant who
        already moved out leaves the room untouched.
        """
        context = {'actor_id': getattr(actor, 'id', None), 'tenant_id': tenant_id}
        try:
            with transaction.atomic():
                tenant = self.tenant_repo.get_for_update(tenant_id)
                if tenant is None:
                    raise NotFoundError(resource_type="Tenant", resource_id=tenant_id)

                room = None
                if tenant.is_active and tenant.room_id is not None:
                    room = self.room_repo.get_for_update(tenant.room_id)

                name = tenant.name
                self.tenant_repo.delete(tenant)

                if room is not None:
                    self.room_repo.set_status(room, RoomStatus.VACANT)
                    context['room_id'] = room.id
        except DatabaseError as e:
            self.log_error("Tenant deletion failed, rolled back", error=e, **context)
            raise StoreError(message="Tenant could not be deleted", details=context) from e

        self.log_info(f"Tenant deleted: {name}", **context)

    def reconcile_room(self, room_id: int) -> bool:
        """
        Recompute a room's status from its active tenants.

        Returns True if the status was changed. A manual RESERVED is kept when
        the room has no active tenant.
        """
        with transaction.atomic():
            room = self.room_repo.get_for_update(room_id)
            if room is None:
                raise NotFoundError(resource_type="Room", resource_id=room_id)

            active_count = self.tenant_repo.get_active_for_room(room_id).count()
            if active_count > 1:
                self.log_error(
                    f"Room {room.room_number} has {active_count} active tenants; resolve manually",
                    room_id=room_id
                )

            if active_count:
                expected = RoomStatus.OCCUPIED
            elif room.status == RoomStatus.OCCUPIED:
                expected = RoomStatus.VACANT
            else:
                expected = room.status

            if expected == room.status:
                return False

            previous = room.status
            self.room_repo.set_status(room, expected)

        self.log_info(f"Room status reconciled: {previous} -> {expected}", room_id=room_id)
        return True
