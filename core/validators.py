"""
Validation utilities and validators.
Centralized validation logic following single responsibility principle.
"""
from decimal import Decimal
from core.constants import RoomStatus, FINANCE_CATEGORIES_BY_TYPE
from core.exceptions import ValidationError as AppValidationError, BusinessLogicError


class RoomStatusValidator:
    """Validates manual changes to a room's status"""

    @staticmethod
    def validate_manual_status(new_status: str, has_active_tenant: bool):
        """
        Rooms with an active tenant stay occupied; rooms without one can only
        be vacant or reserved. Occupancy changes go through move-in/move-out.
        """
        if has_active_tenant and new_status != RoomStatus.OCCUPIED:
            raise AppValidationError(
                message="Room has an active tenant. Move the tenant out before changing its status.",
                code="ROOM_HAS_ACTIVE_TENANT",
                details={"status": new_status}
            )
        if not has_active_tenant and new_status == RoomStatus.OCCUPIED:
            raise AppValidationError(
                message="A room can only become occupied through a move-in.",
                code="OCCUPIED_WITHOUT_TENANT",
                details={"status": new_status}
            )

    @staticmethod
    def validate_vacant_for_move_in(room, has_active_tenant: bool):
        """Only vacant rooms with no active tenant accept a move-in"""
        if room.status != RoomStatus.VACANT or has_active_tenant:
            raise BusinessLogicError(
                message=f"Room {room.room_number} is not vacant (status: {room.status}).",
                code="ROOM_NOT_VACANT",
                details={"room_id": room.id, "status": room.status}
            )


class TenancyValidator:
    """Validates move-in / move-out input"""

    @staticmethod
    def validate_required(name, move_in_date):
        """Required fields are checked before anything is written"""
        missing = []
        if not name or not str(name).strip():
            missing.append("name")
        if not move_in_date:
            missing.append("move_in_date")
        if missing:
            raise AppValidationError(
                message=f"Missing required fields: {', '.join(missing)}",
                code="REQUIRED_FIELDS_MISSING",
                details={"fields": missing}
            )

    @staticmethod
    def validate_contract_dates(start_date, end_date):
        """Contract must not end before it starts"""
        if start_date and end_date and end_date < start_date:
            raise AppValidationError(
                message="Contract end date cannot be before contract start date",
                code="INVALID_CONTRACT_DATES",
                details={"contract_start_date": str(start_date), "contract_end_date": str(end_date)}
            )

    @staticmethod
    def validate_move_out_date(move_in_date, move_out_date):
        """Move-out cannot precede move-in"""
        if move_in_date and move_out_date < move_in_date:
            raise AppValidationError(
                message="Move-out date cannot be before move-in date",
                code="INVALID_MOVE_OUT_DATE",
                details={"move_in_date": str(move_in_date), "move_out_date": str(move_out_date)}
            )


class FinanceValidator:
    """Validates finance entries"""

    @staticmethod
    def validate_category(finance_type: str, category: str):
        """Category must belong to the entry's type"""
        allowed = FINANCE_CATEGORIES_BY_TYPE.get(finance_type, [])
        if category not in allowed:
            raise AppValidationError(
                message=f"Category '{category}' is not valid for {finance_type} entries",
                code="INVALID_FINANCE_CATEGORY",
                details={"type": finance_type, "allowed": [str(c) for c in allowed]}
            )

    @staticmethod
    def validate_amount(amount: Decimal):
        """Amounts are recorded as positive numbers; the type carries the sign"""
        if amount is None or amount <= 0:
            raise AppValidationError(
                message="Amount must be greater than zero",
                code="INVALID_AMOUNT"
            )
        if amount > Decimal('9999999999.99'):
            raise AppValidationError(
                message="Amount exceeds maximum allowed",
                code="AMOUNT_TOO_LARGE"
            )


class PeriodValidator:
    """Validates year/month selectors used by reports"""

    @staticmethod
    def validate_year_month(year, month):
        try:
            year = int(year)
            month = int(month)
        except (TypeError, ValueError):
            raise AppValidationError(
                message="year and month must be integers",
                code="INVALID_PERIOD"
            )
        if not 1 <= month <= 12 or not 1 <= year <= 9999:
            raise AppValidationError(
                message="month must be between 1 and 12",
                code="INVALID_PERIOD",
                details={"year": year, "month": month}
            )
        return year, month

    @classmethod
    def from_query_params(cls, params, today=None):
        """
        Read ?year=&month= from a request, defaulting to the current month.
        Returns (year, month).
        """
        from django.utils import timezone
        today = today or timezone.localdate()
        year = params.get('year') or today.year
        month = params.get('month') or today.month
        return cls.validate_year_month(year, month)
