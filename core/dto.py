"""
Data Transfer Objects (DTOs).
Used for passing data between layers without exposing domain models.
"""
from dataclasses import dataclass
from typing import Optional
from datetime import date


@dataclass
class MoveInDTO:
    """Everything needed to move a tenant into a room"""
    name: str = ""
    move_in_date: date = None
    room_id: Optional[int] = None
    name_kana: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    emergency_contact: Optional[str] = None
    emergency_phone: Optional[str] = None
    contract_start_date: Optional[date] = None
    contract_end_date: Optional[date] = None
    notes: Optional[str] = None
    move_notes: Optional[str] = None


@dataclass
class MoveOutDTO:
    """Data for moving a tenant out"""
    tenant_id: int = None
    move_out_date: Optional[date] = None
    notes: Optional[str] = None
