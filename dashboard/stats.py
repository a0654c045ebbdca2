"""
Pure aggregation helpers behind the dashboard and finance summaries.

Nothing here touches the database: callers pass rooms / finance rows in
(model instances or dicts) and get plain numbers back.
"""
import calendar
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from core.constants import RoomStatus, FinanceType


def _get(obj, name):
    if isinstance(obj, dict):
        return obj[name]
    return getattr(obj, name)


def vacant_count(rooms) -> int:
    """Number of rooms whose status is vacant"""
    return sum(1 for room in rooms if _get(room, 'status') == RoomStatus.VACANT)


def occupancy_rate(total: int, vacant: int) -> int:
    """
    Percentage of rooms that are not vacant, rounded half up.
    Reserved rooms count as occupied. 0 when there are no rooms.
    """
    if not total:
        return 0
    rate = Decimal(total - vacant) * 100 / Decimal(total)
    return int(rate.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def property_stats(name: str, rooms) -> dict:
    """Room counts and occupancy for one property"""
    rooms = list(rooms)
    total = len(rooms)
    vacant = vacant_count(rooms)
    return {
        'name': name,
        'total_rooms': total,
        'vacant_rooms': vacant,
        'occupied_rooms': total - vacant,
        'occupancy_rate': occupancy_rate(total, vacant),
    }


def month_bounds(year: int, month: int):
    """First and last calendar day of the month"""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def finance_totals(rows) -> dict:
    """Income, expense and profit (income - expense) over finance rows"""
    income = Decimal('0')
    expense = Decimal('0')
    for row in rows:
        amount = Decimal(str(_get(row, 'amount')))
        if _get(row, 'type') == FinanceType.INCOME:
            income += amount
        elif _get(row, 'type') == FinanceType.EXPENSE:
            expense += amount
    return {
        'income': income,
        'expense': expense,
        'profit': income - expense,
    }
