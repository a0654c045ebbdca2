"""
Application-wide constants.
Every status-like field in the schema is a closed enumeration defined here.
"""
from django.db import models


# Admin Roles
class AdminRole(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    SUPER_ADMIN = 'super_admin', 'Super Admin'


# Room Status
class RoomStatus(models.TextChoices):
    VACANT = 'vacant', 'Vacant'
    OCCUPIED = 'occupied', 'Occupied'
    RESERVED = 'reserved', 'Reserved'


# Move History
class MoveType(models.TextChoices):
    MOVE_IN = 'in', 'Move In'
    MOVE_OUT = 'out', 'Move Out'


# Maintenance Status
class MaintenanceStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    IN_PROGRESS = 'in_progress', 'In Progress'
    COMPLETED = 'completed', 'Completed'
    CANCELLED = 'cancelled', 'Cancelled'


class MaintenancePriority(models.TextChoices):
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'
    URGENT = 'urgent', 'Urgent'


# Inquiries
class InquirerType(models.TextChoices):
    TENANT = 'tenant', 'Tenant'
    VISITOR = 'visitor', 'Visitor'


class InquiryStatus(models.TextChoices):
    NEW = 'new', 'New'
    IN_PROGRESS = 'in_progress', 'In Progress'
    RESOLVED = 'resolved', 'Resolved'
    CLOSED = 'closed', 'Closed'


# Statuses counted as "pending" on the dashboard
PENDING_INQUIRY_STATUSES = [InquiryStatus.NEW, InquiryStatus.IN_PROGRESS]
OPEN_MAINTENANCE_STATUSES = [MaintenanceStatus.PENDING, MaintenanceStatus.IN_PROGRESS]


# Finances
class FinanceType(models.TextChoices):
    INCOME = 'income', 'Income'
    EXPENSE = 'expense', 'Expense'


class FinanceCategory(models.TextChoices):
    RENT = 'rent', 'Rent'
    MANAGEMENT_FEE = 'management_fee', 'Management Fee'
    DEPOSIT = 'deposit', 'Deposit'
    KEY_MONEY = 'key_money', 'Key Money'
    OTHER_INCOME = 'other_income', 'Other Income'
    REPAIR = 'repair', 'Repair'
    UTILITIES = 'utilities', 'Utilities'
    INSURANCE = 'insurance', 'Insurance'
    TAX = 'tax', 'Tax'
    CLEANING = 'cleaning', 'Cleaning'
    OTHER_EXPENSE = 'other_expense', 'Other Expense'


# Which categories are allowed for each finance type.
# management_fee appears on both sides: collected from tenants, paid to the management company.
FINANCE_CATEGORIES_BY_TYPE = {
    FinanceType.INCOME: [
        FinanceCategory.RENT,
        FinanceCategory.MANAGEMENT_FEE,
        FinanceCategory.DEPOSIT,
        FinanceCategory.KEY_MONEY,
        FinanceCategory.OTHER_INCOME,
    ],
    FinanceType.EXPENSE: [
        FinanceCategory.REPAIR,
        FinanceCategory.MANAGEMENT_FEE,
        FinanceCategory.UTILITIES,
        FinanceCategory.INSURANCE,
        FinanceCategory.TAX,
        FinanceCategory.CLEANING,
        FinanceCategory.OTHER_EXPENSE,
    ],
}


# Tenancy defaults
class TenancyDefaults:
    # Open-ended contracts are stored with a far-future end date
    OPEN_CONTRACT_END_DATE = '2099-12-31'


# Pagination
class Pagination:
    DEFAULT_PAGE_SIZE = 20
    MAX_PAGE_SIZE = 100
