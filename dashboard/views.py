"""
Dashboard API

Aggregates the back-office numbers for one calendar month:
room occupancy (across all properties and per property), pending
inquiries and the month's income / expense / profit.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from api.permissions import IsAdminMember
from core.validators import PeriodValidator
from finances.models import Finance
from inquiries.models import Inquiry
from properties.models import Property
from . import stats


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminMember])
def dashboard_summary(request):
    """
    Dashboard metrics for ?year=&month= (default: current month).

    Occupied rooms are every room that is not vacant, so reserved rooms
    count towards the occupancy rate.
    """
    year, month = PeriodValidator.from_query_params(request.query_params)

    properties = Property.objects.prefetch_related('rooms').order_by('name')
    property_stats = [stats.property_stats(prop.name, prop.rooms.all()) for prop in properties]

    total_rooms = sum(p['total_rooms'] for p in property_stats)
    vacant_rooms = sum(p['vacant_rooms'] for p in property_stats)

    first_day, last_day = stats.month_bounds(year, month)
    finances = Finance.objects.filter(date__gte=first_day, date__lte=last_day).values('type', 'amount')
    totals = stats.finance_totals(finances)

    return Response({
        'year': year,
        'month': month,
        'total_properties': len(property_stats),
        'total_rooms': total_rooms,
        'vacant_rooms': vacant_rooms,
        'occupied_rooms': total_rooms - vacant_rooms,
        'occupancy_rate': stats.occupancy_rate(total_rooms, vacant_rooms),
        'pending_inquiries': Inquiry.objects.pending().count(),
        'monthly_income': totals['income'],
        'monthly_expense': totals['expense'],
        'monthly_profit': totals['profit'],
        'property_stats': property_stats,
    })
