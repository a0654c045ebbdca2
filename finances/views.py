from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.db import transaction
from api.permissions import IsAdminMember
from core.validators import PeriodValidator
from dashboard import stats
from .models import Finance
from .serializers import FinanceSerializer
from .utils import export_finance_report


class FinanceViewSet(viewsets.ModelViewSet):
    """
    ViewSet for income / expense entries
    ?year=&month= restricts every listing to that calendar month.
    """
    serializer_class = FinanceSerializer
    permission_classes = [IsAuthenticated, IsAdminMember]
    lookup_value_regex = r'\d+'
    search_fields = ['description', 'property__name']
    ordering_fields = ['date', 'amount', 'created_at']
    ordering = ['-date', '-created_at']

    def get_queryset(self):
        queryset = Finance.objects.all()

        # Filter by calendar month
        params = self.request.query_params
        if params.get('year') or params.get('month'):
            year, month = PeriodValidator.from_query_params(params)
            first_day, last_day = stats.month_bounds(year, month)
            queryset = queryset.filter(date__gte=first_day, date__lte=last_day)

        # Filter by type
        type_filter = params.get('type', None)
        if type_filter:
            queryset = queryset.filter(type=type_filter)

        # Filter by property
        property_filter = params.get('property', None)
        if property_filter:
            queryset = queryset.filter(property_id=property_filter)

        return queryset.select_related('property', 'room')

    def _month_entries(self, request):
        year, month = PeriodValidator.from_query_params(request.query_params)
        first_day, last_day = stats.month_bounds(year, month)
        entries = Finance.objects.filter(
            date__gte=first_day, date__lte=last_day
        ).select_related('property', 'room').order_by('date', 'created_at')
        return year, month, entries

    @transaction.atomic
    def create(self, request, *args, **kwargs):
        """Create entry with atomic transaction"""
        return super().create(request, *args, **kwargs)

    @transaction.atomic
    def update(self, request, *args, **kwargs):
        """Update entry with atomic transaction and row-level locking"""
        entry = Finance.objects.select_for_update().filter(id=kwargs.get('pk')).first()

        if not entry:
            return Response(
                {'detail': 'Finance entry not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        serializer = self.get_serializer(entry, data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)

    def partial_update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return self.update(request, *args, **kwargs)

    @action(detail=False, methods=['get'])
    def summary(self, request):
        """Income, expense and profit for the month, overall and per property"""
        year, month, entries = self._month_entries(request)

        by_property = {}
        for entry in entries:
            by_property.setdefault((entry.property_id, entry.property.name), []).append(entry)

        totals = stats.finance_totals(entries)
        return Response({
            'year': year,
            'month': month,
            'income': totals['income'],
            'expense': totals['expense'],
            'profit': totals['profit'],
            'by_property': [
                dict(property_id=property_id, name=name, **stats.finance_totals(rows))
                for (property_id, name), rows in sorted(by_property.items(), key=lambda item: item[0][1])
            ],
        })

    @action(detail=False, methods=['get'])
    def export(self, request):
        """Download the month's entries as CSV"""
        year, month, entries = self._month_entries(request)
        return export_finance_report(entries, year, month)
