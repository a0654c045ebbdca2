from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.db import transaction
from api.permissions import IsAdminMember
from core.constants import OPEN_MAINTENANCE_STATUSES
from .models import Maintenance
from .serializers import MaintenanceSerializer, MaintenanceListSerializer


class MaintenanceViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Maintenance tickets
    Uses atomic transactions for data consistency
    """
    permission_classes = [IsAuthenticated, IsAdminMember]
    lookup_value_regex = r'\d+'
    search_fields = ['title', 'description', 'contractor', 'property__name', 'room__room_number']
    ordering_fields = ['reported_date', 'priority', 'status', 'scheduled_date']
    ordering = ['-reported_date', '-created_at']

    def get_serializer_class(self):
        if self.action in ('list', 'open'):
            return MaintenanceListSerializer
        return MaintenanceSerializer

    def get_queryset(self):
        queryset = Maintenance.objects.all()

        # Filter by status
        status_filter = self.request.query_params.get('status', None)
        if status_filter:
            queryset = queryset.filter(status=status_filter)

        # Filter by priority
        priority_filter = self.request.query_params.get('priority', None)
        if priority_filter:
            queryset = queryset.filter(priority=priority_filter)

        # Filter by property
        property_filter = self.request.query_params.get('property', None)
        if property_filter:
            queryset = queryset.filter(property_id=property_filter)

        return queryset.select_related('property', 'room')

    @transaction.atomic
    def create(self, request, *args, **kwargs):
        """Create ticket with atomic transaction"""
        return super().create(request, *args, **kwargs)

    @transaction.atomic
    def update(self, request, *args, **kwargs):
        """Update ticket with atomic transaction and row-level locking"""
        ticket = Maintenance.objects.select_for_update().filter(id=kwargs.get('pk')).first()

        if not ticket:
            return Response(
                {'detail': 'Maintenance ticket not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        serializer = MaintenanceSerializer(ticket, data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)
        serializer.save()  # Auto-sets completed_date
        return Response(serializer.data)

    def partial_update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return self.update(request, *args, **kwargs)

    @action(detail=False, methods=['get'])
    def open(self, request):
        """Get all pending and in-progress tickets"""
        tickets = self.filter_queryset(self.get_queryset()).filter(status__in=OPEN_MAINTENANCE_STATUSES)
        serializer = self.get_serializer(tickets, many=True)
        return Response(serializer.data)
