from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.db import transaction
from api.permissions import IsAdminMember
from occupancy.repositories import MoveHistoryRepository
from occupancy.models import MoveHistory
from occupancy.serializers import MoveInSerializer, MoveOutSerializer, MoveHistorySerializer
from occupancy.services import OccupancyService
from .models import Tenant
from .serializers import TenantSerializer, TenantListSerializer


class TenantViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Tenant management

    Creating a tenant is a move-in and deleting one reconciles its room, so
    both go through OccupancyService instead of the serializer.
    """
    permission_classes = [IsAuthenticated, IsAdminMember]
    lookup_value_regex = r'\d+'
    search_fields = ['name', 'name_kana', 'phone', 'email']
    ordering_fields = ['name', 'move_in_date', 'created_at']
    ordering = ['-created_at']

    def get_serializer_class(self):
        if self.action == 'list':
            return TenantListSerializer
        if self.action == 'create':
            return MoveInSerializer
        return TenantSerializer

    def get_queryset(self):
        """Active tenants only unless ?include_inactive=true"""
        queryset = Tenant.objects.select_related('room', 'room__property')

        include_inactive = self.request.query_params.get('include_inactive', '').lower()
        if self.action == 'list' and include_inactive not in ('1', 'true', 'yes'):
            queryset = queryset.filter(move_out_date__isnull=True)

        return queryset

    def create(self, request, *args, **kwargs):
        """Move-in: register the tenant and occupy the room in one transaction"""
        serializer = MoveInSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tenant = OccupancyService().move_in(request.user, serializer.to_dto())
        return Response(TenantSerializer(tenant).data, status=status.HTTP_201_CREATED)

    @transaction.atomic
    def update(self, request, *args, **kwargs):
        """Update personal and contract fields with row-level locking"""
        tenant = Tenant.objects.select_for_update().filter(id=kwargs.get('pk')).first()

        if not tenant:
            return Response(
                {'detail': 'Tenant not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        serializer = TenantSerializer(tenant, data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)

    def partial_update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        OccupancyService().delete_tenant(request.user, int(kwargs['pk']))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['post'], url_path='move-out')
    def move_out(self, request, pk=None):
        """Record the tenant's move-out and free the room"""
        serializer = MoveOutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tenant = OccupancyService().move_out(request.user, serializer.to_dto(int(pk)))
        return Response(TenantSerializer(tenant).data)

    @action(detail=True, methods=['get'])
    def history(self, request, pk=None):
        """Move-in / move-out events for this tenant"""
        tenant = self.get_object()
        histories = MoveHistoryRepository(MoveHistory).get_for_tenant(tenant.id).select_related('tenant')
        return Response(MoveHistorySerializer(histories, many=True).data)
