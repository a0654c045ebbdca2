from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from api.permissions import IsAdminMember
from .models import MoveHistory
from .serializers import MoveHistorySerializer


class MoveHistoryViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only ViewSet for the move-in / move-out log.
    Entries are written by OccupancyService only.
    """
    serializer_class = MoveHistorySerializer
    permission_classes = [IsAuthenticated, IsAdminMember]
    lookup_value_regex = r'\d+'
    search_fields = ['tenant__name', 'room__room_number', 'room__property__name']
    ordering_fields = ['move_date', 'created_at']
    ordering = ['-move_date', '-created_at']

    def get_queryset(self):
        queryset = MoveHistory.objects.all()

        # Filter by room
        room_filter = self.request.query_params.get('room', None)
        if room_filter:
            queryset = queryset.filter(room_id=room_filter)

        # Filter by tenant
        tenant_filter = self.request.query_params.get('tenant', None)
        if tenant_filter:
            queryset = queryset.filter(tenant_id=tenant_filter)

        # Filter by move type
        move_type = self.request.query_params.get('move_type', None)
        if move_type:
            queryset = queryset.filter(move_type=move_type)

        return queryset.select_related('tenant', 'room', 'room__property')
