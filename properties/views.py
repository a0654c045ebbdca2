from rest_framework import viewsets, status, mixins
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from api.permissions import IsAdminMember
from core.exceptions import NotFoundError
from occupancy.models import MoveHistory
from occupancy.repositories import MoveHistoryRepository
from occupancy.serializers import MoveInSerializer, MoveOutSerializer, MoveHistorySerializer
from occupancy.services import OccupancyService
from tenants.serializers import TenantSerializer
from .models import Property, Room
from .repositories import PropertyRepository
from .serializers import (
    PropertySerializer,
    RoomSerializer,
    RoomListSerializer,
    PublicPropertyListSerializer,
    PublicPropertyDetailSerializer,
)
from .services import PropertyService


class PropertyViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Property management
    Deleting a property is refused while any of its rooms has an active tenant.
    """
    serializer_class = PropertySerializer
    permission_classes = [IsAuthenticated, IsAdminMember]
    lookup_value_regex = r'\d+'
    search_fields = ['name', 'address']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']

    def get_queryset(self):
        return Property.objects.all()

    def destroy(self, request, *args, **kwargs):
        PropertyService().delete_property(request.user, int(kwargs['pk']))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['get'])
    def rooms(self, request, pk=None):
        """Rooms of this property with their current tenant"""
        prop = self.get_object()
        rooms = prop.rooms.all().prefetch_related('tenants')
        serializer = RoomSerializer(rooms, many=True, context=self.get_serializer_context())
        return Response(serializer.data)


class RoomViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Room management and the room-side lifecycle actions.

    Status edits are limited to vacant <-> reserved; occupancy changes go
    through move-in / move-out.
    """
    permission_classes = [IsAuthenticated, IsAdminMember]
    lookup_value_regex = r'\d+'
    search_fields = ['room_number', 'property__name', 'room_type']
    ordering_fields = ['room_number', 'floor', 'rent', 'status']
    ordering = ['property__name', 'floor', 'room_number']

    def get_serializer_class(self):
        if self.action == 'list':
            return RoomListSerializer
        return RoomSerializer

    def get_queryset(self):
        queryset = Room.objects.select_related('property')

        property_filter = self.request.query_params.get('property', None)
        if property_filter:
            queryset = queryset.filter(property_id=property_filter)

        status_filter = self.request.query_params.get('status', None)
        if status_filter:
            queryset = queryset.filter(status=status_filter)

        return queryset

    def update(self, request, *args, **kwargs):
        """Update room through the service so status edits are checked under lock"""
        partial = kwargs.pop('partial', False)
        room = self.get_object()
        serializer = self.get_serializer(room, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        room = PropertyService().update_room(request.user, room.id, **serializer.validated_data)
        return Response(RoomSerializer(room, context=self.get_serializer_context()).data)

    def destroy(self, request, *args, **kwargs):
        PropertyService().delete_room(request.user, int(kwargs['pk']))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['get'])
    def vacant(self, request):
        """Rooms that can be offered for move-in"""
        rooms = PropertyService().vacant_rooms_for_move_in()
        serializer = RoomListSerializer(rooms, many=True)
        return Response(serializer.data)

    @action(detail=True, methods=['post'], url_path='move-in')
    def move_in(self, request, pk=None):
        """Move a new tenant into this room"""
        serializer = MoveInSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tenant = OccupancyService().move_in(request.user, serializer.to_dto(room_id=int(pk)))
        return Response(TenantSerializer(tenant).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['post'], url_path='move-out')
    def move_out(self, request, pk=None):
        """Move out this room's active tenant"""
        serializer = MoveOutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tenant = OccupancyService().move_out_of_room(
            request.user,
            int(pk),
            move_out_date=serializer.validated_data.get('move_out_date'),
            notes=serializer.validated_data.get('notes'),
        )
        return Response(TenantSerializer(tenant).data)

    @action(detail=True, methods=['get'])
    def history(self, request, pk=None):
        """Move-in / move-out events for this room"""
        room = self.get_object()
        histories = MoveHistoryRepository(MoveHistory).get_for_room(room.id)
        return Response(MoveHistorySerializer(histories, many=True).data)


class PublicPropertyViewSet(mixins.ListModelMixin,
                            mixins.RetrieveModelMixin,
                            viewsets.GenericViewSet):
    """
    Public vacancy listing - no sign-in required.

    Lists only properties with at least one vacant room and shows only the
    vacant rooms of a property.
    """
    permission_classes = [AllowAny]
    lookup_value_regex = r'\d+'
    authentication_classes = []
    pagination_class = None
    filter_backends = []

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return PublicPropertyDetailSerializer
        return PublicPropertyListSerializer

    def get_queryset(self):
        return PropertyRepository(Property).get_with_vacancies()

    def retrieve(self, request, *args, **kwargs):
        prop = PropertyRepository(Property).get_with_vacant_rooms(int(kwargs['pk']))
        if prop is None:
            raise NotFoundError(resource_type="Property", resource_id=kwargs['pk'])
        return Response(PublicPropertyDetailSerializer(prop).data)

    @action(detail=True, methods=['post'])
    def inquiries(self, request, pk=None):
        """Submit a visitor inquiry about this property or one of its rooms"""
        from inquiries.serializers import PublicInquirySerializer
        from inquiries.services import InquiryService

        prop = PropertyService().get_property(int(pk))
        serializer = PublicInquirySerializer(data=request.data, context={'property': prop})
        serializer.is_valid(raise_exception=True)
        inquiry = InquiryService().submit_visitor_inquiry(prop, serializer.validated_data)
        return Response(
            {'id': inquiry.id, 'subject': inquiry.subject, 'status': inquiry.status},
            status=status.HTTP_201_CREATED
        )
