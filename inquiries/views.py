from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from api.permissions import IsAdminMember
from .models import Inquiry
from .serializers import InquirySerializer, InquiryListSerializer, InquiryRespondSerializer
from .services import InquiryService


class InquiryViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Inquiry management
    Visitors submit through the public listing; admins triage here.
    """
    permission_classes = [IsAuthenticated, IsAdminMember]
    lookup_value_regex = r'\d+'
    search_fields = ['name', 'email', 'subject', 'message']
    ordering_fields = ['created_at', 'status']
    ordering = ['-created_at']

    def get_serializer_class(self):
        if self.action == 'list':
            return InquiryListSerializer
        if self.action == 'respond':
            return InquiryRespondSerializer
        return InquirySerializer

    def get_queryset(self):
        queryset = Inquiry.objects.all()

        # Filter by inquirer type
        inquirer_type = self.request.query_params.get('inquirer_type', None)
        if inquirer_type:
            queryset = queryset.filter(inquirer_type=inquirer_type)

        # Filter by status
        status_filter = self.request.query_params.get('status', None)
        if status_filter:
            queryset = queryset.filter(status=status_filter)

        return queryset.select_related('property', 'room', 'tenant')

    @action(detail=True, methods=['post'])
    def respond(self, request, pk=None):
        """Set status and response; stamps responded_at when a response is given"""
        serializer = InquiryRespondSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        inquiry = InquiryService().respond(
            request.user,
            int(pk),
            status=serializer.validated_data['status'],
            response=serializer.validated_data.get('response'),
        )
        return Response(InquirySerializer(inquiry).data)
