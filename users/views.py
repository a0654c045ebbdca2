import logging
from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from api.permissions import IsSuperAdminOrReadOnly
from core.exceptions import BusinessLogicError
from .models import Admin
from .serializers import AdminSerializer

logger = logging.getLogger(__name__)


class AdminViewSet(viewsets.ModelViewSet):
    """
    ViewSet for back-office admin accounts
    Every admin can list; only super admins can create, edit or delete.
    """
    serializer_class = AdminSerializer
    permission_classes = [IsAuthenticated, IsSuperAdminOrReadOnly]
    lookup_value_regex = r'\d+'
    search_fields = ['email', 'name']
    ordering_fields = ['email', 'name', 'date_joined']
    ordering = ['-date_joined']

    def get_queryset(self):
        return Admin.objects.all()

    def perform_create(self, serializer):
        admin = serializer.save()
        logger.info(f"Admin created: {admin.email} ({admin.role}) by {self.request.user.email}")

    def destroy(self, request, *args, **kwargs):
        admin = self.get_object()
        if admin.pk == request.user.pk:
            raise BusinessLogicError(
                message="You cannot delete your own admin account",
                code="CANNOT_DELETE_SELF"
            )
        email = admin.email
        admin.delete()
        logger.info(f"Admin deleted: {email} by {request.user.email}")
        return Response(status=status.HTTP_204_NO_CONTENT)
