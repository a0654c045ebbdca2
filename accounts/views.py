"""
Sign-in endpoints for the back office.

JWT clients use /api/auth/login/ and /api/auth/refresh/ (SimpleJWT).
Browser clients sign in with a Django session here.
"""
import logging
from django.contrib.auth import authenticate, login, logout
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from api.permissions import IsAdminMember
from users.serializers import AdminSerializer
from .serializers import SessionLoginSerializer

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([AllowAny])
def session_login(request):
    """Sign in with email + password and start a session"""
    serializer = SessionLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    admin = authenticate(
        request,
        email=serializer.validated_data['email'],
        password=serializer.validated_data['password'],
    )
    if admin is None:
        logger.warning(f"Failed sign-in for {serializer.validated_data['email']}")
        return Response(
            {'detail': 'Invalid email or password.'},
            status=status.HTTP_401_UNAUTHORIZED
        )

    login(request._request, admin)
    logger.info(f"Admin signed in: {admin.email}")
    return Response(AdminSerializer(admin).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def session_logout(request):
    """End the current session"""
    email = request.user.email
    logout(request._request)
    logger.info(f"Admin signed out: {email}")
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminMember])
def me(request):
    """The signed-in admin"""
    return Response(AdminSerializer(request.user).data)
