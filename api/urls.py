"""
API URLs for the rental office back office
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from properties.views import PropertyViewSet, RoomViewSet, PublicPropertyViewSet
from tenants.views import TenantViewSet
from occupancy.views import MoveHistoryViewSet
from maintenance.views import MaintenanceViewSet
from inquiries.views import InquiryViewSet
from finances.views import FinanceViewSet
from users.views import AdminViewSet
from common.health import keep_alive

# Create router
router = DefaultRouter()
router.register(r'properties', PropertyViewSet, basename='property')
router.register(r'rooms', RoomViewSet, basename='room')
router.register(r'tenants', TenantViewSet, basename='tenant')
router.register(r'move-histories', MoveHistoryViewSet, basename='move-history')
router.register(r'maintenance', MaintenanceViewSet, basename='maintenance')
router.register(r'inquiries', InquiryViewSet, basename='inquiry')
router.register(r'finances', FinanceViewSet, basename='finance')
router.register(r'admins', AdminViewSet, basename='admin')

# Public vacancy listing (no sign-in)
public_router = DefaultRouter()
public_router.register(r'properties', PublicPropertyViewSet, basename='public-property')

urlpatterns = [
    # Authentication
    path('auth/', include('accounts.urls')),

    # Public listing and visitor inquiries
    path('public/', include(public_router.urls)),

    # Scheduled keep-alive trigger
    path('cron/keep-alive/', keep_alive, name='keep_alive'),

    # Dashboard
    path('dashboard/', include('dashboard.urls')),

    # API routes
    path('', include(router.urls)),
]
