"""
URL configuration for rental_office project.
"""
from django.contrib import admin
from django.urls import path, include
from django.shortcuts import redirect

# Import admin customization (just to apply it, not to use)
from rental_office import admin as admin_customization  # noqa: F401

# Import health check URLs
from common.health import get_health_urls


def root_redirect(request):
    """Redirect root to dashboard or login"""
    if request.user.is_authenticated:
        return redirect('dashboard:summary')
    return redirect('rest_framework:login')


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('api.urls')),  # API routes
    path('api-auth/', include('rest_framework.urls')),  # Browsable API sign-in
    path('', root_redirect, name='root'),
]

# Add health check endpoints (for load balancers, monitoring)
urlpatterns += get_health_urls()
