"""
Health Check Endpoints for the rental office back office

Provides endpoints for:
- Liveness checks (is the app running?)
- Readiness checks (can the app reach its database?)
- Keep-alive trigger for the external scheduler (touches the database so
  hosted databases that pause when idle stay awake)
"""

import hmac
import time
import logging
from django.conf import settings
from django.http import JsonResponse
from django.db import connection, DatabaseError
from django.utils import timezone
from django.views.decorators.http import require_GET
from django.views.decorators.csrf import csrf_exempt

logger = logging.getLogger(__name__)


@csrf_exempt
@require_GET
def health_check(request):
    """
    Basic health check - returns 200 if app is running.
    Used by load balancers and container orchestration.
    """
    return JsonResponse({
        'status': 'healthy',
        'timestamp': time.time(),
    })


@csrf_exempt
@require_GET
def readiness_check(request):
    """
    Readiness check - verifies the database answers.
    """
    checks = {'database': False}
    errors = []

    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
            cursor.fetchone()
        checks['database'] = True
    except DatabaseError as e:
        errors.append(f'Database: {str(e)}')
        logger.error(f'Health check - Database error: {e}')

    all_healthy = all(checks.values())
    status_code = 200 if all_healthy else 503

    return JsonResponse({
        'status': 'ready' if all_healthy else 'not_ready',
        'timestamp': time.time(),
        'checks': checks,
        'errors': errors if errors else None,
    }, status=status_code)


def has_cron_secret(request):
    """Authorization: Bearer <CRON_SECRET>; always False when no secret is configured"""
    secret = getattr(settings, 'CRON_SECRET', '')
    if not secret:
        return False
    expected = f"Bearer {secret}"
    return hmac.compare_digest(request.META.get('HTTP_AUTHORIZATION', ''), expected)


@csrf_exempt
@require_GET
def keep_alive(request):
    """
    Scheduled keep-alive: counts properties so the database sees activity.
    """
    if not has_cron_secret(request):
        logger.warning("Keep-alive rejected: bad or missing bearer secret")
        return JsonResponse({'error': 'Unauthorized'}, status=401)

    from properties.models import Property

    try:
        count = Property.objects.count()
    except DatabaseError as e:
        logger.error(f'Keep-alive - Database error: {e}', exc_info=True)
        return JsonResponse({'error': str(e)}, status=500)

    logger.info(f"Keep-alive ok: {count} properties")
    return JsonResponse({
        'ok': True,
        'properties': count,
        'timestamp': timezone.now().isoformat(),
    })


def get_health_urls():
    """
    Returns URL patterns for health endpoints.
    Add to your urls.py:
        from common.health import get_health_urls
        urlpatterns += get_health_urls()
    """
    from django.urls import path

    return [
        path('health/', health_check, name='health_check'),
        path('health/ready/', readiness_check, name='readiness_check'),
    ]
