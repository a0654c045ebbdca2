"""
Browser sign-in redirects for the back office.

API clients are left alone: DRF answers them with 401/403. Only requests
that ask for HTML (a browser opening the browsable API) are redirected.
"""

import logging
import re
from urllib.parse import urlencode
from django.conf import settings
from django.shortcuts import redirect

logger = logging.getLogger(__name__)


class LoginRedirectMiddleware:
    """
    - Anonymous browser requests to back-office pages go to LOGIN_URL?next=<path>
    - A signed-in admin opening the login page goes to LOGIN_REDIRECT_URL
    """

    # Paths reachable without signing in
    EXEMPT_PATHS = [
        r'^/api/public/',      # Vacant listing and visitor inquiries
        r'^/api/auth/',        # Sign-in endpoints
        r'^/api/cron/',        # Keep-alive trigger (bearer secret)
        r'^/api-auth/',        # Browsable API login/logout
        r'^/admin/',           # Django admin has its own login
        r'^/health/',          # Health check
        r'^/static/',          # Static files
    ]

    PROTECTED_PATHS = [
        r'^/api/',
    ]

    def __init__(self, get_response):
        self.get_response = get_response
        self.exempt = [re.compile(p) for p in self.EXEMPT_PATHS]
        self.protected = [re.compile(p) for p in self.PROTECTED_PATHS]

    def __call__(self, request):
        path = request.path
        user = getattr(request, 'user', None)
        signed_in = bool(user and user.is_authenticated)

        if path == settings.LOGIN_URL and signed_in:
            return redirect(settings.LOGIN_REDIRECT_URL)

        if not signed_in and self._wants_html(request) and self._is_protected(path):
            logger.debug(f"Redirecting anonymous browser request for {path} to sign-in")
            return redirect(f"{settings.LOGIN_URL}?{urlencode({'next': request.get_full_path()})}")

        return self.get_response(request)

    def _is_protected(self, path):
        if any(p.match(path) for p in self.exempt):
            return False
        return any(p.match(path) for p in self.protected)

    @staticmethod
    def _wants_html(request):
        return 'text/html' in request.META.get('HTTP_ACCEPT', '')
