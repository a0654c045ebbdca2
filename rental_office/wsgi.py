"""
WSGI config for rental_office project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'rental_office.settings')

application = get_wsgi_application()
