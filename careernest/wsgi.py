"""
WSGI config for the Career Nest backend.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'careernest.settings')

application = get_wsgi_application()
