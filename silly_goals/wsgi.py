"""WSGI entry point for the Silly Goals project."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'silly_goals.settings')

application = get_wsgi_application()
