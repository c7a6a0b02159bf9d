"""
Celery application for the Loan Application Demo.
"""

import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('loan_application')

# Read CELERY_* keys from Django settings
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()
