"""
URL configuration for the Loan Application Demo.
"""

from django.urls import include, path

from apps.core.views import health_check

urlpatterns = [
    path('health/', health_check, name='health-check'),
    path('api/', include('apps.applications.urls')),
    path('api/', include('apps.verification.urls')),
]
