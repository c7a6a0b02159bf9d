"""
Application URL configuration.
"""

from django.urls import path

from apps.applications.views import AmountPreviewView, SubmitApplicationView

urlpatterns = [
    path('amount-preview', AmountPreviewView.as_view(), name='amount-preview'),
    path('apply', SubmitApplicationView.as_view(), name='apply'),
]
