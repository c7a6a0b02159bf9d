"""
Verification URL configuration.
"""

from django.urls import path

from apps.verification.views import ConfirmationView, VerifyCodeView

urlpatterns = [
    path('confirm', ConfirmationView.as_view(), name='confirm'),
    path('confirm/verify', VerifyCodeView.as_view(), name='confirm-verify'),
]
