"""
Custom exceptions and DRF exception handler for the loan application demo.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class MissingApplicationDataError(APIException):
    """Raised when the confirmation step is reached without a submitted application."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Required application data missing. Please fill the form first.'
    default_code = 'application_missing'


class ChallengeNotActiveError(APIException):
    """Raised when a code is submitted with no active verification challenge."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = 'No active verification. Please reload the confirmation page.'
    default_code = 'challenge_not_active'


class ChallengeClosedError(Exception):
    """Raised when a guess is submitted to a challenge that already ended."""

    pass


def custom_exception_handler(exc, context):
    """
    Custom DRF exception handler that returns consistent error responses.

    Handles all DRF exceptions and adds logging for server errors.
    """
    response = exception_handler(exc, context)

    if response is not None:
        error_data = {
            'error': True,
            'status_code': response.status_code,
            'detail': response.data,
        }
        response.data = error_data
    else:
        # Unhandled exceptions — log and return 500
        logger.exception(
            "Unhandled exception in %s",
            context.get('view', 'unknown'),
            exc_info=exc,
        )
        response = Response(
            {
                'error': True,
                'status_code': 500,
                'detail': 'An unexpected error occurred. Please try again later.',
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return response
