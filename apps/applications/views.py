"""
Application views for the loan application demo.

Views are thin — all business logic is in the service layer.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.applications.serializers import (
    AmountPreviewResponseSerializer,
    AmountPreviewSerializer,
    LoanApplicationSerializer,
)
from apps.applications.services import ApplicationService

logger = logging.getLogger(__name__)


class AmountPreviewView(APIView):
    """
    POST /api/amount-preview

    Recompute the amount in words and EMI estimate for the value
    currently typed into the loan amount field.
    """

    def post(self, request):
        """Handle a loan amount preview."""
        serializer = AmountPreviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = ApplicationService.preview_amount(
            serializer.validated_data['loan_amount'],
        )

        response_serializer = AmountPreviewResponseSerializer(data=result)
        response_serializer.is_valid(raise_exception=True)

        return Response(
            response_serializer.validated_data,
            status=status.HTTP_200_OK,
        )


class SubmitApplicationView(APIView):
    """
    POST /api/apply

    Validate the loan application form and hand it to the
    confirmation step.
    """

    def post(self, request):
        """Handle form submission."""
        serializer = LoanApplicationSerializer(data=request.data)
        if not serializer.is_valid():
            logger.info(
                "Application rejected: invalid fields %s",
                ', '.join(sorted(serializer.errors)),
            )
            raise ValidationError(serializer.errors)

        ApplicationService.submit(request.session, serializer.validated_data)

        return Response(
            {
                'message': 'Application details saved. Continue to confirmation.',
                'next': '/api/confirm',
            },
            status=status.HTTP_201_CREATED,
        )
