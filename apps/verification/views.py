"""
Verification views for the loan application demo.

Views are thin — all business logic is in the service layer.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.verification.serializers import (
    ConfirmationResponseSerializer,
    VerifyCodeResponseSerializer,
    VerifyCodeSerializer,
)
from apps.verification.services import VerificationService


class ConfirmationView(APIView):
    """
    GET /api/confirm

    Greet the applicant and issue a new verification code.
    """

    def get(self, request):
        """Handle loading the confirmation step."""
        result = VerificationService.start(request.session)

        response_serializer = ConfirmationResponseSerializer(data=result)
        response_serializer.is_valid(raise_exception=True)

        return Response(
            response_serializer.validated_data,
            status=status.HTTP_200_OK,
        )


class VerifyCodeView(APIView):
    """
    POST /api/confirm/verify

    Check a verification code against the active challenge.
    """

    def post(self, request):
        """Handle a verification attempt."""
        serializer = VerifyCodeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = VerificationService.verify(
            request.session,
            serializer.validated_data['otp'],
        )

        response_serializer = VerifyCodeResponseSerializer(data=result)
        response_serializer.is_valid(raise_exception=True)

        return Response(
            response_serializer.validated_data,
            status=status.HTTP_200_OK,
        )
