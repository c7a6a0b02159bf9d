"""
Verification serializers for the loan application demo.
"""

from rest_framework import serializers

from apps.verification.challenge import is_well_formed_code


class VerifyCodeSerializer(serializers.Serializer):
    """Serializer for a submitted verification code."""

    otp = serializers.CharField(
        allow_blank=True,
        required=True,
        help_text="The 4-digit code sent to the applicant.",
    )

    def validate_otp(self, value):
        """Malformed codes are rejected here, before any attempt is used."""
        if not is_well_formed_code(value):
            raise serializers.ValidationError(
                "Enter the 4-digit code sent to your email."
            )
        return value


class ConfirmationResponseSerializer(serializers.Serializer):
    """Serializer for the confirmation step greeting."""

    first_name = serializers.CharField()
    email = serializers.CharField()
    message = serializers.CharField()
    attempts_left = serializers.IntegerField()
    demo_code = serializers.CharField(required=False)


class VerifyCodeResponseSerializer(serializers.Serializer):
    """Serializer for the outcome of a verification attempt."""

    status = serializers.CharField()
    message = serializers.CharField()
    attempts_left = serializers.IntegerField()
    redirect_url = serializers.URLField(required=False)
    redirect_after = serializers.IntegerField(required=False)
