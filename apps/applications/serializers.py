"""
Application serializers for the loan application demo.
"""

import re

from rest_framework import serializers

from apps.core.validators import (
    is_valid_amount,
    is_valid_email,
    is_valid_full_name,
    is_valid_pan,
)

NON_DIGITS = re.compile(r'[^0-9]')


class LoanApplicationSerializer(serializers.Serializer):
    """
    Serializer for the loan application form.

    Blank values are let through to the field validators so every
    field reports the same message whether it is empty or malformed.
    """

    full_name = serializers.CharField(
        allow_blank=True,
        required=True,
        help_text="Applicant's full name (two or more words).",
    )
    email = serializers.CharField(
        allow_blank=True,
        required=True,
        help_text="Applicant's email address.",
    )
    pan = serializers.CharField(
        allow_blank=True,
        required=True,
        help_text="Permanent Account Number, e.g. ABCDE1234F.",
    )
    loan_amount = serializers.CharField(
        allow_blank=True,
        required=True,
        help_text="Requested loan amount in rupees, up to 9 digits.",
    )

    def validate_full_name(self, value):
        if not is_valid_full_name(value):
            raise serializers.ValidationError(
                "Enter at least two words, alphabets & spaces only, each >=4 chars."
            )
        return value

    def validate_email(self, value):
        if not is_valid_email(value):
            raise serializers.ValidationError("Enter a valid email address.")
        return value

    def validate_pan(self, value):
        """PAN is accepted in any case and stored upper-cased."""
        value = value.upper()
        if not is_valid_pan(value):
            raise serializers.ValidationError(
                "PAN must be in format ABCDE1234F (uppercase)."
            )
        return value

    def validate_loan_amount(self, value):
        if not is_valid_amount(value):
            raise serializers.ValidationError(
                "Loan amount must be numeric and up to 9 digits."
            )
        return value


class AmountPreviewSerializer(serializers.Serializer):
    """Serializer for the live loan amount preview."""

    loan_amount = serializers.CharField(
        allow_blank=True,
        required=True,
        help_text="Loan amount as typed; non-digit characters are dropped.",
    )

    def validate_loan_amount(self, value):
        """Strip everything but digits, then enforce the 9-digit limit."""
        digits = NON_DIGITS.sub('', value)
        if digits and not is_valid_amount(digits):
            raise serializers.ValidationError(
                "Enter numeric amount up to 9 digits."
            )
        return digits


class AmountPreviewResponseSerializer(serializers.Serializer):
    """Serializer for the loan amount preview response."""

    loan_amount = serializers.CharField(allow_blank=True)
    amount_in_words = serializers.CharField(allow_blank=True)
    emi = serializers.IntegerField(allow_null=True)
    interest_rate = serializers.FloatField()
    tenure_years = serializers.IntegerField()
    emi_display = serializers.CharField(allow_blank=True)
