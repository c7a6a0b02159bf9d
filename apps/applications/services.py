"""
Application service layer.

Amount preview and form submission logic for the application step.
Views delegate to this service — no business logic in views.
"""

import logging

from django.conf import settings

from apps.applications.handoff import ApplicationInput, save_application
from apps.core.utils import (
    DEFAULT_INTEREST_RATE,
    DEFAULT_TENURE_YEARS,
    calculate_emi,
    round_half_up,
)
from apps.core.words import number_to_words_indian
from apps.verification.services import clear_challenge

logger = logging.getLogger(__name__)


class ApplicationService:
    """Service class for the loan application form."""

    @staticmethod
    def preview_amount(loan_amount: str) -> dict:
        """
        Build the derived text shown under the loan amount field.

        The amount in words and the EMI estimate are returned together.

        Args:
            loan_amount: Digits-only amount, possibly empty.

        Returns:
            Dict with amount_in_words, emi, interest_rate, tenure_years
            and emi_display. Derived fields are blank for an empty amount.
        """
        interest_rate = float(getattr(
            settings, 'LOAN_DEFAULT_INTEREST_RATE', DEFAULT_INTEREST_RATE,
        ))
        tenure_years = int(getattr(
            settings, 'LOAN_DEFAULT_TENURE_YEARS', DEFAULT_TENURE_YEARS,
        ))

        result = {
            'loan_amount': loan_amount,
            'amount_in_words': '',
            'emi': None,
            'interest_rate': interest_rate,
            'tenure_years': tenure_years,
            'emi_display': '',
        }
        if not loan_amount:
            return result

        amount = int(loan_amount)
        emi = round_half_up(calculate_emi(amount, interest_rate, tenure_years))

        result['amount_in_words'] = number_to_words_indian(amount)
        result['emi'] = emi
        result['emi_display'] = (
            f"Estimated EMI ({interest_rate:g}% p.a., {tenure_years} yrs): "
            f"₹ {emi} / month"
        )
        return result

    @staticmethod
    def submit(session, validated_data: dict) -> ApplicationInput:
        """
        Hand a validated application over to the confirmation step.

        Any verification challenge left from an earlier submission is
        discarded so the confirmation step starts fresh.

        Args:
            session: The request's session.
            validated_data: Dict with full_name, email, pan, loan_amount.

        Returns:
            The ApplicationInput stored in the session.
        """
        application = ApplicationInput(
            full_name=validated_data['full_name'],
            email=validated_data['email'],
            pan=validated_data['pan'],
            loan_amount=validated_data['loan_amount'],
        )
        save_application(session, application)
        clear_challenge(session)

        logger.info(
            "Application received for %s (loan_amount=%s)",
            application.email,
            application.loan_amount,
        )

        return application
