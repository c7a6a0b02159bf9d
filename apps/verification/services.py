"""
Verification service layer.

Issues the one-time password challenge for a submitted application,
checks guesses against it, and decides where the applicant goes next.
The challenge lives in the session next to the application handoff.
"""

import logging
from typing import Optional

from django.conf import settings
from kombu.exceptions import OperationalError
from redis.exceptions import ConnectionError as RedisConnectionError

from apps.applications.handoff import clear_application, load_application
from apps.core.exceptions import ChallengeClosedError, ChallengeNotActiveError
from apps.verification.challenge import (
    DEFAULT_MAX_ATTEMPTS,
    OTPChallenge,
    VerificationOutcome,
)
from apps.verification.tasks import deliver_verification_code

logger = logging.getLogger(__name__)

SESSION_KEY = 'otp_challenge'

MESSAGES = {
    VerificationOutcome.MALFORMED: 'Enter the 4-digit code sent to your email.',
    VerificationOutcome.RETRY: 'Incorrect code. Please try again.',
    VerificationOutcome.SUCCEEDED: 'Validation Successful!',
    VerificationOutcome.FAILED: 'Validation Failed!',
}


def load_challenge(session) -> Optional[OTPChallenge]:
    data = session.get(SESSION_KEY)
    if not data:
        return None
    return OTPChallenge.from_dict(data)


def save_challenge(session, challenge: OTPChallenge) -> None:
    session[SESSION_KEY] = challenge.to_dict()


def clear_challenge(session) -> None:
    session.pop(SESSION_KEY, None)


class VerificationService:
    """Service class for the confirmation step."""

    @staticmethod
    def start(session) -> dict:
        """
        Issue a new challenge for the application in the session.

        Reloading the confirmation step calls this again, which replaces
        the previous code and resets the attempt count.

        Args:
            session: The request's session.

        Returns:
            Dict with first_name, email, message and attempts_left, plus
            demo_code when OTP_EXPOSE_CODE is enabled.

        Raises:
            MissingApplicationDataError: If no application was submitted.
        """
        application = load_application(session)

        challenge = OTPChallenge.issue(
            max_attempts=getattr(settings, 'OTP_MAX_ATTEMPTS', DEFAULT_MAX_ATTEMPTS),
        )
        save_challenge(session, challenge)

        try:
            deliver_verification_code.apply_async(
                args=(application.email, application.first_name, challenge.code),
                retry=False,
            )
        except (OperationalError, RedisConnectionError):
            # Delivery is simulated and never blocks the challenge
            logger.warning(
                "Could not queue verification code delivery for %s",
                application.email,
                exc_info=True,
            )

        logger.info(
            "Verification challenge issued for %s (max_attempts=%d)",
            application.email,
            challenge.max_attempts,
        )

        result = {
            'first_name': application.first_name,
            'email': application.email,
            'message': (
                f"Dear {application.first_name}, thank you for your inquiry. "
                f"A 4 digit verification number has been sent to your email: "
                f"{application.email}. Please enter it below and submit for "
                f"confirmation."
            ),
            'attempts_left': challenge.attempts_left,
        }
        if getattr(settings, 'OTP_EXPOSE_CODE', False):
            result['demo_code'] = challenge.code
        return result

    @staticmethod
    def verify(session, code: str) -> dict:
        """
        Check a submitted code against the active challenge.

        Terminal outcomes clear both the challenge and the application
        from the session and carry the redirect target.

        Args:
            session: The request's session.
            code: The code as entered.

        Returns:
            Dict with status, message and attempts_left, plus
            redirect_url and redirect_after for terminal outcomes.

        Raises:
            ChallengeNotActiveError: If no active challenge exists.
        """
        challenge = load_challenge(session)
        if challenge is None:
            raise ChallengeNotActiveError()

        try:
            outcome = challenge.submit(code)
        except ChallengeClosedError:
            clear_challenge(session)
            raise ChallengeNotActiveError()

        result = {
            'status': outcome.value,
            'message': MESSAGES[outcome],
            'attempts_left': challenge.attempts_left,
        }

        if outcome == VerificationOutcome.SUCCEEDED:
            result['redirect_url'] = settings.OTP_SUCCESS_REDIRECT_URL
        elif outcome == VerificationOutcome.FAILED:
            result['redirect_url'] = settings.OTP_FAILURE_REDIRECT_URL

        if 'redirect_url' in result:
            result['redirect_after'] = settings.OTP_REDIRECT_DELAY_SECONDS
            clear_challenge(session)
            clear_application(session)
            logger.info(
                "Verification %s after %d attempt(s)",
                outcome.value,
                challenge.attempts_used,
            )
        else:
            save_challenge(session, challenge)
            logger.info(
                "Verification attempt rejected (%s), %d left",
                outcome.value,
                challenge.attempts_left,
            )

        return result
