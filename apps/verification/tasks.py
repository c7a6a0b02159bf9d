"""
Celery tasks for the confirmation step.

Delivery is simulated: the task logs the notice instead of sending
email or SMS.
"""

import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task(
    name='verification.deliver_verification_code',
    ignore_result=True,
)
def deliver_verification_code(email, first_name, code):
    """
    Pretend to send the verification code to the applicant.

    The code itself is only logged at DEBUG level, for demo and
    testing use.
    """
    logger.info(
        "Verification code issued to %s <%s> (simulated delivery)",
        first_name,
        email,
    )
    logger.debug("Verification code for %s (demo only): %s", email, code)

    return {'status': 'simulated', 'email': email}
