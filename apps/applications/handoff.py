"""
Handoff of a validated application from the form step to the
confirmation step.

The application travels in the Django session as a plain dict under a
single key, so both steps agree on one explicit contract instead of
reading loose session entries.
"""

from dataclasses import asdict, dataclass
from typing import Optional

from apps.core.exceptions import MissingApplicationDataError

SESSION_KEY = 'application'


@dataclass(frozen=True)
class ApplicationInput:
    """A loan application whose four fields already passed validation."""

    full_name: str
    email: str
    pan: str
    loan_amount: str

    @property
    def first_name(self) -> str:
        """First whitespace-separated word of the full name."""
        return self.full_name.split()[0]

    def to_session(self) -> dict:
        return asdict(self)

    @classmethod
    def from_session(cls, data: Optional[dict]) -> 'ApplicationInput':
        """
        Rebuild an application from session data.

        Raises:
            MissingApplicationDataError: If the name or email is missing.
        """
        data = data or {}
        full_name = (data.get('full_name') or '').strip()
        email = (data.get('email') or '').strip()

        if not full_name or not email:
            raise MissingApplicationDataError()

        return cls(
            full_name=full_name,
            email=email,
            pan=data.get('pan') or '',
            loan_amount=data.get('loan_amount') or '',
        )


def save_application(session, application: ApplicationInput) -> None:
    """Write all four fields in one assignment."""
    session[SESSION_KEY] = application.to_session()


def load_application(session) -> ApplicationInput:
    return ApplicationInput.from_session(session.get(SESSION_KEY))


def clear_application(session) -> None:
    session.pop(SESSION_KEY, None)
