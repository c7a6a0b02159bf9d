"""
One-time password challenge for the confirmation step.

A challenge starts active with a fresh 4-digit code and ends either
succeeded (correct code) or failed (attempt budget exhausted). Codes
are simulated: they are never delivered anywhere and are not secure.
"""

import random
import re
from dataclasses import asdict, dataclass
from enum import Enum

from apps.core.exceptions import ChallengeClosedError

CODE_PATTERN = re.compile(r'[0-9]{4}')
CODE_MIN = 1000
CODE_MAX = 9999
DEFAULT_MAX_ATTEMPTS = 3


class ChallengeStatus(str, Enum):
    ACTIVE = 'active'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


class VerificationOutcome(str, Enum):
    """Result of submitting one guess."""

    MALFORMED = 'malformed'
    RETRY = 'retry'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


def generate_code(rng=None) -> str:
    """Uniform random integer in [1000, 9999] as a 4-character string."""
    rng = rng or random.SystemRandom()
    return str(rng.randint(CODE_MIN, CODE_MAX))


def is_well_formed_code(guess) -> bool:
    return isinstance(guess, str) and CODE_PATTERN.fullmatch(guess) is not None


@dataclass
class OTPChallenge:
    code: str
    attempts_used: int = 0
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    status: ChallengeStatus = ChallengeStatus.ACTIVE

    @classmethod
    def issue(cls, max_attempts: int = DEFAULT_MAX_ATTEMPTS, rng=None) -> 'OTPChallenge':
        """Create an active challenge with a freshly generated code."""
        return cls(code=generate_code(rng), max_attempts=max_attempts)

    @property
    def is_active(self) -> bool:
        return self.status == ChallengeStatus.ACTIVE

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempts_used

    def submit(self, guess: str) -> VerificationOutcome:
        """
        Check a guess against the code.

        A guess that is not exactly four digits is rejected without
        consuming an attempt. Surrounding whitespace is ignored.

        Args:
            guess: The code as entered by the applicant.

        Returns:
            The outcome of this guess.

        Raises:
            ChallengeClosedError: If the challenge already succeeded or failed.
        """
        if not self.is_active:
            raise ChallengeClosedError(
                f"Challenge already {self.status.value}."
            )

        guess = guess.strip() if isinstance(guess, str) else guess
        if not is_well_formed_code(guess):
            return VerificationOutcome.MALFORMED

        self.attempts_used += 1

        if guess == self.code:
            self.status = ChallengeStatus.SUCCEEDED
            return VerificationOutcome.SUCCEEDED

        if self.attempts_used >= self.max_attempts:
            self.status = ChallengeStatus.FAILED
            return VerificationOutcome.FAILED

        return VerificationOutcome.RETRY

    def to_dict(self) -> dict:
        data = asdict(self)
        data['status'] = self.status.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'OTPChallenge':
        return cls(
            code=data['code'],
            attempts_used=int(data.get('attempts_used', 0)),
            max_attempts=int(data.get('max_attempts', DEFAULT_MAX_ATTEMPTS)),
            status=ChallengeStatus(data.get('status', ChallengeStatus.ACTIVE.value)),
        )
