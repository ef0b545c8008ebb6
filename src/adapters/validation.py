"""
Email validation adapter - Implements EmailValidator protocol.

Syntax is checked with email-validator (no DNS lookups); the domain is
then checked against the configured whitelist or blacklist.
"""

import logging
from collections.abc import Iterable

import email_validator

logger = logging.getLogger(__name__)

# Example address shipped in default configs and help texts
PLACEHOLDER_EMAIL = "your@email.com"


class EmailValidationService:
    """
    Implements EmailValidator protocol.

    A non-empty whitelist takes precedence: only its domains are accepted
    and the blacklist is ignored.
    """

    def __init__(
        self,
        domain_whitelist: Iterable[str] = (),
        domain_blacklist: Iterable[str] = (),
    ) -> None:
        self._whitelist = {domain.strip().lower() for domain in domain_whitelist}
        self._blacklist = {domain.strip().lower() for domain in domain_blacklist}

    def validate_email(self, candidate: str) -> bool:
        """Return True if the candidate is a well-formed address on an allowed domain."""
        if candidate.strip().lower() == PLACEHOLDER_EMAIL:
            return False

        try:
            validated = email_validator.validate_email(candidate, check_deliverability=False)
        except email_validator.EmailNotValidError as e:
            logger.debug("Rejected email %s: %s", candidate, e)
            return False

        return self._is_domain_allowed(validated.domain.lower())

    def _is_domain_allowed(self, domain: str) -> bool:
        if self._whitelist:
            return domain in self._whitelist
        return domain not in self._blacklist
