"""
Console mail transport adapter - Implements MailTransport protocol.

This module provides a console-based implementation of the domain's
mail transport port, logging recovery passwords to stdout for demo purposes.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleMailTransport:
    """
    Implements MailTransport protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Mail is only considered deliverable once the account credentials are
    configured, mirroring what an SMTP transport would need.
    """

    def __init__(self, mail_account: str, mail_password: str) -> None:
        """
        Initialize transport with mail credentials.

        Args:
            mail_account: Sender account used to authenticate
            mail_password: Password for the sender account
        """
        self._mail_account = mail_account
        self._mail_password = mail_password

    def has_all_information(self) -> bool:
        """Return True if both the mail account and its password are set."""
        return bool(self._mail_account.strip()) and bool(self._mail_password.strip())

    def send_password_mail(self, name: str, email: str, password: str) -> None:
        """
        Log a generated recovery password (simulates email delivery).

        In production, this would be replaced with an SMTP adapter.

        Args:
            name: Player name
            email: Recipient email address
            password: Generated recovery password
        """
        logger.info("[RECOVERY] Player: %s Email: %s Password: %s", name, email, password)
