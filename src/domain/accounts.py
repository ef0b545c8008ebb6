"""
Account creation - Runs an accepted registration.

AccountService hashes and persists the account; RegistrationManagement
implements the RegistrationExecutor port on top of it and reports the
result to the player.
"""

import logging
from dataclasses import dataclass

import bcrypt

from .exceptions import AccountAlreadyRegistered, PasswordTooLong
from .ports import AccountRepository, MailTransport, MessageKey, Messenger
from .senders import Player

logger = logging.getLogger(__name__)

# bcrypt only hashes the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


@dataclass
class AccountService:
    """
    Domain service for account creation.

    Orchestrates name normalization, password hashing, persistence
    and delivery of generated recovery passwords.
    """

    repository: AccountRepository
    mail_transport: MailTransport
    bcrypt_cost: int = 10

    def create_account(self, name: str, password: str, email: str, logged_in: bool) -> str:
        """
        Create an account for a player.

        Args:
            name: Player name (will be normalized)
            password: Plaintext password (will be hashed)
            email: Email address, "" when registering with a password
            logged_in: Whether the session starts authenticated

        Returns:
            Normalized player name

        Raises:
            PasswordTooLong: If the password exceeds MAX_PASSWORD_BYTES once encoded
            AccountAlreadyRegistered: If the name is already registered
        """
        if len(password.encode()) > MAX_PASSWORD_BYTES:
            raise PasswordTooLong(name)

        normalized_name = self._normalize_name(name)
        password_hash = self._hash_password(password)

        created = self.repository.save_account(
            normalized_name, name, password_hash, email or None, logged_in
        )
        if not created:
            raise AccountAlreadyRegistered(normalized_name)

        logger.info("Account created for %s", normalized_name)
        if email:
            self.mail_transport.send_password_mail(name, email, password)
        return normalized_name

    def _normalize_name(self, name: str) -> str:
        """
        Normalize player name for consistent storage and lookup.

        Applies: strip whitespace + lowercase
        """
        return name.strip().lower()

    def _hash_password(self, password: str) -> str:
        """Hash password using bcrypt with cost factor >= 10."""
        rounds = max(self.bcrypt_cost, 10)
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


@dataclass
class RegistrationManagement:
    """Implements RegistrationExecutor by creating the account and messaging the player."""

    accounts: AccountService
    messenger: Messenger

    def perform_register(
        self, player: Player, password: str, email: str, force_login: bool
    ) -> None:
        try:
            self.accounts.create_account(player.name, password, email, force_login)
        except PasswordTooLong:
            self.messenger.send(player, MessageKey.PASSWORD_TOO_LONG)
            return
        except AccountAlreadyRegistered:
            self.messenger.send(player, MessageKey.NAME_ALREADY_REGISTERED)
            return

        if email:
            self.messenger.send(player, MessageKey.REGISTER_EMAIL_SUCCESS)
        else:
            self.messenger.send(player, MessageKey.REGISTER_SUCCESS)
        if force_login:
            self.messenger.send(player, MessageKey.LOGIN_SUCCESS)
