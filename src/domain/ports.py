"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, together with the enumerations and the configuration
snapshot they exchange. Adapters implement these protocols.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .senders import CommandSender, Player


class RegistrationArgumentType(str, Enum):
    """
    Registration mode selected by configuration.

    Determines which arguments /register expects:
    - PASSWORD: <password>
    - PASSWORD_WITH_CONFIRMATION: <password> <password>
    - EMAIL: <email> (a recovery password is generated)
    - EMAIL_WITH_CONFIRMATION: <email> <email>
    """

    PASSWORD = "PASSWORD"
    PASSWORD_WITH_CONFIRMATION = "PASSWORD_WITH_CONFIRMATION"
    EMAIL = "EMAIL"
    EMAIL_WITH_CONFIRMATION = "EMAIL_WITH_CONFIRMATION"


class HashAlgorithm(str, Enum):
    """
    Password hash algorithm configured for the server.

    TWO_FACTOR replaces the password with an out-of-band factor, so
    registration accepts no credential arguments at all.
    """

    BCRYPT = "BCRYPT"
    SHA256 = "SHA256"
    ARGON2 = "ARGON2"
    PBKDF2 = "PBKDF2"
    TWO_FACTOR = "TWO_FACTOR"


class MessageKey(str, Enum):
    """Identifiers of the user-facing messages sent to a command sender."""

    USAGE_REGISTER = "usage_register"
    PASSWORD_MATCH_ERROR = "password_match_error"
    INCOMPLETE_EMAIL_SETTINGS = "incomplete_email_settings"
    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_LONG = "password_too_long"
    REGISTER_SUCCESS = "register_success"
    REGISTER_EMAIL_SUCCESS = "register_email_success"
    NAME_ALREADY_REGISTERED = "name_already_registered"
    LOGIN_SUCCESS = "login_success"


@dataclass(frozen=True)
class RegistrationConfig:
    """
    Read-only configuration snapshot for one command invocation.

    Taken once per invocation so every read within it observes the same value.
    """

    hash_algorithm: HashAlgorithm
    registration_type: RegistrationArgumentType
    recovery_password_length: int


class ConfigSource(Protocol):
    """Port interface for configuration snapshots."""

    def registration_config(self) -> RegistrationConfig:
        """Return the current registration settings."""
        ...


class Messenger(Protocol):
    """Port interface for delivering user-facing messages."""

    def send(self, sender: CommandSender, key: MessageKey) -> None:
        """
        Deliver the text registered for a message key to a sender.

        Args:
            sender: Recipient of the message
            key: Message identifier
        """
        ...


class EmailValidator(Protocol):
    """Port interface for email address validation."""

    def validate_email(self, candidate: str) -> bool:
        """Return True if the candidate is an acceptable email address."""
        ...


class MailTransport(Protocol):
    """Port interface for outgoing mail."""

    def has_all_information(self) -> bool:
        """Return True if every setting required to send mail is present."""
        ...

    def send_password_mail(self, name: str, email: str, password: str) -> None:
        """
        Send a generated recovery password to a player.

        Args:
            name: Player name
            email: Recipient email address
            password: Generated recovery password
        """
        ...


class PasswordGenerator(Protocol):
    """Port interface for recovery password generation."""

    def generate(self, length: int) -> str:
        """Return a random password of exactly `length` characters."""
        ...


class RegistrationExecutor(Protocol):
    """Port interface for the component that actually creates accounts."""

    def perform_register(
        self, player: Player, password: str, email: str, force_login: bool
    ) -> None:
        """
        Create the account for a player. Fire-and-forget from the caller's view.

        Args:
            player: Player issuing the command
            password: Chosen or generated password ("" under two-factor)
            email: Email address ("" for password registration)
            force_login: Log the player in right after account creation
        """
        ...


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def save_account(
        self,
        name: str,
        real_name: str,
        password_hash: str,
        email: str | None,
        logged_in: bool,
    ) -> bool:
        """
        Atomically insert a new account.

        Args:
            name: Normalized (lowercase) player name
            real_name: Player name as typed
            password_hash: bcrypt hashed password
            email: Email address, None when not given
            logged_in: Whether the session starts authenticated

        Returns:
            True if the account was created, False if the name is taken
        """
        ...
