"""
Register command - Decides whether and how a player may register.

This module contains the core decision logic behind /register: it gates
the sender, resolves the registration mode from configuration, validates
the arguments for that mode and hands accepted registrations to the
registration executor.

Command State Machine (Forward-Only Transitions)
================================================

States:
- AWAITING_SENDER_CHECK: Command received
- AWAITING_MODE_RESOLUTION: Sender is a player, configuration not yet read
- AWAITING_VALIDATION: Mode resolved, arguments not yet checked
- ACCEPTED: Terminal, exactly one perform_register() call
- REJECTED: Terminal, exactly one message to the sender

Valid Transitions:
    AWAITING_SENDER_CHECK    -> REJECTED                 (not a player)
    AWAITING_SENDER_CHECK    -> AWAITING_MODE_RESOLUTION
    AWAITING_MODE_RESOLUTION -> ACCEPTED                 (two-factor override)
    AWAITING_MODE_RESOLUTION -> AWAITING_VALIDATION
    AWAITING_VALIDATION      -> ACCEPTED | REJECTED

Check order within a mode:
    1. mail readiness (email modes only)
    2. argument count
    3. email format
    4. confirmation equality
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .ports import (
    ConfigSource,
    EmailValidator,
    HashAlgorithm,
    MailTransport,
    MessageKey,
    Messenger,
    PasswordGenerator,
    RegistrationArgumentType,
    RegistrationConfig,
    RegistrationExecutor,
)
from .senders import CommandSender, Player

logger = logging.getLogger(__name__)

NOT_A_PLAYER_MESSAGE = "Player only!"


@dataclass(frozen=True)
class Rejected:
    """Registration refused; the sender receives `message_key`."""

    message_key: MessageKey


@dataclass(frozen=True)
class Accepted:
    """Registration accepted; forwarded to the registration executor."""

    password: str
    email: str
    force_login: bool = True


RegistrationOutcome = Rejected | Accepted


@dataclass
class RegisterCommand:
    """
    Domain command behind /register.

    Holds no state between invocations: configuration is snapshotted per
    call and every collaborator is stateless from this command's view.
    """

    config_source: ConfigSource
    messenger: Messenger
    email_validator: EmailValidator
    mail_transport: MailTransport
    password_generator: PasswordGenerator
    executor: RegistrationExecutor

    def execute_command(self, sender: CommandSender, arguments: Sequence[str]) -> None:
        """
        Run /register for a sender.

        Args:
            sender: Whoever issued the command
            arguments: Command arguments, in order
        """
        if not isinstance(sender, Player):
            sender.send_message(NOT_A_PLAYER_MESSAGE)
            return

        config = self.config_source.registration_config()
        outcome = self.resolve(arguments, config)

        if isinstance(outcome, Rejected):
            logger.debug("Registration rejected for %s: %s", sender.name, outcome.message_key.value)
            self.messenger.send(sender, outcome.message_key)
            return

        logger.debug("Registration accepted for %s", sender.name)
        self.executor.perform_register(sender, outcome.password, outcome.email, outcome.force_login)

    def resolve(self, arguments: Sequence[str], config: RegistrationConfig) -> RegistrationOutcome:
        """
        Decide the outcome for a player's arguments under a configuration snapshot.

        Two-factor hashing bypasses every argument check.

        Raises:
            ValueError: If the registration type is not a known mode
        """
        if config.hash_algorithm is HashAlgorithm.TWO_FACTOR:
            return Accepted(password="", email="")

        mode = config.registration_type
        if mode is RegistrationArgumentType.PASSWORD:
            return self._password_registration(arguments, confirm=False)
        if mode is RegistrationArgumentType.PASSWORD_WITH_CONFIRMATION:
            return self._password_registration(arguments, confirm=True)
        if mode is RegistrationArgumentType.EMAIL:
            return self._email_registration(arguments, config, confirm=False)
        if mode is RegistrationArgumentType.EMAIL_WITH_CONFIRMATION:
            return self._email_registration(arguments, config, confirm=True)
        raise ValueError(f"Unsupported registration type: {mode!r}")

    def _password_registration(self, arguments: Sequence[str], confirm: bool) -> RegistrationOutcome:
        if len(arguments) != (2 if confirm else 1):
            return Rejected(MessageKey.USAGE_REGISTER)

        password = arguments[0]
        if confirm and password != arguments[1]:
            return Rejected(MessageKey.PASSWORD_MATCH_ERROR)

        return Accepted(password=password, email="")

    def _email_registration(
        self, arguments: Sequence[str], config: RegistrationConfig, confirm: bool
    ) -> RegistrationOutcome:
        # Readiness comes before the argument count
        if not self.mail_transport.has_all_information():
            return Rejected(MessageKey.INCOMPLETE_EMAIL_SETTINGS)

        if len(arguments) != (2 if confirm else 1):
            return Rejected(MessageKey.USAGE_REGISTER)

        email = arguments[0]
        if not self.email_validator.validate_email(email):
            return Rejected(MessageKey.INVALID_EMAIL)

        # No dedicated message for a mismatched email confirmation
        if confirm and email != arguments[1]:
            return Rejected(MessageKey.USAGE_REGISTER)

        password = self.password_generator.generate(config.recovery_password_length)
        return Accepted(password=password, email=email)
