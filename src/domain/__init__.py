"""
Domain layer - Pure business logic with zero framework imports.

This package contains the /register command decision logic and the
account creation it hands off to. It defines its own port interfaces
for infrastructure abstraction, ensuring true hexagonal architecture
decoupling.
"""

from .accounts import AccountService, RegistrationManagement
from .exceptions import AccountAlreadyRegistered, PasswordTooLong, RegistrationError
from .ports import (
    AccountRepository,
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
from .registration import Accepted, RegisterCommand, RegistrationOutcome, Rejected
from .senders import BlockCommandSender, CommandSender, ConsoleSender, Player

__all__ = [
    "Accepted",
    "AccountAlreadyRegistered",
    "AccountRepository",
    "AccountService",
    "BlockCommandSender",
    "CommandSender",
    "ConfigSource",
    "ConsoleSender",
    "EmailValidator",
    "HashAlgorithm",
    "MailTransport",
    "MessageKey",
    "Messenger",
    "PasswordGenerator",
    "PasswordTooLong",
    "Player",
    "RegisterCommand",
    "RegistrationArgumentType",
    "RegistrationConfig",
    "RegistrationError",
    "RegistrationExecutor",
    "RegistrationManagement",
    "RegistrationOutcome",
    "Rejected",
]
