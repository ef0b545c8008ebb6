"""
Domain exceptions - Semantic error types for account creation.

User-input problems with the /register command are reported as messages,
not exceptions. These types cover the account creation that follows.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class AccountAlreadyRegistered(RegistrationError):
    """An account already exists for the player name."""

    pass


class PasswordTooLong(RegistrationError):
    """Password exceeds the 72 bytes bcrypt can hash."""

    pass
