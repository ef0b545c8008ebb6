"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.messages import CatalogMessenger
from src.adapters.passwords import RandomPasswordGenerator
from src.adapters.repository.postgres import PostgresAccountRepository
from src.adapters.smtp.console import ConsoleMailTransport
from src.adapters.validation import EmailValidationService
from src.config.settings import get_settings
from src.domain.accounts import AccountService, RegistrationManagement
from src.domain.registration import RegisterCommand

# Module-level singletons - both adapters are stateless
_messenger = CatalogMessenger()
_password_generator = RandomPasswordGenerator()


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresAccountRepository(pool)


def get_mail_transport() -> ConsoleMailTransport:
    """Create console mail transport from the configured credentials."""
    settings = get_settings()
    return ConsoleMailTransport(settings.mail_account, settings.mail_password)


def get_email_validator() -> EmailValidationService:
    """Create email validator from the configured domain lists."""
    settings = get_settings()
    return EmailValidationService(
        domain_whitelist=settings.email_domain_whitelist,
        domain_blacklist=settings.email_domain_blacklist,
    )


def get_register_command(request: Request) -> RegisterCommand:
    """
    Create the /register command with injected dependencies.

    Wires configuration, messaging, validation, mail and account
    creation together for the domain command.
    """
    settings = get_settings()
    mail_transport = get_mail_transport()
    accounts = AccountService(
        repository=get_repository(request),
        mail_transport=mail_transport,
        bcrypt_cost=settings.bcrypt_cost,
    )
    return RegisterCommand(
        config_source=settings,
        messenger=_messenger,
        email_validator=get_email_validator(),
        mail_transport=mail_transport,
        password_generator=_password_generator,
        executor=RegistrationManagement(accounts=accounts, messenger=_messenger),
    )
