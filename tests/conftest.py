"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Mocked collaborators of the /register command
- Configuration snapshots
- Player and non-player senders
"""

from dataclasses import dataclass
from unittest.mock import Mock

import pytest

from src.domain.ports import HashAlgorithm, RegistrationArgumentType, RegistrationConfig
from src.domain.registration import RegisterCommand
from src.domain.senders import Player


@dataclass
class CommandHarness:
    """RegisterCommand wired to mocks, with helpers to change the configuration."""

    command: RegisterCommand
    config_source: Mock
    messenger: Mock
    email_validator: Mock
    mail_transport: Mock
    password_generator: Mock
    executor: Mock

    def configure(
        self,
        registration_type: RegistrationArgumentType = RegistrationArgumentType.PASSWORD,
        hash_algorithm: HashAlgorithm = HashAlgorithm.BCRYPT,
        recovery_password_length: int = 8,
    ) -> None:
        self.config_source.registration_config.return_value = RegistrationConfig(
            hash_algorithm=hash_algorithm,
            registration_type=registration_type,
            recovery_password_length=recovery_password_length,
        )


@pytest.fixture
def harness() -> CommandHarness:
    """RegisterCommand with BCRYPT hashing and PASSWORD registration by default."""
    config_source = Mock()
    messenger = Mock()
    email_validator = Mock()
    mail_transport = Mock()
    password_generator = Mock()
    password_generator.generate.side_effect = lambda length: "x" * length
    executor = Mock()

    command = RegisterCommand(
        config_source=config_source,
        messenger=messenger,
        email_validator=email_validator,
        mail_transport=mail_transport,
        password_generator=password_generator,
        executor=executor,
    )
    harness = CommandHarness(
        command=command,
        config_source=config_source,
        messenger=messenger,
        email_validator=email_validator,
        mail_transport=mail_transport,
        password_generator=password_generator,
        executor=executor,
    )
    harness.configure()
    return harness


@pytest.fixture
def player() -> Player:
    """A connected player."""
    return Player(name="Bobby")
