"""
Recovery password generator - Implements PasswordGenerator protocol.
"""

import secrets
import string

_ALPHABET = string.ascii_lowercase + string.digits


class RandomPasswordGenerator:
    """
    Implements PasswordGenerator protocol.

    Uses secrets module for cryptographic randomness.
    """

    def generate(self, length: int) -> str:
        """
        Generate a random lowercase alphanumeric password.

        Raises:
            ValueError: If length is smaller than 1
        """
        if length < 1:
            raise ValueError(f"Password length must be positive, got {length}")
        return "".join(secrets.choice(_ALPHABET) for _ in range(length))
