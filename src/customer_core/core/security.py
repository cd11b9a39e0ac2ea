# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Password hashing with bcrypt."""

import bcrypt
from beartype import beartype

from .config import get_settings

MIN_PASSWORD_LENGTH = 8
# bcrypt only reads the first 72 bytes of its input and newer releases refuse more
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """One-way password hashing.

    Instances are callable so they can be handed to services that only need
    ``hash(plaintext) -> str``.
    """

    def __init__(self, rounds: int | None = None) -> None:
        """Initialize hasher with the configured bcrypt cost factor."""
        self._bcrypt_rounds = rounds if rounds is not None else get_settings().bcrypt_rounds

    @beartype
    def hash_password(self, password: str) -> str:
        """Hash password using bcrypt."""
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

        password_bytes = password.encode("utf-8")
        if len(password_bytes) > MAX_PASSWORD_BYTES:
            raise ValueError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded"
            )
        salt = bcrypt.gensalt(rounds=self._bcrypt_rounds)
        hashed = bcrypt.hashpw(password_bytes, salt)
        return str(hashed.decode("utf-8"))

    @beartype
    def verify_password(self, password: str, hashed_password: str) -> bool:
        """Verify password against hash."""
        try:
            password_bytes = password.encode("utf-8")
            hashed_bytes = hashed_password.encode("utf-8")
            return bool(bcrypt.checkpw(password_bytes, hashed_bytes))
        except ValueError:
            # Malformed hash
            return False

    def __call__(self, password: str) -> str:
        return self.hash_password(password)
