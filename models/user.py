"""
models/user.py
--------------
Domain model for registered users.
"""

from dataclasses import dataclass
from typing import Optional

from errors import ValidationError


@dataclass
class User:
    """
    Represents a row of the users table.

    Attributes:
        name: Display name.
        email: Login email, stored lowercase.
        password: Password hash as stored by the application.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    def validate(self) -> None:
        """Raise ValidationError unless name, email and password are all non-blank."""
        missing = [
            f for f in ("name", "email", "password")
            if not isinstance(getattr(self, f), str) or not getattr(self, f).strip()
        ]
        if missing:
            raise ValidationError(f"User is missing required fields: {', '.join(missing)}")

    @staticmethod
    def normalize_email(email: str) -> str:
        if not isinstance(email, str):
            raise ValidationError(f"Email must be a string, got {type(email).__name__}")
        return email.strip().lower()
