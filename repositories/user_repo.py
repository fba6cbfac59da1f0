"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import Database
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for reading and creating rows of the users table."""

    def __init__(self, db: Database):
        self.db = db

    def add(self, user: User) -> User:
        """
        Insert a new user. The email is stored lowercase.

        Returns:
            The user as returned by the store, with its `id` populated.

        Raises:
            ValidationError: If name, email or password is blank.
            ExecutionError: If the insert fails (e.g. duplicate email).
        """
        user.validate()
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING id, name, email, password;
        """
        rows = self.db.execute(sql, (user.name, User.normalize_email(user.email), user.password))
        created = self._row_to_user(rows[0])
        logger.info(f"Added user #{created.id}")
        return created

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by email, ignoring letter case.

        Returns:
            User or None.
        """
        sql = "SELECT id, name, email, password FROM users WHERE lower(email) = %s;"
        rows = self.db.execute(sql, (User.normalize_email(email),))
        return self._row_to_user(rows[0]) if rows else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Fetch a user by primary key, or None."""
        sql = "SELECT id, name, email, password FROM users WHERE id = %s;"
        rows = self.db.execute(sql, (user_id,))
        return self._row_to_user(rows[0]) if rows else None

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        return User(id=row[0], name=row[1], email=row[2], password=row[3])
