"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

The pool lives on an explicit ``Database`` handle rather than at module
level: create one at startup, pass it to the repositories, and close it
at shutdown (or use it as a context manager).
"""

from typing import Optional, Sequence

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from errors import ExecutionError
from utils.logger import get_logger

logger = get_logger(__name__)


class Database:
    """Executor that runs one parameterized statement per call on a pooled connection."""

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
    ):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: Optional[pool.SimpleConnectionPool] = None

    # ── LIFECYCLE ─────────────────────────────────────────

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> None:
        """
        Initialize the connection pool. Calling it twice is a no-op.

        Raises:
            ExecutionError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.SimpleConnectionPool(self.min_conn, self.max_conn, self.dsn)
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.Error as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise ExecutionError(f"Could not connect to database: {e}") from e

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ── EXECUTION ─────────────────────────────────────────

    def execute(self, statement: str, params: Sequence = ()) -> list[tuple]:
        """
        Run a single statement and return its rows.

        Parameters are bound positionally, so ``params[n]`` fills the
        (n+1)-th placeholder. The transaction is committed on success and
        rolled back on failure; the connection always goes back to the pool.

        Args:
            statement: SQL text with positional placeholders.
            params: Values for the placeholders, in order.

        Returns:
            All result rows as tuples (empty if the statement returns none).

        Raises:
            RuntimeError: If the pool has not been opened.
            ExecutionError: If the driver fails for any reason.
        """
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call open() first.")

        try:
            conn = self._pool.getconn()
        except psycopg2.Error as e:
            logger.error(f"Failed to acquire a database connection: {e}")
            raise ExecutionError(f"Could not acquire connection: {e}", statement) from e

        try:
            with conn.cursor() as cur:
                cur.execute(statement, list(params))
                rows = cur.fetchall() if cur.description is not None else []
            conn.commit()
            return rows
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Statement failed: {e}")
            raise ExecutionError(f"Statement failed: {e}", statement) from e
        except Exception:
            self._rollback(conn)
            raise
        finally:
            self._pool.putconn(conn)

    @staticmethod
    def _rollback(conn) -> None:
        """Roll back, tolerating a connection that is already closed."""
        try:
            conn.rollback()
        except psycopg2.Error as e:
            logger.warning(f"Rollback failed: {e}")
