"""
repositories/property_repo.py
-----------------------------
Data access layer for property listings.
All SQL queries related to the `properties` table live here.
"""

from typing import Any, Mapping, Optional, Union

from config import DEFAULT_RESULT_LIMIT
from db.connection import Database
from models.property import COLUMNS, INSERT_COLUMNS, Property
from models.search import SearchCriteria
from repositories.search_query import build_property_search, describe
from utils.logger import get_logger

logger = get_logger(__name__)

_SELECT_COLUMNS = ", ".join(COLUMNS)
_INSERT_COLUMNS = ", ".join(INSERT_COLUMNS)


class PropertyRepository:
    """Repository for searching and inserting rows of the properties table."""

    def __init__(self, db: Database):
        self.db = db

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Property) -> Property:
        """
        Insert a new property.

        Args:
            prop: The Property to persist; ``id`` and ``average_rating`` are ignored.

        Returns:
            A new Property built from the row the store returned.

        Raises:
            ValidationError: If a required field is missing or mistyped.
            ExecutionError: If the insert fails.
        """
        prop.validate()
        placeholders = ", ".join(["%s"] * len(INSERT_COLUMNS))
        sql = f"""
            INSERT INTO properties ({_INSERT_COLUMNS})
            VALUES ({placeholders})
            RETURNING {_SELECT_COLUMNS};
        """
        rows = self.db.execute(sql, prop.insert_values())
        created = self._row_to_property(rows[0])
        logger.info(f"Added property #{created.id} '{created.title}' for owner {created.owner_id}")
        return created

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, property_id: int) -> Optional[Property]:
        """Fetch a single property by ID, or None if it does not exist."""
        sql = f"SELECT {_SELECT_COLUMNS} FROM properties WHERE id = %s;"
        rows = self.db.execute(sql, (property_id,))
        return self._row_to_property(rows[0]) if rows else None

    def search(
        self,
        criteria: Union[SearchCriteria, Mapping[str, Any], None] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        """
        List properties with their average rating, cheapest first.

        Args:
            criteria: Optional filters (or a plain options mapping).
            limit: Maximum number of properties to return.

        Returns:
            Matching properties; an empty list when nothing matches.
        """
        if not isinstance(criteria, SearchCriteria):
            criteria = SearchCriteria.from_options(criteria)
        sql, params = build_property_search(criteria, limit)
        rows = self.db.execute(sql, params)
        logger.info(f"Property search ({describe(criteria)}) returned {len(rows)} rows")
        return [self._row_to_property(r) for r in rows]

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_property(row: tuple) -> Property:
        """Convert a row in COLUMNS order (optionally followed by average_rating)."""
        values = dict(zip(COLUMNS, row))
        average = row[len(COLUMNS)] if len(row) > len(COLUMNS) else None
        return Property(
            **values,
            average_rating=float(average) if average is not None else None,
        )
