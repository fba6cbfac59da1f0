"""
repositories/search_query.py
----------------------------
Builds the filtered property search statement.

Filters are collected as ``(section, template, values)`` clauses and
rendered in a single pass. Each bound value is pushed onto the parameter
list first and its placeholder is taken from the list's length at that
moment, so placeholder N always refers to the N-th parameter no matter
which filters were skipped.
"""

from typing import Any, Mapping, Optional, Union

from config import DEFAULT_RESULT_LIMIT
from models.property import COLUMNS
from models.search import SearchCriteria
from utils.logger import get_logger

logger = get_logger(__name__)

WHERE = "WHERE"
HAVING = "HAVING"

_PLACEHOLDERS = {
    "format": lambda n: "%s",      # psycopg2
    "numeric": lambda n: f"${n}",  # $1, $2, ...
}

_BASE_SELECT = (
    "SELECT "
    + ", ".join(f"properties.{c}" for c in COLUMNS)
    + ", avg(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)


def escape_like(value: str) -> str:
    """Escape LIKE metacharacters so ``value`` only ever matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PropertySearchBuilder:
    """Accumulates optional filter clauses and renders the search statement."""

    def __init__(self, paramstyle: str = "format"):
        if paramstyle not in _PLACEHOLDERS:
            raise ValueError(f"Unsupported paramstyle: {paramstyle!r}")
        self.paramstyle = paramstyle
        self._clauses: list[tuple[str, str, tuple]] = []

    def where(self, template: str, *values: Any) -> "PropertySearchBuilder":
        """Add a row-level predicate. ``{}`` in the template marks each value."""
        self._clauses.append((WHERE, template, values))
        return self

    def having(self, template: str, *values: Any) -> "PropertySearchBuilder":
        """Add a predicate on the aggregated (grouped) rows."""
        self._clauses.append((HAVING, template, values))
        return self

    def build(self, limit: int = DEFAULT_RESULT_LIMIT) -> tuple[str, list]:
        """
        Render the statement and its parameter list.

        Returns:
            ``(statement, params)`` where ``params[n]`` binds placeholder n+1.
        """
        params: list = []
        placeholder = _PLACEHOLDERS[self.paramstyle]

        def bind(value: Any) -> str:
            params.append(value)
            return placeholder(len(params))

        def render(section: str) -> list[str]:
            return [
                template.format(*(bind(v) for v in values))
                for sec, template, values in self._clauses
                if sec == section
            ]

        parts = [_BASE_SELECT]

        predicates = render(WHERE)
        if predicates:
            parts.append("WHERE " + "\n  AND ".join(predicates))

        parts.append("GROUP BY properties.id")

        aggregates = render(HAVING)
        if aggregates:
            parts.append("HAVING " + "\n  AND ".join(aggregates))

        parts.append("ORDER BY properties.cost_per_night")
        parts.append(f"LIMIT {bind(limit)};")

        statement = "\n".join(parts)
        logger.debug(f"Built property search: {statement!r} params={params}")
        return statement, params


def build_property_search(
    criteria: Union[SearchCriteria, Mapping[str, Any], None] = None,
    limit: int = DEFAULT_RESULT_LIMIT,
    paramstyle: str = "format",
) -> tuple[str, list]:
    """
    Build the search for properties matching ``criteria``, joined with
    their average rating and ordered by nightly cost, cheapest first.

    Args:
        criteria: Filters, or a plain options mapping, or None for no filters.
        limit: Maximum number of rows to return.
        paramstyle: ``"format"`` for ``%s`` or ``"numeric"`` for ``$N``.

    Returns:
        ``(statement, params)`` ready for ``Database.execute``.
    """
    if not isinstance(criteria, SearchCriteria):
        criteria = SearchCriteria.from_options(criteria)

    builder = PropertySearchBuilder(paramstyle)

    city = criteria.city_term
    if city is not None:
        builder.where("properties.city LIKE {}", f"%{escape_like(city)}%")

    if criteria.owner_id is not None:
        builder.where("properties.owner_id = {}", criteria.owner_id)

    # only a closed range is applied; a single bound is ignored
    if criteria.has_price_range:
        builder.where(
            "properties.cost_per_night BETWEEN {} AND {}",
            criteria.min_cost_cents,
            criteria.max_cost_cents,
        )

    if criteria.minimum_rating is not None:
        builder.having("avg(property_reviews.rating) >= {}", criteria.minimum_rating)

    return builder.build(limit)


def describe(criteria: Optional[SearchCriteria]) -> str:
    """Short human-readable summary of the active filters, for log lines."""
    if criteria is None:
        return "no filters"
    active = [f"{k}={v!r}" for k, v in vars(criteria).items() if v is not None]
    return ", ".join(active) or "no filters"
