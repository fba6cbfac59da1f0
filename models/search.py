"""
models/search.py
----------------
Optional filter criteria for a property search.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

from models.money import Number, dollars_to_cents


@dataclass
class SearchCriteria:
    """
    Filters for a property search. Every field is optional and ``None``
    means "no constraint".

    Attributes:
        city: Substring the property's city must contain.
        owner_id: Only list properties owned by this user.
        minimum_price_per_night: Lower price bound in dollars.
        maximum_price_per_night: Upper price bound in dollars. The price
            range only applies when both bounds are set.
        minimum_rating: Lowest acceptable average review rating.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[Number] = None
    maximum_price_per_night: Optional[Number] = None
    minimum_rating: Optional[Union[int, float]] = None

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]) -> "SearchCriteria":
        """
        Build criteria from a plain options mapping, e.g. a parsed query string.
        Unknown keys are ignored; empty strings count as absent.
        """
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        values = {
            k: v for k, v in options.items()
            if k in known and v is not None and v != ""
        }
        return cls(**values)

    @property
    def city_term(self) -> Optional[str]:
        """The trimmed city filter, or None when blank."""
        if self.city is None:
            return None
        term = str(self.city).strip()
        return term or None

    @property
    def has_price_range(self) -> bool:
        return self.minimum_price_per_night is not None and self.maximum_price_per_night is not None

    @property
    def min_cost_cents(self) -> Optional[int]:
        if self.minimum_price_per_night is None:
            return None
        return dollars_to_cents(self.minimum_price_per_night)

    @property
    def max_cost_cents(self) -> Optional[int]:
        if self.maximum_price_per_night is None:
            return None
        return dollars_to_cents(self.maximum_price_per_night)
