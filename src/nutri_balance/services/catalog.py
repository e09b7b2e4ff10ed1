"""Mutable food catalog."""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from nutri_balance.domain.errors import CatalogError, UnknownFieldError
from nutri_balance.domain.foods import DEFAULT_FOODS, FoodItem
from nutri_balance.domain.nutrients import NUTRIENT_ATTRIBUTES

_logger = logging.getLogger(__name__)


@dataclass
class FoodCatalogStore:
    """Ordered catalog of foods addressed by position.

    Names are not unique. Lookups return the first item whose name matches
    exactly, so a later duplicate is shadowed until the earlier one is edited
    or removed.
    """

    items: list[FoodItem] = field(default_factory=lambda: list(DEFAULT_FOODS))

    def lookup(self, name: str) -> FoodItem | None:
        """Return the first food named exactly ``name``, if any."""
        for item in self.items:
            if item.name == name:
                return item
        return None

    def add(self, item: FoodItem | None = None) -> FoodItem:
        """Append a food, or a zeroed unnamed one when none is given."""
        new_item = item if item is not None else FoodItem()
        self.items.append(new_item)
        return new_item

    def edit_field(self, index: int, field_name: str, value: object) -> FoodItem:
        """Replace one attribute of the food at ``index``.

        ``field_name`` is ``name`` or a tracked nutrient key (``vitaminC``) or
        its attribute spelling (``vitamin_c``).
        """
        current = self.items[_check_index(index, len(self.items))]
        if field_name == "name":
            updated = replace(current, name=str(value))
        else:
            attribute = _resolve_attribute(field_name)
            amount = float(value)
            if not math.isfinite(amount) or amount < 0:
                raise CatalogError(f"{field_name} must be a non-negative number")
            updated = replace(current, **{attribute: amount})
        self.items[index] = updated
        return updated

    def remove(self, index: int) -> FoodItem:
        """Delete and return the food at ``index``."""
        return self.items.pop(_check_index(index, len(self.items)))

    def replace_all(self, items: Iterable[FoodItem]) -> None:
        """Discard the whole catalog, admin edits included, and install ``items``."""
        new_items = list(items)
        _logger.info(
            "Catalog replaced: dropped=%s installed=%s", len(self.items), len(new_items)
        )
        self.items = new_items

    def to_state(self) -> list[dict[str, object]]:
        return [item.to_dict() for item in self.items]

    @classmethod
    def from_state(cls, rows: list[dict[str, object]]) -> "FoodCatalogStore":
        return cls(items=[FoodItem.from_dict(row) for row in rows])


def _resolve_attribute(field_name: str) -> str:
    if field_name in NUTRIENT_ATTRIBUTES:
        return NUTRIENT_ATTRIBUTES[field_name]
    if field_name in NUTRIENT_ATTRIBUTES.values():
        return field_name
    raise UnknownFieldError(field_name)


def _check_index(index: int, size: int) -> int:
    # Negative positions are rejected rather than counted from the end.
    if index < 0 or index >= size:
        raise IndexError(f"No food at position {index}")
    return index
