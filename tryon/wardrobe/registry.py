"""Garment catalog with identity-unique, order-preserving insertion."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, NamedTuple, NewType

ItemId = NewType("ItemId", str)


class GarmentCategory(str, Enum):
    """Body slot a garment is worn in."""

    TOP = "top"
    BOTTOM = "bottom"


@dataclass(slots=True, frozen=True)
class WardrobeItem:
    """A garment that can be worn in the top or bottom slot.

    ``active_color`` is ``None`` when the garment keeps its original colour.
    Recolouring produces a new value with the same ``id``.
    """

    id: ItemId
    name: str
    url: str
    category: GarmentCategory
    active_color: str | None = None

    def with_color(self, color: str | None) -> "WardrobeItem":
        return replace(self, active_color=color)


class CategoryView:
    """Live, lazily filtered view over one category of a registry."""

    def __init__(self, registry: "WardrobeRegistry", category: GarmentCategory) -> None:
        self._registry = registry
        self._category = category

    def __iter__(self) -> Iterator[WardrobeItem]:
        return (item for item in self._registry if item.category is self._category)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def ids(self) -> list[ItemId]:
        return [item.id for item in self]


class WardrobePartition(NamedTuple):
    tops: CategoryView
    bottoms: CategoryView


class WardrobeRegistry:
    """Ordered collection of garments keyed by identity."""

    def __init__(self, items: Iterable[WardrobeItem] = ()) -> None:
        self._items: dict[ItemId, WardrobeItem] = {}
        for item in items:
            self.insert(item)

    def insert(self, item: WardrobeItem) -> bool:
        """Add ``item`` unless its identity is already present.

        Returns ``True`` when the registry grew. Duplicates are ignored.
        """

        if item.id in self._items:
            return False
        self._items[item.id] = item
        return True

    def get(self, item_id: str) -> WardrobeItem | None:
        return self._items.get(ItemId(item_id))

    def partition(self) -> WardrobePartition:
        """Return per-category views preserving registry order."""

        return WardrobePartition(
            tops=CategoryView(self, GarmentCategory.TOP),
            bottoms=CategoryView(self, GarmentCategory.BOTTOM),
        )

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[WardrobeItem]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)
