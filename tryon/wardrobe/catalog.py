"""Default wardrobe shipped with every new session."""

from __future__ import annotations

from tryon.wardrobe.registry import GarmentCategory, ItemId, WardrobeItem, WardrobeRegistry

_APP_IMAGES = "https://raw.githubusercontent.com/ammaarreshi/app-images/refs/heads/main"
_ASSETS = "https://raw.githubusercontent.com/ammaarreshi/v-try-on-assets/main"

ORIGINAL_COLOR = "original"
COLOR_PALETTE = ("#d94e4e", "#5a81e1", "#64b664", "#e1e161", "#333333", "#ffffff")


def _item(item_id: str, name: str, url: str, category: GarmentCategory) -> WardrobeItem:
    return WardrobeItem(id=ItemId(item_id), name=name, url=url, category=category)


# Some of the newer asset URLs are placeholders and may not resolve.
DEFAULT_WARDROBE: tuple[WardrobeItem, ...] = (
    _item("gemini-sweat", "Gemini Sweat", f"{_APP_IMAGES}/gemini-sweat-2.png", GarmentCategory.TOP),
    _item("gemini-tee", "Gemini Tee", f"{_APP_IMAGES}/Gemini-tee.png", GarmentCategory.TOP),
    _item("black-hoodie", "Black Hoodie", f"{_ASSETS}/black-hoodie.png", GarmentCategory.TOP),
    _item("white-shirt", "White Shirt", f"{_ASSETS}/white-shirt.png", GarmentCategory.TOP),
    _item("leather-jacket", "Leather Jacket", f"{_ASSETS}/leather-jacket.png", GarmentCategory.TOP),
    _item("red-flannel", "Red Flannel", f"{_ASSETS}/red-flannel.png", GarmentCategory.TOP),
    _item("striped-sweater", "Striped Sweater", f"{_ASSETS}/striped-sweater.png", GarmentCategory.TOP),
    _item("blue-polo", "Blue Polo", f"{_ASSETS}/blue-polo.png", GarmentCategory.TOP),
    _item("denim-jeans", "Denim Jeans", f"{_APP_IMAGES}/jeans.png", GarmentCategory.BOTTOM),
    _item("cargo-shorts", "Cargo Shorts", f"{_APP_IMAGES}/shorts.png", GarmentCategory.BOTTOM),
    _item("khaki-chinos", "Khaki Chinos", f"{_ASSETS}/khaki-chinos.png", GarmentCategory.BOTTOM),
    _item("grey-sweatpants", "Grey Sweatpants", f"{_ASSETS}/grey-sweatpants.png", GarmentCategory.BOTTOM),
    _item("black-trousers", "Black Trousers", f"{_ASSETS}/black-trousers.png", GarmentCategory.BOTTOM),
    _item("denim-skirt", "Denim Skirt", f"{_ASSETS}/denim-skirt.png", GarmentCategory.BOTTOM),
    _item("plaid-skirt", "Plaid Skirt", f"{_ASSETS}/plaid-skirt.png", GarmentCategory.BOTTOM),
)


def default_registry() -> WardrobeRegistry:
    """Return a fresh registry seeded with the default wardrobe."""

    return WardrobeRegistry(DEFAULT_WARDROBE)
