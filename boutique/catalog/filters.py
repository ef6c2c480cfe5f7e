"""Catalog view filters: what the product grid shows for a category selection."""
from typing import Sequence

from .models import Product

# Sentinel selection meaning "no filter"
ALL_CATEGORIES = "all"


def visible_products(products: Sequence[Product], selected_category: str) -> list[Product]:
    """Products in the selected category, in catalog order."""
    if selected_category == ALL_CATEGORIES:
        return list(products)
    return [p for p in products if p.category == selected_category]


def available_categories(products: Sequence[Product]) -> list[str]:
    """Unique non-empty categories, sorted."""
    return sorted({p.category for p in products if p.category})
