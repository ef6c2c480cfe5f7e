"""Catalog package: product model, Airtable loader, view filters, cached service."""
from .filters import ALL_CATEGORIES, available_categories, visible_products
from .loader import get_categories, load_products, product_from_record
from .models import Product
from .service import CatalogService, get_catalog_service

__all__ = [
    "ALL_CATEGORIES",
    "CatalogService",
    "Product",
    "available_categories",
    "get_catalog_service",
    "get_categories",
    "load_products",
    "product_from_record",
    "visible_products",
]
