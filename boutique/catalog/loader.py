"""
Catalog Loader

Turns loosely-typed Airtable rows into strict `Product` models. Rows may miss
any field, so every field has a default and the loader never raises: a failed
fetch yields an empty catalog.
"""
from typing import Any

from boutique import config
from boutique.i18n import get_text
from boutique.logging import get_logger

from .airtable import AirtableClient
from .filters import available_categories
from .models import Product

logger = get_logger(__name__)

# Only rows with a name are products
NAME_FILTER_FORMULA = "{Nom} != ''"

# Airtable field names
FIELD_NAME = "nom"
FIELD_PRICE = "prix"
FIELD_IMAGE = "image"
FIELD_AVAILABILITY = "disponibilite"
FIELD_CATEGORY = "categorie"


def _first_image_url(attachments: Any) -> str:
    """URL of the first attachment, or "" when there is none."""
    if not isinstance(attachments, list) or not attachments:
        return ""
    first = attachments[0]
    if not isinstance(first, dict):
        return ""
    return first.get("url") or ""


def product_from_record(record: dict[str, Any], lang: str | None = None) -> Product:
    """Map one Airtable record to a Product, applying defaults for missing fields."""
    lang = lang or config.STORE_LANGUAGE
    fields = record.get("fields") or {}

    return Product(
        id=str(record["id"]),
        name=str(fields.get(FIELD_NAME) or ""),
        price=fields.get(FIELD_PRICE) or 0,
        image_url=_first_image_url(fields.get(FIELD_IMAGE)),
        availability=str(
            fields.get(FIELD_AVAILABILITY) or get_text("catalog.default_availability", lang)
        ),
        category=str(fields.get(FIELD_CATEGORY) or get_text("catalog.default_category", lang)),
    )


async def load_products(
    client: AirtableClient | None = None, lang: str | None = None
) -> list[Product]:
    """
    Load the full catalog.

    Returns an empty list (and logs the error) if the query or the mapping
    fails for any reason.
    """
    owns_client = client is None
    client = client or AirtableClient()

    try:
        records = await client.list_records(filter_by_formula=NAME_FILTER_FORMULA)
        products = [product_from_record(record, lang) for record in records]
    except Exception as e:
        logger.error(f"Error fetching products from Airtable: {e}", exc_info=True)
        return []
    finally:
        if owns_client:
            await client.aclose()

    logger.info(f"Loaded {len(products)} products from Airtable")
    return products


async def get_categories(client: AirtableClient | None = None) -> list[str]:
    """Load the catalog and return its sorted category list."""
    products = await load_products(client)
    return available_categories(products)
