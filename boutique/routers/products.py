"""
Products API Router

Public catalog endpoints: the product grid for a category selection and the
category list.
"""
from fastapi import APIRouter, Depends, HTTPException

from boutique.catalog import (
    ALL_CATEGORIES,
    CatalogService,
    available_categories,
    visible_products,
)
from boutique.errors import ERROR_PRODUCT_NOT_FOUND

from .deps import get_catalog
from .models import ProductResponse

router = APIRouter(tags=["products"])


@router.get("/api/products")
async def get_products(category: str = ALL_CATEGORIES, catalog: CatalogService = Depends(get_catalog)):
    """Products visible for the selected category, plus the category list."""
    products = await catalog.get_products()
    visible = visible_products(products, category)

    return {
        "products": [ProductResponse.from_product(p) for p in visible],
        "categories": available_categories(products),
        "selected_category": category,
        "count": len(visible),
    }


@router.get("/api/categories")
async def get_categories(catalog: CatalogService = Depends(get_catalog)):
    """Sorted categories present in the catalog."""
    products = await catalog.get_products()
    return {"categories": available_categories(products)}


@router.get("/api/products/{product_id}")
async def get_product(product_id: str, catalog: CatalogService = Depends(get_catalog)):
    """Get product by ID."""
    product = await catalog.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return ProductResponse.from_product(product)
