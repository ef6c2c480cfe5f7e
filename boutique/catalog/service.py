"""
Catalog Service

Serves the product list to the API with a short-lived Redis cache, so that
every page view does not hit Airtable. The cache is best-effort: any Redis
problem falls through to a direct load.
"""
import json
from typing import Optional

from boutique.db import RedisKeys, TTL, get_redis
from boutique.logging import get_logger, sanitize_id_for_logging

from .loader import load_products
from .models import Product

logger = get_logger(__name__)


class CatalogService:
    """
    Cached access to the catalog.

    Usage:
        service = get_catalog_service()
        products = await service.get_products()
        product = await service.get_product(product_id)
    """

    def __init__(self, redis_client=None, loader=load_products, use_cache: bool = True):
        # False marks the cache as unavailable
        self._redis = redis_client if use_cache else False
        self._loader = loader

    @property
    def redis(self):
        """Redis client (lazy). None when Redis is not configured."""
        if self._redis is None:
            try:
                self._redis = get_redis()
            except ValueError as e:
                logger.warning(f"Catalog cache disabled: {e}")
                self._redis = False  # Mark as unavailable
        return self._redis if self._redis else None

    async def _read_cache(self) -> Optional[list[Product]]:
        redis = self.redis
        if redis is None:
            return None
        try:
            data = await redis.get(RedisKeys.CATALOG_PRODUCTS)
            if not data:
                return None
            return [Product.from_dict(item) for item in json.loads(data)]
        except Exception as e:
            logger.warning(f"Failed to read cached catalog: {e}")
            return None

    async def _write_cache(self, products: list[Product]) -> None:
        redis = self.redis
        if redis is None:
            return
        try:
            payload = json.dumps([p.to_dict() for p in products])
            await redis.set(RedisKeys.CATALOG_PRODUCTS, payload, ex=TTL.CATALOG)
        except Exception as e:
            logger.warning(f"Failed to cache catalog: {e}")

    async def get_products(self) -> list[Product]:
        """Full catalog, from cache when fresh. Never raises."""
        cached = await self._read_cache()
        if cached is not None:
            return cached

        products = await self._loader()
        # An empty list usually means Airtable failed; retry on next request
        if products:
            await self._write_cache(products)
        return products

    async def get_product(self, product_id: str) -> Optional[Product]:
        """Look a product up by id in the current catalog."""
        products = await self.get_products()
        product = next((p for p in products if p.id == product_id), None)
        if product is None:
            logger.info(f"Product {sanitize_id_for_logging(product_id)} not in catalog")
        return product


_catalog_service: Optional[CatalogService] = None


def get_catalog_service() -> CatalogService:
    """Get CatalogService singleton."""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = CatalogService()
    return _catalog_service
