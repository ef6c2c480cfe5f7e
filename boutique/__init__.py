"""
Luxe Boutique Core Module

This package contains the storefront components:
- catalog: Airtable product loader, category filters, cached catalog service
- cart: cart store with pluggable durable storage
- checkout: WhatsApp order message and link
- routers: FastAPI endpoints (included in api/index.py)
- db: Upstash Redis clients
- i18n: French/English texts
"""
