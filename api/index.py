"""
Luxe Boutique - Main FastAPI Application

Single entry point for the storefront API (Vercel serverless function).
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from boutique.i18n import detect_language, get_all_texts
from boutique.middleware import SessionMiddleware
from boutique.routers import cart_router, checkout_router, products_router

app = FastAPI(
    title="Luxe Boutique",
    description="Storefront API: Airtable catalog, session cart, WhatsApp checkout",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SessionMiddleware)

app.include_router(products_router)
app.include_router(cart_router)
app.include_router(checkout_router)


@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}


@app.get("/api/texts")
async def get_texts(lang: str | None = None):
    """UI texts for the storefront in the requested language."""
    language = detect_language(lang)
    return {"lang": language, "texts": get_all_texts(language)}
