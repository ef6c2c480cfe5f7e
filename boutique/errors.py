"""
Common Error Constants

Centralized error messages shared by services and routers.
"""

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Cart errors
ERROR_CART_STORAGE_UNAVAILABLE = "Cart storage unavailable"

# Checkout errors
ERROR_CHECKOUT_EMPTY_CART = "Cart is empty"
ERROR_CHECKOUT_MISSING_CLIENT_INFO = "Full name and location are required"
