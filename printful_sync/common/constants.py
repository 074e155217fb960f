"""
Shared constants for the project.

Single source of truth for API locations, environment variable names and
the default sync-product listing.
"""

PRINTFUL_BASE_URL = "https://api.printful.com"

# Environment variables
TOKEN_ENV_VAR = "PRINTFUL_API_TOKEN"
BASE_URL_ENV_VAR = "PRINTFUL_BASE_URL"

DEFAULT_TIMEOUT = 30  # seconds, per request

# Default listing: a 24x24 canvas print
DEFAULT_SYNC_SETTINGS = {
    "product_index": 2,
    "external_id": "canvas-print-1",
    "name": "Canvas Print",
    "variant_external_id": "canvas-print-1-24x24",
    "variant_id": 19313,
    "retail_price": "29.99",
    "image_extensions": [".png", ".jpg"],
}

# Multipart content types by file extension
IMAGE_CONTENT_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}
FALLBACK_CONTENT_TYPE = "application/octet-stream"

COMPLETION_MESSAGE = "Sync process completed!"
