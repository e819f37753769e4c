"""CORS headers for the enquiry endpoint."""
from collections.abc import Container

ALLOW_METHODS = "POST, OPTIONS"
ALLOW_HEADERS = "Content-Type"


def apply_cors_headers(response, origin: str, allowed_origins: Container[str]):
    """Echo the origin back only if allow-listed. Browsers reject the rest client-side."""
    if origin and origin in allowed_origins:
        response.headers.set("Access-Control-Allow-Origin", origin)
        response.headers.set("Vary", "Origin")
    response.headers.set("Access-Control-Allow-Methods", ALLOW_METHODS)
    response.headers.set("Access-Control-Allow-Headers", ALLOW_HEADERS)
    return response
