"""
CORS headers for the contact endpoint.
"""

from typing import Dict, Optional

from celercrea_contact.config import ContactConfig


def resolve_origin(origin: Optional[str], config: ContactConfig) -> str:
    """Echo an allow-listed origin; anything else gets the default origin."""
    if config.allow_any_origin:
        return "*"
    origin = origin or ""
    if origin in config.allowed_origins:
        return origin
    return config.default_origin


def cors_headers(origin: Optional[str], config: ContactConfig) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": resolve_origin(origin, config),
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
        "Vary": "Origin",
    }
