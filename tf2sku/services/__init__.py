"""
tf2sku services.

Rendering of parsed SKUs.
"""

from tf2sku.services.sku_formatter import format_sku, sku_tokens

__all__ = [
    "format_sku",
    "sku_tokens",
]
