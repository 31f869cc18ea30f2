"""SKU parser and formatter for Team Fortress 2 items."""

from tf2sku.models import (
    AttributeSet,
    InsertError,
    InsertErrorKind,
    Quality,
    Sku,
    SkuParseError,
    SpellSet,
    StrangePartSet,
)
from tf2sku.parsers import parse_sku, parse_sku_lenient
from tf2sku.services.sku_formatter import format_sku

__all__ = [
    "AttributeSet",
    "InsertError",
    "InsertErrorKind",
    "Quality",
    "Sku",
    "SkuParseError",
    "SpellSet",
    "StrangePartSet",
    "format_sku",
    "parse_sku",
    "parse_sku_lenient",
]
