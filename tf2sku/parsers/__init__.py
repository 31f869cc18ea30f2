from tf2sku.parsers.sku import parse_sku, parse_sku_lenient
from tf2sku.parsers.tokenizer import SkuTokens, split_attribute, tokenize

__all__ = [
    "SkuTokens",
    "parse_sku",
    "parse_sku_lenient",
    "split_attribute",
    "tokenize",
]
