"""
SKU Formatter.

THIS MODULE HANDLES OUTPUT RENDERING ONLY.

It accepts a Sku (already valid by construction) and produces its canonical
SKU string:

    <defindex>;<quality>[;<singular tags>][;<strange parts>][;<spells>]

Singular tags follow the decoder table order; strange parts and spells
follow their enumeration order. Absent attributes are never emitted, so
the output does not depend on the order tags were parsed in.
"""

from tf2sku.models.sku import Sku
from tf2sku.parsers.decoders import SINGULAR_TAGS, STRANGE_PART_TAG, spell_tag
from tf2sku.parsers.tokenizer import FIELD_DELIMITER


def format_sku(sku: Sku) -> str:
    """
    Format a Sku as its canonical SKU string.

    Args:
        sku: The Sku to render

    Returns:
        Canonical SKU string, e.g. "264;11;kt-3"
    """
    return FIELD_DELIMITER.join(sku_tokens(sku))


def sku_tokens(sku: Sku) -> list[str]:
    """Canonical fields of a Sku, positional fields first."""
    tokens = [str(sku.defindex), str(sku.quality.value)]

    for tag in SINGULAR_TAGS:
        value = getattr(sku, tag.field)
        if tag.is_present(value):
            tokens.append(tag.encode(value))

    for strange_part in sku.strange_parts:
        tokens.append(STRANGE_PART_TAG.encode(strange_part))

    for spell in sku.spells:
        tokens.append(spell_tag(spell).encode(spell))

    return tokens
