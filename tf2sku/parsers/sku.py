"""
Parser for SKU strings.

Two entry points share one decoder:

- parse_sku: strict, every field must be valid
- parse_sku_lenient: an invalid or unknown quality becomes Quality.NORMAL;
  every other failure is still raised

Attribute tags may appear in any order. A singular tag that appears twice
is rejected rather than overwritten.
"""

import logging

from tf2sku.models.attribute_set import (
    InsertError,
    InsertErrorKind,
    SpellSet,
    StrangePartSet,
)
from tf2sku.models.enums import Quality
from tf2sku.models.failure import (
    AttributeLimitError,
    DuplicateAttributeError,
    InvalidAttributeValueError,
    InvalidDefindexError,
    InvalidQualityError,
    UnknownAttributeError,
)
from tf2sku.models.sku import MAX_DEFINDEX, Sku
from tf2sku.parsers.decoders import find_decoder
from tf2sku.parsers.tokenizer import parse_unsigned, split_attribute, tokenize

logger = logging.getLogger(__name__)


def parse_sku(text: str) -> Sku:
    """
    Parse a SKU string into a Sku.

    Args:
        text: SKU string, e.g. "264;11;kt-3"

    Returns:
        The parsed Sku

    Raises:
        SkuParseError: If any field is missing, malformed or unknown
    """
    return _parse(text, lenient=False)


def parse_sku_lenient(text: str) -> Sku:
    """
    Parse a SKU string, defaulting an invalid quality to Normal.

    Only the quality field is recovered; all other failures raise exactly
    as in parse_sku.
    """
    return _parse(text, lenient=True)


def _parse(text: str, lenient: bool) -> Sku:
    tokens = tokenize(text)

    defindex = parse_unsigned(tokens.defindex, MAX_DEFINDEX)
    if defindex is None:
        raise InvalidDefindexError(text, tokens.defindex)

    quality = _decode_quality(tokens.quality)
    if quality is None:
        if not lenient:
            raise InvalidQualityError(text, tokens.quality)
        logger.debug(
            "Invalid quality %r in SKU %r, defaulting to %s",
            tokens.quality,
            text,
            Quality.NORMAL.name,
        )
        quality = Quality.NORMAL

    singular: dict[str, object] = {}
    strange_parts = StrangePartSet()
    spells = SpellSet()
    sets = {"strange_parts": strange_parts, "spells": spells}

    for token in tokens.attributes:
        head, tail = split_attribute(token)

        decoder = find_decoder(head)
        if decoder is None:
            raise UnknownAttributeError(text, token)

        value = decoder.decode(tail)
        if value is None:
            raise InvalidAttributeValueError(text, decoder.label, token)

        if decoder.multi:
            try:
                sets[decoder.field].insert(value)
            except InsertError as e:
                if e.kind is InsertErrorKind.FULL:
                    raise AttributeLimitError(text, decoder.label, token, e.capacity) from e
                raise DuplicateAttributeError(text, decoder.label, token) from e
            continue

        if decoder.field in singular:
            raise DuplicateAttributeError(text, decoder.label, token)
        singular[decoder.field] = value

    return Sku(
        defindex=defindex,
        quality=quality,
        strange_parts=strange_parts,
        spells=spells,
        **singular,  # type: ignore[arg-type]
    )


def _decode_quality(token: str) -> Quality | None:
    number = parse_unsigned(token, MAX_DEFINDEX)
    if number is None:
        return None
    try:
        return Quality(number)
    except ValueError:
        return None
