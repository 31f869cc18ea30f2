"""
SKU tokenizer.

SKU format:
    <defindex>;<quality>[;<attribute>...]

Example:
    264;11;kt-3
    424;15;u703;w3;pk307;kt-3;ks-1;ke-2008

The first two fields are positional. Attribute fields may appear in any
order; each is split into a head (the tag) and a tail (trailing ASCII
digits, possibly empty).
"""

import re
from dataclasses import dataclass

from tf2sku.models.failure import EmptyFieldError, InsufficientFieldsError

FIELD_DELIMITER = ";"

# ASCII digits only; int() alone would also accept "+5", " 5" and "1_000"
UNSIGNED_PATTERN = re.compile(r"[0-9]+")

# Pattern: "kt-3" -> ("kt-", "3"), "australium" -> ("australium", "")
# Groups: (head, tail)
ATTRIBUTE_PATTERN = re.compile(r"(.*?)([0-9]*)", re.DOTALL)


@dataclass(frozen=True, slots=True)
class SkuTokens:
    """
    A SKU string split into fields.

    Attributes:
        defindex: Raw first field
        quality: Raw second field
        attributes: Remaining fields in input order
    """

    defindex: str
    quality: str
    attributes: tuple[str, ...]


def tokenize(text: str) -> SkuTokens:
    """
    Split a SKU string into its fields.

    Raises:
        InsufficientFieldsError: If there are fewer than two fields
        EmptyFieldError: If any field is empty
    """
    fields = text.split(FIELD_DELIMITER) if text else []

    if len(fields) < 2:
        raise InsufficientFieldsError(text)

    for position, token in enumerate(fields):
        if not token:
            raise EmptyFieldError(text, position)

    return SkuTokens(
        defindex=fields[0],
        quality=fields[1],
        attributes=tuple(fields[2:]),
    )


def split_attribute(token: str) -> tuple[str, str]:
    """Split an attribute token into (head, trailing digits)."""
    match = ATTRIBUTE_PATTERN.fullmatch(token)
    if match is None:
        raise ValueError(f"Cannot split attribute token {token!r}")
    head, tail = match.groups()
    return head, tail


def parse_unsigned(text: str, maximum: int) -> int | None:
    """Parse ASCII digits into an int in 0..maximum, or None if invalid."""
    if not UNSIGNED_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value > maximum:
        return None
    return value
