"""
Attribute tag decoders.

Every attribute token is matched by its head (the token with trailing
digits removed) against a fixed table of decoders:

- IntegerTag: "<head><n>", an unsigned 32-bit number (e.g. "u703")
- EnumTag:    "<head><n>", the encoding of an enumeration member (e.g. "kt-3")
- KeywordTag: the bare head, no digits allowed (e.g. "australium")

Heads are unique across the table, so at most one decoder can claim a
token. The table order is also the canonical serialization order.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from tf2sku.models.enums import (
    SPELL_EXORCISM,
    SPELL_FOOTPRINTS,
    SPELL_HALLOWEEN_FIRE,
    SPELL_PAINT,
    SPELL_PUMPKIN_BOMBS,
    SPELL_VOICES_FROM_BELOW,
    FootprintsSpell,
    KillstreakTier,
    Killstreaker,
    Paint,
    PaintSpell,
    Quality,
    Sheen,
    Spell,
    StrangePart,
    Wear,
)
from tf2sku.models.sku import MAX_ATTRIBUTE_VALUE
from tf2sku.parsers.tokenizer import parse_unsigned


@dataclass(frozen=True, slots=True)
class IntegerTag:
    """A tag carrying a plain unsigned number."""

    head: str
    field: str
    label: str
    multi: bool = False

    def decode(self, tail: str) -> int | None:
        return parse_unsigned(tail, MAX_ATTRIBUTE_VALUE)

    def is_present(self, value: Any) -> bool:
        return value is not None

    def encode(self, value: int) -> str:
        return f"{self.head}{value}"


@dataclass(frozen=True, slots=True)
class EnumTag:
    """
    A tag carrying the integer encoding of an enumeration member.

    `convert` maps the decoded member onto the stored value (used for
    spells, whose numeric sub-encodings are their own enumerations).
    """

    head: str
    field: str
    label: str
    enum: type[Enum]
    multi: bool = False
    convert: Callable[[Any], Any] | None = None

    def decode(self, tail: str) -> Any | None:
        number = parse_unsigned(tail, MAX_ATTRIBUTE_VALUE)
        if number is None:
            return None
        try:
            member = self.enum(number)
        except ValueError:
            return None
        if self.convert is not None:
            return self.convert(member)
        return member

    def is_present(self, value: Any) -> bool:
        return value is not None

    def encode(self, value: Any) -> str:
        number = value.attribute_value if isinstance(value, Spell) else value.value
        return f"{self.head}{number}"


@dataclass(frozen=True, slots=True)
class KeywordTag:
    """A bare keyword; its presence stores `value`."""

    head: str
    field: str
    label: str
    value: Any
    multi: bool = False

    def decode(self, tail: str) -> Any | None:
        if tail:
            return None
        return self.value

    def is_present(self, value: Any) -> bool:
        return value == self.value

    def encode(self, value: Any) -> str:
        return self.head


TagDecoder = IntegerTag | EnumTag | KeywordTag


# Singular tags: each may appear at most once per SKU
SINGULAR_TAGS: tuple[TagDecoder, ...] = (
    IntegerTag("u", "particle", "particle"),
    KeywordTag("uncraftable", "craftable", "uncraftable flag", False),
    KeywordTag("australium", "australium", "australium flag", True),
    KeywordTag("strange", "strange", "strange flag", True),
    EnumTag("w", "wear", "wear", Wear),
    IntegerTag("pk", "skin", "skin"),
    EnumTag("kt-", "killstreak_tier", "killstreak tier", KillstreakTier),
    KeywordTag("festive", "festivized", "festivized flag", True),
    IntegerTag("c", "crate_number", "crate number"),
    IntegerTag("n", "craft_number", "craft number"),
    IntegerTag("td-", "target_defindex", "target defindex"),
    IntegerTag("od-", "output_defindex", "output defindex"),
    EnumTag("oq-", "output_quality", "output quality", Quality),
    EnumTag("p", "paint", "paint", Paint),
    EnumTag("ks-", "sheen", "sheen", Sheen),
    EnumTag("ke-", "killstreaker", "killstreaker", Killstreaker),
)

STRANGE_PART_TAG = EnumTag("sp-", "strange_parts", "strange part", StrangePart, multi=True)

# Keyed by spell attribute defindex
SPELL_TAGS: dict[int, TagDecoder] = {
    SPELL_PAINT: EnumTag(
        "paintspell-",
        "spells",
        "paint spell",
        PaintSpell,
        multi=True,
        convert=Spell.from_paint_spell,
    ),
    SPELL_FOOTPRINTS: EnumTag(
        "footprints-",
        "spells",
        "footprints spell",
        FootprintsSpell,
        multi=True,
        convert=Spell.from_footprints,
    ),
    SPELL_VOICES_FROM_BELOW: KeywordTag(
        "voices", "spells", "voices from below spell", Spell.VOICES_FROM_BELOW, multi=True
    ),
    SPELL_PUMPKIN_BOMBS: KeywordTag(
        "pumpkinbombs", "spells", "pumpkin bombs spell", Spell.PUMPKIN_BOMBS, multi=True
    ),
    SPELL_HALLOWEEN_FIRE: KeywordTag(
        "halloweenfire", "spells", "halloween fire spell", Spell.HALLOWEEN_FIRE, multi=True
    ),
    SPELL_EXORCISM: KeywordTag(
        "exorcism", "spells", "exorcism spell", Spell.EXORCISM, multi=True
    ),
}

# Full priority order: singular tags, strange parts, spells
DECODERS: tuple[TagDecoder, ...] = (
    *SINGULAR_TAGS,
    STRANGE_PART_TAG,
    *SPELL_TAGS.values(),
)


def _index_by_head(decoders: tuple[TagDecoder, ...]) -> dict[str, TagDecoder]:
    index: dict[str, TagDecoder] = {}
    for decoder in decoders:
        if decoder.head in index:
            raise ValueError(f"Decoder head {decoder.head!r} is registered twice")
        index[decoder.head] = decoder
    return index


DECODERS_BY_HEAD = _index_by_head(DECODERS)


def find_decoder(head: str) -> TagDecoder | None:
    """Return the decoder claiming a token head, if any."""
    return DECODERS_BY_HEAD.get(head)


def spell_tag(spell: Spell) -> TagDecoder:
    """Return the decoder that encodes a spell."""
    return SPELL_TAGS[spell.attribute_defindex]
