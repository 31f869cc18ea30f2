"""
SKU Record.

A Sku is the structured form of a SKU string such as "264;11;kt-3": a
defindex, a quality and any number of optional attributes.

INVARIANTS:
- defindex and quality are always present
- All instances are frozen (immutable after construction)
- Attribute sets are copied and frozen on construction, so no state is
  shared and a Sku cannot be changed through them
- str(sku) is the canonical SKU string
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from tf2sku.models.attribute_set import SpellSet, StrangePartSet
from tf2sku.models.enums import (
    KillstreakTier,
    Killstreaker,
    Paint,
    Quality,
    Sheen,
    Wear,
)
from tf2sku.models.failure import SkuParseError

MAX_DEFINDEX = 2**31 - 1
MAX_ATTRIBUTE_VALUE = 2**32 - 1


@dataclass(frozen=True, slots=True)
class Sku:
    """
    An item identified by a SKU.

    Attributes:
        defindex: Opaque catalog key of the item (not checked against a schema)
        quality: Item quality
        particle: Unusual particle effect id
        craftable: False for uncraftable items
        australium: Whether the item is australium
        strange: Strange-tracking on an item whose quality is not Strange
        wear: Wear of a decorated or war-painted item
        skin: Paint kit (war paint / skin) id
        killstreak_tier: Killstreak tier
        festivized: Whether the item is festivized
        crate_number: Crate series number
        craft_number: Craft number
        target_defindex: Defindex an item (e.g. a kit or strangifier) applies to
        output_defindex: Defindex produced by a fabricator or chemistry set
        output_quality: Quality of the produced item
        paint: Applied paint
        sheen: Killstreak sheen
        killstreaker: Killstreaker effect
        strange_parts: Attached strange parts (at most 3, frozen)
        spells: Applied spells (at most 2, frozen)
    """

    defindex: int
    quality: Quality
    particle: int | None = None
    craftable: bool = True
    australium: bool = False
    strange: bool = False
    wear: Wear | None = None
    skin: int | None = None
    killstreak_tier: KillstreakTier | None = None
    festivized: bool = False
    crate_number: int | None = None
    craft_number: int | None = None
    target_defindex: int | None = None
    output_defindex: int | None = None
    output_quality: Quality | None = None
    paint: Paint | None = None
    sheen: Sheen | None = None
    killstreaker: Killstreaker | None = None
    strange_parts: StrangePartSet = field(default_factory=StrangePartSet)
    spells: SpellSet = field(default_factory=SpellSet)

    def __post_init__(self) -> None:
        if not 0 <= self.defindex <= MAX_DEFINDEX:
            raise ValueError(f"defindex must be in 0..{MAX_DEFINDEX}, got {self.defindex}")
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if value is not None and not 0 <= value <= MAX_ATTRIBUTE_VALUE:
                raise ValueError(f"{name} must be in 0..{MAX_ATTRIBUTE_VALUE}, got {value}")
        # Frozen dataclass: copies must bypass __setattr__. Rebuilding through
        # the constructor re-applies the item limits to sets built by algebra.
        object.__setattr__(self, "strange_parts", StrangePartSet(self.strange_parts).freeze())
        object.__setattr__(self, "spells", SpellSet(self.spells).freeze())

    @classmethod
    def new(cls, defindex: int, quality: Quality) -> "Sku":
        """Create a Sku with no optional attributes."""
        return cls(defindex=defindex, quality=quality)

    @classmethod
    def parse(cls, text: str) -> "Sku":
        """Strictly parse a SKU string. See tf2sku.parsers.sku.parse_sku."""
        from tf2sku.parsers.sku import parse_sku

        return parse_sku(text)

    @classmethod
    def parse_lenient(cls, text: str) -> "Sku":
        """Parse a SKU string, defaulting an invalid quality to Normal."""
        from tf2sku.parsers.sku import parse_sku_lenient

        return parse_sku_lenient(text)

    def replace(self, **changes: Any) -> "Sku":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """
        Plain representation with enum members by name.

        Attribute sets become lists of member names in canonical order.
        """
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (StrangePartSet, SpellSet)):
                result[f.name] = [member.name for member in value]
            elif isinstance(value, Enum):
                result[f.name] = value.name
            else:
                result[f.name] = value
        return result

    def __copy__(self) -> "Sku":
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> "Sku":
        return self

    def __str__(self) -> str:
        from tf2sku.services.sku_formatter import format_sku

        return format_sku(self)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from a SKU string (or a Sku) and serialize to the canonical string."""
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(_validate_sku_string),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


_NUMERIC_FIELDS = (
    "particle",
    "skin",
    "crate_number",
    "craft_number",
    "target_defindex",
    "output_defindex",
)


def _validate_sku_string(value: str) -> Sku:
    from tf2sku.parsers.sku import parse_sku

    try:
        return parse_sku(value)
    except SkuParseError as e:
        raise ValueError(e.message) from e
