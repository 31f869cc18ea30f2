import copy
import dataclasses

import pytest
from pydantic import BaseModel, ValidationError

from tf2sku.models.attribute_set import InsertError, SpellSet, StrangePartSet
from tf2sku.models.enums import (
    FootprintsSpell,
    KillstreakTier,
    PaintSpell,
    Quality,
    Spell,
    StrangePart,
    Wear,
)
from tf2sku.models.failure import InvalidQualityError
from tf2sku.models.sku import Sku


class TestSku:
    def test_new_has_no_attributes(self) -> None:
        sku = Sku.new(5021, Quality.UNIQUE)

        assert sku.defindex == 5021
        assert sku.quality is Quality.UNIQUE
        assert sku.particle is None
        assert sku.craftable
        assert not sku.australium
        assert sku.killstreak_tier is None
        assert len(sku.strange_parts) == 0
        assert len(sku.spells) == 0

    def test_is_frozen(self) -> None:
        sku = Sku.new(5021, Quality.UNIQUE)

        with pytest.raises(dataclasses.FrozenInstanceError):
            sku.defindex = 1  # type: ignore[misc]

    def test_sets_are_copied(self) -> None:
        parts = StrangePartSet.single(StrangePart.KILLS)
        sku = Sku(defindex=627, quality=Quality.UNIQUE, strange_parts=parts)

        parts.insert(StrangePart.ASSISTS)

        assert sku.strange_parts == StrangePartSet.single(StrangePart.KILLS)

    def test_sets_cannot_be_mutated_through_the_record(self) -> None:
        sku = Sku.parse("627;6;sp-28;voices")
        before = hash(sku)

        with pytest.raises(TypeError):
            sku.strange_parts.insert(StrangePart.KILLS)
        with pytest.raises(TypeError):
            sku.spells.remove(Spell.VOICES_FROM_BELOW)

        assert str(sku) == "627;6;sp-28;voices"
        assert hash(sku) == before

    def test_copies_share_nothing_mutable(self) -> None:
        sku = Sku.parse("627;6;sp-28")

        for clone in (copy.copy(sku), copy.deepcopy(sku)):
            assert clone == sku
            with pytest.raises(TypeError):
                clone.strange_parts.insert(StrangePart.KILLS)

        assert str(sku) == "627;6;sp-28"

    def test_mutable_copy_of_a_set_leaves_record_alone(self) -> None:
        sku = Sku.parse("627;6;sp-28")

        parts = sku.strange_parts.copy()
        parts.insert(StrangePart.KILLS)
        changed = sku.replace(strange_parts=parts)

        assert str(changed) == "627;6;sp-28;sp-87"
        assert str(sku) == "627;6;sp-28"

    def test_over_capacity_union_is_rejected(self) -> None:
        parts = StrangePartSet.double(StrangePart.KILLS, StrangePart.ASSISTS) | (
            StrangePartSet.double(StrangePart.DOMINATIONS, StrangePart.REVENGES)
        )

        with pytest.raises(InsertError):
            Sku(defindex=627, quality=Quality.UNIQUE, strange_parts=parts)

    def test_default_sets_are_not_shared(self) -> None:
        a = Sku.new(1, Quality.UNIQUE)
        b = Sku.new(2, Quality.UNIQUE)

        assert a.spells is not b.spells

    def test_replace(self) -> None:
        sku = Sku.new(264, Quality.STRANGE)

        changed = sku.replace(killstreak_tier=KillstreakTier.SPECIALIZED)

        assert changed.killstreak_tier is KillstreakTier.SPECIALIZED
        assert sku.killstreak_tier is None

    @pytest.mark.parametrize("defindex", [-1, 2**31])
    def test_defindex_range(self, defindex: int) -> None:
        with pytest.raises(ValueError):
            Sku.new(defindex, Quality.UNIQUE)

    def test_attribute_value_range(self) -> None:
        with pytest.raises(ValueError):
            Sku(defindex=1, quality=Quality.UNIQUE, particle=2**32)
        with pytest.raises(ValueError):
            Sku(defindex=1, quality=Quality.UNIQUE, craft_number=-1)

    def test_equality_and_hash(self, spelled_sku: str) -> None:
        a = Sku.parse(spelled_sku)
        b = Sku.parse(spelled_sku)

        assert a == b
        assert hash(a) == hash(b)
        assert a != a.replace(festivized=True)

    def test_parse_classmethods(self) -> None:
        assert Sku.parse("264;11;kt-3").killstreak_tier is KillstreakTier.PROFESSIONAL
        assert Sku.parse_lenient("264;99").quality is Quality.NORMAL
        with pytest.raises(InvalidQualityError):
            Sku.parse("264;99")

    def test_to_dict(self, decorated_weapon_sku: str) -> None:
        result = Sku.parse(decorated_weapon_sku).to_dict()

        assert result["defindex"] == 424
        assert result["quality"] == "DECORATED_WEAPON"
        assert result["wear"] == "FIELD_TESTED"
        assert result["killstreaker"] == "HYPNO_BEAM"
        assert result["particle"] == 703
        assert result["paint"] is None
        assert result["craftable"] is True
        assert result["strange_parts"] == []

    def test_to_dict_lists_sets_in_canonical_order(self) -> None:
        result = Sku.parse("627;11;voices;footprints-2;sp-37;sp-19").to_dict()

        assert result["strange_parts"] == ["BUILDINGS_DESTROYED", "CLOAKED_SPIES_KILLED"]
        assert result["spells"] == ["HEADLESS_HORSESHOES", "VOICES_FROM_BELOW"]


class TestEnums:
    def test_quality_encodings(self) -> None:
        assert Quality.UNIQUE.value == 6
        assert Quality.STRANGE.value == 11
        assert Quality.DECORATED_WEAPON.value == 15
        assert len(Quality) == 16

    def test_wear_encodings(self) -> None:
        assert [wear.value for wear in Wear] == [1, 2, 3, 4, 5]

    def test_spell_keys(self) -> None:
        assert Spell.HEADLESS_HORSESHOES.attribute_defindex == 1005
        assert Spell.HEADLESS_HORSESHOES.attribute_value == 2
        assert Spell.EXORCISM.attribute_defindex == 1009
        assert Spell.EXORCISM.attribute_value is None

    def test_spell_from_sub_encodings(self) -> None:
        assert Spell.from_footprints(FootprintsSpell.GANGREEN_FOOTPRINTS) is (
            Spell.GANGREEN_FOOTPRINTS
        )
        assert Spell.from_paint_spell(PaintSpell.DIE_JOB) is Spell.DIE_JOB

    def test_strange_parts_ascend(self) -> None:
        values = [part.value for part in StrangePart]

        assert values == sorted(values)


class SkuHolder(BaseModel):
    sku: Sku


class TestPydanticField:
    def test_validates_from_string(self) -> None:
        holder = SkuHolder(sku="264;11;kt-3")

        assert holder.sku == Sku.parse("264;11;kt-3")

    def test_accepts_instance(self) -> None:
        sku = Sku.new(5021, Quality.UNIQUE)

        assert SkuHolder(sku=sku).sku is sku

    def test_rejects_invalid_sku(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SkuHolder(sku="264;11;bogus")

        assert "Unknown attribute" in str(exc_info.value)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(ValidationError):
            SkuHolder(sku=264)  # type: ignore[arg-type]

    def test_serializes_canonically(self) -> None:
        holder = SkuHolder(sku="627;11;footprints-2;sp-28")

        assert holder.model_dump() == {"sku": "627;11;sp-28;footprints-2"}
        assert holder.model_dump_json() == '{"sku":"627;11;sp-28;footprints-2"}'

    def test_json_round_trip(self, decorated_weapon_sku: str) -> None:
        holder = SkuHolder.model_validate_json(f'{{"sku": "{decorated_weapon_sku}"}}')

        assert SkuHolder.model_validate_json(holder.model_dump_json()) == holder


class TestSetsOnSku:
    def test_full_sets_accepted(self) -> None:
        sku = Sku(
            defindex=627,
            quality=Quality.STRANGE,
            spells=SpellSet.double(Spell.DIE_JOB, Spell.EXORCISM),
        )

        assert sku.spells.is_full()

    def test_conflicting_set_cannot_be_built(self) -> None:
        with pytest.raises(InsertError):
            SpellSet.double(Spell.DIE_JOB, Spell.SINISTER_STAINING)
