"""
Closed item enumerations.

Each enumeration is closed and carries the stable integer encoding used in
SKU strings. Members are declared in ascending encoding order, so the
declaration order doubles as the canonical serialization order.

Spell is the exception: its members are keyed by
(attribute defindex, attribute value). Only footprints and paint spells
carry a value, exposed through FootprintsSpell and PaintSpell.
"""

from enum import Enum


class Quality(int, Enum):
    """Item quality."""

    NORMAL = 0
    GENUINE = 1
    RARITY2 = 2
    VINTAGE = 3
    RARITY3 = 4
    UNUSUAL = 5
    UNIQUE = 6
    COMMUNITY = 7
    VALVE = 8
    SELF_MADE = 9
    CUSTOMIZED = 10
    STRANGE = 11
    COMPLETED = 12
    HAUNTED = 13
    COLLECTORS = 14
    DECORATED_WEAPON = 15


class KillstreakTier(int, Enum):
    KILLSTREAK = 1
    SPECIALIZED = 2
    PROFESSIONAL = 3


class Wear(int, Enum):
    FACTORY_NEW = 1
    MINIMAL_WEAR = 2
    FIELD_TESTED = 3
    WELL_WORN = 4
    BATTLE_SCARRED = 5


class Sheen(int, Enum):
    """Killstreak sheen, applied by specialized and professional kits."""

    TEAM_SHINE = 1
    DEADLY_DAFFODIL = 2
    MANNDARIN = 3
    MEAN_GREEN = 4
    AGONIZING_EMERALD = 5
    VILLAINOUS_VIOLET = 6
    HOT_ROD = 7


class Killstreaker(int, Enum):
    """Killstreaker effect, applied by professional kits."""

    FIRE_HORNS = 2002
    CEREBRAL_DISCHARGE = 2003
    TORNADO = 2004
    FLAMES = 2005
    SINGULARITY = 2006
    INCINERATOR = 2007
    HYPNO_BEAM = 2008


class Paint(int, Enum):
    """Paint, encoded as the decimal RGB value of its primary color."""

    A_DISTINCTIVE_LACK_OF_HUE = 1315860
    AFTER_EIGHT = 2960676
    A_COLOR_SIMILAR_TO_SLATE = 3100495
    THE_BITTER_TASTE_OF_DEFEAT_AND_LIME = 3329330
    BALACLAVAS_ARE_FOREVER = 3874595
    ZEPHENIAHS_GREED = 4345659
    OPERATORS_OVERALLS = 4732984
    NOBLE_HATTERS_VIOLET = 5322826
    AN_AIR_OF_DEBONAIR = 6637376
    RADIGAN_CONAGHER_BROWN = 6901050
    INDUBITABLY_GREEN = 7511618
    YE_OLDE_RUSTIC_COLOUR = 8154199
    A_DEEP_COMMITMENT_TO_PURPLE = 8208497
    AGED_MOUSTACHE_GREY = 8289918
    THE_VALUE_OF_TEAMWORK = 8400928
    DRABLY_OLIVE = 8421376
    MUSKELMANNBRAUN = 10843461
    WATERLOGGED_LAB_COAT = 11049612
    TEAM_SPIRIT = 12073019
    A_MANNS_MINT = 12377523
    CREAM_SPIRIT = 12807213
    PECULIARLY_DRAB_TINCTURE = 12955537
    MANN_CO_ORANGE = 13595446
    COLOR_NO_216_190_216 = 14204632
    AN_EXTRAORDINARY_ABUNDANCE_OF_TINGE = 15132390
    AUSTRALIUM_GOLD = 15185211
    DARK_SALMON_INJUSTICE = 15308410
    THE_COLOR_OF_A_GENTLEMANNS_BUSINESS_PANTS = 15787618
    PINK_AS_HELL = 16738740


class StrangePart(int, Enum):
    """Strange part, encoded as its kill-eater score type."""

    SCOUTS_KILLED = 10
    SNIPERS_KILLED = 11
    SOLDIERS_KILLED = 12
    DEMOMEN_KILLED = 13
    HEAVIES_KILLED = 14
    PYROS_KILLED = 15
    SPIES_KILLED = 16
    ENGINEERS_KILLED = 17
    MEDICS_KILLED = 18
    BUILDINGS_DESTROYED = 19
    PROJECTILES_REFLECTED = 20
    HEADSHOT_KILLS = 21
    AIRBORNE_ENEMY_KILLS = 22
    GIB_KILLS = 23
    KILLS_UNDER_A_FULL_MOON = 27
    DOMINATIONS = 28
    REVENGES = 30
    POSTHUMOUS_KILLS = 31
    ALLIES_EXTINGUISHED = 32
    CRITICAL_KILLS = 33
    KILLS_WHILE_EXPLOSIVE_JUMPING = 34
    SAPPERS_REMOVED = 36
    CLOAKED_SPIES_KILLED = 37
    MEDICS_KILLED_THAT_HAVE_FULL_UBERCHARGE = 38
    ROBOTS_DESTROYED = 39
    GIANT_ROBOTS_DESTROYED = 40
    KILLS_WHILE_LOW_HEALTH = 44
    KILLS_DURING_HALLOWEEN = 45
    ROBOTS_DESTROYED_DURING_HALLOWEEN = 46
    DEFENDERS_KILLED = 47
    SUBMERGED_ENEMY_KILLS = 48
    KILLS_WHILE_INVULN_UBERCHARGED = 49
    TANKS_DESTROYED = 50
    LONG_DISTANCE_KILLS = 61
    UNUSUAL_WEARING_PLAYER_KILLS = 62
    BURNING_ENEMY_KILLS = 63
    KILLSTREAKS_ENDED = 64
    FREEZECAM_TAUNT_APPEARANCES = 66
    DAMAGE_DEALT = 67
    FIRES_SURVIVED = 68
    ALLIED_HEALING_DONE = 69
    POINT_BLANK_KILLS = 70
    TAUNT_KILLS = 77
    KILLS = 87
    FULL_HEALTH_KILLS = 88
    TAUNTING_PLAYER_KILLS = 89
    NOT_CRIT_NOR_MINICRIT_KILLS = 93
    PLAYER_HITS = 94
    ASSISTS = 95


# Attribute defindexes of the spell kinds.
SPELL_PAINT = 1004
SPELL_FOOTPRINTS = 1005
SPELL_VOICES_FROM_BELOW = 1006
SPELL_PUMPKIN_BOMBS = 1007
SPELL_HALLOWEEN_FIRE = 1008
SPELL_EXORCISM = 1009


class PaintSpell(int, Enum):
    DIE_JOB = 0
    CHROMATIC_CORRUPTION = 1
    PUTRESCENT_PIGMENTATION = 2
    SPECTRAL_SPECTRUM = 3
    SINISTER_STAINING = 4


class FootprintsSpell(int, Enum):
    TEAM_SPIRIT_FOOTPRINTS = 1
    HEADLESS_HORSESHOES = 2
    CORPSE_GRAY_FOOTPRINTS = 3100495
    VIOLENT_VIOLET_FOOTPRINTS = 5322826
    BRUISED_PURPLE_FOOTPRINTS = 8208497
    GANGREEN_FOOTPRINTS = 8421376
    ROTTEN_ORANGE_FOOTPRINTS = 13595446


class Spell(Enum):
    """Halloween spell, keyed by (attribute defindex, attribute value)."""

    DIE_JOB = (SPELL_PAINT, 0)
    CHROMATIC_CORRUPTION = (SPELL_PAINT, 1)
    PUTRESCENT_PIGMENTATION = (SPELL_PAINT, 2)
    SPECTRAL_SPECTRUM = (SPELL_PAINT, 3)
    SINISTER_STAINING = (SPELL_PAINT, 4)
    TEAM_SPIRIT_FOOTPRINTS = (SPELL_FOOTPRINTS, 1)
    HEADLESS_HORSESHOES = (SPELL_FOOTPRINTS, 2)
    CORPSE_GRAY_FOOTPRINTS = (SPELL_FOOTPRINTS, 3100495)
    VIOLENT_VIOLET_FOOTPRINTS = (SPELL_FOOTPRINTS, 5322826)
    BRUISED_PURPLE_FOOTPRINTS = (SPELL_FOOTPRINTS, 8208497)
    GANGREEN_FOOTPRINTS = (SPELL_FOOTPRINTS, 8421376)
    ROTTEN_ORANGE_FOOTPRINTS = (SPELL_FOOTPRINTS, 13595446)
    VOICES_FROM_BELOW = (SPELL_VOICES_FROM_BELOW, None)
    PUMPKIN_BOMBS = (SPELL_PUMPKIN_BOMBS, None)
    HALLOWEEN_FIRE = (SPELL_HALLOWEEN_FIRE, None)
    EXORCISM = (SPELL_EXORCISM, None)

    @property
    def attribute_defindex(self) -> int:
        return self.value[0]

    @property
    def attribute_value(self) -> int | None:
        """Numeric value for footprints and paint spells, None otherwise."""
        return self.value[1]

    @classmethod
    def from_footprints(cls, footprints: FootprintsSpell) -> "Spell":
        return cls((SPELL_FOOTPRINTS, footprints.value))

    @classmethod
    def from_paint_spell(cls, paint_spell: PaintSpell) -> "Spell":
        return cls((SPELL_PAINT, paint_spell.value))
