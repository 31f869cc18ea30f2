"""
Attribute Sets: Bounded Sets over Closed Enumerations.

Multi-valued item attributes (strange parts, spells) are held in an
AttributeSet: an unordered, uniqueness-enforcing collection over a closed
enumeration, stored as a bit mask indexed by each member's declaration
ordinal.

INVARIANTS:
- A member is present at most once
- insert() never grows a set beyond `capacity` members
- Set algebra is plain mask arithmetic; its results are not capped
- A frozen set rejects every mutation
- Iteration follows the enumeration's declaration order, never insertion order
- Equality and hashing depend only on the mask

Inserting a member that is already present is an error, not a no-op.
"""

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import ClassVar, Generic, TypeVar

from tf2sku.models.enums import Spell, StrangePart

E = TypeVar("E", bound=Enum)


class InsertErrorKind(str, Enum):
    """Why a member could not be inserted."""

    ALREADY_PRESENT = "already_present"
    FULL = "full"


class InsertError(Exception):
    """
    Raised when a member cannot be inserted into an AttributeSet.

    The set is left unchanged.
    """

    def __init__(self, kind: InsertErrorKind, member: Enum, capacity: int):
        self.kind = kind
        self.member = member
        self.capacity = capacity
        if kind is InsertErrorKind.ALREADY_PRESENT:
            message = f"{member.name} is already present"
        else:
            message = f"cannot insert {member.name}: set is full ({capacity} members)"
        super().__init__(message)


class AttributeSet(Generic[E]):
    """
    A bounded set of members of one closed enumeration.

    Subclasses bind the enumeration through `domain` and may lower
    `capacity` below the domain's cardinality.

    Attributes:
        domain: The closed enumeration this set ranges over
        capacity: Maximum number of members (defaults to the domain size)
    """

    domain: ClassVar[type[Enum]]
    capacity: ClassVar[int]

    _members: ClassVar[tuple[Enum, ...]]
    _bits: ClassVar[dict[Enum, int]]

    __slots__ = ("_mask", "_frozen")

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        domain = cls.__dict__.get("domain")
        if domain is None:
            return
        cls._members = tuple(domain)
        cls._bits = {member: 1 << ordinal for ordinal, member in enumerate(cls._members)}
        if "capacity" not in cls.__dict__:
            cls.capacity = len(cls._members)
        if not 0 < cls.capacity <= len(cls._members):
            raise ValueError(f"{cls.__name__}.capacity must be in 1..{len(cls._members)}")

    def __init__(self, members: Iterable[E] = ()) -> None:
        if not hasattr(type(self), "_bits"):
            raise TypeError(f"{type(self).__name__} has no domain; subclass it with one")
        self._mask = 0
        self._frozen = False
        for member in members:
            self.insert(member)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "AttributeSet[E]":
        return cls()

    @classmethod
    def single(cls, member: E) -> "AttributeSet[E]":
        return cls((member,))

    @classmethod
    def double(cls, first: E, second: E) -> "AttributeSet[E]":
        """Create a set of two members. Raises InsertError if they collide."""
        return cls((first, second))

    @classmethod
    def triple(cls, first: E, second: E, third: E) -> "AttributeSet[E]":
        """Create a set of three members. Raises InsertError if they collide."""
        return cls((first, second, third))

    @classmethod
    def from_mask(cls, mask: int) -> "AttributeSet[E]":
        """
        Build a set from a raw bit mask.

        Raises:
            ValueError: If the mask has bits outside the domain
            InsertError: If the members violate the set's rules
        """
        if mask < 0 or mask >> len(cls._members):
            raise ValueError(f"mask {mask:#x} is outside the {cls.domain.__name__} domain")
        return cls(member for member in cls._members if mask & cls._bits[member])

    def copy(self) -> "AttributeSet[E]":
        """Return a mutable copy, even of a frozen set."""
        return type(self)._wrap(self._mask)

    def freeze(self) -> "AttributeSet[E]":
        """Return a read-only copy (or self if already frozen)."""
        if self._frozen:
            return self
        frozen = self.copy()
        frozen._frozen = True
        return frozen

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def insert(self, member: E) -> None:
        """
        Add a member.

        Raises:
            InsertError: ALREADY_PRESENT if the member (or a conflicting one)
                is present, FULL if the set already holds `capacity` members
        """
        self._check_mutable()
        bit = self._bit(member)
        if self._mask & bit or self._conflicts(member):
            raise InsertError(InsertErrorKind.ALREADY_PRESENT, member, self.capacity)
        if len(self) >= self.capacity:
            raise InsertError(InsertErrorKind.FULL, member, self.capacity)
        self._mask |= bit

    def remove(self, member: E) -> bool:
        """Remove a member. Returns whether it was present."""
        return self.take(member) is not None

    def take(self, member: E) -> E | None:
        """Remove and return a member, or None if it was absent."""
        self._check_mutable()
        bit = self._bit(member)
        if not self._mask & bit:
            return None
        self._mask &= ~bit
        return member

    def clear(self) -> None:
        self._check_mutable()
        self._mask = 0

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def mask(self) -> int:
        """The underlying bit mask (bit i = i-th declared member)."""
        return self._mask

    def contains(self, member: E) -> bool:
        return member in self

    def is_empty(self) -> bool:
        return self._mask == 0

    def is_full(self) -> bool:
        return len(self) >= self.capacity

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -------------------------------------------------------------------------
    # Set algebra
    # -------------------------------------------------------------------------

    # Results are new mutable sets built straight from the masks. A union may
    # exceed `capacity` or join conflicting members; insert() is what enforces
    # those rules.

    def union(self, other: "AttributeSet[E]") -> "AttributeSet[E]":
        return type(self)._wrap(self._mask | self._same_kind(other)._mask)

    def intersection(self, other: "AttributeSet[E]") -> "AttributeSet[E]":
        return type(self)._wrap(self._mask & self._same_kind(other)._mask)

    def difference(self, other: "AttributeSet[E]") -> "AttributeSet[E]":
        return type(self)._wrap(self._mask & ~self._same_kind(other)._mask)

    def symmetric_difference(self, other: "AttributeSet[E]") -> "AttributeSet[E]":
        return type(self)._wrap(self._mask ^ self._same_kind(other)._mask)

    def is_subset(self, other: "AttributeSet[E]") -> bool:
        return self._mask & ~self._same_kind(other)._mask == 0

    def is_superset(self, other: "AttributeSet[E]") -> bool:
        return self._same_kind(other).is_subset(self)

    def is_disjoint(self, other: "AttributeSet[E]") -> bool:
        return self._mask & self._same_kind(other)._mask == 0

    # -------------------------------------------------------------------------
    # Protocols
    # -------------------------------------------------------------------------

    def __contains__(self, member: object) -> bool:
        if not isinstance(member, self.domain):
            return False
        return bool(self._mask & self._bits[member])

    def __len__(self) -> int:
        return self._mask.bit_count()

    def __iter__(self) -> Iterator[E]:
        mask = self._mask
        for member in self._members:
            if mask & self._bits[member]:
                yield member  # type: ignore[misc]

    def __bool__(self) -> bool:
        return self._mask != 0

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._mask == other._mask  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._mask))

    def __or__(self, other: "AttributeSet[E]") -> "AttributeSet[E]":
        if type(other) is not type(self):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: "AttributeSet[E]") -> "AttributeSet[E]":
        if type(other) is not type(self):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: "AttributeSet[E]") -> "AttributeSet[E]":
        if type(other) is not type(self):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: "AttributeSet[E]") -> "AttributeSet[E]":
        if type(other) is not type(self):
            return NotImplemented
        return self.symmetric_difference(other)

    def __le__(self, other: "AttributeSet[E]") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.is_subset(other)

    def __ge__(self, other: "AttributeSet[E]") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.is_superset(other)

    def __copy__(self) -> "AttributeSet[E]":
        return self if self._frozen else self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> "AttributeSet[E]":
        return self.__copy__()

    def __repr__(self) -> str:
        names = ", ".join(member.name for member in self)
        return f"{type(self).__name__}({{{names}}})"

    def __str__(self) -> str:
        return ", ".join(member.name for member in self)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    @classmethod
    def _wrap(cls, mask: int) -> "AttributeSet[E]":
        # No capacity or conflict checks; mask must lie within the domain
        result = object.__new__(cls)
        result._mask = mask
        result._frozen = False
        return result

    def _bit(self, member: E) -> int:
        if not isinstance(member, self.domain):
            raise TypeError(f"{member!r} is not a member of {self.domain.__name__}")
        return self._bits[member]

    def _check_mutable(self) -> None:
        if self._frozen:
            raise TypeError(f"{type(self).__name__} is frozen")

    def _conflicts(self, member: E) -> bool:
        """Hook for domains where distinct members still exclude each other."""
        return False

    def _same_kind(self, other: "AttributeSet[E]") -> "AttributeSet[E]":
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        return other


class StrangePartSet(AttributeSet[StrangePart]):
    """Strange parts attached to an item. An item holds at most 3."""

    domain = StrangePart
    capacity = 3

    __slots__ = ()


class SpellSet(AttributeSet[Spell]):
    """
    Spells applied to an item.

    An item holds at most 2 spells, and at most one of each spell kind
    (e.g. two different footprints spells cannot coexist).
    """

    domain = Spell
    capacity = 2

    __slots__ = ()

    def _conflicts(self, member: Spell) -> bool:
        return any(
            spell.attribute_defindex == member.attribute_defindex for spell in self
        )
