# pokemon_data/services/types.py
"""Type chart and effectiveness algebra.

Typing ordinals double as matrix indices and as the external numeric code, so
the member order below must never change.
"""
from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import Dict, Iterable, List, Sequence, Tuple

log = logging.getLogger(__name__)

# float32 machine epsilon
EPSILON = 2.0 ** -23

NUM_TYPES = 18


class InvalidNumericMultiplierError(ValueError):
    def __init__(self) -> None:
        super().__init__("invalid numeric multiplier")


class InvalidTypingCodeError(ValueError):
    def __init__(self) -> None:
        super().__init__("invalid typing code")


class Multiplier(Enum):
    """Discrete effectiveness level. Compares by its numeric value."""

    IMMUNITY = 0.0
    DOUBLE_RESISTANCE = 0.25
    RESISTANCE = 0.5
    REGULAR = 1.0
    WEAKNESS = 2.0
    DOUBLE_WEAKNESS = 4.0

    def __float__(self) -> float:
        return self.value

    def __lt__(self, other):
        if not isinstance(other, Multiplier):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, Multiplier):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other):
        if not isinstance(other, Multiplier):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, Multiplier):
            return NotImplemented
        return self.value >= other.value

    @classmethod
    def from_float(cls, raw: float) -> "Multiplier":
        return decode_multiplier(raw)

    def combine(self, other: "Multiplier") -> "Multiplier":
        return combine(self, other)


def decode_multiplier(raw: float) -> Multiplier:
    """Maps a raw float onto the lattice; anything off-lattice is rejected."""
    for m in Multiplier:
        if abs(raw - m.value) <= EPSILON:
            return m
    log.debug("rejected numeric multiplier %r", raw)
    raise InvalidNumericMultiplierError()


# Flattened chart, row = attacking type, column = defending type, both in
# Typing order. TYPE_MULTIPLIERS[5] is 0.5: Normal against Rock.
TYPE_MULTIPLIERS: Tuple[float, ...] = (
    # Nor  Fig  Fly  Poi  Gro  Roc  Bug  Gho  Ste  Fir  Wat  Gra  Ele  Psy  Ice  Dra  Dar  Fai
    1.0, 1.0, 1.0, 1.0, 1.0, 0.5, 1.0, 0.0, 0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,  # Normal
    2.0, 1.0, 0.5, 0.5, 1.0, 2.0, 0.5, 0.0, 2.0, 1.0, 1.0, 1.0, 1.0, 0.5, 2.0, 1.0, 2.0, 0.5,  # Fighting
    1.0, 2.0, 1.0, 1.0, 1.0, 0.5, 2.0, 1.0, 0.5, 1.0, 1.0, 2.0, 0.5, 1.0, 1.0, 1.0, 1.0, 1.0,  # Flying
    1.0, 1.0, 1.0, 0.5, 0.5, 0.5, 1.0, 0.5, 0.0, 1.0, 1.0, 2.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0,  # Poison
    1.0, 1.0, 0.0, 2.0, 1.0, 2.0, 0.5, 1.0, 2.0, 2.0, 1.0, 0.5, 2.0, 1.0, 1.0, 1.0, 1.0, 1.0,  # Ground
    1.0, 0.5, 2.0, 1.0, 0.5, 1.0, 2.0, 1.0, 0.5, 2.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 1.0,  # Rock
    1.0, 0.5, 0.5, 0.5, 1.0, 1.0, 1.0, 0.5, 0.5, 0.5, 1.0, 2.0, 1.0, 2.0, 1.0, 1.0, 2.0, 0.5,  # Bug
    0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 0.5, 1.0,  # Ghost
    1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 0.5, 0.5, 0.5, 1.0, 0.5, 1.0, 2.0, 1.0, 1.0, 2.0,  # Steel
    1.0, 1.0, 1.0, 1.0, 1.0, 0.5, 2.0, 1.0, 2.0, 0.5, 0.5, 2.0, 1.0, 1.0, 2.0, 0.5, 1.0, 1.0,  # Fire
    1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 1.0, 1.0, 1.0, 2.0, 0.5, 0.5, 1.0, 1.0, 1.0, 0.5, 1.0, 1.0,  # Water
    1.0, 1.0, 0.5, 0.5, 2.0, 2.0, 0.5, 1.0, 0.5, 0.5, 2.0, 0.5, 1.0, 1.0, 1.0, 0.5, 1.0, 1.0,  # Grass
    1.0, 1.0, 2.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 0.5, 0.5, 1.0, 1.0, 0.5, 1.0, 1.0,  # Electric
    1.0, 2.0, 1.0, 2.0, 1.0, 1.0, 1.0, 1.0, 0.5, 1.0, 1.0, 1.0, 1.0, 0.5, 1.0, 1.0, 0.0, 1.0,  # Psychic
    1.0, 1.0, 2.0, 1.0, 2.0, 1.0, 1.0, 1.0, 0.5, 0.5, 0.5, 2.0, 1.0, 1.0, 0.5, 2.0, 1.0, 1.0,  # Ice
    1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 0.0,  # Dragon
    1.0, 0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 0.5, 0.5,  # Dark
    1.0, 2.0, 1.0, 0.5, 1.0, 1.0, 1.0, 1.0, 0.5, 0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 1.0,  # Fairy
)


class Typing(IntEnum):
    NORMAL = 0
    FIGHTING = 1
    FLYING = 2
    POISON = 3
    GROUND = 4
    ROCK = 5
    BUG = 6
    GHOST = 7
    STEEL = 8
    FIRE = 9
    WATER = 10
    GRASS = 11
    ELECTRIC = 12
    PSYCHIC = 13
    ICE = 14
    DRAGON = 15
    DARK = 16
    FAIRY = 17

    @property
    def code(self) -> int:
        return int(self)

    @classmethod
    def from_code(cls, code: int) -> "Typing":
        if isinstance(code, bool) or not isinstance(code, int) or not 0 <= code < NUM_TYPES:
            raise InvalidTypingCodeError()
        return cls(code)

    def offense_multiplier(self, defender: "Typing") -> Multiplier:
        return offense_multiplier(self, defender)

    def defense_multiplier(self, attacker: "Typing") -> Multiplier:
        return defense_multiplier(self, attacker)

    def combined_effectiveness(self, defenders: Tuple["Typing", "Typing"]) -> Multiplier:
        return combined_effectiveness(self, defenders)

    # incoming: this type defending
    def weak_to(self) -> List["Typing"]:
        return weak_to(self)

    def resistant_to(self) -> List["Typing"]:
        return resistant_to(self)

    def neutral_to(self) -> List["Typing"]:
        return neutral_to(self)

    def immune_to(self) -> List["Typing"]:
        return immune_to(self)

    # outgoing: this type attacking
    def weak_against(self) -> List["Typing"]:
        return weak_against(self)

    def resistant_against(self) -> List["Typing"]:
        return resistant_against(self)

    def neutral_against(self) -> List["Typing"]:
        return neutral_against(self)

    def immune_against(self) -> List["Typing"]:
        return immune_against(self)


ALL_TYPES: Tuple[Typing, ...] = tuple(Typing)


def matrix_index(attacker: Typing, defender: Typing) -> int:
    return attacker.code * NUM_TYPES + defender.code


def offense_multiplier(attacker: Typing, defender: Typing) -> Multiplier:
    """Multiplier of an `attacker`-type move against a pure `defender`-type target."""
    return decode_multiplier(TYPE_MULTIPLIERS[matrix_index(attacker, defender)])


def defense_multiplier(defender: Typing, attacker: Typing) -> Multiplier:
    return offense_multiplier(attacker, defender)


def combine(a: Multiplier, b: Multiplier) -> Multiplier:
    """Two-way composition used for dual typings.

    The product is clamped to [0.25, 4.0] before decoding; a zero product
    (either side immune) is left alone and decodes to IMMUNITY.
    """
    product = a.value * b.value
    if product <= EPSILON:
        return Multiplier.IMMUNITY
    if product <= 0.125:
        log.debug("clamped %s x %s up to DOUBLE_RESISTANCE", a.name, b.name)
        return Multiplier.DOUBLE_RESISTANCE
    if product >= 8.0:
        log.debug("clamped %s x %s down to DOUBLE_WEAKNESS", a.name, b.name)
        return Multiplier.DOUBLE_WEAKNESS
    return decode_multiplier(product)


def combined_effectiveness(attacker: Typing, defenders: Tuple[Typing, Typing]) -> Multiplier:
    first, second = defenders
    return combine(offense_multiplier(attacker, first), offense_multiplier(attacker, second))


def _incoming(defender: Typing, wanted: Multiplier) -> List[Typing]:
    return [t for t in ALL_TYPES if offense_multiplier(t, defender) is wanted]


def _outgoing(attacker: Typing, wanted: Multiplier) -> List[Typing]:
    return [t for t in ALL_TYPES if offense_multiplier(attacker, t) is wanted]


def weak_to(defender: Typing) -> List[Typing]:
    return _incoming(defender, Multiplier.WEAKNESS)


def resistant_to(defender: Typing) -> List[Typing]:
    return _incoming(defender, Multiplier.RESISTANCE)


def neutral_to(defender: Typing) -> List[Typing]:
    return _incoming(defender, Multiplier.REGULAR)


def immune_to(defender: Typing) -> List[Typing]:
    return _incoming(defender, Multiplier.IMMUNITY)


def weak_against(attacker: Typing) -> List[Typing]:
    return _outgoing(attacker, Multiplier.WEAKNESS)


def resistant_against(attacker: Typing) -> List[Typing]:
    return _outgoing(attacker, Multiplier.RESISTANCE)


def neutral_against(attacker: Typing) -> List[Typing]:
    return _outgoing(attacker, Multiplier.REGULAR)


def immune_against(attacker: Typing) -> List[Typing]:
    return _outgoing(attacker, Multiplier.IMMUNITY)


def effectiveness_against(attacker: Typing, defenders: Sequence[Typing]) -> Multiplier:
    """Single or dual typing; an empty sequence is neutral."""
    if len(defenders) == 0:
        return Multiplier.REGULAR
    if len(defenders) == 1:
        return offense_multiplier(attacker, defenders[0])
    if len(defenders) == 2:
        return combined_effectiveness(attacker, (defenders[0], defenders[1]))
    raise ValueError(f"at most two defending types are supported, got {len(defenders)}")


def defensive_profile(defenders: Sequence[Typing]) -> Dict[Multiplier, List[Typing]]:
    """Groups every attacking typing by the multiplier it gets against `defenders`."""
    profile: Dict[Multiplier, List[Typing]] = {m: [] for m in Multiplier}
    for attacker in ALL_TYPES:
        profile[effectiveness_against(attacker, defenders)].append(attacker)
    return profile


def type_effectiveness(move_type: str, defender_types: Iterable[str]) -> float:
    """String front end: move type name against one or two defending type names."""
    from ..parsing.names import parse_typing

    attacker = parse_typing(move_type)
    defenders = [parse_typing(dt) for dt in defender_types or [] if dt]
    return float(effectiveness_against(attacker, defenders))
