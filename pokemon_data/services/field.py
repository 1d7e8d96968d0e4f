# pokemon_data/services/field.py
from __future__ import annotations

from enum import Enum
from typing import Optional

from .types import Typing


class Terrain(Enum):
    # Electric: no sleep for grounded targets, boosts grounded users' Electric moves
    ELECTRIC = "Electric"
    # Grassy: 1/16 HP heal each turn, weakens Earthquake/Bulldoze/Magnitude, boosts Grass moves
    GRASSY = "Grassy"
    # Misty: status immunity for grounded targets, halves Dragon moves against them
    MISTY = "Misty"
    # Psychic: blocks priority against grounded targets, boosts Psychic moves
    PSYCHIC = "Psychic"


class Weather(Enum):
    """NORMAL means no weather in effect."""

    NORMAL = "Normal"
    RAIN = "Rain"
    HEAVY_RAIN = "Heavy Rain"
    SUN = "Sun"
    HARSH_SUN = "Harsh Sun"
    SAND = "Sand"
    HAIL = "Hail"
    STRONG_WINDS = "Strong Winds"

    @property
    def is_special(self) -> bool:
        """Set by a primal or mega legendary: it ends on switch-out and
        suppresses the ordinary weathers."""
        return self in _SPECIAL_WEATHERS


_SPECIAL_WEATHERS = frozenset({Weather.HEAVY_RAIN, Weather.HARSH_SUN, Weather.STRONG_WINDS})

TERRAIN_BOOSTED_TYPE = {
    Terrain.ELECTRIC: Typing.ELECTRIC,
    Terrain.GRASSY: Typing.GRASS,
    Terrain.PSYCHIC: Typing.PSYCHIC,
}

GRASSY_WEAKENED_MOVES = frozenset({"earthquake", "bulldoze", "magnitude"})

TERRAIN_BOOST = 1.3


def terrain_move_multiplier(
    terrain: Optional[Terrain],
    move_type: Typing,
    move_name: str = "",
    grounded: bool = True,
) -> float:
    """Power modifier a terrain applies to a move.

    `grounded` is the user for boosts and the target for Misty Terrain; the
    Grassy Terrain cut on ground-shaking moves applies regardless.
    """
    if terrain is None:
        return 1.0
    mv = (move_name or "").strip().lower()

    mod = 1.0
    if grounded and TERRAIN_BOOSTED_TYPE.get(terrain) is move_type:
        mod *= TERRAIN_BOOST
    if terrain is Terrain.GRASSY and mv in GRASSY_WEAKENED_MOVES:
        mod *= 0.5
    if terrain is Terrain.MISTY and grounded and move_type is Typing.DRAGON:
        mod *= 0.5
    return mod


def weather_move_multiplier(weather: Optional[Weather], move_type: Typing) -> float:
    w = weather or Weather.NORMAL
    if w in (Weather.RAIN, Weather.HEAVY_RAIN):
        if move_type is Typing.WATER:
            return 1.5
        if move_type is Typing.FIRE:
            return 0.0 if w is Weather.HEAVY_RAIN else 0.5
    if w in (Weather.SUN, Weather.HARSH_SUN):
        if move_type is Typing.FIRE:
            return 1.5
        if move_type is Typing.WATER:
            return 0.0 if w is Weather.HARSH_SUN else 0.5
    return 1.0
