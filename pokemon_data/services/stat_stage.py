# pokemon_data/services/stat_stage.py
"""Stat stages: 13 levels from -6 to +6.

For normal stats stage 0 is 2/2. Lowering a stage adds one to the
denominator (-1 is 2/3) and raising it adds one to the numerator (+1 is 3/2).
Accuracy and evasion use the same rule around 3/3, so -3 is still only a 50%
reduction there.
"""
from __future__ import annotations

from enum import IntEnum

MIN_STAGE = -6
MAX_STAGE = 6


def clamp_stage(value: int) -> int:
    return max(MIN_STAGE, min(MAX_STAGE, value))


def _stage_ratio(stage: int, base: float) -> float:
    if stage < 0:
        return base / (base - stage)
    # stage 0 lands here and gives base / base
    return (base + stage) / base


class StatStage(IntEnum):
    MINUS_6 = -6
    MINUS_5 = -5
    MINUS_4 = -4
    MINUS_3 = -3
    MINUS_2 = -2
    MINUS_1 = -1
    ZERO = 0
    PLUS_1 = 1
    PLUS_2 = 2
    PLUS_3 = 3
    PLUS_4 = 4
    PLUS_5 = 5
    PLUS_6 = 6

    @classmethod
    def clamp(cls, value: int) -> "StatStage":
        """Saturating constructor: anything past either end sticks to it."""
        return cls(clamp_stage(int(value)))

    def normal_multiplier(self) -> float:
        """Multiplier for HP, Atk, Def, SpA, SpD or Spe. Stage -5 is 2/7."""
        return _stage_ratio(int(self), 2.0)

    def accuracy_multiplier(self) -> float:
        """Multiplier for accuracy or evasion. Stage -4 is 3/7."""
        return _stage_ratio(int(self), 3.0)

    def __add__(self, other) -> "StatStage":
        if not isinstance(other, int):
            return NotImplemented
        return StatStage.clamp(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other) -> "StatStage":
        if not isinstance(other, int):
            return NotImplemented
        return StatStage.clamp(int(self) - int(other))

    def __rsub__(self, other) -> "StatStage":
        if not isinstance(other, int):
            return NotImplemented
        return StatStage.clamp(int(other) - int(self))
