from enum import Enum
from typing import List


class Stat(Enum):
    """The six stats. Short keys are the values; long forms are for display."""

    HP = "HP"
    ATK = "Atk"
    DEF = "Def"
    SPA = "SpA"
    SPD = "SpD"
    SPE = "Spe"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    Stat.HP: "HP",
    Stat.ATK: "Attack",
    Stat.DEF: "Defense",
    Stat.SPA: "Special Attack",
    Stat.SPD: "Special Defense",
    Stat.SPE: "Speed",
}

STAT_KEYS: List[str] = [s.value for s in Stat]

# natures never touch HP
NATURE_STATS: List[Stat] = [Stat.ATK, Stat.DEF, Stat.SPA, Stat.SPD, Stat.SPE]
