from enum import Enum
from typing import Dict, Optional, Tuple, Union

from ..models.stat import NATURE_STATS, Stat


class Nature(Enum):
    """The 25 natures, read left-right and top-down off the 5x5 nature table.

    Rows are the raised stat and columns the lowered one, so the diagonal
    (Hardy, Docile, Bashful, Quirky, Serious) has no effect.
    """

    HARDY = "Hardy"
    LONELY = "Lonely"
    ADAMANT = "Adamant"
    NAUGHTY = "Naughty"
    BRAVE = "Brave"
    BOLD = "Bold"
    DOCILE = "Docile"
    IMPISH = "Impish"
    LAX = "Lax"
    RELAXED = "Relaxed"
    MODEST = "Modest"
    MILD = "Mild"
    BASHFUL = "Bashful"
    RASH = "Rash"
    QUIET = "Quiet"
    CALM = "Calm"
    GENTLE = "Gentle"
    CAREFUL = "Careful"
    QUIRKY = "Quirky"
    SASSY = "Sassy"
    TIMID = "Timid"
    HASTY = "Hasty"
    JOLLY = "Jolly"
    NAIVE = "Naive"
    SERIOUS = "Serious"

    @property
    def increased_stat(self) -> Stat:
        """Raised stat. Neutral natures still report their row, check has_stat_effect."""
        return NATURE_EFFECTS[self][0]

    @property
    def decreased_stat(self) -> Stat:
        return NATURE_EFFECTS[self][1]

    @property
    def has_stat_effect(self) -> bool:
        up, down = NATURE_EFFECTS[self]
        return up is not down

    def __str__(self) -> str:
        return self.value


# (raised, lowered), derived from the table position
NATURE_EFFECTS: Dict[Nature, Tuple[Stat, Stat]] = {
    nature: (NATURE_STATS[i // 5], NATURE_STATS[i % 5])
    for i, nature in enumerate(Nature)
}


def nature_multipliers(nature: Union[Nature, str, None]) -> Dict[Stat, float]:
    mults = {k: 1.0 for k in NATURE_STATS}
    if not nature:
        return mults
    if isinstance(nature, str):
        from ..parsing.names import parse_nature
        nature = parse_nature(nature)
    if nature.has_stat_effect:
        mults[nature.increased_stat] = 1.1
        mults[nature.decreased_stat] = 0.9
    return mults


def neutral_natures() -> Tuple[Nature, ...]:
    return tuple(n for n in Nature if not n.has_stat_effect)


def natures_raising(stat: Stat, lowering: Optional[Stat] = None) -> Tuple[Nature, ...]:
    """Natures with a real effect that raise `stat` (and lower `lowering`, if given)."""
    return tuple(
        n for n in Nature
        if n.has_stat_effect and n.increased_stat is stat
        and (lowering is None or n.decreased_stat is lowering)
    )
