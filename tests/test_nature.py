import pytest

from pokemon_data.models.stat import NATURE_STATS, STAT_KEYS, Stat
from pokemon_data.utils.nature import (
    NATURE_EFFECTS,
    Nature,
    nature_multipliers,
    natures_raising,
    neutral_natures,
)


def test_stat_keys_and_display_names():
    assert STAT_KEYS == ["HP", "Atk", "Def", "SpA", "SpD", "Spe"]
    assert str(Stat.SPA) == "Special Attack"
    assert Stat.HP.display_name == "HP"
    assert Stat.HP not in NATURE_STATS


def test_twenty_five_natures():
    assert len(Nature) == 25
    assert len(NATURE_EFFECTS) == 25


@pytest.mark.parametrize("nature, up, down", [
    (Nature.ADAMANT, Stat.ATK, Stat.SPA),
    (Nature.LONELY, Stat.ATK, Stat.DEF),
    (Nature.BOLD, Stat.DEF, Stat.ATK),
    (Nature.MODEST, Stat.SPA, Stat.ATK),
    (Nature.CALM, Stat.SPD, Stat.ATK),
    (Nature.SASSY, Stat.SPD, Stat.SPE),
    (Nature.TIMID, Stat.SPE, Stat.ATK),
    (Nature.JOLLY, Stat.SPE, Stat.SPA),
    (Nature.NAIVE, Stat.SPE, Stat.SPD),
])
def test_nature_effects(nature, up, down):
    assert nature.has_stat_effect
    assert nature.increased_stat is up
    assert nature.decreased_stat is down


def test_neutral_natures():
    assert neutral_natures() == (
        Nature.HARDY, Nature.DOCILE, Nature.BASHFUL, Nature.QUIRKY, Nature.SERIOUS,
    )
    for nature in neutral_natures():
        assert nature.increased_stat is nature.decreased_stat


def test_nature_multipliers():
    mults = nature_multipliers(Nature.ADAMANT)
    assert mults[Stat.ATK] == 1.1
    assert mults[Stat.SPA] == 0.9
    assert mults[Stat.SPE] == 1.0
    assert Stat.HP not in mults


def test_nature_multipliers_from_name_and_none():
    assert nature_multipliers("timid")[Stat.SPE] == 1.1
    assert set(nature_multipliers(None).values()) == {1.0}
    assert set(nature_multipliers(Nature.SERIOUS).values()) == {1.0}


def test_natures_raising():
    assert natures_raising(Stat.SPE) == (Nature.TIMID, Nature.HASTY, Nature.JOLLY, Nature.NAIVE)
    assert natures_raising(Stat.ATK, lowering=Stat.SPA) == (Nature.ADAMANT,)
