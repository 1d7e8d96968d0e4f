"""Text <-> enum conversion for every table in the library.

Lookups are forgiving about case, spacing, hyphens and punctuation: "Heavy
Rain", "HeavyRain" and "heavy_rain" all name the same weather.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Type, TypeVar

from ..models.stat import Stat
from ..services.field import Terrain, Weather
from ..services.species import PokemonForme, lookup_forme, lookup_species
from ..services.types import Typing
from ..utils.nature import Nature
from ..utils.species_normalize import name_key

log = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class UnknownNameError(ValueError):
    def __init__(self, kind: str, text: str):
        super().__init__(f"unknown {kind}: {text!r}")
        self.kind = kind
        self.text = text


def _index(enum_cls: Type[E], aliases: Dict[str, E] | None = None) -> Dict[str, E]:
    table: Dict[str, E] = {}
    for member in enum_cls:
        table[name_key(member.name)] = member
        if isinstance(member.value, str):
            table[name_key(member.value)] = member
    for alias, member in (aliases or {}).items():
        table[name_key(alias)] = member
    return table


_TYPINGS = _index(Typing)
_NATURES = _index(Nature)
_STATS = _index(Stat, {
    "Attack": Stat.ATK,
    "Defense": Stat.DEF,
    "Special Attack": Stat.SPA,
    "Sp. Atk": Stat.SPA,
    "Special Defense": Stat.SPD,
    "Sp. Def": Stat.SPD,
    "Speed": Stat.SPE,
})
_TERRAINS = _index(Terrain)
_WEATHERS = _index(Weather, {"None": Weather.NORMAL, "Clear": Weather.NORMAL})


def _lookup(table: Dict[str, E], kind: str, text: str) -> E:
    member = table.get(name_key(text or ""))
    if member is None:
        raise UnknownNameError(kind, text)
    return member


def parse_typing(text: str) -> Typing:
    return _lookup(_TYPINGS, "typing", text)


def typing_name(typing: Typing) -> str:
    return typing.name.capitalize()


def parse_stat(text: str) -> Stat:
    return _lookup(_STATS, "stat", text)


def parse_nature(text: str) -> Nature:
    # "Adamant Nature" as written in exported sets
    t = (text or "").strip()
    if t.lower().endswith(" nature"):
        t = t[: -len(" nature")]
    return _lookup(_NATURES, "nature", t)


def parse_terrain(text: str) -> Terrain:
    t = (text or "").strip()
    if t.lower().endswith("terrain"):
        t = t[: -len("terrain")]
    return _lookup(_TERRAINS, "terrain", t)


def parse_weather(text: str) -> Weather:
    return _lookup(_WEATHERS, "weather", text)


def parse_species(text: str) -> str:
    name = lookup_species(text or "")
    if name is None:
        raise UnknownNameError("species", text)
    return name


def parse_pokemon(text: str) -> PokemonForme:
    """Parses "Species" or "Species-Forme" ("Deoxys-Attack", "Charizard-Mega-X").

    Species whose own name has a hyphen ("Kommo-o", "Porygon-Z") are tried
    whole before any split.
    """
    t = (text or "").strip()
    species = lookup_species(t)
    if species is not None:
        return PokemonForme(species)

    for i, ch in enumerate(t):
        if ch != "-":
            continue
        species = lookup_species(t[:i])
        if species is None:
            continue
        forme = lookup_forme(species, t[i + 1:])
        if forme is not None:
            log.debug("parsed %r as %s / %s", text, species, forme)
            return PokemonForme(species, forme)
    raise UnknownNameError("pokemon", text)


def format_pokemon(pokemon: PokemonForme) -> str:
    return str(pokemon)
