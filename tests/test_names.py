import pytest

from pokemon_data.models.stat import Stat
from pokemon_data.parsing.names import (
    UnknownNameError,
    format_pokemon,
    parse_nature,
    parse_pokemon,
    parse_species,
    parse_stat,
    parse_terrain,
    parse_typing,
    parse_weather,
    typing_name,
)
from pokemon_data.services.field import Terrain, Weather
from pokemon_data.services.species import PokemonForme
from pokemon_data.services.types import ALL_TYPES, Typing
from pokemon_data.utils.nature import Nature
from pokemon_data.utils.species_normalize import ascii_slug, name_key


def test_typing_names_round_trip():
    for t in ALL_TYPES:
        assert parse_typing(typing_name(t)) is t
    assert typing_name(Typing.ELECTRIC) == "Electric"
    assert parse_typing("  psychic ") is Typing.PSYCHIC


def test_unknown_typing():
    with pytest.raises(UnknownNameError) as exc:
        parse_typing("Sound")
    assert exc.value.text == "Sound"
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize("text, stat", [
    ("Atk", Stat.ATK), ("attack", Stat.ATK), ("Special Attack", Stat.SPA),
    ("Sp. Def", Stat.SPD), ("spe", Stat.SPE), ("HP", Stat.HP),
])
def test_parse_stat(text, stat):
    assert parse_stat(text) is stat


def test_parse_nature():
    assert parse_nature("Adamant") is Nature.ADAMANT
    assert parse_nature("jolly nature") is Nature.JOLLY
    with pytest.raises(UnknownNameError):
        parse_nature("Grumpy")


def test_parse_field():
    assert parse_terrain("Electric Terrain") is Terrain.ELECTRIC
    assert parse_terrain("misty") is Terrain.MISTY
    assert parse_weather("Heavy Rain") is Weather.HEAVY_RAIN
    assert parse_weather("heavy_rain") is Weather.HEAVY_RAIN
    assert parse_weather("StrongWinds") is Weather.STRONG_WINDS
    assert parse_weather("none") is Weather.NORMAL


def test_parse_species():
    assert parse_species("Tapu Koko") == "Tapu Koko"
    assert parse_species("HoOh") == "Ho-Oh"
    assert parse_species("Mime Jr.") == "Mime Jr."
    with pytest.raises(UnknownNameError):
        parse_species("")


@pytest.mark.parametrize("text, expected", [
    ("Deoxys-Attack", PokemonForme("Deoxys", "Attack")),
    ("Charizard-Mega-X", PokemonForme("Charizard", "Mega-X")),
    ("Necrozma-Dusk-Mane", PokemonForme("Necrozma", "Dusk-Mane")),
    ("Oricorio-Pa'u", PokemonForme("Oricorio", "Pa'u")),
    ("Zygarde-10%", PokemonForme("Zygarde", "10%")),
    ("Meloetta-Pirouette", PokemonForme("Meloetta", "Pirouette")),
    ("Kommo-o", PokemonForme("Kommo-o")),
    ("Porygon-Z", PokemonForme("Porygon-Z")),
    ("Rotom", PokemonForme("Rotom", "Normal")),
])
def test_parse_pokemon(text, expected):
    assert parse_pokemon(text) == expected


def test_parse_pokemon_rejects_unknown_forme():
    with pytest.raises(UnknownNameError):
        parse_pokemon("Pikachu-Mega")
    with pytest.raises(UnknownNameError):
        parse_pokemon("Deoxys-Blue")


def test_format_round_trip():
    for text in ["Landorus-Therian", "Marowak-Alola", "Greninja-Ash", "Tapu Lele", "Nidoran♀"]:
        assert format_pokemon(parse_pokemon(text)) == text


def test_slug_and_key():
    assert ascii_slug("Nidoran♀") == "nidoran-f"
    assert ascii_slug("Farfetch'd") == "farfetchd"
    assert ascii_slug("Type: Null") == "type-null"
    assert name_key("Tapu Bulu") == name_key("TapuBulu") == "tapubulu"
