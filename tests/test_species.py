import pytest

from pokemon_data.services.species import (
    FORME_GROUPS,
    SPECIES,
    SPECIES_FORMES,
    InvalidDexNumberError,
    InvalidFormeError,
    PokemonForme,
    dex_number,
    formes_of,
    has_forme,
    lookup_species,
    species_from_dex,
)


def test_species_table():
    assert len(SPECIES) == 807
    assert len(set(SPECIES)) == 807
    assert SPECIES[0] == "Bulbasaur"
    assert SPECIES[-1] == "Zeraora"


@pytest.mark.parametrize("name, number", [
    ("Bulbasaur", 1), ("Castform", 351), ("Poipole", 803), ("Zeraora", 807), ("Porygon2", 233),
])
def test_dex_numbers(name, number):
    assert dex_number(name) == number
    assert species_from_dex(number) == name


@pytest.mark.parametrize("number", [0, 808])
def test_bad_dex_number(number):
    with pytest.raises(InvalidDexNumberError):
        species_from_dex(number)
    with pytest.raises(InvalidFormeError):
        PokemonForme("Pikachu", "Alola")


def test_forme_table_is_consistent():
    assert len(SPECIES_FORMES) == 84
    for species, group in SPECIES_FORMES.items():
        assert species in SPECIES
        assert group in FORME_GROUPS
    assert set(SPECIES_FORMES.values()) == set(FORME_GROUPS)


def test_has_forme():
    assert has_forme("Charizard")
    assert has_forme("Type: Null")
    assert has_forme("Meloetta")
    assert not has_forme("Pikachu")
    assert not has_forme("Genesect")


def test_formes_of():
    assert formes_of("Charizard") == ("Normal", "Mega-X", "Mega-Y")
    assert formes_of("Meloetta") == ("Aria", "Pirouette")
    assert formes_of("Landorus") == ("Incarnate", "Therian")
    assert formes_of("Pikachu") == ()
    assert len(formes_of("Arceus")) == 18


def test_lookup_species_spellings():
    assert lookup_species("TapuBulu") == "Tapu Bulu"
    assert lookup_species("tapu-bulu") == "Tapu Bulu"
    assert lookup_species("NidoranF") == "Nidoran♀"
    assert lookup_species("Nidoran-M") == "Nidoran♂"
    assert lookup_species("Farfetchd") == "Farfetch'd"
    assert lookup_species("TypeNull") == "Type: Null"
    assert lookup_species("MrMime") == "Mr. Mime"
    assert lookup_species("Flabebe") == "Flabébé"
    assert lookup_species("Missingno") is None


def test_pokemon_forme_defaults_to_base():
    deoxys = PokemonForme("Deoxys")
    assert deoxys.forme == "Normal"
    assert deoxys.is_base_forme
    assert str(deoxys) == "Deoxys"


def test_pokemon_forme_normalizes():
    p = PokemonForme("deoxys", "attack")
    assert p == PokemonForme("Deoxys", "Attack")
    assert str(p) == "Deoxys-Attack"
    assert p.dex_number == 386
    assert str(PokemonForme("Charizard", "MegaX")) == "Charizard-Mega-X"


def test_pokemon_without_formes():
    p = PokemonForme("Pikachu")
    assert p.forme is None
    assert str(p) == "Pikachu"
    with pytest.raises(InvalidFormeError):
        PokemonForme("Pikachu", "Alola")


def test_invalid_forme_rejected():
    with pytest.raises(InvalidFormeError):
        PokemonForme("Deoxys", "Mega")
    with pytest.raises(InvalidFormeError):
        PokemonForme("Agumon")
    assert issubclass(InvalidFormeError, ValueError)


def test_pokemon_forme_is_hashable():
    assert len({PokemonForme("Rotom", "Wash"), PokemonForme("rotom", "wash")}) == 1
