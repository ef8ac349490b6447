import pytest

from kantodex.catalog.display import capitalize, category_options, format_dex_number, to_card
from kantodex.catalog.schemas import Pokemon


@pytest.mark.parametrize(
    "pokemon_id, expected",
    [(1, "#001"), (4, "#004"), (25, "#025"), (100, "#100"), (1000, "#1000"), (10001, "#10001")],
)
def test_format_dex_number(pokemon_id, expected):
    assert format_dex_number(pokemon_id) == expected


def test_capitalize_only_touches_first_letter():
    assert capitalize("mr-mime") == "Mr-mime"
    assert capitalize("") == ""


def test_to_card_keeps_entity_fields():
    card = to_card(Pokemon(id=25, name="pikachu", types=["electric"], image="p.png"))

    assert card.number == "#025"
    assert card.display_name == "Pikachu"
    assert card.types == ["electric"]


def test_category_options_are_unique_type_names():
    values = [option.value for option in category_options()]

    assert len(values) == len(set(values)) == 18
    assert values[0] == "normal"
    assert values[-1] == "fairy"
