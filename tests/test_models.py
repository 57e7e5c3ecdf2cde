import pydantic
import pytest

from conftest import carbonara
from rescort.domain.models import Dish, Language, Theme
from rescort.i18n import STRINGS, t


def test_copy_ingredients() -> None:
    assert carbonara().ingredients_text == "200g spaghetti\n2 eggs"


def test_copy_recipe() -> None:
    assert carbonara().recipe_text == "1. Boil pasta\n2. Mix eggs"


def test_copy_empty() -> None:
    dish = Dish(name="Water", description="Wet.", ingredients=[], recipe=[])
    assert dish.ingredients_text == ""
    assert dish.recipe_text == ""


def test_dish_is_immutable() -> None:
    with pytest.raises(pydantic.ValidationError):
        carbonara().name = "Lasagne"  # pyright: ignore[reportAttributeAccessIssue]


def test_theme_toggled() -> None:
    assert Theme.light.toggled() is Theme.dark
    assert Theme.dark.toggled() is Theme.light


@pytest.mark.parametrize("language", list(Language))
def test_every_language_has_every_string(language: Language) -> None:
    assert STRINGS[language].keys() == STRINGS[Language.en].keys()


def test_t() -> None:
    assert t(Language.en, "image_alt", name="Pho", n=2) == "Pho - Image 2"
    assert t(Language.ur, "search") == "تلاش کریں"
