"""Tests for keyword-based ingredient categorization and baking detection."""

import pytest

from onedish.models.recipe import IngredientCategory
from onedish.services.categorizer import (
    categorize,
    count_baking_signals,
    is_baking_recipe,
    is_baking_title,
)


@pytest.mark.parametrize("name,expected", [
    ("eggs", IngredientCategory.EGG),
    ("egg yolks", IngredientCategory.EGG),
    ("lemon", IngredientCategory.LEMON_LIME),
    ("lime zest", IngredientCategory.LEMON_LIME),
    ("red onion", IngredientCategory.ONION),
    ("shallots", IngredientCategory.ONION),
    ("garlic", IngredientCategory.GARLIC),
    ("fresh basil", IngredientCategory.HERB),
    ("dried oregano", IngredientCategory.HERB),
    ("dried herbs (e.g. thyme or Italian seasoning)", IngredientCategory.HERB),
    ("ground cumin", IngredientCategory.SPICE),
    ("black pepper", IngredientCategory.SPICE),
    ("extra-virgin olive oil", IngredientCategory.OIL),
    ("red wine vinegar", IngredientCategory.LIQUID),
    ("chicken broth", IngredientCategory.LIQUID),
    ("whole milk", IngredientCategory.LIQUID),
    ("all-purpose flour", IngredientCategory.FLOUR),
    ("brown sugar", IngredientCategory.SUGAR),
    ("baking powder", IngredientCategory.BAKING_AGENT),
    ("active dry yeast", IngredientCategory.BAKING_AGENT),
    ("sea salt", IngredientCategory.SALT),
    ("salmon fillets", IngredientCategory.OTHER),
    ("kalamata olives", IngredientCategory.OTHER),
    ("lemongrass", IngredientCategory.HERB),
    ("", IngredientCategory.OTHER),
])
def test_categorize(name, expected):
    assert categorize(name) == expected


def test_categorize_is_case_insensitive():
    assert categorize("FRESH BASIL") == IngredientCategory.HERB
    assert categorize("Eggs") == IngredientCategory.EGG


class TestFirstMatchWins:
    """An ingredient matching several groups takes the earliest group."""

    def test_garlic_before_spice(self):
        assert categorize("garlic powder") == IngredientCategory.GARLIC

    def test_lemon_before_liquid(self):
        assert categorize("lemon juice") == IngredientCategory.LEMON_LIME

    def test_onion_before_spice(self):
        assert categorize("onion powder") == IngredientCategory.ONION

    def test_egg_before_liquid(self):
        assert categorize("egg whites beaten with milk") == IngredientCategory.EGG


class TestMaskedTerms:
    """Names that merely contain another group's keyword."""

    def test_eggplant_is_not_egg(self):
        assert categorize("eggplant") == IngredientCategory.OTHER

    def test_bell_pepper_is_not_spice(self):
        assert categorize("green bell pepper") == IngredientCategory.OTHER

    def test_unsalted_butter_is_not_salt(self):
        assert categorize("unsalted butter") == IngredientCategory.OTHER

    def test_veggie_stock_is_liquid(self):
        assert categorize("veggie stock") == IngredientCategory.LIQUID


class TestBakingDetection:

    @pytest.mark.parametrize("title", [
        "Chocolate Cake",
        "Banana Bread",
        "Oatmeal Cookies",
        "Blueberry muffins",
        "Apple Pie",
        "Danish Pastries",
        "Two Small Loaves",
    ])
    def test_baking_titles(self, title):
        assert is_baking_title(title)

    @pytest.mark.parametrize("title", [
        "Greek Salad",
        "Steak Tartare",
        "Breaded Chicken",
        "",
    ])
    def test_non_baking_titles(self, title):
        assert not is_baking_title(title)

    def test_title_alone_is_enough(self):
        assert is_baking_recipe("Chocolate Cake", [])

    def test_two_signals_make_a_baking_recipe(self):
        names = ["all-purpose flour", "granulated sugar", "salmon"]
        assert count_baking_signals(names) == 2
        assert is_baking_recipe("Weekend Treat", names)

    def test_one_signal_is_not_enough(self):
        assert not is_baking_recipe("Pan Sauce", ["butter", "shallots", "white wine"])

    def test_signals_are_counted_once(self):
        assert count_baking_signals(["sugar", "brown sugar", "powdered sugar"]) == 1

    def test_savory_recipe(self):
        names = ["cucumber", "tomatoes", "feta cheese", "extra-virgin olive oil"]
        assert not is_baking_recipe("Greek Salad", names)
