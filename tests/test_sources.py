"""Tests for the bundled sample recipes and the sample recipe source."""

import pytest

from onedish.exceptions import ExtractionFailedError
from onedish.samples import DEFAULT_SAMPLE, SAMPLE_RECIPES, get_sample_recipe
from onedish.sources import RecipeSource, SampleRecipeSource


@pytest.fixture
def source():
    return SampleRecipeSource()


class TestSampleRecipeSource:

    def test_is_a_recipe_source(self, source):
        assert isinstance(source, RecipeSource)

    def test_salmon_url(self, source):
        url = "https://www.example.com/recipes/one-pan-meal-salmon-and-vegetables/"
        recipe = source.get_recipe(url)
        assert recipe.title == "One-Pan Salmon and Vegetables"
        assert recipe.sourceUrl == url

    def test_greek_salad_url(self, source):
        url = "https://www.example.com/greek-salad"
        recipe = source.get_recipe(url)
        assert recipe.title == "Greek Salad"
        assert recipe.sourceUrl == url

    def test_unknown_url_falls_back_to_default(self, source):
        url = "https://www.example.com/beef-wellington"
        recipe = source.get_recipe(url)
        assert recipe.title == get_sample_recipe(DEFAULT_SAMPLE).title
        assert recipe.sourceUrl == url

    @pytest.mark.parametrize("url", ["", "   "])
    def test_blank_url_raises(self, source, url):
        with pytest.raises(ExtractionFailedError) as exc_info:
            source.get_recipe(url)
        assert exc_info.value.url == url


class TestSamples:

    @pytest.mark.parametrize("key", list(SAMPLE_RECIPES))
    def test_samples_are_valid_recipes(self, key):
        recipe = get_sample_recipe(key)
        assert recipe.ingredients
        assert recipe.steps
        assert recipe.servings == 4
        assert recipe.sourceUrl is None

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            get_sample_recipe("beef-wellington")

    def test_each_call_builds_a_new_recipe(self):
        first = get_sample_recipe("greek-salad", url="https://a.example")
        second = get_sample_recipe("greek-salad", url="https://b.example")
        assert first is not second
        assert first.sourceUrl == "https://a.example"
        assert second.sourceUrl == "https://b.example"
