"""Tests for the onedish command-line interface."""

import json

import pytest

from onedish.cli import build_parser, main


@pytest.fixture
def recipe_file(tmp_path):
    """Write a small recipe JSON file and return its path."""
    path = tmp_path / "pesto.json"
    path.write_text(json.dumps({
        "title": "Pesto Pasta",
        "servings": 4,
        "ingredients": [
            {"name": "spaghetti", "amount": "400", "unit": "g"},
            {"name": "fresh basil", "amount": "1", "unit": "cup"},
            {"name": "garlic", "amount": "2", "unit": "cloves"},
            {"name": "sea salt", "amount": "to taste"},
        ],
        "steps": ["Blend the pesto.", "Cook the pasta.", "Toss together."],
    }), encoding="utf-8")
    return path


def _run_json(capsys, argv) -> dict:
    assert main(argv) == 0
    return json.loads(capsys.readouterr().out)


class TestConvertCommand:

    def test_json_output(self, recipe_file, capsys):
        data = _run_json(capsys, ["convert", str(recipe_file), "--servings", "1", "--json"])
        assert data["servings"] == 1
        amounts = {ing["name"]: ing["amount"] for ing in data["ingredients"]}
        assert amounts == {
            "spaghetti": "100",
            "fresh basil": "1/4",
            "garlic": "1",
            "sea salt": "to taste",
        }
        assert len(data["warnings"]) == 2

    def test_drop_optional(self, recipe_file, capsys):
        data = _run_json(
            capsys, ["convert", str(recipe_file), "-s", "1", "--drop-optional", "--json"]
        )
        names = [ing["name"] for ing in data["ingredients"]]
        assert "fresh basil" not in names
        assert names == ["spaghetti", "garlic", "sea salt"]

    def test_default_is_one_serving(self, recipe_file, capsys):
        data = _run_json(capsys, ["convert", str(recipe_file), "--json"])
        assert data["servings"] == 1

    def test_table_output(self, recipe_file, capsys):
        assert main(["convert", str(recipe_file), "--servings", "2"]) == 0
        out = capsys.readouterr().out
        assert "Pesto Pasta" in out
        assert "spaghetti" in out
        assert "Blend the pesto." in out

    def test_missing_file(self, tmp_path):
        assert main(["convert", str(tmp_path / "nope.json")]) == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["convert", str(path)]) == 1

    def test_directory_path(self, tmp_path):
        assert main(["convert", str(tmp_path)]) == 1

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"title": "\xff\xfe"}')
        assert main(["convert", str(path)]) == 1

    def test_invalid_recipe(self, tmp_path):
        path = tmp_path / "untitled.json"
        path.write_text(json.dumps({"servings": 2}), encoding="utf-8")
        assert main(["convert", str(path)]) == 1

    def test_empty_ingredients(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"title": "Nothing", "ingredients": []}), encoding="utf-8")
        assert main(["convert", str(path)]) == 1


class TestSampleCommand:

    def test_sample_by_url(self, capsys):
        data = _run_json(
            capsys,
            ["sample", "https://example.com/one-pan-meal-salmon-and-vegetables", "-s", "2", "--json"],
        )
        assert data["title"] == "One-Pan Salmon and Vegetables"
        assert data["servings"] == 2
        assert data["sourceUrl"] == "https://example.com/one-pan-meal-salmon-and-vegetables"

    def test_blank_url_fails(self):
        assert main(["sample", " "]) == 1


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
