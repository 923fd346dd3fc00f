#!/usr/bin/env python3
"""
Command-line interface for onedish.

Usage:
    # Convert a recipe JSON file to one serving
    onedish convert path/to/recipe.json --servings 1

    # Try a bundled sample, dropping the ingredients that became optional
    onedish sample https://example.com/greek-salad --servings 2 --drop-optional

    # Print the converted recipe as JSON
    onedish convert path/to/recipe.json --servings 1 --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .constants import DEFAULT_TARGET_SERVINGS
from .exceptions import ExtractionFailedError, MissingIngredientsError
from .models.recipe import ConvertedRecipe, Recipe
from .services.scaler import convert_recipe
from .sources import SampleRecipeSource

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )
    logging.getLogger().setLevel(log_level)


def load_recipe(path: Path) -> Recipe:
    """Read a Recipe from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return Recipe.model_validate(data)


def _print_recipe(recipe: ConvertedRecipe) -> None:
    """Pretty-print a converted recipe to the console."""
    servings = recipe.servings
    console.print(f"\n[bold]{recipe.title}[/bold]  [dim]{servings} serving{'s' if servings != 1 else ''}[/dim]")
    if recipe.sourceUrl:
        console.print(f"  [dim]{recipe.sourceUrl}[/dim]")

    table = Table(show_header=True, header_style="bold", padding=(0, 1))
    table.add_column("Amount", justify="right", min_width=8)
    table.add_column("Unit", min_width=10)
    table.add_column("Ingredient", min_width=28)

    for ingredient in recipe.ingredients:
        name = ingredient.name
        if ingredient.optional:
            name = f"[italic]{name}[/italic] [yellow](optional)[/yellow]"
        table.add_row(ingredient.amount, ingredient.unit or "", name)

    console.print(table)

    if recipe.steps:
        console.print("\n[bold]Steps[/bold]")
        for i, step in enumerate(recipe.steps, start=1):
            console.print(f"  {i}. {step}")

    if recipe.warnings:
        console.print("\n[bold yellow]Heads up[/bold yellow]")
        for warning in recipe.warnings:
            console.print(f"  [yellow]-[/yellow] {warning}")


def _run(recipe: Recipe, args: argparse.Namespace) -> int:
    converted = convert_recipe(recipe, args.servings)
    if args.drop_optional:
        converted = converted.without_optional_ingredients()

    if args.json:
        print(converted.model_dump_json(indent=2, exclude_none=True))
    else:
        _print_recipe(converted)
    return 0


def _add_conversion_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--servings", "-s", type=float, default=DEFAULT_TARGET_SERVINGS,
        help=f"Target number of servings (default: {DEFAULT_TARGET_SERVINGS})",
    )
    parser.add_argument(
        "--drop-optional", action="store_true",
        help="Remove the ingredients that became optional after scaling",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the converted recipe as JSON",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging with detailed information",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Turn any recipe into a one- or two-serving version",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="Convert a recipe JSON file")
    convert_parser.add_argument("recipe", type=Path, help="Path to a recipe JSON file")
    _add_conversion_options(convert_parser)

    sample_parser = subparsers.add_parser("sample", help="Convert a bundled sample recipe")
    sample_parser.add_argument("url", help="Recipe URL used to pick the sample")
    _add_conversion_options(sample_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line interface."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.command == "convert":
            recipe = load_recipe(args.recipe)
        else:
            recipe = SampleRecipeSource().get_recipe(args.url)
        return _run(recipe, args)
    except FileNotFoundError:
        logging.error(f"Recipe file not found: {args.recipe}")
    except OSError as e:
        logging.error(f"Could not read recipe file {args.recipe}: {e}")
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logging.error(f"Invalid recipe file {args.recipe}: {e}")
    except MissingIngredientsError as e:
        logging.error(str(e))
    except ExtractionFailedError as e:
        logging.error(f"Could not get a recipe: {e}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
