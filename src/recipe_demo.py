#!/usr/bin/env python3
"""
Recipe Book Demo
Builds a small sample recipe book and runs searches, sorting and scaling
against it from the command line.
"""

import sys
from typing import List, Optional, Sequence

from recipe import Recipe
from recipe_collection import RecipeCollection
from recipe_errors import ConfigurationError, InvalidArgument
from recipe_settings import Settings, load_settings
from recipe_sorter import sort_by_name
from structured_logging import configure_logging, get_logger

logger = get_logger(__name__)

NO_RESULTS = "(No recipes found)"


def build_sample_book() -> RecipeCollection:
    """Sample book with four recipes."""
    pasta = Recipe("Pasta Aglio e Olio", 2)
    pasta.add_ingredient("spaghetti (g)", 200)
    pasta.add_ingredient("garlic cloves", 3)
    pasta.add_ingredient("olive oil (cup)", 0.25)

    pancakes = Recipe("Pancakes", 4)
    pancakes.add_ingredient("flour (cup)", 2)
    pancakes.add_ingredient("eggs", 2)
    pancakes.add_ingredient("milk (cup)", 1.5)

    chocolate_cake = Recipe("Chocolate Cake", 8)
    chocolate_cake.add_ingredient("flour (cup)", 2)
    chocolate_cake.add_ingredient("cocoa powder (cup)", 0.75)
    chocolate_cake.add_ingredient("sugar (cup)", 2)
    chocolate_cake.add_ingredient("eggs", 3)

    garlic_bread = Recipe("Garlic Bread", 4)
    garlic_bread.add_ingredient("bread", 1)
    garlic_bread.add_ingredient("garlic cloves", 4)
    garlic_bread.add_ingredient("butter (tbsp)", 4)

    book = RecipeCollection()
    for recipe in (pasta, pancakes, chocolate_cake, garlic_bread):
        book.add(recipe)
    return book


def format_recipes(recipes: Sequence[Recipe], settings: Optional[Settings] = None) -> str:
    """Rendered recipes separated by blank lines, or a placeholder if there are none."""
    if not recipes:
        return NO_RESULTS + "\n"
    return "\n".join(recipe.render(settings) for recipe in recipes)


def main(argv: Optional[List[str]] = None) -> int:
    """Main recipe book script."""
    import argparse

    parser = argparse.ArgumentParser(description='Search, sort and scale a sample recipe book')
    parser.add_argument('--config', '-c', help='YAML settings file')
    query = parser.add_mutually_exclusive_group()
    query.add_argument('--name', help='Search recipe names')
    query.add_argument('--ingredient', help='Search ingredient names')
    query.add_argument('--tokens', help='Match every word against name or ingredients')
    parser.add_argument('--sort', choices=['asc', 'desc'], help='Sort results by name')
    parser.add_argument('--scale', type=int, help='Scale results to this many servings')
    parser.add_argument('--log-level', help='Override the configured log level')

    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(args.log_level or settings.log_level, settings.log_format)

    book = build_sample_book()
    logger.info("sample_book_ready", recipes=book.size())

    if args.name is not None:
        results = book.search_by_name(args.name)
    elif args.ingredient is not None:
        results = book.search_by_ingredient(args.ingredient)
    elif args.tokens is not None:
        results = book.search_by_tokens(args.tokens)
    else:
        results = book.all()

    if args.sort:
        results = sort_by_name(results, reverse=args.sort == 'desc')

    if args.scale is not None:
        try:
            for recipe in results:
                recipe.scale_to_servings(args.scale)
        except InvalidArgument as e:
            print(f"Invalid argument: {e}", file=sys.stderr)
            return 2

    print(format_recipes(results, settings), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
