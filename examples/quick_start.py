#!/usr/bin/env python3
"""
Quick start guide for the recipe book.
Searches, sorts and scales the sample recipes.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.append(str(Path(__file__).parent.parent / 'src'))

from recipe_demo import build_sample_book, format_recipes
from recipe_sorter import sort_by_name


def quick_start():
    """Walk through searching and sorting the sample book."""

    print("Recipe Book - Quick Start")
    print("=" * 40)

    book = build_sample_book()
    print(f"Added {book.size()} recipes to the book\n")

    print("1. Search by name '  cake  ' (case-insensitive, trimmed)")
    print(format_recipes(book.search_by_name("  cake  ")))

    print("2. Search by ingredient 'garlic'")
    print(format_recipes(book.search_by_ingredient("garlic")))

    print("3. Multi-token search 'garlic oil'")
    print(format_recipes(book.search_by_tokens("garlic oil")))

    print("4. All recipes sorted A-Z")
    print(format_recipes(sort_by_name(book.all())))

    print("5. All recipes sorted Z-A")
    print(format_recipes(sort_by_name(book.all(), reverse=True)))

    print("6. Original insertion order preserved")
    print(format_recipes(book.all()))

    print("7. Multi-token search 'flour eggs'")
    print(format_recipes(book.search_by_tokens("flour eggs")))


def scaling_example():
    """Scale one recipe up and show the reformatted amounts."""

    print("=" * 40)
    print("Scaling Example")
    print("=" * 40)

    book = build_sample_book()
    pasta = book.search_by_name("pasta")[0]
    print(pasta.render())

    pasta.scale_to_servings(5)
    print(pasta.render())


def command_line_usage():
    """Show command line usage."""

    print("=" * 40)
    print("Command Line Usage")
    print("=" * 40)

    print("recipe-book --name cake")
    print("recipe-book --tokens 'garlic oil' --sort desc")
    print("recipe-book --ingredient flour --scale 6")
    print("recipe-book --config settings.yaml --log-level DEBUG")


if __name__ == "__main__":
    quick_start()
    scaling_example()
    command_line_usage()
