#!/usr/bin/env python3
"""
Recipe Sorting
Presentation-only ordering of recipes; inputs are never modified.
"""

from typing import Iterable, List, Optional

from recipe import Recipe


def _name_key(recipe: Recipe) -> str:
    return recipe.name.lower()


def sort_by_name(recipes: Optional[Iterable[Recipe]], reverse: bool = False) -> List[Recipe]:
    """
    Return a new list of recipes ordered by name, ignoring case.

    The sort is stable in both directions: recipes whose names compare equal
    keep their relative input order.

    Args:
        recipes: Recipes to order; None yields an empty list
        reverse: Sort Z-A instead of A-Z

    Returns:
        New sorted list
    """
    if recipes is None:
        return []
    return sorted(recipes, key=_name_key, reverse=reverse)
