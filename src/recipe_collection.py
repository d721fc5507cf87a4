#!/usr/bin/env python3
"""
Recipe Collection
In-memory recipe book kept in insertion order, with case-insensitive
substring search by recipe name, by ingredient name, and by multiple
whitespace-separated tokens.
"""

import threading
from typing import Iterator, List, Optional

from recipe import Recipe
from recipe_errors import InvalidArgument
from structured_logging import get_logger

logger = get_logger(__name__)


def _normalize_query(query: Optional[str]) -> str:
    """Trimmed, lower-cased query; empty string for None or blank input."""
    if query is None:
        return ""
    return query.strip().lower()


def _has_ingredient(recipe: Recipe, needle: str) -> bool:
    return any(needle in name.lower() for name in recipe.ingredient_names)


def _matches_all_tokens(recipe: Recipe, tokens: List[str]) -> bool:
    name = recipe.name.lower()
    ingredient_names = [ingredient.lower() for ingredient in recipe.ingredient_names]

    for token in tokens:
        if token in name:
            continue
        if not any(token in ingredient for ingredient in ingredient_names):
            return False
    return True


class RecipeCollection:
    """Ordered, mutable container of recipes."""

    def __init__(self):
        self._recipes: List[Recipe] = []
        self._lock = threading.RLock()

    def add(self, recipe: Recipe) -> None:
        """
        Append a recipe to the end of the collection.

        Raises:
            InvalidArgument: If recipe is not a Recipe (None included)
        """
        if not isinstance(recipe, Recipe):
            raise InvalidArgument("recipe must be a Recipe", field='recipe', value=recipe)
        with self._lock:
            self._recipes.append(recipe)
        logger.debug("recipe_added", recipe=recipe.name)

    def remove(self, name: Optional[str]) -> bool:
        """
        Remove the first recipe whose name equals ``name`` exactly (case-sensitive).

        Returns:
            True if a recipe was removed, False otherwise (including name=None)
        """
        if name is None:
            return False

        with self._lock:
            for index, recipe in enumerate(self._recipes):
                if recipe.name == name:
                    del self._recipes[index]
                    logger.debug("recipe_removed", recipe=name, position=index)
                    return True
        return False

    def all(self) -> List[Recipe]:
        """Copy of the recipes in insertion order."""
        with self._lock:
            return list(self._recipes)

    def size(self) -> int:
        with self._lock:
            return len(self._recipes)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self.all())

    def search_by_name(self, query: Optional[str]) -> List[Recipe]:
        """
        Recipes whose name contains the query, ignoring case.

        Args:
            query: Substring to look for; surrounding whitespace is ignored

        Returns:
            Matches in insertion order; empty for a None or blank query
        """
        needle = _normalize_query(query)
        if not needle:
            return []

        results = [recipe for recipe in self.all() if needle in recipe.name.lower()]
        logger.debug("search_by_name", query=needle, matches=len(results))
        return results

    def search_by_ingredient(self, query: Optional[str]) -> List[Recipe]:
        """
        Recipes with at least one ingredient whose name contains the query, ignoring case.

        Args:
            query: Substring to look for; surrounding whitespace is ignored

        Returns:
            Matches in insertion order; empty for a None or blank query
        """
        needle = _normalize_query(query)
        if not needle:
            return []

        results = [recipe for recipe in self.all() if _has_ingredient(recipe, needle)]
        logger.debug("search_by_ingredient", query=needle, matches=len(results))
        return results

    def search_by_tokens(self, query: Optional[str]) -> List[Recipe]:
        """
        Recipes matching every whitespace-separated token of the query.

        A token matches when it is a case-insensitive substring of the recipe
        name or of any ingredient name; different tokens may match different
        fields.

        Args:
            query: Space-separated search terms

        Returns:
            Matches in insertion order; empty for a None or blank query
        """
        tokens = _normalize_query(query).split()
        if not tokens:
            return []

        results = [recipe for recipe in self.all() if _matches_all_tokens(recipe, tokens)]
        logger.debug("search_by_tokens", tokens=tokens, matches=len(results))
        return results
