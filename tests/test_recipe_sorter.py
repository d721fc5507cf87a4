"""Tests for name sorting."""

from recipe import Recipe
from recipe_collection import RecipeCollection
from recipe_sorter import sort_by_name


def names(recipes):
    return [recipe.name for recipe in recipes]


def test_sort_ascending():
    recipes = [Recipe("Zebra Cake", 8), Recipe("Apple Pie", 6), Recipe("Muffins", 12)]
    assert names(sort_by_name(recipes)) == ["Apple Pie", "Muffins", "Zebra Cake"]


def test_sort_descending():
    recipes = [Recipe("Zebra Cake", 8), Recipe("Apple Pie", 6), Recipe("Muffins", 12)]
    assert names(sort_by_name(recipes, reverse=True)) == ["Zebra Cake", "Muffins", "Apple Pie"]


def test_descending_is_reverse_of_ascending():
    recipes = [Recipe(name, 1) for name in ("Pie", "apple", "Soup", "bagel", "Crepe")]
    assert sort_by_name(recipes, reverse=True) == list(reversed(sort_by_name(recipes)))


def test_case_insensitive():
    recipes = [Recipe("banana bread", 1), Recipe("Apple Tart", 1), Recipe("Cherry Pie", 1)]
    assert names(sort_by_name(recipes)) == ["Apple Tart", "banana bread", "Cherry Pie"]


def test_input_not_mutated():
    zebra, apple = Recipe("Zebra", 1), Recipe("Apple", 1)
    recipes = [zebra, apple]

    result = sort_by_name(recipes)

    assert recipes[0] is zebra
    assert recipes[1] is apple
    assert result is not recipes
    assert result[0] is apple


def test_none_input_returns_empty_list():
    assert sort_by_name(None) == []
    assert sort_by_name(None, reverse=True) == []


def test_ties_keep_input_order():
    first, second, third = Recipe("soup", 1), Recipe("SOUP", 2), Recipe("Soup", 3)
    recipes = [first, Recipe("Apple", 1), second, third]

    ascending = sort_by_name(recipes)
    descending = sort_by_name(recipes, reverse=True)

    assert ascending[1:] == [first, second, third]
    assert descending[:3] == [first, second, third]


def test_accepts_collection_and_generators():
    book = RecipeCollection()
    book.add(Recipe("Pancakes", 4))
    book.add(Recipe("Garlic Bread", 4))

    assert names(sort_by_name(book)) == ["Garlic Bread", "Pancakes"]
    assert names(sort_by_name(r for r in book.all())) == ["Garlic Bread", "Pancakes"]
    assert names(book.all()) == ["Pancakes", "Garlic Bread"]
