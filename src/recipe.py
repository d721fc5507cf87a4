#!/usr/bin/env python3
"""
Recipe Model
A named dish with a serving count and an ordered list of ingredient
amounts, plus proportional scaling and plain-text rendering.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Integral, Real
from typing import List, Optional, Tuple

from recipe_errors import InvalidArgument
from recipe_settings import MAX_AMOUNT_DECIMALS, ROUNDING_MODES, Settings
from structured_logging import get_logger

logger = get_logger(__name__)

AMOUNT_EPSILON = 1e-9
AMOUNT_DECIMALS = 2


@dataclass(frozen=True)
class Ingredient:
    """Read-only snapshot of one ingredient entry."""
    name: str
    amount: float


def format_amount(x: float, decimals: int = AMOUNT_DECIMALS, epsilon: float = AMOUNT_EPSILON,
                  rounding: str = 'half_up') -> str:
    """
    Format an ingredient amount for display.

    Whole numbers (within ``epsilon``) print without a decimal point. Anything
    else is rounded to ``decimals`` places and trailing zeros are trimmed:
    200.0 -> "200", 7.5 -> "7.5", 0.625 -> "0.63", 1.333 -> "1.33".

    Rounding is applied to the shortest decimal form of the float, so a
    literal like 0.625 rounds half-up to 0.63 rather than being affected by
    its binary representation.

    Args:
        x: Amount to format
        decimals: Maximum number of decimal digits
        epsilon: Distance to the nearest integer treated as exact
        rounding: 'half_up' or 'half_even'

    Returns:
        Compact string form of the amount
    """
    nearest = round(x)
    if abs(x - nearest) < epsilon:
        return str(int(nearest))

    if rounding not in ROUNDING_MODES:
        raise InvalidArgument(f"unknown rounding mode {rounding!r}", field='rounding', value=rounding)
    if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= MAX_AMOUNT_DECIMALS:
        raise InvalidArgument(f"decimals must be between 0 and {MAX_AMOUNT_DECIMALS}", field='decimals', value=decimals)

    quantum = Decimal(1).scaleb(-decimals)
    text = str(Decimal(repr(x)).quantize(quantum, rounding=ROUNDING_MODES[rounding]))
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def _check_name(value, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field} must be a non-empty string", field=field, value=value)
    return value


def _check_servings(value, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
        raise InvalidArgument(f"{field} must be a positive integer", field=field, value=value)
    return int(value)


def _check_amount(value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) \
            or not math.isfinite(value) or value <= 0:
        raise InvalidArgument("amount must be a positive number", field='amount', value=value)
    return float(value)


class Recipe:
    """A recipe: name, servings and ingredient amounts in insertion order."""

    def __init__(self, name: str, servings: int):
        """
        Create a recipe with no ingredients.

        Args:
            name: Recipe name; must not be blank
            servings: Number of servings; must be positive

        Raises:
            InvalidArgument: If name is blank or servings is not positive
        """
        self._name = _check_name(name, 'name')
        self._servings = _check_servings(servings, 'servings')
        self._ingredients: List[Ingredient] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def servings(self) -> int:
        return self._servings

    @property
    def ingredients(self) -> Tuple[Ingredient, ...]:
        """Ingredient entries in insertion order."""
        return tuple(self._ingredients)

    @property
    def ingredient_names(self) -> Tuple[str, ...]:
        return tuple(ingredient.name for ingredient in self._ingredients)

    def add_ingredient(self, ingredient_name: str, amount: float) -> None:
        """
        Append an ingredient entry. Duplicate names are kept as separate entries.

        Raises:
            InvalidArgument: If the name is blank or amount is not positive
        """
        entry = Ingredient(_check_name(ingredient_name, 'ingredient_name'), _check_amount(amount))
        self._ingredients.append(entry)
        logger.debug("ingredient_added", recipe=self._name, ingredient=entry.name, amount=entry.amount)

    def ingredient_count(self) -> int:
        return len(self._ingredients)

    def scale_to_servings(self, new_servings: int) -> None:
        """
        Rescale every amount by ``new_servings / servings`` and update servings.

        Args:
            new_servings: Target number of servings; must be positive

        Raises:
            InvalidArgument: If new_servings is not positive, or a scaled amount would
                overflow or underflow to zero (nothing is changed)
        """
        new_servings = _check_servings(new_servings, 'new_servings')
        factor = new_servings / self._servings

        scaled = []
        for ingredient in self._ingredients:
            try:
                amount = _check_amount(ingredient.amount * factor)
            except InvalidArgument:
                raise InvalidArgument(
                    f"scaling {ingredient.name!r} to {new_servings} servings leaves no positive finite amount",
                    field='new_servings', value=new_servings,
                )
            scaled.append(Ingredient(ingredient.name, amount))

        self._ingredients = scaled
        logger.debug("recipe_scaled", recipe=self._name, servings_from=self._servings,
                     servings_to=new_servings, factor=factor)
        self._servings = new_servings

    def render(self, settings: Optional[Settings] = None) -> str:
        """
        Render the recipe as text:

            <name> (serves <servings>)
            - <amount> <ingredient>

        Each line, including the header, ends with a newline.
        """
        settings = settings or Settings()
        lines = [f"{self._name} (serves {self._servings})\n"]
        for ingredient in self._ingredients:
            amount = format_amount(
                ingredient.amount,
                decimals=settings.amount_decimals,
                epsilon=settings.amount_epsilon,
                rounding=settings.rounding,
            )
            lines.append(f"- {amount} {ingredient.name}\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Recipe(name={self._name!r}, servings={self._servings}, ingredients={len(self._ingredients)})"
