"""Pizzas assembled by wrapping ingredients around one another."""

from __future__ import annotations

from typing import ClassVar, List, Optional


class PizzaIngredient:
    """An ingredient layered on top of an optional inner ingredient.

    Subclasses set ``step`` (the making step it adds) and ``price``.
    """

    step: ClassVar[str] = ""
    price: ClassVar[int] = 0

    def __init__(self, ingredient: Optional["PizzaIngredient"] = None) -> None:
        self.ingredient = ingredient

    def making_steps(self) -> List[str]:
        """The steps of the inner ingredients followed by this one's."""
        inner = self.ingredient.making_steps() if self.ingredient is not None else []
        return [*inner, self.step]

    def cost(self) -> int:
        """The price of this ingredient plus everything inside it."""
        inner = self.ingredient.cost() if self.ingredient is not None else 0
        return inner + self.price

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ingredient!r})"


class VeggeMania(PizzaIngredient):
    step = "vegge mania"
    price = 15


class CheeseTopping(PizzaIngredient):
    step = "cheese topping"
    price = 10


class TomatoTopping(PizzaIngredient):
    step = "tomato topping"
    price = 7


class PeepyPaneer(PizzaIngredient):
    step = "peepy paneer"
    price = 20


def describe_pizza(pizza: PizzaIngredient) -> str:
    """Numbered making steps followed by the total cost, one per line."""
    lines = [f"step {number}: {step}" for number, step in enumerate(pizza.making_steps(), 1)]
    lines.append(f"total cost: {pizza.cost()}")
    return "\n".join(lines)