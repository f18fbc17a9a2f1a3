"""Template Method pattern.

``Beverage.prepare_recipe`` fixes the order of the steps; subclasses only
supply ``brew`` and ``add_condiments`` and may override the condiments hook.
"""

from abc import ABC, abstractmethod
from typing import List


class Beverage(ABC):
    """Caffeinated beverage with a fixed preparation sequence."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "prepare_recipe" in cls.__dict__:
            raise TypeError(f"{cls.__name__} must not override prepare_recipe")

    def prepare_recipe(self) -> List[str]:
        """
        Run the preparation steps in order.

        Returns:
            The lines printed by each step, in order
        """
        steps = [self.boil_water, self.brew, self.pour_in_cup]
        if self.customer_wants_condiments():
            steps.append(self.add_condiments)
        return [self._announce(step()) for step in steps]

    def boil_water(self) -> str:
        return "Boiling water"

    def pour_in_cup(self) -> str:
        return "Pouring into cup"

    @abstractmethod
    def brew(self) -> str:
        pass

    @abstractmethod
    def add_condiments(self) -> str:
        pass

    def customer_wants_condiments(self) -> bool:
        """Hook; subclasses may override."""
        return True

    @staticmethod
    def _announce(line: str) -> str:
        print(line)
        return line


class Tea(Beverage):

    def brew(self) -> str:
        return "Steeping the tea"

    def add_condiments(self) -> str:
        return "Adding lemon"


class Coffee(Beverage):

    def __init__(self, with_condiments: bool = True):
        self.with_condiments = with_condiments

    def brew(self) -> str:
        return "Dripping coffee through filter"

    def add_condiments(self) -> str:
        return "Adding sugar and milk"

    def customer_wants_condiments(self) -> bool:
        return self.with_condiments


def demo() -> None:
    """Prepare tea, then coffee."""
    print("Making tea...")
    Tea().prepare_recipe()
    print("Making coffee...")
    Coffee().prepare_recipe()
