
from typing import Iterator, Optional, Tuple
from aws_lambda_powertools.utilities.parser import BaseModel
from pydantic import ConfigDict


class Pizza(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price: int


class PizzaList:
    """Fixed, read-only menu shared by every invocation in the process."""

    def __init__(self) -> None:
        veggie = Pizza(name="veggie", price=10)
        regina = Pizza(name="regina", price=12)
        deluxe = Pizza(name="deluxe", price=14)
        self._pizzas: Tuple[Pizza, ...] = (veggie, regina, deluxe)

    @classmethod
    def new(cls) -> "PizzaList":
        return cls()

    @property
    def pizzas(self) -> Tuple[Pizza, ...]:
        return self._pizzas

    def find(self, pizza_name: str) -> Optional[Pizza]:
        # exact match, no case folding or trimming
        return next((pizza for pizza in self._pizzas if pizza.name == pizza_name), None)

    def __iter__(self) -> Iterator[Pizza]:
        return iter(self._pizzas)

    def __len__(self) -> int:
        return len(self._pizzas)


PIZZA_LIST = PizzaList()
