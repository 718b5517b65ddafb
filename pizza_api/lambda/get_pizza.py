
import json
import os
from typing import Any, Dict, Optional
from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from pizzas import PIZZA_LIST, PizzaList

logger = Logger(service=os.environ.get("POWERTOOLS_SERVICE_NAME", "pizza-api"))

JSON_HEADERS = {"content-type": "application/json"}


class PizzaLookupError(Exception):
    """Lookup failure reported to the caller as a 400."""

    message = "pizza lookup failed"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class MissingPizzaName(PizzaLookupError):
    message = "could not find the pizza_name"


class PizzaNotFound(PizzaLookupError):
    message = "no pizza found for the given pizza_name"


def build_response(payload: Dict[str, Any], status_code: int = 200) -> Dict[str, Any]:
    return {
        'statusCode': status_code,
        'headers': dict(JSON_HEADERS),
        'body': json.dumps(payload, separators=(",", ":")),
    }


def build_error(error_message: str) -> Dict[str, Any]:
    return build_response({"error": error_message}, status_code=400)


def get_pizza_name(event: Dict[str, Any]) -> str:
    # API Gateway sends null when the route carries no path parameters
    path_parameters = event.get('pathParameters') or {}
    pizza_name = path_parameters.get('pizza_name')
    if isinstance(pizza_name, (list, tuple)):
        pizza_name = pizza_name[0] if pizza_name else None
    if pizza_name is None:
        raise MissingPizzaName()
    return pizza_name


def process_event(event: Dict[str, Any], pizza_list: PizzaList) -> Dict[str, Any]:
    try:
        pizza_name = get_pizza_name(event)
        logger.info("looking up pizza", extra={"pizza_name": pizza_name})
        pizza = pizza_list.find(pizza_name)
        if pizza is None:
            raise PizzaNotFound()
    except PizzaLookupError as err:
        logger.warning(err.message)
        return build_error(err.message)

    logger.info("pizza found", extra={"pizza_name": pizza.name, "price": pizza.price})
    return build_response(pizza.model_dump())


@logger.inject_lambda_context
def lambda_handler(event, context: LambdaContext):
    return process_event(event, PIZZA_LIST)
