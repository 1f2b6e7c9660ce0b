from typing import Any, Callable, Dict, List
from core.chain import (
    Accepted, Rejected, RequestState, Result,
    body_id_matches, first_failure, is_positive_number, is_text, record_exists, run_chain,
)
from core.store import RecordStore
from models.dish import Dish
from models.schemas import DishInput
import logging

logger = logging.getLogger(__name__)

def validate_dish(data: Dict[str, Any]) -> Result:
    """Name, description, image_url, then price; first failure wins"""
    failure = first_failure([
        (lambda: is_text(data.get("name")), "Dish must include a name"),
        (lambda: is_text(data.get("description")), "Dish must include a description"),
        (lambda: is_text(data.get("image_url")), "Dish must include an image_url"),
        (lambda: is_positive_number(data.get("price")), "Dish must have a price that is a positive number"),
    ])
    if failure:
        return failure
    return Accepted(DishInput(
        name=data["name"],
        description=data["description"],
        image_url=data["image_url"],
        price=data["price"],
    ))

class DishManager:
    def __init__(self, store: RecordStore[Dish], next_id: Callable[[], str]):
        self.store = store
        self.next_id = next_id
        self.exists = record_exists(store, "dishId", "Dish", "dish")
        self.id_matches = body_id_matches("dishId", "Dish")

    def validate(self, state: RequestState) -> Result:
        result = validate_dish(state.data)
        if isinstance(result, Accepted):
            state.locals["dish_data"] = result.value
        return result

    def _create(self, state: RequestState) -> Result:
        dish = Dish(id=self.next_id(), **state.locals["dish_data"].model_dump())
        self.store.append(dish)
        logger.info("Created dish %s (%s)", dish.id, dish.name)
        return Accepted(dish)

    def _read(self, state: RequestState) -> Result:
        return Accepted(state.locals["dish"])

    def _update(self, state: RequestState) -> Result:
        dish = state.locals["dish"]
        updated = self.store.update(dish.id, state.locals["dish_data"].model_dump())
        if updated is None:
            return Rejected(404, f"Dish id not found: {dish.id}")
        logger.info("Updated dish %s", dish.id)
        return Accepted(updated)

    def list(self) -> List[Dish]:
        return self.store.list()

    def create(self, state: RequestState) -> Result:
        return run_chain(state, self.validate, self._create)

    def read(self, state: RequestState) -> Result:
        return run_chain(state, self.exists, self._read)

    def update(self, state: RequestState) -> Result:
        return run_chain(state, self.exists, self.id_matches, self.validate, self._update)
