from typing import Any, Callable, Dict, List, Optional
from core.chain import (
    Accepted, Rejected, RequestState, Result,
    body_id_matches, first_failure, is_positive_number, is_text, record_exists, run_chain,
)
from core.store import RecordStore
from models.order import Order, OrderStatus
from models.schemas import OrderInput
import logging

logger = logging.getLogger(__name__)

def find_invalid_line_item(dishes: List[Any]) -> Optional[int]:
    """Index of the first line item without a positive integer quantity, else None"""
    for index, item in enumerate(dishes):
        if not isinstance(item, dict) or not is_positive_number(item.get("quantity"), integer=True):
            return index
    return None

def _check_line_items(data: Dict[str, Any]) -> Optional[Rejected]:
    dishes = data.get("dishes")
    if not isinstance(dishes, list) or len(dishes) == 0:
        return Rejected(400, "Order must include at least one dish")
    index = find_invalid_line_item(dishes)
    if index is not None:
        return Rejected(400, f"Dish {index} must have a quantity that is an integer greater than 0")
    return None

def validate_order(data: Dict[str, Any], require_status: bool = False) -> Result:
    """deliverTo, mobileNumber, dishes, each line item, then (on update) status"""
    failure = first_failure([
        (lambda: is_text(data.get("deliverTo")), "Order must include a deliverTo"),
        (lambda: is_text(data.get("mobileNumber")), "Order must include a mobileNumber"),
    ]) or _check_line_items(data)
    if failure is None and require_status and not OrderStatus.has_value(data.get("status")):
        failure = Rejected(400, "Order must include a valid status")
    if failure:
        return failure
    return Accepted(OrderInput(
        deliverTo=data["deliverTo"],
        mobileNumber=data["mobileNumber"],
        status=data["status"] if require_status else None,
        dishes=data["dishes"],
    ))

def validate_order_for_create(data: Dict[str, Any]) -> Result:
    return validate_order(data)

def validate_order_for_update(data: Dict[str, Any]) -> Result:
    return validate_order(data, require_status=True)

class OrderManager:
    def __init__(self, store: RecordStore[Order], next_id: Callable[[], str]):
        self.store = store
        self.next_id = next_id
        self.exists = record_exists(store, "orderId", "Order", "order")
        self.id_matches = body_id_matches("orderId", "Order")

    def validate_for_create(self, state: RequestState) -> Result:
        result = validate_order_for_create(state.data)
        if isinstance(result, Accepted):
            state.locals["order_data"] = result.value
        return result

    def validate_for_update(self, state: RequestState) -> Result:
        result = validate_order_for_update(state.data)
        if isinstance(result, Accepted):
            state.locals["order_data"] = result.value
        return result

    def _create(self, state: RequestState) -> Result:
        payload = state.locals["order_data"]
        order = Order(
            id=self.next_id(),
            deliverTo=payload.deliverTo,
            mobileNumber=payload.mobileNumber,
            status=OrderStatus.PENDING,
            dishes=payload.dishes,
        )
        self.store.append(order)
        logger.info("Created order %s for %s", order.id, order.deliverTo)
        return Accepted(order)

    def _read(self, state: RequestState) -> Result:
        return Accepted(state.locals["order"])

    def _update(self, state: RequestState) -> Result:
        order = state.locals["order"]
        payload = state.locals["order_data"]
        updated = self.store.update(order.id, {
            "deliverTo": payload.deliverTo,
            "mobileNumber": payload.mobileNumber,
            "status": payload.status,
            "dishes": payload.dishes,
        })
        if updated is None:
            return Rejected(404, f"Order id not found: {order.id}")
        logger.info("Updated order %s (status %s)", order.id, updated.status)
        return Accepted(updated)

    def _destroy(self, state: RequestState) -> Result:
        order_id = state.locals["order"].id
        with self.store.lock:
            current = self.store.find(order_id)
            if current is None:
                return Rejected(404, f"Order id not found: {order_id}")
            if current.status != OrderStatus.PENDING:
                return Rejected(400, "An order cannot be deleted unless it is pending")
            self.store.remove(order_id)
        logger.info("Deleted order %s", order_id)
        return Accepted()

    def list(self) -> List[Order]:
        return self.store.list()

    def create(self, state: RequestState) -> Result:
        return run_chain(state, self.validate_for_create, self._create)

    def read(self, state: RequestState) -> Result:
        return run_chain(state, self.exists, self._read)

    def update(self, state: RequestState) -> Result:
        return run_chain(state, self.exists, self.id_matches, self.validate_for_update, self._update)

    def delete(self, state: RequestState) -> Result:
        return run_chain(state, self.exists, self._destroy)
