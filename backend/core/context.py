from typing import Any, Callable, Dict, List, Optional
from core.chain import Accepted
from core.store import RecordStore
from models.dish import Dish
from models.order import Order, OrderStatus
from services.dishes import DishManager, validate_dish
from services.orders import OrderManager, validate_order_for_update
from utils.ids import next_id as default_next_id
from utils.seed import load_seed
import logging

logger = logging.getLogger(__name__)

def _seed_id(raw: Dict[str, Any], next_id: Callable[[], str]) -> str:
    return str(raw["id"]) if raw.get("id") else next_id()

class AppContext:
    """Process-wide stores and the managers working on them"""

    def __init__(self, next_id: Callable[[], str] = default_next_id):
        self.next_id = next_id
        self.dish_store: RecordStore[Dish] = RecordStore("dish")
        self.order_store: RecordStore[Order] = RecordStore("order")
        self.dishes = DishManager(self.dish_store, next_id)
        self.orders = OrderManager(self.order_store, next_id)

    def seed(self, dishes: List[Dict[str, Any]], orders: List[Dict[str, Any]]):
        """Pre-populate stores; records go through the same checks as requests"""
        for raw in dishes:
            result = validate_dish(raw)
            if not isinstance(result, Accepted):
                raise ValueError(f"Invalid seed dish {raw.get('id')}: {result.message}")
            self.dish_store.append(Dish(id=_seed_id(raw, self.next_id), **result.value.model_dump()))
        for raw in orders:
            result = validate_order_for_update({**raw, "status": raw.get("status", OrderStatus.PENDING.value)})
            if not isinstance(result, Accepted):
                raise ValueError(f"Invalid seed order {raw.get('id')}: {result.message}")
            self.order_store.append(Order(id=_seed_id(raw, self.next_id), **result.value.model_dump()))

_context: Optional[AppContext] = None

def init_context(settings, next_id: Callable[[], str] = default_next_id) -> AppContext:
    global _context
    context = AppContext(next_id=next_id)
    if settings.seed_file:
        seed = load_seed(settings.seed_file)
        context.seed(seed["dishes"], seed["orders"])
    _context = context
    logger.info("Stores ready: %d dishes, %d orders", len(context.dish_store), len(context.order_store))
    return context

def get_context() -> AppContext:
    """FastAPI dependency"""
    if _context is None:
        raise RuntimeError("init_context() has not been called")
    return _context
