from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from threading import Lock

from app.models.schemas import Order, OrderCreate

logger = logging.getLogger(__name__)


class OrderStore:
    """Thread-safe, process-local order storage (resets on restart)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._orders: dict[str, Order] = {}

    def create(self, payload: OrderCreate) -> Order:
        order = Order(
            id=str(uuid.uuid4()),
            item=payload.item,
            quantity=payload.quantity,
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._orders[order.id] = order
        logger.info("Created order %s", order.id)
        return order

    def get(self, order_id: str) -> Order | None:
        with self._lock:
            return self._orders.get(order_id)

    def list_orders(self) -> list[Order]:
        with self._lock:
            return sorted(self._orders.values(), key=lambda o: o.created_at)

    def clear(self) -> None:
        with self._lock:
            self._orders.clear()


_STORE: OrderStore | None = None


def get_order_store() -> OrderStore:
    global _STORE
    if _STORE is None:
        _STORE = OrderStore()
    return _STORE


def reset_order_store() -> None:
    """Drop all stored orders (used by tests)."""

    get_order_store().clear()
