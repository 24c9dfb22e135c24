"""
Order service logic
"""
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

import structlog

from order_api.core.exceptions import NotFoundError, StorageError, ValidationError
from order_api.schemas.order import Order
from order_api.services.id_generator import make_order_id
from order_api.services.order_validator import validate_order_payload
from order_api.store.document_store import DocumentStore

logger = structlog.get_logger()


def utc_timestamp() -> str:
    """Current UTC time as ``2024-01-31T09:15:02.123Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class OrderService:
    def __init__(
        self,
        store: DocumentStore,
        id_factory: Callable[[], str] = make_order_id,
        max_id_attempts: int = 5,
    ):
        self.store = store
        self.id_factory = id_factory
        self.max_id_attempts = max_id_attempts

    def create_order(self, payload: Any) -> Dict[str, Any]:
        """Validate a payload and store it as a new order at the front of the list."""
        fields = validate_order_payload(payload)

        with self.store.transaction() as orders:
            order = Order(
                orderId=self._unique_order_id(orders),
                createdAt=utc_timestamp(),
                status="new",
                **fields,
            ).model_dump()
            orders.insert(0, order)

        logger.info("Order saved", order_id=order["orderId"], total=order["total"])
        return order

    def get_all_orders(self) -> List[Dict[str, Any]]:
        """All orders, newest first"""
        return self.store.load()

    def update_order_status(self, order_id: str, status: Any) -> Dict[str, Any]:
        """Change only the status of one order."""
        new_status = str(status).strip() if status else ""
        if not new_status:
            raise ValidationError("Missing status")

        with self.store.transaction() as orders:
            order = next((o for o in orders if o.get("orderId") == order_id), None)
            if order is None:
                raise NotFoundError()
            order["status"] = new_status

        logger.info("Order status updated", order_id=order_id, status=new_status)
        return order

    def delete_order(self, order_id: str) -> int:
        with self.store.transaction() as orders:
            remaining = [o for o in orders if o.get("orderId") != order_id]
            if len(remaining) == len(orders):
                raise NotFoundError()
            orders[:] = remaining

        logger.info("Order deleted", order_id=order_id)
        return 1

    def bulk_delete(self, order_ids: Any) -> int:
        """Remove every order whose id is listed; unknown ids are ignored."""
        if not isinstance(order_ids, list) or not order_ids:
            raise ValidationError("orderIds required")
        targets = {str(order_id) for order_id in order_ids}

        with self.store.transaction() as orders:
            before = len(orders)
            orders[:] = [o for o in orders if str(o.get("orderId")) not in targets]
            deleted = before - len(orders)

        logger.info("Bulk delete finished", requested=len(targets), deleted=deleted)
        return deleted

    def _unique_order_id(self, orders: List[Dict[str, Any]]) -> str:
        existing = {o.get("orderId") for o in orders}
        for _ in range(self.max_id_attempts):
            candidate = self.id_factory()
            if candidate not in existing:
                return candidate
            logger.warning("Order id collision, regenerating", order_id=candidate)
        raise StorageError(f"Could not generate a unique order id after {self.max_id_attempts} attempts")
