"""Backend-side helper for pushing events through the relay.

Delivery is best effort: the order has already been committed by the time we
notify, so a relay that is down or answers with an error is logged and
reported as ``False`` rather than raised.
"""

import logging
from typing import Any

import httpx
from fastapi.encoders import jsonable_encoder

from relay.config import ADMIN_ROOM, RELAY_URL
from relay.models.event_model import (
    OrderStatus,
    order_placed_notification,
    room_for_user,
    status_updated_notification,
)

logger = logging.getLogger(__name__)


class RelayClient:
    def __init__(self, base_url: str = RELAY_URL, timeout: float = 5.0, transport=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def broadcast(self, event: str, data: Any, channel: str) -> bool:
        try:
            body = jsonable_encoder({"event": event, "data": data, "channel": channel})
            async with self._client() as client:
                resp = await client.post("/broadcast", json=body)
                resp.raise_for_status()
        except (httpx.HTTPError, TypeError, ValueError) as e:
            logger.warning(f"⚠️ Relay broadcast of {event} to {channel} failed: {e}")
            return False
        return True

    async def order_placed(self, order: dict) -> bool:
        """Mirror of the socket ``order_placed`` event for server-side orders."""
        delivered = await self.broadcast("new_order", order, ADMIN_ROOM)

        user_id = order.get("userId")
        if user_id is not None:
            delivered &= await self.broadcast(
                "notification",
                order_placed_notification(order),
                room_for_user(user_id),
            )
        return delivered

    async def order_status_updated(self, order_id, status, user_id=None) -> bool:
        """Used when an admin changes an order over REST."""
        update = OrderStatus(orderId=order_id, status=status).model_dump()
        delivered = True

        if user_id is not None:
            room = room_for_user(user_id)
            delivered &= await self.broadcast("order_status_updated", update, room)
            delivered &= await self.broadcast(
                "notification",
                status_updated_notification(order_id, status),
                room,
            )

        delivered &= await self.broadcast("order_status_updated", update, ADMIN_ROOM)
        return delivered
