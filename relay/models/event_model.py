from pydantic import BaseModel
from typing import Any, Optional


class BroadcastRequest(BaseModel):
    event: str
    data: Any = None
    channel: str


class BroadcastResponse(BaseModel):
    status: str = "Event broadcasted"


class OrderStatus(BaseModel):
    orderId: Any
    status: Any


class NotificationPayload(BaseModel):
    message: str
    order: Optional[Any] = None


def room_for_user(user_id) -> str:
    return f"user_{user_id}"


def order_id_of(order_data: dict):
    # Frontend payloads carry either `orderId` or the model's `id`
    order_id = order_data.get("orderId")
    if order_id is None:
        order_id = order_data.get("id")
    return order_id


def order_placed_notification(order_data: dict) -> dict:
    payload = NotificationPayload(
        message=f"Order #{order_id_of(order_data)} placed successfully",
        order=order_data,
    )
    return payload.model_dump()


def status_updated_notification(order_id, status) -> dict:
    payload = NotificationPayload(
        message=f"Order #{order_id} status updated to {status}",
        order=OrderStatus(orderId=order_id, status=status).model_dump(),
    )
    return payload.model_dump()
