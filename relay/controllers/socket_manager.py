# socket_manager.py
import logging

from relay.config import ADMIN_ROOM
from relay.controllers.socket_instance import sio
from relay.models.event_model import (
    OrderStatus,
    order_placed_notification,
    room_for_user,
    status_updated_notification,
)

logger = logging.getLogger(__name__)


@sio.event
async def connect(sid, environ, auth=None):
    logger.info(f"🔌 Client connected: {sid}")


@sio.event
async def disconnect(sid, reason=None):
    # Rooms are cleaned up by the socket manager
    logger.info(f"❌ Client disconnected: {sid}")


@sio.event
async def join_user_room(sid, user_id=None):
    if user_id is None:
        logger.warning(f"⚠️ join_user_room from {sid} ignored, no user id")
        return

    room = room_for_user(user_id)
    await sio.enter_room(sid, room)
    logger.info(f"✅ Client {sid} joined room {room}")
    return {"room": room}


@sio.event
async def join_admin_room(sid, *args):
    await sio.enter_room(sid, ADMIN_ROOM)
    logger.info(f"✅ Client {sid} joined room {ADMIN_ROOM}")
    return {"room": ADMIN_ROOM}


@sio.on("join-channel")
async def join_channel(sid, channel=None):
    if channel is None:
        logger.warning(f"⚠️ join-channel from {sid} ignored, no channel")
        return

    room = str(channel)
    await sio.enter_room(sid, room)
    logger.info(f"✅ Client {sid} joined channel: {room}")
    return {"room": room}


@sio.event
async def order_placed(sid, order_data):
    if not isinstance(order_data, dict):
        logger.warning(f"⚠️ order_placed from {sid} ignored, payload is not an object")
        return

    await sio.emit("new_order", order_data, room=ADMIN_ROOM)

    user_id = order_data.get("userId")
    if user_id is not None:
        await sio.emit(
            "notification",
            order_placed_notification(order_data),
            room=room_for_user(user_id),
        )


@sio.event
async def update_order_status(sid, data):
    if not isinstance(data, dict):
        logger.warning(f"⚠️ update_order_status from {sid} ignored, payload is not an object")
        return

    order_id = data.get("orderId")
    status = data.get("status")
    update = OrderStatus(orderId=order_id, status=status).model_dump()

    user_id = data.get("userId")
    if user_id is not None:
        room = room_for_user(user_id)
        await sio.emit("order_status_updated", update, room=room)
        await sio.emit(
            "notification",
            status_updated_notification(order_id, status),
            room=room,
        )

    await sio.emit("order_status_updated", update, room=ADMIN_ROOM)
