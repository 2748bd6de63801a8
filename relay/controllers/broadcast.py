import logging

from fastapi import APIRouter

from relay.controllers.socket_instance import sio
from relay.models.event_model import BroadcastRequest, BroadcastResponse

logger = logging.getLogger(__name__)

router = APIRouter()


# Endpoint for the backend to trigger events
@router.post("/broadcast", response_model=BroadcastResponse)
async def broadcast(body: BroadcastRequest):
    await sio.emit(body.event, body.data, room=body.channel)
    logger.info(f"📣 {body.event} broadcasted to {body.channel}")
    return BroadcastResponse()
