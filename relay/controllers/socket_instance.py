# socket_instance.py
import socketio

from relay.config import CORS_ORIGINS

sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins=CORS_ORIGINS,
    logger=False,
    engineio_logger=False,
)
