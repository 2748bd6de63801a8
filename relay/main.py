# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from relay.config import CORS_ORIGINS
from relay.controllers.socket_instance import sio
from relay.controllers import socket_manager  # triggers event binding
from relay.controllers import broadcast

import socketio

# Initialize FastAPI app
app = FastAPI()

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Routers
app.include_router(broadcast.router)


@app.get("/ping")
async def ping():
    return {"message": "pong"}

# Wrap FastAPI with SocketIO
socket_app = socketio.ASGIApp(sio, other_asgi_app=app)
