import os
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8001))

# Frontend origins allowed for both the HTTP routes and the socket handshake
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

ADMIN_ROOM = os.getenv("ADMIN_ROOM", "admin_room")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Where the backend reaches the relay
RELAY_URL = os.getenv("RELAY_URL", f"http://localhost:{PORT}")
