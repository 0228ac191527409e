"""
PokerAssist Server - FastAPI + WebSocket Server Layer
"""

from pokerassist.server.app import app, create_app

__all__ = ["app", "create_app"]
