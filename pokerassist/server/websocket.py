"""
WebSocket handling for live board analysis.

This module provides:
- AnalysisSession: The card slots one client has filled in
- SessionManager: Manages sessions and applies slot changes
- WebSocket endpoint: Re-analyzes the board after every change
"""

from __future__ import annotations
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field
import json
import logging

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from pokerassist.core.analysis import analyze_board
from pokerassist.core.card import Card
from pokerassist.server.schemas import (
    CARD_SLOTS, COMMUNITY_SLOTS, HOLE_SLOTS,
    WSClearCardMessage, WSSetCardMessage,
)


logger = logging.getLogger(__name__)


def _empty_slots() -> Dict[str, Optional[Card]]:
    return {slot: None for slot in CARD_SLOTS}


@dataclass
class AnalysisSession:
    """One client's card selection, keyed by slot."""
    session_id: str
    slots: Dict[str, Optional[Card]] = field(default_factory=_empty_slots)

    @property
    def hole_cards(self) -> List[Card]:
        return [self.slots[s] for s in HOLE_SLOTS if self.slots[s] is not None]

    @property
    def community_cards(self) -> List[Card]:
        return [self.slots[s] for s in COMMUNITY_SLOTS if self.slots[s] is not None]

    def set_card(self, slot: str, card: Card) -> None:
        """
        Put a card in a slot, replacing whatever was there.

        Raises:
            ValueError: If the card already sits in another slot.
        """
        for other_slot, other_card in self.slots.items():
            if other_slot != slot and other_card == card:
                raise ValueError(f"{card.display} is already in {other_slot}")
        self.slots[slot] = card

    def clear_card(self, slot: str) -> None:
        self.slots[slot] = None

    def clear_all(self) -> None:
        self.slots = _empty_slots()

    def get_state(self) -> Dict[str, Any]:
        """Slots plus a fresh analysis of them."""
        analysis = analyze_board(self.hole_cards, self.community_cards)
        return {
            "type": "analysis",
            "session_id": self.session_id,
            "slots": {
                slot: card.to_dict() if card else None
                for slot, card in self.slots.items()
            },
            **analysis.to_dict(),
        }


class SessionManager:
    """
    Manages live analysis sessions.

    Usage:
        manager = SessionManager()
        session_id = manager.create_session()
        response = manager.handle_message(session_id, message)
        manager.close_session(session_id)
    """

    def __init__(self):
        self.sessions: Dict[str, AnalysisSession] = {}
        self._session_counter = 0

    def create_session(self) -> str:
        """Create a session with all slots empty."""
        self._session_counter += 1
        session_id = f"session-{self._session_counter}"
        self.sessions[session_id] = AnalysisSession(session_id=session_id)
        logger.info(f"Created {session_id}")
        return session_id

    def get_session(self, session_id: str) -> Optional[AnalysisSession]:
        """Get a session by ID."""
        return self.sessions.get(session_id)

    def close_session(self, session_id: str) -> None:
        """Forget a session."""
        if self.sessions.pop(session_id, None) is not None:
            logger.info(f"Closed {session_id}")

    def handle_message(self, session_id: str, message: Any) -> Dict[str, Any]:
        """
        Apply a message to a session.

        Args:
            session_id: The session ID
            message: The message dict with 'type' and optional data

        Returns:
            The new analysis, or an error message leaving the session as it was
        """
        session = self.get_session(session_id)
        if session is None:
            return _error("Session not found")

        if not isinstance(message, dict):
            return _error("Message must be a JSON object")

        msg_type = message.get("type", "")

        try:
            if msg_type == "set_card":
                msg = WSSetCardMessage.model_validate(message)
                session.set_card(msg.slot, msg.to_card())
            elif msg_type == "clear_card":
                msg = WSClearCardMessage.model_validate(message)
                session.clear_card(msg.slot)
            elif msg_type == "clear_all":
                session.clear_all()
            elif msg_type != "get_analysis":
                return _error(f"Unknown message type: {msg_type}")
        except ValidationError as e:
            return _error(e.errors()[0]["msg"])
        except ValueError as e:
            return _error(str(e))

        return session.get_state()


def _error(message: str) -> Dict[str, Any]:
    return {"type": "error", "message": message}


# Global session manager instance
session_manager = SessionManager()


async def websocket_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for live analysis.

    Protocol:
    1. Client connects; server sends the (empty) analysis
    2. Client sends {"type": "set_card", "slot": "hole1", "card": "As"},
       {"type": "clear_card", "slot": "turn"}, {"type": "clear_all"} or
       {"type": "get_analysis"}
    3. Server answers each with the new analysis or an error
    4. Frames that are not a JSON object get an error; the socket stays open
    """
    await websocket.accept()
    session_id = session_manager.create_session()

    try:
        await websocket.send_json(session_manager.get_session(session_id).get_state())

        while True:
            try:
                message = json.loads(await websocket.receive_text())
            except json.JSONDecodeError:
                await websocket.send_json(_error("Invalid JSON"))
                continue

            response = session_manager.handle_message(session_id, message)
            await websocket.send_json(response)

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected: {session_id}")
    except Exception as e:
        logger.error(f"WebSocket error: {e}")
    finally:
        session_manager.close_session(session_id)
