"""
HTTP API Routes for PokerAssist.

Each route is a one-shot evaluation of the cards in the request.
Live, slot-by-slot analysis is handled via WebSocket.
"""

from typing import Any, Dict
from fastapi import APIRouter

from pokerassist import __version__
from pokerassist.core.analysis import analyze_board
from pokerassist.core.card import Deck
from pokerassist.core.hand import evaluate_hand
from pokerassist.core.outs import calculate_outs, calculate_win_probability
from pokerassist.core.threats import analyze_potential_threats
from pokerassist.server.schemas import BoardRequest, EvaluateRequest, ThreatsRequest

router = APIRouter()


@router.get("/")
async def index() -> Dict[str, Any]:
    """Service name and version."""
    return {"name": "PokerAssist", "version": __version__}


@router.get("/deck")
async def get_deck() -> Dict[str, Any]:
    """All 52 cards in deck order."""
    return {"cards": [card.to_dict() for card in Deck()]}


@router.post("/deck/available")
async def get_available_cards(req: BoardRequest) -> Dict[str, Any]:
    """
    Cards that are not yet in play.

    A card picker disables everything else.
    """
    hole, community = req.to_cards()
    available = Deck().unseen(hole + community)
    return {"cards": [card.to_dict() for card in available]}


@router.post("/evaluate")
async def evaluate(req: EvaluateRequest) -> Dict[str, Any]:
    """
    Evaluate the best hand among 0-7 cards.

    Fewer than 5 cards return a partial hand with draws.
    """
    result = evaluate_hand(req.to_cards(), compare_kickers=req.compare_kickers)
    return result.to_dict()


@router.post("/outs")
async def outs(req: BoardRequest) -> Dict[str, Any]:
    """
    Count the unseen cards that improve the hand.

    Out cards are also grouped by the rank of the hand they make.
    """
    hole, community = req.to_cards()
    outs_info = calculate_outs(hole, community)
    by_rank = outs_info.group_by_rank()

    response = outs_info.to_dict()
    response["by_rank"] = {
        str(rank): [card.to_dict() for card in cards]
        for rank, cards in by_rank.items()
    }
    return response


@router.post("/probability")
async def probability(req: BoardRequest) -> Dict[str, Any]:
    """Rough chance of improving after the flop or the turn."""
    hole, community = req.to_cards()
    return calculate_win_probability(hole, community).to_dict()


@router.post("/threats")
async def threats(req: ThreatsRequest) -> Dict[str, Any]:
    """Strong hands the community cards make possible."""
    return analyze_potential_threats(req.to_cards()).to_dict()


@router.post("/analyze")
async def analyze(req: BoardRequest) -> Dict[str, Any]:
    """Hand, outs, probability and threats in one call."""
    hole, community = req.to_cards()
    return analyze_board(hole, community).to_dict()
