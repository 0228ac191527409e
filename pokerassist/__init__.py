"""
PokerAssist - Texas Hold'em Hand Evaluation and Outs Engine

A standalone Texas Hold'em decision-assistance project with:
- Pure Python evaluation core (no external poker dependencies)
- Outs counting, rough improvement odds and board threat analysis
- FastAPI + WebSocket server for a card-picker front end

Usage:
    from pokerassist.core import Card, evaluate_hand, calculate_outs
    from pokerassist.server import create_app
"""

__version__ = "0.1.0"

from pokerassist.core.card import Card, Deck, create_card
from pokerassist.core.hand import HandRank, HandResult, evaluate_hand
from pokerassist.core.outs import calculate_outs, calculate_win_probability
from pokerassist.core.threats import analyze_potential_threats
from pokerassist.core.analysis import analyze_board

__all__ = [
    "Card",
    "Deck",
    "create_card",
    "HandRank",
    "HandResult",
    "evaluate_hand",
    "calculate_outs",
    "calculate_win_probability",
    "analyze_potential_threats",
    "analyze_board",
    "__version__",
]
