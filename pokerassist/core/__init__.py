"""
PokerAssist Core - Pure Python hand evaluation and outs engine

This module contains all evaluation logic without any network dependencies.
"""

from pokerassist.core.card import Card, Deck, Rank, Suit, create_card, parse_cards
from pokerassist.core.draws import DrawInfo, DrawType
from pokerassist.core.hand import (
    HandRank,
    HandResult,
    compare_hands,
    compare_results,
    evaluate_hand,
    get_all_combinations,
    is_improvement,
    rank_five,
)
from pokerassist.core.outs import (
    OutsInfo,
    ProbabilityInfo,
    calculate_outs,
    calculate_win_probability,
    group_outs_by_rank,
)
from pokerassist.core.threats import ThreatsInfo, analyze_potential_threats
from pokerassist.core.analysis import BoardAnalysis, analyze_board

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "create_card",
    "parse_cards",
    "DrawInfo",
    "DrawType",
    "HandRank",
    "HandResult",
    "compare_hands",
    "compare_results",
    "evaluate_hand",
    "get_all_combinations",
    "is_improvement",
    "rank_five",
    "OutsInfo",
    "ProbabilityInfo",
    "calculate_outs",
    "calculate_win_probability",
    "group_outs_by_rank",
    "ThreatsInfo",
    "analyze_potential_threats",
    "BoardAnalysis",
    "analyze_board",
]
