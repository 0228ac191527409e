"""
Board analysis: everything a front end shows for one selection of cards.

Recomputed from scratch on every change; nothing is kept between calls.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass, field

from pokerassist.core.card import Card
from pokerassist.core.hand import HandResult, evaluate_hand
from pokerassist.core.outs import (
    OutsInfo,
    ProbabilityInfo,
    calculate_outs,
    calculate_win_probability,
)
from pokerassist.core.rules import HOLE_CARDS, THREAT_MIN_COMMUNITY
from pokerassist.core.threats import ThreatsInfo, analyze_potential_threats


@dataclass
class BoardAnalysis:
    """
    Analysis of hole + community cards.

    Parts that need more cards than were given are None.
    """
    hand: Optional[HandResult] = None
    outs: Optional[OutsInfo] = None
    probability: Optional[ProbabilityInfo] = None
    threats: Optional[ThreatsInfo] = None
    outs_by_rank: Dict[int, List[Card]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "hand": self.hand.to_dict() if self.hand else None,
            "outs": self.outs.to_dict() if self.outs else None,
            "probability": self.probability.to_dict() if self.probability else None,
            "threats": self.threats.to_dict() if self.threats else None,
            "outs_by_rank": {
                str(rank): [card.to_dict() for card in cards]
                for rank, cards in self.outs_by_rank.items()
            },
        }


def analyze_board(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
) -> BoardAnalysis:
    """
    Evaluate the hand, outs, probability and threats for a board.

    - hand: whenever at least one hole card is selected
    - outs, grouped outs, probability: 2 hole cards and 1+ community cards
    - threats: 3+ community cards
    """
    analysis = BoardAnalysis()

    if hole_cards:
        analysis.hand = evaluate_hand([*hole_cards, *community_cards])

    if len(hole_cards) == HOLE_CARDS and community_cards:
        analysis.outs = calculate_outs(hole_cards, community_cards)
        analysis.outs_by_rank = analysis.outs.group_by_rank()
        analysis.probability = calculate_win_probability(
            hole_cards, community_cards, analysis.outs
        )

    if len(community_cards) >= THREAT_MIN_COMMUNITY:
        analysis.threats = analyze_potential_threats(community_cards)

    return analysis
