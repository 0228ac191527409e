"""
Threats visible from the community cards alone.

These are hands any opponent could hold given the board, independent of
the player's own hole cards.
"""

from __future__ import annotations
from typing import Any, Dict, List, Sequence
from dataclasses import dataclass, field
from collections import Counter

from pokerassist.core.card import Card, Rank, SUIT_SYMBOLS
from pokerassist.core.rules import THREAT_FLUSH_SUITED, THREAT_MIN_COMMUNITY


NEED_FLOP_DESCRIPTION = "Need at least the flop to analyze threats"
NO_THREATS_DESCRIPTION = "No major threats visible"

POSSIBLE_STRAIGHT = "Possible Straight"
POSSIBLE_FULL_HOUSE = "Possible Full House or Quads"
POSSIBLE_TWO_PAIR = "Possible Two Pair or Trips"

WHEEL_START = (Rank.TWO, Rank.THREE, Rank.ACE)


@dataclass
class ThreatsInfo:
    """Threat labels for a board."""
    threats: List[str] = field(default_factory=list)
    description: str = NO_THREATS_DESCRIPTION

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "threats": list(self.threats),
            "description": self.description,
        }


def analyze_potential_threats(community_cards: Sequence[Card]) -> ThreatsInfo:
    """
    List the strong hands the board makes possible.

    Reports, in order: a possible flush per suit with 3+ cards, a possible
    straight, then either a paired board (full house or quads) or, on any
    unpaired board, two pair or trips.
    """
    if len(community_cards) < THREAT_MIN_COMMUNITY:
        return ThreatsInfo(description=NEED_FLOP_DESCRIPTION)

    threats = []

    suit_counts = Counter(card.suit for card in community_cards)
    for suit, count in suit_counts.items():
        if count >= THREAT_FLUSH_SUITED:
            threats.append(f"Possible Flush ({SUIT_SYMBOLS[suit]})")

    if has_straight_possibility([card.value for card in community_cards]):
        threats.append(POSSIBLE_STRAIGHT)

    # Unpaired boards always land in the second branch
    rank_counts = Counter(card.rank for card in community_cards)
    if max(rank_counts.values()) >= 2:
        threats.append(POSSIBLE_FULL_HOUSE)
    elif len(community_cards) >= THREAT_MIN_COMMUNITY:
        threats.append(POSSIBLE_TWO_PAIR)

    if threats:
        description = f"CAUTION: {', '.join(threats)}"
    else:
        description = NO_THREATS_DESCRIPTION

    return ThreatsInfo(threats=threats, description=description)


def has_straight_possibility(values: Sequence[int]) -> bool:
    """Three consecutive distinct values, or A-2-3 toward the wheel."""
    unique_values = sorted(set(values))

    for a, b, c in zip(unique_values, unique_values[1:], unique_values[2:]):
        if b - a == 1 and c - b == 1:
            return True

    return all(rank in unique_values for rank in WHEEL_START)
