"""
Outs and rough probability of improving.

Outs are found by brute force: every unseen card is added to the current
cards and the hand re-evaluated. At most 52 candidates, each evaluated
over at most C(8, 5) subsets, so no pruning is needed.

The probability figures follow the table heuristics in ``rules``; they
are rules of thumb, not exact odds.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass, field
import logging
import math

from pokerassist.core.card import Card, Deck
from pokerassist.core.hand import evaluate_hand, is_improvement
from pokerassist.core.rules import (
    DECK_SIZE,
    FLOP_CARDS,
    FLOP_OUT_CORRECTION,
    FLOP_OUT_MULTIPLIER,
    HOLE_CARDS,
    MAX_PROBABILITY,
    TURN_CARDS,
    TURN_OUT_MULTIPLIER,
)


logger = logging.getLogger(__name__)

NEED_CARDS_DESCRIPTION = "Need hole cards and community cards"
NO_OUTS_DESCRIPTION = "No improving cards"
NEED_HOLE_CARDS_DESCRIPTION = "Need exactly 2 hole cards"
NOT_ENOUGH_COMMUNITY_DESCRIPTION = "Not enough community cards"


@dataclass
class OutsInfo:
    """Unseen cards that improve the current best hand."""
    out_cards: List[Card] = field(default_factory=list)
    description: str = NO_OUTS_DESCRIPTION
    # HandRank made by each out card, parallel to out_cards
    made_ranks: List[int] = field(default_factory=list, repr=False)

    @property
    def outs(self) -> int:
        """Number of improving cards."""
        return len(self.out_cards)

    def group_by_rank(self) -> Dict[int, List[Card]]:
        """Out cards keyed by the rank of the hand each one makes."""
        groups: Dict[int, List[Card]] = {}
        for card, rank in zip(self.out_cards, self.made_ranks):
            groups.setdefault(rank, []).append(card)
        return groups

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "outs": self.outs,
            "out_cards": [card.to_dict() for card in self.out_cards],
            "description": self.description,
        }


@dataclass
class ProbabilityInfo:
    """Rough chance, in percent, of improving on the next card(s)."""
    probability: float
    description: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "probability": self.probability,
            "description": self.description,
        }


def calculate_outs(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
) -> OutsInfo:
    """
    Count the unseen cards that would improve the hand.

    Args:
        hole_cards: Exactly 2 cards
        community_cards: 1-5 cards

    Returns:
        OutsInfo with out cards in deck order. Without 2 hole cards and at
        least one community card there are no outs and the description
        says what is missing.
    """
    if len(hole_cards) != HOLE_CARDS or not community_cards:
        return OutsInfo(description=NEED_CARDS_DESCRIPTION)

    all_cards = [*hole_cards, *community_cards]
    current_hand = evaluate_hand(all_cards)

    out_cards = []
    made_ranks = []
    for card in Deck().unseen(all_cards):
        improved_hand = evaluate_hand(all_cards + [card])
        if is_improvement(current_hand, improved_hand):
            out_cards.append(card)
            made_ranks.append(improved_hand.rank)

    logger.debug(f"{len(out_cards)} outs for {current_hand.name}")

    if out_cards:
        description = f"{len(out_cards)} cards improve your hand"
    else:
        description = NO_OUTS_DESCRIPTION

    return OutsInfo(out_cards=out_cards, description=description, made_ranks=made_ranks)


def calculate_win_probability(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
    outs: Optional[OutsInfo] = None,
) -> ProbabilityInfo:
    """
    Rough chance of improving, from the outs count.

    Pass ``outs`` when they are already known for these cards to skip
    counting them again.

    After the flop: ``outs * 4 - (outs - 8)`` percent, capped at 100.
    After the turn: ``outs * 2`` over the unseen cards, as a whole percent.
    Any other street gives 0.
    """
    if len(hole_cards) != HOLE_CARDS:
        return ProbabilityInfo(0, NEED_HOLE_CARDS_DESCRIPTION)

    remaining_cards = DECK_SIZE - len(hole_cards) - len(community_cards)

    if len(community_cards) == FLOP_CARDS:
        count = _count_outs(hole_cards, community_cards, outs)
        percent = count * FLOP_OUT_MULTIPLIER - (count - FLOP_OUT_CORRECTION)
        return ProbabilityInfo(
            probability=float(min(percent, MAX_PROBABILITY)),
            description=f"~{_round_half_up(percent)}% chance to improve",
        )

    if len(community_cards) == FLOP_CARDS + TURN_CARDS:
        count = _count_outs(hole_cards, community_cards, outs)
        percent = _round_half_up(count * TURN_OUT_MULTIPLIER / remaining_cards * 100)
        return ProbabilityInfo(
            probability=float(percent),
            description=f"{percent}% chance on river",
        )

    return ProbabilityInfo(0, NOT_ENOUGH_COMMUNITY_DESCRIPTION)


def _count_outs(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
    outs: Optional[OutsInfo],
) -> int:
    if outs is None:
        outs = calculate_outs(hole_cards, community_cards)
    return outs.outs


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def group_outs_by_rank(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
    out_cards: Sequence[Card],
) -> Dict[int, List[Card]]:
    """
    Group out cards by the rank of the hand each one makes.

    Keys are HandRank values in the order they are first produced.
    """
    current_cards = [*hole_cards, *community_cards]
    groups: Dict[int, List[Card]] = {}

    for card in out_cards:
        result = evaluate_hand(current_cards + [card])
        groups.setdefault(result.rank, []).append(card)

    return groups
