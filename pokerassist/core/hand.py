"""
Hand Evaluation for Texas Hold'em.

This module ranks exact 5-card hands and finds the best 5-card hand among
any larger set of cards. Fewer than 5 cards get a partial analysis: the
best made category so far plus any one-card-away draws.

Hand Rankings (best to worst):
10. Royal Flush: A♠ K♠ Q♠ J♠ 10♠
9. Straight Flush: 5 consecutive cards of same suit
8. Four of a Kind: 4 cards of same rank
7. Full House: 3 of a kind + pair
6. Flush: 5 cards of same suit
5. Straight: 5 consecutive cards
4. Three of a Kind: 3 cards of same rank
3. Two Pair: 2 different pairs
2. Pair: 2 cards of same rank
1. High Card: No made hand

Two results compare by rank first, then kickers element-wise.

Note: Ace can be low in A-2-3-4-5 straight (wheel), which is 5-high.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence, Tuple
from itertools import combinations
from enum import IntEnum
from collections import Counter
from dataclasses import dataclass, field

from pokerassist.core.card import Card, value_name
from pokerassist.core.draws import DrawInfo, identify_draws
from pokerassist.core.rules import HAND_SIZE


class HandRank(IntEnum):
    """Hand rankings from best (highest value) to worst (lowest value)."""
    ROYAL_FLUSH = 10
    STRAIGHT_FLUSH = 9
    FOUR_OF_A_KIND = 8
    FULL_HOUSE = 7
    FLUSH = 6
    STRAIGHT = 5
    THREE_OF_A_KIND = 4
    TWO_PAIR = 3
    ONE_PAIR = 2
    HIGH_CARD = 1


# Hand rank names for display
HAND_RANK_NAMES = {
    HandRank.ROYAL_FLUSH: "Royal Flush",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FLUSH: "Flush",
    HandRank.STRAIGHT: "Straight",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.ONE_PAIR: "Pair",
    HandRank.HIGH_CARD: "High Card",
}

NO_CARDS_NAME = "No cards selected"

# Rank of the "nothing to evaluate yet" results
NO_HAND = 0

WHEEL_VALUES = [2, 3, 4, 5, 14]
WHEEL_HIGH = 5
ROYAL_LOW = 10


@dataclass
class HandResult:
    """
    Outcome of evaluating a set of cards.

    Attributes:
        name: Display name, parameterized with ranks ("Pair of Ks")
        rank: 1-10 for a made category, 0 when nothing can be ranked
        kickers: Tie-break values, most significant first
        cards: Winning 5 cards, or all available cards for partial hands
        draws: One-card-away draws (partial hands only)
        is_drawing: True when any draw was found
    """
    name: str
    rank: int
    kickers: List[int] = field(default_factory=list)
    cards: List[Card] = field(default_factory=list)
    draws: List[DrawInfo] = field(default_factory=list)
    is_drawing: bool = False

    @property
    def category(self) -> Optional[HandRank]:
        """The HandRank for this result, None for the rank-0 sentinels."""
        if self.rank == NO_HAND:
            return None
        return HandRank(self.rank)

    @property
    def category_name(self) -> str:
        """Bare category label without the rank details."""
        if self.category is None:
            return self.name
        return HAND_RANK_NAMES[self.category]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "category": self.category_name,
            "rank": self.rank,
            "kickers": list(self.kickers),
            "cards": [card.to_dict() for card in self.cards],
            "draws": [draw.to_dict() for draw in self.draws],
            "is_drawing": self.is_drawing,
        }


def get_all_combinations(cards: Sequence[Card], k: int) -> List[List[Card]]:
    """
    All k-card subsets of ``cards``.

    Subsets keep the input order and come out in lexicographic index order,
    so the first subset always starts with the first card.
    """
    return [list(combo) for combo in combinations(cards, k)]


def evaluate_hand(cards: Sequence[Card], compare_kickers: bool = False) -> HandResult:
    """
    Evaluate the best hand available from ``cards``.

    Args:
        cards: Any number of distinct cards (0-7 in a normal deal)
        compare_kickers: When False (default) the first 5-card subset that
            reaches the best category wins, even if a later subset of the
            same category has better kickers. When True, kickers decide
            between subsets of the same category.

    Returns:
        HandResult. Fewer than 5 cards give a partial analysis with draws;
        no cards give the "No cards selected" sentinel with rank 0.
    """
    if not cards:
        return HandResult(name=NO_CARDS_NAME, rank=NO_HAND)

    if len(cards) < HAND_SIZE:
        return evaluate_drawing_hand(cards)

    best: Optional[HandResult] = None
    for combo in get_all_combinations(cards, HAND_SIZE):
        result = rank_five(combo)
        if best is None or result.rank > best.rank:
            best = result
        elif compare_kickers and compare_results(result, best) > 0:
            best = result

    return best


def rank_five(cards: Sequence[Card]) -> HandResult:
    """
    Rank exactly 5 cards.

    Raises:
        ValueError: If not exactly 5 cards are given.
    """
    if len(cards) != HAND_SIZE:
        raise ValueError(f"Need exactly {HAND_SIZE} cards, got {len(cards)}")

    values = sorted(card.value for card in cards)
    descending = values[::-1]

    is_flush = len({card.suit for card in cards}) == 1
    straight_high = _straight_high(values)

    # Kicker order: most copies first, then highest value
    value_counts = Counter(values)
    counts = sorted(value_counts.values(), reverse=True)
    grouped = sorted(value_counts, key=lambda v: (value_counts[v], v), reverse=True)

    if is_flush and straight_high is not None:
        if values[0] == ROYAL_LOW:
            return _result(HandRank.ROYAL_FLUSH, [], cards)
        return _result(HandRank.STRAIGHT_FLUSH, [straight_high], cards)

    if counts[0] == 4:
        return _result(HandRank.FOUR_OF_A_KIND, grouped[:2], cards)

    if counts[:2] == [3, 2]:
        return _result(HandRank.FULL_HOUSE, grouped[:2], cards)

    if is_flush:
        return _result(HandRank.FLUSH, descending, cards)

    if straight_high is not None:
        return _result(HandRank.STRAIGHT, [straight_high], cards)

    if counts[0] == 3:
        return _result(HandRank.THREE_OF_A_KIND, grouped[:3], cards)

    if counts[:2] == [2, 2]:
        return _result(HandRank.TWO_PAIR, grouped[:3], cards)

    if counts[0] == 2:
        return _result(HandRank.ONE_PAIR, grouped, cards)

    return _result(HandRank.HIGH_CARD, descending, cards)


def _straight_high(values: List[int]) -> Optional[int]:
    """High card of a straight in ascending ``values``, or None."""
    if values == WHEEL_VALUES:
        return WHEEL_HIGH
    for low, high in zip(values, values[1:]):
        if high - low != 1:
            return None
    return values[-1]


def _result(hand_type: HandRank, kickers: List[int], cards: Sequence[Card]) -> HandResult:
    return HandResult(
        name=describe_hand(hand_type, kickers),
        rank=int(hand_type),
        kickers=list(kickers),
        cards=list(cards),
    )


def describe_hand(hand_type: HandRank, kickers: Sequence[int]) -> str:
    """Display name for a ranked hand, e.g. 'Full House (Ks full of 7s)'."""
    base_name = HAND_RANK_NAMES[hand_type]
    names = [value_name(v) for v in kickers]

    if hand_type == HandRank.ROYAL_FLUSH:
        return base_name
    elif hand_type in (HandRank.STRAIGHT_FLUSH, HandRank.STRAIGHT, HandRank.FLUSH):
        return f"{base_name} ({names[0]} high)"
    elif hand_type in (HandRank.FOUR_OF_A_KIND, HandRank.THREE_OF_A_KIND):
        return f"{base_name} ({names[0]}s)"
    elif hand_type == HandRank.FULL_HOUSE:
        return f"{base_name} ({names[0]}s full of {names[1]}s)"
    elif hand_type == HandRank.TWO_PAIR:
        return f"{base_name} ({names[0]}s and {names[1]}s)"
    elif hand_type == HandRank.ONE_PAIR:
        return f"Pair of {names[0]}s"
    else:
        return f"{base_name} ({names[0]})"


def evaluate_drawing_hand(cards: Sequence[Card]) -> HandResult:
    """
    Analyze 1-4 cards: best made category so far plus draws.

    No flush or straight can be made yet, so the category comes from rank
    multiplicities alone. Partial hands carry no kickers.
    """
    draws = identify_draws(cards)
    name, rank = _best_current_hand(cards)
    return HandResult(
        name=name,
        rank=rank,
        cards=list(cards),
        draws=draws,
        is_drawing=len(draws) > 0,
    )


def _best_current_hand(cards: Sequence[Card]) -> Tuple[str, int]:
    """Name and rank of the best category among fewer than 5 cards."""
    if len(cards) < 2:
        # A lone card is not ranked yet
        return f"{cards[0].display} high", NO_HAND

    value_counts = Counter(card.value for card in cards)
    counts = sorted(value_counts.values(), reverse=True)
    top = max(value_counts, key=lambda v: (value_counts[v], v))

    if counts[0] == 4:
        return f"Four of a Kind ({value_name(top)}s)", int(HandRank.FOUR_OF_A_KIND)
    elif counts[:2] == [3, 2]:
        return HAND_RANK_NAMES[HandRank.FULL_HOUSE], int(HandRank.FULL_HOUSE)
    elif counts[0] == 3:
        return f"Three of a Kind ({value_name(top)}s)", int(HandRank.THREE_OF_A_KIND)
    elif counts[:2] == [2, 2]:
        return HAND_RANK_NAMES[HandRank.TWO_PAIR], int(HandRank.TWO_PAIR)
    elif counts[0] == 2:
        return f"Pair of {value_name(top)}s", int(HandRank.ONE_PAIR)

    high_card = max(cards, key=lambda c: c.value)
    return f"{high_card.display} high", int(HandRank.HIGH_CARD)


def compare_results(first: HandResult, second: HandResult) -> int:
    """
    Compare two evaluated hands.

    Returns:
        1 if first is stronger, -1 if second is stronger, 0 if tied
    """
    if first.rank != second.rank:
        return 1 if first.rank > second.rank else -1

    for mine, theirs in zip(first.kickers, second.kickers):
        if mine != theirs:
            return 1 if mine > theirs else -1

    return 0


def compare_hands(cards1: Sequence[Card], cards2: Sequence[Card]) -> int:
    """
    Compare two sets of cards by their best hands.

    Returns:
        1 if cards1 wins, -1 if cards2 wins, 0 if tie
    """
    return compare_results(evaluate_hand(cards1), evaluate_hand(cards2))


def is_improvement(current: HandResult, new: HandResult) -> bool:
    """
    True if ``new`` improves on ``current``.

    A higher category always improves. Within the same category (above
    high card) only the first differing kicker is looked at: higher there
    improves, lower there does not, whatever follows.
    """
    if new.rank > current.rank:
        return True

    if new.rank == current.rank and new.rank > int(HandRank.HIGH_CARD):
        for new_kicker, current_kicker in zip(new.kickers, current.kickers):
            if new_kicker > current_kicker:
                return True
            if new_kicker < current_kicker:
                break

    return False
