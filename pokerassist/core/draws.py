"""
Draw detection for partial hands (fewer than 5 cards).

Only draws that are one card away are reported: four cards of a suit, or
four values that a single missing rank turns into a run. At most one flush
draw and one straight draw are returned; the first one found wins.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass, field
from collections import Counter
from itertools import combinations
from enum import Enum

from pokerassist.core.card import Card, Rank, Suit, SUIT_NAMES, SUIT_SYMBOLS, value_name
from pokerassist.core.rules import DRAW_CARDS_NEEDED, FLUSH_DRAW_SUITED, STRAIGHT_DRAW_RUN


class DrawType(Enum):
    """Kinds of one-card-away draws."""
    FLUSH_DRAW = "Flush Draw"
    STRAIGHT_DRAW = "Straight Draw"
    GUTSHOT = "Gutshot Draw"


@dataclass
class DrawInfo:
    """An incomplete hand that needs ``cards_needed`` more cards."""
    type: DrawType
    description: str
    cards_needed: int = DRAW_CARDS_NEEDED
    suit: Optional[Suit] = None
    sequence: List[int] = field(default_factory=list)
    missing: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": self.type.value,
            "description": self.description,
            "cards_needed": self.cards_needed,
            "suit": SUIT_NAMES[self.suit] if self.suit is not None else None,
            "sequence": list(self.sequence),
            "missing": self.missing,
        }


def identify_draws(cards: Sequence[Card]) -> List[DrawInfo]:
    """Flush draw first, then straight draw; each slot holds at most one."""
    draws = []

    flush_draw = check_flush_draw(cards)
    if flush_draw:
        draws.append(flush_draw)

    straight_draw = check_straight_draw(cards)
    if straight_draw:
        draws.append(straight_draw)

    return draws


def check_flush_draw(cards: Sequence[Card]) -> Optional[DrawInfo]:
    """Four cards of one suit (exactly four)."""
    suit_counts = Counter(card.suit for card in cards)

    for suit, count in suit_counts.items():
        if count == FLUSH_DRAW_SUITED:
            return DrawInfo(
                type=DrawType.FLUSH_DRAW,
                description=f"4 {SUIT_SYMBOLS[suit]} - Need 1 more for flush",
                suit=suit,
            )
    return None


def check_straight_draw(cards: Sequence[Card]) -> Optional[DrawInfo]:
    """
    Four values in a row, or failing that a gutshot.

    A run of four is open-ended when both neighbours exist (2..A); at the
    edge of the board only one end can complete it, which is reported as a
    gutshot.
    """
    unique_values = sorted({card.value for card in cards})

    for i in range(len(unique_values) - STRAIGHT_DRAW_RUN + 1):
        sequence = unique_values[i:i + STRAIGHT_DRAW_RUN]
        if not is_consecutive(sequence):
            continue

        low = sequence[0] - 1
        high = sequence[-1] + 1
        low_ok = low >= Rank.TWO
        high_ok = high <= Rank.ACE

        if low_ok and high_ok:
            description = (
                f"Open-ended straight draw "
                f"(need {value_name(low)} or {value_name(high)})"
            )
        elif low_ok:
            description = f"Gutshot straight draw (need {value_name(low)})"
        elif high_ok:
            description = f"Gutshot straight draw (need {value_name(high)})"
        else:
            continue

        return DrawInfo(
            type=DrawType.STRAIGHT_DRAW,
            description=description,
            sequence=sequence,
        )

    return check_gutshot_draw(unique_values)


def check_gutshot_draw(values: Sequence[int]) -> Optional[DrawInfo]:
    """
    Three values that one inside card turns into four in a row.

    Triples are scanned in ascending index order and the first gap that
    works is reported.
    """
    for three in combinations(values, 3):
        for missing in range(three[0] + 1, three[2]):
            if missing in three:
                continue
            potential = sorted([*three, missing])
            if is_consecutive(potential):
                return DrawInfo(
                    type=DrawType.GUTSHOT,
                    description=f"Gutshot straight draw (need {value_name(missing)})",
                    missing=missing,
                )
    return None


def is_consecutive(values: Sequence[int]) -> bool:
    """True if each value is exactly one more than the previous one."""
    return all(b - a == 1 for a, b in zip(values, values[1:]))
