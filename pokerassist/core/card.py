"""
Card and Deck classes for Texas Hold'em.

A card's rank carries its numeric value directly (2-14, Ace high), so hand
evaluation can work on plain integers while the card keeps human-readable
string representations.

The deck enumerates cards suit by suit (spades, hearts, diamonds, clubs),
ranks ascending within each suit. Outs are reported in this order.
"""

from __future__ import annotations
from collections import Counter
from typing import Iterable, Iterator, List
from enum import IntEnum


class Suit(IntEnum):
    """Card suits, in deck enumeration order."""
    SPADES = 0    # ♠
    HEARTS = 1    # ♥
    DIAMONDS = 2  # ♦
    CLUBS = 3     # ♣


class Rank(IntEnum):
    """Card ranks; the value is the card's numeric value (Ace high)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


# String mappings
SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}

SUIT_CHARS = {
    Suit.SPADES: "s",
    Suit.HEARTS: "h",
    Suit.DIAMONDS: "d",
    Suit.CLUBS: "c",
}

SUIT_NAMES = {
    Suit.SPADES: "spades",
    Suit.HEARTS: "hearts",
    Suit.DIAMONDS: "diamonds",
    Suit.CLUBS: "clubs",
}

RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Reverse mappings
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK["T"] = Rank.TEN  # Also accept "T"

TEXT_TO_SUIT = {
    text: suit
    for mapping in (SUIT_SYMBOLS, SUIT_CHARS, SUIT_NAMES)
    for suit, text in mapping.items()
}

RED_SUITS = (Suit.HEARTS, Suit.DIAMONDS)


def value_name(value: int) -> str:
    """Rank symbol for a numeric value, e.g. 14 -> 'A', 10 -> '10'."""
    return RANK_SYMBOLS[Rank(value)]


def create_card(rank: str, suit: str) -> Card:
    """
    Create a card from a rank symbol and a suit.

    Args:
        rank: One of "2".."10", "J", "Q", "K", "A" ("T" is accepted for ten)
        suit: A suit name ("spades"), symbol ("♠") or letter ("s")

    Raises:
        ValueError: If the rank or suit is not recognized.
    """
    rank_key = str(rank).strip().upper()
    if rank_key not in SYMBOL_TO_RANK:
        raise ValueError(f"Invalid rank: {rank}")

    suit_key = str(suit).strip()
    if suit_key.lower() in TEXT_TO_SUIT:
        suit_key = suit_key.lower()
    if suit_key not in TEXT_TO_SUIT:
        raise ValueError(f"Invalid suit: {suit}")

    return Card(SYMBOL_TO_RANK[rank_key], TEXT_TO_SUIT[suit_key])


class Card:
    """
    A playing card represented as (rank, suit).

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - Rank symbol and suit text: create_card("10", "hearts")
    - String notation: Card.from_string("As"), Card.from_string("10♥")
    - Integer (0-51): Card.from_int(12) = Ace of Spades

    The integer encoding is the card's position in deck order:
    card_int = suit * 13 + (value - 2)
    """

    __slots__ = ("rank", "suit", "_int")

    def __init__(self, rank: Rank, suit: Suit):
        object.__setattr__(self, "rank", Rank(rank))
        object.__setattr__(self, "suit", Suit(suit))
        object.__setattr__(self, "_int", int(self.suit) * 13 + int(self.rank) - 2)

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts formats:
        - "As", "Kh", "Td", "10c" (rank + suit char)
        - "A♠", "K♥", "10♦", "2♣" (rank + suit symbol)
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")
        return create_card(s[:-1], s[-1])

    @classmethod
    def from_int(cls, card_int: int) -> Card:
        """Create a card from integer (0-51)."""
        if not 0 <= card_int <= 51:
            raise ValueError(f"Card int must be 0-51, got {card_int}")
        suit = Suit(card_int // 13)
        rank = Rank(card_int % 13 + 2)
        return cls(rank, suit)

    def to_int(self) -> int:
        """Return the integer representation (0-51)."""
        return self._int

    def __int__(self) -> int:
        return self._int

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._int == other._int
        return False

    def __hash__(self) -> int:
        return self._int

    def __lt__(self, other: Card) -> bool:
        """Compare by rank only (for sorting)."""
        return self.rank < other.rank

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_CHARS[self.suit]})"

    def __str__(self) -> str:
        return self.display

    @property
    def value(self) -> int:
        """Numeric rank value, 2-14."""
        return int(self.rank)

    @property
    def symbol(self) -> str:
        """Rank symbol like 'A' or '10'."""
        return RANK_SYMBOLS[self.rank]

    @property
    def display(self) -> str:
        """Display string like '10♠'."""
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', '10h'."""
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_CHARS[self.suit]}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in RED_SUITS else "black"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_SYMBOLS[self.rank],
            "suit": SUIT_NAMES[self.suit],
            "value": self.value,
            "text": self.display,
            "color": self.color,
        }


class Deck:
    """
    A standard 52-card deck in enumeration order.

    Usage:
        deck = Deck()
        for card in deck.unseen(hole_cards + community_cards):
            ...
    """

    def __init__(self):
        self._cards: List[Card] = [
            Card(rank, suit)
            for suit in Suit
            for rank in Rank
        ]

    def unseen(self, cards: Iterable[Card]) -> Iterator[Card]:
        """Yield the deck's cards that are not among ``cards``."""
        used = set(cards)
        for card in self._cards:
            if card not in used:
                yield card

    @property
    def cards(self) -> List[Card]:
        """All cards in enumeration order."""
        return self._cards.copy()

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"


def find_duplicates(cards: Iterable[Card]) -> List[Card]:
    """Return the cards that appear more than once, in first-seen order."""
    counts = Counter(cards)
    return [card for card, count in counts.items() if count > 1]


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse multiple cards from a string.

    Accepts formats:
    - "As Kh 10d" (space-separated)
    - "AsKhTd" or "As10h" (no separator)
    - "A♠ K♥ 10♦" (with symbols)

    Returns:
        List of Card objects
    """
    cards_str = cards_str.strip()
    if not cards_str:
        return []

    # Try space-separated first
    if " " in cards_str:
        return [Card.from_string(s) for s in cards_str.split()]

    # Ranks are one char except "10", suits are always one char
    result = []
    i = 0
    while i < len(cards_str):
        width = 3 if cards_str.startswith("10", i) else 2
        chunk = cards_str[i:i + width]
        if len(chunk) < width or chunk[-1].lower() not in TEXT_TO_SUIT:
            raise ValueError(f"Cannot parse card at position {i}: {cards_str[i:]}")
        result.append(Card.from_string(chunk))
        i += width

    return result
