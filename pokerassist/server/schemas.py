"""
Pydantic schemas for API request and WebSocket message validation.

Cards travel as short strings ("As", "10♥", "Td"). Every request checks
that its strings parse and that no card appears twice; the engine itself
assumes both.
"""

from typing import List, Tuple
from pydantic import BaseModel, Field, field_validator, model_validator

from pokerassist.core.card import Card, find_duplicates
from pokerassist.core.rules import HOLE_CARDS, MAX_CARDS_IN_PLAY, MAX_COMMUNITY_CARDS


# Slot record kept per live session, in table order
HOLE_SLOTS = ("hole1", "hole2")
COMMUNITY_SLOTS = ("flop1", "flop2", "flop3", "turn", "river")
CARD_SLOTS = HOLE_SLOTS + COMMUNITY_SLOTS


def _parse_all(values: List[str]) -> List[Card]:
    return [Card.from_string(text) for text in values]


def _check_card_strings(values: List[str]) -> List[str]:
    _parse_all(values)
    return values


def _check_unique(*groups: List[str]) -> None:
    cards = [card for group in groups for card in _parse_all(group)]
    duplicates = find_duplicates(cards)
    if duplicates:
        names = ", ".join(card.display for card in duplicates)
        raise ValueError(f"Duplicate cards: {names}")


# ============= Request Schemas =============

class EvaluateRequest(BaseModel):
    """Request to evaluate the best hand among some cards."""
    cards: List[str] = Field(default_factory=list, max_length=MAX_CARDS_IN_PLAY)
    compare_kickers: bool = Field(
        default=False,
        description="Break ties between same-category subsets by kickers",
    )

    @field_validator("cards")
    @classmethod
    def cards_must_parse(cls, value: List[str]) -> List[str]:
        return _check_card_strings(value)

    @model_validator(mode="after")
    def cards_must_be_unique(self) -> "EvaluateRequest":
        _check_unique(self.cards)
        return self

    def to_cards(self) -> List[Card]:
        return _parse_all(self.cards)


class BoardRequest(BaseModel):
    """Hole and community cards for outs, probability and analysis."""
    hole: List[str] = Field(default_factory=list, max_length=HOLE_CARDS)
    community: List[str] = Field(default_factory=list, max_length=MAX_COMMUNITY_CARDS)

    @field_validator("hole", "community")
    @classmethod
    def cards_must_parse(cls, value: List[str]) -> List[str]:
        return _check_card_strings(value)

    @model_validator(mode="after")
    def cards_must_be_unique(self) -> "BoardRequest":
        _check_unique(self.hole, self.community)
        return self

    def to_cards(self) -> Tuple[List[Card], List[Card]]:
        return _parse_all(self.hole), _parse_all(self.community)


class ThreatsRequest(BaseModel):
    """Community cards to scan for threats."""
    community: List[str] = Field(default_factory=list, max_length=MAX_COMMUNITY_CARDS)

    @field_validator("community")
    @classmethod
    def cards_must_parse(cls, value: List[str]) -> List[str]:
        return _check_card_strings(value)

    @model_validator(mode="after")
    def cards_must_be_unique(self) -> "ThreatsRequest":
        _check_unique(self.community)
        return self

    def to_cards(self) -> List[Card]:
        return _parse_all(self.community)


# ============= WebSocket Message Schemas =============

class WSSlotMessage(BaseModel):
    """WebSocket message addressing one card slot."""
    type: str
    slot: str

    @field_validator("slot")
    @classmethod
    def slot_must_exist(cls, value: str) -> str:
        if value not in CARD_SLOTS:
            raise ValueError(f"Unknown slot: {value}")
        return value


class WSSetCardMessage(WSSlotMessage):
    """WebSocket message placing a card in a slot."""
    type: str = "set_card"
    card: str

    @field_validator("card")
    @classmethod
    def card_must_parse(cls, value: str) -> str:
        Card.from_string(value)
        return value

    def to_card(self) -> Card:
        return Card.from_string(self.card)


class WSClearCardMessage(WSSlotMessage):
    """WebSocket message emptying a slot."""
    type: str = "clear_card"
