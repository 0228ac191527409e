"""
Pytest configuration and shared fixtures for PokerAssist tests.
"""

import pytest
from fastapi.testclient import TestClient

from pokerassist.core.card import Card, Deck, Rank, Suit
from pokerassist.server.app import create_app


@pytest.fixture
def deck():
    """Create a fresh deck in enumeration order."""
    return Deck()


@pytest.fixture
def client():
    """HTTP/WebSocket test client for a fresh app."""
    return TestClient(create_app())


@pytest.fixture
def sample_hand():
    """Create a sample 5-card hand (pair of aces)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.KING, Suit.DIAMONDS),
        Card(Rank.QUEEN, Suit.CLUBS),
        Card(Rank.JACK, Suit.SPADES),
    ]


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Rank.TEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.ACE, Suit.SPADES),
    ]


@pytest.fixture
def straight_flush():
    """Create a straight flush (9-high)."""
    return [
        Card(Rank.NINE, Suit.HEARTS),
        Card(Rank.EIGHT, Suit.HEARTS),
        Card(Rank.SEVEN, Suit.HEARTS),
        Card(Rank.SIX, Suit.HEARTS),
        Card(Rank.FIVE, Suit.HEARTS),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.THREE, Suit.DIAMONDS),
        Card(Rank.FOUR, Suit.CLUBS),
        Card(Rank.FIVE, Suit.SPADES),
    ]


@pytest.fixture
def suited_broadway_draw():
    """A♠ K♠ in the hole, Q♠ J♠ 2♥ on the flop."""
    hole = [Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.SPADES)]
    community = [
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.TWO, Suit.HEARTS),
    ]
    return hole, community
