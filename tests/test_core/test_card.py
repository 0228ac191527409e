"""
Tests for Card and Deck classes.
"""

import pytest
from pokerassist.core.card import (
    Card, Deck, Rank, Suit,
    create_card, find_duplicates, parse_cards, value_name,
)


class TestCard:
    """Tests for Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES
        assert card.value == 14

    def test_create_card_from_symbols(self):
        """Test creating cards from rank symbol and suit text."""
        ten = create_card("10", "hearts")
        assert ten.rank == Rank.TEN
        assert ten.suit == Suit.HEARTS
        assert ten.value == 10

        assert create_card("A", "♠") == Card(Rank.ACE, Suit.SPADES)
        assert create_card("K", "d") == Card(Rank.KING, Suit.DIAMONDS)
        assert create_card("T", "Clubs") == Card(Rank.TEN, Suit.CLUBS)

    def test_face_card_values(self):
        """Test J/Q/K/A map to 11-14."""
        values = [create_card(r, "spades").value for r in ("J", "Q", "K", "A")]
        assert values == [11, 12, 13, 14]

    def test_create_card_invalid(self):
        """Test unrecognized rank or suit is rejected."""
        with pytest.raises(ValueError):
            create_card("1", "spades")
        with pytest.raises(ValueError):
            create_card("A", "stars")

    def test_card_from_string(self):
        """Test creating cards from string notation."""
        card1 = Card.from_string("As")
        assert card1.rank == Rank.ACE
        assert card1.suit == Suit.SPADES

        card2 = Card.from_string("K♥")
        assert card2.rank == Rank.KING
        assert card2.suit == Suit.HEARTS

        card3 = Card.from_string("10d")
        assert card3.rank == Rank.TEN
        assert card3.suit == Suit.DIAMONDS

        assert Card.from_string("Td") == card3

    def test_card_from_string_invalid(self):
        """Test invalid card strings."""
        with pytest.raises(ValueError):
            Card.from_string("A")
        with pytest.raises(ValueError):
            Card.from_string("Zs")

    def test_card_from_int(self):
        """Test creating cards from deck index."""
        assert Card.from_int(0) == Card(Rank.TWO, Suit.SPADES)
        assert Card.from_int(12) == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_int(13) == Card(Rank.TWO, Suit.HEARTS)
        assert Card.from_int(51) == Card(Rank.ACE, Suit.CLUBS)

        with pytest.raises(ValueError):
            Card.from_int(52)

    def test_card_to_int(self):
        """Test converting card to integer."""
        assert Card(Rank.ACE, Suit.SPADES).to_int() == 12
        assert int(Card(Rank.TWO, Suit.CLUBS)) == 39

    def test_card_equality(self):
        """Test card equality and hashing use rank and suit."""
        card1 = Card(Rank.ACE, Suit.SPADES)
        card2 = Card(Rank.ACE, Suit.SPADES)
        card3 = Card(Rank.ACE, Suit.HEARTS)

        assert card1 == card2
        assert card1 != card3
        assert len({card1, card2, card3}) == 2

    def test_card_is_immutable(self):
        """Test a card cannot be changed after creation."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_display(self):
        """Test string representations."""
        card = Card(Rank.TEN, Suit.SPADES)
        assert str(card) == "10♠"
        assert card.display == "10♠"
        assert card.short_str == "10s"
        assert card.symbol == "10"
        assert repr(card) == "Card(10s)"

    def test_card_color(self):
        """Test color depends on suit only."""
        assert Card(Rank.TWO, Suit.HEARTS).color == "red"
        assert Card(Rank.TWO, Suit.DIAMONDS).color == "red"
        assert Card(Rank.TWO, Suit.SPADES).color == "black"
        assert Card(Rank.TWO, Suit.CLUBS).color == "black"

    def test_card_to_dict(self):
        """Test JSON form."""
        assert Card(Rank.QUEEN, Suit.HEARTS).to_dict() == {
            "rank": "Q",
            "suit": "hearts",
            "value": 12,
            "text": "Q♥",
            "color": "red",
        }

    def test_value_name(self):
        """Test numeric value to symbol."""
        assert value_name(14) == "A"
        assert value_name(11) == "J"
        assert value_name(10) == "10"
        assert value_name(2) == "2"


class TestDeck:
    """Tests for Deck class."""

    def test_deck_has_52_unique_cards(self, deck):
        """Test a full deck."""
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_deck_order(self, deck):
        """Test suits outer (♠ ♥ ♦ ♣), ranks inner ascending."""
        cards = deck.cards
        assert cards[0] == Card(Rank.TWO, Suit.SPADES)
        assert cards[12] == Card(Rank.ACE, Suit.SPADES)
        assert cards[13] == Card(Rank.TWO, Suit.HEARTS)
        assert cards[-1] == Card(Rank.ACE, Suit.CLUBS)

    def test_deck_order_matches_int_encoding(self, deck):
        """Test each card's index is its integer form."""
        assert [card.to_int() for card in deck] == list(range(52))

    def test_unseen(self, deck):
        """Test unseen skips cards already in play."""
        used = parse_cards("As Kh")
        unseen = list(deck.unseen(used))

        assert len(unseen) == 50
        assert not set(used) & set(unseen)
        assert unseen[0] == Card(Rank.TWO, Suit.SPADES)


class TestParseCards:
    """Tests for parsing card lists."""

    def test_space_separated(self):
        """Test space-separated cards."""
        cards = parse_cards("As Kh 10d")
        assert cards == [
            Card(Rank.ACE, Suit.SPADES),
            Card(Rank.KING, Suit.HEARTS),
            Card(Rank.TEN, Suit.DIAMONDS),
        ]

    def test_no_separator(self):
        """Test packed cards, including two-char tens."""
        assert parse_cards("AsKh10d") == parse_cards("As Kh 10d")
        assert parse_cards("AsKhTd") == parse_cards("As Kh 10d")

    def test_symbols(self):
        """Test suit symbols."""
        assert parse_cards("A♠K♥") == parse_cards("As Kh")

    def test_empty(self):
        """Test empty input."""
        assert parse_cards("") == []

    def test_invalid(self):
        """Test unparseable input."""
        with pytest.raises(ValueError):
            parse_cards("AsX")


class TestFindDuplicates:
    """Tests for duplicate detection."""

    def test_no_duplicates(self):
        assert find_duplicates(parse_cards("As Ks Qs")) == []

    def test_duplicates(self):
        cards = parse_cards("As Ks As Qs Ks As")
        assert find_duplicates(cards) == parse_cards("As Ks")
