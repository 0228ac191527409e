"""
Tests for draw detection on partial hands.
"""

from pokerassist.core.card import Suit, parse_cards
from pokerassist.core.draws import (
    DrawType,
    check_flush_draw, check_gutshot_draw, check_straight_draw,
    identify_draws, is_consecutive,
)


class TestFlushDraw:
    """Tests for flush draws."""

    def test_four_suited(self):
        """Test four hearts make a flush draw."""
        draw = check_flush_draw(parse_cards("2h 7h Jh Kh"))
        assert draw.type == DrawType.FLUSH_DRAW
        assert draw.suit == Suit.HEARTS
        assert draw.cards_needed == 1
        assert draw.description == "4 ♥ - Need 1 more for flush"

    def test_three_suited(self):
        """Test three of a suit is not a draw."""
        assert check_flush_draw(parse_cards("2h 7h Jh Ks")) is None

    def test_exactly_four(self):
        """Test five of a suit is a made flush, not a draw."""
        assert check_flush_draw(parse_cards("2h 7h Jh Kh Ah")) is None

    def test_flush_draw_among_five_cards(self, suited_broadway_draw):
        """Test A♠ K♠ with Q♠ J♠ 2♥ shows 4 spades."""
        hole, community = suited_broadway_draw
        draw = check_flush_draw(hole + community)
        assert draw is not None
        assert "4 ♠" in draw.description


class TestStraightDraw:
    """Tests for straight and gutshot draws."""

    def test_open_ended(self):
        """Test four in a row with room on both ends."""
        draw = check_straight_draw(parse_cards("5c 6d 7h 8s"))
        assert draw.type == DrawType.STRAIGHT_DRAW
        assert draw.sequence == [5, 6, 7, 8]
        assert draw.description == "Open-ended straight draw (need 4 or 9)"

    def test_bottom_edge(self):
        """Test 2-3-4-5 can only be completed by a 6."""
        draw = check_straight_draw(parse_cards("2c 3d 4h 5s"))
        assert draw.type == DrawType.STRAIGHT_DRAW
        assert draw.description == "Gutshot straight draw (need 6)"

    def test_top_edge(self):
        """Test J-Q-K-A can only be completed by a 10."""
        draw = check_straight_draw(parse_cards("Jc Qd Kh As"))
        assert draw.description == "Gutshot straight draw (need 10)"

    def test_gutshot(self):
        """Test 5-6-_-8 needs a 7."""
        draw = check_straight_draw(parse_cards("5c 6d 8h Ks"))
        assert draw.type == DrawType.GUTSHOT
        assert draw.missing == 7
        assert draw.description == "Gutshot straight draw (need 7)"

    def test_gutshot_first_gap_wins(self):
        """Test triples are scanned in ascending order."""
        draw = check_gutshot_draw([4, 6, 7, 9])
        assert draw.missing == 5

    def test_duplicate_values_ignored(self):
        """Test pairs do not break the run."""
        draw = check_straight_draw(parse_cards("9c 9d 10h Jd"))
        assert draw is None
        draw = check_straight_draw(parse_cards("9c 9d 10h Qd"))
        assert draw.missing == 11

    def test_no_draw(self):
        """Test scattered values."""
        assert check_straight_draw(parse_cards("2c 7d Kh")) is None


class TestIdentifyDraws:
    """Tests for combining draws."""

    def test_flush_then_straight(self):
        """Test flush draw is listed before the straight draw."""
        draws = identify_draws(parse_cards("5h 6h 7h 8h"))
        assert [d.type for d in draws] == [DrawType.FLUSH_DRAW, DrawType.STRAIGHT_DRAW]

    def test_nothing(self):
        """Test no draws."""
        assert identify_draws(parse_cards("2c 9h")) == []

    def test_is_consecutive(self):
        assert is_consecutive([3, 4, 5, 6])
        assert not is_consecutive([3, 4, 6, 7])
