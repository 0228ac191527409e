"""
Texas Hold'em Constants.

Card counts and the rule-of-thumb probability constants used by the
outs estimator. The probability figures are deliberately the simplified
"4-and-2" heuristics players use at the table:

1. After the flop (two cards to come): roughly 4% per out, with a
   correction that gives ``outs * 4 - (outs - 8)`` percent.

2. After the turn (one card to come): ``outs * 2`` divided by the
   number of unseen cards.

These are approximations, not exact combinatorics.
"""

# Cards per phase
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
MAX_COMMUNITY_CARDS = 5
MAX_CARDS_IN_PLAY = HOLE_CARDS + MAX_COMMUNITY_CARDS

# Hand evaluation
HAND_SIZE = 5  # Best 5-card hand
DECK_SIZE = 52

# Draws detected are always one card away
DRAW_CARDS_NEEDED = 1
FLUSH_DRAW_SUITED = 4
STRAIGHT_DRAW_RUN = 4

# Threat analysis
THREAT_MIN_COMMUNITY = FLOP_CARDS
THREAT_FLUSH_SUITED = 3

# Probability heuristics
FLOP_OUT_MULTIPLIER = 4
FLOP_OUT_CORRECTION = 8
TURN_OUT_MULTIPLIER = 2
MAX_PROBABILITY = 100
