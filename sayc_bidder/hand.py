"""
Hand
A bridge hand with the evaluation methods the bidding rules consult

Cards are held as endplay Card values so a hand can be handed straight to
endplay tooling; evaluation works on per-suit rank lists (highest first).
"""

import logging

from endplay.types import Card, Denom, Rank

from .errors import InvalidHandError

logger = logging.getLogger(__name__)

SUIT_ORDER = ['S', 'H', 'D', 'C']
SUIT_TO_DENOM = {'S': Denom.spades, 'H': Denom.hearts, 'D': Denom.diamonds, 'C': Denom.clubs}

RANK_FROM_CHAR = {
    'A': Rank.RA, 'K': Rank.RK, 'Q': Rank.RQ, 'J': Rank.RJ, 'T': Rank.RT,
    '9': Rank.R9, '8': Rank.R8, '7': Rank.R7, '6': Rank.R6,
    '5': Rank.R5, '4': Rank.R4, '3': Rank.R3, '2': Rank.R2,
}
CHAR_FROM_RANK = {rank: char for char, rank in RANK_FROM_CHAR.items()}
RANK_VALUE = {
    Rank.R2: 2, Rank.R3: 3, Rank.R4: 4, Rank.R5: 5, Rank.R6: 6, Rank.R7: 7,
    Rank.R8: 8, Rank.R9: 9, Rank.RT: 10, Rank.RJ: 11, Rank.RQ: 12,
    Rank.RK: 13, Rank.RA: 14,
}
HCP_VALUES = {Rank.RA: 4, Rank.RK: 3, Rank.RQ: 2, Rank.RJ: 1}
TOP_HONORS = (Rank.RA, Rank.RK, Rank.RQ)

BALANCED_SHAPES = [[4, 3, 3, 3], [4, 4, 3, 2], [5, 3, 3, 2]]
SEMI_BALANCED_SHAPES = BALANCED_SHAPES + [[5, 4, 2, 2], [6, 3, 2, 2]]


class Hand:
    """Represents a bridge hand with evaluation methods"""

    def __init__(self, lin_hand=None, suits=None):
        """
        Initialize hand from LIN format (e.g., 'SAKQJHAKT9D8765C432')
        or from a mapping of suit letter to rank characters.
        """
        self.suits = {'S': [], 'H': [], 'D': [], 'C': []}
        if lin_hand is not None:
            self.parse_lin(lin_hand)
        elif suits is not None:
            for suit, ranks in suits.items():
                if suit not in self.suits:
                    raise InvalidHandError(f"Unknown suit {suit!r}")
                self._add_holding(suit, ranks)
        for suit in SUIT_ORDER:
            self.suits[suit].sort(key=RANK_VALUE.get, reverse=True)
        if len(self) != 13:
            logger.warning(f"Hand {self.to_lin()} holds {len(self)} cards")
        self.hcp = self.count_hcp()
        self.distribution = self.get_distribution()
        self.shape = self.get_shape_pattern()

    @classmethod
    def from_pbn(cls, text):
        """
        Parse 'AK2.QJ4.K32.Q987' (spades.hearts.diamonds.clubs) or the
        space-separated 'AKQ2 J432 32 32'. '-' marks a void, 'x' a spot card.
        """
        text = text.strip()
        holdings = text.split('.') if '.' in text else text.split()
        if len(holdings) != 4:
            raise InvalidHandError(f"Expected four suits in {text!r}")
        return cls(suits={suit: holding for suit, holding in zip(SUIT_ORDER, holdings)})

    def parse_lin(self, lin_str):
        """Parse LIN format into suit dictionary"""
        current_suit = None
        for char in lin_str.upper().replace('10', 'T'):
            if char in SUIT_TO_DENOM:
                current_suit = char
            elif char in RANK_FROM_CHAR and current_suit is not None:
                self._add_rank(current_suit, RANK_FROM_CHAR[char])
            elif not char.isspace():
                raise InvalidHandError(f"Unexpected {char!r} in {lin_str!r}")

    def _add_holding(self, suit, holding):
        """Add a holding such as 'AQ10x' to one suit"""
        holding = holding.strip().upper().replace('10', 'T')
        if holding == '-':
            return
        spots = 0
        for char in holding:
            if char == 'X':
                spots += 1
            elif char in RANK_FROM_CHAR:
                self._add_rank(suit, RANK_FROM_CHAR[char])
            else:
                raise InvalidHandError(f"Unexpected {char!r} in {suit} holding {holding!r}")
        # Unnamed spot cards take the lowest ranks still free
        for char in '23456789':
            if spots == 0:
                break
            if RANK_FROM_CHAR[char] not in self.suits[suit]:
                self._add_rank(suit, RANK_FROM_CHAR[char])
                spots -= 1

    def _add_rank(self, suit, rank):
        if rank in self.suits[suit]:
            raise InvalidHandError(f"Duplicate card {suit}{CHAR_FROM_RANK[rank]}")
        self.suits[suit].append(rank)

    def cards(self):
        """All cards as endplay Card objects, spades first"""
        return [Card(suit=SUIT_TO_DENOM[suit], rank=rank)
                for suit in SUIT_ORDER for rank in self.suits[suit]]

    def __len__(self):
        return sum(len(ranks) for ranks in self.suits.values())

    def length(self, suit):
        return len(self.suits.get(suit, []))

    def has_card(self, suit, rank_char):
        return RANK_FROM_CHAR.get(rank_char) in self.suits.get(suit, [])

    def count_hcp(self):
        """Count high card points (A=4, K=3, Q=2, J=1)"""
        return sum(HCP_VALUES.get(rank, 0) for suit in self.suits.values() for rank in suit)

    def suit_hcp(self, suit):
        return sum(HCP_VALUES.get(rank, 0) for rank in self.suits[suit])

    def get_distribution(self):
        """Get distribution (length of each suit)"""
        return {suit: len(cards) for suit, cards in self.suits.items()}

    def get_shape_pattern(self):
        """Get shape pattern sorted by length (e.g., [5,4,2,2])"""
        return sorted((len(cards) for cards in self.suits.values()), reverse=True)

    @property
    def distribution_points(self):
        """Shortage points: void=3, singleton=2, doubleton=1"""
        points = 0
        for length in self.distribution.values():
            if length == 0:
                points += 3
            elif length == 1:
                points += 2
            elif length == 2:
                points += 1
        return points

    def count_total_points(self):
        """Count total points including distribution (for opening/responding)"""
        return self.hcp + self.distribution_points

    def longest_suit(self):
        """Return the longest suit(s), highest ranking first"""
        max_len = max(self.distribution.values())
        return [suit for suit in SUIT_ORDER if self.distribution[suit] == max_len]

    def is_balanced(self, include_5422=False):
        """Check if hand is balanced (no singleton/void, at most one doubleton)"""
        if include_5422 and self.shape == [5, 4, 2, 2]:
            return True
        return self.shape in BALANCED_SHAPES

    def is_semi_balanced(self):
        """Check if hand is semi-balanced (includes 5-4-2-2 and 6-3-2-2)"""
        return self.shape in SEMI_BALANCED_SHAPES

    def has_stopper(self, suit):
        """Check if hand has a stopper in given suit (A, Kx, Qxx, Jxxx)"""
        ranks = self.suits[suit]
        length = len(ranks)
        if Rank.RA in ranks:
            return True
        if Rank.RK in ranks and length >= 2:
            return True
        if Rank.RQ in ranks and length >= 3:
            return True
        if Rank.RJ in ranks and length >= 4:
            return True
        return False

    def quick_tricks(self):
        """Count quick tricks (defensive tricks)"""
        tricks = 0.0
        for ranks in self.suits.values():
            top = ranks[:2]
            if top == [Rank.RA, Rank.RK]:
                tricks += 2
            elif top == [Rank.RA, Rank.RQ]:
                tricks += 1.5
            elif Rank.RA in top:
                tricks += 1
            elif Rank.RK in top and Rank.RQ in ranks:
                tricks += 1
            elif Rank.RK in top and len(ranks) >= 2:
                tricks += 0.5
        return tricks

    def suit_quality(self, suit):
        """Count top honors in suit (A, K, Q)"""
        return sum(1 for rank in self.suits[suit] if rank in TOP_HONORS)

    def count_aces(self):
        return sum(1 for ranks in self.suits.values() if Rank.RA in ranks)

    def count_kings(self):
        return sum(1 for ranks in self.suits.values() if Rank.RK in ranks)

    def rule_of_20(self):
        """Rule of 20: HCP + length of two longest suits >= 20"""
        return self.hcp + self.shape[0] + self.shape[1] >= 20

    def to_lin(self):
        return ''.join(suit + ''.join(CHAR_FROM_RANK[rank] for rank in self.suits[suit])
                       for suit in SUIT_ORDER)

    def __str__(self):
        return '.'.join(''.join(CHAR_FROM_RANK[rank] for rank in self.suits[suit]) or '-'
                        for suit in SUIT_ORDER)

    def __repr__(self):
        return f"Hand({self.to_lin()!r})"
