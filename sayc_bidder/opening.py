"""
Opening Bids
The first non-pass call: strong 2C, notrump ranges, one of a suit, weak twos
and three-level preempts
"""

from .rules import Rule, RuleChain


def seat_position(s):
    """1 for first seat ... 4 for fourth seat"""
    return len(s.context) + 1


def has_opening_values(s):
    """12+ HCP, or 10+ HCP satisfying the Rule of 20"""
    return s.hcp >= 12 or (s.hcp >= 10 and s.hand.rule_of_20())


def strong_two_clubs(s):
    minimum = s.setting('strong_2_clubs', 'min_hcp', 'opening_bids', 22)
    if s.enabled('strong_2_clubs', 'opening_bids') and s.hcp >= minimum:
        return s.bid(2, 'C', f"Strong artificial ({minimum}+ HCP, {s.hcp} HCP)", 'strong_2_clubs')
    return None


def two_notrump(s):
    if s.balanced and 20 <= s.hcp <= 21:
        return s.bid(2, 'NT', f"balanced ({s.hcp} HCP)")
    return None


def one_notrump(s):
    if s.balanced and 15 <= s.hcp <= 17:
        return s.bid(1, 'NT', f"balanced ({s.hcp} HCP)")
    return None


def _light_third_seat(s):
    """Third seat may open light on a good five-card major"""
    if seat_position(s) != 3 or not s.general('passed_hand_variations', False) or s.hcp < 10:
        return False
    return any(s.length(m) >= 5 and s.hand.suit_quality(m) >= 2 for m in ('H', 'S'))


def one_of_a_suit(s):
    """Five-card major first (longer major, spades with 5-5), else the better minor"""
    if seat_position(s) == 4 and s.general('passed_hand_variations', False):
        # Rule of 15 in fourth seat
        if s.hcp + s.length('S') < 15:
            return None
    if not (has_opening_values(s) or _light_third_seat(s)):
        return None

    hearts, spades = s.length('H'), s.length('S')
    if spades >= 5 and spades >= hearts:
        return s.bid(1, 'S', f"({spades}-card suit, {s.hcp} HCP)")
    if hearts >= 5:
        return s.bid(1, 'H', f"({hearts}-card suit, {s.hcp} HCP)")

    clubs, diamonds = s.length('C'), s.length('D')
    if diamonds > clubs:
        return s.bid(1, 'D', f"({diamonds}-card suit, {s.hcp} HCP)")
    if clubs > diamonds:
        return s.bid(1, 'C', f"({clubs}-card suit, {s.hcp} HCP)")
    if clubs >= 4:
        return s.bid(1, 'D', f"({clubs}-{diamonds} minors, {s.hcp} HCP)")
    return s.bid(1, 'C', f"(3-3 minors, {s.hcp} HCP)")


def _preempt_allowed(s):
    return not (seat_position(s) == 4 and s.general('passed_hand_variations', False))


def weak_two(s):
    """Six-card diamond/heart/spade suit with two top honours"""
    if not s.enabled('weak_two', 'preempts') or not _preempt_allowed(s):
        return None
    low = s.setting('weak_two', 'min_hcp', 'preempts', 5) + s.vulnerability_adjustment('weak_two')
    high = s.setting('weak_two', 'max_hcp', 'preempts', 11)
    if not low <= s.hcp <= high:
        return None
    for suit in ('S', 'H', 'D'):
        if s.length(suit) == 6 and s.hand.suit_quality(suit) >= 2:
            return s.bid(2, suit, f"Weak two (6-card suit, {s.hcp} HCP)", 'weak_two')
    return None


def three_level_preempt(s):
    """Seven-card suit opens at the three level, eight-card major at four"""
    if not s.enabled('three_level', 'preempts') or not _preempt_allowed(s):
        return None
    low = s.setting('three_level', 'min_hcp', 'preempts', 5) + s.vulnerability_adjustment('preempt')
    high = s.setting('three_level', 'max_hcp', 'preempts', 10)
    if not low <= s.hcp <= high:
        return None
    suit = s.longest(('C', 'D', 'H', 'S'), minimum=7)
    if suit is None or s.hand.suit_quality(suit) < 1:
        return None
    level = 4 if s.length(suit) >= 8 and suit in ('H', 'S') else 3
    return s.bid(level, suit, f"Preempt ({s.length(suit)}-card suit, {s.hcp} HCP)", 'preempt')


def pass_opening(s):
    return s.pass_(f"insufficient values, {s.hcp} HCP")


OPENING_RULES = RuleChain('opening', [
    Rule('strong 2C', strong_two_clubs),
    Rule('2NT', two_notrump),
    Rule('1NT', one_notrump),
    Rule('one of a suit', one_of_a_suit),
    Rule('weak two', weak_two),
    Rule('three-level preempt', three_level_preempt),
    Rule('pass', pass_opening),
])


def select_opening(s):
    """Opening call for the actor; always returns a call"""
    return OPENING_RULES.decide(s)
