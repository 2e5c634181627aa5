"""
Responder
First response to partner's opening when the opponents have stayed silent

One rule table per opening: one of a major, one of a minor, 1NT, 2NT,
strong 2C, weak twos and three-level preempts. Within each table the more
specific conventions come first.
"""

from .calls import MAJORS, MINORS, Call, minimum_level
from .matcher import match_bergen, match_drury, match_jacoby_2nt, match_splinter
from .rules import Rule, RuleChain, suit_name


def trump(s):
    return s.opening.denomination


def support(s):
    return s.length(trump(s))


def _other_suits(s):
    return [suit for suit in ('C', 'D', 'H', 'S') if suit != trump(s)]


# --- One of a major ---------------------------------------------------------------

def drury(s):
    call = Call.parse('2C')
    if s.match(match_drury, call):
        return s.bid(2, 'C', f"Drury (3+ {suit_name(trump(s))}, {s.hcp} HCP)", 'drury')
    return None


def splinter(s):
    options = []
    for suit in _other_suits(s):
        level = minimum_level(suit, s.opening) + 2
        if level > 4:
            continue
        call = Call.contract(level, suit)
        if s.match(match_splinter, call):
            options.append((s.length(suit), level, suit))
    if not options:
        return None
    _, level, suit = min(options)
    return s.bid(level, suit, f"Splinter (shortness in {suit_name(suit)}, 4+ support, {s.hcp} HCP)", 'splinter')


def jacoby_2nt(s):
    if s.match(match_jacoby_2nt, Call.parse('2NT')):
        return s.bid(2, 'NT', f"Jacoby (4+ card support, {s.hcp} HCP, game-forcing)", 'jacoby_2nt')
    return None


def jump_shift(s):
    if s.hcp < 17:
        return None
    suit = s.longest(_other_suits(s), minimum=5)
    if suit is None:
        return None
    level = minimum_level(suit, s.opening) + 1
    return s.bid(level, suit, f"Jump shift (5+ {suit_name(suit)}, {s.hcp} HCP)")


def bergen(s):
    if not s.enabled('bergen_raises', 'responses') or support(s) < 4:
        return None
    for token in ('3C', '3D'):
        if s.match(match_bergen, Call.parse(token)):
            kind = 'constructive' if token == '3C' else 'limit'
            return s.bid(3, token[1], f"Bergen {kind} raise (4+ card support, {s.hcp} HCP)", f'bergen_{kind}')
    if s.hcp <= 6:
        return s.bid(3, trump(s), f"Bergen preemptive raise (4+ card support, {s.hcp} HCP)", 'bergen_preemptive')
    return None


def limit_raise(s):
    if support(s) >= 3 and 10 <= s.hcp <= 12:
        return s.bid(3, trump(s), f"Limit raise ({support(s)}-card support, {s.hcp} HCP)")
    return None


def simple_raise(s):
    if support(s) >= 3 and 6 <= s.hcp <= 9:
        return s.bid(2, trump(s), f"Simple raise ({support(s)}-card support, {s.hcp} HCP)")
    return None


def one_spade_over_one_heart(s):
    if s.opening.token == '1H' and s.length('S') >= 4 and s.hcp >= 6:
        return s.bid(1, 'S', f"new suit ({s.length('S')}+ spades, {s.hcp} HCP)")
    return None


def two_level_new_suit(s):
    """2/1 response: 10+ HCP, five hearts over 1S or a four-card minor"""
    if s.hcp < 10:
        return None
    candidates = [suit for suit in ('C', 'D', 'H')
                  if minimum_level(suit, s.opening) == 2 and s.length(suit) >= (5 if suit == 'H' else 4)]
    if candidates:
        longest = max(s.length(suit) for suit in candidates)
        tied = [suit for suit in candidates if s.length(suit) == longest]
        suit = tied[-1] if longest >= 5 else tied[0]
        return s.bid(2, suit, f"new suit ({s.length(suit)}+ {suit_name(suit)}, {s.hcp} HCP)")
    if s.hcp >= 12 and s.opening.denomination in MAJORS:
        suit = 'C' if s.length('C') >= s.length('D') else 'D'
        return s.bid(2, suit, f"new suit (forcing, {s.length(suit)} {suit_name(suit)}, {s.hcp} HCP)")
    return None


def notrump_game(s):
    if s.balanced and 15 <= s.hcp <= 17:
        return s.bid(3, 'NT', f"game ({s.hcp} HCP, balanced)")
    return None


def natural_two_notrump(s):
    if not s.enabled('jacoby_2nt', 'responses') and s.balanced and 12 <= s.hcp <= 14 and support(s) < 3:
        return s.bid(2, 'NT', f"invitational ({s.hcp} HCP, balanced)")
    return None


def one_notrump_response(s):
    if 6 <= s.hcp <= 11:
        return s.bid(1, 'NT', f"(6-11 HCP, {s.hcp} HCP, no fit)")
    return None


def pass_response(s):
    return s.pass_(f"{s.hcp} HCP, insufficient to respond")


MAJOR_RULES = RuleChain('response to one of a major', [
    Rule('drury', drury, when=lambda s: s.passed_hand()),
    Rule('splinter', splinter),
    Rule('jacoby 2NT', jacoby_2nt),
    Rule('jump shift', jump_shift),
    Rule('bergen', bergen),
    Rule('limit raise', limit_raise),
    Rule('simple raise', simple_raise),
    Rule('1S over 1H', one_spade_over_one_heart),
    Rule('two-level new suit', two_level_new_suit),
    Rule('3NT', notrump_game),
    Rule('natural 2NT', natural_two_notrump),
    Rule('1NT', one_notrump_response),
    Rule('pass', pass_response),
])


# --- One of a minor -------------------------------------------------------------------

NT_OVER_MINOR_RANGES = {
    'classic': ((6, 11), (12, 14), (15, 17)),
    'modern': ((6, 10), (11, 12), (13, 15)),
}


def one_level_major(s):
    if s.hcp < 6:
        return None
    hearts, spades = s.length('H'), s.length('S')
    if spades >= 4 and spades > hearts:
        return s.bid(1, 'S', f"new suit ({spades}+ spades, {s.hcp} HCP)")
    if hearts >= 4:
        return s.bid(1, 'H', f"new suit ({hearts}+ hearts, {s.hcp} HCP)")
    return None


def one_diamond_over_one_club(s):
    if s.opening.token == '1C' and s.length('D') >= 4 and s.hcp >= 6:
        return s.bid(1, 'D', f"new suit ({s.length('D')}+ diamonds, {s.hcp} HCP)")
    return None


def minor_raise(s):
    if support(s) < 4:
        return None
    if 6 <= s.hcp <= 9:
        return s.bid(2, trump(s), f"Simple raise ({support(s)}-card support, {s.hcp} HCP)")
    if 10 <= s.hcp <= 12:
        return s.bid(3, trump(s), f"Limit raise ({support(s)}-card support, {s.hcp} HCP)")
    return None


def notrump_by_range(s):
    if not s.balanced:
        return None
    style = s.general('nt_over_minors_range', 'classic')
    ranges = NT_OVER_MINOR_RANGES.get(style, NT_OVER_MINOR_RANGES['classic'])
    for level, (low, high) in enumerate(ranges, start=1):
        if low <= s.hcp <= high:
            return s.bid(level, 'NT', f"balanced ({low}-{high} HCP, {s.hcp} HCP)")
    return None


def two_clubs_over_one_diamond(s):
    if s.opening.token == '1D' and s.hcp >= 10 and s.length('C') >= 4:
        return s.bid(2, 'C', f"new suit ({s.length('C')}+ clubs, {s.hcp} HCP)")
    return None


def one_notrump_catchall(s):
    if 6 <= s.hcp <= 10:
        return s.bid(1, 'NT', f"(6-10 HCP, {s.hcp} HCP, no better bid)")
    return None


MINOR_RULES = RuleChain('response to one of a minor', [
    Rule('jump shift', jump_shift),
    Rule('one-level major', one_level_major),
    Rule('1D over 1C', one_diamond_over_one_club),
    Rule('minor raise', minor_raise),
    Rule('notrump by range', notrump_by_range),
    Rule('2C over 1D', two_clubs_over_one_diamond),
    Rule('1NT', one_notrump_catchall),
    Rule('pass', pass_response),
])


# --- 1NT and 2NT ----------------------------------------------------------------------

def _long_major(s, minimum):
    return s.longest(MAJORS, minimum=minimum)


def texas_transfer(s):
    if not s.enabled('texas_transfers', 'notrump_responses'):
        return None
    major = _long_major(s, 6)
    level = s.opening.level
    low, high = (10, 15) if level == 1 else (4, 10)
    if major is None or not low <= s.hcp <= high:
        return None
    step = 'D' if major == 'H' else 'H'
    return s.bid(4, step, f"Texas transfer (6+ {suit_name(major)}, {s.hcp} HCP)", 'texas_transfer')


def jacoby_transfer(s):
    if not s.enabled('jacoby_transfers', 'notrump_responses'):
        return None
    major = _long_major(s, 5)
    if major is None:
        return None
    step = 'D' if major == 'H' else 'H'
    strength = 'sign off' if s.hcp < 8 else ('invitational' if s.hcp < 10 else 'game-forcing')
    return s.bid(s.opening.level + 1, step,
                 f"Jacoby transfer (5+ {suit_name(major)}, {strength})", 'jacoby_transfer')


def stayman(s):
    if not s.enabled('stayman', 'notrump_responses'):
        return None
    minimum = 8 if s.opening.level == 1 else 4
    if s.hcp < minimum or s.hand.shape == [4, 3, 3, 3]:
        return None
    if s.length('H') != 4 and s.length('S') != 4:
        return None
    return s.bid(s.opening.level + 1, 'C', f"Stayman (4-card major, {s.hcp} HCP)", 'stayman')


def minor_suit_transfer(s):
    if not s.enabled('minor_suit_transfers', 'notrump_responses') or s.hcp >= 8:
        return None
    minor = s.longest(MINORS, minimum=6)
    if minor is None:
        return None
    if minor == 'C':
        return s.bid(2, 'S', f"Minor-suit transfer (6+ clubs, {s.hcp} HCP)", 'minor_transfer')
    return s.bid(2, 'NT', f"Minor-suit transfer (6+ diamonds, {s.hcp} HCP)", 'minor_transfer')


def gerber(s):
    threshold = 18 if s.opening.level == 1 else 13
    if s.enabled('gerber', 'ace_asking') and s.hcp >= threshold:
        return s.bid(4, 'C', f"Gerber (asking for aces, {s.hcp} HCP)", 'gerber')
    return None


def notrump_raise(s):
    if s.opening.level == 1:
        if s.hcp >= 18:
            return s.bid(6, 'NT', f"small slam ({s.hcp} HCP)")
        if s.hcp >= 16:
            return s.bid(4, 'NT', f"quantitative (slam invitation, {s.hcp} HCP)", 'quantitative')
        if s.hcp >= 10:
            return s.bid(3, 'NT', f"game ({s.hcp} HCP, balanced)")
        if s.hcp >= 8:
            if s.enabled('minor_suit_transfers', 'notrump_responses') and s.enabled('stayman', 'notrump_responses'):
                return s.bid(2, 'C', f"Stayman (invitational relay, {s.hcp} HCP)", 'stayman')
            return s.bid(2, 'NT', f"invitational ({s.hcp} HCP, balanced)")
        return s.pass_(f"{s.hcp} HCP, no game opposite 15-17")
    if s.hcp >= 11:
        return s.bid(4, 'NT', f"quantitative (slam invitation, {s.hcp} HCP)", 'quantitative')
    if s.hcp >= 4:
        return s.bid(3, 'NT', f"game ({s.hcp} HCP)")
    return s.pass_(f"{s.hcp} HCP, no game opposite 20-21")


NOTRUMP_RULES = RuleChain('response to notrump', [
    Rule('texas transfer', texas_transfer),
    Rule('jacoby transfer', jacoby_transfer),
    Rule('stayman', stayman),
    Rule('minor-suit transfer', minor_suit_transfer, when=lambda s: s.opening.level == 1),
    Rule('gerber', gerber),
    Rule('notrump raise', notrump_raise),
])


# --- Strong 2C ----------------------------------------------------------------------------

def two_club_positive(s):
    if s.hcp < 8:
        return None
    for suit in ('H', 'S', 'C', 'D'):
        if s.length(suit) >= 5 and s.hand.suit_quality(suit) >= 2:
            level = 2 if suit in MAJORS else 3
            return s.bid(level, suit, f"positive ({s.hcp} HCP, 5+ {suit_name(suit)})")
    if s.balanced:
        return s.bid(2, 'NT', f"positive ({s.hcp} HCP, balanced)")
    return None


def two_club_waiting(s):
    return s.bid(2, 'D', f"waiting ({s.hcp} HCP)", 'waiting')


STRONG_CLUB_RULES = RuleChain('response to strong 2C', [
    Rule('positive', two_club_positive),
    Rule('waiting', two_club_waiting),
])


# --- Weak twos and preempts ---------------------------------------------------------------

def weak_two_game_raise(s):
    if s.hcp < 17 or support(s) < 3:
        return None
    if trump(s) in MAJORS:
        return s.bid(4, trump(s), f"Raise to game over weak two ({support(s)}-card support, {s.hcp} HCP)")
    return s.bid(3, 'NT', f"game over weak two ({s.hcp} HCP, diamond fit)")


def feature_ask(s):
    if 15 <= s.hcp <= 16 and support(s) >= 2:
        return s.bid(2, 'NT', f"Feature ask ({s.hcp} HCP, {support(s)}-card support)", 'feature_ask')
    return None


def weak_two_notrump_game(s):
    if s.hcp >= 16 and s.balanced and all(s.stopper(suit) for suit in _other_suits(s)):
        return s.bid(3, 'NT', f"game ({s.hcp} HCP, stoppers outside)")
    return None


def weak_two_new_suit(s):
    if s.hcp < 16:
        return None
    suit = s.longest(_other_suits(s), minimum=5)
    if suit is None:
        return None
    return s.cheapest(suit, f"new suit (forcing, 5+ {suit_name(suit)}, {s.hcp} HCP)")


def weak_two_raise(s):
    if support(s) >= 3 and 8 <= s.hcp <= 14:
        return s.bid(3, trump(s), f"Raise over weak two ({support(s)}-card support, {s.hcp} HCP)")
    return None


def pass_weak(s):
    return s.pass_(f"{s.hcp} HCP, no game opposite a preempt")


WEAK_TWO_RULES = RuleChain('response to weak two', [
    Rule('game raise', weak_two_game_raise),
    Rule('feature ask', feature_ask),
    Rule('3NT', weak_two_notrump_game),
    Rule('forcing new suit', weak_two_new_suit),
    Rule('raise', weak_two_raise),
    Rule('pass', pass_weak),
])


def preempt_game_raise(s):
    if s.hcp >= 16 and support(s) >= 3 and trump(s) in MAJORS:
        return s.bid(4, trump(s), f"game ({support(s)}-card support, {s.hcp} HCP)")
    return None


def preempt_notrump_game(s):
    stopped = sum(1 for suit in _other_suits(s) if s.stopper(suit))
    if s.hcp >= 16 and stopped >= 2:
        return s.bid(3, 'NT', f"game ({s.hcp} HCP, {stopped} side suits stopped)")
    return None


PREEMPT_RULES = RuleChain('response to preempt', [
    Rule('game raise', preempt_game_raise),
    Rule('3NT', preempt_notrump_game),
    Rule('pass', pass_weak),
])


def chain_for(opening):
    if opening.is_notrump:
        return NOTRUMP_RULES if opening.level <= 2 else None
    if opening.token == '2C':
        return STRONG_CLUB_RULES
    if opening.level == 2:
        return WEAK_TWO_RULES
    if opening.level >= 3:
        return PREEMPT_RULES
    return MAJOR_RULES if opening.denomination in MAJORS else MINOR_RULES


def respond(s):
    """First response to partner's opening in a silent auction"""
    chain = chain_for(s.opening)
    if chain is None:
        return None
    return chain.decide(s)

