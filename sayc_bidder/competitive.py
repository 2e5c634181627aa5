"""
Competitive Bidding
Calls once the opponents have entered the auction: overcalls and defences
to their openings, balancing, responder and opener after interference, and
Lebensohl after interference over our 1NT
"""

from .advancer import ADVANCER_RULES, OVERCALLER_RULES, overcaller_second_call, they_opened_and_partner_entered
from .auction import OURS, THEIRS, Relation
from .calls import DOUBLE, MAJORS, REDOUBLE, Call
from .matcher import (interpret, match_cue_bid_raise, match_lebensohl, match_negative_double,
                      match_notrump_defense, match_reopening_double, match_stolen_bid_double,
                      match_support_double, match_two_suited, unbid_suits)
from .rebids import answer_stayman
from .responder import respond
from .rules import Rule, RuleChain, suit_name

ALL_SUITS = ('C', 'D', 'H', 'S')


def their_suit(s):
    contract = s.last_contract
    return contract.denomination if contract is not None and contract.is_suit else None


def _unbid(s):
    return unbid_suits(*s.their_suits())


def _natural_suit(s, minimum, exclude=()):
    """Longest suit of `minimum`+ cards that nobody on the other side has bid"""
    return s.longest([suit for suit in _unbid(s) if suit not in exclude], minimum=minimum)


# --- Direct overcalls of a one-level suit opening -----------------------------------------

def michaels(s):
    suit = s.opening.denomination
    result = s.match(match_two_suited, Call.contract(2, suit))
    if result.convention != 'michaels':
        return None
    shown = ' and '.join(suit_name(x) for x in result.suits)
    return s.bid(2, suit, f"Michaels cue-bid (5-5 in {shown}, {s.hcp} HCP)", 'michaels')


def unusual_notrump(s):
    if s.hcp < 6:
        return None
    result = s.match(match_two_suited, Call.parse('2NT'))
    if result.convention != 'unusual_nt':
        return None
    shown = ' and '.join(suit_name(x) for x in result.suits)
    return s.bid(2, 'NT', f"Unusual 2NT (5-5 in {shown}, {s.hcp} HCP)", 'unusual_nt')


def strong_takeout_double(s):
    if s.hcp < 17 or not s.enabled('takeout_doubles', 'competitive'):
        return None
    return s.double(f"Takeout double (strong, {s.hcp} HCP)", 'takeout_double')


def notrump_overcall(s):
    suit = their_suit(s)
    if s.balanced and 15 <= s.hcp <= 18 and suit and s.stopper(suit) and s.can_bid(1, 'NT'):
        return s.bid(1, 'NT', f"overcall (balanced {s.hcp} HCP, {suit_name(suit)} stopped)")
    return None


def natural_overcall(s):
    if not s.enabled('overcalls', 'competitive'):
        return None
    suit = _natural_suit(s, 5)
    if suit is None:
        return None
    level = s.cheapest_level(suit)
    if level > 2 or s.hcp > s.setting('overcalls', 'max_hcp', 'competitive', 16):
        return None
    key = 'one_level_min_hcp' if level == 1 else 'two_level_min_hcp'
    floor = s.setting('overcalls', key, 'competitive', 8 if level == 1 else 10)
    floor += s.vulnerability_adjustment('overcall')
    if s.hcp < floor or (level == 2 and s.hand.suit_quality(suit) < 2):
        return None
    return s.bid(level, suit, f"overcall ({s.length(suit)}-card suit, {s.hcp} HCP)", 'overcall')


def weak_jump_overcall(s):
    suit = _natural_suit(s, 6)
    if suit is None or not 6 <= s.hcp <= 10 or s.hand.suit_quality(suit) < 2:
        return None
    if s.cheapest_level(suit) + 1 > 3:
        return None
    reason = f"weak jump overcall ({s.length(suit)}-card suit, {s.hcp} HCP)"
    return s.cheapest(suit, reason, 'weak_jump_overcall', jump=1)


def takeout_double(s):
    """Shortness in their suits with support for the unbid ones"""
    if not s.enabled('takeout_doubles', 'competitive'):
        return None
    if s.hcp < s.setting('takeout_doubles', 'min_hcp', 'competitive', 12):
        return None
    if any(s.length(suit) > 2 for suit in s.their_suits()):
        return None
    supported = [suit for suit in _unbid(s) if s.length(suit) >= 3]
    needed = 2 if s.general('relaxed_takeout_doubles', False) else len(_unbid(s))
    if len(supported) < min(needed, len(_unbid(s))):
        return None
    return s.double(f"Takeout double (short in their suit, {s.hcp} HCP)", 'takeout_double')


def pass_over_opening(s):
    return s.pass_(f"no suitable action, {s.hcp} HCP")


OVERCALL_RULES = RuleChain('overcall', [
    Rule('michaels', michaels),
    Rule('unusual 2NT', unusual_notrump),
    Rule('strong takeout double', strong_takeout_double),
    Rule('1NT overcall', notrump_overcall),
    Rule('natural overcall', natural_overcall),
    Rule('weak jump overcall', weak_jump_overcall),
    Rule('takeout double', takeout_double),
    Rule('pass', pass_over_opening),
])


# --- Against their 1NT ----------------------------------------------------------------------

def strong_natural_over_notrump(s):
    if s.hcp < 15:
        return None
    suit = s.longest(ALL_SUITS, minimum=5)
    if suit is None:
        return None
    return s.cheapest(suit, f"overcall ({s.length(suit)}-card suit, {s.hcp} HCP)", 'overcall')


DEFENSE_ORDER = ['2S', '2H', '2D', '2C', 'X']


def notrump_defense(s):
    """Meckwell or DONT, whichever is enabled; Meckwell wins when both are"""
    if s.hcp < s.setting('overcalls', 'one_level_min_hcp', 'competitive', 8):
        return None
    for token in DEFENSE_ORDER:
        call = Call.parse(token)
        result = s.match(match_notrump_defense, call)
        if not result:
            continue
        meaning = result.detail.get('meaning', '').replace('_', ' ')
        shown = ' and '.join(suit_name(x) for x in result.suits)
        label = 'Meckwell' if result.convention == 'meckwell' else 'DONT'
        reason = f"{label} ({meaning}: {shown}, {s.hcp} HCP)"
        if call.is_double:
            return s.double(f"Double {reason}", result.convention)
        return s.bid(call.level, call.denomination, reason, result.convention)
    return None


def penalty_double_of_notrump(s):
    if s.hcp >= 15 and s.balanced:
        return s.double(f"Penalty double (balanced {s.hcp} HCP)", 'penalty_double')
    return None


VS_NOTRUMP_RULES = RuleChain('against 1NT', [
    Rule('strong natural', strong_natural_over_notrump),
    Rule('notrump defense', notrump_defense),
    Rule('penalty double', penalty_double_of_notrump),
    Rule('pass', pass_over_opening),
])


# --- Against their weak two or preempt -----------------------------------------------------------

def overcall_preempt(s):
    if s.hcp < 12:
        return None
    suit = _natural_suit(s, 5)
    if suit is None or s.cheapest_level(suit) > 4:
        return None
    return s.cheapest(suit, f"overcall ({s.length(suit)}-card suit, {s.hcp} HCP)", 'overcall')


def notrump_over_preempt(s):
    suit = their_suit(s)
    if suit is None or not s.balanced or not s.stopper(suit):
        return None
    if s.last_contract.level == 2 and 15 <= s.hcp <= 18:
        return s.bid(2, 'NT', f"overcall (balanced {s.hcp} HCP, {suit_name(suit)} stopped)")
    if s.hcp >= 16:
        return s.bid(3, 'NT', f"to play (balanced {s.hcp} HCP, {suit_name(suit)} stopped)")
    return None


def takeout_double_of_preempt(s):
    suit = their_suit(s)
    if suit is None or s.hcp < 13 or s.length(suit) > 2:
        return None
    return s.double(f"Takeout double (short in {suit_name(suit)}, {s.hcp} HCP)", 'takeout_double')


VS_PREEMPT_RULES = RuleChain('against a preempt', [
    Rule('natural overcall', overcall_preempt),
    Rule('notrump', notrump_over_preempt),
    Rule('takeout double', takeout_double_of_preempt),
    Rule('pass', pass_over_opening),
])


# --- Balancing ----------------------------------------------------------------------------

def balancing_notrump(s):
    suit = their_suit(s)
    contract = s.last_contract
    if suit is None or not s.balanced or not s.stopper(suit):
        return None
    if contract.level == 1 and 12 <= s.hcp <= 18:
        return s.bid(1, 'NT', f"balancing (balanced {s.hcp} HCP, {suit_name(suit)} stopped)")
    if contract.level == 2 and s.hcp >= 15:
        return s.bid(2, 'NT', f"balancing (balanced {s.hcp} HCP, {suit_name(suit)} stopped)")
    return None


def reopening_double(s):
    result = s.match(match_reopening_double, DOUBLE)
    if not result:
        return None
    shown = ' and '.join(suit_name(x) for x in result.suits)
    return s.double(f"Reopening double (support for {shown}, {s.hcp} HCP)", 'reopening_double')


def balancing_suit(s):
    suit = _natural_suit(s, 5)
    if suit is None:
        return None
    level = s.cheapest_level(suit)
    floor = {1: 7, 2: 10}.get(level)
    if floor is None or s.hcp < floor:
        return None
    return s.bid(level, suit, f"balancing ({s.length(suit)}-card suit, {s.hcp} HCP)", 'overcall')


BALANCING_RULES = RuleChain('balancing', [
    Rule('balancing notrump', balancing_notrump),
    Rule('reopening double', reopening_double),
    Rule('balancing suit', balancing_suit),
    Rule('pass', lambda s: s.pass_(f"nothing to reopen with, {s.hcp} HCP")),
])


# --- Responder after interference ---------------------------------------------------------------

def _partner_suit(s):
    return s.opening.denomination


def _support_needed(suit):
    return 3 if suit in MAJORS else 4


def redouble_takeout(s):
    if s.hcp >= 10:
        return s.redouble(f"Redouble (10+ HCP, {s.hcp} HCP)", 'redouble')
    return respond(s)


def one_level_major(s):
    if s.hcp < 6:
        return None
    for suit in ('S', 'H'):
        if suit in s.their_suits() or s.length(suit) < 5 or not s.can_bid(1, suit):
            continue
        return s.bid(1, suit, f"({s.length(suit)}-card suit, {s.hcp} HCP)")
    return None


def responder_support_double(s):
    result = s.match(match_support_double, DOUBLE)
    if not result:
        return None
    suit = result.suits[0]
    return s.double(f"Double (support double: exactly 4 {suit_name(suit)}, {s.hcp} HCP)", result.convention)


def cue_bid_raise(s):
    suit = their_suit(s)
    if suit is None:
        return None
    level = s.cheapest_level(suit)
    result = s.match(match_cue_bid_raise, Call.contract(level, suit))
    if not result:
        return None
    trump = result.suits[0]
    return s.bid(level, suit, f"cue-bid raise ({s.length(trump)} {suit_name(trump)}, {s.hcp} HCP)", 'cue_bid_raise')


def negative_double(s):
    result = s.match(match_negative_double, DOUBLE)
    if not result:
        return None
    shown = ' and '.join(suit_name(x) for x in result.suits)
    return s.double(f"Negative double ({shown}, {s.hcp} HCP)", 'negative_double')


def competitive_raise(s):
    suit = _partner_suit(s)
    if not 6 <= s.hcp <= 9 or s.length(suit) < _support_needed(suit):
        return None
    if s.cheapest_level(suit) > 3:
        return None
    return s.cheapest(suit, f"competitive raise ({s.length(suit)}-card support, {s.hcp} HCP)")


def notrump_with_stopper(s):
    suit = their_suit(s)
    if suit is None or not s.stopper(suit) or s.hcp < 8:
        return None
    level = 1 if s.hcp <= 10 else (2 if s.hcp <= 12 else 3)
    if not s.can_bid(level, 'NT'):
        return None
    return s.bid(level, 'NT', f"({s.hcp} HCP, {suit_name(suit)} stopped)")


def free_new_suit(s):
    if s.hcp < 10:
        return None
    suit = _natural_suit(s, 5, exclude=(_partner_suit(s),))
    if suit is None or s.cheapest_level(suit) > 2:
        return None
    return s.cheapest(suit, f"new suit ({s.length(suit)}-card suit, {s.hcp} HCP)")


def responder_pass(s):
    return s.pass_(f"nothing to add over the interference, {s.hcp} HCP")


RESPONDER_OVER_OVERCALL_RULES = RuleChain('responder over an overcall', [
    Rule('one-level major', one_level_major),
    Rule('support double', responder_support_double),
    Rule('cue-bid raise', cue_bid_raise),
    Rule('negative double', negative_double),
    Rule('competitive raise', competitive_raise),
    Rule('notrump', notrump_with_stopper),
    Rule('new suit', free_new_suit),
    Rule('pass', responder_pass),
])


# Lebensohl after RHO's two-level suit bid over partner's 1NT

LEBENSOHL_RELAY = Call.parse('2NT')


def lebensohl_active(s):
    return bool(s.match(match_lebensohl, LEBENSOHL_RELAY))


def _go_slow(s, suit):
    """With fast_denies the slow route (2NT first) shows a stopper; without it, denies one"""
    fast_denies = s.setting('lebensohl', 'fast_denies', 'notrump_defenses', True)
    return s.stopper(suit) == fast_denies


def _relay(s, reason):
    return s.bid(2, 'NT', f"Lebensohl relay ({reason})", 'lebensohl')


def lebensohl_stayman(s):
    suit = their_suit(s)
    majors = [m for m in MAJORS if m != suit and s.length(m) == 4]
    if s.hcp < 10 or not majors:
        return None
    if _go_slow(s, suit):
        return _relay(s, "slow cue-bid Stayman")
    return s.bid(3, suit, f"fast cue-bid Stayman (4 {suit_name(majors[0])}, {s.hcp} HCP)", 'lebensohl')


def lebensohl_game_force(s):
    if s.hcp < 10:
        return None
    suit = _natural_suit(s, 5)
    if suit is None or not s.can_bid(3, suit):
        return None
    return s.bid(3, suit, f"game forcing ({s.length(suit)}-card suit, {s.hcp} HCP)")


def lebensohl_notrump(s):
    suit = their_suit(s)
    if s.hcp < 10:
        return None
    if _go_slow(s, suit):
        return _relay(s, "slow 3NT")
    return s.bid(3, 'NT', f"fast 3NT ({s.hcp} HCP)", 'lebensohl')


def lebensohl_competitive(s):
    suit = their_suit(s)
    if s.hcp >= 10:
        return None
    own = s.longest([x for x in ALL_SUITS if x != suit and s.can_bid(2, x)], minimum=5)
    if own is None:
        return None
    return s.bid(2, own, f"competitive ({s.length(own)}-card suit, {s.hcp} HCP)")


def lebensohl_weak_relay(s):
    suit = their_suit(s)
    if s.hcp >= 10:
        return None
    own = s.longest([x for x in ALL_SUITS if x != suit and not s.can_bid(2, x)], minimum=5)
    if own is None:
        return None
    return _relay(s, f"weak with {s.length(own)} {suit_name(own)}")


def stolen_bid_double(s):
    if s.match(match_stolen_bid_double, DOUBLE):
        return s.double(f"Stolen-bid double (Stayman, {s.hcp} HCP)", 'stolen_bid_double')
    return None


LEBENSOHL_RULES = RuleChain('lebensohl', [
    Rule('stolen bid double', stolen_bid_double),
    Rule('cue-bid stayman', lebensohl_stayman),
    Rule('game forcing suit', lebensohl_game_force),
    Rule('3NT', lebensohl_notrump),
    Rule('competitive suit', lebensohl_competitive),
    Rule('weak relay', lebensohl_weak_relay),
    Rule('pass', responder_pass),
])


# Natural structure over interference of partner's 1NT when Lebensohl does not apply

def _notrump_doubled(s):
    _, last = s.context.last_action()
    return last is not None and last.is_double and s.context.last_contract_index == s.opening_index


def redouble_notrump_double(s):
    if not _notrump_doubled(s) or s.hcp < 8:
        return None
    return s.redouble(f"Redouble (8+ HCP, {s.hcp} HCP)", 'redouble')


def notrump_game_over_interference(s):
    suit = their_suit(s)
    if s.hcp < 10 or suit is None or not s.stopper(suit) or not s.can_bid(3, 'NT'):
        return None
    return s.bid(3, 'NT', f"({s.hcp} HCP, {suit_name(suit)} stopped)")


def escape_to_long_suit(s):
    """Weak hand runs to a five-card suit at the two level"""
    if s.hcp >= 10:
        return None
    suit = their_suit(s)
    own = s.longest([x for x in ALL_SUITS if x != suit and s.can_bid(2, x)], minimum=5)
    if own is None:
        return None
    return s.bid(2, own, f"natural ({s.length(own)}-card suit, {s.hcp} HCP)")


NOTRUMP_INTERFERENCE_RULES = RuleChain('over interference of 1NT', [
    Rule('redouble', redouble_notrump_double),
    Rule('game forcing suit', lebensohl_game_force),
    Rule('3NT', notrump_game_over_interference),
    Rule('escape', escape_to_long_suit),
    Rule('pass', responder_pass),
])


RESPONDER_COMPETITIVE_RULES = RuleChain('responder after interference', [
    Rule('lebensohl', LEBENSOHL_RULES,
         when=lambda s: s.opening.token == '1NT' and lebensohl_active(s)),
    Rule('stolen bid double', stolen_bid_double, when=lambda s: s.opening.token == '1NT'),
    Rule('over interference of 1NT', NOTRUMP_INTERFERENCE_RULES, when=lambda s: s.opening.token == '1NT'),
    Rule('redouble', redouble_takeout,
         when=lambda s: s.opening.is_suit and s.opening.level == 1
         and s.context.last_action()[1].is_double
         and s.context.last_contract_index == s.opening_index),
    Rule('over an overcall', RESPONDER_OVER_OVERCALL_RULES,
         when=lambda s: s.opening.is_suit and s.opening.level == 1),
    Rule('raise a preempt', competitive_raise, when=lambda s: s.opening.is_suit),
    Rule('pass', responder_pass),
])


# --- Opener after interference -----------------------------------------------------------------

def _partner_meaning(s):
    index, call = s.context.last_action(Relation.PARTNER)
    if index is None:
        return None, None
    return call, interpret(s.context, index, s.catalog)


def opener_support_double(s):
    for call in (DOUBLE, REDOUBLE):
        result = s.match(match_support_double, call)
        if not result:
            continue
        suit = result.suits[0]
        if call.is_double:
            return s.double(f"Double (support double: exactly 3 {suit_name(suit)})", result.convention)
        return s.redouble(f"Redouble (support redouble: exactly 3 {suit_name(suit)})", result.convention)
    return None


def answer_negative_double(s):
    call, meaning = _partner_meaning(s)
    if meaning is None or meaning.convention != 'negative_double':
        return None
    suit = their_suit(s)
    for major in ('H', 'S'):
        if major in meaning.suits and s.length(major) >= 4:
            jump = 1 if s.hcp >= 16 else 0
            return s.cheapest(major, f"({s.length(major)} {suit_name(major)} for the negative double)", jump=jump)
    if suit is not None and s.stopper(suit) and s.balanced:
        return s.cheapest('NT', f"({suit_name(suit)} stopped, {s.hcp} HCP)")
    own = s.opening.denomination
    for other in meaning.suits:
        if s.length(other) >= 4:
            return s.cheapest(other, f"({s.length(other)} {suit_name(other)} for the negative double)")
    return s.cheapest(own, f"rebid ({s.length(own)}-card suit)")


def answer_cue_bid_raise(s):
    call, meaning = _partner_meaning(s)
    if meaning is None or meaning.convention != 'cue_bid_raise':
        return None
    own = s.opening.denomination
    if s.hcp >= 15 and own in MAJORS:
        return s.bid(4, own, f"game opposite cue-bid raise ({s.hcp} HCP)")
    return s.cheapest(own, f"minimum opposite cue-bid raise ({s.hcp} HCP)")


def complete_lebensohl_relay(s):
    call, meaning = _partner_meaning(s)
    if meaning is None or meaning.convention != 'lebensohl':
        return None
    return s.bid(3, 'C', "completing the Lebensohl relay", 'lebensohl')


def answer_stolen_bid(s):
    call, meaning = _partner_meaning(s)
    if meaning is None or meaning.convention != 'stolen_bid_double':
        return None
    return answer_stayman(s)


def competitive_raise_of_partner(s):
    call, meaning = _partner_meaning(s)
    if call is None or not call.is_suit or meaning:
        return None
    suit = call.denomination
    if suit == s.opening.denomination or s.length(suit) < 4 or s.cheapest_level(suit) > 3:
        return None
    return s.cheapest(suit, f"competitive raise ({s.length(suit)}-card support)")


def rebid_long_suit(s):
    own = s.opening.denomination
    if not s.opening.is_suit or s.length(own) < 6 or s.cheapest_level(own) > 3:
        return None
    return s.cheapest(own, f"rebid ({s.length(own)}-card suit, {s.hcp} HCP)")


OPENER_COMPETITIVE_RULES = RuleChain('opener after interference', [
    Rule('support double', opener_support_double),
    Rule('negative double answer', answer_negative_double),
    Rule('cue-bid raise answer', answer_cue_bid_raise),
    Rule('lebensohl relay', complete_lebensohl_relay),
    Rule('stolen bid answer', answer_stolen_bid),
    Rule('competitive raise', competitive_raise_of_partner),
    Rule('rebid long suit', rebid_long_suit),
    Rule('pass', lambda s: s.pass_(f"nothing to add, {s.hcp} HCP")),
])


# --- Later rounds -----------------------------------------------------------------------------

def after_lebensohl_relay(s):
    """Responder's second call once opener has completed the relay"""
    index, mine = s.context.first_action(Relation.SELF)
    _, reply = s.context.last_action(Relation.PARTNER)
    if mine is None or mine.token != '2NT' or reply is None or reply.token != '3C':
        return None
    if interpret(s.context, index, s.catalog).convention != 'lebensohl':
        return None
    suit = s.their_suits()[0]
    if s.hcp >= 10:
        majors = [m for m in MAJORS if m != suit and s.length(m) == 4]
        if majors and s.can_bid(3, suit):
            return s.bid(3, suit, f"slow cue-bid Stayman (4-card major, {s.hcp} HCP)", 'lebensohl')
        return s.bid(3, 'NT', f"slow 3NT ({s.hcp} HCP)", 'lebensohl')
    own = s.longest([x for x in ALL_SUITS if x != suit], minimum=5)
    if own is None or own == 'C':
        return s.pass_("playing in 3C")
    return s.cheapest(own, f"sign off ({s.length(own)}-card suit)")


LATER_RULES = RuleChain('competitive continuation', [
    Rule('after lebensohl relay', after_lebensohl_relay),
])


# --- Stage selection ----------------------------------------------------------------------------

def in_balancing_seat(s):
    """Their contract followed by two passes with our side silent"""
    index = s.context.last_contract_index
    if index is None or s.context.relation(index) not in THEIRS or s.context.actions(*OURS):
        return False
    trailing = s.context.calls_since(index)
    return len(trailing) == 2 and all(call.is_pass for call in trailing)


def they_opened(s):
    return s.opening_relation in THEIRS


def our_side_silent(s):
    return not s.context.actions(*OURS)


def direct_over_their_notrump(s):
    return (they_opened(s) and our_side_silent(s) and s.opening.token == '1NT'
            and s.context.last_contract_index == s.opening_index)


COMPETITIVE_RULES = RuleChain('competitive', [
    Rule('balancing', BALANCING_RULES, when=in_balancing_seat),
    Rule('against 1NT', VS_NOTRUMP_RULES, when=direct_over_their_notrump),
    Rule('overcall', OVERCALL_RULES,
         when=lambda s: they_opened(s) and our_side_silent(s) and s.opening.is_suit and s.opening.level == 1),
    Rule('against a preempt', VS_PREEMPT_RULES, when=lambda s: they_opened(s) and our_side_silent(s)),
    Rule('responder', RESPONDER_COMPETITIVE_RULES,
         when=lambda s: s.opening_relation is Relation.PARTNER and not s.my_actions),
    Rule('opener', OPENER_COMPETITIVE_RULES,
         when=lambda s: s.opening_relation is Relation.SELF and len(s.my_actions) == 1),
    Rule('advancer', ADVANCER_RULES, when=they_opened_and_partner_entered),
    Rule('overcaller', OVERCALLER_RULES, when=overcaller_second_call),
    Rule('continuation', LATER_RULES),
])
