"""
Convention Matcher
Recognizes whether a call, in a given auction, is an instance of a named
convention

Every matcher has the shape ``match_x(context, call, catalog, hand=None)``
where `context` is the auction as the caller saw it before making `call`.
Without a hand only the auction shape is checked (used to read partner's and
the opponents' calls); with a hand the shape requirements of the convention
are checked too (used before proposing a call). Matchers never mutate
anything.
"""

import logging

from .auction import OURS, THEIRS, Relation
from .calls import MAJORS, MINORS, Call, as_call, is_jump, outranks

logger = logging.getLogger(__name__)

SUIT_LADDER = ['C', 'D', 'H', 'S']


class MatchResult:
    """Outcome of a matcher: the convention name (None for no match) and the suits shown"""

    def __init__(self, convention=None, suits=(), **detail):
        self.convention = convention
        self.suits = tuple(suits)
        self.detail = detail

    @property
    def matched(self):
        return self.convention is not None

    def __bool__(self):
        return self.matched

    def __eq__(self, other):
        if not isinstance(other, MatchResult):
            return NotImplemented
        return (self.convention, self.suits, self.detail) == (other.convention, other.suits, other.detail)

    def __repr__(self):
        if not self.matched:
            return "MatchResult(no match)"
        return f"MatchResult({self.convention!r}, suits={self.suits!r}, {self.detail!r})"


NO_MATCH = MatchResult()


def other_major(suit):
    return 'H' if suit == 'S' else 'S'


def unbid_suits(*bid):
    """Suits (low to high) not among `bid`"""
    return [suit for suit in SUIT_LADDER if suit not in bid]


def _partner_opened(context, *denominations, level=None):
    """Index of partner's opening when it matches; None otherwise"""
    index = context.opening_index
    if index is None or context.relation(index) is not Relation.PARTNER:
        return None
    opening = context.calls[index]
    if denominations and opening.denomination not in denominations:
        return None
    if level is not None and opening.level != level:
        return None
    return index


def _uncontested_first_response(context, opening_index):
    """Partner opened and nobody else has acted since; we have not acted either"""
    return (context.no_interference(opening_index)
            and not context.actions(Relation.SELF))


# --- Ace asking -----------------------------------------------------------

def find_trump_suit(context):
    """
    Suit agreed by our side: a suit bid twice by the partnership, or a jump
    to four of a major after other suit bidding. None when nothing is agreed.
    """
    suit_bids = [call for _, call in context.contracts(*OURS) if call.is_suit]
    if len(suit_bids) < 2:
        return None
    last = suit_bids[-1]
    if any(call.denomination == last.denomination for call in suit_bids[:-1]):
        return last.denomination
    if last.level == 4 and last.denomination in MAJORS:
        return last.denomination
    return None


def match_ace_ask(context, call, catalog, hand=None):
    """Gerber (4C over our NT), Gerber king ask (5C), Blackwood / RKCB (4NT over a suit)"""
    call = as_call(call)
    if call is None or not call.is_contract:
        return NO_MATCH
    prior = context.last_contract
    prior_index = context.last_contract_index
    if prior is None:
        return NO_MATCH

    if call.token == '4C' and catalog.is_enabled('gerber', 'ace_asking'):
        if (prior.is_notrump and context.relation(prior_index).is_ours
                and find_trump_suit(context) != 'C'):
            return MatchResult('gerber')

    if (call.token == '5C' and catalog.is_enabled('gerber', 'ace_asking')
            and catalog.get_setting('gerber', 'continuations', 'ace_asking', False)):
        ask_index, ask = context.last_action(Relation.SELF)
        if ask is not None and ask.token == '4C':
            replies = context.actions_since(ask_index)
            responses = catalog.get_setting('gerber', 'responses_map', 'ace_asking', [])
            if (len(replies) == 1 and context.relation(replies[0][0]) is Relation.PARTNER
                    and replies[0][1].token in responses
                    and match_ace_ask(context.before(ask_index), ask, catalog).convention == 'gerber'):
                return MatchResult('gerber_kings')

    if call.token == '4NT' and catalog.is_enabled('blackwood', 'ace_asking'):
        if prior.is_suit and context.relation(prior_index).is_ours:
            variant = catalog.get_setting('blackwood', 'variant', 'ace_asking', 'classic')
            if variant == 'rkcb':
                trump = find_trump_suit(context)
                if trump is not None:
                    return MatchResult('blackwood_rkcb', (trump,))
                return MatchResult('blackwood_classic', (prior.denomination,))
            return MatchResult(f'blackwood_{variant}', (prior.denomination,))
    return NO_MATCH


def count_keycards(hand, trump):
    """(keycards, trump queen held): four aces plus the trump king"""
    keycards = hand.count_aces() + (1 if hand.has_card(trump, 'K') else 0)
    return keycards, hand.has_card(trump, 'Q')


GERBER_KING_STEPS = ['5D', '5H', '5S', '5NT']
CLASSIC_BLACKWOOD_STEPS = ['5C', '5D', '5H', '5S']


def ace_ask_response(result, hand, catalog):
    """The step response to a recognized ace ask, as a Call"""
    convention = result.convention
    if convention == 'gerber':
        responses = catalog.get_setting('gerber', 'responses_map', 'ace_asking') or ['4D', '4H', '4S', '4NT']
        aces = hand.count_aces()
        return Call.parse(responses[aces if aces < 4 else 0])
    if convention == 'gerber_kings':
        kings = hand.count_kings()
        return Call.parse(GERBER_KING_STEPS[kings if kings < 4 else 0])
    if convention == 'blackwood_rkcb':
        keycards, queen = count_keycards(hand, result.suits[0])
        order = catalog.get_setting('blackwood', 'responses', 'ace_asking', '1430')
        low, high = ((1, 4), (0, 3)) if order != '3014' else ((0, 3), (1, 4))
        if keycards in low:
            return Call.parse('5C')
        if keycards in high:
            return Call.parse('5D')
        if keycards == 2:
            return Call.parse('5S' if queen else '5H')
        return Call.parse('5NT')
    if convention == 'blackwood_classic':
        aces = hand.count_aces()
        return Call.parse(CLASSIC_BLACKWOOD_STEPS[aces if aces < 4 else 0])
    return None


def decode_ace_response(result, response, catalog):
    """
    Counts a response can show for the asker: (possible counts, queen flag or None).
    Returns None when `response` is not a step of the ask.
    """
    token = as_call(response).token
    convention = result.convention
    if convention == 'gerber':
        responses = catalog.get_setting('gerber', 'responses_map', 'ace_asking') or ['4D', '4H', '4S', '4NT']
        steps = list(responses)
    elif convention == 'gerber_kings':
        steps = GERBER_KING_STEPS
    elif convention == 'blackwood_classic':
        steps = CLASSIC_BLACKWOOD_STEPS
    elif convention == 'blackwood_rkcb':
        order = catalog.get_setting('blackwood', 'responses', 'ace_asking', '1430')
        table = {
            '5C': ((1, 4) if order != '3014' else (0, 3), None),
            '5D': ((0, 3) if order != '3014' else (1, 4), None),
            '5H': ((2,), False),
            '5S': ((2,), True),
            '5NT': ((1, 3), True),
        }
        return table.get(token)
    else:
        return None
    if token not in steps:
        return None
    step = steps.index(token)
    return ((0, 4) if step == 0 else (step,)), None


# --- Two-suited overcalls ---------------------------------------------------

def _direct_over_opening(context):
    """Opponents opened at the one level in a suit and it is still the last contract"""
    index = context.opening_index
    if index is None or context.relation(index) not in THEIRS:
        return None
    opening = context.calls[index]
    if not opening.is_suit or opening.level != 1 or context.last_contract_index != index:
        return None
    return index


def match_two_suited(context, call, catalog, hand=None):
    """Michaels cue-bid or Unusual 2NT directly over a one-level opening"""
    call = as_call(call)
    if call is None or not call.is_contract or call.level != 2:
        return NO_MATCH
    index = _direct_over_opening(context)
    if index is None:
        return NO_MATCH
    opening = context.calls[index]

    if call.denomination == opening.denomination and catalog.is_enabled('michaels', 'competitive'):
        if catalog.get_setting('michaels', 'direct_only', 'competitive', True) and not context.no_interference(index):
            return NO_MATCH
        if opening.denomination in MINORS:
            suits = ('H', 'S')
        else:
            suits = (other_major(opening.denomination),)
        if hand is None:
            return MatchResult('michaels', suits)
        strength = catalog.get_setting('michaels', 'strength', 'competitive', 'wide_range')
        if hand.hcp < (6 if strength == 'wide_range' else 10):
            return NO_MATCH
        if len(suits) == 2:
            if hand.length('H') >= 5 and hand.length('S') >= 5:
                return MatchResult('michaels', suits)
            return NO_MATCH
        minor = 'C' if hand.length('C') >= 5 else ('D' if hand.length('D') >= 5 else None)
        if hand.length(suits[0]) >= 5 and minor is not None:
            return MatchResult('michaels', (suits[0], minor))
        return NO_MATCH

    if call.denomination == 'NT' and catalog.is_enabled('unusual_nt', 'notrump_defenses'):
        if catalog.get_setting('unusual_nt', 'direct', 'notrump_defenses', True) and not context.no_interference(index):
            return NO_MATCH
        if (opening.denomination in MINORS
                and not catalog.get_setting('unusual_nt', 'over_minors', 'notrump_defenses', False)):
            return NO_MATCH
        if (context.is_passed_hand(Relation.SELF)
                and not catalog.get_setting('unusual_nt', 'passed_hand', 'notrump_defenses', False)):
            return NO_MATCH
        suits = tuple(unbid_suits(opening.denomination)[:2])
        if hand is not None and any(hand.length(suit) < 5 for suit in suits):
            return NO_MATCH
        return MatchResult('unusual_nt', suits)
    return NO_MATCH


# --- Defences to their 1NT ------------------------------------------------

def match_notrump_defense(context, call, catalog, hand=None):
    """
    Meckwell (when enabled) or DONT directly over the opponents' 1NT opening.

    Meckwell: X = a major plus a minor, 2C = a one-suiter, 2D = both majors.
    DONT: X = a minor one-suiter, 2C = clubs + higher, 2D = diamonds + a major,
    2H = both majors (or six hearts), 2S = spades.
    """
    call = as_call(call)
    index = context.opening_index
    if (call is None or index is None or context.relation(index) not in THEIRS
            or context.calls[index].token != '1NT' or context.last_contract_index != index):
        return NO_MATCH
    if call.is_contract and call.level != 2:
        return NO_MATCH
    token = call.token
    lengths = hand.get_distribution() if hand is not None else None

    if catalog.is_enabled('meckwell', 'strong_club_defenses'):
        if token == 'X':
            if lengths is None:
                return MatchResult('meckwell', (), meaning='major_minor')
            major = max(MAJORS, key=lambda s: (lengths[s], s == 'S'))
            minor = max(MINORS, key=lambda s: (lengths[s], s == 'D'))
            if lengths[major] < 4 or lengths[minor] < 4 or lengths[major] + lengths[minor] < 9:
                return NO_MATCH
            return MatchResult('meckwell', (major, minor), meaning='major_minor')
        if token == '2C':
            if lengths is None:
                return MatchResult('meckwell', (), meaning='one_suiter')
            long_suits = [s for s in SUIT_LADDER if lengths[s] >= 6]
            if not long_suits:
                return NO_MATCH
            return MatchResult('meckwell', (long_suits[-1],), meaning='one_suiter')
        if token == '2D':
            if lengths is not None and not (
                    (lengths['H'] >= 5 and lengths['S'] >= 4) or (lengths['S'] >= 5 and lengths['H'] >= 4)):
                return NO_MATCH
            return MatchResult('meckwell', ('H', 'S'), meaning='majors')
        return NO_MATCH

    if not catalog.is_enabled('dont', 'notrump_defenses'):
        return NO_MATCH
    if token == 'X':
        if lengths is None:
            return MatchResult('dont', (), meaning='one_suiter')
        minors = [s for s in MINORS if lengths[s] >= 6]
        if not minors or any(lengths[s] >= 4 for s in SUIT_LADDER if s != minors[0]):
            return NO_MATCH
        return MatchResult('dont', (minors[0],), meaning='one_suiter')
    if token == '2S':
        if lengths is not None and lengths['S'] < 6:
            return NO_MATCH
        return MatchResult('dont', ('S',), meaning='natural')
    anchor = call.denomination if call.is_suit else None
    if anchor not in ('C', 'D', 'H'):
        return NO_MATCH
    if lengths is None:
        return MatchResult('dont', ('H', 'S') if anchor == 'H' else (anchor,), meaning='two_suiter')
    if anchor == 'H' and lengths['H'] >= 6 and lengths['S'] < 4:
        return MatchResult('dont', ('H',), meaning='natural')
    higher = [s for s in SUIT_LADDER[SUIT_LADDER.index(anchor) + 1:] if lengths[s] >= 4]
    if anchor == 'D':
        higher = [s for s in higher if s in MAJORS]
    if lengths[anchor] >= 4 and higher and lengths[anchor] + lengths[higher[-1]] >= 9:
        return MatchResult('dont', (anchor, higher[-1]), meaning='two_suiter')
    return NO_MATCH


# --- Competitive doubles ------------------------------------------------------

def _single_overcall(context, opening_index):
    """(index, call) of the one opposing action after partner's opening, else (None, None)"""
    theirs = context.actions_since(opening_index, *THEIRS)
    if len(theirs) != 1 or context.actions_since(opening_index, Relation.PARTNER):
        return None, None
    return theirs[0]


def match_negative_double(context, call, catalog, hand=None):
    """Responder's double of an overcall of partner's one-level suit opening"""
    call = as_call(call)
    if call is None or not call.is_double or not catalog.is_enabled('negative_doubles', 'competitive'):
        return NO_MATCH
    opening_index = _partner_opened(context, *SUIT_LADDER, level=1)
    if opening_index is None or context.actions(Relation.SELF):
        return NO_MATCH
    overcall_index, overcall = _single_overcall(context, opening_index)
    if overcall is None or not overcall.is_suit or overcall_index != context.last_contract_index:
        return NO_MATCH
    if overcall.level > catalog.get_setting('negative_doubles', 'thru_level', 'competitive', 2):
        return NO_MATCH
    bid = (context.calls[opening_index].denomination, overcall.denomination)
    shown = [s for s in unbid_suits(*bid) if s in MAJORS] or [s for s in unbid_suits(*bid) if s in MINORS]
    if hand is None:
        return MatchResult('negative_double', shown, level=overcall.level)
    floor = catalog.get_setting('negative_doubles', 'min_hcp', 'competitive', 6) + 2 * (overcall.level - 1)
    if hand.hcp < floor:
        return NO_MATCH
    long_enough = [s for s in shown if hand.length(s) >= 4]
    if len(shown) == 2 and shown[0] in MAJORS and overcall.level >= 2:
        ok = bool(long_enough)
    else:
        ok = len(long_enough) == len(shown)
    if not ok:
        return NO_MATCH
    return MatchResult('negative_double', shown, level=overcall.level)


def _within_support_ceiling(contract, catalog):
    ceiling = catalog.get_setting('support_doubles', 'thru', 'competitive', '2S')
    return not outranks(contract, ceiling)


def match_support_double(context, call, catalog, hand=None):
    """
    Support double / redouble.

    Opener: partner bid a new suit, the opponents competed at or below the
    ceiling, opener shows exactly three-card support. Responder: partner
    opened a major, RHO overcalled at or below the ceiling, responder shows
    exactly four trumps and limit-raise values.
    """
    call = as_call(call)
    if (call is None or not (call.is_double or call.is_redouble)
            or not catalog.is_enabled('support_doubles', 'competitive')):
        return NO_MATCH
    opening_index = context.opening_index
    if opening_index is None:
        return NO_MATCH
    opening = context.calls[opening_index]
    last_index = context.last_contract_index

    if context.relation(opening_index) is Relation.SELF and opening.is_suit:
        partner_index, partner_bid = context.first_action(Relation.PARTNER)
        if partner_bid is None or not partner_bid.is_suit or partner_bid.denomination == opening.denomination:
            return NO_MATCH
        if len(context.actions(Relation.SELF)) != 1 or context.actions_since(partner_index, Relation.PARTNER):
            return NO_MATCH
        suit = partner_bid.denomination
        if call.is_redouble:
            last_index_any, last_any = context.last_action()
            if not (last_any.is_double and last_index == partner_index
                    and context.relation(last_index_any) is Relation.RHO):
                return NO_MATCH
            convention = 'support_redouble'
        else:
            if context.relation(last_index) not in THEIRS or last_index < partner_index:
                return NO_MATCH
            if not _within_support_ceiling(context.calls[last_index], catalog):
                return NO_MATCH
            convention = 'support_double'
        if hand is not None and hand.length(suit) != 3:
            return NO_MATCH
        return MatchResult(convention, (suit,), role='opener')

    if call.is_double and context.relation(opening_index) is Relation.PARTNER and opening.token in ('1H', '1S'):
        if context.actions(Relation.SELF):
            return NO_MATCH
        overcall_index, overcall = _single_overcall(context, opening_index)
        if overcall is None or not overcall.is_contract or overcall_index != last_index:
            return NO_MATCH
        if context.relation(overcall_index) is not Relation.RHO or not _within_support_ceiling(overcall, catalog):
            return NO_MATCH
        suit = opening.denomination
        if hand is not None and (hand.length(suit) != 4 or not 10 <= hand.hcp <= 12):
            return NO_MATCH
        return MatchResult('support_double', (suit,), role='responder')
    return NO_MATCH


def match_responsive_double(context, call, catalog, hand=None):
    """Double after partner doubled or overcalled their opening and RHO bid on"""
    call = as_call(call)
    if call is None or not call.is_double or not catalog.is_enabled('responsive_doubles', 'competitive'):
        return NO_MATCH
    opening_index = context.opening_index
    if opening_index is None or context.relation(opening_index) is not Relation.LHO:
        return NO_MATCH
    opening = context.calls[opening_index]
    if not opening.is_suit or context.actions(Relation.SELF):
        return NO_MATCH
    partner = context.actions_since(opening_index, Relation.PARTNER)
    if len(partner) != 1:
        return NO_MATCH
    partner_index, partner_call = partner[0]
    if not (partner_call.is_double or partner_call.is_suit):
        return NO_MATCH
    rho = context.actions_since(partner_index, *THEIRS)
    if len(rho) != 1 or context.relation(rho[0][0]) is not Relation.RHO or not rho[0][1].is_suit:
        return NO_MATCH
    rho_bid = rho[0][1]
    if rho_bid.level > catalog.get_setting('responsive_doubles', 'thru_level', 'competitive', 3):
        return NO_MATCH
    bid = [opening.denomination, rho_bid.denomination]
    if partner_call.is_suit:
        bid.append(partner_call.denomination)
    shown = unbid_suits(*bid)
    if hand is None:
        return MatchResult('responsive_double', shown)
    if hand.hcp < catalog.get_setting('responsive_doubles', 'min_strength', 'competitive', 8):
        return NO_MATCH
    long_suits = [s for s in shown if hand.length(s) >= 4]
    if len(long_suits) < min(2, len(shown)) or not shown:
        return NO_MATCH
    return MatchResult('responsive_double', long_suits)


def match_reopening_double(context, call, catalog, hand=None):
    """Balancing double after their suit contract is followed by two passes"""
    call = as_call(call)
    if call is None or not call.is_double or not catalog.is_enabled('reopening_doubles', 'competitive'):
        return NO_MATCH
    index = context.last_contract_index
    if index is None or context.relation(index) not in THEIRS:
        return NO_MATCH
    contract = context.calls[index]
    trailing = context.calls_since(index)
    if not contract.is_suit or len(trailing) != 2 or not all(c.is_pass for c in trailing):
        return NO_MATCH
    if context.actions(*OURS):
        return NO_MATCH
    others = unbid_suits(contract.denomination)
    if hand is None:
        return MatchResult('reopening_double', others, level=contract.level)
    floor = catalog.get_setting('reopening_doubles', 'min_hcp', 'competitive', 8) + 2 * (contract.level - 1)
    if hand.hcp < floor or hand.length(contract.denomination) > 2:
        return NO_MATCH
    length = [s for s in others if hand.length(s) >= 3]
    if len(length) < 2:
        return NO_MATCH
    return MatchResult('reopening_double', length, level=contract.level)


def match_cue_bid_raise(context, call, catalog, hand=None):
    """Responder's cheapest bid of the overcaller's suit, showing a limit raise or better"""
    call = as_call(call)
    if call is None or not call.is_suit or not catalog.is_enabled('cue_bid_raises', 'competitive'):
        return NO_MATCH
    opening_index = _partner_opened(context, *SUIT_LADDER, level=1)
    if opening_index is None or context.actions(Relation.SELF):
        return NO_MATCH
    overcall_index, overcall = _single_overcall(context, opening_index)
    if overcall is None or not overcall.is_suit or overcall_index != context.last_contract_index:
        return NO_MATCH
    if call.denomination != overcall.denomination or is_jump(call, overcall) != 0:
        return NO_MATCH
    trump = context.calls[opening_index].denomination
    if hand is not None:
        if hand.length(trump) < (3 if trump in MAJORS else 4) or hand.hcp < 10:
            return NO_MATCH
    return MatchResult('cue_bid_raise', (trump,))


# --- Uncontested response structures --------------------------------------------

NOTRUMP_RESPONSES = {
    1: {
        '2C': ('stayman', (), 'stayman'),
        '2D': ('jacoby_transfer', ('H',), 'jacoby_transfers'),
        '2H': ('jacoby_transfer', ('S',), 'jacoby_transfers'),
        '2S': ('minor_transfer', ('C',), 'minor_suit_transfers'),
        '2NT': ('minor_transfer', ('D',), 'minor_suit_transfers'),
        '4D': ('texas_transfer', ('H',), 'texas_transfers'),
        '4H': ('texas_transfer', ('S',), 'texas_transfers'),
    },
    2: {
        '3C': ('stayman', (), 'stayman'),
        '3D': ('jacoby_transfer', ('H',), 'jacoby_transfers'),
        '3H': ('jacoby_transfer', ('S',), 'jacoby_transfers'),
        '4D': ('texas_transfer', ('H',), 'texas_transfers'),
        '4H': ('texas_transfer', ('S',), 'texas_transfers'),
    },
}


def match_notrump_response(context, call, catalog, hand=None):
    """Stayman and the transfer family over partner's 1NT / 2NT opening"""
    call = as_call(call)
    opening_index = _partner_opened(context, 'NT')
    if call is None or opening_index is None or not _uncontested_first_response(context, opening_index):
        return NO_MATCH
    entry = NOTRUMP_RESPONSES.get(context.calls[opening_index].level, {}).get(call.token)
    if entry is None:
        if call.token == '4NT':
            return MatchResult('quantitative')
        return NO_MATCH
    convention, suits, switch = entry
    if not catalog.is_enabled(switch, 'notrump_responses'):
        return NO_MATCH
    return MatchResult(convention, suits)


def match_drury(context, call, catalog, hand=None):
    """2C by a passed hand over partner's third/fourth seat major opening"""
    call = as_call(call)
    if call is None or call.token != '2C' or not catalog.is_enabled('drury', 'responses'):
        return NO_MATCH
    opening_index = _partner_opened(context, *MAJORS, level=1)
    if opening_index is None or not _uncontested_first_response(context, opening_index):
        return NO_MATCH
    if not context.is_passed_hand(Relation.SELF):
        return NO_MATCH
    trump = context.calls[opening_index].denomination
    if hand is not None and (hand.length(trump) < 3 or not 10 <= hand.hcp <= 12):
        return NO_MATCH
    return MatchResult('drury', (trump,))


def match_jacoby_2nt(context, call, catalog, hand=None):
    call = as_call(call)
    if call is None or call.token != '2NT' or not catalog.is_enabled('jacoby_2nt', 'responses'):
        return NO_MATCH
    opening_index = _partner_opened(context, *MAJORS, level=1)
    if (opening_index is None or not _uncontested_first_response(context, opening_index)
            or context.is_passed_hand(Relation.SELF)):
        return NO_MATCH
    trump = context.calls[opening_index].denomination
    if hand is not None and (hand.length(trump) < 4 or hand.hcp < 13):
        return NO_MATCH
    return MatchResult('jacoby_2nt', (trump,))


def match_splinter(context, call, catalog, hand=None):
    """Double jump in a new suit over partner's major: shortness with 4+ trumps"""
    call = as_call(call)
    if call is None or not call.is_suit or not catalog.is_enabled('splinter_bids', 'responses'):
        return NO_MATCH
    opening_index = _partner_opened(context, *MAJORS, level=1)
    if opening_index is None or not _uncontested_first_response(context, opening_index):
        return NO_MATCH
    opening = context.calls[opening_index]
    if call.denomination == opening.denomination or is_jump(call, opening) != 2:
        return NO_MATCH
    if hand is not None and (hand.length(opening.denomination) < 4 or hand.length(call.denomination) > 1
                             or hand.hcp < 13):
        return NO_MATCH
    return MatchResult('splinter', (call.denomination,), trump=opening.denomination)


def match_bergen(context, call, catalog, hand=None):
    """3C (constructive) and 3D (limit) raises of partner's major"""
    call = as_call(call)
    if call is None or call.token not in ('3C', '3D') or not catalog.is_enabled('bergen_raises', 'responses'):
        return NO_MATCH
    opening_index = _partner_opened(context, *MAJORS, level=1)
    if opening_index is None or not _uncontested_first_response(context, opening_index):
        return NO_MATCH
    trump = context.calls[opening_index].denomination
    convention = 'bergen_constructive' if call.token == '3C' else 'bergen_limit'
    if hand is not None:
        low, high = (7, 10) if call.token == '3C' else (11, 12)
        if hand.length(trump) < 4 or not low <= hand.hcp <= high:
            return NO_MATCH
    return MatchResult(convention, (trump,))


def match_feature_ask(context, call, catalog, hand=None):
    """2NT over partner's weak two asks for an outside feature"""
    call = as_call(call)
    if call is None or call.token != '2NT':
        return NO_MATCH
    opening_index = _partner_opened(context, 'D', 'H', 'S', level=2)
    if opening_index is None or not _uncontested_first_response(context, opening_index):
        return NO_MATCH
    return MatchResult('feature_ask', (context.calls[opening_index].denomination,))


def _notrump_interference(context):
    """(index, call) of RHO's suit bid directly over partner's 1NT; (None, None) otherwise"""
    opening_index = _partner_opened(context, 'NT', level=1)
    if opening_index is None or context.actions(Relation.SELF):
        return None, None
    overcall_index, overcall = _single_overcall(context, opening_index)
    if overcall is None or not overcall.is_suit or overcall.level != 2:
        return None, None
    if context.relation(overcall_index) is not Relation.RHO or context.last_contract_index != overcall_index:
        return None, None
    return overcall_index, overcall


def match_lebensohl(context, call, catalog, hand=None):
    """2NT relay after RHO's two-level suit interference over partner's 1NT"""
    call = as_call(call)
    if (call is None or call.token != '2NT' or not catalog.is_enabled('lebensohl', 'notrump_defenses')
            or not catalog.get_setting('lebensohl', 'after_interference', 'notrump_defenses', True)):
        return NO_MATCH
    _, overcall = _notrump_interference(context)
    if overcall is None:
        return NO_MATCH
    return MatchResult('lebensohl', (overcall.denomination,))


def match_stolen_bid_double(context, call, catalog, hand=None):
    """Double of RHO's 2C over partner's 1NT stands in for Stayman"""
    call = as_call(call)
    if (call is None or not call.is_double
            or not catalog.get_general('systems_on_over_1nt_interference.stolen_bid_double', False)):
        return NO_MATCH
    _, overcall = _notrump_interference(context)
    if overcall is None or overcall.token != '2C':
        return NO_MATCH
    if hand is not None and not (hand.hcp >= 8 and any(hand.length(s) == 4 for s in MAJORS)):
        return NO_MATCH
    return MatchResult('stolen_bid_double', ())


# Order matters: the first matcher to recognize a call names it
OBSERVED_CALL_MATCHERS = [
    match_ace_ask,
    match_notrump_response,
    match_drury,
    match_jacoby_2nt,
    match_splinter,
    match_bergen,
    match_feature_ask,
    match_lebensohl,
    match_stolen_bid_double,
    match_two_suited,
    match_notrump_defense,
    match_support_double,
    match_negative_double,
    match_responsive_double,
    match_reopening_double,
    match_cue_bid_raise,
]


def interpret(context, index, catalog):
    """Name the convention (if any) behind the call at `index`, judged on auction shape only"""
    seen = context.before(index)
    call = context.calls[index]
    for matcher in OBSERVED_CALL_MATCHERS:
        result = matcher(seen, call, catalog)
        if result:
            logger.debug(f"{call.token} at {index} read as {result.convention}")
            return result
    return NO_MATCH
