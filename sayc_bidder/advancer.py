"""
Advancer
Partner of the player who entered over the opponents' opening, and that
player's own second call
"""

from .auction import THEIRS, Relation
from .calls import DOUBLE, MAJORS, MINORS
from .matcher import interpret, match_responsive_double, unbid_suits
from .rules import Rule, RuleChain, suit_name

SUIT_LADDER = ('C', 'D', 'H', 'S')


def _partner_entry(s):
    """(index, call, meaning) of partner's first action over their opening"""
    index, call = s.context.first_action(Relation.PARTNER)
    if index is None:
        return None, None, None
    return index, call, interpret(s.context, index, s.catalog)


def _their_opening_suit(s):
    return s.opening.denomination if s.opening.is_suit else None


def _doubled_suit(s):
    return s.last_contract.denomination


def partner_entered_with(*conventions):
    def check(s):
        _, _, meaning = _partner_entry(s)
        return meaning is not None and meaning.convention in conventions
    return check


def partner_doubled(s):
    index, call, meaning = _partner_entry(s)
    if call is None or not call.is_double or meaning:
        return False
    doubled = s.context.before(index).last_contract
    return doubled is not None and doubled.is_suit


def partner_overcalled(s):
    _, call, meaning = _partner_entry(s)
    return call is not None and call.is_suit and not meaning


def rho_passed(s):
    """Partner's action is still the last one"""
    index, _, _ = _partner_entry(s)
    last_index, _ = s.context.last_action()
    return index == last_index


# --- After partner's takeout double ---------------------------------------------------------

def penalty_pass(s):
    suit = _doubled_suit(s)
    if s.last_contract.level <= 2 and s.length(suit) >= 5 and s.hand.suit_quality(suit) >= 2:
        return s.pass_(f"converting to penalties ({s.length(suit)} {suit_name(suit)})")
    return None


def advancer_cue_bid(s):
    if s.hcp < 12:
        return None
    suit = _doubled_suit(s)
    return s.cheapest(suit, f"cue-bid (game forcing, {s.hcp} HCP)", 'cue_bid')


def advancer_notrump(s):
    suit = _doubled_suit(s)
    if not s.stopper(suit) or not 6 <= s.hcp <= 12:
        return None
    jump = 1 if s.hcp >= 11 else 0
    return s.cheapest('NT', f"({s.hcp} HCP, {suit_name(suit)} stopped)", jump=jump)


def jump_in_major(s):
    if not 9 <= s.hcp <= 11:
        return None
    their = s.their_suits()
    for major in ('S', 'H'):
        if major not in their and s.length(major) >= 4:
            return s.cheapest(major, f"jump ({s.length(major)} {suit_name(major)}, {s.hcp} HCP)", jump=1)
    return None


def best_unbid_suit(s):
    """Forced answer: longest unbid major with four, else longest unbid suit"""
    unbid = unbid_suits(*s.their_suits())
    major = s.longest([x for x in unbid if x in MAJORS], minimum=4)
    suit = major or s.longest(unbid)
    return s.cheapest(suit, f"answering the takeout double ({s.length(suit)} {suit_name(suit)}, {s.hcp} HCP)")


TAKEOUT_ADVANCE_RULES = RuleChain('advancing a takeout double', [
    Rule('penalty pass', penalty_pass),
    Rule('cue-bid', advancer_cue_bid),
    Rule('notrump', advancer_notrump),
    Rule('jump in a major', jump_in_major),
    Rule('best unbid suit', best_unbid_suit),
])


# --- After RHO bids over partner's action ----------------------------------------------------

def responsive_double(s):
    result = s.match(match_responsive_double, DOUBLE)
    if not result:
        return None
    shown = ' and '.join(suit_name(x) for x in result.suits)
    return s.double(f"Responsive double ({shown}, {s.hcp} HCP)", 'responsive_double')


def free_bid(s):
    if s.hcp < 8:
        return None
    _, call, _ = _partner_entry(s)
    exclude = s.their_suits() + ([call.denomination] if call.is_suit else [])
    suit = s.longest([x for x in SUIT_LADDER if x not in exclude], minimum=5)
    if suit is None or s.cheapest_level(suit) > 3:
        return None
    return s.cheapest(suit, f"free bid ({s.length(suit)}-card suit, {s.hcp} HCP)")


# --- After partner's natural overcall ----------------------------------------------------------

def _raise_settings(s, key, default):
    return s.setting('advancer_raises', key, 'competitive', default)


def _overcall_suit(s):
    _, call, _ = _partner_entry(s)
    return call.denomination


def cue_bid_raise(s):
    suit = _overcall_suit(s)
    their = _their_opening_suit(s)
    if their is None:
        return None
    if (s.length(suit) < _raise_settings(s, 'cuebid_min_support', 3)
            or s.hcp < _raise_settings(s, 'cuebid_min_hcp', 13)):
        return None
    return s.cheapest(their, f"cue-bid raise ({s.length(suit)} {suit_name(suit)}, {s.hcp} HCP)", 'cue_bid_raise')


def jump_raise(s):
    suit = _overcall_suit(s)
    band = _raise_settings(s, 'jump_range', {'min': 11, 'max': 12})
    if s.length(suit) < _raise_settings(s, 'jump_min_support', 4) or not band['min'] <= s.hcp <= band['max']:
        return None
    return s.cheapest(suit, f"jump raise ({s.length(suit)}-card support, {s.hcp} HCP)", jump=1)


def simple_raise(s):
    suit = _overcall_suit(s)
    band = _raise_settings(s, 'simple_range', {'min': 6, 'max': 10})
    if s.length(suit) < _raise_settings(s, 'simple_min_support', 3) or not band['min'] <= s.hcp <= band['max']:
        return None
    return s.cheapest(suit, f"raise ({s.length(suit)}-card support, {s.hcp} HCP)")


def notrump_advance(s):
    their = _their_opening_suit(s)
    if their is None or s.hcp < 8 or not s.stopper(their):
        return None
    level = s.cheapest_level('NT')
    if s.hcp >= 15:
        level = max(level, 3)
    elif s.hcp >= 12:
        level += 1
    return s.bid(level, 'NT', f"({s.hcp} HCP, {suit_name(their)} stopped)")


OVERCALL_ADVANCE_RULES = RuleChain('advancing an overcall', [
    Rule('responsive double', responsive_double),
    Rule('cue-bid raise', cue_bid_raise, when=lambda s: s.enabled('advancer_raises', 'competitive')),
    Rule('jump raise', jump_raise, when=lambda s: s.enabled('advancer_raises', 'competitive')),
    Rule('simple raise', simple_raise, when=lambda s: s.enabled('advancer_raises', 'competitive')),
    Rule('new suit', free_bid),
    Rule('notrump', notrump_advance),
])


# --- After a two-suited or artificial entry ------------------------------------------------------

def after_michaels(s):
    _, _, meaning = _partner_entry(s)
    shown = meaning.suits
    if len(shown) == 2:
        major = max(shown, key=lambda x: (s.length(x), x == 'H'))
        if s.hcp >= 12 and s.length(major) >= 4:
            return s.bid(4, major, f"game ({s.length(major)} {suit_name(major)}, {s.hcp} HCP)")
        return s.cheapest(major, f"preference ({s.length(major)} {suit_name(major)})")
    major = shown[0]
    if s.length(major) >= 3:
        if s.hcp >= 12:
            return s.bid(4, major, f"game ({s.length(major)} {suit_name(major)}, {s.hcp} HCP)")
        return s.cheapest(major, f"preference ({s.length(major)} {suit_name(major)})")
    return s.cheapest('NT', "asking for partner's minor", 'michaels')


def after_unusual_notrump(s):
    _, _, meaning = _partner_entry(s)
    suit = max(meaning.suits, key=lambda x: (s.length(x), -SUIT_LADDER.index(x)))
    return s.cheapest(suit, f"preference ({s.length(suit)} {suit_name(suit)})")


def after_notrump_defense(s):
    _, call, meaning = _partner_entry(s)
    detail = meaning.detail.get('meaning')
    if call.is_double and detail in ('one_suiter', 'major_minor'):
        return s.bid(2, 'C', "relay to partner's suit", meaning.convention)
    if meaning.convention == 'meckwell' and detail == 'one_suiter':
        return s.bid(2, 'D', "relay to partner's suit", meaning.convention)
    if meaning.convention == 'meckwell' and detail == 'majors':
        major = max(MAJORS, key=lambda x: (s.length(x), x == 'H'))
        return s.cheapest(major, f"preference ({s.length(major)} {suit_name(major)})")
    if detail == 'natural':
        return s.pass_("partner's natural suit")
    anchor = call.denomination
    if s.length(anchor) >= 3:
        return s.pass_(f"{s.length(anchor)} {suit_name(anchor)} is enough")
    following = SUIT_LADDER[SUIT_LADDER.index(anchor) + 1]
    return s.cheapest(following, "asking for partner's other suit", meaning.convention)


def advancer_pass(s):
    return s.pass_(f"nothing to add, {s.hcp} HCP")


ADVANCER_RULES = RuleChain('advancer', [
    Rule('after takeout double', TAKEOUT_ADVANCE_RULES, when=lambda s: partner_doubled(s) and rho_passed(s)),
    Rule('responsive double', responsive_double, when=partner_doubled),
    Rule('free bid', free_bid, when=partner_doubled),
    Rule('after overcall', OVERCALL_ADVANCE_RULES, when=partner_overcalled),
    Rule('after michaels', after_michaels,
         when=lambda s: partner_entered_with('michaels')(s) and rho_passed(s)),
    Rule('after unusual 2NT', after_unusual_notrump,
         when=lambda s: partner_entered_with('unusual_nt')(s) and rho_passed(s)),
    Rule('after notrump defense', after_notrump_defense,
         when=lambda s: partner_entered_with('dont', 'meckwell')(s) and rho_passed(s)),
    Rule('pass', advancer_pass),
])


# --- The overcaller's second call -----------------------------------------------------------

def _my_entry(s):
    index, call = s.context.first_action(Relation.SELF)
    return call, interpret(s.context, index, s.catalog)


def _partner_reply(s):
    _, call = s.context.last_action(Relation.PARTNER)
    return call


def name_michaels_minor(s):
    reply = _partner_reply(s)
    if reply.token != '2NT':
        return None
    minor = max(MINORS, key=lambda x: (s.length(x), x == 'C'))
    return s.cheapest(minor, f"Michaels minor ({s.length(minor)} {suit_name(minor)})", 'michaels')


def name_suit_after_relay(s):
    call, meaning = _my_entry(s)
    reply = _partner_reply(s)
    relay = '2C' if call.is_double else '2D'
    if reply.token != relay:
        return None
    suit = s.longest(SUIT_LADDER, minimum=4)
    if suit is None:
        return s.pass_("no long suit to show")
    if suit == reply.denomination:
        return s.pass_(f"relay landed in my suit ({s.length(suit)} {suit_name(suit)})")
    return s.cheapest(suit, f"showing the long suit ({s.length(suit)} {suit_name(suit)})", meaning.convention)


def after_advancer_raise(s):
    call, _ = _my_entry(s)
    if call is None or not call.is_suit:
        return None
    reply = _partner_reply(s)
    suit = call.denomination
    if not reply.is_suit or reply.denomination != suit:
        return None
    jumped = reply.level >= call.level + 2
    needed = 14 if jumped else 17
    if s.hcp >= needed:
        if suit in MAJORS:
            return s.bid(4, suit, f"game after partner's raise ({s.hcp} HCP)")
        return s.bid(3, 'NT', f"game after partner's raise ({s.hcp} HCP)")
    return s.pass_(f"{s.hcp} HCP, no game opposite the raise")


def after_advancer_cue_bid(s):
    call, _ = _my_entry(s)
    if call is None or not call.is_suit:
        return None
    reply = _partner_reply(s)
    if not reply.is_suit or reply.denomination not in s.their_suits():
        return None
    suit = call.denomination
    if s.hcp >= 15 and suit in MAJORS:
        return s.bid(4, suit, f"game opposite cue-bid raise ({s.hcp} HCP)")
    return s.cheapest(suit, f"minimum opposite cue-bid raise ({s.hcp} HCP)")


def after_takeout_answer(s):
    reply = _partner_reply(s)
    if reply is None or not reply.is_suit or reply.denomination in s.their_suits():
        return None
    suit = reply.denomination
    if s.length(suit) >= 4 and s.hcp >= 17:
        if s.hcp >= 19 and suit in MAJORS:
            return s.bid(4, suit, f"game ({s.length(suit)}-card support, {s.hcp} HCP)")
        return s.cheapest(suit, f"raise ({s.length(suit)}-card support, {s.hcp} HCP)", jump=1)
    own = s.longest([x for x in SUIT_LADDER if x not in s.their_suits() and x != suit], minimum=5)
    if own is not None and s.hcp >= 17:
        return s.cheapest(own, f"strong double ({s.length(own)}-card suit, {s.hcp} HCP)")
    return s.pass_(f"{s.hcp} HCP, nothing extra")


def i_entered_with(*kinds):
    def check(s):
        call, meaning = _my_entry(s)
        if call is None:
            return False
        if meaning:
            kind = meaning.convention
        elif call.is_double:
            kind = 'double'
        elif call.is_suit:
            kind = 'overcall'
        else:
            return False
        return kind in kinds
    return check


OVERCALLER_RULES = RuleChain('overcaller rebid', [
    Rule('michaels minor', name_michaels_minor, when=i_entered_with('michaels')),
    Rule('suit after relay', name_suit_after_relay, when=i_entered_with('dont', 'meckwell')),
    Rule('after cue-bid raise', after_advancer_cue_bid, when=i_entered_with('overcall')),
    Rule('after raise', after_advancer_raise, when=i_entered_with('overcall')),
    Rule('after takeout answer', after_takeout_answer, when=i_entered_with('double')),
])


def they_opened_and_partner_entered(s):
    return (s.opening_relation in THEIRS and not s.my_actions
            and s.context.first_action(Relation.PARTNER)[0] is not None)


def overcaller_second_call(s):
    """I entered over their opening and partner has answered"""
    if s.opening_relation not in THEIRS or len(s.my_actions) != 1:
        return False
    my_index, _ = s.context.first_action(Relation.SELF)
    partner_index, _ = s.context.last_action(Relation.PARTNER)
    return partner_index is not None and partner_index > my_index
