"""
Rebids
Later calls in an auction the opponents have left alone: opener's rebid,
responder's second call, ace-ask follow-ups and later continuations
"""

from .auction import Relation
from .calls import MAJORS, minimum_level
from .matcher import count_keycards, decode_ace_response, find_trump_suit, interpret, match_ace_ask
from .rules import Rule, RuleChain, suit_name

GAME_LEVEL = {'NT': 3, 'S': 4, 'H': 4, 'D': 5, 'C': 5}


def _partner_last(s):
    return s.context.last_action(Relation.PARTNER)


def _my_last(s):
    return s.context.last_action(Relation.SELF)


def _meaning(s, index):
    return interpret(s.context, index, s.catalog)


def partner_played(*conventions):
    """Precondition: partner's last call was one of the named conventions"""
    def check(s):
        index, _ = _partner_last(s)
        return index is not None and _meaning(s, index).convention in conventions
    return check


def i_played(*conventions):
    """Precondition: my last call was one of the named conventions"""
    def check(s):
        index, _ = _my_last(s)
        return index is not None and _meaning(s, index).convention in conventions
    return check


def _game(s, denomination, reason, convention=None):
    return s.bid(GAME_LEVEL[denomination], denomination, reason, convention)


def _blackwood(s, reason):
    if not s.enabled('blackwood', 'ace_asking'):
        return None
    return s.bid(4, 'NT', f"Blackwood ({reason}, {s.hcp} HCP)", 'blackwood')


# --- Ace-ask follow-up ----------------------------------------------------------------

def _pending_ace_ask(s):
    """(ask result, partner's reply) when my last call asked for aces and partner replied"""
    ask_index, ask = _my_last(s)
    reply_index, reply = _partner_last(s)
    if ask is None or reply is None or reply_index < ask_index:
        return None, None
    result = match_ace_ask(s.context.before(ask_index), ask, s.catalog)
    if not result:
        return None, None
    return result, reply


def asked_for_aces(s):
    result, _ = _pending_ace_ask(s)
    return result is not None


def ace_ask_followup(s):
    """Place the contract once partner has shown aces, keycards or kings"""
    result, reply = _pending_ace_ask(s)
    decoded = decode_ace_response(result, reply, s.catalog)
    if decoded is None:
        return s.pass_("no recognizable reply to the ace ask")
    counts, _ = decoded

    if result.convention == 'gerber_kings':
        kings = s.hand.count_kings() + min(counts)
        if kings >= 4:
            return s.bid(7, 'NT', f"grand slam (all kings held, {s.hcp} HCP)")
        return s.bid(6, 'NT', f"small slam ({kings} kings between us)")

    if result.convention.startswith('blackwood_rkcb'):
        mine, _ = count_keycards(s.hand, result.suits[0])
        total = 5
    else:
        mine = s.hand.count_aces()
        total = 4
    possible = [c for c in counts if mine + c <= total] or [min(counts)]
    missing = total - mine - min(possible)
    label = 'keycards' if total == 5 else 'aces'

    if result.convention == 'gerber':
        if missing >= 2:
            if s.can_bid(4, 'NT'):
                return s.bid(4, 'NT', f"sign off ({missing} {label} missing)")
            return s.pass_(f"{missing} {label} missing")
        if missing == 0 and s.setting('gerber', 'continuations', 'ace_asking', False):
            return s.bid(5, 'C', f"Gerber king ask (all {label} held)", 'gerber_kings')
        return s.bid(6, 'NT', f"small slam ({missing} {label} missing)")

    trump = result.suits[0] if result.suits else find_trump_suit(s.context)
    if trump is None:
        return s.pass_("no agreed suit after Blackwood")
    if missing >= 2:
        return (s.bid(5, trump, f"sign off ({missing} {label} missing)")
                or s.pass_(f"{missing} {label} missing"))
    if missing == 0 and s.hcp + _partner_minimum(s) >= 37:
        return s.bid(7, trump, f"grand slam (all {label} held)")
    return s.bid(6, trump, f"small slam ({missing} {label} missing)")


def _partner_minimum(s):
    """Rough lower bound on partner's HCP from their opening or first response"""
    opening = s.opening
    if s.opening_relation is Relation.PARTNER:
        if opening.token == '2C':
            return 22
        if opening.is_notrump:
            return 20 if opening.level == 2 else 15
        return 12 if opening.level == 1 else 5
    index, first = s.context.first_action(Relation.PARTNER)
    if first is None:
        return 0
    meaning = _meaning(s, index).convention
    if meaning in ('jacoby_2nt', 'splinter'):
        return 13
    if first.level >= 2 and first.denomination != opening.denomination and not first.is_notrump:
        return 10
    return 6


# --- Opener's rebid ----------------------------------------------------------------------

def _response(s):
    return _partner_last(s)


def answer_stayman(s):
    level = s.opening.level + 1
    if s.length('H') >= 4:
        return s.bid(level, 'H', "Stayman answer (4 hearts)", 'stayman')
    if s.length('S') >= 4:
        return s.bid(level, 'S', "Stayman answer (4 spades)", 'stayman')
    return s.bid(level, 'D', "Stayman answer (no 4-card major)", 'stayman')


def complete_transfer(s):
    index, call = _response(s)
    meaning = _meaning(s, index)
    target = meaning.suits[0]
    if meaning.convention == 'texas_transfer':
        return s.bid(4, target, "completing Texas transfer", 'texas_transfer')
    if (meaning.convention == 'jacoby_transfer' and s.opening.level == 1
            and s.hcp == 17 and s.length(target) >= 4):
        return s.bid(3, target, f"super-accept (4-card support, {s.hcp} HCP)", 'jacoby_transfer')
    return s.cheapest(target, f"completing transfer to {suit_name(target)}", meaning.convention)


def answer_notrump_raise(s):
    _, call = _response(s)
    top = 17 if s.opening.level == 1 else 21
    if call.token == '2NT':
        if s.hcp >= 16:
            return s.bid(3, 'NT', f"accepting invitation ({s.hcp} HCP)")
        return s.pass_(f"declining invitation, {s.hcp} HCP")
    if call.token == '4NT':
        if s.hcp >= top:
            return s.bid(6, 'NT', f"accepting slam invitation ({s.hcp} HCP)")
        return s.pass_(f"declining slam invitation, {s.hcp} HCP")
    return s.pass_("game reached")


def two_club_rebid(s):
    _, response = _response(s)
    if response.is_suit and response.denomination != 'D' and s.length(response.denomination) >= 3:
        return s.cheapest(response.denomination,
                          f"raise ({s.length(response.denomination)}-card support, {s.hcp} HCP)")
    if s.balanced and 22 <= s.hcp <= 24:
        return s.cheapest('NT', f"balanced ({s.hcp} HCP)")
    if s.balanced and 25 <= s.hcp <= 27:
        return s.bid(3, 'NT', f"balanced ({s.hcp} HCP)")
    suit = s.longest(('S', 'H', 'D', 'C'), minimum=5)
    if suit is not None:
        return s.cheapest(suit, f"natural (5+ {suit_name(suit)}, {s.hcp} HCP)")
    return s.cheapest('NT', f"({s.hcp} HCP, no long suit)")


def answer_feature_ask(s):
    trump = s.opening.denomination
    if all(s.hand.has_card(trump, r) for r in 'AKQ'):
        return s.bid(3, 'NT', "solid suit")
    if s.hcp >= 9:
        for suit in ('C', 'D', 'H', 'S'):
            if suit != trump and (s.hand.has_card(suit, 'A') or s.hand.has_card(suit, 'K')):
                return s.bid(3, suit, f"feature (maximum, {s.hcp} HCP)", 'feature_ask')
    return s.bid(3, trump, f"no feature ({s.hcp} HCP)", 'feature_ask')


def jacoby_2nt_rebid(s):
    trump = s.opening.denomination
    for suit in ('C', 'D', 'H', 'S'):
        if suit != trump and s.length(suit) <= 1:
            return s.bid(3, suit, f"shortness ({s.length(suit)} {suit_name(suit)})", 'jacoby_2nt')
    if s.hcp >= 18:
        return s.bid(3, trump, f"extras ({s.hcp} HCP)", 'jacoby_2nt')
    if s.hcp >= 15:
        return s.bid(3, 'NT', f"medium ({s.hcp} HCP)", 'jacoby_2nt')
    return s.bid(4, trump, f"minimum ({s.hcp} HCP)", 'jacoby_2nt')


def after_splinter(s):
    if s.hcp >= 18:
        call = _blackwood(s, "slam try opposite splinter")
        if call is not None:
            return call
    return _game(s, s.opening.denomination, f"sign off ({s.hcp} HCP)")


def after_bergen(s):
    index, _ = _response(s)
    trump = s.opening.denomination
    needed = 15 if _meaning(s, index).convention == 'bergen_constructive' else 14
    if s.hcp >= needed:
        return s.bid(4, trump, f"game ({s.hcp} HCP)")
    return s.bid(3, trump, f"sign off ({s.hcp} HCP)")


def answer_drury(s):
    trump = s.opening.denomination
    if s.hcp < 12:
        return s.bid(2, 'D', f"Drury (sub-minimum, {s.hcp} HCP)", 'drury')
    if s.hcp >= 15:
        return s.bid(4, trump, f"game ({s.hcp} HCP)")
    return s.bid(2, trump, f"minimum ({s.hcp} HCP)", 'drury')


def partner_raised_me(s):
    _, response = _response(s)
    return response.is_suit and response.denomination == s.opening.denomination


def after_raise(s):
    _, response = _response(s)
    trump = s.opening.denomination
    if response.level == 2:
        if s.hcp >= 19:
            return _game(s, trump if trump in MAJORS else 'NT', f"game ({s.hcp} HCP)")
        if s.hcp >= 16 and trump in MAJORS:
            return s.bid(3, trump, f"game try ({s.hcp} HCP)")
        return s.pass_(f"minimum, {s.hcp} HCP")
    if response.level == 3:
        if s.hcp >= 14:
            return _game(s, trump if trump in MAJORS else 'NT', f"accepting limit raise ({s.hcp} HCP)")
        return s.pass_(f"declining limit raise, {s.hcp} HCP")
    return s.pass_("game reached")


def _new_suit_response(s, level):
    _, response = _response(s)
    return (response.is_suit and response.level == level
            and response.denomination != s.opening.denomination
            and minimum_level(response.denomination, s.opening) == level)


def _raise_partner(s, suit, minimum):
    if s.length(suit) < minimum:
        return None
    if s.hcp >= 19:
        if suit in MAJORS:
            return s.bid(4, suit, f"game raise ({s.length(suit)}-card support, {s.hcp} HCP)")
        return s.bid(3, 'NT', f"({s.hcp} HCP, {suit_name(suit)} fit)")
    jump = 1 if s.hcp >= 16 else 0
    return s.cheapest(suit, f"raise ({s.length(suit)}-card support, {s.hcp} HCP)", jump=jump)


def _rebid_own_suit(s, minimum):
    suit = s.opening.denomination
    if s.length(suit) < minimum:
        return None
    jump = 1 if s.hcp >= 16 and s.length(suit) >= 6 else 0
    return s.cheapest(suit, f"rebid ({s.length(suit)}-card suit, {s.hcp} HCP)", jump=jump)


def _second_suit(s, exclude):
    """Cheapest 4-card suit that is not a reverse; a reverse needs 17+"""
    own = s.opening.denomination
    order = 'CDHS'
    for suit in sorted(('C', 'D', 'H', 'S'), key=lambda x: (-s.length(x), order.index(x))):
        if suit in exclude or s.length(suit) < 4:
            continue
        level = s.cheapest_level(suit)
        reverse = level == 2 and order.index(suit) > order.index(own)
        if level > 2 or (reverse and s.hcp < 17):
            continue
        label = "reverse" if reverse else "new suit"
        return s.bid(level, suit, f"{label} ({s.length(suit)}+ {suit_name(suit)}, {s.hcp} HCP)")
    return None


def after_one_level_response(s):
    _, response = _response(s)
    suit = response.denomination
    call = _raise_partner(s, suit, 4)
    if call is not None:
        return call
    for other in ('H', 'S'):
        if (other != s.opening.denomination and s.length(other) >= 4
                and s.can_bid(1, other)):
            return s.bid(1, other, f"new suit ({s.length(other)}+ {suit_name(other)}, {s.hcp} HCP)")
    if s.balanced and 12 <= s.hcp <= 14:
        return s.bid(1, 'NT', f"balanced ({s.hcp} HCP)")
    if s.balanced and 18 <= s.hcp <= 19:
        return s.bid(2, 'NT', f"balanced ({s.hcp} HCP)")
    return (_rebid_own_suit(s, 6)
            or _second_suit(s, (s.opening.denomination, suit))
            or _rebid_own_suit(s, 5)
            or s.cheapest('NT', f"({s.hcp} HCP, no better rebid)"))


def after_one_notrump_response(s):
    if s.balanced and 18 <= s.hcp <= 19:
        return s.bid(2, 'NT', f"invitational ({s.hcp} HCP)")
    call = _rebid_own_suit(s, 6) or _second_suit(s, (s.opening.denomination,))
    if call is not None:
        return call
    return s.pass_(f"minimum, {s.hcp} HCP")


def after_two_over_one(s):
    _, response = _response(s)
    suit = response.denomination
    needed = 3 if suit in MAJORS else 4
    if s.length(suit) >= needed:
        return s.cheapest(suit, f"raise ({s.length(suit)}-card support, {s.hcp} HCP)")
    if s.balanced:
        if s.hcp >= 15:
            return s.bid(3, 'NT', f"balanced ({s.hcp} HCP)")
        return s.cheapest('NT', f"balanced ({s.hcp} HCP)")
    return (_rebid_own_suit(s, 6)
            or _second_suit(s, (s.opening.denomination, suit))
            or _rebid_own_suit(s, 5)
            or s.cheapest(s.opening.denomination, f"rebid ({s.hcp} HCP)"))


def after_notrump_response(s):
    _, response = _response(s)
    if response.level == 2:
        if s.hcp >= 14:
            return s.bid(3, 'NT', f"accepting invitation ({s.hcp} HCP)")
        return s.pass_(f"declining invitation, {s.hcp} HCP")
    return s.pass_("game reached")


def after_jump_shift(s):
    _, response = _response(s)
    suit = response.denomination
    if s.length(suit) >= 3:
        if suit in MAJORS:
            return s.bid(4, suit, f"game ({s.length(suit)}-card support, {s.hcp} HCP)")
        return s.cheapest(suit, f"raise ({s.length(suit)}-card support, {s.hcp} HCP)")
    if s.balanced:
        return s.bid(3, 'NT', f"balanced ({s.hcp} HCP)")
    return s.cheapest(s.opening.denomination, f"rebid ({s.hcp} HCP)")


def after_preempt_response(s):
    _, response = _response(s)
    trump = s.opening.denomination
    if response.is_suit and response.denomination != trump:
        if s.length(response.denomination) >= 3:
            return s.cheapest(response.denomination, f"raise ({s.length(response.denomination)}-card support)")
        return s.cheapest(trump, f"rebid ({s.length(trump)}-card suit)")
    return s.pass_("preempt already described")


def opened(*kinds):
    """Precondition on my own opening: 'nt', '2c', 'weak', 'suit1'"""
    def check(s):
        opening = s.opening
        kind = ('nt' if opening.is_notrump else
                '2c' if opening.token == '2C' else
                'suit1' if opening.level == 1 else 'weak')
        return kind in kinds
    return check


def response_is(predicate):
    def check(s):
        _, response = _response(s)
        return response is not None and predicate(s, response)
    return check


OPENER_REBID_RULES = RuleChain('opener rebid', [
    Rule('stayman answer', answer_stayman, when=partner_played('stayman')),
    Rule('transfer completion', complete_transfer,
         when=partner_played('jacoby_transfer', 'texas_transfer', 'minor_transfer')),
    Rule('notrump raise', answer_notrump_raise,
         when=lambda s: opened('nt')(s) and response_is(lambda s, r: r.is_notrump)(s)),
    Rule('strong 2C continuation', two_club_rebid, when=opened('2c')),
    Rule('feature ask answer', answer_feature_ask, when=partner_played('feature_ask')),
    Rule('jacoby 2NT rebid', jacoby_2nt_rebid, when=partner_played('jacoby_2nt')),
    Rule('after splinter', after_splinter, when=partner_played('splinter')),
    Rule('after bergen', after_bergen, when=partner_played('bergen_constructive', 'bergen_limit')),
    Rule('drury answer', answer_drury, when=partner_played('drury')),
    Rule('preempt continuation', after_preempt_response, when=opened('weak')),
    Rule('raise continuation', after_raise,
         when=lambda s: opened('suit1')(s) and partner_raised_me(s)),
    Rule('after one-level response', after_one_level_response,
         when=lambda s: opened('suit1')(s) and _new_suit_response(s, 1)),
    Rule('after 1NT response', after_one_notrump_response,
         when=lambda s: opened('suit1')(s) and response_is(lambda s, r: r.token == '1NT')(s)),
    Rule('after two-over-one', after_two_over_one,
         when=lambda s: opened('suit1')(s) and _new_suit_response(s, 2)),
    Rule('after jump shift', after_jump_shift,
         when=lambda s: opened('suit1')(s) and response_is(
             lambda s, r: r.is_suit and r.level == minimum_level(r.denomination, s.opening) + 1)(s)),
    Rule('after notrump response', after_notrump_response,
         when=lambda s: opened('suit1')(s) and response_is(lambda s, r: r.is_notrump)(s)),
])


# --- Responder's second call ----------------------------------------------------------

def _my_response_suit(s):
    index, call = s.context.first_action(Relation.SELF)
    if call is None or not call.is_suit or _meaning(s, index):
        return None
    return call.denomination


def after_stayman(s):
    _, answer = _partner_last(s)
    level = s.opening.level
    major = answer.denomination if answer.denomination in MAJORS else None
    if major is not None and s.length(major) >= 4:
        if level == 2 or s.hcp >= 10:
            return s.bid(4, major, f"game ({s.length(major)}-card fit, {s.hcp} HCP)")
        return s.bid(3, major, f"invitational ({s.length(major)}-card fit, {s.hcp} HCP)")
    if level == 2 or s.hcp >= 10:
        return s.bid(3, 'NT', f"game (no fit, {s.hcp} HCP)")
    return s.bid(2, 'NT', f"invitational (no fit, {s.hcp} HCP)")


def after_transfer(s):
    index, _ = s.context.first_action(Relation.SELF)
    _, completion = _partner_last(s)
    target = _meaning(s, index).suits[0]
    length = s.length(target)
    if s.opening.level == 1 and completion.level == 3:
        if s.hcp >= 6:
            return s.bid(4, target, f"game after super-accept ({s.hcp} HCP)")
        return s.pass_(f"{s.hcp} HCP, no game")
    game_hcp, invite_hcp = (10, 8) if s.opening.level == 1 else (4, 99)
    if s.hcp >= game_hcp:
        if length == 5 and s.balanced:
            return s.bid(3, 'NT', f"game, choice of games ({length} {suit_name(target)}, {s.hcp} HCP)")
        return s.bid(4, target, f"game ({length} {suit_name(target)}, {s.hcp} HCP)")
    if s.hcp >= invite_hcp:
        if length >= 6:
            return s.bid(3, target, f"invitational ({length} {suit_name(target)}, {s.hcp} HCP)")
        return s.bid(2, 'NT', f"invitational ({length} {suit_name(target)}, {s.hcp} HCP)")
    return s.pass_(f"sign off, {s.hcp} HCP")


def after_jacoby_rebid(s):
    _, rebid = _partner_last(s)
    trump = s.opening.denomination
    shown = 18 if rebid.denomination == trump and rebid.level == 3 else (15 if rebid.is_notrump else 12)
    if s.hcp + shown >= 33:
        call = _blackwood(s, "slam values opposite Jacoby rebid")
        if call is not None:
            return call
    return s.bid(4, trump, f"game ({s.hcp} HCP)") or s.pass_("game reached")


def after_drury_answer(s):
    _, answer = _partner_last(s)
    trump = s.opening.denomination
    if answer.token == '2D':
        return s.bid(2, trump, "sign off after sub-minimum Drury answer")
    return s.pass_("Drury answered")


def partner_raised_my_suit(s):
    suit = _my_response_suit(s)
    _, rebid = _partner_last(s)
    return suit is not None and rebid is not None and rebid.is_suit and rebid.denomination == suit


def after_opener_raise(s):
    suit = _my_response_suit(s)
    _, rebid = _partner_last(s)
    game = suit if suit in MAJORS else 'NT'
    if rebid.level >= GAME_LEVEL[suit]:
        if s.hcp + 19 >= 33:
            call = _blackwood(s, "slam values opposite game raise")
            if call is not None:
                return call
        return s.pass_("game reached")
    if rebid.level == 3:
        if s.hcp >= 8:
            return _game(s, game, f"accepting jump raise ({s.hcp} HCP)")
        return s.pass_(f"minimum response, {s.hcp} HCP")
    if s.hcp >= 13:
        return _game(s, game, f"game ({s.hcp} HCP)")
    if s.hcp >= 10:
        return s.bid(3, suit, f"invitational ({s.hcp} HCP)")
    return s.pass_(f"{s.hcp} HCP, no game")


def partner_made_game_try(s):
    _, mine = _my_last(s)
    _, rebid = _partner_last(s)
    return (mine is not None and rebid is not None and mine.is_suit
            and mine.denomination == s.opening.denomination and mine.level == 2
            and rebid.denomination == mine.denomination and rebid.level == 3)


def accept_game_try(s):
    trump = s.opening.denomination
    if s.hcp >= 8:
        return s.bid(4, trump, f"accepting game try ({s.hcp} HCP)")
    return s.pass_(f"declining game try, {s.hcp} HCP")


def after_notrump_rebid(s):
    _, rebid = _partner_last(s)
    suit = _my_response_suit(s)
    long_major = suit if suit in MAJORS and s.length(suit) >= 6 else None
    if rebid.level == 2:
        # 18-19 balanced
        opener_suit = s.opening.denomination
        if opener_suit in MAJORS and s.length(opener_suit) >= 3:
            return s.bid(4, opener_suit, f"game ({s.length(opener_suit)}-card support)")
        if suit in MAJORS and (s.length(suit) >= 6 or (s.length(suit) >= 5 and not s.balanced)):
            return s.bid(4, suit, f"game ({s.length(suit)} {suit_name(suit)})")
        if s.hcp >= 6:
            return s.bid(3, 'NT', f"game ({s.hcp} HCP opposite 18-19)")
        return s.pass_(f"{s.hcp} HCP")
    if s.hcp >= 13:
        if long_major:
            return s.bid(4, long_major, f"game ({s.length(long_major)} {suit_name(long_major)}, {s.hcp} HCP)")
        return s.bid(3, 'NT', f"game ({s.hcp} HCP)")
    if s.hcp >= 11:
        if long_major:
            return s.bid(3, long_major, f"invitational ({s.length(long_major)} {suit_name(long_major)})")
        return s.bid(2, 'NT', f"invitational ({s.hcp} HCP)")
    if long_major:
        return s.cheapest(long_major, f"sign off ({s.length(long_major)} {suit_name(long_major)})")
    return s.pass_(f"{s.hcp} HCP, no game")


def partner_rebid_own_suit(s):
    _, rebid = _partner_last(s)
    return rebid.is_suit and rebid.denomination == s.opening.denomination


def after_suit_rebid(s):
    _, rebid = _partner_last(s)
    trump = s.opening.denomination
    fit = trump in MAJORS and s.length(trump) >= 2
    jumped = rebid.level >= 3 and rebid.level > minimum_level(trump, s.context.first_action(Relation.SELF)[1])
    if jumped:
        if s.hcp >= 8:
            return _game(s, trump if fit else 'NT', f"game opposite jump rebid ({s.hcp} HCP)")
        return s.pass_(f"{s.hcp} HCP")
    if s.hcp >= 13:
        return _game(s, trump if fit else 'NT', f"game ({s.hcp} HCP)")
    if s.hcp >= 10:
        if fit:
            return s.cheapest(trump, f"invitational ({s.length(trump)}-card support, {s.hcp} HCP)", jump=0)
        return s.cheapest('NT', f"invitational ({s.hcp} HCP)")
    return s.pass_(f"{s.hcp} HCP")


def partner_showed_new_suit(s):
    _, rebid = _partner_last(s)
    return (rebid.is_suit and rebid.denomination != s.opening.denomination
            and rebid.denomination != _my_response_suit(s))


def after_new_suit_rebid(s):
    _, rebid = _partner_last(s)
    first, second = s.opening.denomination, rebid.denomination
    if s.hcp >= 13:
        if first in MAJORS and s.length(first) >= 3:
            return s.bid(4, first, f"game ({s.length(first)}-card support, {s.hcp} HCP)")
        return s.bid(3, 'NT', f"game ({s.hcp} HCP)")
    if s.hcp >= 10 and s.balanced:
        return s.cheapest('NT', f"invitational ({s.hcp} HCP)")
    if s.length(second) >= 4 and s.length(second) > s.length(first):
        return s.pass_(f"playing in {suit_name(second)}")
    if s.length(first) >= 2:
        return s.cheapest(first, f"preference ({s.length(first)} {suit_name(first)})")
    return s.pass_(f"{s.hcp} HCP")


RESPONDER_REBID_RULES = RuleChain('responder rebid', [
    Rule('after stayman', after_stayman, when=i_played('stayman')),
    Rule('after transfer', after_transfer, when=i_played('jacoby_transfer')),
    Rule('after texas or minor transfer', lambda s: s.pass_("transfer completed"),
         when=i_played('texas_transfer', 'minor_transfer')),
    Rule('after jacoby rebid', after_jacoby_rebid, when=i_played('jacoby_2nt')),
    Rule('after drury answer', after_drury_answer, when=i_played('drury')),
    Rule('after opener raise', after_opener_raise, when=partner_raised_my_suit),
    Rule('game try', accept_game_try, when=partner_made_game_try),
    Rule('after notrump rebid', after_notrump_rebid,
         when=lambda s: s.opening.is_suit and _partner_last(s)[1].is_notrump
         and _partner_last(s)[1].level <= 2),
    Rule('after suit rebid', after_suit_rebid,
         when=lambda s: s.opening.is_suit and s.opening.level == 1 and partner_rebid_own_suit(s)),
    Rule('after new suit', after_new_suit_rebid,
         when=lambda s: s.opening.is_suit and s.opening.level == 1 and partner_showed_new_suit(s)),
])


# --- Later rounds --------------------------------------------------------------------------

def _transfer_target(s):
    """Major partner transferred to over my notrump opening, None otherwise"""
    if s.opening_relation is not Relation.SELF or not s.opening.is_notrump:
        return None
    index, _ = s.context.first_action(Relation.PARTNER)
    if index is None:
        return None
    meaning = _meaning(s, index)
    return meaning.suits[0] if meaning.convention == 'jacoby_transfer' else None


def accept_notrump_invitation(s):
    opener = s.opening_relation is Relation.SELF
    needed = (16 if s.opening.is_notrump else 14) if opener else 9
    target = _transfer_target(s)
    if target is not None and s.length(target) >= 3:
        if s.hcp >= needed:
            return s.bid(4, target, f"accepting invitation ({s.length(target)}-card support, {s.hcp} HCP)")
        return s.bid(3, target, f"declining invitation ({s.length(target)}-card support)")
    if s.hcp >= needed:
        return s.bid(3, 'NT', f"accepting invitation ({s.hcp} HCP)")
    return s.pass_(f"declining invitation, {s.hcp} HCP")


def accept_suit_invitation(s):
    _, invite = _partner_last(s)
    suit = invite.denomination
    opener = s.opening_relation is Relation.SELF
    needed = (16 if s.opening.is_notrump else 14) if opener else 9
    mine = [call.denomination for call in s.my_actions if call.is_suit]
    if s.hcp >= needed:
        if suit in MAJORS and (s.length(suit) >= 3 or suit in mine):
            return s.bid(4, suit, f"accepting invitation ({s.hcp} HCP)")
        return s.bid(3, 'NT', f"accepting invitation ({s.hcp} HCP)")
    return s.pass_(f"declining invitation, {s.hcp} HCP")


def partner_invited(kind):
    def check(s):
        _, call = _partner_last(s)
        if call is None or not call.is_contract:
            return False
        if kind == 'nt':
            return call.token == '2NT'
        return (call.is_suit and call.level == 3 and call.denomination in MAJORS
                and call.denomination in s.our_suits()[:-1])
    return check


def responder_transferred_then_bid_game(s):
    _, last = _partner_last(s)
    return last is not None and last.token == '3NT' and _transfer_target(s) is not None


def choose_game_after_transfer(s):
    """Opener after a transfer and responder's 3NT: four of the major with three trumps"""
    target = _transfer_target(s)
    if s.length(target) >= 3:
        return s.bid(4, target, f"game ({s.length(target)}-card support)")
    return s.pass_("3NT with a doubleton")


CONTINUATION_RULES = RuleChain('continuation', [
    Rule('choose game after transfer', choose_game_after_transfer, when=responder_transferred_then_bid_game),
    Rule('notrump invitation', accept_notrump_invitation, when=partner_invited('nt')),
    Rule('suit invitation', accept_suit_invitation, when=partner_invited('suit')),
])


def first_rebid_as(relation):
    def check(s):
        return s.opening_relation is relation and len(s.my_actions) == 1 and _partner_last(s)[1] is not None
    return check


def rebid(s):
    """Later calls in a silent auction; falls back to Pass when no rule applies"""
    call = REBID_RULES.decide(s)
    if call is not None:
        return call
    _, last = s.context.last_action()
    if last is not None and last.is_contract and last.level >= GAME_LEVEL[last.denomination]:
        return s.pass_("game reached")
    return s.pass_("nothing further to show")


REBID_RULES = RuleChain('rebid', [
    Rule('ace-ask follow-up', ace_ask_followup, when=asked_for_aces),
    Rule('opener', OPENER_REBID_RULES, when=first_rebid_as(Relation.SELF)),
    Rule('responder', RESPONDER_REBID_RULES,
         when=lambda s: s.opening_relation is Relation.PARTNER and len(s.my_actions) == 1
         and _partner_last(s)[0] > s.context.first_action(Relation.SELF)[0]),
    Rule('continuation', CONTINUATION_RULES),
])

