"""
Standard American Bidding System
Decision entry point for Standard American Yellow Card (SAYC) auctions

Stages, most specific first:
- Answers to partner's ace ask (Blackwood / RKCB / Gerber)
- Opening bids
- Responses to partner's opening in a silent auction
- Opener and responder rebids, slam bidding and later continuations
- Competitive bidding once the opponents have acted
Every decision passes through the legality guard before it is returned.
"""

import logging

from .auction import Auction, AuctionContext, Relation, Seat, Vulnerability, as_seat
from .calls import Call
from .competitive import COMPETITIVE_RULES
from .conventions import ConventionCatalog
from .errors import AuctionNotStartedError
from .hand import Hand
from .legality import ensure_legal, is_legal
from .matcher import ace_ask_response, count_keycards, match_ace_ask
from .opening import select_opening
from .rebids import rebid
from .responder import respond
from .rules import Rule, RuleChain, Situation

logger = logging.getLogger(__name__)

ACE_ASK_LABELS = {
    'gerber': ('Gerber', 'aces'),
    'gerber_kings': ('Gerber king ask', 'kings'),
    'blackwood_rkcb': ('RKCB', 'keycards'),
    'blackwood_classic': ('Blackwood', 'aces'),
}


def _partner_ask(s):
    index, call = s.context.last_action()
    if index is None or s.context.relation(index) is not Relation.PARTNER:
        return None
    result = match_ace_ask(s.context.before(index), call, s.catalog)
    return result if result else None


def answer_ace_ask(s):
    """Step response to partner's Blackwood, RKCB or Gerber"""
    result = _partner_ask(s)
    call = ace_ask_response(result, s.hand, s.catalog)
    if call is None:
        return None
    name, counted = ACE_ASK_LABELS[result.convention]
    if counted == 'keycards':
        count, _ = count_keycards(s.hand, result.suits[0])
    elif counted == 'kings':
        count = s.hand.count_kings()
    else:
        count = s.hand.count_aces()
    return s.bid(call.level, call.denomination, f"{name} response ({count} {counted})", result.convention)


def no_contract_yet(s):
    return s.opening is None


def first_response(s):
    return s.opening_relation is Relation.PARTNER and not s.contested and not s.my_actions


def uncontested_rebid(s):
    return s.context.opened_by_us and not s.contested


DECISION_RULES = RuleChain('decision', [
    Rule('ace-ask response', answer_ace_ask, when=_partner_ask),
    Rule('opening', select_opening, when=no_contract_yet),
    Rule('response', respond, when=first_response),
    Rule('rebid', rebid, when=uncontested_rebid),
    Rule('competitive', COMPETITIVE_RULES, when=lambda s: s.contested),
])


class BiddingEngine:
    """
    Chooses the next call for the player to act.

    The engine holds only its convention catalog; every decision is computed
    from the auction and hand passed in, so equal inputs give equal calls.
    """

    def __init__(self, conventions=None):
        if isinstance(conventions, ConventionCatalog):
            self.conventions = conventions
        else:
            self.conventions = ConventionCatalog(conventions)

    def start_auction(self, perspective, we_vulnerable=False, they_vulnerable=False, dealer=None):
        return Auction.start(perspective, we_vulnerable, they_vulnerable, dealer)

    def is_legal(self, call, auction):
        return is_legal(call, auction)

    def next_call(self, auction, hand):
        """Legal next call for `hand` in `auction`, with its rationale attached"""
        if auction is None:
            raise AuctionNotStartedError()
        if not isinstance(hand, Hand):
            hand = Hand(hand)
        context = AuctionContext.of(auction)
        situation = Situation(context, hand, self.conventions)

        call = DECISION_RULES.decide(situation)
        if call is None:
            call = situation.pass_("no clear bid available")
        call = ensure_legal(call, context)
        logger.info(f"{' '.join(c.token for c in context.calls) or '(opening)'} -> {call.token}: {call.rationale}")
        return call


class StandardAmericanBidding:
    """
    Standard American bidding system with SAYC conventions

    Dictionary-based front end: auctions are lists of
    {'call': token, 'bidder': 'N/E/S/W'} entries.
    """

    def __init__(self, conventions=None):
        self.engine = BiddingEngine(conventions)
        self.hand = None
        self.auction = None
        self.position = None  # 'N', 'E', 'S', 'W'
        self.vulnerability = Vulnerability()

    @property
    def conventions(self):
        return self.engine.conventions

    def set_hand(self, lin_hand):
        """Set the current hand to analyze"""
        self.hand = Hand(lin_hand)

    def set_vulnerability(self, we=False, they=False):
        self.vulnerability = Vulnerability(we, they)

    def set_auction(self, auction, position, dealer=None):
        """
        Set the current auction
        auction: list of {'call': 'bid', 'bidder': 'N/E/S/W'}
        position: current player's position
        """
        self.position = Seat.from_str(position)
        self.auction = Auction(dealer=dealer, perspective=self.position, vulnerability=self.vulnerability)
        for entry in auction:
            self.auction.append(Call.parse(entry['call']), seat=as_seat(entry.get('bidder')))

    def get_recommendation(self):
        """
        Get bidding recommendation based on current auction and hand
        Returns: (bid, reasoning)
        """
        if self.auction is None:
            raise AuctionNotStartedError()
        if self.hand is None:
            return None, "No hand set"
        self.auction.vulnerability = self.vulnerability
        call = self.engine.next_call(self.auction, self.hand)
        return call.token, call.rationale
