"""
Rule Tables
Ordered (precondition, action) rules and the per-decision Situation they read

A RuleChain tries its rules in order. A rule applies when its precondition
holds and its action produces a call; an action may return None to decline
a case its precondition could not rule out, and the chain moves on.
"""

import logging

from .auction import OURS, THEIRS, Relation
from .calls import Call, minimum_level
from .legality import is_legal

logger = logging.getLogger(__name__)


class Rule:
    """One named entry of a rule table"""

    def __init__(self, name, action, when=None):
        self.name = name
        self.action = action
        self.when = when

    def applies(self, situation):
        return self.when is None or bool(self.when(situation))

    def fire(self, situation):
        return self.action(situation)

    def __repr__(self):
        return f"Rule({self.name!r})"


class RuleChain:
    """First rule whose precondition holds and whose action yields a call wins"""

    def __init__(self, name, rules):
        self.name = name
        self.rules = list(rules)

    def decide(self, situation):
        for rule in self.rules:
            if not rule.applies(situation):
                continue
            call = rule.fire(situation)
            if call is not None:
                logger.debug(f"{self.name}: rule {rule.name} fired -> {call.token}")
                return call
        return None

    __call__ = decide

    def names(self):
        return [rule.name for rule in self.rules]


class Situation:
    """
    Everything one decision reads: the auction as seen by the player to act,
    that player's hand and the convention catalog. Built fresh per decision.
    """

    def __init__(self, context, hand, catalog):
        self.context = context
        self.hand = hand
        self.catalog = catalog
        self.hcp = hand.hcp

    # Hand shortcuts

    def length(self, suit):
        return self.hand.length(suit)

    @property
    def balanced(self):
        return self.hand.is_balanced(self.catalog.get_general('balanced_shapes.include_5422', False))

    def stopper(self, suit):
        return self.hand.has_stopper(suit)

    def longest(self, suits, minimum=0):
        """Longest of `suits` with at least `minimum` cards; ties go to the higher ranking suit"""
        candidates = [s for s in suits if self.length(s) >= minimum]
        if not candidates:
            return None
        return max(candidates, key=lambda s: (self.length(s), 'CDHS'.index(s)))

    # Catalog shortcuts

    def enabled(self, name, category=None):
        return self.catalog.is_enabled(name, category)

    def setting(self, name, key, category=None, default=None):
        return self.catalog.get_setting(name, key, category, default)

    def general(self, key, default=None):
        return self.catalog.get_general(key, default)

    def vulnerability_adjustment(self, kind):
        return self.catalog.vulnerability_adjustment(kind, self.context.vulnerability)

    def match(self, matcher, call):
        """Run a convention matcher for a call the actor is considering"""
        return matcher(self.context, call, self.catalog, self.hand)

    # Auction shortcuts

    @property
    def opening(self):
        return self.context.opening

    @property
    def opening_index(self):
        return self.context.opening_index

    @property
    def opening_relation(self):
        return self.context.opening_relation

    @property
    def last_contract(self):
        return self.context.last_contract

    def actions(self, *relations):
        return self.context.actions(*relations)

    @property
    def my_actions(self):
        return [call for _, call in self.context.actions(Relation.SELF)]

    @property
    def partner_actions(self):
        return [call for _, call in self.context.actions(Relation.PARTNER)]

    @property
    def their_actions(self):
        return [call for _, call in self.context.actions(*THEIRS)]

    @property
    def contested(self):
        """Opponents have made a non-pass call"""
        return bool(self.their_actions)

    def our_suits(self):
        return [call.denomination for _, call in self.context.contracts(*OURS) if call.is_suit]

    def their_suits(self):
        return [call.denomination for _, call in self.context.contracts(*THEIRS) if call.is_suit]

    def passed_hand(self):
        return self.context.is_passed_hand(Relation.SELF)

    # Call builders

    def bid(self, level, denomination, reason, convention=None):
        """Contract call for the actor with its reasoning text; None when the level is not available"""
        if not self.can_bid(level, denomination):
            return None
        call = Call.contract(level, denomination, seat=self.context.actor)
        return call.explain(f"{call.display()} {reason}", convention)

    def cheapest(self, denomination, reason, convention=None, jump=0):
        """Cheapest (plus `jump` levels) legal bid in `denomination`"""
        level = minimum_level(denomination, self.last_contract) + jump
        return self.bid(level, denomination, reason, convention)

    def cheapest_level(self, denomination):
        return minimum_level(denomination, self.last_contract)

    def can_bid(self, level, denomination):
        return level <= 7 and level >= minimum_level(denomination, self.last_contract)

    def double(self, reason, convention=None):
        call = Call.double(seat=self.context.actor)
        return call.explain(reason, convention) if self.is_legal(call) else None

    def redouble(self, reason, convention=None):
        call = Call.redouble(seat=self.context.actor)
        return call.explain(reason, convention) if self.is_legal(call) else None

    def pass_(self, reason):
        return Call.pass_(seat=self.context.actor, rationale=f"Pass ({reason})")

    def is_legal(self, call):
        return is_legal(call, self.context)


def suit_name(suit):
    return {'S': 'spades', 'H': 'hearts', 'D': 'diamonds', 'C': 'clubs', 'NT': 'notrump'}[suit]
