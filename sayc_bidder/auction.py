"""
Auction and Auction Context
Ordered call log plus the seat/side inference every bidding rule relies on

The call log may be sparse: calls may lack seat tags, the dealer may be
unknown, and the log may start mid-auction. AuctionContext is the single
place that recovers who made each call relative to the player to act.
"""

from enum import Enum, IntEnum

from .calls import as_call


class Seat(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @classmethod
    def from_str(cls, text):
        """'N', 'north', 'S' ... to a Seat"""
        key = str(text).strip().upper()[:1]
        for seat in cls:
            if seat.name[0] == key:
                return seat
        raise ValueError(f"Unknown seat: {text!r}")

    def offset(self, n):
        return Seat((self.value + n) % 4)

    def next(self):
        return self.offset(1)

    def partner(self):
        return self.offset(2)

    def previous(self):
        return self.offset(3)

    def abbreviation(self):
        return self.name[0]

    @property
    def side(self):
        return 'NS' if self in (Seat.NORTH, Seat.SOUTH) else 'EW'


TURN_ORDER = [Seat.NORTH, Seat.EAST, Seat.SOUTH, Seat.WEST]


def as_seat(value):
    """Coerce 'N' / 0 / Seat to a Seat; None stays None"""
    if value is None or isinstance(value, Seat):
        return value
    if isinstance(value, int):
        return Seat(value % 4)
    return Seat.from_str(value)


class Relation(Enum):
    SELF = 'self'
    LHO = 'lho'
    PARTNER = 'partner'
    RHO = 'rho'

    @property
    def is_ours(self):
        return self in (Relation.SELF, Relation.PARTNER)


RELATION_BY_DISTANCE = {0: Relation.SELF, 1: Relation.LHO, 2: Relation.PARTNER, 3: Relation.RHO}
OURS = (Relation.SELF, Relation.PARTNER)
THEIRS = (Relation.LHO, Relation.RHO)


class Vulnerability:
    """Vulnerability of our side and theirs, fixed for the deal"""

    def __init__(self, we=False, they=False):
        self.we = bool(we)
        self.they = bool(they)

    @property
    def favourable(self):
        return not self.we and self.they

    @property
    def unfavourable(self):
        return self.we and not self.they

    def swapped(self):
        return Vulnerability(self.they, self.we)

    def __eq__(self, other):
        if not isinstance(other, Vulnerability):
            return NotImplemented
        return (self.we, self.they) == (other.we, other.they)

    def __hash__(self):
        return hash((self.we, self.they))

    def __repr__(self):
        return f"Vulnerability(we={self.we}, they={self.they})"


class Auction:
    """Ordered log of calls for one deal"""

    def __init__(self, calls=None, dealer=None, perspective=None, vulnerability=None):
        self.calls = []
        self.dealer = as_seat(dealer)
        self.perspective = as_seat(perspective)
        self.vulnerability = vulnerability or Vulnerability()
        for call in calls or []:
            self.append(call)

    @classmethod
    def start(cls, perspective, we_vulnerable=False, they_vulnerable=False, dealer=None):
        """Begin a new auction for the player sitting at `perspective`"""
        return cls(dealer=dealer, perspective=perspective,
                   vulnerability=Vulnerability(we_vulnerable, they_vulnerable))

    @classmethod
    def from_tokens(cls, tokens, dealer=None, perspective=None, vulnerability=None):
        """
        Build an auction from tokens. Each entry is a token ('1C'), a Call,
        or a (token, seat) pair for a seat-tagged call.
        """
        auction = cls(dealer=dealer, perspective=perspective, vulnerability=vulnerability)
        for entry in tokens:
            if isinstance(entry, (tuple, list)):
                auction.append(entry[0], seat=entry[1])
            else:
                auction.append(entry)
        return auction

    def append(self, call, seat=None):
        """Append a call (token or Call); returns the stored Call"""
        call = as_call(call)
        if seat is not None:
            call = call.at_seat(as_seat(seat))
        self.calls.append(call)
        return call

    def __len__(self):
        return len(self.calls)

    def __iter__(self):
        return iter(self.calls)

    def __getitem__(self, index):
        return self.calls[index]

    def tokens(self):
        return [call.token for call in self.calls]

    def last_contract(self):
        """Most recent contract call; doubles never change it"""
        for call in reversed(self.calls):
            if call.is_contract:
                return call
        return None

    def is_closed(self):
        """Three passes after a call, or four passes to open"""
        if len(self.calls) < 4:
            return False
        if not any(not call.is_pass for call in self.calls):
            return True
        return all(call.is_pass for call in self.calls[-3:])

    def reseat(self, dealer):
        """Set the dealer and retag every call by rotation from it"""
        self.dealer = as_seat(dealer)
        self.calls = [call.at_seat(self.dealer.offset(i)) for i, call in enumerate(self.calls)]

    def context(self):
        return AuctionContext(self.calls, self.dealer, self.perspective, self.vulnerability)

    def __repr__(self):
        return f"Auction({self.tokens()!r}, dealer={self.dealer!r}, perspective={self.perspective!r})"


class AuctionContext:
    """
    Read-only view of an auction from the seat about to act (the actor).

    Seat of the call at index i: its explicit tag, else the dealer rotated by
    i, else the actor rotated back by (n - i). When no seat is known anywhere,
    relations come from index parity, so a lone first call is the actor's RHO.
    """

    def __init__(self, calls, dealer=None, perspective=None, vulnerability=None):
        self.calls = [as_call(call) for call in calls]
        self.dealer = as_seat(dealer)
        self.perspective = as_seat(perspective)
        self.vulnerability = vulnerability or Vulnerability()
        self.actor = self._resolve_actor()

    @classmethod
    def of(cls, auction):
        """Context for an Auction, an AuctionContext or a plain list of calls"""
        if isinstance(auction, AuctionContext):
            return auction
        if isinstance(auction, Auction):
            return auction.context()
        return cls(list(auction))

    def _resolve_actor(self):
        n = len(self.calls)
        if self.perspective is not None:
            return self.perspective
        if self.dealer is not None:
            return self.dealer.offset(n)
        for i in range(n - 1, -1, -1):
            if self.calls[i].seat is not None:
                return self.calls[i].seat.offset(n - i)
        return None

    def __len__(self):
        return len(self.calls)

    @property
    def has_seat_info(self):
        return self.actor is not None

    def seat_at(self, index):
        """Seat that made (or will make) the call at `index`, None if unknown"""
        n = len(self.calls)
        if index >= n:
            return self.actor.offset(index - n) if self.actor is not None else None
        tagged = self.calls[index].seat
        if tagged is not None:
            return tagged
        if self.dealer is not None:
            return self.dealer.offset(index)
        if self.actor is not None:
            return self.actor.offset(index - n)
        return None

    def relation(self, index):
        """Relation of the caller at `index` to the actor"""
        seat = self.seat_at(index)
        if seat is not None and self.actor is not None:
            return RELATION_BY_DISTANCE[(seat - self.actor) % 4]
        return RELATION_BY_DISTANCE[(index - len(self.calls)) % 4]

    def relation_of_seat(self, seat):
        if self.actor is None:
            return None
        return RELATION_BY_DISTANCE[(as_seat(seat) - self.actor) % 4]

    def is_ours(self, index):
        return self.relation(index).is_ours

    def entries(self):
        return [(i, call, self.relation(i)) for i, call in enumerate(self.calls)]

    def actions(self, *relations):
        """Non-pass calls as (index, call), optionally limited to some relations"""
        return [(i, call) for i, call in enumerate(self.calls)
                if not call.is_pass and (not relations or self.relation(i) in relations)]

    def contracts(self, *relations):
        return [(i, call) for i, call in self.actions(*relations) if call.is_contract]

    def first_action(self, *relations):
        found = self.actions(*relations)
        return found[0] if found else (None, None)

    def last_action(self, *relations):
        found = self.actions(*relations)
        return found[-1] if found else (None, None)

    def actions_since(self, index, *relations):
        return [(i, call) for i, call in self.actions(*relations) if i > index]

    @property
    def opening_index(self):
        for i, call in enumerate(self.calls):
            if call.is_contract:
                return i
        return None

    @property
    def opening(self):
        index = self.opening_index
        return self.calls[index] if index is not None else None

    @property
    def opening_relation(self):
        index = self.opening_index
        return self.relation(index) if index is not None else None

    @property
    def opened_by_us(self):
        relation = self.opening_relation
        return relation is not None and relation.is_ours

    @property
    def last_contract_index(self):
        for i in range(len(self.calls) - 1, -1, -1):
            if self.calls[i].is_contract:
                return i
        return None

    @property
    def last_contract(self):
        index = self.last_contract_index
        return self.calls[index] if index is not None else None

    @property
    def last_contract_relation(self):
        index = self.last_contract_index
        return self.relation(index) if index is not None else None

    def no_interference(self, start, end=None):
        """True when every call strictly between `start` and `end` is a pass"""
        end = len(self.calls) if end is None else end
        return all(call.is_pass for call in self.calls[start + 1:end])

    def calls_since(self, index):
        return self.calls[index + 1:]

    def before(self, index):
        """The auction as the caller at `index` saw it when acting"""
        ours = self.relation(index).is_ours
        return AuctionContext(self.calls[:index], self.dealer, self.seat_at(index),
                              self.vulnerability if ours else self.vulnerability.swapped())

    def is_passed_hand(self, relation=Relation.SELF):
        """The player passed before anyone opened"""
        limit = self.opening_index
        limit = len(self.calls) if limit is None else limit
        return any(call.is_pass and self.relation(i) is relation
                   for i, call in enumerate(self.calls[:limit]))

    def opening_seat_position(self):
        """1 for first seat ... 4 for fourth seat, None before an opening"""
        index = self.opening_index
        return index + 1 if index is not None else None

    def __repr__(self):
        tokens = [call.token for call in self.calls]
        return f"AuctionContext({tokens!r}, actor={self.actor!r})"
