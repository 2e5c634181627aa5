"""
Call Model
Pass, contract, double and redouble calls and the ordering of contracts

Contracts compare by level first, then by denomination (C < D < H < S < NT).
"""

import re
from enum import Enum

from .errors import InvalidCallError

DENOMINATIONS = ['C', 'D', 'H', 'S', 'NT']
DENOMINATION_RANK = {denom: i for i, denom in enumerate(DENOMINATIONS)}
SUITS = ['S', 'H', 'D', 'C']
MAJORS = ['H', 'S']
MINORS = ['C', 'D']
SUIT_SYMBOLS = {'S': '♠', 'H': '♥', 'D': '♦', 'C': '♣', 'NT': 'NT'}

CONTRACT_PATTERN = re.compile(r'^([1-7])\s*(C|D|H|S|NT|N)$')
PASS_TOKENS = {'P', 'PASS', '-'}
DOUBLE_TOKENS = {'X', 'D', 'DBL', 'DOUBLE'}
REDOUBLE_TOKENS = {'XX', 'R', 'DD', 'RDBL', 'REDOUBLE'}


class CallKind(Enum):
    PASS = 'P'
    CONTRACT = 'contract'
    DOUBLE = 'X'
    REDOUBLE = 'XX'


class Call:
    """A single auction entry, optionally tagged with the seat that made it"""

    def __init__(self, kind, level=None, denomination=None, seat=None,
                 rationale=None, convention=None):
        if kind is CallKind.CONTRACT:
            if level not in range(1, 8) or denomination not in DENOMINATION_RANK:
                raise InvalidCallError(f"{level}{denomination}")
        else:
            level = None
            denomination = None
        self.kind = kind
        self.level = level
        self.denomination = denomination
        self.seat = seat
        self.rationale = rationale
        self.convention = convention

    @classmethod
    def pass_(cls, seat=None, rationale=None):
        return cls(CallKind.PASS, seat=seat, rationale=rationale)

    @classmethod
    def contract(cls, level, denomination, seat=None, rationale=None, convention=None):
        return cls(CallKind.CONTRACT, level, denomination, seat, rationale, convention)

    @classmethod
    def double(cls, seat=None, rationale=None, convention=None):
        return cls(CallKind.DOUBLE, seat=seat, rationale=rationale, convention=convention)

    @classmethod
    def redouble(cls, seat=None, rationale=None, convention=None):
        return cls(CallKind.REDOUBLE, seat=seat, rationale=rationale, convention=convention)

    @classmethod
    def parse(cls, token, seat=None):
        """
        Parse a call token ('1NT', '4S', 'P', 'Pass', 'X', 'XX', ...)

        Raises InvalidCallError when the token is not a call.
        """
        if isinstance(token, Call):
            return token if seat is None else token.at_seat(seat)
        if not isinstance(token, str):
            raise InvalidCallError(token)
        text = token.strip().upper()
        if text in PASS_TOKENS:
            return cls.pass_(seat)
        if text in DOUBLE_TOKENS:
            return cls.double(seat)
        if text in REDOUBLE_TOKENS:
            return cls.redouble(seat)
        match = CONTRACT_PATTERN.match(text)
        if not match:
            raise InvalidCallError(token)
        denom = 'NT' if match.group(2) == 'N' else match.group(2)
        return cls.contract(int(match.group(1)), denom, seat)

    @property
    def is_pass(self):
        return self.kind is CallKind.PASS

    @property
    def is_contract(self):
        return self.kind is CallKind.CONTRACT

    @property
    def is_double(self):
        return self.kind is CallKind.DOUBLE

    @property
    def is_redouble(self):
        return self.kind is CallKind.REDOUBLE

    @property
    def is_notrump(self):
        return self.is_contract and self.denomination == 'NT'

    @property
    def is_suit(self):
        return self.is_contract and self.denomination != 'NT'

    @property
    def token(self):
        """Canonical token: 'P', 'X', 'XX' or level + denomination"""
        if self.is_contract:
            return f"{self.level}{self.denomination}"
        return self.kind.value

    def display(self):
        """Token with suit symbols, as used in reasoning text"""
        if self.is_contract:
            return f"{self.level}{SUIT_SYMBOLS[self.denomination]}"
        return {'P': 'Pass', 'X': 'Double', 'XX': 'Redouble'}[self.kind.value]

    def at_seat(self, seat):
        """Copy of this call tagged with a seat"""
        return Call(self.kind, self.level, self.denomination, seat, self.rationale, self.convention)

    def explain(self, rationale, convention=None):
        """Copy of this call carrying a rationale (and convention name)"""
        return Call(self.kind, self.level, self.denomination, self.seat, rationale,
                    convention if convention is not None else self.convention)

    def __eq__(self, other):
        if isinstance(other, str):
            try:
                other = Call.parse(other)
            except InvalidCallError:
                return False
        if not isinstance(other, Call):
            return NotImplemented
        return (self.kind, self.level, self.denomination) == (other.kind, other.level, other.denomination)

    def __hash__(self):
        return hash((self.kind, self.level, self.denomination))

    def __repr__(self):
        if self.seat is not None:
            return f"Call({self.token!r}, seat={self.seat!r})"
        return f"Call({self.token!r})"

    def __str__(self):
        return self.token


PASS = Call.pass_()
DOUBLE = Call.double()
REDOUBLE = Call.redouble()


def as_call(value):
    """Coerce a token or Call to a Call; None stays None"""
    if value is None or isinstance(value, Call):
        return value
    return Call.parse(value)


def rank(call):
    """(level, denomination rank) for a contract call, None otherwise"""
    call = as_call(call)
    if call is None or not call.is_contract:
        return None
    return (call.level, DENOMINATION_RANK[call.denomination])


def outranks(a, b):
    """
    True iff contract `a` is higher than contract `b`.

    Permissive: anything that fails to parse, or that is not a contract,
    compares as outranking. No prior contract (b is None) is outranked by any call.
    """
    try:
        rank_a = rank(a)
        rank_b = rank(b)
    except InvalidCallError:
        return True
    if rank_a is None or rank_b is None:
        return True
    return rank_a > rank_b


def minimum_level(denomination, over):
    """Cheapest level at which `denomination` can be bid over contract `over`"""
    over = as_call(over)
    if over is None or not over.is_contract:
        return 1
    if DENOMINATION_RANK[denomination] > DENOMINATION_RANK[over.denomination]:
        return over.level
    return over.level + 1


def cheapest_contract(denomination, over, **kwargs):
    """Cheapest contract in `denomination` over `over`, or None above seven"""
    level = minimum_level(denomination, over)
    if level > 7:
        return None
    return Call.contract(level, denomination, **kwargs)


def is_jump(call, over):
    """Number of levels a contract skips over the cheapest bid in its denomination"""
    call = as_call(call)
    if call is None or not call.is_contract:
        return 0
    return max(0, call.level - minimum_level(call.denomination, over))
