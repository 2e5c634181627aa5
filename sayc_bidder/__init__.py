"""
SAYC Bidder
Rule-based Standard American Yellow Card auction engine: given the auction so
far and the hand to act, choose one legal next call.
"""

from .auction import Auction, AuctionContext, Relation, Seat, Vulnerability
from .bidding_system import BiddingEngine, StandardAmericanBidding
from .calls import Call, CallKind
from .conventions import DEFAULT_CONVENTIONS, ConventionCatalog
from .errors import AuctionNotStartedError, BiddingError, InvalidCallError, InvalidHandError
from .hand import Hand
from .legality import ContractState, ensure_legal, is_legal

__all__ = [
    'Auction',
    'AuctionContext',
    'AuctionNotStartedError',
    'BiddingEngine',
    'BiddingError',
    'Call',
    'CallKind',
    'ContractState',
    'ConventionCatalog',
    'DEFAULT_CONVENTIONS',
    'Hand',
    'InvalidCallError',
    'InvalidHandError',
    'Relation',
    'Seat',
    'StandardAmericanBidding',
    'Vulnerability',
    'ensure_legal',
    'is_legal',
]
