"""
Bidding Errors
Exceptions raised by the SAYC bidder.

Only programmer errors escape the decision entry point. Illegal proposals and
missing auction metadata are resolved to a legal call instead of raising.
"""


class BiddingError(Exception):
    """Base class for all bidder errors"""


class AuctionNotStartedError(BiddingError):
    """A decision was requested before any auction was started"""

    def __init__(self, message="No auction has been started; call start_auction() or set_auction() first"):
        super().__init__(message)


class InvalidCallError(BiddingError, ValueError):
    """A call token could not be parsed"""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Unrecognized call: {token!r}")


class InvalidHandError(BiddingError, ValueError):
    """Hand text could not be parsed into cards"""
