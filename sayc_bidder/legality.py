"""
Legality Guard
Tracks the standing contract and its double/redouble status, and downgrades
illegal proposals to Pass

The guard never raises: every other component may propose speculative calls
and rely on ensure_legal() as the single enforcement point.
"""

import logging
from enum import Enum

from .auction import AuctionContext
from .calls import Call, CallKind, as_call, outranks
from .errors import InvalidCallError

logger = logging.getLogger(__name__)


class ContractState(Enum):
    NO_CONTRACT = 'no contract yet'
    STANDING = 'contract standing'
    DOUBLED = 'contract doubled'
    REDOUBLED = 'contract redoubled'


# (state, call kind) -> next state; pairs missing from the table leave the state alone
TRANSITIONS = {
    (ContractState.NO_CONTRACT, CallKind.CONTRACT): ContractState.STANDING,
    (ContractState.STANDING, CallKind.CONTRACT): ContractState.STANDING,
    (ContractState.DOUBLED, CallKind.CONTRACT): ContractState.STANDING,
    (ContractState.REDOUBLED, CallKind.CONTRACT): ContractState.STANDING,
    (ContractState.STANDING, CallKind.DOUBLE): ContractState.DOUBLED,
    (ContractState.DOUBLED, CallKind.REDOUBLE): ContractState.REDOUBLED,
}


def contract_state(context):
    """Replay the log: (ContractState, index of the standing contract or None)"""
    context = AuctionContext.of(context)
    state = ContractState.NO_CONTRACT
    contract_index = None
    for i, call in enumerate(context.calls):
        state = TRANSITIONS.get((state, call.kind), state)
        if call.is_contract:
            contract_index = i
    return state, contract_index


def is_legal(call, auction):
    """
    True when `call` may be made next in `auction` (non-mutating).

    Double/redouble are checked by side when seats can be resolved, otherwise
    by the token-only rule: double needs an undoubled standing contract,
    redouble needs the last action since the contract to be a double.
    """
    try:
        call = as_call(call)
    except InvalidCallError:
        return False
    if call is None:
        return False
    context = AuctionContext.of(auction)
    if call.is_pass:
        return True
    if call.is_contract:
        return outranks(call, context.last_contract)

    state, contract_index = contract_state(context)
    wanted = ContractState.STANDING if call.is_double else ContractState.DOUBLED
    if state is not wanted:
        return False

    proposer = call.seat if call.seat is not None else context.actor
    owner = context.seat_at(contract_index) if context.has_seat_info else None
    if proposer is None or owner is None:
        # Token-only fallback: the state check above is all we can verify
        return True
    same_side = proposer.side == owner.side
    return not same_side if call.is_double else same_side


def ensure_legal(call, auction):
    """Return `call` unchanged when legal, else a Pass explaining why"""
    if is_legal(call, auction):
        return as_call(call)
    token = call.token if isinstance(call, Call) else str(call)
    history = ' '.join(c.token for c in AuctionContext.of(auction).calls) or '(empty)'
    logger.warning(f"Illegal call {token} proposed after {history}; passing instead")
    seat = call.seat if isinstance(call, Call) else None
    return Call.pass_(seat=seat, rationale=f"Pass ({token} is not legal here)")
