"""
Unit tests for the legality guard
"""

import unittest

from sayc_bidder.auction import Auction, AuctionContext
from sayc_bidder.calls import Call
from sayc_bidder.legality import ContractState, contract_state, ensure_legal, is_legal


class TestContractState(unittest.TestCase):

    def test_replay(self):
        self.assertEqual(contract_state([]), (ContractState.NO_CONTRACT, None))
        self.assertEqual(contract_state(['1H']), (ContractState.STANDING, 0))
        self.assertEqual(contract_state(['1H', 'X']), (ContractState.DOUBLED, 0))
        self.assertEqual(contract_state(['1H', 'X', 'XX', 'P']), (ContractState.REDOUBLED, 0))
        self.assertEqual(contract_state(['1H', 'X', '2C']), (ContractState.STANDING, 2))


class TestIsLegal(unittest.TestCase):

    def test_contracts_must_outrank(self):
        self.assertTrue(is_legal('1C', []))
        self.assertTrue(is_legal('1S', ['1H']))
        self.assertFalse(is_legal('1H', ['1S']))
        self.assertFalse(is_legal('1NT', ['1NT', 'X']))

    def test_pass_always_legal(self):
        self.assertTrue(is_legal('P', []))
        self.assertTrue(is_legal('P', ['7NT', 'X', 'XX']))

    def test_unparseable_is_illegal(self):
        self.assertFalse(is_legal('8S', []))
        self.assertFalse(is_legal(None, []))

    def test_double_without_seats(self):
        """Token-only rule when nobody's seat is known"""
        self.assertFalse(is_legal('X', []))
        self.assertTrue(is_legal('X', ['1H']))
        self.assertTrue(is_legal('X', ['1H', 'P', 'P']))
        self.assertFalse(is_legal('X', ['1H', 'X']))

    def test_double_by_side(self):
        # North opened; South may not double partner
        self.assertFalse(is_legal('X', AuctionContext(['1H', 'P'], dealer='N')))
        # West may double
        self.assertTrue(is_legal('X', AuctionContext(['1H', 'P', 'P'], dealer='N')))

    def test_redouble(self):
        self.assertFalse(is_legal('XX', ['1H']))
        # South redoubles the double of partner's contract
        self.assertTrue(is_legal('XX', AuctionContext(['1H', 'X'], dealer='N')))
        # West cannot redouble their own side's double
        self.assertFalse(is_legal('XX', AuctionContext(['1H', 'X', 'P'], dealer='N')))
        self.assertFalse(is_legal('XX', ['1H', 'X', 'XX']))

    def test_non_mutating(self):
        auction = Auction.from_tokens(['1H'], dealer='N')
        is_legal('2C', auction)
        self.assertEqual(auction.tokens(), ['1H'])


class TestEnsureLegal(unittest.TestCase):

    def test_legal_call_unchanged(self):
        call = Call.parse('2C').explain("2♣ Stayman")
        result = ensure_legal(call, ['1NT', 'P'])
        self.assertIs(result, call)

    def test_illegal_call_becomes_pass(self):
        with self.assertLogs('sayc_bidder.legality', level='WARNING'):
            result = ensure_legal(Call.parse('1C'), ['1S'])
        self.assertTrue(result.is_pass)
        self.assertEqual(result.rationale, "Pass (1C is not legal here)")

    def test_idempotent(self):
        with self.assertLogs('sayc_bidder.legality', level='WARNING'):
            once = ensure_legal(Call.parse('XX'), ['1H'])
        twice = ensure_legal(once, ['1H'])
        self.assertEqual(once, twice)
        self.assertEqual(once.rationale, twice.rationale)


if __name__ == '__main__':
    unittest.main()
