"""
Unit tests for the advancer and the overcaller's second call
"""

import unittest

from sayc_bidder.auction import Auction
from sayc_bidder.bidding_system import BiddingEngine, StandardAmericanBidding
from sayc_bidder.legality import is_legal


def dealt_by_north(*calls):
    seats = ['N', 'E', 'S', 'W']
    return [{'bidder': seats[i % 4], 'call': call} for i, call in enumerate(calls)]


class BiddingTestCase(unittest.TestCase):

    def setUp(self):
        self.bidding = StandardAmericanBidding()

    def recommend(self, lin, calls, position):
        self.bidding.set_hand(lin)
        self.bidding.set_auction(dealt_by_north(*calls), position)
        return self.bidding.get_recommendation()


class TestAdvancingTakeoutDouble(BiddingTestCase):
    """West answering East's takeout double of 1H"""

    def test_forced_answer(self):
        bid, reasoning = self.recommend('SKJ432H432DQ32C32', ['1H', 'X', 'P'], 'W')
        self.assertEqual(bid, '1S')
        self.assertIn('answering the takeout double', reasoning)

    def test_cue_bid_with_values(self):
        bid, _ = self.recommend('SKJ32HK32DAQ32CK2', ['1H', 'X', 'P'], 'W')
        self.assertEqual(bid, '2H')

    def test_penalty_pass(self):
        bid, reasoning = self.recommend('S32HKQJ98DQ32C432', ['1H', 'X', 'P'], 'W')
        self.assertEqual(bid, 'P')
        self.assertIn('penalties', reasoning)


class TestAdvancingOvercall(BiddingTestCase):
    """West after East's overcall"""

    def test_simple_raise(self):
        bid, _ = self.recommend('SK32HQ432DK32C432', ['1C', '1S', 'P'], 'W')
        self.assertEqual(bid, '2S')

    def test_cue_bid_raise(self):
        bid, reasoning = self.recommend('SK32HAQ32DK32CQ32', ['1C', '1S', 'P'], 'W')
        self.assertEqual(bid, '2C')
        self.assertIn('cue-bid raise', reasoning)

    def test_dont_two_suiter_relay(self):
        self.bidding.conventions.disable('meckwell')
        bid, reasoning = self.recommend('SK432H2DQ5432CJ32', ['1NT', '2H', 'P'], 'W')
        self.assertEqual(bid, '2S')
        self.assertIn("partner's other suit", reasoning)

    def test_dont_fit_passes(self):
        self.bidding.conventions.disable('meckwell')
        bid, _ = self.recommend('S432HK32DQ432CJ32', ['1NT', '2H', 'P'], 'W')
        self.assertEqual(bid, 'P')

    def test_unusual_notrump_preference(self):
        bid, _ = self.recommend('SK432HQ32D32CJ432', ['1S', '2NT', 'P'], 'W')
        self.assertEqual(bid, '3C')


class TestOvercallerRebids(BiddingTestCase):
    """East's second call after West answered"""

    def test_game_after_jump_raise(self):
        bid, _ = self.recommend('SAKJ32HK32DQJ2C32', ['1C', '1S', 'P', '3S', 'P'], 'E')
        self.assertEqual(bid, '4S')

    def test_pass_after_simple_raise(self):
        bid, _ = self.recommend('SAKJ32HK32DQJ2C32', ['1C', '1S', 'P', '2S', 'P'], 'E')
        self.assertEqual(bid, 'P')

    def test_strong_double_raises_answer(self):
        bid, _ = self.recommend('SAK32H2DAQ32CKQ32', ['1H', 'X', 'P', '1S', 'P'], 'E')
        self.assertEqual(bid, '3S')


class TestRedoubleEntry(unittest.TestCase):
    """A first call that was a redouble is neither an overcall nor a takeout double"""

    def setUp(self):
        self.engine = BiddingEngine()

    def test_untagged_auction(self):
        auction = Auction.from_tokens(['1C', '2NT', 'X', 'XX', 'P', '3C', '3D'])
        call = self.engine.next_call(auction, 'SA3H986DJ95CAQJ82')
        self.assertTrue(is_legal(call, auction))
        self.assertTrue(call.rationale)

    def test_tagged_auction(self):
        calls = ['1NT', 'P', '2NT', '3D', 'X', 'XX', '4S', '5S', 'P']
        seats = ['N', 'E', 'S', 'W']
        auction = Auction.from_tokens([(call, seats[i % 4]) for i, call in enumerate(calls)], perspective='E')
        call = self.engine.next_call(auction, 'SA8H7532DAKT87CAT')
        self.assertTrue(is_legal(call, auction))
        self.assertTrue(call.rationale)


if __name__ == '__main__':
    unittest.main()
