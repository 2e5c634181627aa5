"""
Unit tests for rebids, slam bidding and later continuations
"""

import unittest

from sayc_bidder.bidding_system import StandardAmericanBidding


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


class TestOpenerRebids(BiddingTestCase):
    """Opener's second call in a silent auction"""

    def test_stayman_answer(self):
        bid, reasoning = self.recommend('SK32HAQ32DAJ2CQ32', ['1NT', 'P', '2C', 'P'], 'N')
        self.assertEqual(bid, '2H')
        self.assertIn('Stayman answer', reasoning)

    def test_stayman_denial(self):
        bid, _ = self.recommend('SK32HAQ2DAJ32CQ32', ['1NT', 'P', '2C', 'P'], 'N')
        self.assertEqual(bid, '2D')

    def test_transfer_completion(self):
        bid, reasoning = self.recommend('SK32HAQ32DAJ2CQ32', ['1NT', 'P', '2D', 'P'], 'N')
        self.assertEqual(bid, '2H')
        self.assertIn('completing transfer', reasoning)

    def test_super_accept(self):
        """17 HCP with four trumps jumps to three of the major"""
        bid, reasoning = self.recommend('SK32HAQ32DAJ2CK32', ['1NT', 'P', '2D', 'P'], 'N')
        self.assertEqual(bid, '3H')
        self.assertIn('super-accept', reasoning)

    def test_raise_one_level_response(self):
        bid, reasoning = self.recommend('SKQ32H32DAK432CQ2', ['1D', 'P', '1S', 'P'], 'N')
        self.assertEqual(bid, '2S')
        self.assertIn('raise', reasoning)

    def test_balanced_minimum_rebids_1nt(self):
        bid, _ = self.recommend('SK2HKJ3DAJ32CQ432', ['1D', 'P', '1S', 'P'], 'N')
        self.assertEqual(bid, '1NT')

    def test_accepting_limit_raise(self):
        bid, _ = self.recommend('SAKJ32HK32DQ32CK2', ['1S', 'P', '3S', 'P'], 'N')
        self.assertEqual(bid, '4S')

    def test_declining_simple_raise(self):
        bid, reasoning = self.recommend('SAKJ32HK32DQ32C32', ['1S', 'P', '2S', 'P'], 'N')
        self.assertEqual(bid, 'P')
        self.assertIn('minimum', reasoning)

    def test_jacoby_2nt_shortness(self):
        bid, reasoning = self.recommend('SAKJ32HK432D2CQ32', ['1S', 'P', '2NT', 'P'], 'N')
        self.assertEqual(bid, '3D')
        self.assertIn('shortness', reasoning)

    def test_invitation_accepted(self):
        bid, _ = self.recommend('SKQ2HKQ2DAJ32CQ32', ['1NT', 'P', '2NT', 'P'], 'N')
        self.assertEqual(bid, '3NT')


class TestResponderRebids(BiddingTestCase):
    """Responder's second call in a silent auction"""

    def test_game_after_transfer(self):
        # 10 HCP, five hearts, balanced
        bid, reasoning = self.recommend('SK32HKJ432DQ32CJ2', ['1NT', 'P', '2D', 'P', '2H', 'P'], 'S')
        self.assertEqual(bid, '3NT')
        self.assertIn('choice of games', reasoning)

    def test_sign_off_after_transfer(self):
        bid, _ = self.recommend('S32HKJ432DQ32C432', ['1NT', 'P', '2D', 'P', '2H', 'P'], 'S')
        self.assertEqual(bid, 'P')

    def test_major_fit_after_stayman(self):
        bid, _ = self.recommend('SKQ32HK32DQ2CJ432', ['1NT', 'P', '2C', 'P', '2S', 'P'], 'S')
        self.assertEqual(bid, '4S')

    def test_no_fit_after_stayman(self):
        bid, _ = self.recommend('SKQ32HK32DQ2CJ432', ['1NT', 'P', '2C', 'P', '2D', 'P'], 'S')
        self.assertEqual(bid, '3NT')

    def test_opener_chooses_major_after_3nt(self):
        bid, _ = self.recommend('SK32HAQ2DAJ32CQ32', ['1NT', 'P', '2D', 'P', '2H', 'P', '3NT', 'P'], 'N')
        self.assertEqual(bid, '4H')


class TestSlamBidding(BiddingTestCase):
    """Ace asking and the follow-up"""

    def test_rkcb_response(self):
        bid, reasoning = self.recommend('SQ432HA32D432C432', ['1S', 'P', '3S', 'P', '4NT', 'P'], 'S')
        self.assertEqual(bid, '5C')
        self.assertIn('RKCB response (1 keycards)', reasoning)

    def test_gerber_response(self):
        bid, reasoning = self.recommend('SA32HA32DKQ32CQ32', ['1NT', 'P', '4C', 'P'], 'N')
        self.assertEqual(bid, '4S')
        self.assertIn('Gerber', reasoning)

    def test_sign_off_missing_two_keycards(self):
        # Three keycards here; 5D shows none
        bid, reasoning = self.recommend('SAKJ32HA32DKQ2C32',
                                        ['1S', 'P', '3S', 'P', '4NT', 'P', '5D', 'P'], 'N')
        self.assertEqual(bid, '5S')
        self.assertIn('sign off', reasoning)

    def test_small_slam_missing_one_keycard(self):
        # Three keycards here; 5C shows one
        bid, _ = self.recommend('SAKJ32HA32DKQ2C32',
                                ['1S', 'P', '3S', 'P', '4NT', 'P', '5C', 'P'], 'N')
        self.assertEqual(bid, '6S')

    def test_gerber_sign_off(self):
        bid, _ = self.recommend('SKQ2HKQ2DKQ32CKQ2', ['1NT', 'P', '4C', 'P', '4D', 'P'], 'S')
        self.assertEqual(bid, '4NT')


if __name__ == '__main__':
    unittest.main()
