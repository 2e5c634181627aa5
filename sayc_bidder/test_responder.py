"""
Unit tests for responses to partner's opening
"""

import unittest

from sayc_bidder.bidding_system import StandardAmericanBidding


def after(*calls):
    """North opens, East passes; South is to respond"""
    seats = ['N', 'E', 'S', 'W']
    return [{'bidder': seats[i % 4], 'call': call} for i, call in enumerate(calls)]


class TestNotrumpResponses(unittest.TestCase):
    """Test responses to 1NT"""

    def setUp(self):
        self.bidding = StandardAmericanBidding()

    def respond(self, lin, opening='1NT'):
        self.bidding.set_hand(lin)
        self.bidding.set_auction(after(opening, 'P'), 'S')
        return self.bidding.get_recommendation()

    def test_stayman(self):
        """Test Stayman 2C response"""
        # 11 HCP, four spades
        bid, reasoning = self.respond('SKQ32HK32DQ2CJ432')
        self.assertEqual(bid, '2C')
        self.assertIn('Stayman', reasoning)

    def test_jacoby_transfer(self):
        """Test Jacoby transfer (5+ hearts)"""
        bid, reasoning = self.respond('S32HKJ432DQ32C432')
        self.assertEqual(bid, '2D')
        self.assertIn('transfer', reasoning.lower())

    def test_texas_transfer(self):
        bid, _ = self.respond('SKQJ432H32DK32CQ2')
        self.assertEqual(bid, '4H')

    def test_raise_to_game(self):
        # 11 HCP, no four-card major
        bid, _ = self.respond('SK32HQ32DKJ32CQ32')
        self.assertEqual(bid, '3NT')

    def test_weak_balanced_pass(self):
        bid, _ = self.respond('SJ32HQ32D5432C432')
        self.assertEqual(bid, 'P')

    def test_gerber(self):
        bid, reasoning = self.respond('SAK2HAQ2DKQ32CKJ2')
        self.assertEqual(bid, '4C')
        self.assertIn('Gerber', reasoning)

    def test_over_2nt(self):
        bid, _ = self.respond('SK32HQ32D5432C432', opening='2NT')
        self.assertEqual(bid, '3NT')


class TestMajorResponses(unittest.TestCase):
    """Test responses to one of a major"""

    def setUp(self):
        self.bidding = StandardAmericanBidding()

    def respond(self, lin, opening='1H', auction=None):
        self.bidding.set_hand(lin)
        self.bidding.set_auction(auction or after(opening, 'P'), 'S')
        return self.bidding.get_recommendation()

    def test_simple_raise(self):
        bid, reasoning = self.respond('S432HQ32DKJ32C432')
        self.assertEqual(bid, '2H')
        self.assertIn('Simple raise', reasoning)

    def test_limit_raise(self):
        bid, reasoning = self.respond('SK32HQ32DKJ32CQ32')
        self.assertEqual(bid, '3H')
        self.assertIn('Limit raise', reasoning)

    def test_jacoby_2nt(self):
        bid, reasoning = self.respond('SK32HQJ32DKJ2CAQ2')
        self.assertEqual(bid, '2NT')
        self.assertIn('Jacoby', reasoning)

    def test_splinter(self):
        # four trumps, singleton club, 14 HCP
        bid, reasoning = self.respond('SKQ32HKJ32DA432C2')
        self.assertEqual(bid, '4C')
        self.assertIn('Splinter', reasoning)

    def test_one_spade_over_one_heart(self):
        bid, _ = self.respond('SKQ32H32DQ432C432')
        self.assertEqual(bid, '1S')

    def test_one_notrump(self):
        bid, _ = self.respond('S2HK432DQJ32CQ432', opening='1S')
        self.assertEqual(bid, '1NT')

    def test_two_over_one(self):
        bid, _ = self.respond('S32HK32DAQ432CQ32', opening='1S')
        self.assertEqual(bid, '2D')

    def test_drury(self):
        """Passed hand with a limit raise uses Drury"""
        auction = [{'bidder': 'S', 'call': 'P'}, {'bidder': 'W', 'call': 'P'},
                   {'bidder': 'N', 'call': '1S'}, {'bidder': 'E', 'call': 'P'}]
        bid, reasoning = self.respond('SK32HQ32DKJ32CQ32', auction=auction)
        self.assertEqual(bid, '2C')
        self.assertIn('Drury', reasoning)


class TestMinorResponses(unittest.TestCase):
    """Test responses to one of a minor"""

    def setUp(self):
        self.bidding = StandardAmericanBidding()

    def respond(self, lin, opening='1C'):
        self.bidding.set_hand(lin)
        self.bidding.set_auction(after(opening, 'P'), 'S')
        return self.bidding.get_recommendation()

    def test_major_over_minor(self):
        """Four spades and three hearts: 1S"""
        bid, _ = self.respond('SKQ32HK32DQ32CJ32')
        self.assertEqual(bid, '1S')

    def test_hearts_up_the_line(self):
        bid, _ = self.respond('SKQ32HK432DQ3CJ32')
        self.assertEqual(bid, '1H')

    def test_classic_notrump_range(self):
        # 13 HCP, 3-3-3-4
        bid, _ = self.respond('SK32HQ32DKJ2CA432')
        self.assertEqual(bid, '2NT')

    def test_modern_notrump_range(self):
        self.bidding = StandardAmericanBidding({'general': {'nt_over_minors_range': 'modern'}})
        bid, _ = self.respond('SK32HQ32DKJ2CA432')
        self.assertEqual(bid, '3NT')

    def test_minor_raise(self):
        bid, _ = self.respond('S432HQ32DK32CJ432', opening='1D')
        self.assertEqual(bid, '1NT')
        bid, _ = self.respond('S43HQ32DK432CJ432', opening='1D')
        self.assertEqual(bid, '2D')


class TestOtherResponses(unittest.TestCase):

    def setUp(self):
        self.bidding = StandardAmericanBidding()

    def respond(self, lin, opening):
        self.bidding.set_hand(lin)
        self.bidding.set_auction(after(opening, 'P'), 'S')
        return self.bidding.get_recommendation()

    def test_2c_waiting(self):
        bid, reasoning = self.respond('S5432HQ32D432C432', '2C')
        self.assertEqual(bid, '2D')
        self.assertIn('waiting', reasoning)

    def test_weak_two_game_raise(self):
        bid, _ = self.respond('SAK32HK32DAQ2CK32', '2H')
        self.assertEqual(bid, '4H')

    def test_weak_two_pass(self):
        bid, _ = self.respond('SK432H2DQ5432CJ32', '2H')
        self.assertEqual(bid, 'P')

    def test_preempt_pass(self):
        bid, _ = self.respond('SK432H2DQ5432CJ32', '3S')
        self.assertEqual(bid, 'P')


if __name__ == '__main__':
    unittest.main()
