"""
Unit tests for convention recognition
"""

import unittest

from sayc_bidder.auction import AuctionContext
from sayc_bidder.conventions import ConventionCatalog
from sayc_bidder.hand import Hand
from sayc_bidder.matcher import (ace_ask_response, count_keycards, decode_ace_response, find_trump_suit,
                                 interpret, match_ace_ask, match_negative_double, match_notrump_defense,
                                 match_notrump_response, match_reopening_double, match_support_double,
                                 match_two_suited)


class TestAceAsking(unittest.TestCase):

    def setUp(self):
        self.catalog = ConventionCatalog()

    def test_rkcb_after_agreed_suit(self):
        context = AuctionContext(['1S', 'P', '3S', 'P'], dealer='N')
        self.assertEqual(find_trump_suit(context), 'S')
        result = match_ace_ask(context, '4NT', self.catalog)
        self.assertEqual(result.convention, 'blackwood_rkcb')
        self.assertEqual(result.suits, ('S',))

    def test_classic_variant(self):
        self.catalog.configure('blackwood', variant='classic')
        context = AuctionContext(['1S', 'P', '3S', 'P'], dealer='N')
        self.assertEqual(match_ace_ask(context, '4NT', self.catalog).convention, 'blackwood_classic')

    def test_gerber_over_notrump(self):
        context = AuctionContext(['1NT', 'P'], dealer='N')
        self.assertEqual(match_ace_ask(context, '4C', self.catalog).convention, 'gerber')
        self.assertFalse(match_ace_ask(context, '4NT', self.catalog))

    def test_no_ask_over_their_contract(self):
        context = AuctionContext(['1S'], dealer='N')
        self.assertFalse(match_ace_ask(context, '4NT', self.catalog))

    def test_keycard_responses(self):
        context = AuctionContext(['1S', 'P', '3S', 'P'], dealer='N')
        ask = match_ace_ask(context, '4NT', self.catalog)
        # SK plus HA, with the queen
        hand = Hand.from_pbn('KQxx.Axx.xxx.xxx')
        self.assertEqual(count_keycards(hand, 'S'), (2, True))
        self.assertEqual(ace_ask_response(ask, hand, self.catalog), '5S')
        self.assertEqual(ace_ask_response(ask, Hand.from_pbn('Kxxx.Axx.xxx.xxx'), self.catalog), '5H')
        self.assertEqual(ace_ask_response(ask, Hand.from_pbn('Qxxx.xxx.xxx.xxx'), self.catalog), '5D')

    def test_decode(self):
        context = AuctionContext(['1S', 'P', '3S', 'P'], dealer='N')
        ask = match_ace_ask(context, '4NT', self.catalog)
        self.assertEqual(decode_ace_response(ask, '5C', self.catalog), ((1, 4), None))
        self.assertEqual(decode_ace_response(ask, '5S', self.catalog), ((2,), True))
        self.assertIsNone(decode_ace_response(ask, '6C', self.catalog))

    def test_gerber_response_map(self):
        context = AuctionContext(['1NT', 'P'], dealer='N')
        ask = match_ace_ask(context, '4C', self.catalog)
        self.assertEqual(ace_ask_response(ask, Hand.from_pbn('Axx.Axx.KQxx.Qxx'), self.catalog), '4S')
        self.assertEqual(ace_ask_response(ask, Hand.from_pbn('Kxx.Kxx.KQxx.Qxx'), self.catalog), '4D')


class TestOvercallConventions(unittest.TestCase):

    def setUp(self):
        self.catalog = ConventionCatalog()
        # East to act over North's 1S
        self.context = AuctionContext(['1S'], dealer='N')

    def test_unusual_notrump(self):
        hand = Hand.from_pbn('x.xx.KQxxx.QJxxx')
        result = match_two_suited(self.context, '2NT', self.catalog, hand)
        self.assertEqual(result.convention, 'unusual_nt')
        self.assertEqual(result.suits, ('C', 'D'))

    def test_michaels_over_a_major(self):
        hand = Hand.from_pbn('x.KQxxx.xx.QJxxx')
        result = match_two_suited(self.context, '2S', self.catalog, hand)
        self.assertEqual(result.convention, 'michaels')
        self.assertEqual(result.suits, ('H', 'C'))

    def test_shape_only(self):
        self.assertEqual(match_two_suited(self.context, '2S', self.catalog).suits, ('H',))

    def test_not_five_five(self):
        hand = Hand.from_pbn('xx.xx.KQxxx.QJxx')
        self.assertFalse(match_two_suited(self.context, '2NT', self.catalog, hand))


class TestNotrumpDefenses(unittest.TestCase):

    def setUp(self):
        self.catalog = ConventionCatalog()
        self.context = AuctionContext(['1NT'], dealer='N')

    def test_meckwell_majors(self):
        hand = Hand.from_pbn('KQxx.AJxxx.xx.xx')
        result = match_notrump_defense(self.context, '2D', self.catalog, hand)
        self.assertEqual(result.convention, 'meckwell')
        self.assertEqual(result.detail['meaning'], 'majors')

    def test_dont_natural_hearts(self):
        self.catalog.disable('meckwell')
        hand = Hand.from_pbn('xx.KQJxxx.Axx.xx')
        result = match_notrump_defense(self.context, '2H', self.catalog, hand)
        self.assertEqual(result.convention, 'dont')
        self.assertEqual(result.detail['meaning'], 'natural')

    def test_dont_two_suiter(self):
        self.catalog.disable('meckwell')
        hand = Hand.from_pbn('KQxx.x.xx.AJxxxx')
        result = match_notrump_defense(self.context, '2C', self.catalog, hand)
        self.assertEqual(result.suits, ('C', 'S'))

    def test_only_over_their_notrump(self):
        context = AuctionContext(['1NT', 'P'], dealer='N')
        self.assertFalse(match_notrump_defense(context, '2D', self.catalog))


class TestCompetitiveDoubles(unittest.TestCase):

    def setUp(self):
        self.catalog = ConventionCatalog()

    def test_negative_double_shows_unbid_major(self):
        # South over 1C (N) 1H (E)
        context = AuctionContext(['1C', '1H'], dealer='N')
        result = match_negative_double(context, 'X', self.catalog)
        self.assertEqual(result.suits, ('S',))
        self.assertFalse(match_negative_double(context, 'X', self.catalog, Hand.from_pbn('xxx.KQx.Axxx.xxx')))

    def test_opener_support_double(self):
        # North opened 1D, South bid 1H, West overcalled 1S
        context = AuctionContext(['1D', 'P', '1H', '1S'], dealer='N')
        hand = Hand.from_pbn('Kx.QJx.AKxxx.xxx')
        result = match_support_double(context, 'X', self.catalog, hand)
        self.assertEqual(result.convention, 'support_double')
        self.assertEqual(result.detail['role'], 'opener')
        self.assertFalse(match_support_double(context, 'X', self.catalog, Hand.from_pbn('Kx.QJxx.AKxx.xxx')))

    def test_responder_support_double(self):
        context = AuctionContext(['1H', '1S'], dealer='N')
        hand = Hand.from_pbn('xx.KQxx.KJx.Qxxx')
        result = match_support_double(context, 'X', self.catalog, hand)
        self.assertEqual(result.detail['role'], 'responder')
        self.catalog.configure('support_doubles', thru='1H')
        self.assertFalse(match_support_double(context, 'X', self.catalog, hand))

    def test_reopening_double(self):
        # West in the pass-out seat
        context = AuctionContext(['1H', 'P', 'P'], dealer='N')
        self.assertEqual(match_reopening_double(context, 'X', self.catalog).suits, ('C', 'D', 'S'))
        self.assertFalse(match_reopening_double(AuctionContext(['1H', 'P'], dealer='N'), 'X', self.catalog))


class TestInterpret(unittest.TestCase):

    def setUp(self):
        self.catalog = ConventionCatalog()

    def test_notrump_responses(self):
        context = AuctionContext(['1NT', 'P', '2D', 'P'], dealer='N')
        result = interpret(context, 2, self.catalog)
        self.assertEqual(result.convention, 'jacoby_transfer')
        self.assertEqual(result.suits, ('H',))
        self.assertEqual(match_notrump_response(AuctionContext(['1NT', 'P'], dealer='N'), '2C',
                                                self.catalog).convention, 'stayman')

    def test_disabled_convention_is_natural(self):
        context = AuctionContext(['1NT', 'P', '2S', 'P'], dealer='N')
        self.assertFalse(interpret(context, 2, self.catalog))
        self.catalog.enable('minor_suit_transfers')
        self.assertEqual(interpret(context, 2, self.catalog).suits, ('C',))

    def test_natural_call(self):
        context = AuctionContext(['1H', 'P', '1S', 'P'], dealer='N')
        self.assertFalse(interpret(context, 2, self.catalog))

    def test_jacoby_2nt(self):
        context = AuctionContext(['1S', 'P', '2NT', 'P'], dealer='N')
        self.assertEqual(interpret(context, 2, self.catalog).convention, 'jacoby_2nt')

    def test_lebensohl(self):
        context = AuctionContext(['1NT', '2H', '2NT', 'P'], dealer='N')
        result = interpret(context, 2, self.catalog)
        self.assertEqual(result.convention, 'lebensohl')
        self.assertEqual(result.suits, ('H',))


if __name__ == '__main__':
    unittest.main()
