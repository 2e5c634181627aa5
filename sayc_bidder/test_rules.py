"""
Unit tests for rule tables and the per-decision Situation
"""

import unittest

from sayc_bidder.auction import AuctionContext
from sayc_bidder.conventions import ConventionCatalog
from sayc_bidder.hand import Hand
from sayc_bidder.rules import Rule, RuleChain, Situation


def situation(calls, hand, dealer='N', catalog=None):
    return Situation(AuctionContext(calls, dealer=dealer), Hand.from_pbn(hand), catalog or ConventionCatalog())


class TestRuleChain(unittest.TestCase):

    def test_first_firing_rule_wins(self):
        s = situation([], 'AKxx.Kxx.xxx.xxx')
        chain = RuleChain('test', [
            Rule('never', lambda s: s.pass_("never"), when=lambda s: False),
            Rule('declines', lambda s: None),
            Rule('fires', lambda s: s.bid(1, 'C', "first")),
            Rule('later', lambda s: s.bid(1, 'D', "second")),
        ])
        self.assertEqual(chain.decide(s).token, '1C')
        self.assertEqual(chain.names(), ['never', 'declines', 'fires', 'later'])

    def test_nested_chains(self):
        s = situation([], 'AKxx.Kxx.xxx.xxx')
        inner = RuleChain('inner', [Rule('nothing', lambda s: None)])
        outer = RuleChain('outer', [
            Rule('inner', inner),
            Rule('fallback', lambda s: s.pass_("fallback")),
        ])
        self.assertTrue(outer(s).is_pass)

    def test_no_rule_fires(self):
        s = situation([], 'AKxx.Kxx.xxx.xxx')
        self.assertIsNone(RuleChain('empty', []).decide(s))


class TestSituation(unittest.TestCase):

    def test_bid_reasoning(self):
        # East over North's 1H
        s = situation(['1H'], 'AKxxx.xx.Kxx.xxx')
        call = s.bid(1, 'S', "overcall (5-card suit, 10 HCP)", 'overcall')
        self.assertEqual(call.token, '1S')
        self.assertEqual(call.rationale, "1♠ overcall (5-card suit, 10 HCP)")
        self.assertEqual(call.convention, 'overcall')

    def test_unavailable_levels(self):
        s = situation(['1H'], 'AKxxx.xx.Kxx.xxx')
        self.assertIsNone(s.bid(1, 'C', "too low"))
        self.assertIsNone(s.bid(8, 'C', "too high"))
        self.assertEqual(s.cheapest('C', "cheapest").token, '2C')
        self.assertEqual(s.cheapest('S', "jump", jump=1).token, '2S')
        self.assertEqual(s.cheapest_level('D'), 2)

    def test_doubles_only_when_legal(self):
        s = situation(['1H'], 'AKxxx.xx.Kxx.xxx')
        self.assertEqual(s.double("Takeout double").token, 'X')
        self.assertIsNone(s.redouble("Redouble"))
        # South may not double partner's 1H
        self.assertIsNone(situation(['1H', 'P'], 'AKxxx.xx.Kxx.xxx').double("Double"))

    def test_pass_reasoning(self):
        s = situation([], 'xxxx.xxx.xxx.xxx')
        self.assertEqual(s.pass_("insufficient values, 0 HCP").rationale, "Pass (insufficient values, 0 HCP)")

    def test_longest_breaks_ties_upward(self):
        s = situation([], 'KQxxx.AJxxx.x.xx')
        self.assertEqual(s.longest(['H', 'S']), 'S')
        self.assertEqual(s.longest(['C', 'D'], minimum=3), None)

    def test_auction_views(self):
        # South after 1D (N) 1S (E)
        s = situation(['1D', '1S'], 'xxx.KQxx.xxx.Axx')
        self.assertTrue(s.contested)
        self.assertEqual(s.our_suits(), ['D'])
        self.assertEqual(s.their_suits(), ['S'])
        self.assertEqual(s.partner_actions, ['1D'])
        self.assertEqual(s.my_actions, [])
        self.assertFalse(s.passed_hand())


if __name__ == '__main__':
    unittest.main()
