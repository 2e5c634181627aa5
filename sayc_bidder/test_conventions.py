"""
Unit tests for the convention catalog
"""

import unittest

from sayc_bidder.auction import Vulnerability
from sayc_bidder.conventions import DEFAULT_CONVENTIONS, ConventionCatalog


class TestConventionLookup(unittest.TestCase):

    def setUp(self):
        self.catalog = ConventionCatalog()

    def test_defaults(self):
        self.assertTrue(self.catalog.is_enabled('stayman'))
        self.assertTrue(self.catalog.is_enabled('stayman', 'notrump_responses'))
        self.assertFalse(self.catalog.is_enabled('bergen_raises'))
        self.assertFalse(self.catalog.is_enabled('minor_suit_transfers'))

    def test_missing_entries_never_raise(self):
        self.assertFalse(self.catalog.is_enabled('no_such_convention'))
        self.assertFalse(self.catalog.is_enabled('stayman', 'no_such_category'))
        self.assertEqual(self.catalog.get_setting('weak_two', 'nothing', default=3), 3)
        self.assertIsNone(self.catalog.get_general('no.such.key'))

    def test_settings(self):
        self.assertEqual(self.catalog.get_setting('weak_two', 'min_hcp', 'preempts'), 5)
        self.assertEqual(self.catalog.get_setting('blackwood', 'variant'), 'rkcb')
        self.assertFalse(self.catalog.get_general('balanced_shapes.include_5422'))
        self.assertEqual(self.catalog.get_general('nt_over_minors_range'), 'classic')

    def test_overrides_merge(self):
        catalog = ConventionCatalog({'preempts': {'weak_two': {'max_hcp': 10}}})
        self.assertTrue(catalog.is_enabled('weak_two'))
        self.assertEqual(catalog.get_setting('weak_two', 'max_hcp'), 10)
        self.assertEqual(catalog.get_setting('weak_two', 'min_hcp'), 5)

    def test_enable_disable(self):
        self.catalog.disable('meckwell')
        self.assertFalse(self.catalog.is_enabled('meckwell'))
        self.catalog.enable('bergen_raises', 'responses')
        self.assertTrue(self.catalog.is_enabled('bergen_raises'))

    def test_configure(self):
        self.catalog.configure('blackwood', variant='classic')
        self.assertEqual(self.catalog.get_setting('blackwood', 'variant'), 'classic')
        with self.assertRaises(KeyError):
            self.catalog.configure('roman_jump_overcalls', enabled=True)
        self.catalog.configure('roman_jump_overcalls', 'competitive', enabled=True)
        self.assertTrue(self.catalog.is_enabled('roman_jump_overcalls'))

    def test_set_general(self):
        self.catalog.set_general('balanced_shapes.include_5422', True)
        self.assertTrue(self.catalog.get_general('balanced_shapes.include_5422'))

    def test_catalogs_are_independent(self):
        self.catalog.disable('stayman')
        self.assertTrue(ConventionCatalog().is_enabled('stayman'))
        self.assertTrue(DEFAULT_CONVENTIONS['notrump_responses']['stayman']['enabled'])


class TestVulnerabilityAdjustment(unittest.TestCase):

    def test_adjustments(self):
        catalog = ConventionCatalog()
        self.assertEqual(catalog.vulnerability_adjustment('overcall', Vulnerability(False, True)), -1)
        self.assertEqual(catalog.vulnerability_adjustment('weak_two', Vulnerability(True, False)), 4)
        self.assertEqual(catalog.vulnerability_adjustment('preempt', Vulnerability(True, True)), 0)

    def test_switched_off(self):
        catalog = ConventionCatalog({'general': {'vulnerability_adjustments': False}})
        self.assertEqual(catalog.vulnerability_adjustment('weak_two', Vulnerability(True, False)), 0)


if __name__ == '__main__':
    unittest.main()
