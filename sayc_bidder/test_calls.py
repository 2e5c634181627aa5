"""
Unit tests for call parsing and contract ordering
"""

import unittest

from sayc_bidder.calls import Call, CallKind, cheapest_contract, is_jump, minimum_level, outranks
from sayc_bidder.errors import InvalidCallError


class TestCallParsing(unittest.TestCase):
    """Test call tokens"""

    def test_contract_tokens(self):
        call = Call.parse('1nt')
        self.assertEqual(call.kind, CallKind.CONTRACT)
        self.assertEqual(call.level, 1)
        self.assertEqual(call.denomination, 'NT')
        self.assertEqual(Call.parse('3N').token, '3NT')
        self.assertEqual(Call.parse(' 4s ').token, '4S')

    def test_pass_double_redouble_spellings(self):
        for token in ('P', 'Pass', '-'):
            self.assertTrue(Call.parse(token).is_pass)
        for token in ('X', 'D', 'DBL', 'double'):
            self.assertTrue(Call.parse(token).is_double)
        for token in ('XX', 'R', 'RDBL', 'redouble'):
            self.assertTrue(Call.parse(token).is_redouble)

    def test_invalid_tokens(self):
        """Levels outside 1-7 and unknown words are rejected"""
        for token in ('8C', '0S', '1Z', '', 'hello'):
            with self.assertRaises(InvalidCallError):
                Call.parse(token)
        with self.assertRaises(InvalidCallError):
            Call.parse(None)
        with self.assertRaises(InvalidCallError):
            Call.contract(9, 'S')

    def test_invalid_call_error_is_value_error(self):
        with self.assertRaises(ValueError):
            Call.parse('9NT')

    def test_display(self):
        self.assertEqual(Call.parse('1S').display(), '1♠')
        self.assertEqual(Call.parse('2NT').display(), '2NT')
        self.assertEqual(Call.parse('P').display(), 'Pass')
        self.assertEqual(Call.parse('X').display(), 'Double')
        self.assertEqual(Call.parse('XX').display(), 'Redouble')

    def test_equality_with_strings(self):
        self.assertEqual(Call.parse('1H'), '1h')
        self.assertEqual(Call.parse('X'), 'DBL')
        self.assertNotEqual(Call.parse('1H'), '1S')
        self.assertNotEqual(Call.parse('1H'), 'not a call')

    def test_seat_and_rationale_do_not_affect_equality(self):
        call = Call.parse('2C').explain("Stayman", 'stayman')
        self.assertEqual(call, Call.parse('2C'))
        self.assertEqual(call.rationale, "Stayman")
        self.assertEqual(call.convention, 'stayman')
        self.assertEqual(hash(call), hash(Call.parse('2C')))


class TestContractOrdering(unittest.TestCase):
    """Test contract ranking helpers"""

    def test_outranks(self):
        self.assertTrue(outranks('1NT', '1S'))
        self.assertFalse(outranks('1S', '1NT'))
        self.assertTrue(outranks('2C', '1NT'))
        self.assertFalse(outranks('2C', '2C'))

    def test_outranks_is_permissive(self):
        """Anything unparseable or without a prior contract outranks"""
        self.assertTrue(outranks('1C', None))
        self.assertTrue(outranks('garbage', '7NT'))
        self.assertTrue(outranks('X', '1C'))

    def test_minimum_level(self):
        self.assertEqual(minimum_level('H', '1S'), 2)
        self.assertEqual(minimum_level('S', '1H'), 1)
        self.assertEqual(minimum_level('C', None), 1)
        self.assertEqual(minimum_level('NT', '2NT'), 3)

    def test_cheapest_contract(self):
        self.assertEqual(cheapest_contract('D', '1H'), '2D')
        self.assertIsNone(cheapest_contract('C', '7D'))

    def test_is_jump(self):
        self.assertEqual(is_jump('2S', '1H'), 1)
        self.assertEqual(is_jump('3S', '1H'), 2)
        self.assertEqual(is_jump('2D', '1H'), 0)
        self.assertEqual(is_jump('P', '1H'), 0)


if __name__ == '__main__':
    unittest.main()
