from unittest import TestCase
from tokenledger.stdlib import uint
from tokenledger.config import UINT256_MAX
from tokenledger.exceptions import LedgerError, InvalidAmount, Overflow, Underflow


class TestUint(TestCase):
    def test_validate_accepts_range(self):
        self.assertEqual(uint.validate(0), 0)
        self.assertEqual(uint.validate(UINT256_MAX), UINT256_MAX)

    def test_validate_rejects_negative(self):
        with self.assertRaises(InvalidAmount):
            uint.validate(-1)

    def test_validate_rejects_too_large(self):
        with self.assertRaises(InvalidAmount):
            uint.validate(UINT256_MAX + 1)

    def test_validate_rejects_non_ints(self):
        for bad in (1.5, '10', None, True):
            with self.assertRaises(InvalidAmount):
                uint.validate(bad)

    def test_add(self):
        self.assertEqual(uint.add(2, 3), 5)

    def test_add_overflow_raises(self):
        with self.assertRaises(Overflow) as cm:
            uint.add(UINT256_MAX, 1)

        self.assertEqual(cm.exception.kwargs, {'a': UINT256_MAX, 'b': 1})

    def test_sub(self):
        self.assertEqual(uint.sub(5, 3), 2)
        self.assertEqual(uint.sub(5, 5), 0)

    def test_sub_underflow_never_wraps(self):
        with self.assertRaises(Underflow) as cm:
            uint.sub(3, 5)

        self.assertEqual(cm.exception.kwargs, {'a': 3, 'b': 5})

    def test_sub_underflow_is_a_ledger_error(self):
        with self.assertRaises(LedgerError):
            uint.sub(0, 1)
