"""Tests for the core module."""
import copy
import doctest
import unittest

from hypothesis import given
from hypothesis.strategies import booleans, integers, lists

from dynbits.bitvector.context import SeedWidth
from dynbits.bitvector.core import BitVector, InvalidArgumentError, OutOfRangeError

MAX_SIZE = 70


def from_bits(bits):
    """Return the bit-vector with the given bits, index 0 first."""
    bv = BitVector()
    for bit in bits:
        bv.push_back(bit)
    return bv


def padding_is_clear(bv):
    """Return True if the unused bits of the last byte are zero."""
    used = bv.size() % 8
    if not used:
        return True
    return bv.storage[-1] >> used == 0


class TestInitialization(unittest.TestCase):
    """Tests of the BitVector constructor."""

    def test_invalid_args(self):
        with self.assertRaises(InvalidArgumentError):
            BitVector(-1)
        with self.assertRaises(InvalidArgumentError):
            BitVector(8, -1)
        with self.assertRaises(InvalidArgumentError):
            BitVector(8, 2 ** 64)
        with self.assertRaises(TypeError):
            BitVector("8")
        with self.assertRaises(TypeError):
            BitVector(8, 0.5)

    def test_empty(self):
        bv = BitVector()
        self.assertEqual(bv.size(), 0)
        self.assertTrue(bv.empty())
        self.assertEqual(bv.storage, b"")
        self.assertEqual(bv.to_string(), "")
        self.assertEqual(bv, BitVector(0))

    def test_seed(self):
        bv = BitVector(8, 0b00001011)
        self.assertEqual(bv.to_string(), "00001011")
        self.assertEqual(bv.count(), 3)
        self.assertTrue(bv.any())

        bv = BitVector(20, 0x12345)
        self.assertEqual(bv.storage, bytes([0x45, 0x23, 0x01]))

        # only the bytes of the seed that fit in the storage are copied
        self.assertEqual(BitVector(8, 0xabcd).storage, bytes([0xcd]))
        self.assertEqual(BitVector(80, 2 ** 64 - 1).count(), 64)

    def test_seed_padding(self):
        bv = BitVector(5, 0xff)
        self.assertEqual(bv.to_string(), "11111")
        self.assertEqual(bv.storage, bytes([0x1f]))
        self.assertEqual(bv, ~BitVector(5))

    def test_seed_width(self):
        with SeedWidth(32):
            with self.assertRaises(InvalidArgumentError):
                BitVector(64, 2 ** 32)
            self.assertEqual(BitVector(64, 2 ** 32 - 1).count(), 32)
            with SeedWidth(8):
                self.assertEqual(BitVector(16, 0xff).storage, bytes([0xff, 0]))
            self.assertEqual(SeedWidth.current_context, 32)
        self.assertEqual(SeedWidth.current_context, 64)

        with self.assertRaises(AssertionError):
            SeedWidth(12)

    @given(integers(min_value=0, max_value=MAX_SIZE))
    def test_zero_initialized(self, size):
        bv = BitVector(size)
        self.assertEqual(bv.size(), size)
        self.assertEqual(len(bv.storage), (size + 7) // 8)
        self.assertTrue(bv.none())
        self.assertEqual(list(bv), [False] * size)

    @given(integers(min_value=0, max_value=MAX_SIZE),
           integers(min_value=0, max_value=2 ** 64 - 1))
    def test_seeded_bits(self, size, value):
        bv = BitVector(size, value)
        self.assertEqual(bv.size(), size)
        self.assertTrue(padding_is_clear(bv))
        for i in range(size):
            self.assertEqual(bv[i], bool((value >> i) & 1))

    def test_from_string(self):
        self.assertEqual(BitVector.from_string("00001011"), BitVector(8, 11))
        self.assertEqual(BitVector.from_string(""), BitVector())
        with self.assertRaises(InvalidArgumentError):
            BitVector.from_string("10a")
        with self.assertRaises(TypeError):
            BitVector.from_string(101)


class TestCopy(unittest.TestCase):
    """Tests of the value semantics."""

    @given(lists(booleans(), max_size=MAX_SIZE))
    def test_copy_is_equal(self, bits):
        bv = from_bits(bits)
        self.assertEqual(bv, bv.copy())
        self.assertEqual(bv, copy.copy(bv))
        self.assertEqual(bv, copy.deepcopy(bv))

    def test_copy_is_independent(self):
        x = BitVector(10, 0b1010)
        y = x.copy()
        y.set(0)
        y.resize(3)
        self.assertEqual(x.to_string(), "0000001010")
        self.assertEqual(y.to_string(), "011")

        z = copy.deepcopy(x)
        x.reset()
        self.assertEqual(z.to_string(), "0000001010")

    def test_swap(self):
        x, y = BitVector(3, 0b110), BitVector(12, 0xabc)
        x.swap(y)
        self.assertEqual(x, BitVector(12, 0xabc))
        self.assertEqual(y, BitVector(3, 0b110))
        with self.assertRaises(TypeError):
            x.swap("110")

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(BitVector(4))


class TestResize(unittest.TestCase):
    """Tests of resize, clear and push_back."""

    def test_invalid_args(self):
        bv = BitVector(4, 0b1001)
        with self.assertRaises(InvalidArgumentError):
            bv.resize(-1)
        self.assertEqual(bv.to_string(), "1001")

    def test_grow(self):
        bv = BitVector(4, 0b1001)
        bv.resize(12)
        self.assertEqual(bv.to_string(), "000000001001")

        bv = BitVector(8, 0b1001)
        bv.resize(20, True)
        self.assertEqual(bv.to_string(), "1111111111110000" "1001")

        # the bits gained inside the old last byte are not filled
        bv = BitVector(4, 0b1001)
        bv.resize(12, True)
        self.assertEqual(bv.to_string(), "111100001001")

        bv = BitVector()
        bv.resize(5, True)
        self.assertEqual(bv.to_string(), "11111")
        self.assertEqual(bv.storage, bytes([0x1f]))

    def test_shrink(self):
        bv = BitVector(16, 0xffff)
        bv.resize(11)
        self.assertEqual(bv.to_string(), "1" * 11)
        self.assertEqual(bv.storage, bytes([0xff, 0x07]))
        bv.resize(0)
        self.assertTrue(bv.empty())
        self.assertEqual(bv.storage, b"")

    @given(lists(booleans(), max_size=MAX_SIZE),
           integers(min_value=0, max_value=MAX_SIZE),
           booleans())
    def test_resize(self, bits, new_size, fill):
        bv = from_bits(bits)
        bv.resize(new_size, fill)
        self.assertEqual(bv.size(), new_size)
        self.assertEqual(len(bv.storage), (new_size + 7) // 8)
        self.assertTrue(padding_is_clear(bv))
        for i in range(min(len(bits), new_size)):
            self.assertEqual(bv[i], bits[i])

    def test_clear(self):
        bv = BitVector(20, 0xfffff)
        bv.clear()
        self.assertTrue(bv.empty())
        self.assertEqual(bv.storage, b"")
        self.assertEqual(bv, BitVector())

    def test_push_back(self):
        bv = BitVector(0)
        bv.push_back(True)
        bv.push_back(False)
        bv.push_back(True)
        self.assertEqual(bv.to_string(), "101")
        self.assertEqual(bv.size(), 3)

    @given(lists(booleans(), max_size=MAX_SIZE))
    def test_push_back_bits(self, bits):
        bv = from_bits(bits)
        self.assertEqual(list(bv), bits)
        self.assertEqual(len(bv), len(bits))
        self.assertTrue(padding_is_clear(bv))


class TestAccess(unittest.TestCase):
    """Tests of the single-bit access."""

    def test_out_of_range(self):
        bv = BitVector(4)
        for index in [4, -1, 100]:
            with self.assertRaises(OutOfRangeError):
                bv[index]
            with self.assertRaises(OutOfRangeError):
                bv.at(index)
            with self.assertRaises(OutOfRangeError):
                bv.set(index)
            with self.assertRaises(OutOfRangeError):
                bv.reset(index)
        with self.assertRaises(OutOfRangeError):
            BitVector()[0]
        self.assertEqual(bv.storage, bytes([0]))

        # OutOfRangeError is also an IndexError
        with self.assertRaises(IndexError):
            bv[4] = True

    def test_invalid_index(self):
        bv = BitVector(4)
        with self.assertRaises(TypeError):
            bv["0"]
        with self.assertRaises(TypeError):
            bv[0:2]
        with self.assertRaises(TypeError):
            bv.set(1.0)

    def test_set_reset(self):
        bv = BitVector(10)
        bv.set(0).set(9)
        bv[4] = True
        self.assertEqual(bv.to_string(), "1000010001")
        bv.reset(0)
        bv[9] = False
        self.assertEqual(bv.to_string(), "0000010000")
        self.assertTrue(bv[4])
        self.assertFalse(bv[3])

    def test_set_reset_all(self):
        bv = BitVector(13)
        bv.set()
        self.assertEqual(bv.to_string(), "1" * 13)
        self.assertEqual(bv.storage, bytes([0xff, 0x1f]))
        self.assertEqual(bv.count(), 13)
        bv.reset()
        self.assertEqual(bv.storage, bytes([0, 0]))
        self.assertTrue(bv.none())

    @given(lists(booleans(), min_size=1, max_size=MAX_SIZE), integers(min_value=0), booleans())
    def test_set_single_bit(self, bits, index, value):
        index %= len(bits)
        bv = from_bits(bits)
        bv.set(index, value)
        bits[index] = value
        self.assertEqual(list(bv), bits)
        self.assertTrue(padding_is_clear(bv))


class TestQueries(unittest.TestCase):
    """Tests of the aggregate queries and the comparisons."""

    @given(lists(booleans(), max_size=MAX_SIZE))
    def test_count(self, bits):
        bv = from_bits(bits)
        self.assertEqual(bv.count(), sum(bits))
        self.assertEqual(bv.any(), any(bits))
        self.assertEqual(bv.none(), not any(bits))

    @given(lists(booleans(), max_size=MAX_SIZE))
    def test_to_string(self, bits):
        bv = from_bits(bits)
        string = bv.to_string()
        self.assertEqual(len(string), bv.size())
        self.assertEqual(string, "".join("1" if b else "0" for b in reversed(bits)))
        self.assertEqual(str(bv), string)
        self.assertEqual(BitVector.from_string(string), bv)

    def test_comparisons(self):
        x = BitVector(8, 0b1011)
        self.assertEqual(x, BitVector(8, 0b1011))
        self.assertNotEqual(x, BitVector(8, 0b1010))
        self.assertNotEqual(x, BitVector(9, 0b1011))
        self.assertNotEqual(BitVector(3), BitVector(5))
        self.assertNotEqual(x, 0b1011)
        self.assertNotEqual(x, "00001011")


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import dynbits.bitvector.core
    tests.addTests(doctest.DocTestSuite(dynbits.bitvector.core))
    return tests
