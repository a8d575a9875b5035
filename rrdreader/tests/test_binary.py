import math
import struct
from unittest import TestCase

from rrdreader.binary import BinaryFile
from rrdreader.exceptions import TruncatedData


class BinaryFileTestCase(TestCase):

    def setUp(self):
        data = struct.pack("<BHLd", 0xfe, 0xbeef, 0xdeadbeef, -2.5)
        self.bf = BinaryFile(data + b"ds0\x00junk" + struct.pack("<d", 0.1))

    def test_integers(self):
        self.assertEqual(self.bf.getByteAt(0), 0xfe)
        self.assertEqual(self.bf.getShortAt(1), 0xbeef)
        self.assertEqual(self.bf.getLongAt(3), 0xdeadbeef)

    def test_doubles(self):
        self.assertEqual(self.bf.getDoubleAt(7), -2.5)
        # -2.5 has a short mantissa, the fast read is exact
        self.assertEqual(self.bf.getFastDoubleAt(7), -2.5)
        full = self.bf.getDoubleAt(23)
        fast = self.bf.getFastDoubleAt(23)
        self.assertEqual(full, 0.1)
        self.assertNotEqual(fast, full)
        self.assertTrue(abs(full - fast) < full * 2 ** -20)

    def test_fastKeepsSpecialValues(self):
        bf = BinaryFile(struct.pack("<ddd", float("nan"), float("inf"), -0.0))
        self.assertTrue(math.isnan(bf.getFastDoubleAt(0)))
        self.assertEqual(bf.getFastDoubleAt(8), float("inf"))
        self.assertEqual(math.copysign(1, bf.getFastDoubleAt(16)), -1)

    def test_cString(self):
        self.assertEqual(self.bf.getCStringAt(15, 20), "ds0")
        self.assertEqual(self.bf.getCStringAt(15, 2), "ds")
        self.assertEqual(self.bf.getCStringAt(19, 4), "junk")

    def test_truncated(self):
        length = self.bf.getLength()
        self.assertEqual(length, 31)
        self.assertRaises(TruncatedData, self.bf.getDoubleAt, length - 4)
        self.assertRaises(TruncatedData, self.bf.getFastDoubleAt, length - 4)
        self.assertRaises(TruncatedData, self.bf.getByteAt, length)
        self.assertRaises(TruncatedData, self.bf.getLongAt, -1)
        self.assertRaises(TruncatedData, self.bf.getCStringAt, length + 1, 4)
        # no NUL before the data runs out
        self.assertRaises(TruncatedData, BinaryFile(b"abcdef").getCStringAt, 2, 20)
        self.assertEqual(BinaryFile(b"ab\x00def").getCStringAt(0, 20), "ab")
