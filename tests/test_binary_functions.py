import unittest

from binary_functions import ByteCursor, be_decode, le_decode, signed_decode
from script_exceptions import TruncatedInputException


class TestBinaryFunctions(unittest.TestCase):
    def test_signed_decode(self):
        self.assertEqual(signed_decode(0xFFFF), -1)
        self.assertEqual(signed_decode(0x7FFF), 0x7FFF)
        self.assertEqual(signed_decode(0x8000), -0x8000)
        self.assertEqual(signed_decode(0xFFFFFFFE, 4), -2)

    def test_endian_decode(self):
        self.assertEqual(le_decode([0x34, 0x12], 2), 0x1234)
        self.assertEqual(le_decode([0x78, 0x56, 0x34, 0x12], 4), 0x12345678)
        self.assertEqual(be_decode([0x00, 0x00, 0x01, 0x02], 4), 0x0102)


class TestByteCursor(unittest.TestCase):
    def test_sequential_reads(self):
        cursor = ByteCursor(bytes([0x01, 0x34, 0x12, 0xFE, 0xFF]))

        self.assertEqual(cursor.read_byte(), 0x01)
        self.assertEqual(cursor.read_uint16_le(), 0x1234)
        self.assertFalse(cursor.eof())
        self.assertEqual(cursor.read_sint16_le(), -2)
        self.assertTrue(cursor.eof())
        self.assertEqual(cursor.tell(), 5)
        self.assertEqual(cursor.remaining(), 0)

    def test_dword_reads(self):
        cursor = ByteCursor(bytes([0x00, 0x00, 0x00, 0x2A, 0xFF, 0xFF, 0xFF, 0xFF]))

        self.assertEqual(cursor.read_uint32_be(), 42)
        self.assertEqual(cursor.read_sint32_le(), -1)

    def test_seek_and_skip(self):
        cursor = ByteCursor(b"SCRP\x00\x00\x00\x09\x66")

        cursor.seek(8)
        self.assertEqual(cursor.read_byte(), 0x66)
        cursor.seek(0)
        cursor.skip(4)
        self.assertEqual(cursor.tell(), 4)

    def test_read_past_end(self):
        cursor = ByteCursor(b"\x01")

        with self.assertRaises(TruncatedInputException) as context:
            cursor.read_uint16_le()

        self.assertEqual(context.exception.needed, 2)
        self.assertEqual(context.exception.available, 1)
        self.assertEqual(cursor.tell(), 0)

    def test_bad_seek(self):
        cursor = ByteCursor(b"\x01\x02")

        self.assertRaises(TruncatedInputException, cursor.seek, 3)
        self.assertRaises(ValueError, cursor.seek, -1)
        cursor.seek(2)
        self.assertTrue(cursor.eof())
