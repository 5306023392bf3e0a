import unittest

import parameter_decoder
from binary_functions import ByteCursor
from parameter_decoder import Parameter, decode_parameters, parameter_size, parameters_byte_length
from script_exceptions import TruncatedInputException
from string_decoder import ControlToken, TextSegment


class TestParameterDecoder(unittest.TestCase):
    def test_numeric_codes(self):
        cursor = ByteCursor(bytes([0xFF, 0x34, 0x12, 0xFE, 0xFF, 0x80]))
        params = decode_parameters("Bwsb", cursor)

        self.assertEqual(params, [Parameter(parameter_decoder.UNSIGNED_BYTE, 0xFF),
                                  Parameter(parameter_decoder.UNSIGNED_WORD, 0x1234),
                                  Parameter(parameter_decoder.SIGNED_WORD, -2),
                                  Parameter(parameter_decoder.SIGNED_BYTE, -128)])
        self.assertTrue(cursor.eof())

    def test_dword_codes(self):
        cursor = ByteCursor(bytes([0x01, 0x00, 0x00, 0x00, 0xFF, 0xFF, 0xFF, 0xFF]))
        params = decode_parameters("di", cursor)

        self.assertEqual([param.value for param in params], [1, -1])

    def test_string_code(self):
        cursor = ByteCursor(b"\x07A\xff\x01\x00")
        params = decode_parameters("Bc", cursor)

        self.assertEqual(params[0].value, 7)
        self.assertTrue(params[1].is_string())
        self.assertEqual(params[1].value.segments, [TextSegment("A"), ControlToken(1)])
        self.assertEqual(parameters_byte_length(params), cursor.tell())

    def test_empty_format(self):
        cursor = ByteCursor(b"\x01")

        self.assertEqual(decode_parameters("", cursor), [])
        self.assertEqual(cursor.tell(), 0)

    def test_sizes(self):
        self.assertEqual(parameter_size("B"), 1)
        self.assertEqual(parameter_size("s"), 2)
        self.assertEqual(parameter_size("i"), 4)
        self.assertRaises(ValueError, parameter_size, "c")

    def test_unknown_code(self):
        self.assertRaises(ValueError, decode_parameters, "x", ByteCursor(b"\x00"))

    def test_truncated_word(self):
        self.assertRaises(TruncatedInputException, decode_parameters, "w", ByteCursor(b"\x01"))
