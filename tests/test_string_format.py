import unittest

from pyparsing import ParseException

from binary_functions import ByteCursor
from string_decoder import ControlToken, DecodedString, TextSegment, decode_string
from string_format import encode_string, parse_string, render_string


class TestStringFormat(unittest.TestCase):
    def test_render(self):
        decoded = DecodedString([TextSegment("A"), ControlToken(1), TextSegment("B"), ControlToken(12, argument=3)])

        self.assertEqual(render_string(decoded), '"A":newline:"B":setColor=3:')

    def test_render_escapes_quotes(self):
        decoded = DecodedString([TextSegment('say "hi" \\o/')])

        self.assertEqual(render_string(decoded), '"say \\"hi\\" \\\\o/"')
        self.assertEqual(parse_string(render_string(decoded)), decoded)

    def test_parse(self):
        decoded = parse_string('"A":newline:"B"')

        self.assertEqual(decoded.segments, [TextSegment("A"), ControlToken(1), TextSegment("B")])
        self.assertEqual(decoded.byte_length, 5)

    def test_parse_unknown_function(self):
        decoded = parse_string(':unk32=5:"Hi"')

        self.assertEqual(decoded.segments[0], ControlToken(32, argument=5))
        self.assertFalse(decoded.segments[0].known)

    def test_parse_errors(self):
        self.assertRaises(ParseException, parse_string, ':newline=3:')
        self.assertRaises(ParseException, parse_string, ':getInt:')
        self.assertRaises(ParseException, parse_string, ':bogus:')
        self.assertRaises(ParseException, parse_string, '"unterminated')

    def test_parse_argument_range(self):
        self.assertEqual(parse_string(':getInt=65535:').segments, [ControlToken(4, argument=0xFFFF)])
        self.assertRaises(ParseException, parse_string, ':getInt=70000:')
        self.assertRaises(ParseException, parse_string, ':setColor=-1:')
        self.assertRaises(ParseException, parse_string, ':unk32=65536:')

    def test_whitespace_control_characters(self):
        for raw in (b"a\tb\x00", b"a\nb\x00", b"a\rb\x00", b"\t\xff\x01\r\n\x00"):
            decoded = decode_string(ByteCursor(raw))
            parsed = parse_string(render_string(decoded))

            self.assertEqual(parsed, decoded)
            self.assertEqual(encode_string(parsed), raw)

    def test_encode(self):
        self.assertEqual(encode_string(parse_string('"A":newline:"B"')), b"A\xff\x01B\x00")
        self.assertEqual(encode_string(parse_string(':getName=258:')), b"\xff\x06\x02\x01\x00")
        self.assertEqual(encode_string(parse_string(':sound:')), b"\xff\x0a" + bytes(14) + b"\x00")

    def test_translated_line_decodes(self):
        line = parse_string('"Eres un vil":wait:"pirata":getString=7:')
        decoded = decode_string(ByteCursor(encode_string(line)))

        self.assertEqual(decoded, line)
        self.assertEqual(decoded.byte_length, line.byte_length)
