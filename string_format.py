"""
Display form of decoded strings, as used in listings and translation files:

    "Hello":newline:"world":setColor=3:

Text runs are double quoted (\\" and \\\\ escape a quote or a backslash; tabs
and line breaks are kept as they are) and string functions are written :name:
or :name=argument:, the argument being an unsigned word.
"""

from pyparsing import (Combine, Group, Literal, OneOrMore, Optional, ParseException, QuotedString,
                       StringEnd, StringStart, Suppress, Word, alphanums, alphas, nums)

from string_decoder import (DecodedString, TextSegment, ControlToken, SOUND_CODE, SOUND_PAYLOAD_SIZE,
                            string_function_code, takes_argument)

ESCAPE_LEAD = 0xFF

# le = lexicon entry
leText = QuotedString('"', esc_char = "\\", multiline = True, convert_whitespace_escapes = False)("text")
leFunctionName = Word(alphas, alphanums + "_?")("function")
leArgument = Combine(Optional(Literal("-")) + Word(nums))("argument")
leFunction = Group(Suppress(Literal(":")) + leFunctionName + Optional(Suppress(Literal("=")) + leArgument) + Suppress(Literal(":")))
leStringParticle = leFunction | Group(leText)
leString = (StringStart() + Optional(OneOrMore(leStringParticle)) + StringEnd()).parse_with_tabs()


def render_text(text):
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'

def render_control(token):
    if token.argument is None:
        return f":{token.name}:"
    return f":{token.name}={token.argument}:"

def render_string(decoded):
    rendered = ""

    for segment in decoded.segments:
        if isinstance(segment, TextSegment):
            rendered += render_text(segment.text)
        else:
            rendered += render_control(segment)

    return rendered

def parse_string(text):
    segments = []

    for particle in leString.parse_string(text, parse_all = True):
        if "function" not in particle:
            segments.append(TextSegment(particle["text"]))
            continue

        try:
            code = string_function_code(particle["function"])
        except ValueError as e:
            raise ParseException(text, 0, str(e))

        argument = int(particle["argument"]) if "argument" in particle else None

        if takes_argument(code) and argument is None:
            raise ParseException(text, 0, f"String function {particle['function']} needs an argument")
        if not takes_argument(code) and argument is not None:
            raise ParseException(text, 0, f"String function {particle['function']} takes no argument")
        if argument is not None and not 0 <= argument <= 0xFFFF:
            raise ParseException(text, 0, f"String function {particle['function']} argument {argument} does not fit in a word")

        segments.append(ControlToken(code, argument = argument))

    decoded = DecodedString(segments)
    decoded.byte_length = len(encode_string(decoded))

    return decoded

def encode_string(decoded):
    encoded = []

    for segment in decoded.segments:
        if isinstance(segment, TextSegment):
            encoded += list(segment.text.encode("latin-1"))
            continue

        encoded += [ESCAPE_LEAD, segment.code]

        if segment.code == SOUND_CODE:
            payload = segment.payload if segment.payload is not None else bytes(SOUND_PAYLOAD_SIZE)
            encoded += list(payload)
        elif takes_argument(segment.code):
            encoded += [segment.argument & 0xFF, (segment.argument & 0xFF00) >> 8]

    encoded.append(0)

    return bytes(encoded)
