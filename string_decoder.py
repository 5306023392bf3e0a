"""
Decoding of inline SCUMM strings.

Strings are zero terminated. 0xFF (0xFE in some games) starts an escape: the
next byte picks a string function, most of which carry a 16-bit argument.
"""

ESCAPE_BYTES = (0xFF, 0xFE)

# String function codes without arguments
string_functions_plain = {
    1: "newline",
    2: "keepText",
    3: "wait",
}

# String function codes followed by a little-endian word
string_functions_with_argument = {
    4: "getInt",
    5: "getVerb",
    6: "getName",
    7: "getString",
    9: "startAnim",
    12: "setColor",
    13: "unk13",
    14: "setFont",
}

SOUND_CODE = 10
SOUND_PAYLOAD_SIZE = 14

# Total bytes taken by each kind of escape, lead byte included
PLAIN_ESCAPE_COST = 2
ARGUMENT_ESCAPE_COST = 4
SOUND_ESCAPE_COST = 2 + SOUND_PAYLOAD_SIZE


def string_function_name(code):
    if code in string_functions_plain:
        return string_functions_plain[code]
    if code in string_functions_with_argument:
        return string_functions_with_argument[code]
    if code == SOUND_CODE:
        return "sound"
    return f"unk{code}"

def string_function_code(name):
    for table in (string_functions_plain, string_functions_with_argument):
        for code, function_name in table.items():
            if function_name == name:
                return code

    if name == "sound":
        return SOUND_CODE
    if name.startswith("unk") and name[3:].isdigit():
        return int(name[3:])

    raise ValueError(f"Unknown string function {name!r}")

def takes_argument(code):
    return code not in string_functions_plain and code != SOUND_CODE


class TextSegment:
    def __init__(self, text = ""):
        self.text = text

    def __eq__(self, other):
        return isinstance(other, TextSegment) and self.text == other.text

    def __repr__(self):
        return f"TextSegment({self.text!r})"


class ControlToken:
    def __init__(self, code, argument = None, payload = None):
        self.code = code
        self.name = string_function_name(code)
        self.argument = argument
        self.payload = payload

    @property
    def known(self):
        return (self.code in string_functions_plain or self.code in string_functions_with_argument or
                self.code == SOUND_CODE)

    def byte_cost(self):
        if self.code == SOUND_CODE:
            return SOUND_ESCAPE_COST
        if takes_argument(self.code):
            return ARGUMENT_ESCAPE_COST
        return PLAIN_ESCAPE_COST

    def __eq__(self, other):
        return (isinstance(other, ControlToken) and self.code == other.code and
                self.argument == other.argument and self.payload == other.payload)

    def __repr__(self):
        if self.argument is None:
            return f"ControlToken({self.name})"
        return f"ControlToken({self.name}={self.argument})"


class DecodedString:
    def __init__(self, segments = None, byte_length = 0):
        self.segments = segments if segments is not None else []
        self.byte_length = byte_length

    def text(self):
        return "".join(segment.text for segment in self.segments if isinstance(segment, TextSegment))

    def controls(self):
        return [segment for segment in self.segments if isinstance(segment, ControlToken)]

    def __eq__(self, other):
        return isinstance(other, DecodedString) and self.segments == other.segments

    def __repr__(self):
        return f"DecodedString({self.segments!r})"


def decode_string(cursor):
    segments = []
    current_text = None
    byte_length = 0

    while True:
        value = cursor.read_byte()

        if value == 0:
            byte_length += 1
            break

        if value not in ESCAPE_BYTES:
            if current_text is None:
                current_text = []
            current_text.append(value)
            byte_length += 1
            continue

        if current_text is not None:
            segments.append(TextSegment(bytes(current_text).decode("latin-1")))
            current_text = None

        code = cursor.read_byte()

        if code == SOUND_CODE:
            token = ControlToken(code, payload = cursor.read_bytes(SOUND_PAYLOAD_SIZE))
        elif takes_argument(code):
            # unrecognised codes are assumed to carry one word, like the documented ones
            token = ControlToken(code, argument = cursor.read_uint16_le())
        else:
            token = ControlToken(code)

        segments.append(token)
        byte_length += token.byte_cost()

    if current_text is not None:
        segments.append(TextSegment(bytes(current_text).decode("latin-1")))

    return DecodedString(segments, byte_length)
