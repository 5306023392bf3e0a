from string_decoder import decode_string

UNSIGNED_BYTE = "unsigned_byte"
SIGNED_BYTE = "signed_byte"
UNSIGNED_WORD = "unsigned_word"
SIGNED_WORD = "signed_word"
UNSIGNED_DWORD = "unsigned_dword"
SIGNED_DWORD = "signed_dword"
STRING = "string"

# format code: (parameter kind, size in bytes)
numeric_format_codes = {
    "B": (UNSIGNED_BYTE, 1),
    "b": (SIGNED_BYTE, 1),
    "w": (UNSIGNED_WORD, 2),
    "s": (SIGNED_WORD, 2),
    "d": (UNSIGNED_DWORD, 4),
    "i": (SIGNED_DWORD, 4),
}

STRING_FORMAT_CODES = "c"

kind_sizes = {kind: size for kind, size in numeric_format_codes.values()}


class Parameter:
    def __init__(self, kind, value):
        self.kind = kind
        self.value = value

    def is_string(self):
        return self.kind == STRING

    def __eq__(self, other):
        return isinstance(other, Parameter) and (self.kind, self.value) == (other.kind, other.value)

    def __repr__(self):
        return f"Parameter({self.kind}, {self.value!r})"


def parameter_size(code):
    if code not in numeric_format_codes:
        raise ValueError(f"Format code {code!r} has no fixed size")
    return numeric_format_codes[code][1]

def read_numeric(cursor, kind):
    if kind == UNSIGNED_BYTE:
        return cursor.read_byte()
    elif kind == SIGNED_BYTE:
        value = cursor.read_byte()
        return value - 0x100 if value & 0x80 else value
    elif kind == UNSIGNED_WORD:
        return cursor.read_uint16_le()
    elif kind == SIGNED_WORD:
        return cursor.read_sint16_le()
    elif kind == UNSIGNED_DWORD:
        return cursor.read_uint32_le()
    elif kind == SIGNED_DWORD:
        return cursor.read_sint32_le()

    raise ValueError(f"Unknown numeric parameter kind {kind!r}")

def decode_parameter(code, cursor):
    if code in STRING_FORMAT_CODES:
        return Parameter(STRING, decode_string(cursor))

    if code not in numeric_format_codes:
        raise ValueError(f"Unknown parameter format code {code!r}")

    kind = numeric_format_codes[code][0]
    return Parameter(kind, read_numeric(cursor, kind))

def decode_parameters(param_format, cursor):
    return [decode_parameter(code, cursor) for code in param_format]

def parameters_byte_length(params):
    length = 0

    for param in params:
        if param.is_string():
            length += param.value.byte_length
        else:
            length += kind_sizes[param.kind]

    return length
