from script_exceptions import TruncatedInputException


def signed_decode(value, word_size = 2):
    sign_bit = 1 << (word_size * 8 - 1)
    return (value & (sign_bit - 1)) - (value & sign_bit)

def le_decode(bytes, word_size):
    value = 0

    for i in range(word_size):
        value += bytes[i] << (8 * i)

    return value

def be_decode(bytes, word_size):
    value = 0

    for i in range(word_size):
        value += bytes[word_size - 1 - i] << (8 * i)

    return value


class ByteCursor:
    """Sequential reader over one in-memory script resource."""

    data = b""
    position = 0

    def __init__(self, data):
        self.data = bytes(data)
        self.position = 0

    def tell(self):
        return self.position

    def eof(self):
        return self.position >= len(self.data)

    def remaining(self):
        return max(len(self.data) - self.position, 0)

    def seek(self, offset):
        if offset < 0:
            raise ValueError(f"Cannot seek to negative offset {offset}")
        if offset > len(self.data):
            raise TruncatedInputException(len(self.data), offset - len(self.data), 0)

        self.position = offset

    def skip(self, count):
        self.read_bytes(count)

    def read_bytes(self, count):
        if count > self.remaining():
            raise TruncatedInputException(self.position, count, self.remaining())

        chunk = self.data[self.position:self.position + count]
        self.position += count

        return chunk

    def read_byte(self):
        return self.read_bytes(1)[0]

    def read_uint16_le(self):
        return le_decode(self.read_bytes(2), 2)

    def read_sint16_le(self):
        return signed_decode(self.read_uint16_le(), 2)

    def read_uint32_le(self):
        return le_decode(self.read_bytes(4), 4)

    def read_sint32_le(self):
        return signed_decode(self.read_uint32_le(), 4)

    def read_uint32_be(self):
        return be_decode(self.read_bytes(4), 4)
