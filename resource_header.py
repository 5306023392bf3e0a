from script_exceptions import UnrecognizedResourceTagException

GLOBAL_SCRIPT = "SCRP"
LOCAL_SCRIPT = "LSCR"
ENTRY_SCRIPT = "ENCD"
EXIT_SCRIPT = "EXCD"
VERB_SCRIPT = "VERB"

# tag: offset of the first byte past the fixed part of the header
resource_kinds = {
    GLOBAL_SCRIPT: 8,
    LOCAL_SCRIPT: 9,
    ENTRY_SCRIPT: 8,
    EXIT_SCRIPT: 8,
    VERB_SCRIPT: 8,
}

script_types = {
    GLOBAL_SCRIPT: "global",
    LOCAL_SCRIPT: "local",
    ENTRY_SCRIPT: "enter",
    EXIT_SCRIPT: "exit",
    VERB_SCRIPT: "object",
}


class ResourceHeader:
    kind = ""
    block_size = 0
    script_number = None
    code_offset = 0
    verb_offsets = []

    def __init__(self, kind, block_size, code_offset, script_number = None, verb_offsets = None):
        self.kind = kind
        self.block_size = block_size
        self.code_offset = code_offset
        self.script_number = script_number
        self.verb_offsets = verb_offsets if verb_offsets is not None else []

    @property
    def script_type(self):
        return script_types[self.kind]

    def __repr__(self):
        return f"ResourceHeader({self.kind}, size={self.block_size}, code_offset={self.code_offset})"


def read_verb_offsets(cursor):
    verb_offsets = []

    verb = cursor.read_byte()
    while verb != 0:
        verb_offsets.append((verb, cursor.read_uint16_le()))
        verb = cursor.read_byte()

    return verb_offsets

def read_resource_header(cursor):
    """Positions the cursor on the first opcode of a script resource."""
    cursor.seek(0)
    tag = cursor.read_bytes(4).decode("latin-1")

    if tag not in resource_kinds:
        raise UnrecognizedResourceTagException(tag)

    block_size = cursor.read_uint32_be()

    script_number = None
    verb_offsets = []

    if tag == LOCAL_SCRIPT:
        script_number = cursor.read_byte()

    cursor.seek(resource_kinds[tag])

    if tag == VERB_SCRIPT:
        verb_offsets = read_verb_offsets(cursor)

    return ResourceHeader(tag, block_size, cursor.tell(), script_number, verb_offsets)
