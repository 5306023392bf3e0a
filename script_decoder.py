from binary_functions import ByteCursor
from opcodes_v6 import SCUMM_V6_OPCODES, GROUP_DISPATCH, COND_JUMP_RELATIVE, JUMP_RELATIVE
from parameter_decoder import decode_parameters
from resource_header import read_resource_header
from script_exceptions import ScriptDecodeException
from stack_effects import resolve_stack_effects


class Instruction:
    """One decoded opcode occurrence.

    opcode is the first byte of the instruction. For group opcodes,
    group_opcode is the byte that selected the entry in the sub-table and
    the mnemonic is the sub-table entry's.
    """

    def __init__(self, address, descriptor, opcode, group_opcode = None):
        self.address = address
        self.opcode = opcode
        self.group_opcode = group_opcode
        self.mnemonic = descriptor.mnemonic
        self.category = descriptor.category
        self.stack_change = descriptor.stack_effect
        self.operator = descriptor.operator
        self.signature = descriptor.signature
        self.params = []
        self.length = 0

    @property
    def full_opcode(self):
        if self.group_opcode is None:
            return self.opcode
        return (self.opcode << 8) | self.group_opcode

    @property
    def jump_target(self):
        if self.category not in (COND_JUMP_RELATIVE, JUMP_RELATIVE):
            return None
        return self.address + self.length + self.params[0].value

    def __repr__(self):
        return f"Instruction(0x{self.address:04X}, {self.mnemonic}, stack={self.stack_change!r}, params={self.params!r})"


class DecodedScript:
    def __init__(self, header, instructions):
        self.header = header
        self.instructions = instructions

    @property
    def verb_offsets(self):
        return self.header.verb_offsets


def decode_instruction(cursor, table):
    address = cursor.tell()
    opcode = cursor.read_byte()
    descriptor = table.lookup(opcode, address)

    group_opcode = None
    if descriptor.category == GROUP_DISPATCH:
        group_opcode = cursor.read_byte()
        descriptor = descriptor.sub_table.lookup(group_opcode, address)

    instruction = Instruction(address, descriptor, opcode, group_opcode)
    instruction.params = decode_parameters(descriptor.param_format, cursor)
    instruction.length = cursor.tell() - address

    return instruction

def decode_instructions(cursor, table = SCUMM_V6_OPCODES):
    instructions = []

    try:
        while not cursor.eof():
            instructions.append(decode_instruction(cursor, table))
    except ScriptDecodeException as e:
        e.partial_instructions = instructions
        raise

    return instructions

def disassemble(data, table = SCUMM_V6_OPCODES):
    cursor = ByteCursor(data)
    header = read_resource_header(cursor)

    instructions = decode_instructions(cursor, table)

    try:
        resolve_stack_effects(instructions)
    except ScriptDecodeException as e:
        e.partial_instructions = instructions
        raise

    return DecodedScript(header, instructions)
